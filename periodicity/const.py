# File: const.py
"""Constants for the periodicity library.

This file centralizes rule keys, periodicity types, status values, remark
codes and calculation defaults so engines, schemas and tests share one
vocabulary.
"""

import logging

# Logger
LOGGER = logging.getLogger(__package__)

# ------------------------------------------------------------------------------------------------
# Periodicity Rule Keys
# ------------------------------------------------------------------------------------------------
DATA_PERIODICITY_TYPE = "type"
DATA_PERIODICITY_OCCURRENCES = "occurrences"
DATA_OCCURRENCE_MONTH = "month"
DATA_OCCURRENCE_DATE = "date"

# ------------------------------------------------------------------------------------------------
# Periodicity Types
# ------------------------------------------------------------------------------------------------
PERIODICITY_TYPE_YEARLY = "yearly"
PERIODICITY_TYPE_MONTHLY = "monthly"

PERIODICITY_TYPES = [
    PERIODICITY_TYPE_YEARLY,
    PERIODICITY_TYPE_MONTHLY,
]

# ------------------------------------------------------------------------------------------------
# Check-in Keys
# ------------------------------------------------------------------------------------------------
DATA_CHECK_IN_TIMESTAMP = "timestamp"
DATA_CHECK_IN_RESULT = "result"

# ------------------------------------------------------------------------------------------------
# Period Status (executed)
# ------------------------------------------------------------------------------------------------
EXECUTED_ON_TIME = "on_time"
EXECUTED_LATE = "late"
EXECUTED_MISSED = "missed"

# ------------------------------------------------------------------------------------------------
# Remark Codes (vocabulary owned by the check-in model; not validated here)
# ------------------------------------------------------------------------------------------------
REMARK_WORKORDER = "workorder"
REMARK_POLICE_REPORT = "police_report"
REMARK_ERROR_REPORT = "error_report"

# ------------------------------------------------------------------------------------------------
# Calendar Limits
# ------------------------------------------------------------------------------------------------
MONTH_MIN = 1
MONTH_MAX = 12
DAY_OF_MONTH_MIN = 1
DAY_OF_MONTH_MAX = 31

# ------------------------------------------------------------------------------------------------
# Calculation Defaults
# ------------------------------------------------------------------------------------------------
DEFAULT_PREVIOUS_COUNT = 1
DEFAULT_NEXT_COUNT = 0

# Extra recurrence cycles generated around the requested window
CYCLE_MARGIN_BEFORE = 2
CYCLE_MARGIN_AFTER = 3

# ------------------------------------------------------------------------------------------------
# Display
# ------------------------------------------------------------------------------------------------
DISPLAY_START_INVALID = "Start invalid"
DISPLAY_END_INVALID = "End invalid"
DISPLAY_OCCURRENCE_INVALID = "Invalid occurrence"
