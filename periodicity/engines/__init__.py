"""Engine modules for the periodicity library.

Contains specialized computation engines:
- periodicity_engine: Period timeline generation and stitching
- status_engine: Check-in evaluation (on time / late / missed)
"""

from .periodicity_engine import (
    Period,
    PeriodicityEngine,
    PeriodicityWindow,
    PeriodInterval,
    format_period,
    get_periodicity_periods,
)
from .status_engine import PeriodStatus, StatusEngine, get_period_status

__all__ = [
    "Period",
    "PeriodInterval",
    "PeriodStatus",
    "PeriodicityEngine",
    "PeriodicityWindow",
    "StatusEngine",
    "format_period",
    "get_period_status",
    "get_periodicity_periods",
]
