"""Type definitions for caller-supplied periodicity data.

Rules and check-ins arrive as plain dicts shaped like the API payloads that
carry them, so they are described with TypedDict. Computed results
(periods, windows, statuses) are dataclasses owned by the engines.

NOTE: TypedDict is STATIC ANALYSIS ONLY. Runtime validation of rules and
check-ins happens in schemas.py.
"""

from datetime import datetime
from typing import Literal, NotRequired, TypedDict

# =============================================================================
# Type Aliases (for readability)
# =============================================================================

PeriodicityType = Literal["yearly", "monthly"]
ExecutedStatus = Literal["on_time", "late", "missed"]
RemarkCode = str  # e.g. "workorder", "police_report", "error_report"


# =============================================================================
# Periodicity Rules
# =============================================================================


class YearlyOccurrence(TypedDict):
    """A fixed month + day-of-month anchor, repeated every year."""

    month: int  # 1..12
    date: int  # Day of month, 1..31 (clamped to month length)


class MonthlyOccurrence(TypedDict):
    """A fixed day-of-month anchor, repeated every month."""

    date: int  # Day of month, 1..31 (clamped to month length)


class PeriodicityRule(TypedDict):
    """Declarative recurrence rule.

    Multiple occurrences are independent anchors merged into one timeline
    (e.g. twice-yearly inspections).
    """

    type: PeriodicityType
    occurrences: list[YearlyOccurrence] | list[MonthlyOccurrence]


# =============================================================================
# Check-ins
# =============================================================================


class CheckIn(TypedDict):
    """A timestamped event evidencing that a period's obligation was met."""

    timestamp: datetime
    result: NotRequired[RemarkCode | None]
