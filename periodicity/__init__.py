"""Periodicity: recurring inspection periods and check-in status evaluation.

Generate a contiguous timeline of periods from a yearly or monthly
periodicity rule, then classify check-ins against each period as on time,
late or missed.

Usage:
    from periodicity import get_periodicity_periods, get_period_status

    window = get_periodicity_periods(
        {"type": "yearly", "occurrences": [{"month": 6, "date": 15}]},
        duration=15,
        previous_count=1,
        next_count=2,
        now=now,
    )
    status = get_period_status(window.active_period, check_ins)
"""

from .engines import (
    Period,
    PeriodicityEngine,
    PeriodicityWindow,
    PeriodInterval,
    PeriodStatus,
    StatusEngine,
    format_period,
    get_period_status,
    get_periodicity_periods,
)
from .exceptions import (
    PeriodicityComputationError,
    PeriodicityConfigError,
    PeriodicityError,
    UnsupportedPeriodicityTypeError,
)
from .schemas import normalize_check_ins, validate_periodicity_rule

__all__ = [
    "Period",
    "PeriodInterval",
    "PeriodStatus",
    "PeriodicityComputationError",
    "PeriodicityConfigError",
    "PeriodicityEngine",
    "PeriodicityError",
    "PeriodicityWindow",
    "StatusEngine",
    "UnsupportedPeriodicityTypeError",
    "format_period",
    "get_period_status",
    "get_periodicity_periods",
    "normalize_check_ins",
    "validate_periodicity_rule",
]
