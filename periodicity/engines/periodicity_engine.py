"""Periodicity Engine - Pure logic for generating recurring inspection periods.

Turns a yearly/monthly periodicity rule into a contiguous timeline of
half-open periods, each ending where the next begins and each targeting one
recurrence deadline:

- Recurrence instants are generated for a superset of cycles around "now"
- Each instant gets a nominal period [instant - duration, instant)
- Neighbouring periods are stitched so the timeline has no gaps or overlaps
- The window of periods around the one containing "now" is returned

ARCHITECTURE: This is a pure logic engine. It keeps no state between calls
and never reads the clock unless the caller goes through
get_periodicity_periods() without a reference instant.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any, ClassVar

from .. import const
from ..exceptions import PeriodicityComputationError, PeriodicityConfigError
from ..schemas import validate_periodicity_rule
from ..utils.dt_utils import (
    TIME_UNIT_DAYS,
    TIME_UNIT_MONTHS,
    TIME_UNIT_YEARS,
    dt_add_interval,
    dt_format_date,
    dt_now_local,
    dt_parse,
    dt_recurrence,
    end_of_day,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..type_defs import PeriodicityRule


# =============================================================================
# PERIOD DATA STRUCTURES
# =============================================================================


@dataclass(frozen=True)
class PeriodInterval:
    """Half-open date-time range [start, end)."""

    start: datetime
    end: datetime

    @property
    def is_valid(self) -> bool:
        """Whether the bounds are chronological (start <= end)."""
        return self.start <= self.end

    @property
    def length(self) -> timedelta:
        """Duration between start and end."""
        return self.end - self.start

    def contains(self, instant: datetime) -> bool:
        """Return True if start <= instant < end."""
        return self.start <= instant < self.end


@dataclass(frozen=True)
class Period:
    """One entry of a generated timeline.

    Attributes:
        interval: The period's half-open range
        occurrence: The deadline this period targets (end of the anchor day)
    """

    interval: PeriodInterval
    occurrence: datetime


@dataclass(frozen=True)
class PeriodicityWindow:
    """Generator output: chronological periods around the reference instant.

    Attributes:
        periods: Periods in ascending order
        active_period_index: Index of the period containing the reference
            instant (always the requested previous_count)
    """

    periods: list[Period]
    active_period_index: int

    @property
    def active_period(self) -> Period:
        """The period containing the reference instant."""
        return self.periods[self.active_period_index]


# =============================================================================
# PERIODICITY ENGINE
# =============================================================================


class PeriodicityEngine:
    """Generate period timelines for one periodicity rule and duration.

    The rule is validated once at construction; get_periods() can then be
    called for any reference instant and window size.
    """

    # Length of one recurrence cycle per periodicity type
    CYCLE_UNITS: ClassVar[dict[str, str]] = {
        const.PERIODICITY_TYPE_YEARLY: TIME_UNIT_YEARS,
        const.PERIODICITY_TYPE_MONTHLY: TIME_UNIT_MONTHS,
    }

    def __init__(self, rule: Mapping[str, Any], duration_days: int) -> None:
        """Initialize the engine.

        Args:
            rule: Periodicity rule dict (validated here)
            duration_days: Days to look back from each deadline to form the
                nominal start of its period

        Raises:
            PeriodicityConfigError: If the rule or duration is invalid.
        """
        self._rule: PeriodicityRule = validate_periodicity_rule(rule)
        if not _is_non_negative_int(duration_days):
            raise PeriodicityConfigError(
                "Duration must be a non-negative number of days",
                field="duration_days",
                value=duration_days,
            )
        self._duration_days = duration_days
        self._periodicity_type: str = self._rule[const.DATA_PERIODICITY_TYPE]
        self._cycle_unit = self.CYCLE_UNITS[self._periodicity_type]

    @property
    def rule(self) -> PeriodicityRule:
        """The validated rule."""
        return self._rule

    @property
    def duration_days(self) -> int:
        """Look-back duration in days."""
        return self._duration_days

    def get_periods(
        self, previous_count: int, next_count: int, now: datetime
    ) -> PeriodicityWindow:
        """Build the window of periods around the reference instant.

        Args:
            previous_count: Whole periods to return before the active one
            next_count: Whole periods to return after the active one
            now: Reference instant. Naive values are placed in the default
                timezone; periods are produced in its zone.

        Returns:
            PeriodicityWindow with previous_count + 1 + next_count periods and
            active_period_index == previous_count.

        Raises:
            PeriodicityConfigError: If a count is negative or now is not a datetime.
            PeriodicityComputationError: If the timeline cannot be built.
        """
        for field, count in (
            ("previous_count", previous_count),
            ("next_count", next_count),
        ):
            if not _is_non_negative_int(count):
                raise PeriodicityConfigError(
                    "Period count must be a non-negative integer",
                    field=field,
                    value=count,
                )
        reference = dt_parse(now) if isinstance(now, datetime) else None
        if not isinstance(reference, datetime):
            raise PeriodicityConfigError(
                "Reference instant must be a datetime", field="now", value=now
            )

        recurrences = self._get_recurrences(reference, previous_count, next_count)
        extended_periods = self._stitch_periods(recurrences)

        # Last period whose start is at or before the reference instant
        starts = [p.interval.start for p in extended_periods]
        now_index = bisect_right(starts, reference) - 1

        first = now_index - previous_count
        last = now_index + next_count
        if now_index < 0 or first < 0 or last >= len(extended_periods):
            const.LOGGER.error(
                "PeriodicityEngine: Window %d..%d outside %d generated periods",
                first,
                last,
                len(extended_periods),
            )
            raise PeriodicityComputationError(
                "Requested window is outside the generated periods",
                start=extended_periods[0].interval.start,
                end=extended_periods[-1].interval.end,
            )

        periods = extended_periods[first : last + 1]
        const.LOGGER.debug(
            "PeriodicityEngine: %s rule, %d day(s), now=%s, %d period(s), active %s",
            self._periodicity_type,
            self._duration_days,
            reference.isoformat(),
            len(periods),
            format_period(periods[previous_count]),
        )
        return PeriodicityWindow(periods=periods, active_period_index=previous_count)

    # =========================================================================
    # Private: recurrence generation
    # =========================================================================

    def _get_recurrences(
        self, reference: datetime, previous_count: int, next_count: int
    ) -> list[datetime]:
        """Generate recurrence instants (start of day) in chronological order.

        Covers previous_count + CYCLE_MARGIN_BEFORE cycles back and
        next_count + CYCLE_MARGIN_AFTER cycles forward, which is always
        enough whatever the number of occurrences per cycle.
        """
        occurrences = self._rule[const.DATA_PERIODICITY_OCCURRENCES]
        offsets = range(
            -(previous_count + const.CYCLE_MARGIN_BEFORE),
            next_count + const.CYCLE_MARGIN_AFTER + 1,
        )
        # Clamped days can reorder occurrences from one cycle to the next
        return sorted(
            self._recurrence(reference, offset, occ)
            for offset in offsets
            for occ in occurrences
        )

    def _recurrence(
        self, reference: datetime, offset: int, occurrence: Mapping[str, int]
    ) -> datetime:
        """Anchor day of one occurrence, offset whole cycles from reference."""
        month = None
        if self._periodicity_type == const.PERIODICITY_TYPE_YEARLY:
            month = occurrence[const.DATA_OCCURRENCE_MONTH]
        return dt_recurrence(
            reference,
            self._cycle_unit,
            offset,
            day=occurrence[const.DATA_OCCURRENCE_DATE],
            month=month,
        )

    # =========================================================================
    # Private: stitching
    # =========================================================================

    def _stitch_periods(self, recurrences: list[datetime]) -> list[Period]:
        """Turn recurrence instants into contiguous, non-overlapping periods.

        Each period's start is its nominal start (instant - duration) unless
        that reaches back before the previous instant, in which case it is
        clipped to the previous instant. The previous period then ends where
        this one starts, closing any gap. Only the first period keeps its
        full nominal length when the duration exceeds one cycle.
        """
        nominal_starts = [
            dt_add_interval(instant, TIME_UNIT_DAYS, -self._duration_days)
            for instant in recurrences
        ]
        starts = [nominal_starts[0]]
        starts.extend(
            max(previous, nominal)
            for previous, nominal in zip(recurrences, nominal_starts[1:])
        )
        ends = starts[1:] + [recurrences[-1]]

        periods: list[Period] = []
        for start, end, instant in zip(starts, ends, recurrences, strict=True):
            interval = PeriodInterval(start=start, end=end)
            if not interval.is_valid:
                const.LOGGER.error(
                    "PeriodicityEngine: Invalid interval for occurrence %s",
                    instant.isoformat(),
                )
                raise PeriodicityComputationError(
                    "Invalid interval created", start=start, end=end
                )
            periods.append(Period(interval=interval, occurrence=end_of_day(instant)))

        return periods


# =============================================================================
# MODULE-LEVEL HELPERS
# =============================================================================


def _is_non_negative_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def get_periodicity_periods(
    rule: Mapping[str, Any],
    duration: int,
    previous_count: int = const.DEFAULT_PREVIOUS_COUNT,
    next_count: int = const.DEFAULT_NEXT_COUNT,
    now: datetime | None = None,
) -> PeriodicityWindow:
    """Generate the window of periods for a rule around a reference instant.

    Args:
        rule: Periodicity rule dict
        duration: Look-back duration in days
        previous_count: Periods before the one containing now (0 = none)
        next_count: Periods after the one containing now (0 = none)
        now: Reference instant. Defaults to the current time in the default
            timezone.

    Returns:
        PeriodicityWindow around now.
    """
    reference = now if now is not None else dt_now_local()
    engine = PeriodicityEngine(rule, duration)
    return engine.get_periods(previous_count, next_count, reference)


def format_period(period: Period) -> str:
    """Render a period as 'start / end :: occurrence' calendar days.

    Example:
        "2022-05-31 / 2023-05-31 :: 2022-06-15"
    """
    interval = period.interval
    valid = interval.is_valid
    start = (
        dt_format_date(interval.start) if valid else const.DISPLAY_START_INVALID
    )
    end = dt_format_date(interval.end) if valid else const.DISPLAY_END_INVALID
    occurrence = dt_format_date(
        period.occurrence, fallback=const.DISPLAY_OCCURRENCE_INVALID
    )
    return f"{start} / {end} :: {occurrence}"
