# File: utils/dt_utils.py
"""Date and time utilities for the periodicity engines.

Pure Python date/time functions built on datetime, zoneinfo and dateutil.

Functions:
    - set_default_timezone / get_default_timezone: Configure the zone used
      for "now" and for naive input
    - dt_now_local: Current instant (caller-side default)
    - start_of_day / end_of_day: Day boundary normalization in the value's zone
    - dt_recurrence: Anchor day N yearly/monthly cycles away, with clamping
    - dt_add_interval: Calendar-aware add/subtract of days/months/years
    - dt_parse: Normalize str/date/datetime input to an aware datetime
    - dt_format_date: Calendar-day output formatting
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
import logging
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from dateutil.relativedelta import relativedelta

if TYPE_CHECKING:
    from datetime import tzinfo

_LOGGER = logging.getLogger(__name__)

# ==============================================================================
# Constants
# ==============================================================================

# Default timezone - can be overridden by caller
DEFAULT_TIME_ZONE: ZoneInfo = ZoneInfo("UTC")

# Time unit constants
TIME_UNIT_DAYS = "days"
TIME_UNIT_MONTHS = "months"
TIME_UNIT_YEARS = "years"

# Day boundary formats
DATE_FORMAT = "%Y-%m-%d"


# ==============================================================================
# Timezone Configuration
# ==============================================================================


def set_default_timezone(tz: ZoneInfo) -> None:
    """Set the default timezone for all dt_utils functions.

    Args:
        tz: ZoneInfo object representing the default timezone
    """
    global DEFAULT_TIME_ZONE  # noqa: PLW0603
    DEFAULT_TIME_ZONE = tz


def get_default_timezone() -> ZoneInfo:
    """Get the current default timezone.

    Returns:
        The configured default timezone (ZoneInfo object)
    """
    return DEFAULT_TIME_ZONE


# ==============================================================================
# Current Date/Time Functions
# ==============================================================================


def dt_now_local(tz: ZoneInfo | None = None) -> datetime:
    """Return the current datetime in local timezone (timezone-aware).

    Args:
        tz: Optional timezone override. Uses DEFAULT_TIME_ZONE if not provided.

    Returns:
        Current datetime in the specified timezone.
    """
    tz_info = tz or DEFAULT_TIME_ZONE
    return datetime.now(tz_info)


# ==============================================================================
# Day Boundaries
# ==============================================================================


def start_of_day(dt_obj: datetime) -> datetime:
    """Get the start of day (00:00:00.000000) in the datetime's own zone.

    Args:
        dt_obj: Datetime object (aware or naive; the zone is preserved)

    Returns:
        Datetime at 00:00:00 on the same calendar day
    """
    return dt_obj.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(dt_obj: datetime) -> datetime:
    """Get the last representable instant of the datetime's calendar day.

    Args:
        dt_obj: Datetime object (aware or naive; the zone is preserved)

    Returns:
        Datetime at 23:59:59.999999 on the same calendar day
    """
    return dt_obj.replace(hour=23, minute=59, second=59, microsecond=999999)


# ==============================================================================
# Recurrence Arithmetic
# ==============================================================================


def dt_recurrence(
    reference: datetime,
    interval_unit: str,
    offset: int,
    day: int,
    month: int | None = None,
) -> datetime:
    """Return the start of an anchor day `offset` cycles away from reference.

    The anchor is built from the reference's calendar (its year, and for
    monthly cycles its month), moved by whole cycles, and pinned to `day`
    (plus `month` for yearly cycles). Days past the end of the target month
    clamp to its last day (31 in June -> June 30, Feb 29 -> Feb 28).

    Args:
        reference: Reference datetime; its zone is preserved
        interval_unit: TIME_UNIT_YEARS or TIME_UNIT_MONTHS
        offset: Number of whole cycles (negative for the past)
        day: Day of month (1-31)
        month: Month (1-12), required for yearly cycles

    Returns:
        Start of the anchor day in the reference's zone.

    Raises:
        ValueError: If interval_unit is not a cycle unit.

    Example:
        dt_recurrence(2022-07-01, "years", -1, 15, 6) -> 2021-06-15T00:00
        dt_recurrence(2022-01-10, "months", 1, 31) -> 2022-02-28T00:00
    """
    base = start_of_day(reference)
    if interval_unit == TIME_UNIT_YEARS:
        return base + relativedelta(years=offset, month=month, day=day)
    if interval_unit == TIME_UNIT_MONTHS:
        return base + relativedelta(months=offset, day=day)
    raise ValueError(f"Unsupported recurrence unit: {interval_unit}")


def dt_add_interval(base_dt: datetime, interval_unit: str, delta: int) -> datetime:
    """Add or subtract a calendar-aware interval.

    Arithmetic is wall-clock within the datetime's zone: subtracting 15 days
    from a midnight stays at midnight across DST changes.

    Args:
        base_dt: Base datetime
        interval_unit: One of the TIME_UNIT_* constants
        delta: Number of units to add (negative to subtract)

    Returns:
        New datetime.

    Raises:
        ValueError: If interval_unit is unknown.
    """
    if interval_unit == TIME_UNIT_DAYS:
        return base_dt + timedelta(days=delta)
    if interval_unit == TIME_UNIT_MONTHS:
        return base_dt + relativedelta(months=delta)
    if interval_unit == TIME_UNIT_YEARS:
        return base_dt + relativedelta(years=delta)
    raise ValueError(f"Unknown interval_unit: {interval_unit}")


# ==============================================================================
# Date/Time Parsing
# ==============================================================================


def dt_parse(
    dt_input: str | date | datetime | None,
    default_tzinfo: tzinfo | None = None,
) -> datetime | None:
    """Normalize ISO string, date or datetime input to an aware datetime.

    Args:
        dt_input: ISO string, date or datetime to normalize, or None
        default_tzinfo: Timezone to use if the input is naive
                        (defaults to DEFAULT_TIME_ZONE if None)

    Returns:
        Timezone-aware datetime, or None if the input could not be parsed.
        Dates and date-only strings become midnight.

    Example:
        >>> dt_parse("2022-06-15T00:00:00.000Z")
        datetime.datetime(2022, 6, 15, 0, 0, tzinfo=datetime.timezone.utc)
    """
    if not dt_input:
        return None

    if isinstance(dt_input, str):
        try:
            result = datetime.fromisoformat(dt_input)
        except ValueError:
            _LOGGER.debug("dt_parse: Could not parse %r", dt_input)
            return None
    elif isinstance(dt_input, datetime):
        result = dt_input
    elif isinstance(dt_input, date):
        result = datetime.combine(dt_input, datetime.min.time())
    else:
        return None

    if result.tzinfo is None:
        result = result.replace(tzinfo=default_tzinfo or DEFAULT_TIME_ZONE)
    return result


# ==============================================================================
# Date/Time Formatting
# ==============================================================================


def dt_format_date(dt_obj: datetime | None, fallback: str = "Unknown") -> str:
    """Format a datetime as a calendar day ("2022-06-15").

    Args:
        dt_obj: Datetime to format, or None
        fallback: Text returned when dt_obj is None

    Returns:
        The day in DATE_FORMAT, or the fallback text.
    """
    if dt_obj is None:
        return fallback
    return dt_obj.strftime(DATE_FORMAT)
