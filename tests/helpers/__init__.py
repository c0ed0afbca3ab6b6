"""Test helpers for building datetimes and periods."""

from datetime import UTC, datetime

from periodicity.engines.periodicity_engine import Period, PeriodInterval


def utc_dt(iso: str) -> datetime:
    """Parse an ISO string ('2022-06-15' or full datetime) as a UTC datetime."""
    parsed = datetime.fromisoformat(iso)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def make_period(start: str, end: str, occurrence: str) -> Period:
    """Build a period from ISO strings (UTC)."""
    return Period(
        interval=PeriodInterval(start=utc_dt(start), end=utc_dt(end)),
        occurrence=utc_dt(occurrence),
    )


def interval_days(period: Period) -> tuple[str, str]:
    """Return (start, end) of a period as ISO calendar days."""
    return (
        period.interval.start.date().isoformat(),
        period.interval.end.date().isoformat(),
    )
