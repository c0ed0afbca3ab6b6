"""Status Engine - Pure logic for evaluating check-ins against periods.

Given one period and the check-ins recorded for an entity, decides whether
the period's obligation was met on time, late, or not at all, and collects
the remark codes attached to the check-ins inside the period.

Remarks are always reported in ascending timestamp order. Callers that
already hold check-ins sorted ascending can skip the sort by passing
check_ins_presorted=True; the given order is then trusted as-is.

ARCHITECTURE: This is a pure logic engine. All methods are static and only
read their inputs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .. import const
from ..schemas import normalize_check_ins

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from ..type_defs import CheckIn, ExecutedStatus, RemarkCode
    from .periodicity_engine import Period


@dataclass(frozen=True)
class PeriodStatus:
    """Evaluation result for one period.

    Attributes:
        executed: EXECUTED_ON_TIME, EXECUTED_LATE or EXECUTED_MISSED
        remarks: Remark codes of the check-ins inside the period, ascending
            by timestamp
    """

    executed: ExecutedStatus
    remarks: list[RemarkCode] = field(default_factory=list)


class StatusEngine:
    """Pure logic engine for period status evaluation."""

    @staticmethod
    def sort_check_ins(check_ins: Iterable[CheckIn]) -> list[CheckIn]:
        """Return check-ins ascending by timestamp (stable for equal times)."""
        return sorted(check_ins, key=lambda c: c[const.DATA_CHECK_IN_TIMESTAMP])

    @staticmethod
    def filter_check_ins(period: Period, check_ins: Iterable[CheckIn]) -> list[CheckIn]:
        """Return the check-ins inside the period's half-open interval.

        Relative order of the input is preserved.
        """
        return [
            check_in
            for check_in in check_ins
            if period.interval.contains(check_in[const.DATA_CHECK_IN_TIMESTAMP])
        ]

    @staticmethod
    def get_period_status(
        period: Period,
        check_ins: Iterable[Mapping[str, Any]],
        check_ins_presorted: bool = False,
    ) -> PeriodStatus:
        """Evaluate check-ins against a single period.

        Args:
            period: The period to evaluate
            check_ins: Check-in dicts with "timestamp" and optional "result"
            check_ins_presorted: True if the caller guarantees ascending
                timestamps; the input order is then used for remarks

        Returns:
            PeriodStatus. on_time if any check-in inside the period is at or
            before the period's occurrence, late if all are after it, missed
            if there are none.

        Raises:
            PeriodicityConfigError: If a check-in timestamp is invalid.
        """
        normalized = normalize_check_ins(check_ins)
        if not check_ins_presorted:
            normalized = StatusEngine.sort_check_ins(normalized)
        return StatusEngine._evaluate_sorted(period, normalized)

    @staticmethod
    def get_period_statuses(
        periods: Sequence[Period],
        check_ins: Iterable[Mapping[str, Any]],
        check_ins_presorted: bool = False,
    ) -> list[PeriodStatus]:
        """Evaluate the same check-ins against every period of a window.

        Check-ins are validated and sorted once for all periods.

        Returns:
            One PeriodStatus per period, in the order of periods.
        """
        normalized = normalize_check_ins(check_ins)
        if not check_ins_presorted:
            normalized = StatusEngine.sort_check_ins(normalized)
        return [StatusEngine._evaluate_sorted(period, normalized) for period in periods]

    @staticmethod
    def _evaluate_sorted(period: Period, check_ins: list[CheckIn]) -> PeriodStatus:
        inside = StatusEngine.filter_check_ins(period, check_ins)
        if not inside:
            const.LOGGER.debug(
                "StatusEngine: No check-ins between %s and %s",
                period.interval.start.isoformat(),
                period.interval.end.isoformat(),
            )
            return PeriodStatus(executed=const.EXECUTED_MISSED)

        on_time = any(
            c[const.DATA_CHECK_IN_TIMESTAMP] <= period.occurrence for c in inside
        )
        remarks = [
            result
            for c in inside
            if (result := c.get(const.DATA_CHECK_IN_RESULT))
        ]
        executed = const.EXECUTED_ON_TIME if on_time else const.EXECUTED_LATE
        const.LOGGER.debug(
            "StatusEngine: %d check-in(s) for occurrence %s -> %s",
            len(inside),
            period.occurrence.isoformat(),
            executed,
        )
        return PeriodStatus(executed=executed, remarks=remarks)


def get_period_status(
    period: Period,
    check_ins: Iterable[Mapping[str, Any]],
    check_ins_presorted: bool = False,
) -> PeriodStatus:
    """Evaluate check-ins against a period (see StatusEngine.get_period_status)."""
    return StatusEngine.get_period_status(period, check_ins, check_ins_presorted)
