"""Exceptions raised by the periodicity engines.

Configuration errors describe input that can never produce a timeline
(unsupported type, empty occurrences, out-of-range fields). Computation
errors describe a timeline that came out malformed. Neither is retried.
"""

from __future__ import annotations

from datetime import datetime


class PeriodicityError(Exception):
    """Base class for all periodicity errors."""


class PeriodicityConfigError(PeriodicityError):
    """Raised when a periodicity rule or calculation input is invalid.

    Attributes:
        field: Name/path of the offending input, when known
        value: The offending value, when known
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: object = None,
    ) -> None:
        """Initialize PeriodicityConfigError.

        Args:
            message: Human readable description of the problem
            field: Name/path of the offending input
            value: The offending value
        """
        self.field = field
        self.value = value
        if field is not None:
            message = f"{message} (field={field}, value={value!r})"
        super().__init__(message)


class UnsupportedPeriodicityTypeError(PeriodicityConfigError):
    """Raised when a rule declares a type other than yearly or monthly."""

    def __init__(self, periodicity_type: object) -> None:
        """Initialize UnsupportedPeriodicityTypeError.

        Args:
            periodicity_type: The rejected rule type
        """
        self.periodicity_type = periodicity_type
        super().__init__(f"Unsupported periodicity type '{periodicity_type}'.")


class PeriodicityComputationError(PeriodicityError):
    """Raised when a generated period violates the timeline invariants.

    Attributes:
        start: Start boundary of the offending interval (if any)
        end: End boundary of the offending interval (if any)
    """

    def __init__(
        self,
        message: str,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> None:
        """Initialize PeriodicityComputationError.

        Args:
            message: Description of the violated invariant
            start: Start boundary of the offending interval
            end: End boundary of the offending interval
        """
        self.start = start
        self.end = end
        start_str = start.isoformat() if start else "invalid start"
        end_str = end.isoformat() if end else "invalid end"
        super().__init__(f"{message}: '{start_str}' to '{end_str}'")
