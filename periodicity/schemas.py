# File: schemas.py
"""Voluptuous schemas for periodicity rules and check-ins.

Rules and check-ins arrive as loosely shaped dicts. These schemas coerce
them into the shapes described in type_defs.py and turn any failure into a
PeriodicityConfigError, so engines only ever see validated input.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any, cast

import voluptuous as vol

from . import const
from .exceptions import PeriodicityConfigError, UnsupportedPeriodicityTypeError
from .type_defs import CheckIn, PeriodicityRule
from .utils.dt_utils import dt_parse

# --- Field Validators ---
MONTH_VALIDATOR = vol.All(
    vol.Coerce(int), vol.Range(min=const.MONTH_MIN, max=const.MONTH_MAX)
)
DAY_OF_MONTH_VALIDATOR = vol.All(
    vol.Coerce(int),
    vol.Range(min=const.DAY_OF_MONTH_MIN, max=const.DAY_OF_MONTH_MAX),
)


def coerce_timestamp(value: Any) -> datetime:
    """Coerce a datetime, date or ISO string into an aware datetime.

    Raises:
        vol.Invalid: If the value cannot be parsed.
    """
    parsed = dt_parse(value)
    if not isinstance(parsed, datetime):
        raise vol.Invalid(f"Invalid timestamp: {value!r}")
    return parsed


# --- Occurrence Schemas ---
YEARLY_OCCURRENCE_SCHEMA = vol.Schema(
    {
        vol.Required(const.DATA_OCCURRENCE_MONTH): MONTH_VALIDATOR,
        vol.Required(const.DATA_OCCURRENCE_DATE): DAY_OF_MONTH_VALIDATOR,
    },
    extra=vol.REMOVE_EXTRA,
)

MONTHLY_OCCURRENCE_SCHEMA = vol.Schema(
    {
        vol.Required(const.DATA_OCCURRENCE_DATE): DAY_OF_MONTH_VALIDATOR,
    },
    extra=vol.REMOVE_EXTRA,
)


def _rule_schema(periodicity_type: str, occurrence_schema: vol.Schema) -> vol.Schema:
    return vol.Schema(
        {
            vol.Required(const.DATA_PERIODICITY_TYPE): periodicity_type,
            vol.Required(const.DATA_PERIODICITY_OCCURRENCES): vol.All(
                [occurrence_schema], vol.Length(min=1)
            ),
        },
        extra=vol.ALLOW_EXTRA,
    )


# --- Rule Schemas ---
YEARLY_RULE_SCHEMA = _rule_schema(
    const.PERIODICITY_TYPE_YEARLY, YEARLY_OCCURRENCE_SCHEMA
)
MONTHLY_RULE_SCHEMA = _rule_schema(
    const.PERIODICITY_TYPE_MONTHLY, MONTHLY_OCCURRENCE_SCHEMA
)

RULE_SCHEMAS: dict[str, vol.Schema] = {
    const.PERIODICITY_TYPE_YEARLY: YEARLY_RULE_SCHEMA,
    const.PERIODICITY_TYPE_MONTHLY: MONTHLY_RULE_SCHEMA,
}

# --- Check-in Schema ---
CHECK_IN_SCHEMA = vol.Schema(
    {
        vol.Required(const.DATA_CHECK_IN_TIMESTAMP): coerce_timestamp,
        vol.Optional(const.DATA_CHECK_IN_RESULT): vol.Any(None, str),
    },
    extra=vol.ALLOW_EXTRA,
)


def _format_path(path: list[Any]) -> str:
    """Render a voluptuous error path as 'occurrences[0].month'."""
    rendered = ""
    for part in path:
        if isinstance(part, int):
            rendered += f"[{part}]"
        else:
            rendered += f".{part}" if rendered else str(part)
    return rendered


def validate_periodicity_rule(rule: Mapping[str, Any]) -> PeriodicityRule:
    """Validate a periodicity rule and return a normalized copy.

    Args:
        rule: Rule dict, e.g. {"type": "yearly", "occurrences": [{"month": 6, "date": 15}]}

    Returns:
        Validated rule with integer month/date values and unknown
        occurrence keys removed.

    Raises:
        UnsupportedPeriodicityTypeError: If the type is not yearly or monthly.
        PeriodicityConfigError: If occurrences are missing/empty or any
            field is out of range.
    """
    if not isinstance(rule, Mapping):
        raise PeriodicityConfigError(
            "Periodicity rule must be a mapping", field="rule", value=rule
        )

    periodicity_type = rule.get(const.DATA_PERIODICITY_TYPE)
    if periodicity_type not in const.PERIODICITY_TYPES:
        raise UnsupportedPeriodicityTypeError(periodicity_type)
    schema = RULE_SCHEMAS[periodicity_type]

    occurrences = rule.get(const.DATA_PERIODICITY_OCCURRENCES)
    if not occurrences:
        raise PeriodicityConfigError(
            "Invalid/missing occurrences specified in periodicity rule",
            field=const.DATA_PERIODICITY_OCCURRENCES,
            value=occurrences,
        )

    try:
        return cast("PeriodicityRule", schema(dict(rule)))
    except vol.Invalid as err:
        raise PeriodicityConfigError(
            f"Invalid periodicity rule: {err.msg}",
            field=_format_path(err.path),
        ) from err


def normalize_check_ins(check_ins: Iterable[Mapping[str, Any]]) -> list[CheckIn]:
    """Validate check-ins and coerce their timestamps to aware datetimes.

    Naive timestamps are placed in the default timezone. Input order is kept.

    Raises:
        PeriodicityConfigError: If a check-in has no parseable timestamp.
    """
    normalized: list[CheckIn] = []
    for index, check_in in enumerate(check_ins):
        if not isinstance(check_in, Mapping):
            raise PeriodicityConfigError(
                "Check-in must be a mapping", field=f"check_ins[{index}]", value=check_in
            )
        try:
            normalized.append(cast("CheckIn", CHECK_IN_SCHEMA(dict(check_in))))
        except vol.Invalid as err:
            raise PeriodicityConfigError(
                f"Invalid check-in: {err.msg}",
                field=f"check_ins[{index}].{_format_path(err.path)}",
            ) from err
    return normalized
