"""Unit tests for schemas.py rule and check-in validation."""

from __future__ import annotations

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from periodicity.exceptions import (
    PeriodicityConfigError,
    UnsupportedPeriodicityTypeError,
)
from periodicity.schemas import normalize_check_ins, validate_periodicity_rule

# =============================================================================
# Periodicity Rules
# =============================================================================


class TestValidatePeriodicityRule:
    """Rule validation and normalization."""

    def test_yearly_rule_passes(self) -> None:
        """A well-formed yearly rule is returned unchanged."""
        rule = {"type": "yearly", "occurrences": [{"month": 6, "date": 15}]}

        assert validate_periodicity_rule(rule) == rule

    def test_numeric_strings_are_coerced(self) -> None:
        """Month and date arrive as strings from some payloads."""
        result = validate_periodicity_rule(
            {"type": "yearly", "occurrences": [{"month": "12", "date": "20"}]}
        )

        assert result["occurrences"] == [{"month": 12, "date": 20}]

    def test_monthly_extra_keys_removed(self) -> None:
        """Unknown occurrence keys are dropped."""
        result = validate_periodicity_rule(
            {"type": "monthly", "occurrences": [{"date": 1, "month": 4, "note": "x"}]}
        )

        assert result["occurrences"] == [{"date": 1}]

    def test_rule_level_extra_keys_kept(self) -> None:
        """Extra keys on the rule itself (ids, labels) pass through."""
        result = validate_periodicity_rule(
            {"type": "monthly", "occurrences": [{"date": 1}], "label": "Monthly check"}
        )

        assert result["label"] == "Monthly check"

    @pytest.mark.parametrize("periodicity_type", ["weekly", None, "", "YEARLY"])
    def test_unsupported_type(self, periodicity_type) -> None:
        """Anything but yearly/monthly is rejected."""
        with pytest.raises(UnsupportedPeriodicityTypeError):
            validate_periodicity_rule(
                {"type": periodicity_type, "occurrences": [{"date": 1}]}
            )

    @pytest.mark.parametrize("occurrences", [[], None])
    def test_missing_occurrences(self, occurrences) -> None:
        """Empty or missing occurrences are a configuration error."""
        with pytest.raises(PeriodicityConfigError) as exc_info:
            validate_periodicity_rule({"type": "yearly", "occurrences": occurrences})

        assert exc_info.value.field == "occurrences"

    def test_yearly_requires_month(self) -> None:
        """Yearly occurrences need a month."""
        with pytest.raises(PeriodicityConfigError) as exc_info:
            validate_periodicity_rule({"type": "yearly", "occurrences": [{"date": 1}]})

        assert exc_info.value.field == "occurrences[0].month"

    @pytest.mark.parametrize(
        "occurrence",
        [{"month": 13, "date": 1}, {"month": 0, "date": 1}, {"month": 1, "date": 32}],
    )
    def test_out_of_range_fields(self, occurrence: dict) -> None:
        """Months and days are range-checked."""
        with pytest.raises(PeriodicityConfigError):
            validate_periodicity_rule({"type": "yearly", "occurrences": [occurrence]})

    def test_rule_must_be_mapping(self) -> None:
        """A non-dict rule is rejected."""
        with pytest.raises(PeriodicityConfigError):
            validate_periodicity_rule(["yearly"])  # type: ignore[arg-type]


# =============================================================================
# Check-ins
# =============================================================================


class TestNormalizeCheckIns:
    """Check-in timestamp coercion."""

    def test_naive_timestamp_gets_default_zone(self) -> None:
        """Naive datetimes are placed in the default zone (UTC in tests)."""
        result = normalize_check_ins([{"timestamp": datetime(2022, 6, 10, 8, 30)}])

        assert result[0]["timestamp"].utcoffset() == timedelta(0)

    def test_aware_timestamp_kept(self) -> None:
        """Aware datetimes are not converted."""
        stamp = datetime(2022, 6, 10, 8, 30, tzinfo=ZoneInfo("Europe/Stockholm"))

        result = normalize_check_ins([{"timestamp": stamp, "result": "workorder"}])

        assert result == [{"timestamp": stamp, "result": "workorder"}]

    def test_non_mapping_check_in(self) -> None:
        """Check-ins must be dicts."""
        with pytest.raises(PeriodicityConfigError) as exc_info:
            normalize_check_ins([42])  # type: ignore[list-item]

        assert exc_info.value.field == "check_ins[0]"

    def test_non_string_result_rejected(self) -> None:
        """Remark codes are strings (or absent)."""
        with pytest.raises(PeriodicityConfigError) as exc_info:
            normalize_check_ins(
                [{"timestamp": datetime(2022, 6, 10), "result": 7}]
            )

        assert exc_info.value.field == "check_ins[0].result"
