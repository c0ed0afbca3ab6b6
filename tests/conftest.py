"""Shared fixtures for periodicity tests."""

from collections.abc import Iterator
from zoneinfo import ZoneInfo

import pytest

from periodicity.utils import dt_utils


@pytest.fixture(autouse=True)
def utc_default_timezone() -> Iterator[None]:
    """Run every test with UTC as default timezone, restoring afterwards."""
    previous = dt_utils.get_default_timezone()
    dt_utils.set_default_timezone(ZoneInfo("UTC"))
    yield
    dt_utils.set_default_timezone(previous)


@pytest.fixture
def yearly_rule() -> dict:
    """Yearly rule: one inspection each June 15."""
    return {"type": "yearly", "occurrences": [{"month": 6, "date": 15}]}


@pytest.fixture
def monthly_rule() -> dict:
    """Monthly rule: one inspection on the 15th of every month."""
    return {"type": "monthly", "occurrences": [{"date": 15}]}
