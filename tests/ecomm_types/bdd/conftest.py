"""Shared BDD fixtures and step definitions for the ecomm_types domain."""

import pytest
from pytest_bdd import parsers, then


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def outcome():
    """Container for the value produced by a conversion, or the error it raised."""
    return {"value": None, "exc": None}


# ---------------------------------------------------------------------------
# Then steps shared by all features
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the timestamp renders as "{expected}"'))
def timestamp_renders_as(outcome, expected):
    assert outcome["exc"] is None
    assert str(outcome["value"]) == expected


@then("no timestamp is produced")
def no_timestamp_produced(outcome):
    assert outcome["value"] is None


@then("nothing is returned")
def nothing_returned(outcome):
    assert outcome["exc"] is None
    assert outcome["value"] is None
