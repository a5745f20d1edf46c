"""Tests for status vocabulary mapping."""

import pytest

from truthchain.domain.models.verdict import Verdict
from truthchain.domain.services.vocabulary import STATUS_MAP, map_status


@pytest.mark.parametrize(
    "status,expected",
    [
        ("TRUE", Verdict.VERIFIED),
        ("FALSE", Verdict.FALSE),
        ("MISLEADING", Verdict.FALSE),
        ("NEEDS_CONTEXT", Verdict.NEEDS_CONTEXT),
        ("NEEDS CONTEXT", Verdict.NEEDS_CONTEXT),
        ("UNVERIFIED", Verdict.UNVERIFIED),
    ],
)
def test_canonical_statuses(status, expected):
    """Test every canonical spelling."""
    assert map_status(status) is expected


def test_mapping_is_case_insensitive():
    """Test lowercase and padded statuses."""
    assert map_status("true") is Verdict.VERIFIED
    assert map_status("  Misleading ") is Verdict.FALSE
    assert map_status("needs context") is Verdict.NEEDS_CONTEXT


@pytest.mark.parametrize("status", [None, "", "PARTIALLY TRUE", "maybe", 1, ["TRUE"]])
def test_unknown_statuses_are_unverified(status):
    """Test unknown or missing statuses."""
    assert map_status(status) is Verdict.UNVERIFIED


def test_misleading_never_maps_to_misleading():
    """Test the table never produces the MISLEADING verdict."""
    assert Verdict.MISLEADING not in STATUS_MAP.values()
