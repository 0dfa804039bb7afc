"""Tests for the enumeration registry."""

import pytest

from kvcore_toolkit.core import registry
from kvcore_toolkit.core.registry import (
    BooleanInt,
    CALL_RESULT,
    CONTACT_STATUS_FILTER,
    LEAD_STATUS,
    OptIn,
    code_for_status_label,
    describe_call_result,
    is_valid_call_direction,
    is_valid_call_result,
    is_valid_lead_type,
    is_valid_search_alert_number,
    label_for_status,
)


def test_lead_status_table():
    """Test the status codes and labels."""
    assert LEAD_STATUS[0] == "New"
    assert LEAD_STATUS[4] == "Active"
    assert LEAD_STATUS[6] == "Archived"
    assert LEAD_STATUS[7] == "Prospect"
    assert sorted(LEAD_STATUS) == list(range(8))


def test_tables_are_read_only():
    """Test that the registry cannot be modified."""
    with pytest.raises(TypeError):
        LEAD_STATUS[8] = "Other"
    with pytest.raises(TypeError):
        CALL_RESULT[4] = "Voicemail"


def test_contact_status_filter_excludes_archived():
    assert 6 not in CONTACT_STATUS_FILTER
    assert set(CONTACT_STATUS_FILTER) == set(LEAD_STATUS) - {6}


@pytest.mark.parametrize("code,label", list(LEAD_STATUS.items()))
def test_status_round_trip(code, label):
    """Every label maps back to its code and forward again."""
    assert code_for_status_label(label) == code
    assert label_for_status(code_for_status_label(label)) == label


def test_status_lookup_unknown_returns_none():
    assert label_for_status(99) is None
    assert label_for_status(-1) is None
    assert label_for_status("4") is None
    assert label_for_status(None) is None
    assert code_for_status_label("Unknown") is None
    assert code_for_status_label(None) is None
    assert code_for_status_label("active") is None


def test_status_label_collision_lowest_code_wins(monkeypatch):
    """If two codes share a label the reverse lookup returns the lowest."""
    monkeypatch.setattr(registry, "LEAD_STATUS", {5: "Dup", 2: "Dup", 0: "New"})
    assert registry.code_for_status_label("Dup") == 2


def test_call_result_validation():
    """Test call result codes 1-3, as ints or numeric strings, and nothing else."""
    for code in (1, 2, 3, "1", "2", "3"):
        assert is_valid_call_result(code)
    for bad in (0, 4, 9, -1, "0", "4", "abc", "", "1.0", 1.0, None, [], {}):
        assert not is_valid_call_result(bad)


def test_booleans_are_not_codes():
    """True is not call result 1, and False is not status 0."""
    assert not is_valid_call_result(True)
    assert not is_valid_search_alert_number(True)
    assert label_for_status(False) is None
    assert describe_call_result(True) is None


def test_describe_call_result():
    assert describe_call_result(1) == "Bad Number"
    assert describe_call_result(2) == "Not Home"
    assert describe_call_result(3) == "Contacted"
    assert describe_call_result("3") == "Contacted"
    assert describe_call_result(4) is None


def test_call_direction_validation():
    assert is_valid_call_direction("outbound")
    assert is_valid_call_direction("inbound")
    for bad in ("sideways", "Outbound", "", None, 1, ["outbound"]):
        assert not is_valid_call_direction(bad)


def test_search_alert_number_validation():
    assert is_valid_search_alert_number(1)
    assert is_valid_search_alert_number(2)
    for bad in (0, 3, "1", 1.5, None, {}):
        assert not is_valid_search_alert_number(bad)


def test_lead_type_validation():
    for lead_type in ("buyer", "seller", "renter", "agent", "vendor"):
        assert is_valid_lead_type(lead_type)
    assert not is_valid_lead_type("landlord")
    assert not is_valid_lead_type(None)


def test_integer_boolean_enums():
    assert OptIn.ENABLED == 1
    assert OptIn.DISABLED == 0
    assert int(BooleanInt.TRUE) == 1
    assert int(BooleanInt.FALSE) == 0
