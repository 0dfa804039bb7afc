"""
Enumerated values accepted by the KVCore Public API v2.

All tables are read-only and built at import time. Lookups return None for
unknown keys and the ``is_valid_*`` predicates never raise.
"""

from enum import IntEnum
from types import MappingProxyType
from typing import Any, Mapping

# Lead/contact status codes used when creating or updating a contact
LEAD_STATUS: Mapping[int, str] = MappingProxyType({
    0: "New",
    1: "Client",
    2: "Closed",
    3: "Sphere",
    4: "Active",
    5: "Contract",
    6: "Archived",
    7: "Prospect",
})

# Values accepted by filter[status] when listing contacts (no Archived)
CONTACT_STATUS_FILTER: Mapping[int, str] = MappingProxyType({
    code: label for code, label in LEAD_STATUS.items() if code != 6
})

CALL_RESULT: Mapping[int, str] = MappingProxyType({
    1: "Bad Number",
    2: "Not Home",
    3: "Contacted",
})

CALL_DIRECTION: frozenset[str] = frozenset({"outbound", "inbound"})
DEFAULT_CALL_DIRECTION = "outbound"

# Callers may combine these as a comma-separated string, e.g. "buyer,seller"
DEAL_TYPES: frozenset[str] = frozenset({"buyer", "seller", "renter"})

LEADTYPE_FILTER: frozenset[str] = frozenset(
    {"buyer", "seller", "renter", "agent", "vendor"}
)

SEARCH_ALERT_NUMBER: frozenset[int] = frozenset({1, 2})


class OptIn(IntEnum):
    """Communication opt-in flags (email_optin, phone_on, text_on)."""
    ENABLED = 1
    DISABLED = 0


class BooleanInt(IntEnum):
    """Integer booleans used by fields such as is_private."""
    TRUE = 1
    FALSE = 0


def _is_code(value: Any) -> bool:
    # bool is an int subclass; True must not pass as code 1
    return isinstance(value, int) and not isinstance(value, bool)


def label_for_status(code: Any) -> str | None:
    """
    Get the human-readable label for a lead status code.

    Args:
        code: Numeric status code (0-7)

    Returns:
        Status label, or None if the code is unknown
    """
    if not _is_code(code):
        return None
    return LEAD_STATUS.get(code)


def code_for_status_label(label: Any) -> int | None:
    """
    Reverse lookup of a lead status label.

    If two codes ever share a label, the lowest code wins.

    Args:
        label: Status label (e.g., "Active")

    Returns:
        Status code, or None if the label is unknown
    """
    matches = [code for code, name in LEAD_STATUS.items() if name == label]
    return min(matches) if matches else None


def _call_result_code(value: Any) -> int | None:
    # Form fields and query strings carry the result as text, e.g. "3"
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return None
    return value if _is_code(value) else None


def describe_call_result(code: Any) -> str | None:
    """Return the label for a call result code, or None."""
    return CALL_RESULT.get(_call_result_code(code))


def is_valid_call_result(code: Any) -> bool:
    """Check that a call result code is 1, 2 or 3, as an int or a numeric string."""
    return _call_result_code(code) in CALL_RESULT


def is_valid_call_direction(value: Any) -> bool:
    """Check that a call direction is 'outbound' or 'inbound'."""
    return isinstance(value, str) and value in CALL_DIRECTION


def is_valid_search_alert_number(value: Any) -> bool:
    """Check that a search alert number is 1 or 2."""
    return _is_code(value) and value in SEARCH_ALERT_NUMBER


def is_valid_lead_type(value: Any) -> bool:
    """Check a value against the filter[leadtype] options."""
    return isinstance(value, str) and value in LEADTYPE_FILTER
