"""FastAPI dependencies shared by the route modules."""

from typing import Any

from fastapi import Request

from ..client import KVCoreClient


def get_client(request: Request) -> KVCoreClient:
    """Return the KVCore client bound to the running app."""
    return request.app.state.kvcore


def parse_alert_number(raw: str) -> Any:
    """
    Convert a path segment to an alert number.

    Non-numeric segments are returned as-is so the mediator rejects them
    with its usual validation error.
    """
    try:
        return int(raw)
    except ValueError:
        return raw
