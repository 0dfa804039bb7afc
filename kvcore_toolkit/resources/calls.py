"""Call log endpoints for contacts."""

from typing import Any

from ..core.models import ValidationError
from ..core.registry import is_valid_call_direction, is_valid_call_result
from .base import ResourceAPI

INVALID_RESULT_MESSAGE = (
    "Invalid call result code. Must be 1 (Bad Number), 2 (Not Home), or 3 (Contacted)"
)
INVALID_DIRECTION_MESSAGE = 'Invalid call direction. Must be "outbound" or "inbound"'


def validate_call(payload: dict[str, Any]) -> None:
    """
    Check the enumerated fields of a call log payload.

    Only ``result`` and ``direction`` are checked, and only when present.

    Raises:
        ValidationError: If either field holds an unknown value
    """
    result = payload.get("result")
    if result is not None and not is_valid_call_result(result):
        raise ValidationError(INVALID_RESULT_MESSAGE)

    direction = payload.get("direction")
    if direction is not None and not is_valid_call_direction(direction):
        raise ValidationError(INVALID_DIRECTION_MESSAGE)


class CallsAPI(ResourceAPI):
    """Call logs recorded against a contact."""

    async def list(self, contact_id: Any) -> Any:
        return await self._request("GET", f"/contact/{contact_id}/action/call")

    async def get(self, contact_id: Any, call_id: Any) -> Any:
        return await self._request(
            "GET", f"/contact/{contact_id}/action/call/{call_id}"
        )

    async def create(self, contact_id: Any, payload: dict[str, Any]) -> Any:
        """
        Log a new call for a contact.

        Args:
            contact_id: Contact identifier
            payload: ``{"date", "direction"?, "result"?, "recording_url"?,
                "action_owner_user_id"?, "notes"?}``

        Returns:
            Created call log as returned by the API

        Raises:
            ValidationError: If result or direction is invalid
        """
        validate_call(payload)
        return await self._request(
            "PUT", f"/contact/{contact_id}/action/call", json=payload
        )

    async def update(self, contact_id: Any, call_id: Any, payload: dict[str, Any]) -> Any:
        """
        Update an existing call log.

        Raises:
            ValidationError: If result or direction is invalid
        """
        validate_call(payload)
        return await self._request(
            "PUT", f"/contact/{contact_id}/action/call/{call_id}", json=payload
        )
