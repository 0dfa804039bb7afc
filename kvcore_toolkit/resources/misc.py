"""Endpoints that are not scoped under a single contact path."""

from typing import Any

from .base import ResourceAPI, require_fields


class MiscAPI(ResourceAPI):
    """Scheduled calls and listing views."""

    async def schedule_call(self, payload: dict[str, Any]) -> Any:
        """
        Schedule a call with a reminder.

        Args:
            payload: ``{"leadId", "note"?, "reminderDate"?, "reminderTime"?,
                "repeatTimeframe"?, "repeatTimes"?, "repeatCalls"?}``.
                The repeat fields are sent as given.

        Raises:
            ValidationError: If leadId is missing
        """
        require_fields(payload, "leadId")
        return await self._request("POST", "/schedule-call", json=payload)

    async def add_listing_view(self, payload: dict[str, Any]) -> Any:
        """
        Record that a contact viewed a listing.

        Args:
            payload: ``{"lead_id", "mls_id", "mobile"?, "comments"?, "save"?}``

        Raises:
            ValidationError: If lead_id or mls_id is missing
        """
        require_fields(payload, "lead_id", "mls_id")
        return await self._request("POST", "/views", json=payload)
