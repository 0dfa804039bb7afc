"""Search alert endpoints for contacts."""

from typing import Any

from .base import ResourceAPI, check_alert_number


class SearchAlertsAPI(ResourceAPI):
    """
    Saved listing searches for a contact.

    A contact has at most two alerts, addressed by number (1 or 2). Every
    numbered operation checks the number before sending anything.
    """

    async def list(self, contact_id: Any) -> Any:
        return await self._request("GET", f"/contact/{contact_id}/searchalert")

    async def create(self, contact_id: Any, payload: dict[str, Any]) -> Any:
        """
        Create a search alert.

        Args:
            contact_id: Contact identifier
            payload: ``{"number", "active"?, "areas"?, "types"?, "beds"?,
                "baths"?, "min_price"?, "max_price"?, ...}``; number is
                required

        Raises:
            ValidationError: If number is missing or not 1 or 2
        """
        check_alert_number(payload.get("number"))
        return await self._request(
            "POST", f"/contact/{contact_id}/searchalert", json=payload
        )

    async def update(self, contact_id: Any, number: Any, payload: dict[str, Any]) -> Any:
        check_alert_number(number)
        return await self._request(
            "PUT", f"/contact/{contact_id}/searchalert/{number}", json=payload
        )

    async def delete(self, contact_id: Any, number: Any) -> None:
        check_alert_number(number)
        await self._request("DELETE", f"/contact/{contact_id}/searchalert/{number}")

    async def send(self, contact_id: Any, number: Any) -> Any:
        """Email the alert's current results to the contact now."""
        check_alert_number(number)
        return await self._request(
            "POST", f"/contact/{contact_id}/searchalert/{number}/send"
        )

    async def get_recent(self, contact_id: Any, number: Any) -> Any:
        """Get the listings the alert matched most recently."""
        check_alert_number(number)
        return await self._request(
            "GET", f"/contact/{contact_id}/searchalert/{number}/recent"
        )
