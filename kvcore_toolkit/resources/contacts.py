"""Contact endpoints."""

from typing import Any, Sequence

from ..core.models import QueryParams
from .base import ResourceAPI


class ContactsAPI(ResourceAPI):
    """
    Contact records plus the per-contact actions hanging off them
    (tags, listing views, market reports, email, text, questions and
    showing requests).
    """

    async def list(self, filters: QueryParams | None = None) -> Any:
        """
        List contacts.

        Filters are sent as query parameters exactly as given, e.g.
        ``{"filter[email]": "jane@example.com", "limit": 10}``. Pass a list
        of pairs to repeat a key.

        Args:
            filters: Optional query parameters

        Returns:
            Upstream response body
        """
        return await self._request("GET", "/contacts", params=filters)

    async def get(self, contact_id: Any) -> Any:
        """Get a single contact by ID."""
        return await self._request("GET", f"/contact/{contact_id}")

    async def create(self, payload: dict[str, Any]) -> Any:
        """
        Create a new contact.

        Args:
            payload: Contact fields (first_name, last_name, email,
                deal_type, status, opt-in flags, ...)

        Returns:
            Created contact as returned by the API
        """
        return await self._request("POST", "/contact", json=payload)

    async def update(self, contact_id: Any, payload: dict[str, Any]) -> Any:
        """Update an existing contact."""
        return await self._request("PUT", f"/contact/{contact_id}", json=payload)

    async def delete(self, contact_id: Any) -> None:
        """Soft-delete a contact."""
        await self._request("DELETE", f"/contact/{contact_id}/")

    async def get_tags(self, contact_id: Any) -> Any:
        return await self._request("GET", f"/contact/{contact_id}/tags")

    async def add_tags(self, contact_id: Any, tags: Sequence[dict[str, Any]]) -> Any:
        """
        Add tags to a contact.

        Args:
            contact_id: Contact identifier
            tags: Tag objects, e.g. ``[{"name": "#buyer", "locked": False}]``
        """
        return await self._request("PUT", f"/contact/{contact_id}/tags", json=tags)

    async def remove_tags(self, contact_id: Any, tag_names: Sequence[str]) -> Any:
        """
        Remove tags from a contact.

        The tags are only detached from this contact; the tags themselves
        still exist upstream.

        Args:
            contact_id: Contact identifier
            tag_names: Names of the tags to detach
        """
        return await self._request(
            "DELETE", f"/contact/{contact_id}/tags", json=tag_names
        )

    async def get_listing_views(self, contact_id: Any) -> Any:
        return await self._request("GET", f"/contact/{contact_id}/listingviews")

    async def get_market_reports(self, contact_id: Any) -> Any:
        return await self._request("GET", f"/contact/{contact_id}/marketreport")

    async def send_email(self, contact_id: Any, email: dict[str, Any]) -> Any:
        """
        Send an email to a contact.

        Args:
            contact_id: Contact identifier
            email: ``{"subject": ..., "message": ...}``
        """
        return await self._request("PUT", f"/contact/{contact_id}/email", json=email)

    async def send_text(self, contact_id: Any, text: dict[str, Any]) -> Any:
        """
        Send a text message to a contact.

        Args:
            contact_id: Contact identifier
            text: ``{"message": ...}``
        """
        return await self._request("PUT", f"/contact/{contact_id}/text", json=text)

    async def ask_question(self, contact_id: Any, question: dict[str, Any]) -> Any:
        """
        Submit a property question on behalf of a contact.

        Args:
            contact_id: Contact identifier
            question: ``{"website_id"?, "mls_id", "question"}``
        """
        return await self._request(
            "POST", f"/contact/{contact_id}/question", json=question
        )

    async def request_appointment(
        self, contact_id: Any, appointment: dict[str, Any]
    ) -> Any:
        """
        Request a property showing.

        Args:
            contact_id: Contact identifier
            appointment: ``{"mls_id", "question", "date"}``
        """
        return await self._request(
            "POST", f"/contact/{contact_id}/appointment", json=appointment
        )
