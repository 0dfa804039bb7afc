"""Note endpoints for contacts."""

from typing import Any

from .base import ResourceAPI


class NotesAPI(ResourceAPI):
    """Notes logged against a contact."""

    async def list(self, contact_id: Any) -> Any:
        return await self._request("GET", f"/contact/{contact_id}/action/note")

    async def get(self, contact_id: Any, note_id: Any) -> Any:
        return await self._request(
            "GET", f"/contact/{contact_id}/action/note/{note_id}"
        )

    async def create(self, contact_id: Any, payload: dict[str, Any]) -> Any:
        """
        Add a note to a contact.

        Args:
            contact_id: Contact identifier
            payload: ``{"date", "title", "details", "action_owner_user_id"?}``

        Returns:
            Created note as returned by the API
        """
        # Upstream creates notes with PUT on the collection path
        return await self._request(
            "PUT", f"/contact/{contact_id}/action/note", json=payload
        )

    async def update(self, contact_id: Any, note_id: Any, payload: dict[str, Any]) -> Any:
        """Update an existing note; payload fields as for create."""
        return await self._request(
            "PUT", f"/contact/{contact_id}/action/note/{note_id}", json=payload
        )
