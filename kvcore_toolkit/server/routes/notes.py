"""Note endpoints, mounted at /contacts/{contact_id}/notes."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from ...client import KVCoreClient
from ..deps import get_client

router = APIRouter(tags=["notes"])


@router.get("")
async def list_notes(contact_id: str, client: KVCoreClient = Depends(get_client)):
    return await client.notes.list(contact_id)


@router.put("", status_code=201)
@router.post("", status_code=201)
async def create_note(
    contact_id: str,
    payload: dict[str, Any] | None = Body(default=None),
    client: KVCoreClient = Depends(get_client),
):
    """Body: ``date``, ``title``, ``details``, optional ``action_owner_user_id``."""
    return await client.notes.create(contact_id, payload or {})


@router.get("/{note_id}")
async def get_note(contact_id: str, note_id: str, client: KVCoreClient = Depends(get_client)):
    return await client.notes.get(contact_id, note_id)


@router.put("/{note_id}")
async def update_note(
    contact_id: str,
    note_id: str,
    payload: dict[str, Any] | None = Body(default=None),
    client: KVCoreClient = Depends(get_client),
):
    return await client.notes.update(contact_id, note_id, payload or {})
