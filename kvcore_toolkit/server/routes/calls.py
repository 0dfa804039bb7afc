"""Call log endpoints, mounted at /contacts/{contact_id}/calls."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from ...client import KVCoreClient
from ..deps import get_client

router = APIRouter(tags=["calls"])


@router.get("")
async def list_calls(contact_id: str, client: KVCoreClient = Depends(get_client)):
    return await client.calls.list(contact_id)


@router.put("", status_code=201)
@router.post("", status_code=201)
async def create_call(
    contact_id: str,
    payload: dict[str, Any] | None = Body(default=None),
    client: KVCoreClient = Depends(get_client),
):
    """
    Log a call.

    Body: ``date``, ``direction`` (outbound|inbound), ``result`` (1-3),
    ``recording_url``, ``action_owner_user_id``, ``notes``.
    """
    return await client.calls.create(contact_id, payload or {})


@router.get("/{call_id}")
async def get_call(contact_id: str, call_id: str, client: KVCoreClient = Depends(get_client)):
    return await client.calls.get(contact_id, call_id)


@router.put("/{call_id}")
async def update_call(
    contact_id: str,
    call_id: str,
    payload: dict[str, Any] | None = Body(default=None),
    client: KVCoreClient = Depends(get_client),
):
    return await client.calls.update(contact_id, call_id, payload or {})
