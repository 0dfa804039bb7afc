"""Top-level endpoints: scheduled calls and listing views."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from ...client import KVCoreClient
from ..deps import get_client

router = APIRouter(tags=["misc"])


@router.post("/schedule-call", status_code=201)
async def schedule_call(
    payload: dict[str, Any] | None = Body(default=None),
    client: KVCoreClient = Depends(get_client),
):
    """
    Schedule a call with a reminder.

    Body: ``leadId`` (required), ``note``, ``reminderDate`` (YYYY-MM-DD),
    ``reminderTime`` (HH:MM), ``repeatTimeframe``, ``repeatTimes``,
    ``repeatCalls``.
    """
    return await client.misc.schedule_call(payload or {})


@router.post("/views", status_code=201)
async def add_listing_view(
    payload: dict[str, Any] | None = Body(default=None),
    client: KVCoreClient = Depends(get_client),
):
    """Body: ``lead_id`` and ``mls_id`` (required), ``mobile``, ``comments``, ``save``."""
    return await client.misc.add_listing_view(payload or {})
