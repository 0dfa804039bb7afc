"""Search alert endpoints, mounted at /contacts/{contact_id}/searchalerts."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response

from ...client import KVCoreClient
from ..deps import get_client, parse_alert_number

router = APIRouter(tags=["search alerts"])


@router.get("")
async def list_search_alerts(contact_id: str, client: KVCoreClient = Depends(get_client)):
    return await client.search_alerts.list(contact_id)


@router.post("", status_code=201)
async def create_search_alert(
    contact_id: str,
    payload: dict[str, Any] | None = Body(default=None),
    client: KVCoreClient = Depends(get_client),
):
    """
    Add a search alert.

    Body: ``number`` (1 or 2, required), ``active``, ``areas``, ``types``,
    ``beds``, ``baths``, ``min_price``, ``max_price``, ``min_acres``,
    ``max_sqft``, ``frequency``, ``email_cc``.
    """
    return await client.search_alerts.create(contact_id, payload or {})


@router.put("/{alert_number}")
async def update_search_alert(
    contact_id: str,
    alert_number: str,
    payload: dict[str, Any] | None = Body(default=None),
    client: KVCoreClient = Depends(get_client),
):
    return await client.search_alerts.update(
        contact_id, parse_alert_number(alert_number), payload or {}
    )


@router.delete("/{alert_number}", status_code=204)
async def delete_search_alert(
    contact_id: str, alert_number: str, client: KVCoreClient = Depends(get_client)
):
    await client.search_alerts.delete(contact_id, parse_alert_number(alert_number))
    return Response(status_code=204)


@router.post("/{alert_number}/send")
async def send_search_alert(
    contact_id: str, alert_number: str, client: KVCoreClient = Depends(get_client)
):
    return await client.search_alerts.send(contact_id, parse_alert_number(alert_number))


@router.get("/{alert_number}/recent")
async def get_recent_results(
    contact_id: str, alert_number: str, client: KVCoreClient = Depends(get_client)
):
    return await client.search_alerts.get_recent(
        contact_id, parse_alert_number(alert_number)
    )
