"""Contact endpoints, mounted at /contacts."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request, Response

from ...client import KVCoreClient
from ..deps import get_client

router = APIRouter(tags=["contacts"])


@router.get("")
async def list_contacts(request: Request, client: KVCoreClient = Depends(get_client)):
    """
    List contacts.

    Query parameters are forwarded untouched, e.g. ``filter[email]``,
    ``filter[leadtype]``, ``filter[status]``, ``limit``, ``includeArchived``.
    """
    return await client.contacts.list(request.query_params.multi_items())


@router.post("", status_code=201)
async def create_contact(
    payload: dict[str, Any] | None = Body(default=None),
    client: KVCoreClient = Depends(get_client),
):
    return await client.contacts.create(payload or {})


@router.get("/{contact_id}")
async def get_contact(contact_id: str, client: KVCoreClient = Depends(get_client)):
    return await client.contacts.get(contact_id)


@router.put("/{contact_id}")
async def update_contact(
    contact_id: str,
    payload: dict[str, Any] | None = Body(default=None),
    client: KVCoreClient = Depends(get_client),
):
    return await client.contacts.update(contact_id, payload or {})


@router.delete("/{contact_id}", status_code=204)
async def delete_contact(contact_id: str, client: KVCoreClient = Depends(get_client)):
    await client.contacts.delete(contact_id)
    return Response(status_code=204)


@router.get("/{contact_id}/tags")
async def get_tags(contact_id: str, client: KVCoreClient = Depends(get_client)):
    return await client.contacts.get_tags(contact_id)


@router.put("/{contact_id}/tags")
async def add_tags(
    contact_id: str,
    tags: list[Any] = Body(...),
    client: KVCoreClient = Depends(get_client),
):
    """Body: tag objects, e.g. ``[{"name": "#myTag", "locked": false}]``."""
    return await client.contacts.add_tags(contact_id, tags)


@router.delete("/{contact_id}/tags")
async def remove_tags(
    contact_id: str,
    tags: list[Any] = Body(...),
    client: KVCoreClient = Depends(get_client),
):
    """Body: names of the tags to detach from the contact."""
    return await client.contacts.remove_tags(contact_id, tags)


@router.get("/{contact_id}/listingviews")
async def get_listing_views(contact_id: str, client: KVCoreClient = Depends(get_client)):
    return await client.contacts.get_listing_views(contact_id)


@router.get("/{contact_id}/marketreport")
async def get_market_reports(contact_id: str, client: KVCoreClient = Depends(get_client)):
    return await client.contacts.get_market_reports(contact_id)


@router.put("/{contact_id}/email")
async def send_email(
    contact_id: str,
    payload: dict[str, Any] | None = Body(default=None),
    client: KVCoreClient = Depends(get_client),
):
    return await client.contacts.send_email(contact_id, payload or {})


@router.put("/{contact_id}/text")
async def send_text(
    contact_id: str,
    payload: dict[str, Any] | None = Body(default=None),
    client: KVCoreClient = Depends(get_client),
):
    return await client.contacts.send_text(contact_id, payload or {})


@router.post("/{contact_id}/question", status_code=201)
async def ask_question(
    contact_id: str,
    payload: dict[str, Any] | None = Body(default=None),
    client: KVCoreClient = Depends(get_client),
):
    return await client.contacts.ask_question(contact_id, payload or {})


@router.post("/{contact_id}/appointment", status_code=201)
async def request_appointment(
    contact_id: str,
    payload: dict[str, Any] | None = Body(default=None),
    client: KVCoreClient = Depends(get_client),
):
    return await client.contacts.request_appointment(contact_id, payload or {})
