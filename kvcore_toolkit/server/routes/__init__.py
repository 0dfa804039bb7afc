"""API routers, one per resource."""

from fastapi import APIRouter

from . import calls, contacts, health, misc, notes, search_alerts

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(contacts.router, prefix="/contacts")
api_router.include_router(notes.router, prefix="/contacts/{contact_id}/notes")
api_router.include_router(calls.router, prefix="/contacts/{contact_id}/calls")
api_router.include_router(
    search_alerts.router, prefix="/contacts/{contact_id}/searchalerts"
)
api_router.include_router(misc.router)

__all__ = ["api_router"]
