"""Health check and service banner."""

from datetime import datetime, timezone

from fastapi import APIRouter

from ... import __version__

SERVICE_NAME = "kvcore-integration"

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """
    Basic liveness check.

    No upstream call is made; this only proves the server is running.
    """
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": SERVICE_NAME,
        "version": __version__,
    }


@router.get("/")
async def banner():
    return {
        "message": "KVCore API Integration Server",
        "version": __version__,
        "endpoints": {
            "health": "/health",
            "contacts": "/contacts",
            "notes": "/contacts/:contactId/notes",
            "calls": "/contacts/:contactId/calls",
            "searchAlerts": "/contacts/:contactId/searchalerts",
            "scheduleCall": "/schedule-call",
            "views": "/views",
        },
    }
