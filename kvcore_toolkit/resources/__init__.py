"""Resource mediators, one per family of KVCore endpoints."""

from .base import ResourceAPI
from .contacts import ContactsAPI
from .notes import NotesAPI
from .calls import CallsAPI
from .search_alerts import SearchAlertsAPI
from .misc import MiscAPI

__all__ = [
    "ResourceAPI",
    "ContactsAPI",
    "NotesAPI",
    "CallsAPI",
    "SearchAlertsAPI",
    "MiscAPI",
]
