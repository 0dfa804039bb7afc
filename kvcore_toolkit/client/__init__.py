"""
KVCore API client.

The transport owns the HTTP channel; the facade ties it to the resource
mediators.
"""

from .transport import Transport, RequestHook, LoggingHook, NO_RESPONSE_MESSAGE
from .facade import KVCoreClient

__all__ = [
    "Transport",
    "RequestHook",
    "LoggingHook",
    "NO_RESPONSE_MESSAGE",
    "KVCoreClient",
]
