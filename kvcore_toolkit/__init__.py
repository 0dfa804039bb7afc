"""
KVCore Toolkit

Client library and pass-through HTTP server for the KVCore Public API v2.
"""

from .client import KVCoreClient, LoggingHook, RequestHook
from .core.models import (
    ClientConfig,
    KVCoreError,
    ConfigurationError,
    ValidationError,
    UpstreamError,
    TransportError,
)
from .core import registry as constants

__version__ = "1.0.0"

__all__ = [
    "KVCoreClient",
    "LoggingHook",
    "RequestHook",
    "ClientConfig",
    "KVCoreError",
    "ConfigurationError",
    "ValidationError",
    "UpstreamError",
    "TransportError",
    "constants",
    "__version__",
]
