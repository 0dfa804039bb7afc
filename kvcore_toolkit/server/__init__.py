"""HTTP server that forwards requests to the KVCore API."""

from .app import create_app

__all__ = ["create_app"]
