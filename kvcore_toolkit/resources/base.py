"""Base class for resource mediators."""

from typing import Any, TYPE_CHECKING

from ..core.models import QueryParams, RequestDescriptor, ValidationError
from ..core.registry import is_valid_search_alert_number

if TYPE_CHECKING:
    from ..client.transport import Transport


class ResourceAPI:
    """
    Base class for one family of KVCore endpoints.

    Subclasses shape paths and bodies, validate the few enumerated fields
    the upstream API rejects, and hand the request to the shared transport.
    Bodies returned by the API are passed back unchanged.
    """

    def __init__(self, transport: "Transport"):
        """
        Initialize the mediator.

        Args:
            transport: Shared transport owned by the client
        """
        self.transport = transport

    async def _request(
        self,
        method: str,
        path: str,
        params: QueryParams | None = None,
        json: Any = None,
    ) -> Any:
        """
        Build a request descriptor and send it.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: API path relative to the base URL
            params: Query parameters, passed through as given
            json: JSON request body

        Returns:
            Upstream response body
        """
        descriptor = RequestDescriptor(
            method=method,
            path=path,
            params=params or None,
            json=json,
        )
        return await self.transport.send(descriptor)


def require_fields(payload: dict[str, Any], *names: str) -> None:
    """
    Check that each named field is present and non-empty.

    Raises:
        ValidationError: Naming the first missing field
    """
    for name in names:
        value = payload.get(name) if isinstance(payload, dict) else None
        if not value:
            raise ValidationError(f"{name} is required")


def check_alert_number(number: Any) -> None:
    """Raise ValidationError unless number is 1 or 2."""
    if not is_valid_search_alert_number(number):
        raise ValidationError("Invalid alert number. Must be 1 or 2")
