"""Core components for the KVCore toolkit."""

from .models import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_MS,
    ClientConfig,
    RequestDescriptor,
    KVCoreError,
    ConfigurationError,
    ValidationError,
    UpstreamError,
    TransportError,
)
from .registry import (
    LEAD_STATUS,
    CONTACT_STATUS_FILTER,
    CALL_RESULT,
    CALL_DIRECTION,
    DEFAULT_CALL_DIRECTION,
    DEAL_TYPES,
    LEADTYPE_FILTER,
    SEARCH_ALERT_NUMBER,
    OptIn,
    BooleanInt,
    label_for_status,
    code_for_status_label,
    describe_call_result,
    is_valid_call_result,
    is_valid_call_direction,
    is_valid_search_alert_number,
    is_valid_lead_type,
)
from .config_store import (
    ClientSettings,
    ServerSettings,
    load_client_config,
    load_server_settings,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_MS",
    "ClientConfig",
    "RequestDescriptor",
    "KVCoreError",
    "ConfigurationError",
    "ValidationError",
    "UpstreamError",
    "TransportError",
    "LEAD_STATUS",
    "CONTACT_STATUS_FILTER",
    "CALL_RESULT",
    "CALL_DIRECTION",
    "DEFAULT_CALL_DIRECTION",
    "DEAL_TYPES",
    "LEADTYPE_FILTER",
    "SEARCH_ALERT_NUMBER",
    "OptIn",
    "BooleanInt",
    "label_for_status",
    "code_for_status_label",
    "describe_call_result",
    "is_valid_call_result",
    "is_valid_call_direction",
    "is_valid_search_alert_number",
    "is_valid_lead_type",
    "ClientSettings",
    "ServerSettings",
    "load_client_config",
    "load_server_settings",
]
