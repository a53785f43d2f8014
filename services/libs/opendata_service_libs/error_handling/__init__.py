"""Error handling utilities for the Open Data gateway services."""

from services.libs.opendata_service_libs.error_handling.context_manager import (
    upstream_error_context,
)
from services.libs.opendata_service_libs.error_handling.error_detail import (
    ErrorCode,
    ErrorDetail,
)
from services.libs.opendata_service_libs.error_handling.factories import (
    raise_connection_error,
    raise_external_service_error,
    raise_invalid_response,
    raise_resource_not_found,
    raise_timeout_error,
)
from services.libs.opendata_service_libs.error_handling.gateway_error import GatewayError

__all__ = [
    "ErrorCode",
    "ErrorDetail",
    "GatewayError",
    "raise_connection_error",
    "raise_external_service_error",
    "raise_invalid_response",
    "raise_resource_not_found",
    "raise_timeout_error",
    "upstream_error_context",
]
