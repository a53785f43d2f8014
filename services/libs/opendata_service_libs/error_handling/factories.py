"""
Factory functions raising GatewayError with a populated ErrorDetail.

Every factory has the return type NoReturn so type checkers treat calls as
terminal, the same way a bare ``raise`` is treated.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, NoReturn
from uuid import UUID

from services.libs.opendata_service_libs.error_handling.error_detail import (
    ErrorCode,
    ErrorDetail,
)
from services.libs.opendata_service_libs.error_handling.gateway_error import GatewayError


def _raise(
    error_code: ErrorCode,
    *,
    service: str,
    operation: str,
    message: str,
    correlation_id: UUID,
    details: dict[str, Any],
) -> NoReturn:
    raise GatewayError(
        ErrorDetail(
            error_code=error_code,
            message=message,
            correlation_id=correlation_id,
            timestamp=datetime.now(UTC),
            service=service,
            operation=operation,
            details=details,
        )
    )


def raise_resource_not_found(
    service: str,
    operation: str,
    resource_type: str,
    resource_id: str,
    correlation_id: UUID,
    message: str | None = None,
    **additional_context: Any,
) -> NoReturn:
    """Raise an error for a lookup that did not resolve to a record.

    When no message is given one is generated from the resource type and ID.
    """
    _raise(
        ErrorCode.RESOURCE_NOT_FOUND,
        service=service,
        operation=operation,
        message=message or f"{resource_type} with ID '{resource_id}' not found",
        correlation_id=correlation_id,
        details={
            "resource_type": resource_type,
            "resource_id": resource_id,
            **additional_context,
        },
    )


def raise_timeout_error(
    service: str,
    operation: str,
    timeout_seconds: float | None,
    message: str,
    correlation_id: UUID,
    **additional_context: Any,
) -> NoReturn:
    """Raise an error for an upstream call that did not answer in time."""
    _raise(
        ErrorCode.TIMEOUT,
        service=service,
        operation=operation,
        message=message,
        correlation_id=correlation_id,
        details={"timeout_seconds": timeout_seconds, **additional_context},
    )


def raise_connection_error(
    service: str,
    operation: str,
    target: str,
    message: str,
    correlation_id: UUID,
    **additional_context: Any,
) -> NoReturn:
    """Raise an error for an upstream that could not be reached."""
    _raise(
        ErrorCode.CONNECTION_ERROR,
        service=service,
        operation=operation,
        message=message,
        correlation_id=correlation_id,
        details={"target": target, **additional_context},
    )


def raise_external_service_error(
    service: str,
    operation: str,
    external_service: str,
    message: str,
    correlation_id: UUID,
    status_code: int | None = None,
    **additional_context: Any,
) -> NoReturn:
    """Raise an error for an upstream that answered with an error status."""
    details: dict[str, Any] = {"external_service": external_service}
    if status_code is not None:
        details["status_code"] = status_code
    details.update(additional_context)
    _raise(
        ErrorCode.EXTERNAL_SERVICE_ERROR,
        service=service,
        operation=operation,
        message=message,
        correlation_id=correlation_id,
        details=details,
    )


def raise_invalid_response(
    service: str,
    operation: str,
    external_service: str,
    message: str,
    correlation_id: UUID,
    **additional_context: Any,
) -> NoReturn:
    """Raise an error for an upstream body that could not be decoded."""
    _raise(
        ErrorCode.INVALID_RESPONSE,
        service=service,
        operation=operation,
        message=message,
        correlation_id=correlation_id,
        details={"external_service": external_service, **additional_context},
    )
