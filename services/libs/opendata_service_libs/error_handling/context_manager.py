"""Translate upstream HTTP failures into structured gateway errors."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from uuid import UUID

import httpx

from services.libs.opendata_service_libs.error_handling.factories import (
    raise_connection_error,
    raise_external_service_error,
    raise_invalid_response,
    raise_timeout_error,
)
from services.libs.opendata_service_libs.logging_utils import create_service_logger

logger = create_service_logger("error_handling.upstream")


@contextmanager
def upstream_error_context(
    *,
    service: str,
    operation: str,
    external_service: str,
    correlation_id: UUID,
    timeout_seconds: float | None = None,
) -> Iterator[None]:
    """Map httpx and payload-decoding failures raised in the block.

    - timeouts -> TIMEOUT
    - connection and other transport failures -> CONNECTION_ERROR
    - non-2xx upstream status -> EXTERNAL_SERVICE_ERROR
    - undecodable or schema-violating body -> INVALID_RESPONSE

    Anything else propagates unchanged.
    """
    try:
        yield
    except httpx.TimeoutException as e:
        logger.error(
            "Upstream service timeout",
            external_service=external_service,
            operation=operation,
            error=str(e),
            correlation_id=str(correlation_id),
        )
        raise_timeout_error(
            service=service,
            operation=operation,
            timeout_seconds=timeout_seconds,
            message=f"Upstream {external_service} request timed out",
            correlation_id=correlation_id,
        )
    except httpx.TransportError as e:
        logger.error(
            "Upstream service connection error",
            external_service=external_service,
            operation=operation,
            error=str(e),
            correlation_id=str(correlation_id),
        )
        raise_connection_error(
            service=service,
            operation=operation,
            target=external_service,
            message=f"Failed to connect to upstream {external_service}",
            correlation_id=correlation_id,
        )
    except httpx.HTTPStatusError as e:
        logger.error(
            "Upstream service error",
            external_service=external_service,
            operation=operation,
            status_code=e.response.status_code,
            correlation_id=str(correlation_id),
        )
        raise_external_service_error(
            service=service,
            operation=operation,
            external_service=external_service,
            message=f"Upstream {external_service} returned an error",
            correlation_id=correlation_id,
            status_code=e.response.status_code,
        )
    except ValueError as e:
        # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
        logger.error(
            "Upstream service returned an undecodable payload",
            external_service=external_service,
            operation=operation,
            error=str(e),
            correlation_id=str(correlation_id),
        )
        raise_invalid_response(
            service=service,
            operation=operation,
            external_service=external_service,
            message=f"Upstream {external_service} returned an invalid payload",
            correlation_id=correlation_id,
        )
