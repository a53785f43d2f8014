"""Shared utilities for the gateway's upstream HTTP clients."""

from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager
from uuid import UUID

from services.opendata_gateway_service.config import settings
from services.opendata_gateway_service.metrics import GatewayMetrics


def build_upstream_headers(correlation_id: UUID) -> dict[str, str]:
    """Build tracing headers for upstream service calls.

    Args:
        correlation_id: Request correlation ID for distributed tracing

    Returns:
        Headers dict with service ID and correlation ID
    """
    return {
        "Accept": "application/json",
        "X-Service-ID": settings.SERVICE_NAME,
        "X-Correlation-ID": str(correlation_id),
    }


@contextmanager
def observe_upstream_call(
    metrics: GatewayMetrics, service: str, operation: str
) -> Iterator[None]:
    """Count and time one upstream call; outcome is "error" if the block raises."""
    start = time.perf_counter()
    outcome = "error"
    try:
        yield
        outcome = "success"
    finally:
        metrics.upstream_calls_total.labels(
            service=service, operation=operation, outcome=outcome
        ).inc()
        metrics.upstream_call_duration_seconds.labels(
            service=service, operation=operation
        ).observe(time.perf_counter() - start)
