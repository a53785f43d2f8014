"""Metrics definitions for the Open Data Gateway Service."""

from __future__ import annotations

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram


class GatewayMetrics:
    """A container for all Prometheus metrics for the Open Data Gateway Service."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics with optional registry for test isolation."""
        if registry is None:
            registry = REGISTRY
        self.upstream_calls_total = Counter(
            "gateway_upstream_calls_total",
            "Total number of calls to upstream services.",
            ["service", "operation", "outcome"],
            registry=registry,
        )
        self.upstream_call_duration_seconds = Histogram(
            "gateway_upstream_call_duration_seconds",
            "Duration of calls to upstream services in seconds.",
            ["service", "operation"],
            registry=registry,
        )
