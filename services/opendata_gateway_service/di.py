"""Dependency Injection providers for the Open Data Gateway Service.

Provides Dishka DI container setup with APP-scoped infrastructure
and REQUEST-scoped context providers.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from uuid import UUID, uuid4

import httpx
from dishka import Provider, Scope, from_context, provide
from fastapi import Request
from prometheus_client import CollectorRegistry

from services.opendata_gateway_service.clients.core_client import CoreServiceClientImpl
from services.opendata_gateway_service.clients.map_client import MapServiceClientImpl
from services.opendata_gateway_service.config import GatewaySettings, settings
from services.opendata_gateway_service.config_accessor import (
    MapsApiKeyAccessor,
    MapsProviderConfig,
)
from services.opendata_gateway_service.metrics import GatewayMetrics
from services.opendata_gateway_service.protocols import (
    CoreServiceClientProtocol,
    MapServiceClientProtocol,
    MapsKeyAccessorProtocol,
)


class GatewayProvider(Provider):
    """Infrastructure provider for the Open Data Gateway Service.

    Provides APP-scoped dependencies: config, HTTP client, upstream clients,
    the maps-key accessor and metrics.
    """

    scope = Scope.APP

    @provide
    def get_config(self) -> GatewaySettings:
        """Provide settings singleton."""
        return settings

    @provide
    def get_metrics_registry(self) -> CollectorRegistry:
        """Provide a registry owned by this container."""
        return CollectorRegistry()

    @provide
    def get_metrics(self, registry: CollectorRegistry) -> GatewayMetrics:
        return GatewayMetrics(registry)

    @provide
    async def get_http_client(self, config: GatewaySettings) -> AsyncIterator[httpx.AsyncClient]:
        """Provide shared HTTP client with connection pooling."""
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(
                config.HTTP_CLIENT_TIMEOUT_SECONDS,
                connect=config.HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS,
            )
        ) as client:
            yield client

    @provide
    def provide_core_client(
        self, http_client: httpx.AsyncClient, config: GatewaySettings, metrics: GatewayMetrics
    ) -> CoreServiceClientProtocol:
        """Provide core service client singleton."""
        return CoreServiceClientImpl(http_client, config.CORE_SERVICE_URL, metrics)

    @provide
    def provide_map_client(
        self, http_client: httpx.AsyncClient, config: GatewaySettings, metrics: GatewayMetrics
    ) -> MapServiceClientProtocol:
        """Provide map service client singleton."""
        return MapServiceClientImpl(http_client, config.map_service_url, metrics)

    @provide
    def provide_maps_key_accessor(self, config: GatewaySettings) -> MapsKeyAccessorProtocol:
        """Provide the maps-key accessor, resolved once from settings."""
        return MapsApiKeyAccessor(MapsProviderConfig.from_settings(config))


class RequestContextProvider(Provider):
    """Request-scoped provider for correlation context."""

    request = from_context(provides=Request, scope=Scope.REQUEST)

    @provide(scope=Scope.REQUEST)
    def provide_correlation_id(self, request: Request) -> UUID:
        """Provide correlation ID from request state (set by CorrelationIDMiddleware)."""
        return getattr(request.state, "correlation_id", uuid4())
