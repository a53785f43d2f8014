"""Core service HTTP client (cultural hotspots)."""

from __future__ import annotations

from urllib.parse import quote
from uuid import UUID

import httpx

from services.libs.opendata_service_libs.logging_utils import create_service_logger
from services.opendata_gateway_service.clients._utils import (
    build_upstream_headers,
    observe_upstream_call,
)
from services.opendata_gateway_service.dto.hotspot_v1 import CulturalHotSpotV1
from services.opendata_gateway_service.metrics import GatewayMetrics

logger = create_service_logger("opendata_gateway.core_client")

SERVICE_LABEL = "core_service"


class CoreServiceClientImpl:
    """HTTP client for the core service cultural hotspot API."""

    def __init__(
        self, http_client: httpx.AsyncClient, base_url: str, metrics: GatewayMetrics
    ) -> None:
        """Initialize with shared HTTP client.

        Args:
            http_client: Shared httpx AsyncClient instance
            base_url: Core service base URL, without trailing slash
            metrics: Gateway metrics container
        """
        self._client = http_client
        self._base_url = base_url.rstrip("/")
        self._metrics = metrics

    async def get_all_cultural_hotspots(
        self, correlation_id: UUID
    ) -> list[CulturalHotSpotV1]:
        """Get every cultural hotspot from the core service.

        Raises:
            httpx.HTTPStatusError: On HTTP errors from the core service
        """
        url = f"{self._base_url}/api/cultural-hotspots"

        logger.debug("Fetching cultural hotspots", correlation_id=str(correlation_id))

        with observe_upstream_call(self._metrics, SERVICE_LABEL, "get_all_cultural_hotspots"):
            response = await self._client.get(
                url, headers=build_upstream_headers(correlation_id)
            )
            response.raise_for_status()
            hotspots = [CulturalHotSpotV1.model_validate(h) for h in response.json()]

        logger.info(
            "Fetched cultural hotspots",
            hotspot_count=len(hotspots),
            correlation_id=str(correlation_id),
        )
        return hotspots

    async def get_cultural_hotspot_by_id(
        self, hotspot_id: str, correlation_id: UUID
    ) -> CulturalHotSpotV1 | None:
        """Get one cultural hotspot by its opaque identifier.

        Returns:
            The hotspot, or None if the core service answered with no body

        Raises:
            httpx.HTTPStatusError: On HTTP errors (including 404) from the core service
        """
        url = f"{self._base_url}/api/cultural-hotspots/{quote(hotspot_id, safe='')}"

        with observe_upstream_call(self._metrics, SERVICE_LABEL, "get_cultural_hotspot_by_id"):
            response = await self._client.get(
                url, headers=build_upstream_headers(correlation_id)
            )
            response.raise_for_status()
            payload = response.json() if response.content else None

        if payload is None:
            logger.info(
                "Core service returned no hotspot",
                hotspot_id=hotspot_id,
                correlation_id=str(correlation_id),
            )
            return None

        return CulturalHotSpotV1.model_validate(payload)
