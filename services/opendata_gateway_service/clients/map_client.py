"""Map service HTTP client (map points and GeoJSON)."""

from __future__ import annotations

from typing import Any
from uuid import UUID

import httpx

from services.libs.opendata_service_libs.logging_utils import create_service_logger
from services.opendata_gateway_service.clients._utils import (
    build_upstream_headers,
    observe_upstream_call,
)
from services.opendata_gateway_service.dto.map_v1 import GeoJsonFeatureCollectionV1, MapPointV1
from services.opendata_gateway_service.metrics import GatewayMetrics

logger = create_service_logger("opendata_gateway.map_client")

SERVICE_LABEL = "map_service"


class MapServiceClientImpl:
    """HTTP client for the map service API."""

    def __init__(
        self, http_client: httpx.AsyncClient, base_url: str, metrics: GatewayMetrics
    ) -> None:
        """Initialize with shared HTTP client.

        Args:
            http_client: Shared httpx AsyncClient instance
            base_url: Map service base URL, without trailing slash
            metrics: Gateway metrics container
        """
        self._client = http_client
        self._base_url = base_url.rstrip("/")
        self._metrics = metrics

    async def _get_json(
        self,
        operation: str,
        path: str,
        correlation_id: UUID,
        params: dict[str, float] | None = None,
    ) -> Any:
        with observe_upstream_call(self._metrics, SERVICE_LABEL, operation):
            response = await self._client.get(
                f"{self._base_url}{path}",
                params=params,
                headers=build_upstream_headers(correlation_id),
            )
            response.raise_for_status()
            return response.json()

    async def _get_points(
        self,
        operation: str,
        path: str,
        correlation_id: UUID,
        params: dict[str, float] | None = None,
    ) -> list[MapPointV1]:
        payload = await self._get_json(operation, path, correlation_id, params)
        points = [MapPointV1.model_validate(p) for p in payload]
        logger.info(
            "Fetched map points",
            operation=operation,
            point_count=len(points),
            correlation_id=str(correlation_id),
        )
        return points

    async def get_all_map_points(self, correlation_id: UUID) -> list[MapPointV1]:
        """Get every hotspot as a simple map point.

        Raises:
            httpx.HTTPStatusError: On HTTP errors from the map service
        """
        return await self._get_points("get_all_map_points", "/api/map/points", correlation_id)

    async def get_geojson(self, correlation_id: UUID) -> GeoJsonFeatureCollectionV1:
        """Get hotspots as a GeoJSON FeatureCollection.

        Raises:
            httpx.HTTPStatusError: On HTTP errors from the map service
        """
        payload = await self._get_json("get_geojson", "/api/map/geojson", correlation_id)
        collection = GeoJsonFeatureCollectionV1.model_validate(payload)
        logger.info(
            "Fetched GeoJSON feature collection",
            feature_count=len(collection.features),
            correlation_id=str(correlation_id),
        )
        return collection

    async def get_map_points_in_bounds(
        self,
        min_lat: float,
        max_lat: float,
        min_lon: float,
        max_lon: float,
        correlation_id: UUID,
    ) -> list[MapPointV1]:
        """Get map points inside a bounding box.

        The box is forwarded as given; an inverted box is not corrected.

        Raises:
            httpx.HTTPStatusError: On HTTP errors from the map service
        """
        return await self._get_points(
            "get_map_points_in_bounds",
            "/api/map/points/bounds",
            correlation_id,
            params={
                "minLat": min_lat,
                "maxLat": max_lat,
                "minLon": min_lon,
                "maxLon": max_lon,
            },
        )

    async def get_nearby_map_points(
        self,
        lat: float,
        lon: float,
        radius_km: float,
        correlation_id: UUID,
    ) -> list[MapPointV1]:
        """Get map points within radius_km of a center point.

        Raises:
            httpx.HTTPStatusError: On HTTP errors from the map service
        """
        return await self._get_points(
            "get_nearby_map_points",
            "/api/map/points/nearby",
            correlation_id,
            params={"lat": lat, "lon": lon, "radiusKm": radius_km},
        )
