"""Protocol definitions for the Open Data Gateway Service.

One capability interface per upstream domain, plus the static configuration
accessor. Route handlers depend on these protocols, never on implementations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from services.opendata_gateway_service.dto.config_v1 import MapsApiKeyV1
    from services.opendata_gateway_service.dto.hotspot_v1 import CulturalHotSpotV1
    from services.opendata_gateway_service.dto.map_v1 import (
        GeoJsonFeatureCollectionV1,
        MapPointV1,
    )


class CoreServiceClientProtocol(Protocol):
    """Protocol for the core (cultural hotspot) service HTTP client."""

    async def get_all_cultural_hotspots(
        self, correlation_id: UUID
    ) -> list[CulturalHotSpotV1]:
        """GET /api/cultural-hotspots."""
        ...

    async def get_cultural_hotspot_by_id(
        self, hotspot_id: str, correlation_id: UUID
    ) -> CulturalHotSpotV1 | None:
        """GET /api/cultural-hotspots/{id}.

        Returns:
            The hotspot, or None when upstream answers with an empty body
        """
        ...


class MapServiceClientProtocol(Protocol):
    """Protocol for the map service HTTP client."""

    async def get_all_map_points(self, correlation_id: UUID) -> list[MapPointV1]:
        """GET /api/map/points."""
        ...

    async def get_geojson(self, correlation_id: UUID) -> GeoJsonFeatureCollectionV1:
        """GET /api/map/geojson."""
        ...

    async def get_map_points_in_bounds(
        self,
        min_lat: float,
        max_lat: float,
        min_lon: float,
        max_lon: float,
        correlation_id: UUID,
    ) -> list[MapPointV1]:
        """GET /api/map/points/bounds?minLat=&maxLat=&minLon=&maxLon=."""
        ...

    async def get_nearby_map_points(
        self,
        lat: float,
        lon: float,
        radius_km: float,
        correlation_id: UUID,
    ) -> list[MapPointV1]:
        """GET /api/map/points/nearby?lat=&lon=&radiusKm=."""
        ...


class MapsKeyAccessorProtocol(Protocol):
    """Protocol for the static map-provider key accessor."""

    def get_maps_key(self) -> MapsApiKeyV1:
        """Return the configured map-provider API key."""
        ...
