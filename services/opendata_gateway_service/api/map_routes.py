"""Map routes for visualizing Toronto cultural hotspots.

Query parameters are bound and coerced by FastAPI; no range checks are made,
so an inverted bounding box reaches the map service unchanged.
"""

from __future__ import annotations

from uuid import UUID

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Query

from services.libs.opendata_service_libs.envelope import ApiResponse, success
from services.libs.opendata_service_libs.error_handling import upstream_error_context
from services.opendata_gateway_service.config import GatewaySettings
from services.opendata_gateway_service.dto.map_v1 import GeoJsonFeatureCollectionV1, MapPointV1
from services.opendata_gateway_service.protocols import MapServiceClientProtocol

router = APIRouter()

SERVICE = "opendata_gateway_service"
UPSTREAM = "map_service"
DEFAULT_RADIUS_KM = 5.0


def _map_service_errors(operation: str, correlation_id: UUID, config: GatewaySettings):
    return upstream_error_context(
        service=SERVICE,
        operation=operation,
        external_service=UPSTREAM,
        correlation_id=correlation_id,
        timeout_seconds=config.HTTP_CLIENT_TIMEOUT_SECONDS,
    )


@router.get(
    "/points",
    response_model=ApiResponse[list[MapPointV1]],
    response_model_exclude_unset=True,
    summary="Get all map points",
    description="Returns all cultural hotspots with coordinates as simple map points.",
)
@inject
async def get_all_map_points(
    map_client: FromDishka[MapServiceClientProtocol],
    correlation_id: FromDishka[UUID],
    config: FromDishka[GatewaySettings],
) -> ApiResponse[list[MapPointV1]]:
    with _map_service_errors("get_all_map_points", correlation_id, config):
        points = await map_client.get_all_map_points(correlation_id)

    return success(points, f"Retrieved {len(points)} map points")


@router.get(
    "/geojson",
    response_model=ApiResponse[GeoJsonFeatureCollectionV1],
    response_model_exclude_unset=True,
    summary="Get GeoJSON FeatureCollection",
    description=(
        "Returns cultural hotspots in GeoJSON format compatible with Leaflet, "
        "Mapbox, Google Maps, etc."
    ),
)
@inject
async def get_geojson(
    map_client: FromDishka[MapServiceClientProtocol],
    correlation_id: FromDishka[UUID],
    config: FromDishka[GatewaySettings],
) -> ApiResponse[GeoJsonFeatureCollectionV1]:
    with _map_service_errors("get_geojson", correlation_id, config):
        geojson = await map_client.get_geojson(correlation_id)

    return success(geojson, f"Retrieved GeoJSON data with {len(geojson.features)} features")


@router.get(
    "/points/bounds",
    response_model=ApiResponse[list[MapPointV1]],
    response_model_exclude_unset=True,
    summary="Get map points within bounding box",
    description="Returns cultural hotspots within the specified geographic bounds.",
)
@inject
async def get_map_points_in_bounds(
    map_client: FromDishka[MapServiceClientProtocol],
    correlation_id: FromDishka[UUID],
    config: FromDishka[GatewaySettings],
    min_lat: float = Query(..., alias="minLat", description="Minimum latitude"),
    max_lat: float = Query(..., alias="maxLat", description="Maximum latitude"),
    min_lon: float = Query(..., alias="minLon", description="Minimum longitude"),
    max_lon: float = Query(..., alias="maxLon", description="Maximum longitude"),
) -> ApiResponse[list[MapPointV1]]:
    with _map_service_errors("get_map_points_in_bounds", correlation_id, config):
        points = await map_client.get_map_points_in_bounds(
            min_lat=min_lat,
            max_lat=max_lat,
            min_lon=min_lon,
            max_lon=max_lon,
            correlation_id=correlation_id,
        )

    return success(points, f"Retrieved {len(points)} points within bounds")


@router.get(
    "/points/nearby",
    response_model=ApiResponse[list[MapPointV1]],
    response_model_exclude_unset=True,
    summary="Get nearby map points",
    description=(
        "Returns cultural hotspots within specified radius (in kilometers) from a center point."
    ),
)
@inject
async def get_nearby_map_points(
    map_client: FromDishka[MapServiceClientProtocol],
    correlation_id: FromDishka[UUID],
    config: FromDishka[GatewaySettings],
    lat: float = Query(..., description="Center latitude"),
    lon: float = Query(..., description="Center longitude"),
    radius_km: float = Query(
        DEFAULT_RADIUS_KM,
        alias="radiusKm",
        description="Radius in kilometers",
        examples=[5.0],
    ),
) -> ApiResponse[list[MapPointV1]]:
    with _map_service_errors("get_nearby_map_points", correlation_id, config):
        points = await map_client.get_nearby_map_points(
            lat=lat, lon=lon, radius_km=radius_km, correlation_id=correlation_id
        )

    return success(points, f"Retrieved {len(points)} points within {radius_km}km radius")
