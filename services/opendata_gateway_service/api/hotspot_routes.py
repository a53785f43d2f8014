"""Cultural hotspot routes.

Thin adapters over the core service: each route calls exactly one upstream
operation and wraps the result in the response envelope.
"""

from __future__ import annotations

from uuid import UUID

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter

from services.libs.opendata_service_libs.envelope import ApiResponse, success
from services.libs.opendata_service_libs.error_handling import (
    raise_resource_not_found,
    upstream_error_context,
)
from services.libs.opendata_service_libs.logging_utils import create_service_logger
from services.opendata_gateway_service.config import GatewaySettings
from services.opendata_gateway_service.dto.hotspot_v1 import CulturalHotSpotV1
from services.opendata_gateway_service.protocols import CoreServiceClientProtocol

router = APIRouter()
logger = create_service_logger("opendata_gateway.hotspot_routes")

SERVICE = "opendata_gateway_service"
UPSTREAM = "core_service"


@router.get(
    "",
    response_model=ApiResponse[list[CulturalHotSpotV1]],
    response_model_exclude_unset=True,
    summary="Get All Cultural Hotspots",
    description="Returns all cultural hotspot points of interest from Toronto Open Data.",
)
@inject
async def get_all_cultural_hotspots(
    core_client: FromDishka[CoreServiceClientProtocol],
    correlation_id: FromDishka[UUID],
    config: FromDishka[GatewaySettings],
) -> ApiResponse[list[CulturalHotSpotV1]]:
    with upstream_error_context(
        service=SERVICE,
        operation="get_all_cultural_hotspots",
        external_service=UPSTREAM,
        correlation_id=correlation_id,
        timeout_seconds=config.HTTP_CLIENT_TIMEOUT_SECONDS,
    ):
        hotspots = await core_client.get_all_cultural_hotspots(correlation_id)

    return success(hotspots, f"Retrieved {len(hotspots)} cultural hotspots")


@router.get(
    "/{hotspot_id}",
    response_model=ApiResponse[CulturalHotSpotV1],
    response_model_exclude_unset=True,
    summary="Get Cultural Hotspot by ID",
    description="Returns a specific cultural hotspot by its ID.",
    responses={404: {"description": "Cultural hotspot not found"}},
)
@inject
async def get_cultural_hotspot_by_id(
    hotspot_id: str,
    core_client: FromDishka[CoreServiceClientProtocol],
    correlation_id: FromDishka[UUID],
) -> ApiResponse[CulturalHotSpotV1]:
    """Look up one hotspot.

    Any failure reaching or decoding the upstream answer is reported as 404,
    the same as a missing record. The cause is logged only.
    """
    try:
        hotspot = await core_client.get_cultural_hotspot_by_id(hotspot_id, correlation_id)
    except Exception as e:
        logger.warning(
            "Cultural hotspot lookup failed",
            hotspot_id=hotspot_id,
            error_type=type(e).__name__,
            error=str(e),
            correlation_id=str(correlation_id),
        )
        hotspot = None

    if hotspot is None:
        raise_resource_not_found(
            service=SERVICE,
            operation="get_cultural_hotspot_by_id",
            resource_type="Cultural hotspot",
            resource_id=hotspot_id,
            correlation_id=correlation_id,
            message=f"Cultural hotspot not found with id: {hotspot_id}",
        )

    return success(hotspot, "Cultural hotspot retrieved successfully")
