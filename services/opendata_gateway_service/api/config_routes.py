"""Frontend configuration routes."""

from __future__ import annotations

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter

from services.libs.opendata_service_libs.envelope import ApiResponse, success
from services.opendata_gateway_service.dto.config_v1 import MapsApiKeyV1
from services.opendata_gateway_service.protocols import MapsKeyAccessorProtocol

router = APIRouter()


@router.get(
    "/maps-key",
    response_model=ApiResponse[MapsApiKeyV1],
    summary="Get Google Maps API Key",
    description=(
        "Returns the Google Maps API key for frontend use. "
        "Ensure your API key has domain restrictions."
    ),
)
@inject
async def get_google_maps_api_key(
    accessor: FromDishka[MapsKeyAccessorProtocol],
) -> ApiResponse[MapsApiKeyV1]:
    return success(accessor.get_maps_key(), "Google Maps API key retrieved")
