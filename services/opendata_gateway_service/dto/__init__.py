"""Open Data Gateway DTO module.

Contains the records proxied from upstream services and the response envelope.
"""

from services.libs.opendata_service_libs.envelope import ApiResponse, ResponseStatus
from services.opendata_gateway_service.dto.config_v1 import MapsApiKeyV1
from services.opendata_gateway_service.dto.hotspot_v1 import (
    CulturalHotSpotV1,
    GeoPointV1,
    MultiPointV1,
)
from services.opendata_gateway_service.dto.map_v1 import (
    GeoJsonFeatureCollectionV1,
    GeoJsonFeatureV1,
    MapPointV1,
)

__all__ = [
    "ApiResponse",
    "CulturalHotSpotV1",
    "GeoJsonFeatureCollectionV1",
    "GeoJsonFeatureV1",
    "GeoPointV1",
    "MapPointV1",
    "MapsApiKeyV1",
    "MultiPointV1",
    "ResponseStatus",
]
