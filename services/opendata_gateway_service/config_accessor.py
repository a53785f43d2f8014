"""Static configuration accessor exposing the map-provider API key."""

from __future__ import annotations

from dataclasses import dataclass

from services.opendata_gateway_service.config import GatewaySettings
from services.opendata_gateway_service.dto.config_v1 import MapsApiKeyV1


@dataclass(frozen=True)
class MapsProviderConfig:
    """Map-provider settings resolved once at startup."""

    api_key: str = ""

    @classmethod
    def from_settings(cls, settings: GatewaySettings) -> MapsProviderConfig:
        return cls(api_key=settings.GOOGLE_MAPS_API_KEY.get_secret_value())


class MapsApiKeyAccessor:
    """Hands the configured map-provider key to the frontend.

    Only expose this when the key is restricted to the frontend's domains.
    """

    def __init__(self, config: MapsProviderConfig) -> None:
        self._key = MapsApiKeyV1(api_key=config.api_key)

    def get_maps_key(self) -> MapsApiKeyV1:
        return self._key
