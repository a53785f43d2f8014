"""Open Data Gateway clients module.

Contains HTTP clients for the upstream core and map services.
"""

from services.opendata_gateway_service.clients.core_client import CoreServiceClientImpl
from services.opendata_gateway_service.clients.map_client import MapServiceClientImpl

__all__ = ["CoreServiceClientImpl", "MapServiceClientImpl"]
