"""Health and metrics routes for the Open Data Gateway Service."""

from __future__ import annotations

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest

from services.opendata_gateway_service.config import GatewaySettings

router = APIRouter(tags=["Health"])


@router.get("/healthz")
@inject
async def health_check(config: FromDishka[GatewaySettings]) -> dict[str, str | dict]:
    """Liveness check. Upstreams are only contacted on real requests."""
    return {
        "service": "opendata_gateway_service",
        "status": "healthy",
        "message": "Open Data Gateway Service is healthy",
        "version": config.SERVICE_VERSION,
        "environment": config.ENVIRONMENT.value,
        "dependencies": {
            "core_service": {"url": config.CORE_SERVICE_URL},
            "map_service": {"url": config.map_service_url},
        },
    }


@router.get("/metrics", response_class=PlainTextResponse)
@inject
async def metrics(registry: FromDishka[CollectorRegistry]) -> PlainTextResponse:
    """Prometheus metrics endpoint."""
    return PlainTextResponse(content=generate_latest(registry), media_type=CONTENT_TYPE_LATEST)
