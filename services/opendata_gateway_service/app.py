"""Open Data Gateway Service - Backend-for-Frontend over the Toronto Open Data services.

Exposes cultural hotspot, map and frontend-configuration endpoints and forwards
each request to the core or map service, wrapping every answer in the uniform
response envelope.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from services.libs.opendata_service_libs.error_handling.fastapi import (
    register_error_handlers as register_fastapi_error_handlers,
)
from services.libs.opendata_service_libs.logging_utils import (
    configure_service_logging,
    create_service_logger,
)
from services.opendata_gateway_service.api.config_routes import router as config_router
from services.opendata_gateway_service.api.health_routes import router as health_router
from services.opendata_gateway_service.api.hotspot_routes import router as hotspot_router
from services.opendata_gateway_service.api.map_routes import router as map_router
from services.opendata_gateway_service.config import settings
from services.opendata_gateway_service.di import GatewayProvider, RequestContextProvider
from services.opendata_gateway_service.middleware import CorrelationIDMiddleware

logger = create_service_logger("opendata_gateway_service")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info(
        "Starting Open Data Gateway Service",
        environment=settings.ENVIRONMENT.value,
        core_service_url=settings.CORE_SERVICE_URL,
        map_service_url=settings.map_service_url,
        maps_key_configured=bool(settings.GOOGLE_MAPS_API_KEY.get_secret_value()),
    )
    yield
    # Closes the pooled httpx client along with every other APP-scoped resource
    await app.state.di_container.close()
    logger.info("Open Data Gateway Service stopped")


def include_routers(app: FastAPI) -> None:
    """Mount the health and /api routers."""
    app.include_router(health_router)
    app.include_router(
        hotspot_router, prefix="/api/cultural-hotspots", tags=["Cultural Hotspots"]
    )
    app.include_router(map_router, prefix="/api/map", tags=["Map"])
    app.include_router(config_router, prefix="/api/config", tags=["Configuration"])


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_service_logging(
        settings.SERVICE_NAME,
        environment=settings.ENVIRONMENT.value,
        log_level=settings.LOG_LEVEL,
    )

    app = FastAPI(
        title=settings.SERVICE_NAME,
        version=settings.SERVICE_VERSION,
        description="Open Data Gateway - BFF layer for the cultural hotspots map frontend",
        docs_url="/docs" if settings.is_development() else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.is_development() else None,
        lifespan=lifespan,
    )

    # Register error handlers
    register_fastapi_error_handlers(app)

    # Add Correlation ID Middleware
    app.add_middleware(CorrelationIDMiddleware)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )

    include_routers(app)

    # Setup Dishka DI container
    container = make_async_container(
        GatewayProvider(),
        RequestContextProvider(),
        FastapiProvider(),
    )
    setup_dishka(container, app)
    app.state.di_container = container

    return app


# Create application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "services.opendata_gateway_service.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
        log_level=settings.LOG_LEVEL.lower(),
    )
