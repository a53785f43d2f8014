"""Unit tests for frontend configuration routes."""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from dishka import make_async_container
from dishka.integrations.fastapi import FastapiProvider
from httpx import ASGITransport, AsyncClient

from services.opendata_gateway_service.tests.test_provider import (
    MAPS_KEY,
    CorrelationTestProvider,
    InfrastructureTestProvider,
    build_test_app,
    make_test_settings,
)


@pytest.mark.asyncio
async def test_get_maps_key(client: AsyncClient) -> None:
    response = await client.get("/api/config/maps-key")

    assert response.status_code == 200
    assert response.json() == {
        "data": {"apiKey": MAPS_KEY},
        "message": "Google Maps API key retrieved",
        "status": "success",
    }


@pytest.fixture
async def unconfigured_client() -> AsyncIterator[AsyncClient]:
    """Gateway client started without a map-provider key."""
    container = make_async_container(
        InfrastructureTestProvider(settings=make_test_settings(GOOGLE_MAPS_API_KEY="")),
        CorrelationTestProvider(),
        FastapiProvider(),
    )
    app = build_test_app(container)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    await container.close()


@pytest.mark.asyncio
async def test_get_maps_key_unconfigured_returns_empty_key(
    unconfigured_client: AsyncClient,
) -> None:
    response = await unconfigured_client.get("/api/config/maps-key")

    assert response.status_code == 200
    assert response.json()["data"] == {"apiKey": ""}
    assert response.json()["status"] == "success"
