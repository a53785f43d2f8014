"""Unit tests for map routes.

Most tests mock the map service with respx; forwarding of defaulted query
parameters is checked against a mocked client protocol.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from dishka import make_async_container
from dishka.integrations.fastapi import FastapiProvider
from httpx import ASGITransport, AsyncClient, Response
from respx import MockRouter

from services.opendata_gateway_service.api import map_routes
from services.opendata_gateway_service.protocols import MapServiceClientProtocol
from services.opendata_gateway_service.tests.test_provider import (
    CORRELATION_ID,
    MAP_URL,
    CorrelationTestProvider,
    InfrastructureTestProvider,
    build_test_app,
    make_test_settings,
)

PT1 = {
    "id": "hs-1",
    "name": "Art Gallery of Ontario",
    "latitude": 43.6536,
    "longitude": -79.3925,
    "type": "Gallery",
    "address": "317 Dundas St W",
}
PT2 = {
    "id": "hs-2",
    "name": "Royal Ontario Museum",
    "latitude": 43.6677,
    "longitude": -79.3948,
    "type": "Museum",
    "address": "100 Queens Park",
}


@pytest.fixture
def mocked_map_client() -> AsyncMock:
    mock = AsyncMock(spec=MapServiceClientProtocol)
    mock.get_nearby_map_points.return_value = []
    return mock


@pytest.fixture
async def mocked_client(mocked_map_client: AsyncMock) -> AsyncIterator[AsyncClient]:
    """Gateway client whose map service client is a mock."""
    container = make_async_container(
        InfrastructureTestProvider(map_client=mocked_map_client),
        CorrelationTestProvider(CORRELATION_ID),
        FastapiProvider(),
    )
    app = build_test_app(container)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    await container.close()


@pytest.mark.asyncio
async def test_get_all_map_points(client: AsyncClient, respx_mock: MockRouter) -> None:
    respx_mock.get(f"{MAP_URL}/api/map/points").mock(
        return_value=Response(200, json=[PT1, PT2])
    )

    response = await client.get("/api/map/points")

    assert response.status_code == 200
    assert response.json() == {
        "data": [PT1, PT2],
        "message": "Retrieved 2 map points",
        "status": "success",
    }


@pytest.mark.asyncio
async def test_get_geojson(client: AsyncClient, respx_mock: MockRouter) -> None:
    feature = {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [-79.3925, 43.6536]},
        "properties": {"id": "hs-1", "name": "Art Gallery of Ontario"},
    }
    respx_mock.get(f"{MAP_URL}/api/map/geojson").mock(
        return_value=Response(
            200, json={"type": "FeatureCollection", "features": [feature, feature, feature]}
        )
    )

    response = await client.get("/api/map/geojson")

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Retrieved GeoJSON data with 3 features"
    assert body["status"] == "success"
    assert body["data"]["type"] == "FeatureCollection"
    assert body["data"]["features"] == [feature, feature, feature]


@pytest.mark.asyncio
async def test_get_map_points_in_bounds(client: AsyncClient, respx_mock: MockRouter) -> None:
    route = respx_mock.get(f"{MAP_URL}/api/map/points/bounds").mock(
        return_value=Response(200, json=[PT1, PT2])
    )

    response = await client.get(
        "/api/map/points/bounds",
        params={"minLat": 43.6, "maxLat": 43.7, "minLon": -79.5, "maxLon": -79.3},
    )

    assert response.status_code == 200
    assert response.json() == {
        "data": [PT1, PT2],
        "message": "Retrieved 2 points within bounds",
        "status": "success",
    }
    params = route.calls.last.request.url.params
    assert float(params["minLat"]) == 43.6
    assert float(params["maxLon"]) == -79.3


@pytest.mark.asyncio
async def test_get_map_points_in_bounds_inverted_box_is_forwarded(
    client: AsyncClient, respx_mock: MockRouter
) -> None:
    route = respx_mock.get(f"{MAP_URL}/api/map/points/bounds").mock(
        return_value=Response(200, json=[])
    )

    response = await client.get(
        "/api/map/points/bounds",
        params={"minLat": 44.0, "maxLat": 43.0, "minLon": -79.3, "maxLon": -79.5},
    )

    assert response.status_code == 200
    assert response.json()["message"] == "Retrieved 0 points within bounds"
    params = route.calls.last.request.url.params
    assert float(params["minLat"]) == 44.0
    assert float(params["maxLat"]) == 43.0


@pytest.mark.asyncio
async def test_get_map_points_in_bounds_missing_param(client: AsyncClient) -> None:
    response = await client.get(
        "/api/map/points/bounds", params={"minLat": 43.6, "maxLat": 43.7, "minLon": -79.5}
    )

    assert response.status_code == 422
    body = response.json()
    assert body["status"] == "error"
    assert "data" not in body
    assert "maxLon" in body["message"]


@pytest.mark.asyncio
async def test_get_map_points_in_bounds_non_numeric_param(client: AsyncClient) -> None:
    response = await client.get(
        "/api/map/points/bounds",
        params={"minLat": "north", "maxLat": 43.7, "minLon": -79.5, "maxLon": -79.3},
    )

    assert response.status_code == 422
    body = response.json()
    assert body["status"] == "error"
    assert body["message"].startswith("Invalid request parameters: minLat")


@pytest.mark.asyncio
async def test_get_nearby_map_points(client: AsyncClient, respx_mock: MockRouter) -> None:
    route = respx_mock.get(f"{MAP_URL}/api/map/points/nearby").mock(
        return_value=Response(200, json=[PT1])
    )

    response = await client.get(
        "/api/map/points/nearby", params={"lat": 43.65, "lon": -79.38, "radiusKm": 2.5}
    )

    assert response.status_code == 200
    assert response.json() == {
        "data": [PT1],
        "message": "Retrieved 1 points within 2.5km radius",
        "status": "success",
    }
    assert float(route.calls.last.request.url.params["radiusKm"]) == 2.5


@pytest.mark.asyncio
async def test_get_nearby_map_points_default_radius(
    client: AsyncClient, respx_mock: MockRouter
) -> None:
    route = respx_mock.get(f"{MAP_URL}/api/map/points/nearby").mock(
        return_value=Response(200, json=[])
    )

    response = await client.get("/api/map/points/nearby", params={"lat": 43.65, "lon": -79.38})

    assert response.status_code == 200
    assert response.json()["message"] == "Retrieved 0 points within 5.0km radius"
    assert float(route.calls.last.request.url.params["radiusKm"]) == 5.0


@pytest.mark.asyncio
async def test_get_nearby_map_points_default_radius_reaches_client(
    mocked_client: AsyncClient, mocked_map_client: AsyncMock
) -> None:
    """Test the route hands the defaulted radius to the client protocol."""
    response = await mocked_client.get(
        "/api/map/points/nearby", params={"lat": 43.65, "lon": -79.38}
    )

    assert response.status_code == 200
    mocked_map_client.get_nearby_map_points.assert_awaited_once_with(
        lat=43.65, lon=-79.38, radius_km=5.0, correlation_id=CORRELATION_ID
    )


@pytest.mark.asyncio
async def test_get_nearby_map_points_missing_center(client: AsyncClient) -> None:
    response = await client.get("/api/map/points/nearby", params={"lat": 43.65})

    assert response.status_code == 422
    assert response.json()["status"] == "error"


@pytest.mark.asyncio
async def test_upstream_http_error_is_bad_gateway(
    client: AsyncClient, respx_mock: MockRouter
) -> None:
    respx_mock.get(f"{MAP_URL}/api/map/points").mock(return_value=Response(500))

    response = await client.get("/api/map/points")

    assert response.status_code == 502
    assert response.json() == {
        "message": "Upstream map_service returned an error",
        "status": "error",
    }


@pytest.mark.asyncio
async def test_upstream_connection_error_is_service_unavailable(
    client: AsyncClient, respx_mock: MockRouter
) -> None:
    respx_mock.get(f"{MAP_URL}/api/map/geojson").mock(
        side_effect=httpx.ConnectError("connection refused")
    )

    response = await client.get("/api/map/geojson")

    assert response.status_code == 503
    assert response.json() == {
        "message": "Failed to connect to upstream map_service",
        "status": "error",
    }


@pytest.mark.asyncio
async def test_upstream_timeout_is_gateway_timeout(
    client: AsyncClient, respx_mock: MockRouter
) -> None:
    respx_mock.get(f"{MAP_URL}/api/map/points/nearby").mock(
        side_effect=httpx.ReadTimeout("timed out")
    )

    response = await client.get("/api/map/points/nearby", params={"lat": 43.65, "lon": -79.38})

    assert response.status_code == 504
    assert response.json() == {
        "message": "Upstream map_service request timed out",
        "status": "error",
    }


@pytest.mark.asyncio
async def test_upstream_invalid_payload_is_bad_gateway(
    client: AsyncClient, respx_mock: MockRouter
) -> None:
    respx_mock.get(f"{MAP_URL}/api/map/points").mock(
        return_value=Response(200, content=b"<html>not json</html>")
    )

    response = await client.get("/api/map/points")

    assert response.status_code == 502
    assert response.json() == {
        "message": "Upstream map_service returned an invalid payload",
        "status": "error",
    }


@pytest.mark.asyncio
async def test_partial_map_points_are_returned_unchanged(
    client: AsyncClient, respx_mock: MockRouter
) -> None:
    """Test optional keys upstream left out are not added to the response."""
    partial = {"id": "hs-3", "latitude": 43.64, "longitude": -79.38}
    with_null = {**partial, "id": "hs-4", "name": None}
    respx_mock.get(f"{MAP_URL}/api/map/points/bounds").mock(
        return_value=Response(200, json=[partial, with_null])
    )

    response = await client.get(
        "/api/map/points/bounds",
        params={"minLat": 43.6, "maxLat": 43.7, "minLon": -79.5, "maxLon": -79.3},
    )

    assert response.status_code == 200
    assert response.json()["data"] == [partial, with_null]


@pytest.mark.asyncio
async def test_geojson_feature_without_properties_is_returned_unchanged(
    client: AsyncClient, respx_mock: MockRouter
) -> None:
    collection = {
        "type": "FeatureCollection",
        "features": [{"type": "Feature", "geometry": None}],
    }
    respx_mock.get(f"{MAP_URL}/api/map/geojson").mock(
        return_value=Response(200, json=collection)
    )

    response = await client.get("/api/map/geojson")

    assert response.json()["data"] == collection


@pytest.mark.asyncio
async def test_timeout_detail_uses_injected_settings(
    respx_mock: MockRouter, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test the reported timeout comes from the container's settings."""
    spy = MagicMock(wraps=map_routes.upstream_error_context)
    monkeypatch.setattr(map_routes, "upstream_error_context", spy)
    respx_mock.get(f"{MAP_URL}/api/map/points").mock(side_effect=httpx.ReadTimeout("timed out"))
    container = make_async_container(
        InfrastructureTestProvider(settings=make_test_settings(HTTP_CLIENT_TIMEOUT_SECONDS=1.5)),
        CorrelationTestProvider(CORRELATION_ID),
        FastapiProvider(),
    )
    app = build_test_app(container)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.get("/api/map/points")
    await container.close()

    assert response.status_code == 504
    assert spy.call_args.kwargs["timeout_seconds"] == 1.5
