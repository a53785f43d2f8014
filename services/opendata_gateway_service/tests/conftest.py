"""Shared fixtures for Open Data Gateway Service tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from uuid import UUID

import pytest
from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider
from httpx import ASGITransport, AsyncClient

from services.opendata_gateway_service.tests.test_provider import (
    CORRELATION_ID,
    CorrelationTestProvider,
    InfrastructureTestProvider,
    build_test_app,
)


@pytest.fixture
def correlation_id() -> UUID:
    return CORRELATION_ID


@pytest.fixture
async def container() -> AsyncIterator[AsyncContainer]:
    """Container wired to real clients; upstream hosts are mocked with respx."""
    container = make_async_container(
        InfrastructureTestProvider(),
        CorrelationTestProvider(CORRELATION_ID),
        FastapiProvider(),
    )
    yield container
    await container.close()


@pytest.fixture
async def client(container: AsyncContainer) -> AsyncIterator[AsyncClient]:
    """In-process client for the gateway routes."""
    app = build_test_app(container)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
