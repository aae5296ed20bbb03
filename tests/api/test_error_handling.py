"""Testes do mapeamento de erros e do correlation_id."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from app.bootstrap.context import AppContext
from app.infra.stores import MemorySiteStore
from tests.fakes.http import api_client, build_app
from utils.errors import StoreError


@pytest.mark.asyncio
async def test_correlation_id_is_echoed(app_context: AppContext) -> None:
    async with api_client(build_app(app_context)) as client:
        response = await client.get("/health", headers={"x-correlation-id": "req-42"})

    assert response.headers["x-correlation-id"] == "req-42"


@pytest.mark.asyncio
async def test_correlation_id_is_generated_when_absent_or_invalid(
    app_context: AppContext,
) -> None:
    async with api_client(build_app(app_context)) as client:
        generated = await client.get("/health")
        replaced = await client.get("/health", headers={"x-correlation-id": "bad id with spaces"})

    assert len(generated.headers["x-correlation-id"]) == 36
    assert replaced.headers["x-correlation-id"] != "bad id with spaces"


@pytest.mark.asyncio
async def test_unknown_route_is_not_found(app_context: AppContext) -> None:
    async with api_client(build_app(app_context)) as client:
        response = await client.get("/api/nope")

    assert response.status_code == 404
    assert response.json() == {"error": "Not found"}


@pytest.mark.asyncio
async def test_store_error_is_generic_500(
    app_context: AppContext, site_store: MemorySiteStore
) -> None:
    site_store.get_schedule = AsyncMock(side_effect=StoreError("Falha ao ler documento schedule"))

    async with api_client(build_app(app_context)) as client:
        response = await client.get("/api/public/schedule")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


@pytest.mark.asyncio
async def test_unexpected_error_is_internal_server_error(
    app_context: AppContext, site_store: MemorySiteStore
) -> None:
    site_store.get_profile = AsyncMock(side_effect=RuntimeError("boom"))

    async with api_client(build_app(app_context), raise_app_exceptions=False) as client:
        response = await client.get("/api/public/profile")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
