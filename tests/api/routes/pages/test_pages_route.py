"""Testes das páginas HTML do painel."""

from __future__ import annotations

from pathlib import Path

import pytest

from app.bootstrap.context import AppContext
from tests.fakes.http import api_client, build_app


@pytest.mark.asyncio
async def test_serves_login_page_from_static_dir(app_context: AppContext, tmp_path: Path) -> None:
    (tmp_path / "login.html").write_text("<h1>login</h1>", encoding="utf-8")

    async with api_client(build_app(app_context)) as client:
        response = await client.get("/login")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "<h1>login</h1>" in response.text


@pytest.mark.asyncio
async def test_missing_page_is_not_found(app_context: AppContext) -> None:
    async with api_client(build_app(app_context)) as client:
        response = await client.get("/dashboard")

    assert response.status_code == 404
    assert response.json() == {"error": "Not found"}
