"""Páginas HTML do painel (login e dashboard)."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse, JSONResponse, Response

from api.dependencies import ContextDep
from api.errors import NOT_FOUND

router = APIRouter()


def _page_response(static_dir: str, filename: str) -> Response:
    page_path = Path(static_dir) / filename
    if not page_path.is_file():
        return JSONResponse(status_code=404, content={"error": NOT_FOUND})
    return FileResponse(page_path, media_type="text/html")


@router.get("/login", include_in_schema=False)
async def login_page(context: ContextDep) -> Response:
    return _page_response(context.base_settings.static_dir, "login.html")


@router.get("/dashboard", include_in_schema=False)
async def dashboard_page(context: ContextDep) -> Response:
    return _page_response(context.base_settings.static_dir, "dashboard.html")
