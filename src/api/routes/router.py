"""Agregador de rotas: registra todos os routers da API.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.admin.router import router as admin_router
from api.routes.auth.router import router as auth_router
from api.routes.health.router import router as health_router
from api.routes.pages.router import router as pages_router
from api.routes.public.router import router as public_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    # Site público
    api_router.include_router(public_router, prefix="/api/public", tags=["public"])

    # Login do admin e dashboard
    api_router.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    api_router.include_router(admin_router, prefix="/api/admin", tags=["admin"])

    # Páginas HTML do painel
    api_router.include_router(pages_router, tags=["pages"])

    return api_router
