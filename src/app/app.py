"""Entrypoint da aplicação do site do treinador.

Este módulo é o ponto de entrada principal do serviço.
Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    STORE_BACKEND=memory uvicorn app.app:app --reload --port 8080
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.errors import register_exception_handlers
from api.middleware import correlation_id_middleware
from api.routes import create_api_router
from app.bootstrap import build_app_context, initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.bootstrap import AppContext

# Inicializar logging ANTES de qualquer uso de logger
initialize_app()

logger = get_logger(__name__)


def create_app(context: AppContext | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        context: AppContext pronto (testes). Sem ele, o lifespan valida as
            settings e monta o contexto a partir do ambiente.

    Returns:
        Aplicação FastAPI configurada.
    """

    @asynccontextmanager
    async def lifespan(fastapi_app: FastAPI) -> AsyncGenerator[None, None]:
        service_name = get_base_settings().service_name
        logger.info("app_starting", extra={"service": service_name})
        if getattr(fastapi_app.state, "context", None) is None:
            validate_runtime_settings()
            fastapi_app.state.context = build_app_context()

        yield

        logger.info("app_shutting_down", extra={"service": service_name})

    base_settings = context.base_settings if context is not None else get_base_settings()

    fastapi_app = FastAPI(
        title="Trainer Site",
        description="Backend do site do treinador: perfil, agenda e contatos",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None if base_settings.is_production else "/docs",
        redoc_url=None,
        openapi_url=None if base_settings.is_production else "/openapi.json",
    )
    fastapi_app.state.context = context

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=base_settings.cors_origins_list,
        allow_credentials="*" not in base_settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    fastapi_app.middleware("http")(correlation_id_middleware)

    register_exception_handlers(fastapi_app)
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": base_settings.service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("starting_development_server")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8080")),
        reload=True,
    )


if __name__ == "__main__":
    main()
