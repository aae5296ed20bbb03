"""Mapeamento de exceções para respostas `{"error": <mensagem>}`.

Uso:
    from api.errors import register_exception_handlers

    register_exception_handlers(app)
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from utils.errors import ConfigurationError, SiteError

logger = logging.getLogger(__name__)

INVALID_BODY = "Invalid request body"
SERVER_MISCONFIGURED = "Server misconfigured"
INTERNAL_ERROR = "Internal server error"
NOT_FOUND = "Not found"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def handle_site_error(request: Request, exc: SiteError) -> JSONResponse:
    if isinstance(exc, ConfigurationError):
        # Detalhe vai para o log; o cliente recebe mensagem genérica
        logger.error(
            "server_misconfigured",
            extra={"path": request.url.path, "detail": exc.message},
        )
        return error_response(exc.status_code, SERVER_MISCONFIGURED)

    if exc.status_code >= 500:
        logger.error(
            "request_failed",
            extra={"path": request.url.path, "error_type": type(exc).__name__},
        )
        return error_response(exc.status_code, INTERNAL_ERROR)
    return error_response(exc.status_code, exc.message)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(
        "invalid_request_body",
        extra={"path": request.url.path, "error_count": len(exc.errors())},
    )
    return error_response(400, INVALID_BODY)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = NOT_FOUND if exc.status_code == 404 else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled_exception",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return error_response(500, INTERNAL_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SiteError, handle_site_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected)
