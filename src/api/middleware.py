"""Middleware de correlation_id.

Lê `x-correlation-id` do request (ou gera um), disponibiliza via ContextVar
para os logs e devolve o mesmo valor no header da resposta.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.observability import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from fastapi import Request, Response


async def correlation_id_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    correlation_id = get_correlation_id()
    try:
        response = await call_next(request)
    finally:
        reset_correlation_id(token)
    response.headers[CORRELATION_ID_HEADER] = correlation_id
    return response
