"""Dependências FastAPI compartilhadas pelos routers."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import Body, Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.bootstrap.context import AppContext
from app.services import AdminClaims
from app.services.session_tokens import MISSING_TOKEN
from utils.errors import ConfigurationError, MissingCredentialError

# auto_error=False: a ausência vira MissingCredentialError ({"error": ...})
bearer_scheme = HTTPBearer(auto_error=False)


def get_app_context(request: Request) -> AppContext:
    context = getattr(request.app.state, "context", None)
    if context is None:
        raise ConfigurationError("AppContext not initialized")
    return context


ContextDep = Annotated[AppContext, Depends(get_app_context)]


async def json_object_body(payload: Annotated[Any, Body()] = None) -> dict[str, Any]:
    """Corpo da request como objeto JSON.

    Sem corpo, array, escalar ou form viram `{}`; a validação de campos
    obrigatórios fica com o domínio, que devolve a mensagem certa.
    JSON malformado continua sendo 400 "Invalid request body".
    """
    return payload if isinstance(payload, dict) else {}


JsonBodyDep = Annotated[dict[str, Any], Depends(json_object_body)]


async def require_admin(
    context: ContextDep,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> AdminClaims:
    """Exige `Authorization: Bearer <token>` com papel admin.

    Raises:
        MissingCredentialError: Header ausente ou sem esquema Bearer.
        AuthenticationError: Token inválido ou expirado.
    """
    if credentials is None:
        raise MissingCredentialError(MISSING_TOKEN)
    return context.tokens.verify(credentials.credentials)


AdminDep = Annotated[AdminClaims, Depends(require_admin)]
