"""Login do admin: troca email + senha por bearer token."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter

from api.dependencies import ContextDep, JsonBodyDep
from api.routes.auth.models import LoginRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login")
async def login(body: JsonBodyDep, context: ContextDep) -> dict[str, str]:
    """Emite token de 7 dias.

    401 para credenciais erradas; 500 quando admin ou JWT_SECRET não
    estão configurados.
    """
    credentials = LoginRequest.model_validate(body)
    # pbkdf2 é CPU-bound; fora do event loop
    admin_email = await asyncio.to_thread(
        context.credentials.verify,
        credentials.identity,
        credentials.password,
    )
    token = context.tokens.issue(admin_email)
    logger.info("admin_login_succeeded", extra={"component": "auth"})
    return {"token": token}
