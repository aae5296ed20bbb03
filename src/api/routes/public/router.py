"""Endpoints públicos consumidos pelo site."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from api.dependencies import ContextDep, JsonBodyDep
from app.domain.inquiry import InquirySubmission

router = APIRouter()


@router.get("/profile")
async def get_public_profile(context: ContextDep) -> dict[str, Any]:
    """Perfil salvo ou o perfil padrão antes da primeira edição."""
    return await context.content.public_profile()


@router.get("/schedule")
async def get_public_schedule(context: ContextDep) -> dict[str, Any]:
    return await context.content.schedule()


@router.post("/inquiry")
async def create_inquiry(body: JsonBodyDep, context: ContextDep) -> dict[str, bool]:
    """Salva a mensagem do visitante e notifica o treinador.

    Notificações são best-effort: falhas não alteram a resposta.
    """
    await context.inquiries.submit(InquirySubmission.model_validate(body))
    return {"ok": True}
