"""Endpoints do dashboard (exigem token de admin)."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from api.dependencies import ContextDep, JsonBodyDep, require_admin
from api.routes.admin.models import ScheduleUpdateRequest
from app.domain.profile import ProfileUpdate

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/profile")
async def get_admin_profile(context: ContextDep) -> dict[str, Any]:
    return await context.content.admin_profile()


@router.put("/profile")
async def update_profile(body: JsonBodyDep, context: ContextDep) -> dict[str, bool]:
    await context.content.update_profile(ProfileUpdate.model_validate(body))
    return {"ok": True}


@router.get("/schedule")
async def get_admin_schedule(context: ContextDep) -> dict[str, Any]:
    return await context.content.schedule()


@router.put("/schedule")
async def update_schedule(body: JsonBodyDep, context: ContextDep) -> dict[str, bool]:
    request = ScheduleUpdateRequest.model_validate(body)
    await context.content.update_schedule(request.items)
    return {"ok": True}


@router.get("/inquiries")
async def list_inquiries(context: ContextDep, limit: str | None = None) -> dict[str, Any]:
    """Inquiries mais recentes primeiro; `limit` padrão 25, máximo 100."""
    items = await context.content.recent_inquiries(limit)
    return {"items": items}
