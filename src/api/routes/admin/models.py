"""Modelos de request do dashboard."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class ScheduleUpdateRequest(BaseModel):
    """`items` chega cru; normalização fica com o domínio."""

    model_config = ConfigDict(extra="ignore")

    items: Any = None
