"""Schedule - agenda semanal do treinador (documento singleton)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domain._coercion import as_trimmed_text
from app.domain.clock import utc_now_iso


class ScheduleItem(BaseModel):
    """Um horário da agenda: dia, hora e local, todos texto livre."""

    model_config = ConfigDict(extra="ignore")

    day: str = ""
    time: str = ""
    location: str = ""

    @field_validator("day", "time", "location", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return as_trimmed_text(value)

    @property
    def is_complete(self) -> bool:
        return bool(self.day and self.time)


class Schedule(BaseModel):
    """Agenda armazenada. Sem documento, a leitura é `{"items": []}`."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    items: list[ScheduleItem] = Field(default_factory=list)
    updated_at: str | None = Field(default=None, alias="updatedAt")

    @field_validator("items", mode="before")
    @classmethod
    def _stored_items(cls, value: Any) -> list[ScheduleItem]:
        return normalize_schedule_items(value)

    @classmethod
    def from_firestore_dict(cls, data: dict[str, Any]) -> Schedule:
        return cls.model_validate(data)

    def to_document(self) -> dict[str, Any]:
        document = self.model_dump(by_alias=True)
        if document.get("updatedAt") is None:
            document.pop("updatedAt", None)
        return document


def empty_schedule() -> dict[str, Any]:
    return {"items": []}


def normalize_schedule_items(raw_items: Any) -> list[ScheduleItem]:
    """Normaliza a lista recebida do dashboard.

    Entrada que não é lista vira lista vazia; elementos que não são objetos
    são descartados; itens sem `day` ou `time` (após trim) são descartados.
    A ordem original é preservada.
    """
    if not isinstance(raw_items, list):
        return []
    items: list[ScheduleItem] = []
    for raw in raw_items:
        if isinstance(raw, ScheduleItem):
            item = raw
        elif isinstance(raw, dict):
            item = ScheduleItem.model_validate(raw)
        else:
            continue
        if item.is_complete:
            items.append(item)
    return items


def build_schedule_document(raw_items: Any, updated_at: str | None = None) -> dict[str, Any]:
    """Documento de merge para PUT /api/admin/schedule (items substituído inteiro)."""
    items = normalize_schedule_items(raw_items)
    return {
        "items": [item.model_dump() for item in items],
        "updatedAt": updated_at or utc_now_iso(),
    }
