"""Stores em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

import copy
import uuid
from typing import Any

from app.domain.inquiry import Inquiry, StoredInquiry
from app.domain.profile import Profile
from app.domain.schedule import Schedule
from app.protocols.site_store import SiteStoreProtocol


class MemorySiteStore(SiteStoreProtocol):
    """Store do site em memória com as mesmas semânticas do Firestore.

    - merge: chaves de topo enviadas substituem as salvas; as demais ficam
    - inquiries: ids aleatórios, ordenação por createdAt decrescente
    """

    def __init__(self) -> None:
        self._documents: dict[str, dict[str, Any]] = {}
        self._inquiries: dict[str, dict[str, Any]] = {}

    def _merge(self, name: str, data: dict[str, Any]) -> None:
        current = self._documents.setdefault(name, {})
        current.update(copy.deepcopy(data))

    async def get_profile(self) -> Profile | None:
        data = self._documents.get("profile")
        return Profile.from_firestore_dict(copy.deepcopy(data)) if data is not None else None

    async def merge_profile(self, data: dict[str, Any]) -> None:
        self._merge("profile", data)

    async def get_schedule(self) -> Schedule | None:
        data = self._documents.get("schedule")
        return Schedule.from_firestore_dict(copy.deepcopy(data)) if data is not None else None

    async def merge_schedule(self, data: dict[str, Any]) -> None:
        self._merge("schedule", data)

    async def add_inquiry(self, inquiry: Inquiry) -> str:
        inquiry_id = uuid.uuid4().hex[:20]
        self._inquiries[inquiry_id] = inquiry.to_firestore_dict()
        return inquiry_id

    async def list_inquiries(self, limit: int) -> list[StoredInquiry]:
        ordered = sorted(
            self._inquiries.items(),
            key=lambda entry: entry[1].get("createdAt", ""),
            reverse=True,
        )
        return [
            StoredInquiry.from_firestore_dict(inquiry_id, data)
            for inquiry_id, data in ordered[:limit]
        ]

    async def ping(self) -> bool:
        return True

    def inquiry_count(self) -> int:
        """Quantidade de inquiries salvas (apenas para testes)."""
        return len(self._inquiries)

    def raw_document(self, name: str) -> dict[str, Any] | None:
        """Documento singleton como salvo (apenas para testes)."""
        data = self._documents.get(name)
        return copy.deepcopy(data) if data is not None else None
