"""Leitura e escrita do conteúdo do site (perfil, agenda, inquiries)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.domain.profile import ProfileUpdate, default_profile
from app.domain.schedule import build_schedule_document, empty_schedule

if TYPE_CHECKING:
    from app.protocols import SiteStoreProtocol

logger = logging.getLogger(__name__)

DEFAULT_INQUIRY_LIMIT = 25
MAX_INQUIRY_LIMIT = 100


def clamp_inquiry_limit(raw_limit: Any) -> int:
    """Normaliza o limite pedido para [1, MAX_INQUIRY_LIMIT].

    Ausente, vazio, zero ou não numérico usa DEFAULT_INQUIRY_LIMIT.
    """
    if raw_limit is None or isinstance(raw_limit, bool):
        return DEFAULT_INQUIRY_LIMIT
    try:
        limit = int(float(str(raw_limit).strip()))
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_INQUIRY_LIMIT
    if limit == 0:
        return DEFAULT_INQUIRY_LIMIT
    return max(1, min(limit, MAX_INQUIRY_LIMIT))


class SiteContentService:
    """Operações de conteúdo sobre o document store.

    Público e admin diferem no "vazio" do perfil: o público recebe o perfil
    padrão (o site sempre renderiza algo); o admin recebe `{}` (o formulário
    do dashboard começa em branco).
    """

    def __init__(self, store: SiteStoreProtocol) -> None:
        self._store = store

    async def public_profile(self) -> dict[str, Any]:
        profile = await self._store.get_profile()
        return profile.to_document() if profile is not None else default_profile()

    async def admin_profile(self) -> dict[str, Any]:
        profile = await self._store.get_profile()
        return profile.to_document() if profile is not None else {}

    async def update_profile(self, update: ProfileUpdate) -> dict[str, Any]:
        """Valida e grava o perfil com merge.

        Raises:
            ValidationError: name vazio ou age não numérico.
        """
        document = update.to_merge_document()
        await self._store.merge_profile(document)
        logger.info("profile_updated", extra={"component": "site_content"})
        return document

    async def schedule(self) -> dict[str, Any]:
        schedule = await self._store.get_schedule()
        return schedule.to_document() if schedule is not None else empty_schedule()

    async def update_schedule(self, raw_items: Any) -> dict[str, Any]:
        document = build_schedule_document(raw_items)
        await self._store.merge_schedule(document)
        logger.info(
            "schedule_updated",
            extra={"component": "site_content", "item_count": len(document["items"])},
        )
        return document

    async def recent_inquiries(self, raw_limit: Any = None) -> list[dict[str, Any]]:
        limit = clamp_inquiry_limit(raw_limit)
        inquiries = await self._store.list_inquiries(limit)
        return [inquiry.to_api_dict() for inquiry in inquiries]
