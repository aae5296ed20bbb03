"""Firestore Site Store.

Layout:
- site/profile: documento singleton do perfil
- site/schedule: documento singleton da agenda
- inquiries/{auto-id}: mensagens de visitantes
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from app.domain.inquiry import Inquiry, StoredInquiry
from app.domain.profile import Profile
from app.domain.schedule import Schedule
from app.protocols.site_store import SiteStoreProtocol
from config.settings import FirestoreSettings
from utils.errors import StoreError

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

logger = logging.getLogger(__name__)

# Valor aceito por Query.order_by (google.cloud.firestore.Query.DESCENDING)
_DESCENDING = "DESCENDING"
_HEALTH_COLLECTION = "_health"


class FirestoreSiteStore(SiteStoreProtocol):
    """Store do site usando Firestore (client síncrono em thread)."""

    def __init__(
        self,
        firestore_client: FirestoreClient,
        settings: FirestoreSettings | None = None,
    ) -> None:
        self._db = firestore_client
        self._settings = settings or FirestoreSettings()

    def _site_doc(self, name: str) -> Any:
        return self._db.collection(self._settings.collection_site).document(name)

    # ── Perfil ───────────────────────────────────────────────────────────────

    async def get_profile(self) -> Profile | None:
        data = await asyncio.to_thread(self._get_site_doc_sync, self._settings.document_profile)
        return Profile.from_firestore_dict(data) if data is not None else None

    async def merge_profile(self, data: dict[str, Any]) -> None:
        await asyncio.to_thread(self._merge_site_doc_sync, self._settings.document_profile, data)

    # ── Agenda ───────────────────────────────────────────────────────────────

    async def get_schedule(self) -> Schedule | None:
        data = await asyncio.to_thread(self._get_site_doc_sync, self._settings.document_schedule)
        return Schedule.from_firestore_dict(data) if data is not None else None

    async def merge_schedule(self, data: dict[str, Any]) -> None:
        await asyncio.to_thread(self._merge_site_doc_sync, self._settings.document_schedule, data)

    # ── Inquiries ────────────────────────────────────────────────────────────

    async def add_inquiry(self, inquiry: Inquiry) -> str:
        return await asyncio.to_thread(self._add_inquiry_sync, inquiry)

    async def list_inquiries(self, limit: int) -> list[StoredInquiry]:
        return await asyncio.to_thread(self._list_inquiries_sync, limit)

    async def ping(self) -> bool:
        return await asyncio.to_thread(self._ping_sync)

    # ── Implementações síncronas ─────────────────────────────────────────────

    def _get_site_doc_sync(self, name: str) -> dict[str, Any] | None:
        try:
            doc = self._site_doc(name).get()
        except Exception as exc:
            logger.error(
                "site_doc_get_failed",
                extra={"document": name, "error_type": type(exc).__name__},
            )
            raise StoreError(f"Falha ao ler documento {name}") from exc
        if not doc.exists:
            return None
        return doc.to_dict() or {}

    def _merge_site_doc_sync(self, name: str, data: dict[str, Any]) -> None:
        try:
            self._site_doc(name).set(data, merge=True)
        except Exception as exc:
            logger.error(
                "site_doc_merge_failed",
                extra={"document": name, "error_type": type(exc).__name__},
            )
            raise StoreError(f"Falha ao gravar documento {name}") from exc
        logger.debug("site_doc_merged", extra={"document": name, "fields": len(data)})

    def _add_inquiry_sync(self, inquiry: Inquiry) -> str:
        try:
            _, doc_ref = self._db.collection(self._settings.collection_inquiries).add(
                inquiry.to_firestore_dict()
            )
        except Exception as exc:
            logger.error("inquiry_add_failed", extra={"error_type": type(exc).__name__})
            raise StoreError("Falha ao gravar inquiry") from exc
        return str(doc_ref.id)

    def _list_inquiries_sync(self, limit: int) -> list[StoredInquiry]:
        try:
            docs = (
                self._db.collection(self._settings.collection_inquiries)
                .order_by("createdAt", direction=_DESCENDING)
                .limit(limit)
                .stream()
            )
            return [
                StoredInquiry.from_firestore_dict(doc.id, doc.to_dict() or {})
                for doc in docs
            ]
        except Exception as exc:
            logger.error("inquiry_list_failed", extra={"error_type": type(exc).__name__})
            raise StoreError("Falha ao listar inquiries") from exc

    def _ping_sync(self) -> bool:
        # Basta a leitura completar; o documento não precisa existir
        self._db.collection(_HEALTH_COLLECTION).document("check").get()
        return True
