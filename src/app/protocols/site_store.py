"""Protocolo para persistência do site (perfil, agenda e inquiries)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.inquiry import Inquiry, StoredInquiry
    from app.domain.profile import Profile
    from app.domain.schedule import Schedule


class SiteStoreProtocol(Protocol):
    """Contrato do document store.

    Documentos singleton (perfil, agenda) usam merge write com
    last-write-wins; inquiries são append-only.
    """

    async def get_profile(self) -> Profile | None:
        """Retorna o perfil salvo ou None se nunca foi escrito."""
        ...

    async def merge_profile(self, data: dict[str, Any]) -> None:
        """Merge write no documento do perfil."""
        ...

    async def get_schedule(self) -> Schedule | None:
        """Retorna a agenda salva ou None se nunca foi escrita."""
        ...

    async def merge_schedule(self, data: dict[str, Any]) -> None:
        """Merge write no documento da agenda."""
        ...

    async def add_inquiry(self, inquiry: Inquiry) -> str:
        """Persiste inquiry e retorna o id atribuído pelo store."""
        ...

    async def list_inquiries(self, limit: int) -> list[StoredInquiry]:
        """Lista inquiries por createdAt decrescente, até `limit` itens."""
        ...

    async def ping(self) -> bool:
        """Checa acesso ao store (readiness)."""
        ...
