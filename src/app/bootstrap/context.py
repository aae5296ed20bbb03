"""AppContext: dependências imutáveis entregues aos handlers.

Construído uma vez no startup (ou pelos testes) e guardado em
`app.state.context`; nenhum handler lê configuração global.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from app.services import (
    CredentialVerifier,
    InquiryService,
    SessionTokenService,
    SiteContentService,
)
from config.settings import BaseSettings

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.protocols import NotifierProtocol, SiteStoreProtocol
    from config.settings import AdminAuthSettings


@dataclass(frozen=True)
class AppContext:
    """Composition root resolvido."""

    store: SiteStoreProtocol
    content: SiteContentService
    inquiries: InquiryService
    credentials: CredentialVerifier
    tokens: SessionTokenService
    notifiers: tuple[NotifierProtocol, ...] = ()
    base_settings: BaseSettings = field(default_factory=BaseSettings)

    @classmethod
    def create(
        cls,
        *,
        store: SiteStoreProtocol,
        auth_settings: AdminAuthSettings,
        notifiers: Sequence[NotifierProtocol] = (),
        base_settings: BaseSettings | None = None,
        token_service: SessionTokenService | None = None,
    ) -> AppContext:
        notifier_tuple = tuple(notifiers)
        return cls(
            store=store,
            content=SiteContentService(store),
            inquiries=InquiryService(store, notifier_tuple),
            credentials=CredentialVerifier(auth_settings),
            tokens=token_service or SessionTokenService(auth_settings),
            notifiers=notifier_tuple,
            base_settings=base_settings or BaseSettings(),
        )
