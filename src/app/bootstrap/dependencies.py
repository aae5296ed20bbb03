"""Factories de dependências: criação de implementações concretas.

Centraliza a escolha de store e notificadores a partir das settings.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.bootstrap.clients import create_firestore_client
from app.bootstrap.context import AppContext
from app.infra.notifications import SmtpEmailNotifier, TelegramNotifier
from app.infra.stores import FirestoreSiteStore, MemorySiteStore
from config.settings import (
    get_admin_auth_settings,
    get_base_settings,
    get_email_settings,
    get_firestore_settings,
    get_telegram_settings,
)

if TYPE_CHECKING:
    from app.protocols import NotifierProtocol, SiteStoreProtocol
    from config.settings import BaseSettings

logger = logging.getLogger(__name__)


def create_site_store(base_settings: BaseSettings | None = None) -> SiteStoreProtocol:
    """Cria o store do site conforme STORE_BACKEND.

    - "memory": MemorySiteStore (dev only)
    - "firestore": FirestoreSiteStore (padrão)
    """
    base_settings = base_settings or get_base_settings()

    if base_settings.store_backend == "memory":
        if not base_settings.is_development:
            logger.warning(
                "memory_store_in_non_dev",
                extra={"backend": "memory", "environment": base_settings.environment},
            )
        logger.info("site_store_created", extra={"backend": "memory"})
        return MemorySiteStore()

    firestore_settings = get_firestore_settings()
    store = FirestoreSiteStore(create_firestore_client(firestore_settings), firestore_settings)
    logger.info("site_store_created", extra={"backend": "firestore"})
    return store


def create_notifiers() -> tuple[NotifierProtocol, ...]:
    """Cria email e Telegram; os sem configuração ficam desabilitados."""
    notifiers: tuple[NotifierProtocol, ...] = (
        SmtpEmailNotifier(get_email_settings()),
        TelegramNotifier(get_telegram_settings()),
    )
    logger.info(
        "notifiers_created",
        extra={"enabled": [notifier.name for notifier in notifiers if notifier.enabled]},
    )
    return notifiers


def build_app_context() -> AppContext:
    """Monta o AppContext completo a partir do ambiente."""
    base_settings = get_base_settings()
    return AppContext.create(
        store=create_site_store(base_settings),
        auth_settings=get_admin_auth_settings(),
        notifiers=create_notifiers(),
        base_settings=base_settings,
    )
