"""Agregador de settings do backend do site.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Auth settings
from config.settings.auth import (
    AdminAuthSettings,
    get_admin_auth_settings,
)

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    StoreBackend,
    get_base_settings,
)

# Notification settings
from config.settings.email import (
    EmailSettings,
    get_email_settings,
)

# Infrastructure settings
from config.settings.infra import (
    FirestoreSettings,
    get_firestore_settings,
)
from config.settings.telegram import (
    TELEGRAM_API_BASE_URL,
    TelegramSettings,
    get_telegram_settings,
)

__all__ = [
    # Constants
    "TELEGRAM_API_BASE_URL",
    # Auth
    "AdminAuthSettings",
    # Base
    "BaseSettings",
    # Notifications
    "EmailSettings",
    "Environment",
    # Infrastructure
    "FirestoreSettings",
    "StoreBackend",
    "TelegramSettings",
    "get_admin_auth_settings",
    "get_base_settings",
    "get_email_settings",
    "get_firestore_settings",
    "get_telegram_settings",
]
