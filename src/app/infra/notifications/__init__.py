"""Notificadores outbound (email e Telegram)."""

from __future__ import annotations

from app.infra.notifications.email_notifier import SmtpEmailNotifier
from app.infra.notifications.telegram_notifier import TelegramNotifier

__all__ = [
    "SmtpEmailNotifier",
    "TelegramNotifier",
]
