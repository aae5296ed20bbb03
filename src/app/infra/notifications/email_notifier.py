"""Notificação por email via SMTP.

smtplib é bloqueante, então o envio roda em thread (asyncio.to_thread).
Porta 465 usa TLS implícito; nas demais tenta STARTTLS quando o servidor
anuncia suporte.
"""

from __future__ import annotations

import asyncio
import logging
import smtplib
import ssl
from email.message import EmailMessage
from email.utils import formatdate, make_msgid

from config.settings import EmailSettings
from utils.errors import NotificationError

logger = logging.getLogger(__name__)


class SmtpEmailNotifier:
    """Envia notificações de texto para o email do treinador."""

    name = "email"

    def __init__(self, settings: EmailSettings) -> None:
        self._settings = settings

    @property
    def enabled(self) -> bool:
        return self._settings.enabled

    async def send(self, subject: str, text: str) -> None:
        """Envia email de texto puro.

        Raises:
            NotificationError: Se SMTP não configurado ou envio falhar.
        """
        if not self.enabled:
            missing = ", ".join(self._settings.missing_fields())
            raise NotificationError(f"Email desabilitado: faltando {missing}")
        message = self.build_message(subject, text)
        try:
            await asyncio.to_thread(self._deliver_sync, message)
        except (smtplib.SMTPException, OSError) as exc:
            raise NotificationError(f"Falha no envio SMTP: {type(exc).__name__}") from exc
        logger.info("email_notification_sent", extra={"notifier": self.name})

    def build_message(self, subject: str, text: str) -> EmailMessage:
        settings = self._settings
        message = EmailMessage()
        message["Subject"] = subject
        message["From"] = settings.sender
        message["To"] = settings.to_email
        message["Date"] = formatdate(localtime=False)
        message["Message-ID"] = make_msgid()
        message.set_content(text)
        return message

    def _deliver_sync(self, message: EmailMessage) -> None:
        settings = self._settings
        context = ssl.create_default_context()
        if settings.use_implicit_tls:
            with smtplib.SMTP_SSL(
                settings.smtp_host,
                settings.smtp_port,
                timeout=settings.request_timeout_seconds,
                context=context,
            ) as server:
                server.login(settings.smtp_username, settings.smtp_password)
                server.send_message(message)
            return

        with smtplib.SMTP(
            settings.smtp_host,
            settings.smtp_port,
            timeout=settings.request_timeout_seconds,
        ) as server:
            server.ehlo()
            if server.has_extn("starttls"):
                server.starttls(context=context)
                server.ehlo()
            server.login(settings.smtp_username, settings.smtp_password)
            server.send_message(message)
