"""Notificação via Telegram Bot API (sendMessage)."""

from __future__ import annotations

import logging

import httpx

from config.settings import TelegramSettings
from utils.errors import NotificationError

logger = logging.getLogger(__name__)


class TelegramNotifier:
    """Envia a notificação para um chat fixo via bot.

    Aceita um httpx.AsyncClient injetado (testes/reuso); sem ele, abre um
    client por envio.
    """

    name = "telegram"

    def __init__(
        self,
        settings: TelegramSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings
        self._http_client = http_client

    @property
    def enabled(self) -> bool:
        return self._settings.enabled

    async def send(self, subject: str, text: str) -> None:
        """Envia `text` ao chat configurado; o assunto não é usado no Telegram.

        Raises:
            NotificationError: Se bot não configurado, erro de rede ou resposta não-2xx.
        """
        _ = subject
        if not self.enabled:
            raise NotificationError("Telegram desabilitado: faltando TELEGRAM_BOT_TOKEN/CHAT_ID")

        payload = {"chat_id": self._settings.chat_id, "text": text}
        try:
            if self._http_client is not None:
                response = await self._post(self._http_client, payload)
            else:
                async with httpx.AsyncClient(
                    timeout=self._settings.request_timeout_seconds
                ) as client:
                    response = await self._post(client, payload)
        except httpx.HTTPError as exc:
            raise NotificationError(f"Falha de rede no Telegram: {type(exc).__name__}") from exc

        if response.is_error:
            raise NotificationError(
                f"Telegram send failed: HTTP {response.status_code} {response.text[:200]}"
            )
        logger.info("telegram_notification_sent", extra={"notifier": self.name})

    async def _post(self, client: httpx.AsyncClient, payload: dict[str, str]) -> httpx.Response:
        return await client.post(self._settings.send_message_url, json=payload)
