"""Settings de notificação via Telegram Bot API."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da Telegram Bot API
TELEGRAM_API_BASE_URL: str = "https://api.telegram.org"


@dataclass(frozen=True)
class TelegramSettings:
    """Configurações do bot de notificação.

    Attributes:
        bot_token: Token do bot Telegram (obtido via @BotFather)
        chat_id: Chat que recebe as notificações
        api_base_url: URL base da API
        request_timeout_seconds: Timeout para requisições HTTP
    """

    bot_token: str = ""
    chat_id: str = ""
    api_base_url: str = TELEGRAM_API_BASE_URL
    request_timeout_seconds: float = 10.0

    @property
    def enabled(self) -> bool:
        return bool(self.bot_token and self.chat_id)

    @property
    def send_message_url(self) -> str:
        """URL do método sendMessage com token do bot."""
        if not self.bot_token:
            raise ValueError("bot_token é obrigatório")
        return f"{self.api_base_url}/bot{self.bot_token}/sendMessage"

    def validate(self) -> list[str]:
        """Token sem chat (ou vice-versa) indica configuração incompleta."""
        errors: list[str] = []
        if bool(self.bot_token) != bool(self.chat_id):
            errors.append("TELEGRAM_BOT_TOKEN e TELEGRAM_CHAT_ID devem ser definidos juntos")
        return errors


def _load_from_env() -> TelegramSettings:
    """Carrega TelegramSettings de variáveis de ambiente."""
    return TelegramSettings(
        bot_token=os.getenv("TELEGRAM_BOT_TOKEN", ""),
        chat_id=os.getenv("TELEGRAM_CHAT_ID", ""),
        api_base_url=os.getenv("TELEGRAM_API_BASE_URL", TELEGRAM_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("TELEGRAM_REQUEST_TIMEOUT_SECONDS", "10")
        ),
    )


@lru_cache(maxsize=1)
def get_telegram_settings() -> TelegramSettings:
    """Retorna instância cacheada de TelegramSettings."""
    return _load_from_env()
