"""Protocolo de notificações outbound (email, chat)."""

from __future__ import annotations

from typing import Protocol


class NotifierProtocol(Protocol):
    """Contrato mínimo para enviar uma notificação de texto.

    `send` levanta NotificationError em falha de transporte; quem chama
    decide se engole ou propaga.
    """

    name: str

    @property
    def enabled(self) -> bool: ...

    async def send(self, subject: str, text: str) -> None: ...
