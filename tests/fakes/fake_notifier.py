"""Notificador fake que registra envios em memória."""

from __future__ import annotations


class FakeNotifier:
    """Implementa NotifierProtocol sem IO.

    `error` é levantado a cada envio (depois de registrado) para simular
    falhas de transporte.
    """

    def __init__(
        self,
        name: str = "fake",
        *,
        enabled: bool = True,
        error: Exception | None = None,
    ) -> None:
        self.name = name
        self._enabled = enabled
        self._error = error
        self.sent: list[tuple[str, str]] = []

    @property
    def enabled(self) -> bool:
        return self._enabled

    async def send(self, subject: str, text: str) -> None:
        self.sent.append((subject, text))
        if self._error is not None:
            raise self._error
