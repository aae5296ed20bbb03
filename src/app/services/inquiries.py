"""Recebimento de inquiries do formulário público.

Fluxo:
1. Valida campos obrigatórios (ValidationError antes de qualquer IO)
2. Persiste a inquiry com createdAt do servidor
3. Dispara email e Telegram em paralelo, best-effort

Falha de notificação nunca muda o resultado: a inquiry já está salva.
Não há retry.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from app.domain.inquiry import NOTIFICATION_SUBJECT, Inquiry, InquirySubmission

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.protocols import NotifierProtocol, SiteStoreProtocol

logger = logging.getLogger(__name__)


class InquiryService:
    """Persiste inquiries e notifica o treinador."""

    def __init__(
        self,
        store: SiteStoreProtocol,
        notifiers: Sequence[NotifierProtocol] = (),
    ) -> None:
        self._store = store
        self._notifiers = tuple(notifiers)

    async def submit(self, submission: InquirySubmission) -> str:
        """Valida, salva e notifica. Retorna o id atribuído pelo store.

        Raises:
            ValidationError: Se name, email ou message estiverem vazios.
            StoreError: Se a persistência falhar (nada é notificado).
        """
        inquiry = submission.to_inquiry()
        inquiry_id = await self._store.add_inquiry(inquiry)
        logger.info(
            "inquiry_created",
            extra={"component": "inquiries", "inquiry_id": inquiry_id},
        )
        await self.notify(inquiry)
        return inquiry_id

    async def notify(self, inquiry: Inquiry) -> dict[str, bool]:
        """Envia a inquiry para todos os notificadores habilitados.

        Returns:
            Mapa nome do notificador -> enviado com sucesso.
        """
        active = [notifier for notifier in self._notifiers if notifier.enabled]
        for notifier in self._notifiers:
            if not notifier.enabled:
                logger.debug("notifier_disabled", extra={"notifier": notifier.name})
        if not active:
            return {}

        text = inquiry.notification_text()
        results = await asyncio.gather(
            *(self._send_safe(notifier, text) for notifier in active)
        )
        return {notifier.name: ok for notifier, ok in zip(active, results, strict=True)}

    async def _send_safe(self, notifier: NotifierProtocol, text: str) -> bool:
        try:
            await notifier.send(NOTIFICATION_SUBJECT, text)
        except Exception as exc:
            logger.warning(
                "inquiry_notification_failed",
                extra={
                    "component": "inquiries",
                    "notifier": notifier.name,
                    "error_type": type(exc).__name__,
                },
            )
            return False
        return True
