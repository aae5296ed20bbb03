"""Exceções de domínio do backend do site.

Cada exceção carrega o status HTTP que a borda (api/errors.py) deve devolver.
Mensagens são genéricas de propósito: nunca incluem credenciais ou PII.
"""

from __future__ import annotations


class SiteError(Exception):
    """Base para erros tratados pela aplicação."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(SiteError):
    """Setting obrigatória ausente ou inválida (falha do servidor)."""

    status_code = 500


class ValidationError(SiteError):
    """Campos de request ausentes ou inválidos."""

    status_code = 400


class AuthenticationError(SiteError):
    """Credenciais ou token inválidos."""

    status_code = 401


class MissingCredentialError(AuthenticationError):
    """Request sem bearer token."""


class StoreError(SiteError):
    """Falha de IO no document store."""

    status_code = 500


class NotificationError(SiteError):
    """Falha de envio de notificação (sempre engolida pelo chamador)."""
