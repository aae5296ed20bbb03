"""Verificação das credenciais do admin (conta única).

Identidade: email comparado sem caixa e sem espaços nas pontas.
Senha: hash pré-computado em ADMIN_PASSWORD_HASH; nunca texto puro.

Email desconhecido e senha errada produzem o mesmo erro e o mesmo custo:
o hash é verificado mesmo quando o email não confere.
"""

from __future__ import annotations

import hmac
import logging

from app.infra.crypto import verify_password
from config.settings import AdminAuthSettings
from utils.errors import AuthenticationError, ConfigurationError

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


def normalize_identity(identity: str | None) -> str:
    return (identity or "").strip().lower()


class CredentialVerifier:
    """Valida (identity, password) contra a conta configurada."""

    def __init__(self, settings: AdminAuthSettings) -> None:
        self._settings = settings

    @property
    def configured(self) -> bool:
        return bool(self._settings.normalized_admin_email and self._settings.admin_password_hash)

    def verify(self, identity: str | None, password: str | None) -> str:
        """Confere credenciais e retorna a identidade canônica do admin.

        Operação CPU-bound (PBKDF2); em código async, chamar via
        asyncio.to_thread.

        Raises:
            ConfigurationError: Se email ou hash do admin não configurados.
            AuthenticationError: Se identidade ou senha não conferem.
        """
        if not self.configured:
            raise ConfigurationError("Admin credentials are not configured")

        admin_email = self._settings.normalized_admin_email
        supplied = normalize_identity(identity)
        identity_ok = hmac.compare_digest(supplied.encode("utf-8"), admin_email.encode("utf-8"))
        password_ok = verify_password(password or "", self._settings.admin_password_hash)

        if not (identity_ok and password_ok):
            logger.warning(
                "admin_login_rejected",
                extra={"component": "credentials", "result": "rejected"},
            )
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.info("admin_login_accepted", extra={"component": "credentials", "result": "ok"})
        return admin_email
