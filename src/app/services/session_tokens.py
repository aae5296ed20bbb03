"""Tokens de sessão do admin (JWT HS256, stateless).

Claims: {"role": "admin", "email": <admin>, "iat", "exp"}; validade de
7 dias por padrão. Sem refresh e sem revogação: expirou, faz login de novo.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

from jose import ExpiredSignatureError, JWTError, jwt

from app.domain.clock import utc_now
from config.settings import AdminAuthSettings
from utils.errors import AuthenticationError, ConfigurationError, MissingCredentialError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"
MISSING_TOKEN = "Missing token"
INVALID_TOKEN = "Invalid token"


@dataclass(frozen=True, slots=True)
class AdminClaims:
    """Claims de um token válido."""

    email: str
    role: str
    expires_at: datetime


class SessionTokenService:
    """Emite e valida bearer tokens assinados com JWT_SECRET."""

    def __init__(
        self,
        settings: AdminAuthSettings,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._settings = settings
        self._clock = clock

    @property
    def ttl(self) -> timedelta:
        return timedelta(days=self._settings.token_ttl_days)

    def _secret(self) -> str:
        if not self._settings.jwt_secret:
            raise ConfigurationError("JWT_SECRET is not configured")
        return self._settings.jwt_secret

    def issue(self, identity: str) -> str:
        """Gera token de admin para `identity`.

        Raises:
            ConfigurationError: Se JWT_SECRET não configurado.
        """
        secret = self._secret()
        issued_at = self._clock()
        claims: dict[str, Any] = {
            "role": ADMIN_ROLE,
            "email": identity,
            "iat": issued_at,
            "exp": issued_at + self.ttl,
        }
        return jwt.encode(claims, secret, algorithm=self._settings.jwt_algorithm)

    def verify(self, token: str | None) -> AdminClaims:
        """Valida assinatura, expiração e papel do token.

        Raises:
            MissingCredentialError: Token ausente.
            AuthenticationError: Assinatura inválida, token expirado/malformado
                ou papel diferente de admin.
            ConfigurationError: Se JWT_SECRET não configurado.
        """
        if not token or not token.strip():
            raise MissingCredentialError(MISSING_TOKEN)
        secret = self._secret()

        try:
            payload = jwt.decode(
                token.strip(),
                secret,
                algorithms=[self._settings.jwt_algorithm],
            )
        except ExpiredSignatureError as exc:
            logger.info("session_token_expired", extra={"component": "session_tokens"})
            raise AuthenticationError(INVALID_TOKEN) from exc
        except JWTError as exc:
            logger.warning(
                "session_token_invalid",
                extra={"component": "session_tokens", "error_type": type(exc).__name__},
            )
            raise AuthenticationError(INVALID_TOKEN) from exc

        if payload.get("role") != ADMIN_ROLE or "exp" not in payload:
            logger.warning("session_token_wrong_role", extra={"component": "session_tokens"})
            raise AuthenticationError(INVALID_TOKEN)

        return AdminClaims(
            email=str(payload.get("email", "")),
            role=ADMIN_ROLE,
            expires_at=datetime.fromtimestamp(int(payload["exp"]), tz=UTC),
        )
