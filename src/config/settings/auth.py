"""Settings de autenticação do admin.

Uma única conta: email + hash de senha pré-computado (pbkdf2_sha256).
A senha em texto puro nunca é lida da configuração; gere o hash com
scripts/hash_admin_password.py.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_TOKEN_TTL_DAYS = 7
DEFAULT_JWT_ALGORITHM = "HS256"


@dataclass(frozen=True)
class AdminAuthSettings:
    """Credenciais do admin e parâmetros do token de sessão.

    Attributes:
        admin_email: Email do admin (comparado sem caixa e sem espaços)
        admin_password_hash: Hash passlib da senha do admin
        jwt_secret: Segredo de assinatura dos tokens
        jwt_algorithm: Algoritmo de assinatura
        token_ttl_days: Validade do token em dias
    """

    admin_email: str = ""
    admin_password_hash: str = ""
    jwt_secret: str = ""
    jwt_algorithm: str = DEFAULT_JWT_ALGORITHM
    token_ttl_days: int = DEFAULT_TOKEN_TTL_DAYS

    @property
    def normalized_admin_email(self) -> str:
        return self.admin_email.strip().lower()

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.jwt_secret:
            errors.append("JWT_SECRET não configurado")
        if not self.normalized_admin_email:
            errors.append("ADMIN_EMAIL não configurado")
        if not self.admin_password_hash:
            errors.append("ADMIN_PASSWORD_HASH não configurado")
        if self.token_ttl_days <= 0:
            errors.append(f"JWT_TTL_DAYS inválido: {self.token_ttl_days}")
        return errors


def _load_from_env() -> AdminAuthSettings:
    """Carrega AdminAuthSettings de variáveis de ambiente."""
    return AdminAuthSettings(
        admin_email=os.getenv("ADMIN_EMAIL", ""),
        admin_password_hash=os.getenv("ADMIN_PASSWORD_HASH", "").strip(),
        jwt_secret=os.getenv("JWT_SECRET", ""),
        jwt_algorithm=os.getenv("JWT_ALGORITHM", DEFAULT_JWT_ALGORITHM),
        token_ttl_days=int(os.getenv("JWT_TTL_DAYS", str(DEFAULT_TOKEN_TTL_DAYS))),
    )


@lru_cache(maxsize=1)
def get_admin_auth_settings() -> AdminAuthSettings:
    """Retorna instância cacheada de AdminAuthSettings."""
    return _load_from_env()
