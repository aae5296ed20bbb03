"""Hash de senha do admin (passlib, PBKDF2-SHA256).

PBKDF2-SHA256 não depende do pacote `bcrypt`, evitando as
incompatibilidades conhecidas entre passlib e versões recentes de bcrypt.
"""

from __future__ import annotations

import logging

from passlib.context import CryptContext
from passlib.exc import UnknownHashError

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
    pbkdf2_sha256__default_rounds=310_000,
)


def hash_password(password: str) -> str:
    """Gera hash para uso em ADMIN_PASSWORD_HASH."""
    return pwd_context.hash(password)


def is_supported_hash(hashed_password: str) -> bool:
    """True se o hash está em um formato que o contexto sabe verificar."""
    try:
        return pwd_context.identify(hashed_password) is not None
    except (UnknownHashError, ValueError, TypeError):
        return False


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Compara senha com o hash em tempo constante.

    Hash malformado conta como senha incorreta (e é logado), nunca como erro.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (UnknownHashError, ValueError, TypeError) as exc:
        logger.error("password_hash_unusable", extra={"error_type": type(exc).__name__})
        return False
