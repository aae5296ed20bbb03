"""Criptografia: hash e verificação de senha do admin."""

from .passwords import hash_password, is_supported_hash, verify_password

__all__ = [
    "hash_password",
    "is_supported_hash",
    "verify_password",
]
