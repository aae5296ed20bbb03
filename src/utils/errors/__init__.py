"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AuthenticationError,
    ConfigurationError,
    MissingCredentialError,
    NotificationError,
    SiteError,
    StoreError,
    ValidationError,
)

__all__ = [
    "AuthenticationError",
    "ConfigurationError",
    "MissingCredentialError",
    "NotificationError",
    "SiteError",
    "StoreError",
    "ValidationError",
]
