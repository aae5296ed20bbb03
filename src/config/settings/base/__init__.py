"""Agregador de settings base.

Re-exporta todas as settings base para uso externo.
"""

from __future__ import annotations

from config.settings.base.core import (
    BaseSettings,
    Environment,
    StoreBackend,
    get_base_settings,
)

__all__ = [
    "BaseSettings",
    "Environment",
    "StoreBackend",
    "get_base_settings",
]
