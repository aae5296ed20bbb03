"""Protocolos e contratos do core da aplicação."""

from .notifier import NotifierProtocol
from .site_store import SiteStoreProtocol

__all__ = [
    "NotifierProtocol",
    "SiteStoreProtocol",
]
