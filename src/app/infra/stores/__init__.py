"""Stores: implementações concretas de persistência.

Módulos disponíveis:
    - firestore_site_store: perfil, agenda e inquiries no Firestore
    - memory_stores: store em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.firestore_site_store import FirestoreSiteStore
from app.infra.stores.memory_stores import MemorySiteStore

__all__ = [
    "FirestoreSiteStore",
    "MemorySiteStore",
]
