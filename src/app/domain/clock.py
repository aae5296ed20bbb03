"""Timestamps do domínio.

Todos os timestamps persistidos usam ISO-8601 UTC com milissegundos e
sufixo `Z` (ex: 2026-10-18T12:00:00.000Z). Com formato fixo, a ordem
lexicográfica é a ordem cronológica, o que permite ordenar por string.
"""

from __future__ import annotations

from datetime import UTC, datetime


def utc_now() -> datetime:
    return datetime.now(UTC)


def to_iso_timestamp(moment: datetime) -> str:
    """Formata datetime aware como `YYYY-MM-DDTHH:MM:SS.mmmZ`."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    return to_iso_timestamp(utc_now())
