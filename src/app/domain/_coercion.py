"""Coerção tolerante de valores vindos de JSON para texto."""

from __future__ import annotations

from typing import Any


def as_trimmed_text(value: Any) -> str:
    """Converte escalar JSON em string sem espaços nas pontas.

    Valores falsy (None, False, 0, "") viram "". Listas e objetos também
    viram "", pois não são valores válidos para campos de texto.
    """
    if not value or isinstance(value, (list, dict)):
        return ""
    return str(value).strip()
