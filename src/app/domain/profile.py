"""Profile - perfil público do treinador (documento singleton).

O documento `site/profile` é escrito pelo admin com merge. Antes da
primeira escrita, a leitura pública devolve DEFAULT_PROFILE.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domain._coercion import as_trimmed_text
from app.domain.clock import utc_now_iso
from utils.errors import ValidationError

DEFAULT_PROFILE: dict[str, Any] = {
    "name": "مستر رياضة",
    "bio": "اكتب نبذة هنا من الداشبورد",
    "place": "—",
    "phone": "—",
    "age": None,
    "photoUrl": "",
}


def default_profile() -> dict[str, Any]:
    """Cópia do perfil padrão (nunca expor o dict do módulo)."""
    return dict(DEFAULT_PROFILE)


def _coerce_age(value: Any) -> int | float | None:
    """null e "" viram None; o resto precisa ser numérico."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValidationError("age must be a number")
    if isinstance(value, (int, float)):
        number: int | float = value
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            number = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError as exc:
                raise ValidationError("age must be a number") from exc
    if isinstance(number, float):
        if not math.isfinite(number):
            raise ValidationError("age must be a number")
        if number.is_integer():
            return int(number)
    return number


class Profile(BaseModel):
    """Perfil armazenado no document store.

    Campos extras do documento são preservados (extra="allow") para que a
    visão do admin mostre o documento como está salvo.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str = ""
    bio: str = ""
    place: str = ""
    phone: str = ""
    age: int | float | None = None
    photo_url: str = Field(default="", alias="photoUrl")
    updated_at: str | None = Field(default=None, alias="updatedAt")

    @field_validator("name", "bio", "place", "phone", "photo_url", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return as_trimmed_text(value)

    @field_validator("age", mode="before")
    @classmethod
    def _stored_age(cls, value: Any) -> int | float | None:
        # Documentos antigos podem ter NaN ou lixo; leitura nunca falha por isso
        try:
            return _coerce_age(value)
        except ValidationError:
            return None

    @classmethod
    def from_firestore_dict(cls, data: dict[str, Any]) -> Profile:
        return cls.model_validate(data)

    def to_document(self) -> dict[str, Any]:
        """Documento como foi salvo, com as chaves camelCase.

        Campos ausentes no store não são preenchidos com defaults.
        """
        document = self.model_dump(by_alias=True, exclude_unset=True)
        if document.get("updatedAt") is None:
            document.pop("updatedAt", None)
        return document


class ProfileUpdate(BaseModel):
    """Payload de PUT /api/admin/profile, já normalizado."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = ""
    bio: str = ""
    place: str = ""
    phone: str = ""
    photo_url: str = Field(default="", alias="photoUrl")
    age: Any = None

    @field_validator("name", "bio", "place", "phone", "photo_url", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return as_trimmed_text(value)

    def to_merge_document(self, updated_at: str | None = None) -> dict[str, Any]:
        """Monta o documento de merge e aplica as regras de validação.

        Raises:
            ValidationError: Se name estiver vazio ou age não for numérico.
        """
        if not self.name:
            raise ValidationError("name is required")
        return {
            "name": self.name,
            "bio": self.bio,
            "place": self.place,
            "phone": self.phone,
            "photoUrl": self.photo_url,
            "age": _coerce_age(self.age),
            "updatedAt": updated_at or utc_now_iso(),
        }
