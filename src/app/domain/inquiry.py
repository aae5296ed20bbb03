"""Inquiry - mensagem de visitante enviada pelo formulário público.

Append-only: criada uma vez, nunca alterada. `createdAt` é a única chave
de ordenação.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domain._coercion import as_trimmed_text
from app.domain.clock import utc_now_iso
from utils.errors import ValidationError

REQUIRED_FIELDS_MESSAGE = "name, email, message are required"
NOTIFICATION_SUBJECT = "طلب جديد من موقع المستر"


class InquirySubmission(BaseModel):
    """Campos enviados pelo visitante, já com trim."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    email: str = ""
    phone: str = ""
    message: str = ""

    @field_validator("name", "email", "phone", "message", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return as_trimmed_text(value)

    def to_inquiry(self, created_at: str | None = None) -> Inquiry:
        """Valida campos obrigatórios e carimba o horário de criação.

        Raises:
            ValidationError: Se name, email ou message estiverem vazios.
        """
        if not (self.name and self.email and self.message):
            raise ValidationError(REQUIRED_FIELDS_MESSAGE)
        return Inquiry(
            name=self.name,
            email=self.email,
            phone=self.phone,
            message=self.message,
            created_at=created_at or utc_now_iso(),
        )


class Inquiry(BaseModel):
    """Inquiry persistida."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    name: str
    email: str
    phone: str = ""
    message: str
    created_at: str = Field(alias="createdAt")

    def to_firestore_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

    def notification_text(self) -> str:
        return (
            "طلب جديد من الموقع:\n"
            f"الاسم: {self.name}\n"
            f"الإيميل: {self.email}\n"
            f"الموبايل: {self.phone or '-'}\n"
            f"الرسالة:\n{self.message}\n"
            f"الوقت: {self.created_at}"
        )


class StoredInquiry(Inquiry):
    """Inquiry lida do store, com o id atribuído por ele."""

    id: str

    @classmethod
    def from_firestore_dict(cls, doc_id: str, data: dict[str, Any]) -> StoredInquiry:
        payload = {
            "name": as_trimmed_text(data.get("name")),
            "email": as_trimmed_text(data.get("email")),
            "phone": as_trimmed_text(data.get("phone")),
            "message": as_trimmed_text(data.get("message")),
            "createdAt": as_trimmed_text(data.get("createdAt")),
        }
        return cls(id=doc_id, **payload)

    def to_api_dict(self) -> dict[str, Any]:
        return {"id": self.id, **self.model_dump(by_alias=True, exclude={"id"})}

