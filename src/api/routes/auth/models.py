"""Modelos de request do login."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class LoginRequest(BaseModel):
    """Credenciais do admin. `email` é aceito como alias de `identity`."""

    model_config = ConfigDict(extra="ignore")

    identity: str = Field(default="", validation_alias=AliasChoices("identity", "email"))
    password: str = ""

    @field_validator("identity", "password", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        if isinstance(value, str):
            return value
        if not value or isinstance(value, (bool, list, dict)):
            return ""
        return str(value)
