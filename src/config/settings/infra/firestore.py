"""Settings do Firestore.

Credenciais do service account podem vir como JSON em linha ou Base64
(formato comum em plataformas serverless). Sem nenhum dos dois, o client
usa Application Default Credentials com o projeto informado.
"""

from __future__ import annotations

import base64
import binascii
import json
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any


@dataclass(frozen=True)
class FirestoreSettings:
    """Configurações do Firestore.

    Attributes:
        project_id: ID do projeto GCP (usa GCP_PROJECT se não definido)
        service_account_json: JSON do service account em linha
        service_account_base64: JSON do service account codificado em Base64
        collection_site: Collection dos documentos singleton
        document_profile: Documento do perfil
        document_schedule: Documento da agenda
        collection_inquiries: Collection de mensagens de visitantes
    """

    project_id: str = ""
    service_account_json: str = ""
    service_account_base64: str = ""
    collection_site: str = "site"
    document_profile: str = "profile"
    document_schedule: str = "schedule"
    collection_inquiries: str = "inquiries"

    @property
    def has_service_account(self) -> bool:
        return bool(self.service_account_json or self.service_account_base64)

    def service_account_info(self) -> dict[str, Any] | None:
        """Decodifica o service account configurado.

        Returns:
            Dict do service account ou None quando não configurado.

        Raises:
            ValueError: Se o conteúdo não for JSON válido.
        """
        raw = self.service_account_json
        if not raw and self.service_account_base64:
            try:
                raw = base64.b64decode(self.service_account_base64).decode("utf-8")
            except (binascii.Error, UnicodeDecodeError) as exc:
                raise ValueError("FIREBASE_SERVICE_ACCOUNT_BASE64 inválido") from exc
        if not raw:
            return None
        try:
            info = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ValueError("Service account não é um JSON válido") from exc
        if not isinstance(info, dict):
            raise ValueError("Service account deve ser um objeto JSON")
        return info

    def validate(self, gcp_project: str = "") -> list[str]:
        """Valida configurações do Firestore.

        Args:
            gcp_project: Projeto GCP padrão para fallback.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.has_service_account:
            try:
                self.service_account_info()
            except ValueError as exc:
                errors.append(str(exc))
            return errors

        if not (self.project_id or gcp_project):
            errors.append(
                "FIREBASE_SERVICE_ACCOUNT_JSON, FIREBASE_SERVICE_ACCOUNT_BASE64 "
                "ou FIRESTORE_PROJECT_ID/GCP_PROJECT deve estar configurado"
            )

        return errors


def _load_firestore_from_env() -> FirestoreSettings:
    """Carrega FirestoreSettings de variáveis de ambiente."""
    return FirestoreSettings(
        project_id=os.getenv("FIRESTORE_PROJECT_ID", ""),
        service_account_json=os.getenv("FIREBASE_SERVICE_ACCOUNT_JSON", ""),
        service_account_base64=os.getenv("FIREBASE_SERVICE_ACCOUNT_BASE64", ""),
        collection_site=os.getenv("FIRESTORE_COLLECTION_SITE", "site"),
        collection_inquiries=os.getenv("FIRESTORE_COLLECTION_INQUIRIES", "inquiries"),
    )


@lru_cache(maxsize=1)
def get_firestore_settings() -> FirestoreSettings:
    """Retorna instância cacheada de FirestoreSettings."""
    return _load_firestore_from_env()
