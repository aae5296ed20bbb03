"""Factories de clientes externos: Firestore."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from config.settings import FirestoreSettings, get_firestore_settings
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

logger = logging.getLogger(__name__)


def _default_gcp_project() -> str:
    return (
        os.getenv("GCP_PROJECT", "")
        or os.getenv("GOOGLE_CLOUD_PROJECT", "")
        or os.getenv("GCLOUD_PROJECT", "")
    )


def create_firestore_client(settings: FirestoreSettings | None = None) -> FirestoreClient:
    """Cria cliente Firestore.

    Prioridade de credenciais:
    1) FIREBASE_SERVICE_ACCOUNT_JSON / FIREBASE_SERVICE_ACCOUNT_BASE64
    2) Application Default Credentials + FIRESTORE_PROJECT_ID/GCP_PROJECT

    Raises:
        ConfigurationError: Se o service account for inválido.
    """
    from google.cloud import firestore
    from google.oauth2 import service_account

    settings = settings or get_firestore_settings()
    try:
        info = settings.service_account_info()
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc

    if info is not None:
        credentials = service_account.Credentials.from_service_account_info(info)
        project_id = settings.project_id or info.get("project_id") or None
        client = firestore.Client(project=project_id, credentials=credentials)
        logger.info(
            "firestore_client_created",
            extra={"project": project_id, "credentials": "service_account"},
        )
        return client

    project_id = settings.project_id or _default_gcp_project() or None
    client = firestore.Client(project=project_id)
    logger.info("firestore_client_created", extra={"project": project_id, "credentials": "adc"})
    return client
