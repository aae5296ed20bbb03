"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()
    context = build_app_context()
"""

from __future__ import annotations

import logging
import os

from app.bootstrap.context import AppContext
from app.bootstrap.dependencies import build_app_context, create_notifiers, create_site_store
from app.infra.crypto import is_supported_hash
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_admin_auth_settings,
    get_base_settings,
    get_email_settings,
    get_firestore_settings,
    get_telegram_settings,
)
from utils.errors import ConfigurationError

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=get_base_settings().service_name,
        correlation_id_getter=get_correlation_id,
    )


def collect_settings_errors() -> list[str]:
    """Reúne erros de validação de todas as settings."""
    errors: list[str] = []
    base_settings = get_base_settings()

    errors.extend(f"base: {error}" for error in base_settings.validate())

    auth_settings = get_admin_auth_settings()
    errors.extend(f"auth: {error}" for error in auth_settings.validate())
    if auth_settings.admin_password_hash and not is_supported_hash(
        auth_settings.admin_password_hash
    ):
        errors.append("auth: ADMIN_PASSWORD_HASH não é um hash pbkdf2_sha256 válido")

    if base_settings.store_backend == "firestore":
        gcp_project = os.getenv("GCP_PROJECT", "") or os.getenv("GOOGLE_CLOUD_PROJECT", "")
        errors.extend(
            f"firestore: {error}" for error in get_firestore_settings().validate(gcp_project)
        )

    errors.extend(f"email: {error}" for error in get_email_settings().validate())
    errors.extend(f"telegram: {error}" for error in get_telegram_settings().validate())
    return errors


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local; as
    operações afetadas respondem 500 (ConfigurationError).

    Raises:
        ConfigurationError: Em ambiente estrito com settings inválidas.
    """
    environment = get_base_settings().environment
    errors = collect_settings_errors()

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise ConfigurationError(f"Configuração inválida para {environment}:\n{details}")


__all__ = [
    "AppContext",
    "build_app_context",
    "collect_settings_errors",
    "create_notifiers",
    "create_site_store",
    "initialize_app",
    "validate_runtime_settings",
]
