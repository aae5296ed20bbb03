"""Settings base do backend do site.

Configurações comuns a todos os componentes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]
StoreBackend = Literal["firestore", "memory"]


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs
        debug: Modo debug ativo
        store_backend: Backend do document store (firestore|memory)
        cors_origins: Origins permitidas (separadas por vírgula)
        static_dir: Pasta com login.html e dashboard.html
    """

    environment: Environment = "development"
    service_name: str = "trainer-site"
    debug: bool = False
    store_backend: StoreBackend = "firestore"
    cors_origins: str = "*"
    static_dir: str = "public"

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment == "development"

    @property
    def cors_origins_list(self) -> list[str]:
        """Lista de origins CORS sem espaços e sem itens vazios."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if self.store_backend == "memory" and self.is_production:
            errors.append("STORE_BACKEND=memory não é permitido em produção")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _parse_store_backend(value: str) -> StoreBackend:
    return "memory" if value.strip().lower() == "memory" else "firestore"


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "trainer-site"),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        store_backend=_parse_store_backend(os.getenv("STORE_BACKEND", "firestore")),
        cors_origins=os.getenv("CORS_ORIGINS", "*"),
        static_dir=os.getenv("STATIC_DIR", "public"),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
