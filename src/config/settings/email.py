"""Settings de notificação por Email (SMTP).

Todas opcionais: sem host, usuário, senha ou destinatário o envio
de email fica desabilitado, sem falhar requests.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class EmailSettings:
    """Configurações do envio de email.

    Attributes:
        smtp_host: Host do servidor SMTP
        smtp_port: Porta do servidor SMTP (465 = TLS implícito)
        smtp_username: Usuário SMTP
        smtp_password: Senha SMTP
        to_email: Destinatário das notificações
        from_email: Remetente (usa smtp_username se vazio)
        request_timeout_seconds: Timeout da conexão SMTP
    """

    smtp_host: str = ""
    smtp_port: int = 587
    smtp_username: str = ""
    smtp_password: str = ""
    to_email: str = ""
    from_email: str = ""
    request_timeout_seconds: float = 15.0

    @property
    def enabled(self) -> bool:
        """True quando todas as settings obrigatórias do SMTP existem."""
        return not self.missing_fields()

    @property
    def sender(self) -> str:
        return self.from_email or self.smtp_username

    @property
    def use_implicit_tls(self) -> bool:
        return self.smtp_port == 465

    def missing_fields(self) -> list[str]:
        missing: list[str] = []
        if not self.smtp_host:
            missing.append("SMTP_HOST")
        if not self.smtp_username:
            missing.append("SMTP_USER")
        if not self.smtp_password:
            missing.append("SMTP_PASS")
        if not self.to_email:
            missing.append("MASTER_EMAIL_TO")
        return missing

    def validate(self) -> list[str]:
        """Valida settings de email.

        Ausência total é válida (notificação desabilitada); apenas
        valores malformados são erros.
        """
        errors: list[str] = []
        if self.smtp_port <= 0 or self.smtp_port > 65535:
            errors.append(f"SMTP_PORT inválido: {self.smtp_port}")
        return errors


def _parse_port(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        return 0


def _load_from_env() -> EmailSettings:
    """Carrega EmailSettings de variáveis de ambiente."""
    return EmailSettings(
        smtp_host=os.getenv("SMTP_HOST", ""),
        smtp_port=_parse_port(os.getenv("SMTP_PORT", "587")),
        smtp_username=os.getenv("SMTP_USER", ""),
        smtp_password=os.getenv("SMTP_PASS", ""),
        to_email=os.getenv("MASTER_EMAIL_TO", ""),
        from_email=os.getenv("EMAIL_FROM", ""),
        request_timeout_seconds=float(os.getenv("SMTP_TIMEOUT_SECONDS", "15")),
    )


@lru_cache(maxsize=1)
def get_email_settings() -> EmailSettings:
    """Retorna instância cacheada de EmailSettings."""
    return _load_from_env()
