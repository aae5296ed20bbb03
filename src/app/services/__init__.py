"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.credentials import CredentialVerifier
from app.services.inquiries import InquiryService
from app.services.session_tokens import AdminClaims, SessionTokenService
from app.services.site_content import SiteContentService, clamp_inquiry_limit

__all__ = [
    "AdminClaims",
    "CredentialVerifier",
    "InquiryService",
    "SessionTokenService",
    "SiteContentService",
    "clamp_inquiry_limit",
]
