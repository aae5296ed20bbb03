"""Testes do SessionTokenService (emissão e validação de JWT)."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from app.services import SessionTokenService
from app.services.session_tokens import ADMIN_ROLE
from config.settings import AdminAuthSettings
from tests.fakes.admin import JWT_SECRET
from utils.errors import AuthenticationError, ConfigurationError, MissingCredentialError


def test_issued_token_round_trips(auth_settings: AdminAuthSettings) -> None:
    service = SessionTokenService(auth_settings)

    claims = service.verify(service.issue("coach@example.com"))

    assert claims.email == "coach@example.com"
    assert claims.role == ADMIN_ROLE


def test_token_expires_after_seven_days(auth_settings: AdminAuthSettings) -> None:
    issued_at = datetime.now(UTC).replace(microsecond=0)
    service = SessionTokenService(auth_settings, clock=lambda: issued_at)

    payload = jwt.decode(service.issue("coach@example.com"), JWT_SECRET, algorithms=["HS256"])

    assert payload["role"] == "admin"
    assert payload["exp"] - payload["iat"] == int(timedelta(days=7).total_seconds())


def test_expired_token_is_invalid(auth_settings: AdminAuthSettings) -> None:
    eight_days_ago = datetime.now(UTC) - timedelta(days=8)
    old_service = SessionTokenService(auth_settings, clock=lambda: eight_days_ago)
    token = old_service.issue("coach@example.com")

    with pytest.raises(AuthenticationError, match="Invalid token"):
        SessionTokenService(auth_settings).verify(token)


def test_token_signed_with_other_secret_is_invalid(auth_settings: AdminAuthSettings) -> None:
    token = jwt.encode(
        {"role": "admin", "email": "x", "exp": datetime.now(UTC) + timedelta(days=1)},
        "another-secret",
        algorithm="HS256",
    )

    with pytest.raises(AuthenticationError, match="Invalid token"):
        SessionTokenService(auth_settings).verify(token)


def test_non_admin_role_is_invalid(auth_settings: AdminAuthSettings) -> None:
    token = jwt.encode(
        {"role": "viewer", "email": "x", "exp": datetime.now(UTC) + timedelta(days=1)},
        JWT_SECRET,
        algorithm="HS256",
    )

    with pytest.raises(AuthenticationError, match="Invalid token"):
        SessionTokenService(auth_settings).verify(token)


def test_token_without_expiry_is_invalid(auth_settings: AdminAuthSettings) -> None:
    token = jwt.encode({"role": "admin", "email": "x"}, JWT_SECRET, algorithm="HS256")

    with pytest.raises(AuthenticationError):
        SessionTokenService(auth_settings).verify(token)


def test_garbage_token_is_invalid(auth_settings: AdminAuthSettings) -> None:
    with pytest.raises(AuthenticationError, match="Invalid token"):
        SessionTokenService(auth_settings).verify("not.a.jwt")


@pytest.mark.parametrize("token", [None, "", "   "])
def test_missing_token(auth_settings: AdminAuthSettings, token: str | None) -> None:
    with pytest.raises(MissingCredentialError, match="Missing token"):
        SessionTokenService(auth_settings).verify(token)


def test_missing_secret_is_configuration_error() -> None:
    service = SessionTokenService(AdminAuthSettings(admin_email="coach@example.com"))

    with pytest.raises(ConfigurationError):
        service.issue("coach@example.com")
    with pytest.raises(ConfigurationError):
        service.verify("some.token.value")
