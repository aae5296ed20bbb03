"""Testes do CredentialVerifier."""

from __future__ import annotations

import pytest

from app.services import CredentialVerifier
from config.settings import AdminAuthSettings
from tests.fakes.admin import ADMIN_PASSWORD
from utils.errors import AuthenticationError, ConfigurationError


def test_accepts_matching_credentials(auth_settings: AdminAuthSettings) -> None:
    verifier = CredentialVerifier(auth_settings)

    assert verifier.verify("coach@example.com", ADMIN_PASSWORD) == "coach@example.com"


def test_identity_is_case_and_whitespace_insensitive(auth_settings: AdminAuthSettings) -> None:
    verifier = CredentialVerifier(auth_settings)

    assert verifier.verify("  COACH@example.COM ", ADMIN_PASSWORD) == "coach@example.com"


def test_password_is_not_trimmed(auth_settings: AdminAuthSettings) -> None:
    verifier = CredentialVerifier(auth_settings)

    with pytest.raises(AuthenticationError, match="Invalid credentials"):
        verifier.verify("coach@example.com", f" {ADMIN_PASSWORD} ")


@pytest.mark.parametrize(
    ("identity", "password"),
    [
        ("other@example.com", ADMIN_PASSWORD),
        ("coach@example.com", "wrong"),
        ("", ""),
        (None, None),
    ],
)
def test_rejects_with_single_message(
    auth_settings: AdminAuthSettings,
    identity: str | None,
    password: str | None,
) -> None:
    verifier = CredentialVerifier(auth_settings)

    with pytest.raises(AuthenticationError) as exc_info:
        verifier.verify(identity, password)

    assert exc_info.value.message == "Invalid credentials"
    assert exc_info.value.status_code == 401


def test_malformed_hash_counts_as_wrong_password() -> None:
    verifier = CredentialVerifier(
        AdminAuthSettings(admin_email="coach@example.com", admin_password_hash="not-a-hash")
    )

    with pytest.raises(AuthenticationError):
        verifier.verify("coach@example.com", ADMIN_PASSWORD)


@pytest.mark.parametrize(
    "settings",
    [
        AdminAuthSettings(admin_email="", admin_password_hash="$pbkdf2-sha256$x"),
        AdminAuthSettings(admin_email="coach@example.com", admin_password_hash=""),
    ],
)
def test_unconfigured_admin_is_a_server_error(settings: AdminAuthSettings) -> None:
    verifier = CredentialVerifier(settings)

    assert verifier.configured is False
    with pytest.raises(ConfigurationError):
        verifier.verify("coach@example.com", ADMIN_PASSWORD)
