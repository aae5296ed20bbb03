"""Configuração do pytest para o backend do site do treinador."""

import sys
from pathlib import Path

import pytest
from passlib.hash import pbkdf2_sha256

# Adiciona src/ (imports absolutos) e a raiz (tests.fakes) ao PYTHONPATH
root_path = Path(__file__).parent.parent
for path in (root_path / "src", root_path):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from app.bootstrap.context import AppContext  # noqa: E402
from app.infra.stores import MemorySiteStore  # noqa: E402
from config.settings import AdminAuthSettings, BaseSettings  # noqa: E402
from tests.fakes.admin import ADMIN_EMAIL, ADMIN_PASSWORD, JWT_SECRET  # noqa: E402
from tests.fakes.fake_notifier import FakeNotifier  # noqa: E402


@pytest.fixture(scope="session")
def admin_password_hash() -> str:
    # Poucas rounds para manter os testes rápidos
    return pbkdf2_sha256.using(rounds=1000).hash(ADMIN_PASSWORD)


@pytest.fixture
def auth_settings(admin_password_hash: str) -> AdminAuthSettings:
    return AdminAuthSettings(
        admin_email=ADMIN_EMAIL,
        admin_password_hash=admin_password_hash,
        jwt_secret=JWT_SECRET,
    )


@pytest.fixture
def site_store() -> MemorySiteStore:
    return MemorySiteStore()


@pytest.fixture
def email_notifier() -> FakeNotifier:
    return FakeNotifier("email")


@pytest.fixture
def telegram_notifier() -> FakeNotifier:
    return FakeNotifier("telegram")


@pytest.fixture
def app_context(
    site_store: MemorySiteStore,
    auth_settings: AdminAuthSettings,
    email_notifier: FakeNotifier,
    telegram_notifier: FakeNotifier,
    tmp_path: Path,
) -> AppContext:
    return AppContext.create(
        store=site_store,
        auth_settings=auth_settings,
        notifiers=(email_notifier, telegram_notifier),
        base_settings=BaseSettings(store_backend="memory", static_dir=str(tmp_path)),
    )
