"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Configure the test environment (in-memory adapters, fake mail)
  - Reset cached settings and container singletons between tests
  - Provide user / entry factories shared by unit and API tests

Collaborators:
  - pytest: Test framework
  - workdesk.container: DI singletons (lru_cache)
  - workdesk.infrastructure.repositories.in_memory

Notes:
  - Env vars are set BEFORE importing workdesk so module-level settings reads
    (CORS, logger) see the test environment
"""

import os
import sys
from datetime import datetime
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("FAKE_MAIL", "1")
os.environ.setdefault("LOG_JSON", "0")
os.environ.setdefault("JWT_SECRET", "test-secret-0123456789abcdef0123456789")

from workdesk.crosscutting import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

from workdesk import container  # noqa: E402
from workdesk.domain.entities import UserRecord  # noqa: E402
from workdesk.infrastructure.repositories.in_memory import (  # noqa: E402
    InMemoryNoteRepository,
    InMemoryUserRepository,
    InMemoryWorkHoursRepository,
)

FIXED_NOW = datetime(2024, 6, 15, 12, 0, 0)

_CACHED_FACTORIES = (
    container.get_work_hours_repository,
    container.get_note_repository,
    container.get_user_repository,
    container.get_report_exporter,
    container.get_scratch_file_store,
    container.get_mail_sender,
)


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line("markers", "api: HTTP tests through the TestClient")


@pytest.fixture(autouse=True)
def _reset_singletons(tmp_path, monkeypatch):
    """R: every test starts with empty stores and its own export directory."""
    monkeypatch.setenv("EXPORT_TMP_DIR", str(tmp_path / "exports"))
    app_config.get_settings.cache_clear()
    for factory in _CACHED_FACTORIES:
        factory.cache_clear()
    yield
    app_config.get_settings.cache_clear()
    for factory in _CACHED_FACTORIES:
        factory.cache_clear()


# ============================================================================
# Repositories
# ============================================================================


@pytest.fixture
def work_hours_repo() -> InMemoryWorkHoursRepository:
    return InMemoryWorkHoursRepository()


@pytest.fixture
def note_repo() -> InMemoryNoteRepository:
    return InMemoryNoteRepository()


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


# ============================================================================
# Factories
# ============================================================================


@pytest.fixture
def make_user():
    """R: create a user in the given repository (email optional)."""

    def _make(repo, first_name="Asha", last_name="Rao", mobile="9876543210", **kw):
        return repo.create_user(
            UserRecord(
                first_name=first_name,
                last_name=last_name,
                country_code=kw.pop("country_code", "+91"),
                mobile=mobile,
                account_id=kw.pop("account_id", f"ACC{mobile[-4:]}"),
                **kw,
            )
        )

    return _make


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW
