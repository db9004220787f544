"""Shared pytest fixtures."""

import pytest

from appconfig.core.logging import configure_logging
from appconfig.services import config_store


@pytest.fixture(scope="session", autouse=True)
def _logging() -> None:
    configure_logging()


@pytest.fixture(autouse=True)
def fresh_store(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test with an uninitialized store, as in a new process."""
    monkeypatch.setattr(config_store, "_config_record", None)
