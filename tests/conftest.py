"""Shared pytest fixtures for paramdeps tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from paramdeps.config.settings import ValidateSettings, get_settings


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep PARAMDEPS_* env vars and the cached settings out of every test."""
    for name in ("PARAMDEPS_ALLOW_EXTRA", "PARAMDEPS_NO_VALIDATION", "PARAMDEPS_CALLED"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> ValidateSettings:
    """Default settings, independent of the environment."""
    return ValidateSettings()
