"""Runtime settings resolution tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tripplanner.config.settings import resolve_settings
from tripplanner.shared.exceptions import ConfigurationError


def test_defaults(monkeypatch):
    monkeypatch.delenv("TRIP_STORE_BACKEND", raising=False)
    monkeypatch.delenv("TRIP_STORE_DB", raising=False)
    monkeypatch.delenv("STRUCTURED_LOGS", raising=False)

    settings = resolve_settings()

    assert settings.store_backend == "sqlite"
    assert settings.db_path == Path("data") / "tripplanner.sqlite3"
    assert settings.enable_docs is False
    assert settings.cors_origins == ["*"]
    assert settings.structured_logs is True


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("TRIP_STORE_BACKEND", " Memory ")
    monkeypatch.setenv("TRIP_STORE_DB", str(tmp_path / "t.sqlite3"))
    monkeypatch.setenv("ENABLE_DOCS", "yes")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")
    monkeypatch.setenv("STRUCTURED_LOGS", "off")

    settings = resolve_settings()

    assert settings.store_backend == "memory"
    assert settings.db_path == tmp_path / "t.sqlite3"
    assert settings.enable_docs is True
    assert settings.cors_origins == ["https://a.example", "https://b.example"]
    assert settings.structured_logs is False


def test_unknown_backend_is_rejected(monkeypatch):
    monkeypatch.setenv("TRIP_STORE_BACKEND", "postgres")
    with pytest.raises(ConfigurationError):
        resolve_settings()
