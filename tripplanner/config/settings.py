"""Runtime settings snapshot resolved from the environment."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

from tripplanner.shared.exceptions import ConfigurationError

_TRUTHY = {"1", "true", "yes", "on"}
_STORE_BACKENDS = {"sqlite", "memory"}
_DEFAULT_DB_PATH = Path("data") / "tripplanner.sqlite3"


def _is_enabled(value: str | None, default: bool = False) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def resolve_store_backend() -> str:
    raw = str(os.getenv("TRIP_STORE_BACKEND") or "sqlite").strip().lower()
    if raw not in _STORE_BACKENDS:
        raise ConfigurationError("TRIP_STORE_BACKEND", raw)
    return raw


def resolve_db_path() -> Path:
    raw = str(os.getenv("TRIP_STORE_DB") or "").strip()
    return Path(raw) if raw else _DEFAULT_DB_PATH


def resolve_cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()] or ["*"]


class Settings(BaseModel):
    store_backend: str = Field(default="sqlite")
    db_path: Path = Field(default=_DEFAULT_DB_PATH)
    enable_docs: bool = Field(default=False)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    structured_logs: bool = Field(default=True)


def resolve_settings() -> Settings:
    return Settings(
        store_backend=resolve_store_backend(),
        db_path=resolve_db_path(),
        enable_docs=_is_enabled(os.getenv("ENABLE_DOCS")),
        cors_origins=resolve_cors_origins(),
        structured_logs=_is_enabled(os.getenv("STRUCTURED_LOGS"), default=True),
    )


__all__ = ["Settings", "resolve_settings"]
