# nuggetbook/config.py
"""Configuration accessors.

Every setting is read from the environment at call time so tests and the CLI
can override values with plain environment variables.
"""
from __future__ import annotations

import os
from typing import List, Optional

DEFAULT_DATABASE_URL = "sqlite:///nuggetbook.db"
DEFAULT_GOOGLE_BOOKS_API_BASE = "https://www.googleapis.com/books/v1/volumes"
DEFAULT_GOOGLE_BOOKS_TIMEOUT = 10.0
DEFAULT_PUBLIC_ORIGIN = "http://localhost:5173"
DEFAULT_SEARCH_DEBOUNCE_MS = 500
DEFAULT_SHARE_ID_LENGTH = 10
DEFAULT_LOG_LEVEL = "INFO"


def _raw_env(name: str, default: Optional[str] = None) -> Optional[str]:
    val = os.getenv(name)
    return val if val is not None else default


def _env_int(name: str, default: int) -> int:
    raw = _raw_env(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def database_url() -> str:
    return _raw_env("DATABASE_URL", DEFAULT_DATABASE_URL)  # type: ignore[return-value]


def google_books_api_base() -> str:
    return _raw_env("GOOGLE_BOOKS_API_BASE", DEFAULT_GOOGLE_BOOKS_API_BASE).rstrip("/")  # type: ignore[union-attr]


def google_books_api_key() -> Optional[str]:
    value = _raw_env("GOOGLE_BOOKS_API_KEY")
    if value is None:
        return None
    value = value.strip()
    return value or None


def google_books_timeout() -> float:
    raw = _raw_env("GOOGLE_BOOKS_TIMEOUT")
    if raw is None or not raw.strip():
        return DEFAULT_GOOGLE_BOOKS_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"GOOGLE_BOOKS_TIMEOUT must be a number, got {raw!r}")


def public_origin() -> str:
    return _raw_env("PUBLIC_ORIGIN", DEFAULT_PUBLIC_ORIGIN).rstrip("/")  # type: ignore[union-attr]


def cors_origins() -> List[str]:
    raw = _raw_env("CORS_ORIGINS")
    if not raw:
        return [public_origin()]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def search_debounce_seconds() -> float:
    return _env_int("SEARCH_DEBOUNCE_MS", DEFAULT_SEARCH_DEBOUNCE_MS) / 1000.0


def share_id_length() -> int:
    return _env_int("SHARE_ID_LENGTH", DEFAULT_SHARE_ID_LENGTH)


def log_level_name() -> str:
    return _raw_env("NUGGETBOOK_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()  # type: ignore[union-attr]


def summarize_runtime_config() -> dict:
    return {
        "database_url": database_url(),
        "google_books_api_base": google_books_api_base(),
        "public_origin": public_origin(),
        "log_level": log_level_name(),
    }


__all__ = [
    "database_url",
    "google_books_api_base",
    "google_books_api_key",
    "google_books_timeout",
    "public_origin",
    "cors_origins",
    "search_debounce_seconds",
    "share_id_length",
    "log_level_name",
    "summarize_runtime_config",
]
