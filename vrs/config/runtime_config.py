"""Runtime configuration helpers for the VRS service."""
from __future__ import annotations

import os
from typing import Optional

DATABASE_URL_VAR = "VRS_DATABASE_URL"
DEFAULT_RESOURCES_COLLECTION = "resources"
DEFAULT_MOCK_LATENCY_MS = 1000


class MissingConfiguration(RuntimeError):
    """Raised when a mandatory setting is absent from the environment."""


class InvalidConfiguration(ValueError):
    """Raised when a setting is present but cannot be parsed."""


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(name, default)


def get_database_url() -> Optional[str]:
    value = (_get_env(DATABASE_URL_VAR) or "").strip()
    return value or None


def require_database_url() -> str:
    """Return the store connection string or fail; there is no built-in fallback."""
    url = get_database_url()
    if not url:
        raise MissingConfiguration(f"{DATABASE_URL_VAR} must be set to the document store connection string")
    return url


def get_resources_collection() -> str:
    return _get_env("VRS_RESOURCES_COLLECTION") or DEFAULT_RESOURCES_COLLECTION


def get_mock_latency_seconds() -> float:
    raw = _get_env("VRS_MOCK_LATENCY_MS")
    if raw is None or raw.strip() == "":
        return DEFAULT_MOCK_LATENCY_MS / 1000.0
    try:
        millis = int(raw)
    except ValueError as exc:
        raise InvalidConfiguration(f"VRS_MOCK_LATENCY_MS must be an integer, got {raw!r}") from exc
    return max(0, millis) / 1000.0


def get_log_level() -> str:
    return (_get_env("VRS_LOG_LEVEL") or "INFO").upper()
