"""Environment-backed settings for the CLI and the HTTP service."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError
from .rules import DEFAULT_MAX_UPLOAD_BYTES

LOG_LEVEL_ENV = "TEXT_TOOLS_LOG_LEVEL"
MAX_UPLOAD_BYTES_ENV = "TEXT_TOOLS_MAX_UPLOAD_BYTES"


def env_str(name: str, or_value: Optional[str] = None) -> Optional[str]:
    """Fetch an environment variable; blank counts as unset."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return or_value
    return value.strip()


def env_int(name: str, or_value: int) -> int:
    raw = env_str(name)
    if raw is None:
        return or_value
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Environment variable {name!r} must be an integer (got {raw!r})") from exc


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES


def load_settings() -> Settings:
    max_upload_bytes = env_int(MAX_UPLOAD_BYTES_ENV, DEFAULT_MAX_UPLOAD_BYTES)
    if max_upload_bytes <= 0:
        raise ConfigurationError(f"{MAX_UPLOAD_BYTES_ENV} must be positive (got {max_upload_bytes})")
    return Settings(
        log_level=env_str(LOG_LEVEL_ENV, "WARNING").upper(),
        max_upload_bytes=max_upload_bytes,
    )
