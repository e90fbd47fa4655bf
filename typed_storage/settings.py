from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_APP_VERSION = "v0.1.0"
# Oldest version whose stored files the current format can still read.
DEFAULT_MIN_COMPATIBLE_VERSION = "v0.1.0"


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


@dataclass(frozen=True)
class Settings:
    # Storage
    data_dir: Path

    # Versioning
    app_version: str
    min_compatible_version: str

    # Logging
    log_level: str
    log_file: Path | None


def get_settings() -> Settings:
    data_dir = Path(_env_str("TYPED_STORAGE_DATA_DIR", "data")).expanduser()

    app_version = _env_str("TYPED_STORAGE_APP_VERSION", DEFAULT_APP_VERSION)
    min_compatible_version = _env_str("TYPED_STORAGE_MIN_COMPATIBLE_VERSION", DEFAULT_MIN_COMPATIBLE_VERSION)

    log_level = _env_str("TYPED_STORAGE_LOG_LEVEL", "INFO").upper()
    raw_log_file = os.getenv("TYPED_STORAGE_LOG_FILE", "").strip()
    log_file = Path(raw_log_file).expanduser() if raw_log_file else None

    return Settings(
        data_dir=data_dir,
        app_version=app_version,
        min_compatible_version=min_compatible_version,
        log_level=log_level,
        log_file=log_file,
    )


def load_settings(env_file: str | os.PathLike[str] = "local.env") -> Settings:
    """Load env_file into the environment (if present) and read settings."""
    load_dotenv(env_file)
    return get_settings()
