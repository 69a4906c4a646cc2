# src/captain_log/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing is read at import time; the first get_settings() call loads .env.
- Date/time patterns live here too and are handed to the parser and the
  storage codec explicitly by the bootstrap.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "CAPTAIN"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    file_logging: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_file_path: Path
    log_dir: Path

    # ---- Formatting ----
    display_datetime_format: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "Captain Barry").strip() or "Captain Barry"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        file_logging = _env_bool(_k("FILE_LOGGING"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/captain"))
        tasks_file_path = _env_path(_k("TASKS_FILE"), data_dir / "tasks.txt")
        log_dir = _env_path(_k("LOG_DIR"), data_dir)

        display_datetime_format = _env(_k("DISPLAY_DATETIME_FORMAT"), "%b %d %Y %H:%M")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            file_logging=file_logging,
            data_dir=data_dir,
            tasks_file_path=tasks_file_path,
            log_dir=log_dir,
            display_datetime_format=display_datetime_format,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Prefer real env vars over .env entries.
    load_dotenv(override=False)
    return Settings.from_env()
