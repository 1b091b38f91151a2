# src/tasktrack/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Unset variables reproduce the plain behavior: tasks.json in the working dir.

Variables:
- TASKTRACK_APP_NAME      display name (default: tasktrack)
- TASKTRACK_LOG_LEVEL     console log level (default: WARNING)
- TASKTRACK_TASKS_PATH    task file (default: tasks.json)
- TASKTRACK_LOG_DIR       directory for the debug log file (default: .local/tasktrack)
- TASKTRACK_FILE_LOGGING  write the debug log file (default: true)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKTRACK"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip()).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path
    file_logging: bool

    # ---- Storage ----
    tasks_path: Path

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "tasktrack"),
            log_level=_env(_k("LOG_LEVEL"), "WARNING").upper(),
            log_dir=_env_path(_k("LOG_DIR"), Path(".local/tasktrack")),
            file_logging=_env_bool(_k("FILE_LOGGING"), True),
            tasks_path=_env_path(_k("TASKS_PATH"), Path("tasks.json")),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
