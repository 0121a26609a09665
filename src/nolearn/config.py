# src/nolearn/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Built lazily on first use so tests can set the environment beforehand.
- Bad values never crash startup; they fall back to defaults.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "NOLEARN"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


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


def _default_clear_command() -> str:
    return "cls" if sys.platform == "win32" else "clear"


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path
    file_logging: bool

    # ---- Storage ----
    tasks_path: Path

    # ---- Terminal ----
    clear_command: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "Nolearn").strip() or "Nolearn"

        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper()
        if log_level not in _LOG_LEVELS:
            log_level = "WARNING"

        log_dir = _env_path(_k("LOG_DIR"), Path(".local/nolearn"))
        file_logging = _env_bool(_k("FILE_LOGGING"), True)

        tasks_path = _env_path(_k("TASKS_PATH"), Path("tasks.json"))

        clear_command = _env(_k("CLEAR_COMMAND"), "").strip() or _default_clear_command()

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            file_logging=file_logging,
            tasks_path=tasks_path,
            clear_command=clear_command,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        # A local .env never overrides variables already set in the environment.
        load_dotenv(find_dotenv(usecwd=True), override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS


def reset_settings() -> None:
    """Drop the cached Settings so the next get_settings() re-reads the environment."""
    global _SETTINGS
    _SETTINGS = None
