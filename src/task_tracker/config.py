# src/task_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

- One Settings object for the whole app.
- Every value has a default; no configuration is required to run.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .tasks.task_models import MAX_DESCRIPTION_LENGTH

ENV_PREFIX = "TASK_TRACKER"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Storage ----
    db_path: Path

    # ---- Logging ----
    log_level: str = "WARNING"
    log_file: Path | None = None

    # ---- Command behaviour ----
    # Abort a mutation when its id cannot be parsed. When False the sentinel
    # id -1 is passed on to the store instead, which updates nothing.
    strict_ids: bool = True
    # argv starts with an interpreter + script pair instead of a single executable.
    interpreter_invocation: bool = False
    max_description_length: int = MAX_DESCRIPTION_LENGTH

    @staticmethod
    def from_env() -> "Settings":
        max_len = _env_int(_k("MAX_DESCRIPTION_LENGTH"), MAX_DESCRIPTION_LENGTH)
        return Settings(
            db_path=_env_path(_k("DB_PATH"), None) or Path("db.json"),
            log_level=_env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING",
            log_file=_env_path(_k("LOG_FILE"), None),
            strict_ids=_env_bool(_k("STRICT_IDS"), True),
            interpreter_invocation=_env_bool(_k("INTERPRETER_INVOCATION"), False),
            max_description_length=max_len if max_len > 0 else MAX_DESCRIPTION_LENGTH,
        )


load_dotenv(override=False)

SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
