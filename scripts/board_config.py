"""Task board settings loaded from environment variables.

Environment:
    TASKBOARD_STORAGE_DIR   Directory holding the storage slot (default: ~/.taskboard)
    TASKBOARD_STORAGE_KEY   Name of the slot holding the task collection (default: tasks)
    TASKBOARD_LOG_LEVEL     Console log level for CLI commands (default: WARNING)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

ENV_PREFIX = "TASKBOARD"

DEFAULT_STORAGE_DIR = Path("~/.taskboard").expanduser()
LOG_FILE_NAME = "taskboard.log"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str) -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_level(name: str, default: str) -> str:
    level = _env(name, default).upper()
    return level if level in LOG_LEVELS else default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True)
class Settings:
    storage_dir: Path
    storage_key: str
    log_level: str

    @property
    def log_file(self) -> Path:
        return self.storage_dir / LOG_FILE_NAME

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            storage_dir=_env_path(_k("STORAGE_DIR"), DEFAULT_STORAGE_DIR),
            storage_key=_env(_k("STORAGE_KEY"), "tasks"),
            log_level=_env_level(_k("LOG_LEVEL"), "WARNING"),
        )

    def with_overrides(
        self,
        storage_dir: Path | None = None,
        storage_key: str | None = None,
        log_level: str | None = None,
    ) -> "Settings":
        """Return a copy with any non-None argument applied."""
        changes = {}
        if storage_dir is not None:
            changes["storage_dir"] = Path(storage_dir).expanduser()
        if storage_key:
            changes["storage_key"] = storage_key
        if log_level:
            changes["log_level"] = log_level.upper()
        return replace(self, **changes)
