# src/taskmaster/config.py

"""
Application configuration.

Two layers:
- process environment (optionally from a local .env): where the config file
  lives and where logs go
- the JSON config file itself: log level and the user prefs file path

read_config() / save_config() follow the same contract as the storage classes:
None for a missing file, CorruptDataError for a broken one.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .errors import CorruptDataError
from .storage.json_util import read_json_file, write_json_file

ENV_PREFIX = "TASKMASTER"

DEFAULT_CONFIG_FILE = Path("config.json")
DEFAULT_USER_PREFS_FILE = Path("preferences.json")
DEFAULT_LOG_DIR = Path(".local/taskmaster")
DEFAULT_LOG_LEVEL = "INFO"

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def load_environment() -> None:
    """Load .env into os.environ without overriding real variables."""
    load_dotenv(override=False)


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def env_config_path() -> Path:
    return _env_path(_k("CONFIG"), DEFAULT_CONFIG_FILE)


def env_log_dir() -> Path:
    return _env_path(_k("LOG_DIR"), DEFAULT_LOG_DIR)


def normalize_log_level(raw: object) -> str:
    """Return the canonical level name or raise ValueError."""
    if not isinstance(raw, str):
        raise ValueError(f"logLevel must be a string, got {raw!r}")
    name = raw.strip().upper()
    if name == "WARN":
        name = "WARNING"
    if name not in _LEVEL_NAMES:
        raise ValueError(f"Unknown logLevel: {raw!r}")
    return name


@dataclass(frozen=True, slots=True)
class Config:
    log_level: str = DEFAULT_LOG_LEVEL
    user_prefs_file_path: Path = DEFAULT_USER_PREFS_FILE

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    def to_json(self) -> dict[str, Any]:
        return {
            "logLevel": self.log_level,
            "userPrefsFilePath": self.user_prefs_file_path.as_posix(),
        }

    @staticmethod
    def from_json(raw: object) -> Config:
        if not isinstance(raw, dict):
            raise ValueError("config must be a JSON object")
        prefs_path = raw.get("userPrefsFilePath", DEFAULT_USER_PREFS_FILE.as_posix())
        if not isinstance(prefs_path, str) or not prefs_path.strip():
            raise ValueError("userPrefsFilePath must be a non-empty string")
        return Config(
            log_level=normalize_log_level(raw.get("logLevel", DEFAULT_LOG_LEVEL)),
            user_prefs_file_path=Path(prefs_path),
        )


def read_config(path: str | Path) -> Config | None:
    raw = read_json_file(path)
    if raw is None:
        return None
    try:
        return Config.from_json(raw)
    except ValueError as e:
        raise CorruptDataError(path, str(e)) from e


def save_config(config: Config, path: str | Path) -> None:
    write_json_file(path, config.to_json())
