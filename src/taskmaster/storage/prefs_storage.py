# src/taskmaster/storage/prefs_storage.py

from __future__ import annotations

from pathlib import Path

from ..errors import CorruptDataError
from ..model.user_prefs import UserPrefs
from .json_util import read_json_file, write_json_file


class JsonUserPrefsStorage:
    """User preferences file. Same contract as JsonEntityStorage."""

    def __init__(self, file_path: str | Path) -> None:
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    def read(self) -> UserPrefs | None:
        raw = read_json_file(self._file_path)
        if raw is None:
            return None
        try:
            return UserPrefs.from_json(raw)
        except ValueError as e:
            raise CorruptDataError(self._file_path, str(e)) from e

    def save(self, prefs: UserPrefs) -> None:
        write_json_file(self._file_path, prefs.to_json())
