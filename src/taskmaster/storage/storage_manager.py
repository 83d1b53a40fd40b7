# src/taskmaster/storage/storage_manager.py

from __future__ import annotations

import logging
from pathlib import Path

from ..model.store import EntityData
from ..model.user_prefs import UserPrefs
from .entity_storage import JsonEntityStorage
from .prefs_storage import JsonUserPrefsStorage

logger = logging.getLogger(__name__)


class StorageManager:
    """Facade over the data file and the prefs file."""

    def __init__(self, entity_storage: JsonEntityStorage, prefs_storage: JsonUserPrefsStorage) -> None:
        self._entities = entity_storage
        self._prefs = prefs_storage

    # ---- entities ----

    @property
    def entity_file_path(self) -> Path:
        return self._entities.file_path

    def read_entities(self) -> EntityData | None:
        logger.debug("Reading entities from %s", self.entity_file_path)
        return self._entities.read()

    def save_entities(self, data: EntityData) -> None:
        logger.debug("Saving entities to %s", self.entity_file_path)
        self._entities.save(data)

    # ---- prefs ----

    @property
    def user_prefs_file_path(self) -> Path:
        return self._prefs.file_path

    def read_user_prefs(self) -> UserPrefs | None:
        return self._prefs.read()

    def save_user_prefs(self, prefs: UserPrefs) -> None:
        self._prefs.save(prefs)
