# src/taskmaster/cli/bootstrap.py

"""
Startup pipeline (composition root).

Stages, in order, each falling back to a default instead of failing:
1. config file      -> default Config, then always written back
2. logging          -> configured from Config
3. user prefs file  -> default UserPrefs, then always written back
4. data file        -> sample data when missing or corrupt
5. sample seeding   -> SAMPLE_ASSIGNMENTS applied when sample data is in use
6. ready            -> BootstrapResult handed to the logic/UI layer

There are no retries. Whatever happens, bootstrap() returns a usable result.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from ..config import Config, env_config_path, env_log_dir, read_config, save_config
from ..errors import DataLoadingError, ModelError, StorageWriteError, error_details
from ..logging_setup import setup_logging
from ..model.identity import IdentityAllocator
from ..model.sample_data import SAMPLE_ASSIGNMENTS, get_sample_data
from ..model.store import EntityStore
from ..model.user_prefs import UserPrefs
from ..storage.entity_storage import JsonEntityStorage
from ..storage.prefs_storage import JsonUserPrefsStorage
from ..storage.storage_manager import StorageManager

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BootstrapResult:
    """
    Everything the logic/UI layer needs after startup.

    `prefs` is the live preferences slot: the UI replaces it (e.g. with
    `prefs.with_gui_settings(...)` when the window moves) and shutdown() saves
    whatever value it holds at that point.
    """

    config: Config
    prefs: UserPrefs
    storage: StorageManager
    store: EntityStore
    is_sample_data: bool


def init_config(config_path: str | Path | None = None) -> tuple[Config, Path]:
    """
    Load the config file (explicit path, else $TASKMASTER_CONFIG, else config.json).

    The result is saved back even when it was read fine, so new fields get
    written out with their defaults.
    """
    path = Path(config_path) if config_path is not None else env_config_path()
    if config_path is not None:
        logger.info("Custom config file specified %s", path)
    logger.info("Using config file : %s", path)

    try:
        loaded = read_config(path)
        if loaded is None:
            logger.info("Creating new config file %s", path)
        config = loaded or Config()
    except DataLoadingError as e:
        logger.warning(
            "Config file at %s could not be loaded (%s). Using default config properties.",
            path,
            e.reason,
        )
        config = Config()

    try:
        save_config(config, path)
    except StorageWriteError as e:
        logger.warning("Failed to save config file : %s", error_details(e))
    return config, path


def init_prefs(prefs_storage: JsonUserPrefsStorage) -> UserPrefs:
    """Same pattern as init_config, for the user prefs file."""
    path = prefs_storage.file_path
    logger.info("Using preference file : %s", path)

    try:
        loaded = prefs_storage.read()
        if loaded is None:
            logger.info("Creating new preference file %s", path)
        prefs = loaded or UserPrefs()
    except DataLoadingError as e:
        logger.warning(
            "Preference file at %s could not be loaded (%s). Using default preferences.",
            path,
            e.reason,
        )
        prefs = UserPrefs()

    try:
        prefs_storage.save(prefs)
    except StorageWriteError as e:
        logger.warning("Failed to save preference file : %s", error_details(e))
    return prefs


def seed_sample_assignments(
    store: EntityStore,
    assignments: Iterable[tuple[int, int]] = SAMPLE_ASSIGNMENTS,
) -> int:
    """
    Apply the demo assignment graph.

    Stops at the first failing pair; what was applied before it stays.
    Returns the number of pairs applied.
    """
    applied = 0
    try:
        for task_id, employee_id in assignments:
            store.assign(task_id, employee_id)
            applied += 1
    except ModelError as e:
        logger.warning("Error with generating sample data: %s", error_details(e))
    return applied


def init_store(
    storage: StorageManager,
    allocator: IdentityAllocator | None = None,
) -> tuple[EntityStore, bool]:
    """
    Build the EntityStore from the data file.

    Missing file -> sample data. Corrupt file -> sample data + warning.
    Either way is_sample_data is True and the demo assignments are seeded.
    """
    path = storage.entity_file_path
    logger.info("Using data file : %s", path)

    is_sample_data = False
    try:
        data = storage.read_entities()
        if data is None:
            logger.info("Creating a new data file %s populated with a sample TaskMasterPro.", path)
            is_sample_data = True
            data = get_sample_data()
    except DataLoadingError as e:
        logger.warning(
            "Data file at %s could not be loaded (%s). Will be starting with a sample TaskMasterPro.",
            path,
            e.reason,
        )
        is_sample_data = True
        data = get_sample_data()

    store = EntityStore.from_data(data, allocator)

    if is_sample_data:
        applied = seed_sample_assignments(store)
        logger.debug("Seeded %d sample assignments", applied)

    logger.info(
        "EntityStore ready tasks=%d sample=%s next_task_id=%d",
        len(store),
        is_sample_data,
        store.allocator.next(),
    )
    return store, is_sample_data


def bootstrap(
    config_path: str | Path | None = None,
    *,
    log_dir: str | Path | None = None,
    allocator: IdentityAllocator | None = None,
) -> BootstrapResult:
    logger.info("=============================[ Initializing TaskMasterPro ]===========================")

    config, _ = init_config(config_path)
    setup_logging(config, log_dir=log_dir if log_dir is not None else env_log_dir())

    prefs_storage = JsonUserPrefsStorage(config.user_prefs_file_path)
    prefs = init_prefs(prefs_storage)

    entity_storage = JsonEntityStorage(prefs.task_data_file_path)
    storage = StorageManager(entity_storage, prefs_storage)

    store, is_sample_data = init_store(storage, allocator)

    return BootstrapResult(
        config=config,
        prefs=prefs,
        storage=storage,
        store=store,
        is_sample_data=is_sample_data,
    )


def shutdown(result: BootstrapResult) -> None:
    """Best-effort save of result.prefs (the current value, not the startup one); never raises."""
    logger.info("============================ [ Stopping TaskMasterPro ] =============================")
    try:
        result.storage.save_user_prefs(result.prefs)
    except StorageWriteError as e:
        logger.error("Failed to save preferences %s", error_details(e))
