# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from taskmaster.model.identity import IdentityAllocator
from taskmaster.model.sample_data import sample_employees
from taskmaster.model.store import EntityData, EntityStore


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """
    bootstrap() reconfigures the root logger; put pytest's handlers back
    afterwards so one test cannot change logging for the next.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


@pytest.fixture()
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Run the test inside tmp_path.

    Default file locations (config.json, preferences.json, data/...) are
    relative to the working directory, so this keeps them per test.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TASKMASTER_CONFIG", raising=False)
    monkeypatch.setenv("TASKMASTER_LOG_DIR", str(tmp_path / "logs"))
    return tmp_path


@pytest.fixture()
def allocator() -> IdentityAllocator:
    return IdentityAllocator()


@pytest.fixture()
def store(allocator: IdentityAllocator) -> EntityStore:
    """Store with the sample employees and no tasks."""
    return EntityStore.from_data(EntityData(employees=sample_employees()), allocator)
