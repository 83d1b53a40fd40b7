# tests/test_entity_storage.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from taskmaster.errors import CorruptDataError, StorageWriteError
from taskmaster.model.employee import Employee
from taskmaster.model.sample_data import get_sample_data
from taskmaster.model.store import EntityData, EntityStore
from taskmaster.model.task import Task, TaskStatus
from taskmaster.storage.entity_storage import JsonEntityStorage


def test_missing_file_reads_as_none(tmp_path: Path) -> None:
    assert JsonEntityStorage(tmp_path / "nope.json").read() is None


def test_round_trip(tmp_path: Path, store: EntityStore) -> None:
    store.add_task("Write docs", TaskStatus.PENDING, [1, 3])
    store.add_task("Ship", TaskStatus.COMPLETED)
    storage = JsonEntityStorage(tmp_path / "data" / "tasks.json")

    storage.save(store.to_data())
    loaded = storage.read()

    assert loaded is not None
    assert loaded.tasks == store.to_data().tasks
    assert loaded.employees == store.to_data().employees
    assert loaded.max_task_id == 2


def test_save_of_loaded_file_is_byte_identical(tmp_path: Path) -> None:
    first = JsonEntityStorage(tmp_path / "a.json")
    first.save(get_sample_data())

    loaded = first.read()
    assert loaded is not None
    second = JsonEntityStorage(tmp_path / "b.json")
    second.save(loaded)

    assert (tmp_path / "a.json").read_bytes() == (tmp_path / "b.json").read_bytes()


def test_file_layout(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    JsonEntityStorage(path).save(get_sample_data())
    raw = json.loads(path.read_text("utf-8"))

    assert set(raw) == {"tasks", "employees"}
    first = raw["tasks"][0]
    assert first == {"id": 1, "name": "Prepare quarterly report", "status": "in_progress", "assignedEmployees": []}
    assert raw["employees"][0]["id"] == 1
    assert raw["employees"][0]["phone"] == "87438807"
    assert not (tmp_path / "tasks.json.tmp").exists()


def test_legacy_fields_are_accepted(tmp_path: Path) -> None:
    path = tmp_path / "legacy.json"
    path.write_text(
        json.dumps(
            {
                "employees": [{"id": 1, "name": "A"}, {"id": 2, "name": "B"}],
                "tasks": [{"id": 4, "name": "Old", "status": False, "assignedEmployees": "1 2"}],
            }
        ),
        "utf-8",
    )
    data = JsonEntityStorage(path).read()
    assert data is not None
    assert data.tasks == [Task(4, "Old", TaskStatus.IN_PROGRESS, frozenset({1, 2}))]


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[]",
        json.dumps({"tasks": {"id": 1}}),
        json.dumps({"tasks": [{"id": "one", "name": "x"}]}),
        json.dumps({"tasks": [{"id": 1, "name": ""}]}),
        json.dumps({"tasks": [{"id": 1, "name": "x", "status": "blocked"}]}),
        json.dumps({"tasks": [{"id": 1, "name": "x"}, {"id": 1, "name": "y"}]}),
        json.dumps({"tasks": [{"id": 1, "name": "x", "assignedEmployees": [3]}]}),
        json.dumps({"employees": [{"id": 1, "name": "a"}, {"id": 1, "name": "b"}]}),
        pytest.param("[" * 200000 + "]" * 200000, id="deep-nesting"),
        pytest.param('{"tasks": [{"id": ' + "9" * 5000 + ', "name": "x"}]}', id="huge-int"),
    ],
)
def test_invalid_files_are_corrupt(tmp_path: Path, content: str) -> None:
    path = tmp_path / "bad.json"
    path.write_text(content, "utf-8")
    with pytest.raises(CorruptDataError) as exc:
        JsonEntityStorage(path).read()
    assert exc.value.path == path


def test_failed_write_keeps_previous_file(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    storage = JsonEntityStorage(path)
    storage.save(EntityData(tasks=[Task(1, "keep me")]))
    before = path.read_bytes()

    # A directory where the temp file should go makes the write fail.
    (tmp_path / "tasks.json.tmp").mkdir()
    with pytest.raises(StorageWriteError):
        storage.save(EntityData(tasks=[Task(1, "replaced")]))

    assert path.read_bytes() == before


def test_path_that_cannot_be_stat_is_corrupt(tmp_path: Path) -> None:
    path = tmp_path / ("c" * 300 + ".json")
    with pytest.raises(CorruptDataError):
        JsonEntityStorage(path).read()


def test_unserializable_attribute_is_a_write_error(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    data = EntityData(employees=[Employee(1, "A", {"joined": {1, 2}})])

    with pytest.raises(StorageWriteError):
        JsonEntityStorage(path).save(data)

    assert not path.exists()
    assert not (tmp_path / "tasks.json.tmp").exists()
