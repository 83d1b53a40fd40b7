# src/taskmaster/storage/entity_storage.py

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ..errors import CorruptDataError, ModelError
from ..model.employee import Employee
from ..model.store import EntityData, EntityStore
from ..model.task import Task, TaskStatus, parse_employee_ids
from .json_util import read_json_file, write_json_file

logger = logging.getLogger(__name__)


def _require_int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    return value


def _require_str(value: Any, what: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{what} must be a non-empty string")
    return value


def task_to_json(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "name": task.name,
        "status": task.status.value,
        "assignedEmployees": sorted(task.assigned_employees),
    }


def task_from_json(raw: Any) -> Task:
    if not isinstance(raw, dict):
        raise ValueError("task record must be an object")
    return Task(
        id=_require_int(raw.get("id"), "task id"),
        name=_require_str(raw.get("name"), "task name"),
        status=TaskStatus.parse(raw.get("status", False)),
        assigned_employees=parse_employee_ids(raw.get("assignedEmployees")),
    )


def employee_to_json(employee: Employee) -> dict[str, Any]:
    out: dict[str, Any] = {"id": employee.id, "name": employee.name}
    out.update(employee.attributes)
    return out


def employee_from_json(raw: Any) -> Employee:
    if not isinstance(raw, dict):
        raise ValueError("employee record must be an object")
    attributes = {k: v for k, v in raw.items() if k not in ("id", "name")}
    return Employee(
        id=_require_int(raw.get("id"), "employee id"),
        name=_require_str(raw.get("name"), "employee name"),
        attributes=attributes,
    )


def data_to_json(data: EntityData) -> dict[str, Any]:
    return {
        "tasks": [task_to_json(t) for t in data.tasks],
        "employees": [employee_to_json(e) for e in data.employees],
    }


def data_from_json(raw: Any) -> EntityData:
    if not isinstance(raw, dict):
        raise ValueError("data file must contain a JSON object")
    tasks_raw = raw.get("tasks", [])
    employees_raw = raw.get("employees", [])
    if not isinstance(tasks_raw, list) or not isinstance(employees_raw, list):
        raise ValueError("'tasks' and 'employees' must be lists")
    return EntityData(
        tasks=[task_from_json(t) for t in tasks_raw],
        employees=[employee_from_json(e) for e in employees_raw],
    )


class JsonEntityStorage:
    """
    Task/employee data file.

    read():
    - None when the file is absent (first run)
    - CorruptDataError when it cannot be parsed or breaks a model invariant
      (duplicate ids, assignment to an unknown employee)
    """

    def __init__(self, file_path: str | Path) -> None:
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    def read(self) -> EntityData | None:
        raw = read_json_file(self._file_path)
        if raw is None:
            return None
        try:
            data = data_from_json(raw)
            # Dry-run through a throwaway store so invariant breaks surface here, not later.
            EntityStore.from_data(data)
        except (ValueError, ModelError) as e:
            raise CorruptDataError(self._file_path, str(e)) from e
        logger.debug(
            "Read data file %s tasks=%d employees=%d",
            self._file_path,
            len(data.tasks),
            len(data.employees),
        )
        return data

    def save(self, data: EntityData) -> None:
        write_json_file(self._file_path, data_to_json(data))
