# src/taskmaster/model/task.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import StrEnum


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Notes:
    - older data files store a single "done" boolean; from_flag() keeps that
      encoding readable (False -> in_progress, True -> completed)
    - IN_PROGRESS is the default for new tasks
    """

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_flag(cls, done: bool) -> TaskStatus:
        return cls.COMPLETED if done else cls.IN_PROGRESS

    @classmethod
    def parse(cls, raw: object) -> TaskStatus:
        """Accept an enum value, a display label or a legacy boolean."""
        if isinstance(raw, bool):
            return cls.from_flag(raw)
        if isinstance(raw, str):
            key = raw.strip().lower()
            for status in cls:
                if key in (status.value, status.label.lower()):
                    return status
        raise ValueError(f"Unknown task status: {raw!r}")


_LABELS = {
    TaskStatus.PENDING: "Pending",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.COMPLETED: "Completed",
}

DEFAULT_STATUS = TaskStatus.from_flag(False)


def parse_employee_ids(raw: object) -> frozenset[int]:
    """
    Normalize an assignment field to a set of employee ids.

    Accepts a list of ints or the legacy delimited string ("1 2 3", "1,2").
    """
    if raw is None:
        return frozenset()
    if isinstance(raw, str):
        parts = [p for p in raw.replace(",", " ").split() if p]
        return frozenset(int(p) for p in parts)
    if isinstance(raw, Iterable):
        out: set[int] = set()
        for item in raw:
            if isinstance(item, bool) or not isinstance(item, int):
                raise ValueError(f"Employee id must be an integer, got {item!r}")
            out.add(item)
        return frozenset(out)
    raise ValueError(f"Unsupported assignment field: {raw!r}")


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    name: str
    status: TaskStatus = DEFAULT_STATUS
    assigned_employees: frozenset[int] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Task name is required")
        # Callers may pass any iterable; keep the field hashable/immutable.
        if not isinstance(self.assigned_employees, frozenset):
            object.__setattr__(self, "assigned_employees", frozenset(self.assigned_employees))

    @property
    def is_done(self) -> bool:
        return self.status is TaskStatus.COMPLETED

    def with_status(self, status: TaskStatus) -> Task:
        return replace(self, status=status)

    def with_employee(self, employee_id: int) -> Task:
        if employee_id in self.assigned_employees:
            return self
        return replace(self, assigned_employees=self.assigned_employees | {employee_id})

    def without_employee(self, employee_id: int) -> Task:
        if employee_id not in self.assigned_employees:
            return self
        return replace(self, assigned_employees=self.assigned_employees - {employee_id})
