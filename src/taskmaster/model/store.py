# src/taskmaster/model/store.py

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..errors import (
    DuplicateEmployeeError,
    DuplicateTaskError,
    EmployeeNotFoundError,
    TaskNotFoundError,
    UnknownEmployeeError,
)
from .employee import Employee
from .identity import IdentityAllocator
from .task import DEFAULT_STATUS, Task, TaskStatus

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EntityData:
    """Plain container moved between the store and persistence."""

    tasks: list[Task] = field(default_factory=list)
    employees: list[Employee] = field(default_factory=list)

    @property
    def max_task_id(self) -> int | None:
        """High-water mark of task ids (None when there are no tasks)."""
        if not self.tasks:
            return None
        return max(t.id for t in self.tasks)


@dataclass(frozen=True, slots=True)
class ReadOnlyView:
    """
    Point-in-time copy of the store for the UI/logic layers.

    Records are frozen and the containers are tuples, so later store
    mutations are never visible through an existing view.
    """

    tasks: tuple[Task, ...] = ()
    employees: tuple[Employee, ...] = ()

    def find_task(self, task_id: int) -> Task | None:
        return next((t for t in self.tasks if t.id == task_id), None)

    def find_employee(self, employee_id: int) -> Employee | None:
        return next((e for e in self.employees if e.id == employee_id), None)


class EntityStore:
    """
    In-memory owner of tasks and employees.

    Invariants enforced at this single choke point:
    - task ids are unique among held tasks (explicit ids included)
    - employee ids are unique
    - every id in a task's assignment set is a known employee

    Thread-safety:
    - one coarse lock around every operation, so an id allocation and the
      insertion that uses it are observed together
    """

    def __init__(self, allocator: IdentityAllocator | None = None) -> None:
        self._allocator = allocator or IdentityAllocator()
        self._tasks: dict[int, Task] = {}
        self._employees: dict[int, Employee] = {}
        self._lock = threading.RLock()

    @classmethod
    def from_data(cls, data: EntityData, allocator: IdentityAllocator | None = None) -> EntityStore:
        """
        Seed a store from loaded (or sample) data.

        Employees go in first so task assignments can be checked. The allocator
        is moved above the data's high-water mark afterwards.
        """
        store = cls(allocator)
        for employee in data.employees:
            store.add_employee(employee)
        for task in data.tasks:
            store.insert_task(task)

        max_id = data.max_task_id
        if max_id is not None:
            store.allocator.reset(max_id + 1)
        logger.debug(
            "EntityStore seeded tasks=%d employees=%d next_task_id=%d",
            len(store._tasks),
            len(store._employees),
            store.allocator.next(),
        )
        return store

    @property
    def allocator(self) -> IdentityAllocator:
        return self._allocator

    # ---- internal helpers (lock held by caller) ----

    def _require_task(self, task_id: int) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def _require_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    def _check_assignees(self, employee_ids: Iterable[int]) -> None:
        for employee_id in employee_ids:
            if employee_id not in self._employees:
                raise UnknownEmployeeError(employee_id)

    def _put_task(self, task: Task) -> None:
        if task.id in self._tasks:
            raise DuplicateTaskError(task.id)
        self._check_assignees(task.assigned_employees)
        self._tasks[task.id] = task

    # ---- tasks ----

    def add_task(
        self,
        name: str,
        status: TaskStatus = DEFAULT_STATUS,
        assigned_employees: Iterable[int] = (),
    ) -> Task:
        """Create a task with an allocator-issued id."""
        with self._lock:
            task_id = self._allocator.next()
            self._allocator.advance()
            task = Task(
                id=task_id,
                name=name.strip(),
                status=status,
                assigned_employees=frozenset(assigned_employees),
            )
            self._put_task(task)
            logger.debug("Task added id=%s name=%r status=%s", task.id, task.name, task.status)
            return task

    def insert_task(self, task: Task) -> Task:
        """Insert a task that already carries an id (restore/import path)."""
        with self._lock:
            self._put_task(task)
            return task

    def get_task(self, task_id: int) -> Task:
        with self._lock:
            return self._require_task(task_id)

    def has_task(self, task_id: int) -> bool:
        with self._lock:
            return task_id in self._tasks

    def set_status(self, task_id: int, status: TaskStatus) -> Task:
        with self._lock:
            task = self._require_task(task_id).with_status(status)
            self._tasks[task_id] = task
            logger.debug("Task %s status -> %s", task_id, status)
            return task

    def mark_done(self, task_id: int) -> Task:
        return self.set_status(task_id, TaskStatus.from_flag(True))

    def mark_undone(self, task_id: int) -> Task:
        return self.set_status(task_id, TaskStatus.from_flag(False))

    def remove_task(self, task_id: int) -> Task:
        with self._lock:
            task = self._require_task(task_id)
            del self._tasks[task_id]
            logger.debug("Task removed id=%s", task_id)
            return task

    # ---- employees ----

    def add_employee(self, employee: Employee) -> Employee:
        with self._lock:
            if employee.id in self._employees:
                raise DuplicateEmployeeError(employee.id)
            self._employees[employee.id] = employee
            return employee

    def get_employee(self, employee_id: int) -> Employee:
        with self._lock:
            return self._require_employee(employee_id)

    def has_employee(self, employee_id: int) -> bool:
        with self._lock:
            return employee_id in self._employees

    def remove_employee(self, employee_id: int) -> Employee:
        """Delete an employee and drop it from every task's assignment set."""
        with self._lock:
            employee = self._require_employee(employee_id)
            del self._employees[employee_id]
            touched = 0
            for task_id, task in list(self._tasks.items()):
                if employee_id in task.assigned_employees:
                    self._tasks[task_id] = task.without_employee(employee_id)
                    touched += 1
            logger.debug("Employee removed id=%s (unassigned from %d tasks)", employee_id, touched)
            return employee

    # ---- assignment ----

    def assign(self, task_id: int, employee_id: int) -> Task:
        """Add employee to task. Assigning twice is a no-op."""
        with self._lock:
            task = self._require_task(task_id)
            self._require_employee(employee_id)
            updated = task.with_employee(employee_id)
            self._tasks[task_id] = updated
            return updated

    def unassign(self, task_id: int, employee_id: int) -> Task:
        with self._lock:
            task = self._require_task(task_id)
            updated = task.without_employee(employee_id)
            self._tasks[task_id] = updated
            return updated

    def tasks_for_employee(self, employee_id: int) -> list[Task]:
        with self._lock:
            self._require_employee(employee_id)
            return [t for t in self._tasks.values() if employee_id in t.assigned_employees]

    # ---- views ----

    def snapshot(self) -> ReadOnlyView:
        with self._lock:
            return ReadOnlyView(
                tasks=tuple(self._tasks.values()),
                employees=tuple(self._employees.values()),
            )

    def to_data(self) -> EntityData:
        with self._lock:
            return EntityData(
                tasks=list(self._tasks.values()),
                employees=list(self._employees.values()),
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)
