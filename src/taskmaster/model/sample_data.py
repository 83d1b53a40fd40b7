# src/taskmaster/model/sample_data.py

"""
Starter dataset used when no usable data file exists.

SAMPLE_ASSIGNMENTS is applied by the bootstrap pipeline after the store is
built. It is kept separate from the records so the demo assignment graph can
be exercised (and broken) on its own.
"""

from __future__ import annotations

from .employee import Employee
from .store import EntityData
from .task import Task, TaskStatus

SAMPLE_ASSIGNMENTS: tuple[tuple[int, int], ...] = (
    (1, 1),
    (1, 2),
    (1, 3),
    (2, 3),
    (2, 4),
    (2, 5),
    (3, 5),
    (3, 6),
)


def sample_employees() -> list[Employee]:
    return [
        Employee(1, "Alex Yeoh", {"phone": "87438807", "email": "alexyeoh@example.com", "role": "Engineer"}),
        Employee(2, "Bernice Yu", {"phone": "99272758", "email": "berniceyu@example.com", "role": "Designer"}),
        Employee(3, "Charlotte Oliveiro", {"phone": "93210283", "email": "charlotte@example.com", "role": "Engineer"}),
        Employee(4, "David Li", {"phone": "91031282", "email": "lidavid@example.com", "role": "Analyst"}),
        Employee(5, "Irfan Ibrahim", {"phone": "92492021", "email": "irfan@example.com", "role": "Manager"}),
        Employee(6, "Roy Balakrishnan", {"phone": "92624417", "email": "royb@example.com", "role": "Engineer"}),
    ]


def sample_tasks() -> list[Task]:
    # Unassigned on purpose: assignments come from SAMPLE_ASSIGNMENTS.
    return [
        Task(1, "Prepare quarterly report", TaskStatus.IN_PROGRESS),
        Task(2, "Redesign onboarding flow", TaskStatus.PENDING),
        Task(3, "Migrate billing database", TaskStatus.IN_PROGRESS),
        Task(4, "Renew office lease", TaskStatus.COMPLETED),
    ]


def get_sample_data() -> EntityData:
    return EntityData(tasks=sample_tasks(), employees=sample_employees())
