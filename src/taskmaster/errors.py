# src/taskmaster/errors.py

"""
Exception taxonomy.

Persistence side:
- a missing file is not an error: readers return None
- CorruptDataError: the file exists but cannot be parsed/validated
- StorageWriteError: a write failed; the previous file is left as it was

Model side (raised to whoever issued the mutation):
- TaskNotFoundError / EmployeeNotFoundError / UnknownEmployeeError
- DuplicateTaskError / DuplicateEmployeeError
"""

from __future__ import annotations

from pathlib import Path


class TaskMasterError(Exception):
    """Base class for all errors raised by this package."""


# ---- persistence ----


class DataLoadingError(TaskMasterError):
    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not load {self.path}: {reason}")


class CorruptDataError(DataLoadingError):
    """Persisted file is present but malformed."""


class StorageWriteError(TaskMasterError):
    def __init__(self, path: str | Path, cause: BaseException) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Could not write {self.path}: {cause}")


# ---- model ----


class ModelError(TaskMasterError):
    """Domain-level failure of a store mutation."""


class TaskNotFoundError(ModelError):
    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task {task_id} does not exist")


class EmployeeNotFoundError(ModelError):
    def __init__(self, employee_id: int) -> None:
        self.employee_id = employee_id
        super().__init__(f"Employee {employee_id} does not exist")


class UnknownEmployeeError(EmployeeNotFoundError):
    """An assignment set references an employee the store does not know."""


class DuplicateTaskError(ModelError):
    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task id {task_id} is already in use")


class DuplicateEmployeeError(ModelError):
    def __init__(self, employee_id: int) -> None:
        self.employee_id = employee_id
        super().__init__(f"Employee id {employee_id} is already in use")


def error_details(exc: BaseException) -> str:
    """One-line description of an exception for log messages."""
    msg = str(exc)
    name = type(exc).__name__
    return f"{name}: {msg}" if msg else name
