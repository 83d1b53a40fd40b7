# src/taskmaster/model/identity.py

from __future__ import annotations

import logging
import threading

logger = logging.getLogger(__name__)

DEFAULT_FIRST_TASK_ID = 1


class IdentityAllocator:
    """
    Owns the "next task id" counter.

    Protocol used by the new-task path: read with next(), then advance().
    allocate() does both under the lock.

    reset(n) moves the counter anywhere (including backward). It exists for the
    restore path, where the caller knows the persisted high-water mark and
    passes max_id + 1. No validation is done here.
    """

    def __init__(self, start: int = DEFAULT_FIRST_TASK_ID) -> None:
        self._next_id = int(start)
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            return self._next_id

    def advance(self) -> None:
        with self._lock:
            self._next_id += 1

    def allocate(self) -> int:
        with self._lock:
            task_id = self._next_id
            self._next_id += 1
            return task_id

    def reset(self, n: int) -> None:
        with self._lock:
            logger.debug("Task id counter reset %s -> %s", self._next_id, n)
            self._next_id = int(n)

    def __repr__(self) -> str:
        return f"IdentityAllocator(next={self._next_id})"
