# tests/test_store.py

from __future__ import annotations

import threading

import pytest

from taskmaster.errors import (
    DuplicateEmployeeError,
    DuplicateTaskError,
    EmployeeNotFoundError,
    TaskNotFoundError,
    UnknownEmployeeError,
)
from taskmaster.model.employee import Employee
from taskmaster.model.identity import IdentityAllocator
from taskmaster.model.store import EntityData, EntityStore
from taskmaster.model.task import Task, TaskStatus


def test_add_task_ids_are_distinct(store: EntityStore) -> None:
    ids = [store.add_task(f"task {i}").id for i in range(50)]
    assert len(set(ids)) == 50
    assert ids == sorted(ids)


def test_add_task_ids_distinct_across_threads(store: EntityStore) -> None:
    ids: list[int] = []
    lock = threading.Lock()

    def worker() -> None:
        for _ in range(100):
            task = store.add_task("t")
            with lock:
                ids.append(task.id)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(ids) == 400
    assert len(set(ids)) == 400


def test_add_task_with_assignees(store: EntityStore) -> None:
    task = store.add_task("Plan", TaskStatus.PENDING, [1, 2])
    assert task.assigned_employees == frozenset({1, 2})
    assert store.get_task(task.id) == task


def test_add_task_rejects_unknown_assignee(store: EntityStore) -> None:
    with pytest.raises(UnknownEmployeeError):
        store.add_task("Plan", assigned_employees=[99])
    assert len(store) == 0


def test_add_task_detects_collision_with_explicit_id(store: EntityStore) -> None:
    nxt = store.allocator.next()
    store.insert_task(Task(nxt, "explicit"))
    with pytest.raises(DuplicateTaskError):
        store.add_task("allocated")
    # the colliding id was consumed; the next call succeeds above it
    assert store.add_task("allocated").id == nxt + 1


def test_insert_task_rejects_duplicate_id(store: EntityStore) -> None:
    store.insert_task(Task(7, "a"))
    with pytest.raises(DuplicateTaskError):
        store.insert_task(Task(7, "b"))


def test_assign_is_idempotent(store: EntityStore) -> None:
    task = store.add_task("t")
    first = store.assign(task.id, 3)
    second = store.assign(task.id, 3)
    assert first.assigned_employees == second.assigned_employees == frozenset({3})


def test_assign_missing_entities(store: EntityStore) -> None:
    task = store.add_task("t")
    with pytest.raises(TaskNotFoundError):
        store.assign(999, 1)
    with pytest.raises(EmployeeNotFoundError):
        store.assign(task.id, 999)


def test_unassign_absent_is_noop(store: EntityStore) -> None:
    task = store.add_task("t", assigned_employees=[1])
    assert store.unassign(task.id, 2).assigned_employees == frozenset({1})
    assert store.unassign(task.id, 1).assigned_employees == frozenset()
    with pytest.raises(TaskNotFoundError):
        store.unassign(999, 1)


def test_remove_employee_cascades(store: EntityStore) -> None:
    t1 = store.add_task("a")
    t2 = store.add_task("b")
    store.assign(t1.id, 4)
    store.assign(t2.id, 4)
    store.assign(t2.id, 5)

    store.remove_employee(4)

    assert store.get_task(t1.id).assigned_employees == frozenset()
    assert store.get_task(t2.id).assigned_employees == frozenset({5})
    with pytest.raises(EmployeeNotFoundError):
        store.assign(t1.id, 4)


def test_remove_task(store: EntityStore) -> None:
    task = store.add_task("t")
    assert store.remove_task(task.id) == task
    assert not store.has_task(task.id)
    with pytest.raises(TaskNotFoundError):
        store.remove_task(task.id)
    with pytest.raises(TaskNotFoundError):
        store.get_task(task.id)


def test_set_status(store: EntityStore) -> None:
    task = store.add_task("t")
    assert store.set_status(task.id, TaskStatus.PENDING).status is TaskStatus.PENDING
    assert store.mark_done(task.id).is_done
    assert store.mark_undone(task.id).status is TaskStatus.IN_PROGRESS
    with pytest.raises(TaskNotFoundError):
        store.set_status(999, TaskStatus.COMPLETED)


def test_employees(store: EntityStore) -> None:
    with pytest.raises(DuplicateEmployeeError):
        store.add_employee(Employee(1, "Someone"))
    store.add_employee(Employee(7, "New Hire"))
    assert store.get_employee(7).name == "New Hire"
    with pytest.raises(EmployeeNotFoundError):
        store.get_employee(70)


def test_tasks_for_employee(store: EntityStore) -> None:
    a = store.add_task("a", assigned_employees=[2])
    store.add_task("b", assigned_employees=[3])
    assert store.tasks_for_employee(2) == [a]
    with pytest.raises(EmployeeNotFoundError):
        store.tasks_for_employee(99)


def test_snapshot_is_isolated(store: EntityStore) -> None:
    task = store.add_task("t")
    view = store.snapshot()

    store.assign(task.id, 1)
    store.add_task("later")
    store.remove_employee(2)

    assert view.find_task(task.id).assigned_employees == frozenset()
    assert len(view.tasks) == 1
    assert view.find_employee(2) is not None


def test_from_data_resets_allocator_above_high_water_mark() -> None:
    data = EntityData(tasks=[Task(3, "a"), Task(17, "b"), Task(5, "c")])
    store = EntityStore.from_data(data, IdentityAllocator())
    assert store.allocator.next() == 18
    assert store.add_task("d").id == 18


def test_from_data_empty_keeps_allocator() -> None:
    alloc = IdentityAllocator(start=9)
    EntityStore.from_data(EntityData(), alloc)
    assert alloc.next() == 9


def test_from_data_rejects_dangling_assignment() -> None:
    data = EntityData(tasks=[Task(1, "a", assigned_employees=[5])])
    with pytest.raises(UnknownEmployeeError):
        EntityStore.from_data(data)


def test_to_data_round_trips(store: EntityStore) -> None:
    store.add_task("a", assigned_employees=[1, 6])
    store.add_task("b", TaskStatus.COMPLETED)
    rebuilt = EntityStore.from_data(store.to_data())
    assert rebuilt.snapshot() == store.snapshot()
