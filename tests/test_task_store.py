# tests/test_task_store.py

from __future__ import annotations

import pytest

from task_tracker.errors import ValidationError
from task_tracker.tasks.task_models import Task, TaskStatus
from task_tracker.tasks.task_store import TaskStore


def test_insert_assigns_ids_and_defaults(store: TaskStore) -> None:
    first = store.insert("buy milk")
    second = store.insert("walk the dog")

    assert first.id == 1
    assert second.id == 2
    assert first.status is TaskStatus.TODO
    assert first.created_at == first.updated_at == "2024-05-01 12:00:00"
    assert store.count_tasks() == 2
    assert store.get_task(2) == second


def test_insert_rejects_empty_and_too_long(store: TaskStore) -> None:
    with pytest.raises(ValidationError, match="cannot be empty"):
        store.insert("   ")
    with pytest.raises(ValidationError, match="longer than 140"):
        store.insert("x" * 141)
    assert store.count_tasks() == 0

    store.insert("x" * 140)
    assert store.count_tasks() == 1


def test_insert_stores_description_verbatim(store: TaskStore) -> None:
    task = store.insert("  padded  ")
    assert store.get_task(task.id).description == "  padded  "


def test_load_restores_exact_record_and_advances_ids(store: TaskStore) -> None:
    loaded = store.load(7, "old task", "in-progress", "2023-01-01 00:00:00", "2023-01-02 00:00:00")

    assert loaded == Task(
        id=7,
        description="old task",
        status=TaskStatus.IN_PROGRESS,
        created_at="2023-01-01 00:00:00",
        updated_at="2023-01-02 00:00:00",
    )
    assert store.get_task(7) == loaded
    assert store.insert("new task").id == 8


def test_load_rejects_unknown_status_and_duplicate_id(store: TaskStore) -> None:
    with pytest.raises(ValidationError, match="Invalid status"):
        store.load(1, "a", "blocked", "2023-01-01 00:00:00", "2023-01-01 00:00:00")

    store.load(1, "a", "todo", "2023-01-01 00:00:00", "2023-01-01 00:00:00")
    with pytest.raises(ValidationError, match="Duplicate task id 1"):
        store.load(1, "b", "done", "2023-01-01 00:00:00", "2023-01-01 00:00:00")
    assert store.get_task(1).description == "a"


def test_update_description_bumps_only_updated_at(store: TaskStore) -> None:
    task = store.insert("draft")

    assert store.update_description(task.id, "final", "2024-06-01 08:00:00") is True

    got = store.get_task(task.id)
    assert got.description == "final"
    assert got.updated_at == "2024-06-01 08:00:00"
    assert got.created_at == task.created_at
    assert got.status is TaskStatus.TODO


def test_update_status_and_missing_ids(store: TaskStore) -> None:
    task = store.insert("ship it")

    assert store.update_status(task.id, TaskStatus.DONE, "2024-06-01 08:00:00") is True
    assert store.get_task(task.id).status is TaskStatus.DONE

    assert store.update_status(99, TaskStatus.DONE, "2024-06-01 08:00:00") is False
    assert store.update_status(-1, TaskStatus.DONE, "2024-06-01 08:00:00") is False
    assert store.update_description(99, "nope", "2024-06-01 08:00:00") is False
    assert store.count_tasks() == 1


def test_list_orders_by_created_at_then_id(store: TaskStore) -> None:
    store.load(3, "third", "todo", "2024-01-03 00:00:00", "2024-01-03 00:00:00")
    store.load(1, "first", "done", "2024-01-01 00:00:00", "2024-01-01 00:00:00")
    store.load(5, "tie-b", "todo", "2024-01-02 00:00:00", "2024-01-02 00:00:00")
    store.load(4, "tie-a", "todo", "2024-01-02 00:00:00", "2024-01-02 00:00:00")

    assert [t.description for t in store.list_all()] == ["first", "tie-a", "tie-b", "third"]
    assert store.list_all() == store.list_all()


def test_list_by_status_is_exact_match(store: TaskStore) -> None:
    a = store.insert("a")
    store.insert("b")
    store.insert("c")
    store.update_status(a.id, TaskStatus.IN_PROGRESS, "2024-06-01 08:00:00")

    in_progress = store.list_by_status("in-progress")
    assert [t.id for t in in_progress] == [a.id]
    assert len(store.list_by_status("todo")) == 2
    assert store.list_by_status("IN-PROGRESS") == []
    assert store.list_by_status("someday") == []


def test_custom_description_limit(clock) -> None:
    store = TaskStore(clock=clock, max_description_length=5)
    try:
        with pytest.raises(ValidationError, match="longer than 5"):
            store.insert("toolong")
        assert store.insert("short").description == "short"
    finally:
        store.close()


@pytest.mark.parametrize("task_id", [0, -1, 2**63, 10**20])
def test_load_rejects_ids_outside_autoincrement_range(store: TaskStore, task_id: int) -> None:
    with pytest.raises(ValidationError, match="out of range"):
        store.load(task_id, "x", "todo", "2023-01-01 00:00:00", "2023-01-01 00:00:00")
    assert store.count_tasks() == 0


def test_updates_with_unrepresentable_ids_match_nothing(store: TaskStore) -> None:
    store.insert("a")

    assert store.update_status(10**20, TaskStatus.DONE, "2024-06-01 08:00:00") is False
    assert store.update_description(-(10**20), "b", "2024-06-01 08:00:00") is False
    assert store.get_task(10**20) is None
    assert store.list_by_status("done") == []
