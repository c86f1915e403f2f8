# tests/test_task_models.py

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

from task_tracker.tasks.task_models import Task, TaskStatus, to_timestamp


def test_to_timestamp_drops_t_and_subseconds() -> None:
    moment = datetime(2024, 5, 1, 12, 30, 0, 987654, tzinfo=UTC)
    assert to_timestamp(moment) == "2024-05-01 12:30:00"


def test_to_timestamp_converts_to_utc() -> None:
    moment = datetime(2024, 5, 1, 14, 30, 5, tzinfo=timezone(timedelta(hours=2)))
    assert to_timestamp(moment) == "2024-05-01 12:30:05"


def test_status_parse() -> None:
    assert TaskStatus.parse("in-progress") is TaskStatus.IN_PROGRESS
    assert TaskStatus.parse("done") is TaskStatus.DONE
    assert TaskStatus.parse("in_progress") is None
    assert TaskStatus.parse(3) is None
    assert TaskStatus.parse(None) is None


def test_to_record_uses_file_keys() -> None:
    task = Task(
        id=1,
        description="buy milk",
        status=TaskStatus.TODO,
        created_at="2024-05-01 12:00:00",
        updated_at="2024-05-01 12:05:00",
    )
    assert task.to_record() == {
        "id": 1,
        "description": "buy milk",
        "status": "todo",
        "createdAt": "2024-05-01 12:00:00",
        "updatedAt": "2024-05-01 12:05:00",
    }
