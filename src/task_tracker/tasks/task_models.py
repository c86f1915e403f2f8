# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

MAX_DESCRIPTION_LENGTH = 140
# SQLite INTEGER is a signed 64-bit value; AUTOINCREMENT ids start at 1.
MIN_TASK_ID = 1
MAX_TASK_ID = 2**63 - 1


class TaskStatus(StrEnum):
    """Task lifecycle status. Values are what ends up in the backing file."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @classmethod
    def parse(cls, raw: Any) -> TaskStatus | None:
        """Return the matching status, or None for anything outside the set."""
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


@dataclass(slots=True)
class Task:
    id: int
    description: str
    status: TaskStatus
    created_at: str
    updated_at: str

    def to_record(self) -> dict[str, Any]:
        """JSON-ready dict using the backing file's camelCase keys."""
        return {
            "id": self.id,
            "description": self.description,
            "status": self.status.value,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


def to_timestamp(moment: datetime) -> str:
    """
    Render a moment as a UTC instant without the 'T' and without sub-seconds:
    2024-05-01 12:30:00
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone(UTC)
    return moment.strftime("%Y-%m-%d %H:%M:%S")


def now_timestamp() -> str:
    return to_timestamp(datetime.now(UTC))
