# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Callable

from ..errors import ValidationError
from .task_models import (
    MAX_DESCRIPTION_LENGTH,
    MAX_TASK_ID,
    MIN_TASK_ID,
    Task,
    TaskStatus,
    now_timestamp,
)

logger = logging.getLogger(__name__)


class TaskStore:
    """
    SQLite task table for the lifetime of one invocation.

    The database lives in memory (":memory:" by default), so unlike a file-backed
    store the connection is opened once and kept until close(). Durability is the
    job of the JSON persistence layer, not of this class.

    Ids come from AUTOINCREMENT: rows restored through load() advance the
    sequence, so insert() never hands out an id that is already taken.
    """

    def __init__(
        self,
        db_path: str = ":memory:",
        *,
        clock: Callable[[], str] = now_timestamp,
        max_description_length: int = MAX_DESCRIPTION_LENGTH,
    ) -> None:
        self._clock = clock
        self._max_description_length = max_description_length
        self._conn = sqlite3.connect(db_path)
        self._conn.row_factory = sqlite3.Row
        self._ensure_schema()
        logger.debug("TaskStore ready db=%s", db_path)

    def close(self) -> None:
        self._conn.close()

    # ---- low-level helpers ----

    def _ensure_schema(self) -> None:
        statuses = ", ".join(f"'{s.value}'" for s in TaskStatus)
        self._conn.execute(
            f"""
            CREATE TABLE IF NOT EXISTS tasks (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                description TEXT NOT NULL,
                status TEXT NOT NULL DEFAULT 'todo' CHECK (status IN ({statuses})),
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
            """
        )
        self._conn.execute(
            "CREATE INDEX IF NOT EXISTS idx_tasks_status_created ON tasks(status, created_at)"
        )
        self._conn.commit()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            description=str(row["description"]),
            status=TaskStatus(row["status"]),
            created_at=str(row["created_at"]),
            updated_at=str(row["updated_at"]),
        )

    def _check_description(self, description: str) -> None:
        if not description or not description.strip():
            raise ValidationError("<description> cannot be empty")
        if len(description) > self._max_description_length:
            raise ValidationError(
                f"<description> cannot be longer than {self._max_description_length} characters"
            )

    def _select(self, where: str = "", params: tuple = ()) -> list[Task]:
        cur = self._conn.execute(
            f"SELECT * FROM tasks {where} ORDER BY created_at ASC, id ASC",
            params,
        )
        return [self._row_to_task(r) for r in cur.fetchall()]

    # ---- public API ----

    def count_tasks(self) -> int:
        (n,) = self._conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
        return int(n)

    def insert(self, description: str) -> Task:
        """
        Create a new task with status 'todo' and both timestamps set to now.

        The description is stored exactly as given; callers trim it beforehand.
        """
        self._check_description(description)

        now = self._clock()
        cur = self._conn.execute(
            "INSERT INTO tasks(description, status, created_at, updated_at) VALUES (?, ?, ?, ?)",
            (description, TaskStatus.TODO.value, now, now),
        )
        self._conn.commit()
        rowid = cur.lastrowid
        if rowid is None:
            raise RuntimeError("SQLite did not return lastrowid for tasks insert")
        task = Task(
            id=int(rowid),
            description=description,
            status=TaskStatus.TODO,
            created_at=now,
            updated_at=now,
        )
        logger.debug("Task added id=%s", task.id)
        return task

    def load(
        self,
        task_id: int,
        description: str,
        status: str,
        created_at: str,
        updated_at: str,
    ) -> Task:
        """Restore a previously saved row verbatim (no defaults, no new timestamps)."""
        if not self._is_valid_id(task_id):
            raise ValidationError(f"Task id {task_id} is out of range")
        parsed = TaskStatus.parse(status)
        if parsed is None:
            raise ValidationError(f"Invalid status {status!r} for task {task_id}")
        try:
            self._conn.execute(
                """
                INSERT INTO tasks(id, description, status, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (int(task_id), description, parsed.value, created_at, updated_at),
            )
        except sqlite3.IntegrityError as e:
            raise ValidationError(f"Duplicate task id {task_id}") from e
        self._conn.commit()
        return Task(
            id=int(task_id),
            description=description,
            status=parsed,
            created_at=created_at,
            updated_at=updated_at,
        )

    @staticmethod
    def _is_valid_id(task_id: int) -> bool:
        return MIN_TASK_ID <= int(task_id) <= MAX_TASK_ID

    def get_task(self, task_id: int) -> Task | None:
        if not self._is_valid_id(task_id):
            return None
        row = self._conn.execute("SELECT * FROM tasks WHERE id = ?", (int(task_id),)).fetchone()
        return self._row_to_task(row) if row else None

    def update_description(self, task_id: int, description: str, timestamp: str) -> bool:
        """Returns False when no task has this id."""
        self._check_description(description)
        if not self._is_valid_id(task_id):
            return False
        cur = self._conn.execute(
            "UPDATE tasks SET description = ?, updated_at = ? WHERE id = ?",
            (description, timestamp, int(task_id)),
        )
        self._conn.commit()
        return cur.rowcount == 1

    def update_status(self, task_id: int, status: TaskStatus, timestamp: str) -> bool:
        """Returns False when no task has this id."""
        if not self._is_valid_id(task_id):
            return False
        cur = self._conn.execute(
            "UPDATE tasks SET status = ?, updated_at = ? WHERE id = ?",
            (TaskStatus(status).value, timestamp, int(task_id)),
        )
        self._conn.commit()
        if cur.rowcount == 1:
            logger.debug("Task id=%s status=%s", task_id, status)
        return cur.rowcount == 1

    def list_all(self) -> list[Task]:
        return self._select()

    def list_by_status(self, status: str) -> list[Task]:
        """Exact status match; a value outside the known set simply matches nothing."""
        return self._select("WHERE status = ?", (str(status),))
