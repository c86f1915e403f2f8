# src/task_tracker/tasks/task_persistence.py

"""
JSON backing file for the in-memory TaskStore.

The whole table is read once at startup and rewritten once at the end of every
invocation. A missing or broken file is not an error for the user: the store
starts empty and the file is recreated.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from ..errors import PersistenceReadError, PersistenceWriteError, ValidationError
from .task_models import MAX_TASK_ID, MIN_TASK_ID
from .task_store import TaskStore

logger = logging.getLogger(__name__)

EMPTY_FILE_CONTENT = "[]"


def read_records(path: str | Path) -> list[Any]:
    """Return the raw JSON array stored in `path`."""
    path = Path(path)
    try:
        data = json.loads(path.read_text("utf-8"))
    except FileNotFoundError as e:
        raise PersistenceReadError(f"{path} does not exist") from e
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise PersistenceReadError(f"{path} is not readable JSON: {e}") from e
    if not isinstance(data, list):
        raise PersistenceReadError(f"{path} does not contain a JSON array")
    return data


def _clean_record(raw: Any) -> tuple[int, str, str, str, str] | None:
    if not isinstance(raw, dict):
        return None
    task_id = raw.get("id")
    # bool is an int subclass; true/false are not ids.
    if not isinstance(task_id, int) or isinstance(task_id, bool):
        return None
    if not MIN_TASK_ID <= task_id <= MAX_TASK_ID:
        return None
    description = raw.get("description")
    if not isinstance(description, str) or not description.strip():
        return None
    status = raw.get("status")
    created_at = raw.get("createdAt")
    updated_at = raw.get("updatedAt")
    if not isinstance(status, str):
        return None
    if not isinstance(created_at, str) or not isinstance(updated_at, str):
        return None
    return task_id, description, status, created_at, updated_at


def load_tasks(store: TaskStore, path: str | Path) -> int:
    """
    Populate `store` from the backing file and return how many tasks were loaded.

    Records that are not well-formed tasks (wrong types, unknown status,
    duplicate id) are left out; the remaining ones still load. If the file
    cannot be read at all it is replaced with an empty array.
    """
    path = Path(path)
    try:
        records = read_records(path)
    except PersistenceReadError as e:
        logger.info("Starting with an empty task list: %s", e)
        reset_file(path)
        return 0

    loaded = 0
    for i, raw in enumerate(records):
        clean = _clean_record(raw)
        if clean is None:
            logger.warning("Skipping malformed task record #%d in %s", i, path)
            continue
        try:
            store.load(*clean)
        except ValidationError as e:
            logger.warning("Skipping task record #%d in %s: %s", i, path, e)
            continue
        loaded += 1

    logger.debug("Loaded %d task(s) from %s", loaded, path)
    return loaded


def reset_file(path: str | Path) -> None:
    """Recreate the backing file as an empty placeholder (best-effort)."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(EMPTY_FILE_CONTENT, "utf-8")
    except OSError:
        logger.exception("Failed to recreate %s", path)


def save_tasks(store: TaskStore, path: str | Path) -> None:
    """Rewrite the backing file with the full, createdAt-ordered table."""
    path = Path(path)
    records = [t.to_record() for t in store.list_all()]
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(json.dumps(records, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, path)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        raise PersistenceWriteError(f"Failed to save tasks to {path}: {e}") from e
    logger.debug("Saved %d task(s) to %s", len(records), path)
