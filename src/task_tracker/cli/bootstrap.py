# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it builds the TaskStore, fills it from
the backing file and wires it into AppState, and flushes it back at the end.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..config import Settings, get_settings
from ..core.state import AppState
from ..tasks.task_models import now_timestamp
from ..tasks.task_persistence import load_tasks, save_tasks
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings: Settings | None = None,
    clock: Callable[[], str] = now_timestamp,
) -> AppState:
    """
    Create AppState with a TaskStore populated from settings.db_path.

    Settings and clock are injectable so tests can pin paths and timestamps.
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(clock=clock, max_description_length=settings.max_description_length)
    loaded = load_tasks(store, settings.db_path)
    logger.debug("State ready: %d task(s) from %s", loaded, settings.db_path)

    return AppState(settings=settings, task_store=store, clock=clock)


def flush_state(state: AppState) -> None:
    """Write the whole table back to the backing file. Raises PersistenceWriteError."""
    save_tasks(state.task_store, state.settings.db_path)
