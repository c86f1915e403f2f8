# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from task_tracker.config import Settings
from task_tracker.core.state import AppState
from task_tracker.tasks.task_store import TaskStore

from .fakes import FakeClock, OutputRecorder


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a per-test backing file; never reads the environment."""
    return Settings(db_path=tmp_path / "db.json")


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock: FakeClock) -> Iterator[TaskStore]:
    s = TaskStore(clock=clock)
    yield s
    s.close()


@pytest.fixture()
def output() -> OutputRecorder:
    return OutputRecorder()


@pytest.fixture()
def state(settings: Settings, store: TaskStore, clock: FakeClock, output: OutputRecorder) -> AppState:
    """
    AppState wired to a real in-memory TaskStore, a fake clock and recorded output.
    """
    return AppState(
        settings=settings,
        task_store=store,
        clock=clock,
        emit=output.out.append,
        emit_error=output.err.append,
    )
