# src/task_tracker/core/state.py

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass

from ..config import Settings
from ..tasks.task_models import now_timestamp
from ..tasks.task_store import TaskStore

Emitter = Callable[[str], None]


def _print_out(text: str) -> None:
    print(text)


def _print_err(text: str) -> None:
    print(text, file=sys.stderr)


@dataclass
class AppState:
    """Everything one invocation works with; built by cli.bootstrap."""

    settings: Settings
    task_store: TaskStore

    clock: Callable[[], str] = now_timestamp
    # User-facing output. Logging is for diagnostics only.
    emit: Emitter = _print_out
    emit_error: Emitter = _print_err
