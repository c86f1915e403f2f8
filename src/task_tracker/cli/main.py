# src/task_tracker/cli/main.py

"""
CLI entrypoint.

One invocation runs exactly one command:
load db.json -> dispatch the command -> write db.json back (always) -> exit.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence

from ..config import Settings, get_settings
from ..errors import PersistenceWriteError
from ..logging_setup import setup_logging
from ..tasks.task_models import now_timestamp
from .args import extract_command_args
from .bootstrap import create_initial_state, flush_state
from .commands import registry

logger = logging.getLogger(__name__)


def _flush(state) -> bool:
    try:
        flush_state(state)
    except PersistenceWriteError:
        logger.exception("Tasks were not saved.")
        return False
    finally:
        state.task_store.close()
    return True


def main(
    argv: Sequence[str] | None = None,
    *,
    settings: Settings | None = None,
    clock: Callable[[], str] = now_timestamp,
) -> int:
    """
    Run one command. `argv` is the raw vector including the program entry
    (defaults to sys.argv). Returns the process exit status.
    """
    if settings is None:
        settings = get_settings()
    if argv is None:
        argv = sys.argv

    console_level = logging.getLevelNamesMapping().get(settings.log_level, logging.WARNING)
    setup_logging(console_level=console_level, log_file=settings.log_file)

    command_args = extract_command_args(argv, interpreter_invocation=settings.interpreter_invocation)
    command = command_args[0] if command_args else None
    args = command_args[1:]
    logger.debug("Command %r args=%r db=%s", command, args, settings.db_path)

    state = create_initial_state(settings=settings, clock=clock)
    try:
        registry.dispatch(state, command, args)
    finally:
        saved = _flush(state)

    return 0 if saved else 1


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
