# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..errors import UnknownCommandError, ValidationError
from ..tasks.task_models import TaskStatus
from .args import SENTINEL_ID, parse_id
from .render import render_table

CommandHandler = Callable[[AppState, list[str]], None]

PROG = "task-cli"
USAGE_ADD = f"Usage: {PROG} add <description>"
USAGE_UPDATE = f"Usage: {PROG} update <id> <description>"
USAGE_MARK_IN_PROGRESS = f"Usage: {PROG} mark-in-progress <id>"
USAGE_MARK_DONE = f"Usage: {PROG} mark-done <id>"
USAGE_LIST = f"Usage: {PROG} list [status]"
USAGE_MISSING = f"Usage: {PROG} <command> [args...]. Use '{PROG} help' to list commands."

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Maps command names (add, list, ...) to handlers and runs exactly one of them."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        self._handlers[name] = handler
        self._help[name] = help_text
        for alias in aliases:
            self._handlers[alias] = handler

    def resolve(self, name: str | None) -> CommandHandler:
        handler = self._handlers.get(name) if name is not None else None
        if handler is None:
            raise UnknownCommandError(name)
        return handler

    def dispatch(self, state: AppState, name: str | None, args: list[str]) -> None:
        """
        Run one command against state.task_store.

        Every failure is reported as a single line through state.emit_error;
        nothing is raised to the caller for bad input or unknown names.
        """
        if name is None:
            state.emit_error(USAGE_MISSING)
            return

        try:
            handler = self.resolve(name)
        except UnknownCommandError as e:
            logger.debug("Unknown command %r args=%r", name, args)
            state.emit_error(str(e))
            return

        try:
            handler(state, args)
        except ValidationError as e:
            logger.debug("Command %s rejected: %s", name, e)
            state.emit_error(str(e))

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for help_text in self._help.values():
            lines.append(f"  {PROG} {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _clean_description(raw: str) -> str:
    description = raw.strip()
    if not description:
        raise ValidationError("<description> cannot be empty")
    return description


def _resolve_id(state: AppState, raw: str | None, usage: str) -> int:
    """
    Parse an id argument. In strict mode a bad id aborts the command; otherwise
    the error is reported and the sentinel id is used, which matches no task.
    """
    try:
        return parse_id(raw, usage=usage)
    except ValidationError as e:
        if state.settings.strict_ids:
            raise
        state.emit_error(str(e))
        return SENTINEL_ID


def _report_missing(state: AppState, task_id: int) -> None:
    if task_id != SENTINEL_ID:
        state.emit_error(f"Task not found: {task_id}")


def cmd_add(state: AppState, args: list[str]) -> None:
    if len(args) != 1:
        raise ValidationError(USAGE_ADD)
    task = state.task_store.insert(_clean_description(args[0]))
    state.emit(f"Task added successfully (ID: {task.id})")


def cmd_update(state: AppState, args: list[str]) -> None:
    if len(args) != 2:
        raise ValidationError(USAGE_UPDATE)
    raw_id, raw_description = args
    description = _clean_description(raw_description)
    task_id = _resolve_id(state, raw_id, USAGE_UPDATE)

    if state.task_store.update_description(task_id, description, state.clock()):
        state.emit(f"Task {task_id} updated")
    else:
        _report_missing(state, task_id)


def _set_status(state: AppState, args: list[str], status: TaskStatus, usage: str) -> None:
    if len(args) > 1:
        raise ValidationError(usage)
    task_id = _resolve_id(state, args[0] if args else None, usage)

    if state.task_store.update_status(task_id, status, state.clock()):
        state.emit(f"Task {task_id} marked as {status.value}")
    else:
        _report_missing(state, task_id)


def cmd_mark_in_progress(state: AppState, args: list[str]) -> None:
    _set_status(state, args, TaskStatus.IN_PROGRESS, USAGE_MARK_IN_PROGRESS)


def cmd_mark_done(state: AppState, args: list[str]) -> None:
    _set_status(state, args, TaskStatus.DONE, USAGE_MARK_DONE)


def cmd_list(state: AppState, args: list[str]) -> None:
    """
    list          -> every task
    list <status> -> tasks whose status is exactly <status> (unknown -> none)
    """
    if len(args) > 1:
        raise ValidationError(USAGE_LIST)
    if args:
        tasks = state.task_store.list_by_status(args[0])
    else:
        tasks = state.task_store.list_all()
    state.emit(render_table(tasks))


def cmd_help(state: AppState, args: list[str]) -> None:
    state.emit(registry.build_help())


registry.register("add", cmd_add, help_text="add <description> - add a new task")
registry.register("update", cmd_update, help_text="update <id> <description> - replace a task's description")
registry.register(
    "mark-in-progress", cmd_mark_in_progress, help_text="mark-in-progress <id> - start working on a task"
)
registry.register("mark-done", cmd_mark_done, help_text="mark-done <id> - finish a task")
registry.register("list", cmd_list, help_text="list [todo|in-progress|done] - show tasks, optionally by status")
registry.register("help", cmd_help, help_text="help - show this message")
