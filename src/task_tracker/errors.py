# src/task_tracker/errors.py

"""Exception types shared across the store, persistence layer and CLI."""

from __future__ import annotations


class TaskTrackerError(Exception):
    """Base class for all task-tracker errors."""


class ValidationError(TaskTrackerError, ValueError):
    """Bad user input or a malformed record (empty description, bad id, ...)."""


class PersistenceReadError(TaskTrackerError):
    """Backing file is missing, unreadable or does not hold a JSON array."""


class PersistenceWriteError(TaskTrackerError):
    """Backing file could not be written."""


class UnknownCommandError(TaskTrackerError):
    def __init__(self, name: str | None) -> None:
        super().__init__(f"Invalid command: {name}")
        self.name = name
