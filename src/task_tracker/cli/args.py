# src/task_tracker/cli/args.py

"""Raw argv handling: command extraction and id parsing."""

from __future__ import annotations

import re
from collections.abc import Sequence

from ..errors import ValidationError
from ..tasks.task_models import MAX_TASK_ID

SENTINEL_ID = -1

_INT_RE = re.compile(r"^[+-]?\d+$")


def extract_command_args(
    argv: Sequence[str], *, interpreter_invocation: bool = False
) -> list[str]:
    """
    Strip the invoking program from a raw argument vector, leaving
    [command, *args].

    A direct executable contributes one leading entry (its own path); an
    interpreter run ("python task_cli.py ...") contributes two.
    """
    skip = 2 if interpreter_invocation else 1
    return list(argv[skip:])


def parse_id(raw: str | None, *, usage: str) -> int:
    """
    Parse a task id given on the command line.

    Raises ValidationError with `usage` when the id is missing, and with
    "Invalid <id>" when it is not a whole number that fits a task id column.
    """
    if not isinstance(raw, str):
        raise ValidationError(usage)
    text = raw.strip()
    if "." in text or not _INT_RE.match(text):
        raise ValidationError("Invalid <id>")
    value = int(text)
    # Outside SQLite INTEGER range.
    if not -MAX_TASK_ID - 1 <= value <= MAX_TASK_ID:
        raise ValidationError("Invalid <id>")
    return value
