# src/task_tracker/cli/render.py

from __future__ import annotations

from collections.abc import Sequence

from ..tasks.task_models import Task

COLUMNS: tuple[tuple[str, str], ...] = (
    ("id", "ID"),
    ("description", "Description"),
    ("status", "Status"),
    ("createdAt", "Created"),
    ("updatedAt", "Updated"),
)
SEP = " | "
EMPTY_TEXT = "(no tasks)"


def render_table(tasks: Sequence[Task]) -> str:
    """Plain-text table of tasks, one row per task, columns padded to fit."""
    if not tasks:
        return EMPTY_TEXT

    rows = [[str(rec[key]) for key, _ in COLUMNS] for rec in (t.to_record() for t in tasks)]
    headers = [title for _, title in COLUMNS]
    widths = [max(len(headers[i]), *(len(r[i]) for r in rows)) for i in range(len(COLUMNS))]

    def fmt(cells: list[str]) -> str:
        return SEP.join(c.ljust(w) for c, w in zip(cells, widths)).rstrip()

    lines = [fmt(headers), "-+-".join("-" * w for w in widths)]
    lines.extend(fmt(r) for r in rows)
    return "\n".join(lines)
