# src/captain_log/core/persona.py

"""Everything the assistant says, in one place."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from ..tasks.datetime_format import DEFAULT_DATETIME_FORMAT, DateTimeFormat
from ..tasks.task_models import IndexedTask, Task, TaskResult

WELCOME_MESSAGE: Final[str] = (
    "Ahoy, I'm Captain Barry.\n"
    "What can I do for you?"
)

WELCOME_MESSAGE_FIRST_RUN: Final[str] = "Ahoy, I'm Captain Barry."

FIRST_RUN_MESSAGE: Final[str] = (
    "First voyage, is it? Your logbook is empty and ready for orders.\n"
    "Type 'help' to view all navigation commands."
)

BYE_MESSAGE: Final[str] = "Smooth sailing, matey. Hope to see you again soon!"

HELP_HEADER: Final[str] = "Navigation commands:"

EMPTY_LIST_MESSAGE: Final[str] = "Your logbook is empty. Add a task with 'todo', 'deadline' or 'event'."

NO_MATCHES_MESSAGE: Final[str] = "No matching tasks found."


def _plural(n: int) -> str:
    return "task" if n == 1 else "tasks"


def _count_line(size: int) -> str:
    return f"Now you have {size} {_plural(size)} in the list."


def corrupted_file_message(reason: str, path: object) -> str:
    return (
        f"Your saved logbook at {path} could not be read ({reason}).\n"
        "Starting with an empty list; the old file stays untouched until your next change is saved."
    )


def save_failed_message(error: Exception) -> str:
    return (
        f"Warning: {error}\n"
        "The change is kept for this session but is not on disk yet; it will be retried on the next change."
    )


def task_added(task: Task, size: int, fmt: DateTimeFormat = DEFAULT_DATETIME_FORMAT) -> str:
    return f"Aye! I've logged this task:\n  {task.render(fmt)}\n{_count_line(size)}"


def task_list(tasks: Sequence[Task], fmt: DateTimeFormat = DEFAULT_DATETIME_FORMAT) -> str:
    if not tasks:
        return EMPTY_LIST_MESSAGE
    lines = ["Here are the tasks in your list:"]
    for i, t in enumerate(tasks, start=1):
        lines.append(f"{i}.{t.render(fmt)}")
    return "\n".join(lines)


def find_results(matches: Sequence[IndexedTask], fmt: DateTimeFormat = DEFAULT_DATETIME_FORMAT) -> str:
    if not matches:
        return NO_MATCHES_MESSAGE
    lines = ["Here are the matching tasks in your list:"]
    for m in matches:
        lines.append(f"{m.index}.{m.task.render(fmt)}")
    return "\n".join(lines)


def tasks_marked(results: Sequence[TaskResult], fmt: DateTimeFormat = DEFAULT_DATETIME_FORMAT) -> str:
    lines = ["Nice! I've marked these as done:" if len(results) > 1 else "Nice! I've marked this task as done:"]
    lines.extend(f"  {r.index}.{r.task.render(fmt)}" for r in results)
    return "\n".join(lines)


def tasks_unmarked(results: Sequence[TaskResult], fmt: DateTimeFormat = DEFAULT_DATETIME_FORMAT) -> str:
    lines = [
        "OK, I've marked these as not done yet:"
        if len(results) > 1
        else "OK, I've marked this task as not done yet:"
    ]
    lines.extend(f"  {r.index}.{r.task.render(fmt)}" for r in results)
    return "\n".join(lines)


def tasks_deleted(
    results: Sequence[TaskResult], size: int, fmt: DateTimeFormat = DEFAULT_DATETIME_FORMAT
) -> str:
    lines = [
        "Noted. I've thrown these overboard:"
        if len(results) > 1
        else "Noted. I've thrown this task overboard:"
    ]
    lines.extend(f"  {r.index}.{r.task.render(fmt)}" for r in results)
    lines.append(_count_line(size))
    return "\n".join(lines)
