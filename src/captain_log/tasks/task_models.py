# src/captain_log/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import StrEnum
from typing import ClassVar

from ..core.errors import ValidationError
from .datetime_format import DEFAULT_DATETIME_FORMAT, DateTimeFormat

DONE_MARK = "X"
UNDONE_MARK = " "

# Save-file field separator and line breaks.
RESERVED_CHARS = ("|", "\n", "\r")


class TaskType(StrEnum):
    """Single-letter type codes; also used as the first field of a save-file line."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


@dataclass(slots=True)
class Task:
    """
    Common part of every task variant.

    `done` is keyword-only so variants can add required date fields after it.
    Variants must override `date_fields()` and `_render_suffix()`.
    """

    type_code: ClassVar[TaskType]

    description: str
    done: bool = field(default=False, kw_only=True)

    def __post_init__(self) -> None:
        if not self.description or not self.description.strip():
            raise ValidationError("A task needs a description.", reason="empty description")
        if any(ch in self.description for ch in RESERVED_CHARS):
            raise ValidationError(
                "A description cannot contain '|' or line breaks; the logbook could not store it.",
                reason="unencodable description",
            )

    def mark(self) -> None:
        self.done = True

    def unmark(self) -> None:
        self.done = False

    def date_fields(self) -> tuple[datetime, ...]:
        return ()

    def same_details(self, other: Task | None) -> bool:
        """
        Structural equality used for duplicate detection.

        Same variant, same description and same date fields; completion state
        is ignored.
        """
        if other is None:
            return False
        return (
            type(self) is type(other)
            and self.description == other.description
            and self.date_fields() == other.date_fields()
        )

    def copy(self) -> Task:
        return replace(self)

    def render(self, fmt: DateTimeFormat = DEFAULT_DATETIME_FORMAT) -> str:
        completion = DONE_MARK if self.done else UNDONE_MARK
        return f"[{self.type_code}][{completion}] {self.description}{self._render_suffix(fmt)}"

    def _render_suffix(self, fmt: DateTimeFormat) -> str:
        return ""


@dataclass(slots=True)
class Todo(Task):
    type_code: ClassVar[TaskType] = TaskType.TODO


@dataclass(slots=True)
class Deadline(Task):
    type_code: ClassVar[TaskType] = TaskType.DEADLINE

    due_at: datetime

    def date_fields(self) -> tuple[datetime, ...]:
        return (self.due_at,)

    def _render_suffix(self, fmt: DateTimeFormat) -> str:
        return f" (by: {fmt.display(self.due_at)})"


@dataclass(slots=True)
class Event(Task):
    """A task spanning [start_at, end_at]; end must be strictly after start."""

    type_code: ClassVar[TaskType] = TaskType.EVENT

    start_at: datetime
    end_at: datetime

    def __post_init__(self) -> None:
        Task.__post_init__(self)
        if self.end_at <= self.start_at:
            raise ValidationError(
                "An event must end after it starts.",
                reason="end must be after start",
            )

    def date_fields(self) -> tuple[datetime, ...]:
        return (self.start_at, self.end_at)

    def _render_suffix(self, fmt: DateTimeFormat) -> str:
        return f" (from: {fmt.display(self.start_at)} to: {fmt.display(self.end_at)})"


@dataclass(slots=True, frozen=True)
class IndexedTask:
    """A task paired with its current 1-based position in the list."""

    index: int
    task: Task


# Bulk operations report one result per requested index, in the caller's order.
TaskResult = IndexedTask
