# src/captain_log/tasks/task_file.py

"""
Flat-file task storage.

One task per line, fields joined by " | ":

    T | <0|1> | <description>
    D | <0|1> | <description> | <due>
    E | <0|1> | <description> | <start> | <end>

Load is all-or-nothing: a single bad line aborts the whole load.
Save rewrites the whole file through a temporary sibling + os.replace.
"""

from __future__ import annotations

import contextlib
import logging
import os
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from ..core.errors import PersistenceError, ValidationError
from .datetime_format import DEFAULT_DATETIME_FORMAT, DateTimeFormat
from .task_models import RESERVED_CHARS, Deadline, Event, Task, TaskType, Todo

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = " | "
_SPLIT_RE = re.compile(r"\s*\|\s*")

_EXPECTED_FIELDS = {
    TaskType.TODO: 3,
    TaskType.DEADLINE: 4,
    TaskType.EVENT: 5,
}


@dataclass(slots=True)
class LoadResult:
    tasks: list[Task] = field(default_factory=list)
    first_run: bool = False


class TaskFile:
    """
    Reads/writes tasks to a UTF-8 text file.

    Stateless between calls: every load/save goes to disk, and saving the same
    tasks twice produces the same bytes.
    """

    def __init__(
        self,
        path: str | Path,
        datetime_format: DateTimeFormat = DEFAULT_DATETIME_FORMAT,
    ) -> None:
        self._path = Path(path)
        self._fmt = datetime_format

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    # ---- line codec ----

    def encode_line(self, task: Task) -> str:
        desc = task.description
        if any(ch in desc for ch in RESERVED_CHARS):
            raise PersistenceError(
                f"Cannot save a description containing '|' or line breaks: {desc!r}",
                reason="unencodable description",
                detail=desc,
            )
        parts = [str(task.type_code), "1" if task.done else "0", desc]
        parts.extend(self._fmt.format(dt) for dt in task.date_fields())
        return FIELD_SEPARATOR.join(parts)

    def decode_line(self, line: str) -> Task:
        parts = _SPLIT_RE.split(line.strip())
        if len(parts) < 3:
            raise PersistenceError(
                f"Corrupted save file line: {line}", reason="corrupted line", detail=line
            )

        raw_type, done_flag, desc = parts[0], parts[1], parts[2]

        try:
            task_type = TaskType(raw_type)
        except ValueError:
            raise PersistenceError(
                f"Unknown task type in save file line: {line}", reason="unknown type", detail=line
            ) from None

        if done_flag not in ("0", "1"):
            raise PersistenceError(
                f"Corrupted done flag in save file line: {line}", reason="bad done flag", detail=line
            )

        if len(parts) != _EXPECTED_FIELDS[task_type]:
            raise PersistenceError(
                f"Corrupted save file line: {line}", reason="corrupted line", detail=line
            )

        try:
            dates = [self._fmt.parse(p) for p in parts[3:]]
        except ValueError:
            raise PersistenceError(
                f"Corrupted date/time in save file line: {line}",
                reason="corrupted date/time",
                detail=line,
            ) from None

        task: Task
        try:
            if task_type is TaskType.TODO:
                task = Todo(desc)
            elif task_type is TaskType.DEADLINE:
                task = Deadline(desc, dates[0])
            else:
                task = Event(desc, dates[0], dates[1])
        except ValidationError as e:
            raise PersistenceError(
                f"Corrupted save file line ({e}): {line}", reason="corrupted line", detail=line
            ) from e

        # New tasks start not-done; only "1" needs an explicit mark.
        if done_flag == "1":
            task.mark()
        return task

    # ---- file operations ----

    def load(self) -> LoadResult:
        if not self._path.exists():
            logger.info("No save file at %s; starting with an empty list.", self._path)
            return LoadResult(tasks=[], first_run=True)

        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(
                f"Failed to read saved tasks: {e}", reason="read failed", detail=str(self._path)
            ) from e

        tasks: list[Task] = []
        # read_text translates \r\n and \r to \n; other Unicode line separators
        # are ordinary description characters.
        for lineno, line in enumerate(text.split("\n"), start=1):
            if not line.strip():
                continue
            try:
                tasks.append(self.decode_line(line))
            except PersistenceError:
                logger.warning("Save file %s: bad line %d: %r", self._path, lineno, line)
                raise

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return LoadResult(tasks=tasks, first_run=False)

    def save(self, tasks: Iterable[Task]) -> None:
        # Encode first so an unencodable task never leaves a half-written file.
        lines = [self.encode_line(t) for t in tasks]
        payload = "".join(line + os.linesep for line in lines)

        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8", newline="") as f:
                f.write(payload)
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            logger.error("Failed to save tasks to %s: %s", self._path, e)
            raise PersistenceError(
                f"Failed to save tasks: {e}", reason="write failed", detail=str(self._path)
            ) from e

        logger.debug("Saved %d tasks to %s", len(lines), self._path)
