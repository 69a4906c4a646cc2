# src/captain_log/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from ..core.errors import ValidationError
from .task_models import IndexedTask, Task, TaskResult

logger = logging.getLogger(__name__)


class TaskList:
    """
    Ordered in-memory task collection for one session.

    Contract:
    - external positions are 1-based; 0-based offsets stay inside this class
      and its `*_at` helpers,
    - reads hand out copies, so callers can only mutate through the methods here,
    - bulk operations validate every index before touching any task.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = []
        for task in tasks or ():
            self.append(task, check_duplicate=False)

    def __len__(self) -> int:
        return len(self._tasks)

    def size(self) -> int:
        return len(self._tasks)

    # ---- single-task operations (0-based) ----

    def append(self, task: Task, *, check_duplicate: bool = True) -> None:
        """
        Add `task` at the end.

        New tasks are checked against every existing task with `same_details`;
        tasks restored from disk skip the check.
        """
        if check_duplicate and any(t.same_details(task) for t in self._tasks):
            raise ValidationError(
                f"Arr, that is a duplicate task; it is already in your list: {task.description}",
                reason="duplicate task",
            )
        self._tasks.append(task)

    def remove_at(self, index: int) -> Task:
        self._check_offset(index)
        return self._tasks.pop(index)

    def get_at(self, index: int) -> Task:
        self._check_offset(index)
        return self._tasks[index].copy()

    def _check_offset(self, index: int) -> None:
        if index < 0 or index >= len(self._tasks):
            raise ValidationError(
                f"No task at position {index + 1}.",
                reason="index out of range",
            )

    # ---- 1-based helpers ----

    def ensure_index_in_range_1based(self, n: int) -> None:
        if n < 1 or n > len(self._tasks):
            if not self._tasks:
                message = f"Task number {n} is out of range: your list is empty."
            else:
                message = f"Task number {n} is out of range (1-{len(self._tasks)})."
            raise ValidationError(message, reason="out of range")

    def snapshot(self) -> list[Task]:
        return [t.copy() for t in self._tasks]

    def find_by_keyword(self, keyword: str) -> list[IndexedTask]:
        needle = keyword.lower()
        return [
            IndexedTask(index=i, task=t.copy())
            for i, t in enumerate(self._tasks, start=1)
            if needle in t.description.lower()
        ]

    # ---- bulk operations (1-based, all-or-nothing validation) ----

    def _ensure_all_in_range(self, indices: Sequence[int]) -> None:
        for n in indices:
            self.ensure_index_in_range_1based(n)

    def mark_many(self, indices: Sequence[int]) -> list[TaskResult]:
        self._ensure_all_in_range(indices)
        results: list[TaskResult] = []
        for n in indices:
            task = self._tasks[n - 1]
            task.mark()
            results.append(TaskResult(index=n, task=task.copy()))
        logger.debug("Marked tasks %s", list(indices))
        return results

    def unmark_many(self, indices: Sequence[int]) -> list[TaskResult]:
        self._ensure_all_in_range(indices)
        results: list[TaskResult] = []
        for n in indices:
            task = self._tasks[n - 1]
            task.unmark()
            results.append(TaskResult(index=n, task=task.copy()))
        logger.debug("Unmarked tasks %s", list(indices))
        return results

    def delete_many(self, indices: Sequence[int]) -> list[TaskResult]:
        """
        Remove every task in `indices`.

        Removal runs from the highest position down so earlier removals never
        shift a position that is still pending; results come back in the
        order the caller gave.
        """
        self._ensure_all_in_range(indices)
        removed: dict[int, Task] = {}
        for n in sorted(set(indices), reverse=True):
            removed[n] = self.remove_at(n - 1)
        logger.debug("Deleted tasks %s", sorted(removed, reverse=True))
        return [TaskResult(index=n, task=removed[n]) for n in indices]
