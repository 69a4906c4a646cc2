# src/captain_log/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The orchestrator depends on a Protocol instead of the concrete TaskFile,
so tests can swap in a storage fake (e.g. one that fails on save).
"""

from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_file import LoadResult
from ..tasks.task_models import Task


class TaskStorage(Protocol):
    def exists(self) -> bool: ...
    def load(self) -> LoadResult: ...
    def save(self, tasks: Iterable[Task]) -> None: ...
