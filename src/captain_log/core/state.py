# src/captain_log/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.datetime_format import DEFAULT_DATETIME_FORMAT, DateTimeFormat
from ..tasks.task_list import TaskList
from .command_parser import CommandParser
from .ports import TaskStorage


@dataclass
class AppState:
    """
    Everything one session needs, wired once by the bootstrap.

    The task list is owned here and only touched from the single input loop.
    """

    # Settings object (config.Settings or a SimpleNamespace in tests).
    settings: Any

    task_list: TaskList
    storage: TaskStorage
    parser: CommandParser = field(default_factory=CommandParser)
    datetime_format: DateTimeFormat = DEFAULT_DATETIME_FORMAT

    first_run: bool = False
    startup_message: str | None = None
    last_reply_was_error: bool = False

    def consume_startup_message(self) -> str | None:
        """Return the pending startup message once; later calls return None."""
        msg = self.startup_message
        self.startup_message = None
        return msg
