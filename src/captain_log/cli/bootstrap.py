# src/captain_log/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- builds the date/time format and hands it to the parser and the storage codec,
- loads the saved task list (empty on first run or on a corrupted file).
"""

from __future__ import annotations

import logging
from dataclasses import replace

from ..config import get_settings
from ..core import persona
from ..core.command_parser import CommandParser
from ..core.errors import PersistenceError
from ..core.ports import TaskStorage
from ..core.state import AppState
from ..tasks.datetime_format import DEFAULT_DATETIME_FORMAT, DateTimeFormat
from ..tasks.task_file import TaskFile
from ..tasks.task_list import TaskList

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_file_path.parent.mkdir(parents=True, exist_ok=True)


def build_datetime_format(settings) -> DateTimeFormat:
    display = getattr(settings, "display_datetime_format", None)
    if not display:
        return DEFAULT_DATETIME_FORMAT
    return replace(DEFAULT_DATETIME_FORMAT, display_pattern=display)


def create_initial_state(*, settings=None, storage: TaskStorage | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and storage) injectable makes the app easier to test and avoids
    hidden global config reads. If settings is None, falls back to get_settings().

    A corrupted save file does not stop startup: the session starts empty, the
    user gets a warning, and the file is left as-is until the next save.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    fmt = build_datetime_format(settings)
    if storage is None:
        storage = TaskFile(settings.tasks_file_path, fmt)

    first_run = False
    startup_message: str | None = None
    try:
        result = storage.load()
        task_list = TaskList(result.tasks)
        first_run = result.first_run
        if first_run:
            startup_message = persona.FIRST_RUN_MESSAGE
    except PersistenceError as e:
        logger.warning("Save file unreadable (%s): %s", e.reason, e.detail)
        task_list = TaskList()
        startup_message = persona.corrupted_file_message(e.reason, settings.tasks_file_path)

    logger.info("Session ready: %d tasks (first_run=%s)", task_list.size(), first_run)

    return AppState(
        settings=settings,
        task_list=task_list,
        storage=storage,
        parser=CommandParser(fmt),
        datetime_format=fmt,
        first_run=first_run,
        startup_message=startup_message,
    )
