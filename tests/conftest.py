# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from captain_log.cli.bootstrap import create_initial_state
from captain_log.core.state import AppState


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="Captain Barry",
        log_level="WARNING",
        file_logging=False,
        data_dir=data_dir,
        tasks_file_path=data_dir / "tasks.txt",
        log_dir=data_dir,
        display_datetime_format="%b %d %Y %H:%M",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired through the real bootstrap.

    NOTE: We keep the real TaskFile here because the write-through to disk is
    part of what we want to test.
    """
    return create_initial_state(settings=settings)
