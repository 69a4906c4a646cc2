# src/captain_log/tasks/datetime_format.py

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True, slots=True)
class DateTimeFormat:
    """
    Date/time patterns used for command input, the save file and display.

    Input and storage share one pattern (minute precision, no seconds).
    `shape` guards the zero-padded ASCII layout, since strptime alone accepts
    "2026-1-5 900".
    """

    pattern: str = "%Y-%m-%d %H%M"
    shape: re.Pattern[str] = field(default=re.compile(r"\d{4}-\d{2}-\d{2} \d{4}", re.ASCII))
    display_pattern: str = "%b %d %Y %H:%M"
    example: str = "2026-01-30 1400"

    def parse(self, text: str) -> datetime:
        """Strictly parse `text`; raise ValueError on any mismatch or overflow."""
        s = text.strip()
        if not self.shape.fullmatch(s):
            raise ValueError(f"date/time {s!r} does not match {self.pattern!r}")
        # strptime rejects overflow days/months (e.g. 2026-02-30).
        return datetime.strptime(s, self.pattern)

    def format(self, value: datetime) -> str:
        return value.strftime(self.pattern)

    def display(self, value: datetime) -> str:
        return value.strftime(self.display_pattern)


DEFAULT_DATETIME_FORMAT = DateTimeFormat()
