# src/captain_log/core/command_parser.py

"""
Command grammar.

Turns one raw input line into a ParsedCommand. Parsing is pure: no task list
access, no I/O. Task numbers are checked for shape only (integer, positive,
unique); whether they exist is the task list's call.

Grammar (command word is case-insensitive):

    list | help | bye
    todo <description>
    deadline <description> /by <yyyy-MM-dd HHmm>
    event <description> /from <yyyy-MM-dd HHmm> /to <yyyy-MM-dd HHmm>
    mark | unmark | delete <n> [<n> ...]
    find <keyword>
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from ..tasks.datetime_format import DEFAULT_DATETIME_FORMAT, DateTimeFormat
from .errors import InputError

_INT_RE = re.compile(r"-?\d+", re.ASCII)
_USAGE_DATE = "yyyy-MM-dd HHmm"


class CommandKind(StrEnum):
    """Command tags; the value is the command word typed by the user."""

    LIST = "list"
    HELP = "help"
    ADD_TODO = "todo"
    ADD_DEADLINE = "deadline"
    ADD_EVENT = "event"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    FIND = "find"
    BYE = "bye"


_COMMAND_TABLE: dict[str, CommandKind] = {k.value: k for k in CommandKind}

_NO_ARGS = frozenset({CommandKind.LIST, CommandKind.HELP, CommandKind.BYE})
_INDEXED = frozenset({CommandKind.MARK, CommandKind.UNMARK, CommandKind.DELETE})


@dataclass(frozen=True, slots=True)
class ParsedCommand:
    """
    Structured result of parsing one line.

    Only the payload fields for `kind` are set:
    - ADD_TODO: description
    - ADD_DEADLINE: description, due_at
    - ADD_EVENT: description, start_at, end_at
    - MARK / UNMARK / DELETE: indices (1-based, input order, no duplicates)
    - FIND: keyword
    """

    kind: CommandKind
    description: str | None = None
    due_at: datetime | None = None
    start_at: datetime | None = None
    end_at: datetime | None = None
    indices: tuple[int, ...] = ()
    keyword: str | None = None


def _flag_re(flag: str) -> re.Pattern[str]:
    # A flag only counts as a standalone token ("a/b" is not "/b").
    return re.compile(rf"(?<!\S){re.escape(flag)}(?!\S)")


class CommandParser:
    def __init__(self, datetime_format: DateTimeFormat = DEFAULT_DATETIME_FORMAT) -> None:
        self._fmt = datetime_format
        self._by = _flag_re("/by")
        self._from = _flag_re("/from")
        self._to = _flag_re("/to")

    def parse(self, line: str | None) -> ParsedCommand:
        text = (line or "").strip()
        if not text:
            raise InputError("Say something, sailor! The command cannot be empty.", reason="empty")

        head, *tail = re.split(r"\s+", text, maxsplit=1)
        rest = tail[0] if tail else ""

        kind = _COMMAND_TABLE.get(head.lower())
        if kind is None:
            raise InputError(
                f"I don't know the command '{head}'. Type 'help' to see what I understand.",
                reason="unknown command",
            )

        if kind in _NO_ARGS:
            if rest.strip():
                raise InputError(
                    f"'{kind.value}' takes no extra arguments.", reason="extra arguments"
                )
            return ParsedCommand(kind=kind)

        if kind is CommandKind.ADD_TODO:
            return self._parse_todo(rest)
        if kind is CommandKind.ADD_DEADLINE:
            return self._parse_deadline(rest)
        if kind is CommandKind.ADD_EVENT:
            return self._parse_event(rest)
        if kind in _INDEXED:
            return ParsedCommand(kind=kind, indices=self._parse_indices(kind, rest))
        return self._parse_find(rest)

    # ---- per-command helpers ----

    @staticmethod
    def _parse_todo(rest: str) -> ParsedCommand:
        desc = rest.strip()
        if not desc:
            raise InputError(
                "The description of a todo cannot be empty. Usage: todo <description>",
                reason="empty description",
            )
        return ParsedCommand(kind=CommandKind.ADD_TODO, description=desc)

    def _parse_deadline(self, rest: str) -> ParsedCommand:
        usage = f"Usage: deadline <description> /by {_USAGE_DATE}"
        if not rest.strip():
            raise InputError(
                f"The description of a deadline cannot be empty. {usage}",
                reason="empty description",
            )

        parts = self._by.split(rest)
        if len(parts) == 1:
            raise InputError(f"A deadline needs a '/by' date. {usage}", reason="missing /by")
        if len(parts) > 2:
            raise InputError(f"Use '/by' only once. {usage}", reason="multiple /by")

        desc, when = parts[0].strip(), parts[1].strip()
        if not desc:
            raise InputError(
                f"The description of a deadline cannot be empty. {usage}",
                reason="empty description",
            )
        if not when:
            raise InputError(f"The deadline's date/time cannot be empty. {usage}", reason="empty date")

        return ParsedCommand(
            kind=CommandKind.ADD_DEADLINE,
            description=desc,
            due_at=self._parse_datetime(when),
        )

    def _parse_event(self, rest: str) -> ParsedCommand:
        usage = f"Usage: event <description> /from {_USAGE_DATE} /to {_USAGE_DATE}"
        if not rest.strip():
            raise InputError(
                f"The description of an event cannot be empty. {usage}",
                reason="empty description",
            )

        from_hits = list(self._from.finditer(rest))
        to_hits = list(self._to.finditer(rest))
        if not from_hits:
            raise InputError(f"An event needs a '/from' start time. {usage}", reason="missing /from")
        if not to_hits:
            raise InputError(f"An event needs a '/to' end time. {usage}", reason="missing /to")
        if len(from_hits) > 1:
            raise InputError(f"Use '/from' only once. {usage}", reason="multiple /from")
        if len(to_hits) > 1:
            raise InputError(f"Use '/to' only once. {usage}", reason="multiple /to")

        m_from, m_to = from_hits[0], to_hits[0]
        if m_to.start() < m_from.start():
            raise InputError(f"'/from' must come before '/to'. {usage}", reason="flags out of order")

        desc = rest[: m_from.start()].strip()
        start_raw = rest[m_from.end() : m_to.start()].strip()
        end_raw = rest[m_to.end() :].strip()

        if not desc:
            raise InputError(
                f"The description of an event cannot be empty. {usage}",
                reason="empty description",
            )
        if not start_raw:
            raise InputError(f"The event's start time cannot be empty. {usage}", reason="empty date")
        if not end_raw:
            raise InputError(f"The event's end time cannot be empty. {usage}", reason="empty date")

        start_at = self._parse_datetime(start_raw)
        end_at = self._parse_datetime(end_raw)
        if end_at <= start_at:
            raise InputError(
                "An event's end time must be after its start time; it cannot end before it begins.",
                reason="end must be after start",
            )

        return ParsedCommand(
            kind=CommandKind.ADD_EVENT,
            description=desc,
            start_at=start_at,
            end_at=end_at,
        )

    @staticmethod
    def _parse_indices(kind: CommandKind, rest: str) -> tuple[int, ...]:
        tokens = rest.split()
        if not tokens:
            raise InputError(
                f"Tell me which task(s) to {kind.value}. Usage: {kind.value} <n> [<n> ...]",
                reason="missing index",
            )

        seen: set[int] = set()
        out: list[int] = []
        for tok in tokens:
            if not _INT_RE.fullmatch(tok):
                raise InputError(f"Task numbers must be integers, got '{tok}'.", reason="not an integer")
            n = int(tok)
            if n <= 0:
                raise InputError(f"Task numbers start at 1, got {n}.", reason="non-positive")
            if n in seen:
                raise InputError(f"Task number {n} is listed more than once.", reason="duplicate index")
            seen.add(n)
            out.append(n)
        return tuple(out)

    @staticmethod
    def _parse_find(rest: str) -> ParsedCommand:
        keyword = rest.strip()
        if not keyword:
            raise InputError("Give me a keyword to search for. Usage: find <keyword>", reason="empty keyword")
        return ParsedCommand(kind=CommandKind.FIND, keyword=keyword)

    def _parse_datetime(self, raw: str) -> datetime:
        try:
            return self._fmt.parse(raw)
        except ValueError:
            raise InputError(
                f"Invalid date/time '{raw}'. Use {_USAGE_DATE} (e.g., {self._fmt.example}).",
                reason="invalid date/time",
            ) from None


_default_parser = CommandParser()


def parse(line: str | None) -> ParsedCommand:
    """Parse with the default date/time format."""
    return _default_parser.parse(line)
