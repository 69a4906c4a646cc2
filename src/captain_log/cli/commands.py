# src/captain_log/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ..core import persona
from ..core.command_parser import CommandKind, ParsedCommand
from ..core.errors import PersistenceError
from ..core.state import AppState
from ..tasks.task_models import Deadline, Event, Task, Todo

CommandHandler = Callable[[AppState, ParsedCommand], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Maps each parsed command kind to the handler that applies it (list, todo, mark, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[CommandKind, CommandHandler] = {}
        self._help: dict[CommandKind, tuple[str, str]] = {}

    def register(
        self,
        kind: CommandKind,
        handler: CommandHandler,
        usage: str,
        help_text: str,
    ) -> None:
        self._handlers[kind] = handler
        self._help[kind] = (usage, help_text)

    def handle(self, state: AppState, command: ParsedCommand) -> str:
        """
        Apply an already-parsed command and return the reply text.
        Errors from the task list or storage propagate to the caller.
        """
        handler = self._handlers.get(command.kind)
        if handler is None:
            raise LookupError(f"No handler registered for {command.kind.value!r}")
        return handler(state, command)

    def build_help(self) -> str:
        rows = list(self._help.values())
        width = max((len(usage) for usage, _ in rows), default=0)
        lines = [persona.HELP_HEADER]
        for usage, help_text in rows:
            lines.append(f"  {usage.ljust(width)}  {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _persist(state: AppState, reply: str) -> str:
    """
    Write the whole list through to storage after a change.

    On failure the in-memory change stays; the error carries both the
    success text and the warning so the user sees what happened.
    """
    try:
        state.storage.save(state.task_list.snapshot())
    except PersistenceError as e:
        logger.warning("Save failed (%s); keeping in-memory state.", e.reason)
        raise PersistenceError(
            f"{reply}\n\n{persona.save_failed_message(e)}",
            reason=e.reason,
            detail=e.detail,
        ) from e
    return reply


def _required(command: ParsedCommand, name: str) -> Any:
    value = getattr(command, name)
    if value is None:
        raise LookupError(f"{command.kind.value!r} command is missing {name!r}")
    return value


def _add(state: AppState, task: Task) -> str:
    state.task_list.append(task)
    logger.debug("Added %s task %r", task.type_code, task.description)
    return _persist(state, persona.task_added(task, state.task_list.size(), state.datetime_format))


def cmd_list(state: AppState, command: ParsedCommand) -> str:
    return persona.task_list(state.task_list.snapshot(), state.datetime_format)


def cmd_help(state: AppState, command: ParsedCommand) -> str:
    return registry.build_help()


def cmd_todo(state: AppState, command: ParsedCommand) -> str:
    return _add(state, Todo(_required(command, "description")))


def cmd_deadline(state: AppState, command: ParsedCommand) -> str:
    return _add(
        state, Deadline(_required(command, "description"), _required(command, "due_at"))
    )


def cmd_event(state: AppState, command: ParsedCommand) -> str:
    event = Event(
        _required(command, "description"),
        _required(command, "start_at"),
        _required(command, "end_at"),
    )
    return _add(state, event)


def cmd_mark(state: AppState, command: ParsedCommand) -> str:
    results = state.task_list.mark_many(command.indices)
    return _persist(state, persona.tasks_marked(results, state.datetime_format))


def cmd_unmark(state: AppState, command: ParsedCommand) -> str:
    results = state.task_list.unmark_many(command.indices)
    return _persist(state, persona.tasks_unmarked(results, state.datetime_format))


def cmd_delete(state: AppState, command: ParsedCommand) -> str:
    results = state.task_list.delete_many(command.indices)
    return _persist(
        state, persona.tasks_deleted(results, state.task_list.size(), state.datetime_format)
    )


def cmd_find(state: AppState, command: ParsedCommand) -> str:
    matches = state.task_list.find_by_keyword(_required(command, "keyword"))
    return persona.find_results(matches, state.datetime_format)


def cmd_bye(state: AppState, command: ParsedCommand) -> str:
    return persona.BYE_MESSAGE


registry.register(CommandKind.LIST, cmd_list, "list", "Show every task in your logbook.")
registry.register(CommandKind.ADD_TODO, cmd_todo, "todo <description>", "Log a plain task.")
registry.register(
    CommandKind.ADD_DEADLINE,
    cmd_deadline,
    "deadline <description> /by <yyyy-MM-dd HHmm>",
    "Log a task with a due date.",
)
registry.register(
    CommandKind.ADD_EVENT,
    cmd_event,
    "event <description> /from <yyyy-MM-dd HHmm> /to <yyyy-MM-dd HHmm>",
    "Log an event with a start and an end.",
)
registry.register(CommandKind.MARK, cmd_mark, "mark <n> [<n> ...]", "Mark task(s) as done.")
registry.register(CommandKind.UNMARK, cmd_unmark, "unmark <n> [<n> ...]", "Mark task(s) as not done.")
registry.register(CommandKind.DELETE, cmd_delete, "delete <n> [<n> ...]", "Remove task(s) from the list.")
registry.register(CommandKind.FIND, cmd_find, "find <keyword>", "Search task descriptions (case-insensitive).")
registry.register(CommandKind.HELP, cmd_help, "help", "Show this page.")
registry.register(CommandKind.BYE, cmd_bye, "bye", "Leave port.")
