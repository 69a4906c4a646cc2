# src/captain_log/core/assistant.py

"""
Core request/reply orchestration.

This module is transport-agnostic:
- front ends hand in one raw line,
- the core parses it, applies it to the task list, writes through to storage,
- front ends decide how to show the Reply.

Key invariants:
- a command that fails to parse or validate leaves the task list untouched,
- every mutating command is saved before the reply is returned,
- no user error escapes this module; unexpected ones are logged and reported.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as default_registry
from . import persona
from .command_parser import CommandKind
from .errors import CaptainLogError
from .state import AppState

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Reply:
    text: str
    is_error: bool = False
    is_exit: bool = False


def respond(state: AppState, line: str, registry: CommandRegistry | None = None) -> Reply:
    """Handle one line of user input and return what to show."""
    reg = registry or default_registry

    try:
        command = state.parser.parse(line)
        text = reg.handle(state, command)
    except CaptainLogError as e:
        logger.debug("%s (%s) for input %r", type(e).__name__, e.reason, line)
        state.last_reply_was_error = True
        return Reply(text=str(e), is_error=True)
    except Exception:
        logger.exception("Command handler crashed for input %r", line)
        state.last_reply_was_error = True
        return Reply(text="Internal error while handling that command.", is_error=True)

    state.last_reply_was_error = False
    return Reply(text=text, is_exit=command.kind is CommandKind.BYE)


def welcome_message(state: AppState) -> str:
    return persona.WELCOME_MESSAGE_FIRST_RUN if state.first_run else persona.WELCOME_MESSAGE


class Assistant:
    """
    Thin stateful facade for front ends that prefer an object
    (getResponse-style): respond(), welcome, startup message, error flag.
    """

    def __init__(self, state: AppState, registry: CommandRegistry | None = None) -> None:
        self.state = state
        self._registry = registry

    def respond(self, line: str) -> Reply:
        return respond(self.state, line, self._registry)

    def get_response(self, line: str) -> str:
        return self.respond(line).text

    def welcome_message(self) -> str:
        return welcome_message(self.state)

    def consume_startup_message(self) -> str | None:
        return self.state.consume_startup_message()

    @property
    def last_reply_was_error(self) -> bool:
        return self.state.last_reply_was_error
