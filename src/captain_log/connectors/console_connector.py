# src/captain_log/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.assistant import respond, welcome_message
from ..core.state import AppState

logger = logging.getLogger(__name__)

DIVIDER = "_" * 60

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def _print_block(text: str, output: OutputFn) -> None:
    output(f"{DIVIDER}\n{text}\n{DIVIDER}")


def run_console_loop(
    state: AppState,
    *,
    input_fn: InputFn = input,
    output: OutputFn = print,
) -> None:
    """Read commands until 'bye', EOF or Ctrl+C; print one reply per line."""
    logger.info("Console connector started.")

    _print_block(welcome_message(state), output)
    startup = state.consume_startup_message()
    if startup:
        _print_block(startup, output)

    while True:
        try:
            line = input_fn("> ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            output("")
            break

        if not line.strip():
            continue

        reply = respond(state, line)
        _print_block(reply.text, output)

        if reply.is_exit:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
