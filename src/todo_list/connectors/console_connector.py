# src/todo_list/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import cmd_add, render_current
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def handle_line(state: AppState, line: str) -> str | None:
    """
    One console input line -> reply text.

    Slash lines go to the command registry; anything else is added as a new task,
    the way the input box + Enter works.
    """
    if not line:
        return None

    try:
        cmd_response = command_registry.handle(state, line)
        if cmd_response is None:
            cmd_response = cmd_add(state, line.split())
    except Exception:
        logger.exception("Command handler crashed.")
        cmd_response = "Internal error while handling a command."
    return cmd_response


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (theme=%s).", state.theme.get())
    _print_ts("[CONSOLE] Type a task to add it. Use /help for commands. Use /exit to quit.\n")
    print(render_current(state))

    while True:
        try:
            user_input = input(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, user_input)
        if reply is not None:
            print(reply)

    logger.info("Console connector finished.")
