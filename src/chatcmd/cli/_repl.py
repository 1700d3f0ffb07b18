"""
Interactive REPL (Read-Eval-Print Loop) using prompt_toolkit.

Provides command history, tab completion for /commands and dispatch of
each command line through the CommandExecutor.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.history import FileHistory
from prompt_toolkit.shortcuts import clear
from prompt_toolkit.styles import Style

from chatcmd.cli.completion import CommandCompleter
from chatcmd.core import CommandContext, CommandExecutor, CommandResult

logger = logging.getLogger(__name__)

# ANSI escape codes for colored text
GREY = "\033[90m"
RED = "\033[91m"
RESET = "\033[0m"


def feedback(msg: str) -> None:
    """Print feedback message in grey to stderr."""
    print(f"{GREY}{msg}{RESET}", file=sys.stderr)


def get_style() -> Style:
    """Get the prompt style."""
    return Style.from_dict({
        "prompt": "ansicyan bold",
    })


class ConsoleHost:
    """Host callbacks handed to command handlers through the context."""

    def __init__(self, agent: Any = None):
        self.agent = agent
        self.aborted = 0

    def add_message(self, message: str) -> None:
        print(message)

    def handle_abort(self) -> None:
        self.aborted += 1
        feedback("[Interrupted]")

    def clear_session(self) -> None:
        clear()

    def make_context(self) -> CommandContext:
        """Build a fresh context for one input line."""
        return CommandContext(
            agent=self.agent,
            add_message=self.add_message,
            handle_abort=self.handle_abort,
            clear_session=self.clear_session,
        )


def show_result(result: CommandResult) -> None:
    """Print a command result's message, failures in red."""
    if not result.message:
        return
    if result.success:
        print(result.message)
    else:
        print(f"{RED}{result.message}{RESET}")
    print()


async def handle_line(executor: CommandExecutor, host: ConsoleHost, line: str) -> bool:
    """Process one input line. Returns True when the session should end."""
    if not executor.is_command(line):
        host.add_message("No agent attached; only /commands are handled. Type /help.\n")
        return False

    try:
        result = await executor.execute(line, host.make_context())
    except Exception:
        # execute() converts every expected failure, so this is a bug
        logger.exception(f"Unexpected error while executing {line!r}")
        feedback("Internal error, see log for details.")
        return False

    show_result(result)
    return bool(result.should_exit)


async def run_repl(
    executor: CommandExecutor,
    host: Optional[ConsoleHost] = None,
    prompt: str = "> ",
    history_file: Optional[Path] = None,
) -> None:
    """Run the interactive REPL until /quit or Ctrl+D.

    Features:
        - Command history (persistent across sessions)
        - Tab completion for /commands
        - Ctrl+C to abort the current input, Ctrl+D to exit

    Args:
        executor: CommandExecutor holding the registered commands.
        host: Host callback surface; a plain ConsoleHost if omitted.
        prompt: Prompt string.
        history_file: File for persistent history, in-memory if omitted.
    """
    host = host or ConsoleHost()

    session_kwargs: dict[str, Any] = {}
    if history_file is not None:
        history_file.parent.mkdir(parents=True, exist_ok=True)
        session_kwargs["history"] = FileHistory(str(history_file))

    session: PromptSession = PromptSession(
        completer=CommandCompleter(executor.completions),
        auto_suggest=AutoSuggestFromHistory(),
        style=get_style(),
        **session_kwargs,
    )

    print("Type /help for available commands.\n")
    while True:
        try:
            line = await session.prompt_async([("class:prompt", prompt)])
        except KeyboardInterrupt:
            host.handle_abort()
            continue
        except EOFError:
            print("Goodbye!")
            break

        if not line.strip():
            continue

        if await handle_line(executor, host, line):
            break
