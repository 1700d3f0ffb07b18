"""
CLI module for the chatcmd package.

Provides the interactive shell and its prompt_toolkit completer.
"""

from chatcmd.cli._repl import ConsoleHost, handle_line, run_repl
from chatcmd.cli.completion import CommandCompleter

__all__ = [
    "CommandCompleter",
    "ConsoleHost",
    "handle_line",
    "run_repl",
]
