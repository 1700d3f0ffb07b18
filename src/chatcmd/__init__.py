"""
chatcmd - slash-command dispatch for interactive agent chat shells.

Recognizes "/command arg ..." lines, resolves them (aliases included)
against a registry, checks preconditions, runs the handler and returns a
uniform CommandResult the host loop can act on.

Example usage:
    from chatcmd import Command, CommandContext, CommandExecutor, CommandResult

    executor = CommandExecutor()

    @executor.registry.command("quit", "Exit the shell", aliases=["exit", "q"])
    def cmd_quit(args, context):
        return CommandResult.ok("Goodbye!", should_exit=True)

    result = await executor.execute("/q", CommandContext())
    assert result.should_exit
"""

__version__ = "0.1.0"

from chatcmd.core import (
    COMMAND_PREFIX,
    AgentRequiredError,
    Command,
    CommandCompletion,
    CommandContext,
    CommandDefinitionError,
    CommandError,
    CommandExecutor,
    CommandNotFoundError,
    CommandRegistry,
    CommandResult,
    CompletionProvider,
    ParsedCommand,
    is_command,
    parse_command,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "CommandRegistry",
    "CommandExecutor",
    "CompletionProvider",
    "Command",
    "CommandCompletion",
    "CommandContext",
    "CommandResult",
    "ParsedCommand",
    "COMMAND_PREFIX",
    "is_command",
    "parse_command",
    # Exceptions
    "CommandError",
    "CommandDefinitionError",
    "CommandNotFoundError",
    "AgentRequiredError",
]
