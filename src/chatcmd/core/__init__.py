"""
Core module for the chatcmd package.

Provides the command registry, input parser, completion provider and
executor.
"""

from chatcmd.core.completion import CompletionProvider
from chatcmd.core.datamodels import (
    Command,
    CommandCompletion,
    CommandContext,
    CommandResult,
    ParsedCommand,
)
from chatcmd.core.exceptions import (
    AgentRequiredError,
    CommandDefinitionError,
    CommandError,
    CommandNotFoundError,
)
from chatcmd.core.executor import CommandExecutor
from chatcmd.core.parser import COMMAND_PREFIX, is_command, parse_command
from chatcmd.core.registry import CommandRegistry

__all__ = [
    # Registry
    "CommandRegistry",
    # Executor
    "CommandExecutor",
    "CompletionProvider",
    # Parser
    "COMMAND_PREFIX",
    "is_command",
    "parse_command",
    # Models
    "Command",
    "CommandCompletion",
    "CommandContext",
    "CommandResult",
    "ParsedCommand",
    # Exceptions
    "CommandError",
    "CommandDefinitionError",
    "CommandNotFoundError",
    "AgentRequiredError",
]
