"""
Command executor: parse, resolve, check preconditions, run the handler.

Every outcome is returned as a CommandResult; ``execute`` lets no
``Exception`` escape, so the host has nothing to catch.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from typing import Any, Iterable

from chatcmd.core.completion import CompletionProvider
from chatcmd.core.datamodels import Command, CommandCompletion, CommandContext, CommandResult
from chatcmd.core.exceptions import AgentRequiredError, CommandError
from chatcmd.core.parser import is_command, parse_command
from chatcmd.core.registry import CommandRegistry

logger = logging.getLogger(__name__)


def _error_text(exc: BaseException) -> str:
    """Message text of an exception, or its class name when it has none."""
    return str(exc) or type(exc).__name__


class CommandExecutor:
    """Runs slash commands against a registry it owns.

    Example:
        executor = CommandExecutor()
        executor.register(Command("quit", quit_handler, aliases=["exit", "q"]))
        result = await executor.execute("/q", CommandContext())
    """

    def __init__(self, registry: CommandRegistry | None = None):
        self.registry = registry if registry is not None else CommandRegistry()
        self.completions = CompletionProvider(self.registry)

    # Registry pass-throughs, so the host only deals with the executor.

    def register(self, command: Command) -> None:
        self.registry.register(command)

    def register_all(self, commands: Iterable[Command]) -> None:
        self.registry.register_all(commands)

    def has_command(self, token: str) -> bool:
        return self.registry.has_command(token)

    def is_command(self, text: str) -> bool:
        return is_command(text)

    def list_commands(self, include_hidden: bool = False) -> list[Command]:
        return self.registry.list_commands(include_hidden)

    def get_completions(self, prefix: str = "") -> list[CommandCompletion]:
        return self.completions.get_completions(prefix)

    async def execute(self, text: str, context: CommandContext) -> CommandResult:
        """Execute a command line and return its result.

        Args:
            text: Raw input line, e.g. "/pop 3"
            context: Per-line capabilities handed to the handler

        Returns:
            The handler's CommandResult, or a failed result describing why
            the command did not run or what it raised.
        """
        if not is_command(text):
            logger.info(f"Not running non-command input: {text!r}")
            return CommandResult.fail(f"Not a command: {text.strip()}")

        identifier, args = parse_command(text)

        try:
            command = self.registry.resolve(identifier)
            if command.requires_agent and not context.has_agent:
                raise AgentRequiredError(command.name)
        except CommandError as e:
            logger.info(f"Not running /{identifier}: {e}")
            return CommandResult.fail(_error_text(e))

        logger.debug(f"Executing /{command.name} args={args}")
        try:
            result = command.handler(args, context)
            if inspect.isawaitable(result):
                result = await result
            return self._to_result(command, result)
        except Exception as e:
            logger.warning(f"Command /{command.name} failed: {e}", exc_info=True)
            return CommandResult.fail(_error_text(e))

    @staticmethod
    def _to_result(command: Command, value: Any) -> CommandResult:
        """Normalize a handler's return value into a CommandResult."""
        if isinstance(value, CommandResult):
            return value
        if value is None:
            return CommandResult(success=True)
        if isinstance(value, Mapping):
            return CommandResult.model_validate(dict(value))
        raise TypeError(
            f"Handler for /{command.name} returned {type(value).__name__}, expected CommandResult"
        )
