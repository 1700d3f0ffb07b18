"""
Command registry for the chat shell.

Commands are registered under their name and every alias. The alias index
maps each string to exactly one command; registering a string that is
already bound replaces that binding only.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator

from chatcmd.core.datamodels import Command, CommandCompletion
from chatcmd.core.exceptions import CommandNotFoundError

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Registry for slash commands."""

    def __init__(self):
        self._index: dict[str, Command] = {}
        self._commands: list[Command] = []

    def register(self, command: Command) -> None:
        """Bind a command under its name and aliases (last write wins)."""
        if not any(existing is command for existing in self._commands):
            self._commands.append(command)

        for token in command.names:
            previous = self._index.get(token)
            if previous is not None and previous is not command:
                logger.debug(f"'{token}' rebound from /{previous.name} to /{command.name}")
            self._index[token] = command

        logger.debug(f"Registered command: /{command.name}")

    def register_all(self, commands: Iterable[Command]) -> None:
        """Register each command in order."""
        for command in commands:
            self.register(command)

    def command(
        self,
        name: str,
        description: str = "",
        aliases: list[str] | None = None,
        hidden: bool = False,
        requires_agent: bool = False,
        usage: str | None = None,
    ) -> Callable:
        """Decorator to register a function as a command handler.

        Args:
            name: Command name without the / prefix (e.g., "clear")
            description: Short description for /help
            aliases: Alternative names for the command
            hidden: Leave out of listings and completion
            requires_agent: Refuse to run without an agent in the context
            usage: Usage string (e.g., "/pop [n]")

        Returns:
            Decorator function

        Example:
            @registry.command("clear", "Clear conversation history")
            def cmd_clear(args, context):
                context.clear_session()
                return CommandResult.ok("Conversation cleared.")
        """
        def decorator(func: Callable) -> Callable:
            self.register(Command(
                name=name,
                handler=func,
                description=description,
                aliases=aliases or [],
                hidden=hidden,
                requires_agent=requires_agent,
                usage=usage,
            ))
            return func
        return decorator

    def get(self, token: str) -> Command | None:
        """Get a command by name or alias."""
        return self._index.get(token)

    def resolve(self, token: str) -> Command:
        """Get a command by name or alias, raising if nothing is bound."""
        command = self._index.get(token)
        if command is None:
            raise CommandNotFoundError(token)
        return command

    def has_command(self, token: str) -> bool:
        return token in self._index

    def _is_bound(self, command: Command) -> bool:
        return any(self._index.get(token) is command for token in command.names)

    def list_commands(self, include_hidden: bool = False) -> list[Command]:
        """Get distinct registered commands in registration order."""
        return [
            command for command in self._commands
            if self._is_bound(command) and (include_hidden or not command.hidden)
        ]

    def get_completions(self, prefix: str = "") -> list[CommandCompletion]:
        """Get visible command names starting with prefix.

        Aliases are never offered, nor is a name that now resolves to a
        different command.
        """
        return [
            CommandCompletion(value=command.name, description=command.description)
            for command in self._commands
            if not command.hidden
            and command.name.startswith(prefix)
            and self._index.get(command.name) is command
        ]

    def __contains__(self, token: object) -> bool:
        return token in self._index

    def __iter__(self) -> Iterator[Command]:
        return iter(self.list_commands())

    def __len__(self) -> int:
        return len(self.list_commands(include_hidden=True))
