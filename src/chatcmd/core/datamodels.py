"""
Data models for the command registry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, NamedTuple, Optional, Union

from pydantic import BaseModel

from chatcmd.core.exceptions import CommandDefinitionError


class CommandResult(BaseModel):
    """Outcome of a command execution.

    Handlers may attach extra fields (e.g. ``cleared=3``); they are kept
    on the model and readable as attributes.
    """
    success: bool
    message: str | None = None
    should_exit: bool | None = None

    model_config = {"extra": "allow"}

    @classmethod
    def ok(cls, message: str | None = None, **extra: Any) -> CommandResult:
        return cls(success=True, message=message, **extra)

    @classmethod
    def fail(cls, message: str, **extra: Any) -> CommandResult:
        return cls(success=False, message=message, **extra)


@dataclass
class CommandContext:
    """Capabilities handed to a handler for one input line.

    Only ``agent`` is looked at by the executor, and only to see whether
    it is set. Everything else is for the handlers.
    """

    agent: Any = None
    add_message: Optional[Callable[[str], None]] = None
    handle_abort: Optional[Callable[[], None]] = None
    clear_session: Optional[Callable[[], None]] = None
    state: dict[str, Any] = field(default_factory=dict)

    @property
    def has_agent(self) -> bool:
        return self.agent is not None


HandlerResult = Union[CommandResult, Awaitable[CommandResult]]
CommandHandler = Callable[[list[str], CommandContext], HandlerResult]


def _check_identifier(value: str, kind: str) -> None:
    if not isinstance(value, str) or not value:
        raise CommandDefinitionError(f"Command {kind} must be a non-empty string")
    if any(ch.isspace() for ch in value):
        raise CommandDefinitionError(f"Command {kind} must not contain whitespace: {value!r}")


@dataclass
class Command:
    """Definition of a slash command."""

    name: str
    handler: CommandHandler
    description: str = ""
    aliases: list[str] = field(default_factory=list)
    hidden: bool = False
    requires_agent: bool = False
    usage: str | None = None

    def __post_init__(self):
        _check_identifier(self.name, "name")
        self.aliases = list(self.aliases)
        for alias in self.aliases:
            _check_identifier(alias, "alias")
        if self.usage is None:
            self.usage = f"/{self.name}"

    @property
    def names(self) -> list[str]:
        """Name followed by aliases, in binding order."""
        return [self.name, *self.aliases]


class ParsedCommand(NamedTuple):
    """A command line split into identifier and arguments."""
    identifier: str
    args: list[str]


@dataclass(frozen=True)
class CommandCompletion:
    """Completion candidate for a command name."""
    value: str
    description: str
