"""
Exception classes for the command registry and executor.
"""


class CommandError(Exception):
    """Base exception for command-related errors."""


class CommandDefinitionError(CommandError, ValueError):
    """Command name or alias is not a valid identifier."""


class CommandNotFoundError(CommandError):
    """No command is bound to the given identifier."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Unknown command: {identifier}")


class AgentRequiredError(CommandError):
    """Command requires an agent but the context has none."""

    def __init__(self, command: str):
        self.command = command
        super().__init__("No agent available")
