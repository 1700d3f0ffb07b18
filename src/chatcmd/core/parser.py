"""
Input classification and parsing for slash commands.
"""

from __future__ import annotations

from chatcmd.core.datamodels import ParsedCommand

COMMAND_PREFIX = "/"


def is_command(text: str) -> bool:
    """Return True if the input line is a slash command."""
    stripped = text.strip()
    return bool(stripped) and stripped.startswith(COMMAND_PREFIX)


def parse_command(text: str) -> ParsedCommand:
    """Split a command line into its identifier and arguments.

    The prefix is dropped if present, the rest is split on runs of
    whitespace. The identifier keeps its case.

    Examples:
        >>> parse_command("/pop 3")
        ParsedCommand(identifier='pop', args=['3'])
        >>> parse_command("/")
        ParsedCommand(identifier='', args=[])
    """
    body = text.strip()
    if body.startswith(COMMAND_PREFIX):
        body = body[len(COMMAND_PREFIX):]

    parts = body.split()
    if not parts:
        return ParsedCommand("", [])
    return ParsedCommand(parts[0], parts[1:])
