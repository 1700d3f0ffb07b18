"""
System commands a host can register: help, status, clear, quit.

The core defines no commands of its own; these are a ready-made set for
the chat shell. Help closes over the registry it describes.
"""

from __future__ import annotations

from chatcmd.core.datamodels import Command, CommandContext, CommandResult
from chatcmd.core.registry import CommandRegistry


def _describe(command: Command) -> str:
    line = f"  {command.usage:<16} - {command.description}"
    if command.aliases:
        line += f" (aliases: {', '.join(command.aliases)})"
    return line


def _format_listing(commands: list[Command]) -> str:
    lines = ["Commands:"]
    lines.extend(_describe(command) for command in commands)
    return "\n".join(lines)


def make_help_command(registry: CommandRegistry, show_hidden: bool = False) -> Command:
    """Build /help for the given registry."""

    def cmd_help(args: list[str], context: CommandContext) -> CommandResult:
        """Show available commands, or details for one."""
        if args:
            command = registry.get(args[0])
            if command is None:
                return CommandResult.fail(f"Unknown command: {args[0]}")
            return CommandResult.ok(_describe(command).strip(), command=command.name)

        commands = registry.list_commands(include_hidden=show_hidden)
        return CommandResult.ok(_format_listing(commands))

    return Command(
        name="help",
        handler=cmd_help,
        description="Show available commands",
        aliases=["?"],
        usage="/help [command]",
    )


def make_commands_command(registry: CommandRegistry) -> Command:
    """Build the hidden /commands listing, which includes hidden commands."""

    def cmd_commands(args: list[str], context: CommandContext) -> CommandResult:
        return CommandResult.ok(_format_listing(registry.list_commands(include_hidden=True)))

    return Command(
        name="commands",
        handler=cmd_commands,
        description="List all commands, hidden ones included",
        hidden=True,
    )


def cmd_status(args: list[str], context: CommandContext) -> CommandResult:
    """Report what the attached agent exposes about itself."""
    agent = context.agent
    lines = ["Agent status:"]
    for label, attr in (("Provider", "provider_name"), ("Model", "model_name"), ("Thread", "thread_id")):
        value = getattr(agent, attr, None)
        if value is not None:
            lines.append(f"  {label}: {value}")
    if len(lines) == 1:
        lines.append(f"  {type(agent).__name__}")
    return CommandResult.ok("\n".join(lines))


def cmd_clear(args: list[str], context: CommandContext) -> CommandResult:
    """Clear the conversation through the host."""
    if context.clear_session is None:
        return CommandResult.fail("Clearing the session is not supported here")
    context.clear_session()
    return CommandResult.ok("Conversation cleared.")


def cmd_quit(args: list[str], context: CommandContext) -> CommandResult:
    """Exit the shell."""
    return CommandResult.ok("Goodbye!", should_exit=True)


def build_system_commands(registry: CommandRegistry, show_hidden: bool = False) -> list[Command]:
    """Return the system command set, ready for ``register_all``.

    Args:
        registry: Registry that /help and /commands describe
        show_hidden: Include hidden commands in /help output
    """
    return [
        make_help_command(registry, show_hidden=show_hidden),
        Command(
            name="status",
            handler=cmd_status,
            description="Show agent status",
            requires_agent=True,
        ),
        Command(name="clear", handler=cmd_clear, description="Clear conversation history"),
        Command(
            name="quit",
            handler=cmd_quit,
            description="Exit the shell",
            aliases=["exit", "q"],
        ),
        make_commands_command(registry),
    ]
