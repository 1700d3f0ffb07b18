#!/usr/bin/env python3
"""
CLI entry point for the chat shell (chatcmd command).
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from chatcmd.cli._repl import run_repl
from chatcmd.commands import build_system_commands, load_all_commands
from chatcmd.config import ConfigManager, get_config_manager
from chatcmd.core import CommandExecutor
from chatcmd.logging import close_logging, configure_logging

BOOL_KEYS = ("load_user_commands", "show_hidden_in_help")


def build_executor(
    cfg_mgr: ConfigManager,
    commands_dir: Path | None = None,
    load_user: bool = True,
) -> CommandExecutor:
    """Create an executor with the system commands and user commands loaded."""
    executor = CommandExecutor()
    executor.register_all(build_system_commands(
        executor.registry,
        show_hidden=bool(cfg_mgr.get("show_hidden_in_help")),
    ))

    if load_user and cfg_mgr.get("load_user_commands"):
        commands_dir = commands_dir or Path(cfg_mgr.get("commands_dir")).expanduser()
        load_all_commands(executor.registry, commands_dir, verbose=True)

    return executor


def print_commands(executor: CommandExecutor) -> None:
    """Print registered commands, hidden ones marked."""
    print("\nCommands:")
    for command in executor.list_commands(include_hidden=True):
        aliases = f" (aliases: {', '.join(command.aliases)})" if command.aliases else ""
        marker = " [hidden]" if command.hidden else ""
        print(f"  {command.usage:<16} - {command.description}{aliases}{marker}")
    print()


def print_config(cfg_mgr: ConfigManager) -> None:
    """Print the effective configuration."""
    print(f"Config file: {cfg_mgr.CONFIG_FILE}\n")
    for key in cfg_mgr.config.model_dump():
        print(f"  {key:<20} = {cfg_mgr.get(key)!r}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the chatcmd CLI."""
    cfg_mgr = get_config_manager()

    parser = argparse.ArgumentParser(
        description="Interactive chat shell with slash commands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Config file: {cfg_mgr.CONFIG_FILE}

Examples:
    chatcmd                               # Start the shell
    chatcmd --list-commands               # List registered commands
    chatcmd --commands-dir ./my_commands  # Load user commands from a directory
    chatcmd --set-config prompt='>> '     # Change the prompt
        """,
    )
    parser.add_argument("--commands-dir", type=Path, metavar="DIR",
                        help="Directory of user command modules")
    parser.add_argument("--no-user-commands", action="store_true",
                        help="Do not load user command modules")
    parser.add_argument("--list-commands", action="store_true",
                        help="List registered commands and exit")
    parser.add_argument("--log-file", metavar="PATH", default=cfg_mgr.get("log_file"),
                        help="Write logs to PATH instead of stderr")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    parser.add_argument("--config", action="store_true",
                        help="Show current configuration and exit")
    parser.add_argument("--set-config", metavar="KEY=VALUE",
                        help="Set a config value and exit")
    parser.add_argument("--unset-config", metavar="KEY",
                        help="Reset a config value to its default and exit")
    args = parser.parse_args(argv)

    if args.config:
        print_config(cfg_mgr)
        return 0

    if args.set_config:
        try:
            key, value = args.set_config.split("=", 1)
            key = key.strip()
            value = value.strip()
            if key in BOOL_KEYS:
                value = value.lower() in ("true", "1", "yes")
            cfg_mgr.set(key, value)
            print(f"Set {key} = {value}")
            print(f"Saved to {cfg_mgr.CONFIG_FILE}")
        except ValueError as e:
            print(f"Error: {e}")
            return 1
        return 0

    if args.unset_config:
        try:
            cfg_mgr.unset(args.unset_config)
            print(f"Unset {args.unset_config}")
            print(f"Saved to {cfg_mgr.CONFIG_FILE}")
        except ValueError as e:
            print(f"Error: {e}")
            return 1
        return 0

    level = "DEBUG" if args.verbose else cfg_mgr.get("log_level")
    configure_logging(args.log_file, level)

    try:
        executor = build_executor(
            cfg_mgr,
            commands_dir=args.commands_dir,
            load_user=not args.no_user_commands,
        )

        if args.list_commands:
            print_commands(executor)
            return 0

        asyncio.run(run_repl(
            executor,
            prompt=cfg_mgr.get("prompt"),
            history_file=Path(cfg_mgr.get("history_file")).expanduser(),
        ))
    finally:
        close_logging()
    return 0


if __name__ == "__main__":
    sys.exit(main())
