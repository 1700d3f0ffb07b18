"""
Command loader - discovers and loads user command modules.

Each command module lives in its own subdirectory of the commands
directory (default ~/.chatcmd/commands/) with an __init__.py file. A
module contributes commands by defining COMMANDS, a list of Command
objects, and/or a register(registry) function:

    # ~/.chatcmd/commands/greet/__init__.py
    from chatcmd import Command, CommandResult

    def cmd_greet(args, context):
        return CommandResult.ok(f"Hello, {' '.join(args) or 'world'}!")

    COMMANDS = [Command("greet", cmd_greet, "Say hello", aliases=["hi"])]
"""

from __future__ import annotations

import logging
import sys
from importlib.util import module_from_spec, spec_from_file_location
from pathlib import Path

from chatcmd.core.datamodels import Command
from chatcmd.core.registry import CommandRegistry

logger = logging.getLogger(__name__)

# Default user commands directory
USER_COMMANDS_DIR = Path.home() / ".chatcmd" / "commands"


def discover_commands(commands_dir: Path) -> list[Path]:
    """
    Discover command directories in the given path.

    Each command must be in its own subdirectory with an __init__.py file.

    Args:
        commands_dir: Directory to search

    Returns:
        List of __init__.py paths for valid commands.
    """
    if not commands_dir.exists():
        return []

    if not commands_dir.is_dir():
        logger.warning(f"Commands path is not a directory: {commands_dir}")
        return []

    cmd_paths = []
    for subdir in sorted(commands_dir.iterdir()):
        if not subdir.is_dir():
            continue
        # Skip hidden and private directories
        if subdir.name.startswith((".", "_")):
            continue
        init_file = subdir / "__init__.py"
        if init_file.exists():
            cmd_paths.append(init_file)
        else:
            logger.debug(f"Skipping {subdir.name}: no __init__.py")

    return cmd_paths


def load_command(
    cmd_path: Path,
    registry: CommandRegistry,
    prefix: str = "chatcmd_user",
) -> tuple[str, bool, str]:
    """
    Load a single command module and register what it provides.

    Args:
        cmd_path: Path to the command's __init__.py file.
        registry: Registry to add the module's commands to.
        prefix: Module name prefix for sys.modules

    Returns:
        Tuple of (cmd_name, success, error_message)
    """
    cmd_name = cmd_path.parent.name
    module_name = f"{prefix}.{cmd_name}"

    try:
        spec = spec_from_file_location(module_name, cmd_path)
        if spec is None or spec.loader is None:
            return (cmd_name, False, "Could not create module spec")

        module = module_from_spec(spec)
        sys.modules[module_name] = module
        spec.loader.exec_module(module)

        commands = getattr(module, "COMMANDS", None)
        register = getattr(module, "register", None)
        if commands is None and not callable(register):
            return (cmd_name, False, "Module defines neither COMMANDS nor register()")

        if commands is not None:
            bad = [c for c in commands if not isinstance(c, Command)]
            if bad:
                return (cmd_name, False, f"COMMANDS holds non-Command {type(bad[0]).__name__}")
            registry.register_all(commands)
        if callable(register):
            register(registry)

        return (cmd_name, True, "")

    except SyntaxError as e:
        return (cmd_name, False, f"Syntax error: {e}")
    except ImportError as e:
        return (cmd_name, False, f"Import error: {e}")
    except Exception as e:
        return (cmd_name, False, f"Error: {e}")


def load_all_commands(
    registry: CommandRegistry,
    commands_dir: Path | None = None,
    verbose: bool = False,
) -> int:
    """
    Load all command modules from the commands directory.

    Args:
        registry: Registry to add commands to
        commands_dir: Directory to scan (default: ~/.chatcmd/commands)
        verbose: Log info messages for successful loads

    Returns:
        Number of successfully loaded modules.
    """
    commands_dir = commands_dir or USER_COMMANDS_DIR
    total_loaded = 0

    for cmd_path in discover_commands(commands_dir):
        cmd_name, success, error = load_command(cmd_path, registry)

        if success:
            total_loaded += 1
            if verbose:
                logger.info(f"Loaded command module: {cmd_name}")
        else:
            logger.warning(f"Failed to load command module '{cmd_name}': {error}")

    return total_loaded
