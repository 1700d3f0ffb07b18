"""
Ready-made commands for the chat shell.

Provides the system command set (help, status, clear, quit) and the
loader for user command modules from ~/.chatcmd/commands/.
"""

from __future__ import annotations

from chatcmd.commands.loader import discover_commands, load_all_commands, load_command
from chatcmd.commands.system import build_system_commands

__all__ = ["build_system_commands", "discover_commands", "load_all_commands", "load_command"]
