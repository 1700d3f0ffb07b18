#!/usr/bin/env python3
"""
Tests for the system commands and the user command loader.
"""

import pytest
from unittest.mock import MagicMock

from chatcmd.commands import (
    build_system_commands,
    discover_commands,
    load_all_commands,
    load_command,
)
from chatcmd.core import Command, CommandContext, CommandExecutor, CommandResult


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def executor():
    """Executor with the system commands registered."""
    ex = CommandExecutor()
    ex.register_all(build_system_commands(ex.registry))
    return ex


def write_module(root, name, source):
    cmd_dir = root / name
    cmd_dir.mkdir()
    (cmd_dir / "__init__.py").write_text(source)
    return cmd_dir / "__init__.py"


GREET_MODULE = '''
from chatcmd import Command, CommandResult

def cmd_greet(args, context):
    return CommandResult.ok("Hello, " + (" ".join(args) or "world") + "!")

COMMANDS = [Command("greet", cmd_greet, "Say hello", aliases=["hi"])]
'''

REGISTER_MODULE = '''
from chatcmd import CommandResult

def register(registry):
    @registry.command("ping", "Reply with pong")
    def cmd_ping(args, context):
        return CommandResult.ok("pong")
'''


# ============================================================================
# System Command Tests
# ============================================================================

class TestSystemCommands:
    """Tests for help, status, clear and quit."""

    def test_command_set(self, executor):
        names = [c.name for c in executor.list_commands()]
        assert names == ["help", "status", "clear", "quit"]

    def test_commands_listing_is_hidden(self, executor):
        assert executor.has_command("commands")
        assert "commands" not in [c.value for c in executor.get_completions("")]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["/quit", "/exit", "/q"])
    async def test_quit_and_aliases(self, executor, text):
        result = await executor.execute(text, CommandContext())
        assert result.success is True
        assert result.should_exit is True
        assert result.message == "Goodbye!"

    @pytest.mark.asyncio
    async def test_help_lists_visible_commands(self, executor):
        result = await executor.execute("/help", CommandContext())
        assert result.success is True
        assert "/quit" in result.message
        assert "aliases: exit, q" in result.message
        assert "/commands" not in result.message

    @pytest.mark.asyncio
    async def test_help_can_show_hidden(self):
        ex = CommandExecutor()
        ex.register_all(build_system_commands(ex.registry, show_hidden=True))
        result = await ex.execute("/help", CommandContext())
        assert "/commands" in result.message

    @pytest.mark.asyncio
    async def test_help_lists_later_registrations(self, executor):
        executor.register(Command("greet", lambda a, c: CommandResult.ok(), "Say hello"))
        result = await executor.execute("/?", CommandContext())
        assert "Say hello" in result.message

    @pytest.mark.asyncio
    async def test_help_for_one_command_by_alias(self, executor):
        result = await executor.execute("/help q", CommandContext())
        assert result.success is True
        assert result.command == "quit"
        assert result.message.startswith("/quit")

    @pytest.mark.asyncio
    async def test_help_for_unknown_command(self, executor):
        result = await executor.execute("/help nope", CommandContext())
        assert result.success is False
        assert result.message == "Unknown command: nope"

    @pytest.mark.asyncio
    async def test_hidden_listing_includes_everything(self, executor):
        result = await executor.execute("/commands", CommandContext())
        assert "/commands" in result.message
        assert "/status" in result.message

    @pytest.mark.asyncio
    async def test_status_requires_agent(self, executor):
        result = await executor.execute("/status", CommandContext())
        assert result.success is False
        assert result.message == "No agent available"

    @pytest.mark.asyncio
    async def test_status_reports_agent(self, executor):
        agent = MagicMock(spec=["provider_name", "thread_id"])
        agent.provider_name = "anthropic"
        agent.thread_id = "thread-1"
        result = await executor.execute("/status", CommandContext(agent=agent))
        assert result.success is True
        assert "Provider: anthropic" in result.message
        assert "Thread: thread-1" in result.message
        assert "Model:" not in result.message

    @pytest.mark.asyncio
    async def test_clear_calls_host(self, executor):
        clear_session = MagicMock()
        result = await executor.execute("/clear", CommandContext(clear_session=clear_session))
        assert result.success is True
        clear_session.assert_called_once_with()

    @pytest.mark.asyncio
    async def test_clear_without_host_support(self, executor):
        result = await executor.execute("/clear", CommandContext())
        assert result.success is False


# ============================================================================
# Loader Tests
# ============================================================================

class TestCommandDiscovery:
    """Tests for discover_commands."""

    def test_discover_nonexistent_dir(self, tmp_path):
        assert discover_commands(tmp_path / "nonexistent") == []

    def test_discover_file_instead_of_dir(self, tmp_path):
        path = tmp_path / "commands"
        path.write_text("")
        assert discover_commands(path) == []

    def test_discover_sorted_and_skips_private(self, tmp_path):
        for name in ["b_cmd", "a_cmd", "_private", ".hidden"]:
            write_module(tmp_path, name, "")
        (tmp_path / "no_init").mkdir()

        paths = discover_commands(tmp_path)
        assert [p.parent.name for p in paths] == ["a_cmd", "b_cmd"]


class TestCommandLoading:
    """Tests for load_command and load_all_commands."""

    def test_load_commands_list(self, tmp_path, executor):
        path = write_module(tmp_path, "greet", GREET_MODULE)
        name, success, error = load_command(path, executor.registry)
        assert (name, success, error) == ("greet", True, "")
        assert executor.has_command("hi")

    def test_load_register_function(self, tmp_path, executor):
        path = write_module(tmp_path, "ping", REGISTER_MODULE)
        _, success, _ = load_command(path, executor.registry)
        assert success
        assert executor.has_command("ping")

    def test_load_syntax_error(self, tmp_path, executor):
        path = write_module(tmp_path, "broken", "def broken(:\n")
        _, success, error = load_command(path, executor.registry)
        assert not success
        assert error.startswith("Syntax error")

    def test_load_import_error(self, tmp_path, executor):
        path = write_module(tmp_path, "missing", "import chatcmd_no_such_module\n")
        _, success, error = load_command(path, executor.registry)
        assert not success
        assert error.startswith("Import error")

    def test_load_module_without_commands(self, tmp_path, executor):
        path = write_module(tmp_path, "empty", "X = 1\n")
        _, success, error = load_command(path, executor.registry)
        assert not success
        assert "COMMANDS" in error

    def test_load_rejects_non_commands(self, tmp_path, executor):
        path = write_module(tmp_path, "bad", "COMMANDS = ['greet']\n")
        _, success, error = load_command(path, executor.registry)
        assert not success
        assert "non-Command" in error

    def test_load_all_counts_successes(self, tmp_path, executor):
        write_module(tmp_path, "greet", GREET_MODULE)
        write_module(tmp_path, "ping", REGISTER_MODULE)
        write_module(tmp_path, "zbroken", "raise RuntimeError('nope')\n")

        assert load_all_commands(executor.registry, tmp_path) == 2
        assert executor.has_command("greet")
        assert executor.has_command("ping")

    @pytest.mark.asyncio
    async def test_loaded_command_executes(self, tmp_path, executor):
        write_module(tmp_path, "greet", GREET_MODULE)
        load_all_commands(executor.registry, tmp_path)

        result = await executor.execute("/hi there", CommandContext())
        assert result.message == "Hello, there!"

    def test_user_command_can_override_builtin(self, tmp_path, executor):
        write_module(tmp_path, "myquit", '''
from chatcmd import Command, CommandResult
COMMANDS = [Command("q", lambda a, c: CommandResult.ok("queued"), "Queue")]
''')
        load_all_commands(executor.registry, tmp_path)
        assert executor.registry.get("q").description == "Queue"
        assert executor.registry.get("exit").name == "quit"
