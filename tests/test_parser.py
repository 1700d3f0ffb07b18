#!/usr/bin/env python3
"""
Tests for command line classification and parsing.
"""

import pytest

from chatcmd.core import COMMAND_PREFIX, ParsedCommand, is_command, parse_command


class TestIsCommand:
    """Tests for is_command."""

    def test_slash_command(self):
        assert is_command("/x") is True

    def test_plain_text(self):
        assert is_command("plain text") is False

    def test_empty(self):
        assert is_command("") is False

    def test_whitespace_only(self):
        assert is_command("   ") is False

    def test_leading_whitespace_is_ignored(self):
        assert is_command("   /help") is True

    def test_slash_inside_text(self):
        assert is_command("what is 1/2") is False

    def test_bare_prefix(self):
        assert is_command(COMMAND_PREFIX) is True


class TestParseCommand:
    """Tests for parse_command."""

    def test_command_with_args(self):
        assert parse_command("/foo a b") == ParsedCommand("foo", ["a", "b"])

    def test_command_without_args(self):
        parsed = parse_command("/foo")
        assert parsed.identifier == "foo"
        assert parsed.args == []

    def test_bare_prefix(self):
        assert parse_command("/") == ParsedCommand("", [])

    def test_prefix_followed_by_whitespace(self):
        assert parse_command("/   ") == ParsedCommand("", [])

    def test_extra_whitespace_collapses(self):
        assert parse_command("/args   extra   spaces   ") == ParsedCommand("args", ["extra", "spaces"])

    def test_tabs_are_whitespace(self):
        assert parse_command("/foo\ta\t\tb") == ParsedCommand("foo", ["a", "b"])

    def test_identifier_keeps_case(self):
        assert parse_command("/Help").identifier == "Help"

    def test_quotes_are_not_interpreted(self):
        parsed = parse_command('/test "arg with spaces"')
        assert parsed.args == ['"arg', 'with', 'spaces"']

    def test_only_first_prefix_is_stripped(self):
        assert parse_command("//foo").identifier == "/foo"

    @pytest.mark.parametrize("text,identifier", [
        ("foo bar", "foo"),
        ("  /pop 3  ", "pop"),
    ])
    def test_unprefixed_and_padded_input(self, text, identifier):
        assert parse_command(text).identifier == identifier
