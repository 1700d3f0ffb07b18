"""
prompt_toolkit completer backed by the command completion provider.
"""

from __future__ import annotations

from prompt_toolkit.completion import Completer, Completion

from chatcmd.core.completion import CompletionProvider
from chatcmd.core.parser import COMMAND_PREFIX


class CommandCompleter(Completer):
    """Completer for /command names (first token only)."""

    def __init__(self, provider: CompletionProvider):
        self.provider = provider

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor

        # Arguments are left to the commands themselves
        if not text.startswith(COMMAND_PREFIX) or any(ch.isspace() for ch in text):
            return

        for entry in self.provider.get_completions(text[len(COMMAND_PREFIX):]):
            yield Completion(
                f"{COMMAND_PREFIX}{entry.value}",
                start_position=-len(text),
                display_meta=entry.description,
            )
