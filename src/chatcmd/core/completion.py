"""
Completion provider for interactive command-name completion.
"""

from __future__ import annotations

from chatcmd.core.datamodels import CommandCompletion
from chatcmd.core.registry import CommandRegistry


class CompletionProvider:
    """Prefix search over the visible commands of a registry."""

    def __init__(self, registry: CommandRegistry):
        self.registry = registry

    def get_completions(self, prefix: str = "") -> list[CommandCompletion]:
        return self.registry.get_completions(prefix)
