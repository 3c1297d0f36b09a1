"""
Command system for the gitrepl shell.

Every verb the shell understands is a registered command. Commands are
loaded from:
1. Package builtins
2. ~/.gitrepl/commands/ (user-hackable, overrides builtins)
"""

from __future__ import annotations

from gitrepl.cli.commands.registry import CommandEntry, CommandRegistry, command_registry
from gitrepl.cli.commands.loader import load_all_commands, load_builtin_commands

__all__ = [
    "CommandEntry",
    "CommandRegistry",
    "command_registry",
    "load_all_commands",
    "load_builtin_commands",
]
