"""Quit command - exit the shell."""
from __future__ import annotations

from typing import TYPE_CHECKING

from gitrepl.cli.commands.registry import command_registry

if TYPE_CHECKING:
    from gitrepl.cli.context import ShellContext


@command_registry.register("exit", "Exit the shell", aliases=["quit"])
def cmd_exit(ctx: "ShellContext", args: list[str]) -> bool:
    """Signal the REPL to stop; it persists history and aliases on the way out."""
    return True
