"""Clear command - clear the terminal."""
from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from prompt_toolkit.shortcuts import clear

from gitrepl.cli.commands.registry import command_registry

if TYPE_CHECKING:
    from gitrepl.cli.context import ShellContext


@command_registry.register("clear", "Clear screen", group="System")
def cmd_clear(ctx: "ShellContext", args: list[str]):
    if sys.stdout.isatty():
        clear()
    else:
        print("\033[H\033[2J", end="", flush=True)
