"""Ls command - list the working directory."""
from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from gitrepl.cli.commands.registry import command_registry

if TYPE_CHECKING:
    from gitrepl.cli.context import ShellContext


@command_registry.register("ls", "List files", group="System")
def cmd_ls(ctx: "ShellContext", args: list[str]):
    try:
        entries = ctx.system.list_dir()
    except OSError as e:
        print(f"Error listing files: {e}", file=sys.stderr)
        return
    for entry in entries:
        print(entry.display())
