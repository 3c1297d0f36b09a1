"""Cd command - change the shell's working directory."""
from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from gitrepl.cli.commands.registry import command_registry

if TYPE_CHECKING:
    from gitrepl.cli.context import ShellContext


@command_registry.register("cd", "Change directory (home when omitted)", usage="cd [path]", group="System")
def cmd_cd(ctx: "ShellContext", args: list[str]):
    try:
        path = ctx.system.change_dir(args[0] if args else None)
    except OSError as e:
        print(e, file=sys.stderr)
        return
    print(f"Changed directory to: {path}")
