"""Exec command - run an external program in the shell's directory."""
from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from gitrepl.cli.commands.registry import command_registry
from gitrepl.core.exceptions import UsageError

if TYPE_CHECKING:
    from gitrepl.cli.context import ShellContext


@command_registry.register("exec", "Execute system command", usage="exec <command> [args...]", group="System")
def cmd_exec(ctx: "ShellContext", args: list[str]):
    """Run a program with the terminal attached and wait for it."""
    if not args:
        raise UsageError("exec <command>")
    try:
        code = ctx.system.run(args)
    except OSError as e:
        print(f"Error executing command: {e}", file=sys.stderr)
        return
    if code != 0:
        print(f"Command exited with code: {code}", file=sys.stderr)
