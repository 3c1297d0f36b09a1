"""Pwd command - print the shell's working directory."""
from __future__ import annotations

from typing import TYPE_CHECKING

from gitrepl.cli.commands.registry import command_registry

if TYPE_CHECKING:
    from gitrepl.cli.context import ShellContext


@command_registry.register("pwd", "Show current directory", group="System")
def cmd_pwd(ctx: "ShellContext", args: list[str]):
    print(ctx.system.cwd)
