"""Status command - show working tree status."""
from __future__ import annotations

from typing import TYPE_CHECKING

from gitrepl.cli.commands.registry import command_registry

if TYPE_CHECKING:
    from gitrepl.cli.context import ShellContext


@command_registry.register("status", "Show git status", group="Git", aliases=["st"])
def cmd_status(ctx: "ShellContext", args: list[str]):
    print(ctx.repo.status())
