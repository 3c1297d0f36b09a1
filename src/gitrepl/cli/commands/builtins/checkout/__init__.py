"""Checkout command - switch branches."""
from __future__ import annotations

from typing import TYPE_CHECKING

from gitrepl.cli.commands.registry import command_registry
from gitrepl.core.exceptions import UsageError

if TYPE_CHECKING:
    from gitrepl.cli.context import ShellContext


@command_registry.register("checkout", "Switch branch", usage="checkout <branch>", group="Git", aliases=["co"])
def cmd_checkout(ctx: "ShellContext", args: list[str]):
    if not args:
        raise UsageError("checkout <branch>", "Branch name required")
    print(ctx.repo.checkout(args[0]))
