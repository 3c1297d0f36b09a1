"""Diff command - list changed files."""
from __future__ import annotations

from typing import TYPE_CHECKING

from gitrepl.cli.commands.registry import command_registry

if TYPE_CHECKING:
    from gitrepl.cli.context import ShellContext


@command_registry.register("diff", "Show differences", group="Git")
def cmd_diff(ctx: "ShellContext", args: list[str]):
    print(ctx.repo.diff())
