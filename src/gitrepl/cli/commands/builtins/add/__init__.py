"""Add command - stage files."""
from __future__ import annotations

from typing import TYPE_CHECKING

from gitrepl.cli.commands.registry import command_registry

if TYPE_CHECKING:
    from gitrepl.cli.context import ShellContext


@command_registry.register("add", "Add files to staging (all when none given)", usage="add [files...]", group="Git")
def cmd_add(ctx: "ShellContext", args: list[str]):
    print(ctx.repo.stage(args))
