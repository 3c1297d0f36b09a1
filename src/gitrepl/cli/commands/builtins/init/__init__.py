"""Init command - create a repository in the current directory."""
from __future__ import annotations

from typing import TYPE_CHECKING

from gitrepl.cli.commands.registry import command_registry

if TYPE_CHECKING:
    from gitrepl.cli.context import ShellContext


@command_registry.register("init", "Initialise git repository", group="Git")
def cmd_init(ctx: "ShellContext", args: list[str]):
    print(ctx.repo.init())
