"""Pull command."""
from __future__ import annotations

from typing import TYPE_CHECKING

from gitrepl.cli.commands.registry import command_registry

if TYPE_CHECKING:
    from gitrepl.cli.context import ShellContext


@command_registry.register("pull", "Pull from remote", group="Git")
def cmd_pull(ctx: "ShellContext", args: list[str]):
    print(ctx.repo.pull())
