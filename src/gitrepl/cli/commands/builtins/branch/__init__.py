"""Branch command - list, create and delete branches."""
from __future__ import annotations

from typing import TYPE_CHECKING

from gitrepl.cli.commands.registry import command_registry
from gitrepl.core.exceptions import UsageError

if TYPE_CHECKING:
    from gitrepl.cli.context import ShellContext

CREATE = ("create", "-c")
DELETE = ("delete", "-d")


@command_registry.register(
    "branch",
    "List branches, or create/delete one",
    usage="branch [create|delete <name>]",
    group="Git",
    aliases=["br"],
)
def cmd_branch(ctx: "ShellContext", args: list[str]):
    """Unknown sub-commands fall back to listing branches."""
    sub = args[0] if args else None
    if sub in CREATE:
        if len(args) < 2:
            raise UsageError("branch create <branch-name>")
        print(ctx.repo.create_branch(args[1]))
    elif sub in DELETE:
        if len(args) < 2:
            raise UsageError("branch delete <branch-name>")
        print(ctx.repo.delete_branch(args[1]))
    else:
        print(ctx.repo.list_branches())
