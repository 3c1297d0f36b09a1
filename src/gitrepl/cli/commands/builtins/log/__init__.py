"""Log command - show recent commits."""
from __future__ import annotations

from typing import TYPE_CHECKING

from gitrepl.cli.commands.registry import command_registry
from gitrepl.core.exceptions import UsageError

if TYPE_CHECKING:
    from gitrepl.cli.context import ShellContext

DEFAULT_COUNT = 10


@command_registry.register("log", "Show commit log", usage="log [n]", group="Git")
def cmd_log(ctx: "ShellContext", args: list[str]):
    count = DEFAULT_COUNT
    if args:
        try:
            count = int(args[0])
        except ValueError:
            raise UsageError("log [n]", f"Not a number: {args[0]}") from None
        if count < 1:
            raise UsageError("log [n]", "Count must be positive")
    print(ctx.repo.log(count))
