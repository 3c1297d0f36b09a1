"""Commit command - commit staged changes."""
from __future__ import annotations

from typing import TYPE_CHECKING

from gitrepl.cli.commands.registry import command_registry
from gitrepl.core.exceptions import UsageError

if TYPE_CHECKING:
    from gitrepl.cli.context import ShellContext

USAGE = "commit [-m] <message>"


def commit_message(args: list[str]) -> str:
    """Build the commit message from arguments.

    A leading ``-m`` is dropped and one pair of matching surrounding quotes
    is removed, so aliases like ``ci=commit -m "wip"`` work as expected.
    """
    if args and args[0] == "-m":
        args = args[1:]
    message = " ".join(args).strip()
    if len(message) >= 2 and message[0] == message[-1] and message[0] in "\"'":
        message = message[1:-1].strip()
    return message


@command_registry.register("commit", "Commit changes", usage=USAGE, group="Git", aliases=["ci"])
def cmd_commit(ctx: "ShellContext", args: list[str]):
    message = commit_message(args)
    if not message:
        raise UsageError(USAGE, "Commit message required")
    print(ctx.repo.commit(message))
