"""History command - show recent input lines."""
from __future__ import annotations

from typing import TYPE_CHECKING

from gitrepl.cli.commands.registry import command_registry

if TYPE_CHECKING:
    from gitrepl.cli.context import ShellContext


@command_registry.register("history", "Show command history", group="Tool", aliases=["hist"])
def cmd_history(ctx: "ShellContext", args: list[str]):
    """Show the most recent entries, numbered by position in the full history."""
    entries = ctx.history.snapshot()
    if not entries:
        print("No command history available")
        return

    limit = ctx.config.get("history_display")
    start = max(0, len(entries) - limit)
    print("Command History:")
    for i in range(start, len(entries)):
        print(f"{i + 1}. {entries[i]}")
