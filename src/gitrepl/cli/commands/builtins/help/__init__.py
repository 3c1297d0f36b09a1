"""Help command - show available commands."""
from __future__ import annotations

from typing import TYPE_CHECKING

from gitrepl.cli.commands.registry import command_registry

if TYPE_CHECKING:
    from gitrepl.cli.context import ShellContext

GROUPS = ("Git", "System", "Tool")


@command_registry.register("help", "Show this help")
def cmd_help(ctx: "ShellContext", args: list[str]):
    """Show commands grouped by section."""
    entries = ctx.registry.all_commands()
    print("\n=== gitrepl Help ===")
    for group in GROUPS:
        section = [e for e in entries if e.group == group]
        if not section:
            continue
        print(f"\n{group} Commands:")
        for entry in section:
            names = ", ".join([entry.name, *entry.aliases])
            print(f"  {names:<14} {entry.usage:<26} - {entry.description}")
    others = [e for e in entries if e.group not in GROUPS]
    if others:
        print("\nOther Commands:")
        for entry in others:
            print(f"  {entry.name:<14} {entry.usage:<26} - {entry.description}")
    print()
