"""Alias command - list, show and define aliases."""
from __future__ import annotations

from typing import TYPE_CHECKING

from gitrepl.cli.commands.registry import command_registry

if TYPE_CHECKING:
    from gitrepl.cli.context import ShellContext


@command_registry.register("alias", "List, show or create aliases", usage="alias [name [command...]]", group="Tool")
def cmd_alias(ctx: "ShellContext", args: list[str]):
    """Manage aliases.

    Usage:
        alias                 - List all aliases
        alias <name>          - Show one alias
        alias <name> <cmd...> - Create or replace an alias
    """
    if not args:
        aliases = ctx.aliases.list()
        if not aliases:
            print("No aliases defined")
            return
        print("Defined aliases:")
        for name, expansion in aliases:
            print(f"  {name} -> {expansion}")
    elif len(args) == 1:
        expansion = ctx.aliases.get(args[0])
        if expansion is None:
            print(f"Alias not found: {args[0]}")
        else:
            print(f"{args[0]} -> {expansion}")
    else:
        name, expansion = args[0], " ".join(args[1:])
        ctx.aliases.set(name, expansion)
        print(f"Alias created: {name} -> {expansion}")
