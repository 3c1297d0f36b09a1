"""Search command - fuzzy search over command history."""
from __future__ import annotations

from typing import TYPE_CHECKING

from gitrepl.cli.commands.registry import command_registry
from gitrepl.core.exceptions import UsageError
from gitrepl.core.fuzzy import search

if TYPE_CHECKING:
    from gitrepl.cli.context import ShellContext


@command_registry.register("search", "Fuzzy search history", usage="search <query>", group="Tool")
def cmd_search(ctx: "ShellContext", args: list[str]):
    """Print the best matches, up to the configured search_limit."""
    if not args:
        raise UsageError("search <query>")

    query = " ".join(args)
    candidates = ctx.history.snapshot()
    # Leave out the search line that was just recorded
    if candidates and candidates[-1] == ctx.current_line:
        candidates = candidates[:-1]

    results = search(query, candidates)
    if not results:
        print("No matching commands found")
        return

    print("Search results:")
    for i, entry in enumerate(results[: ctx.config.get("search_limit")], 1):
        print(f"{i}. {entry}")
