"""
gitrepl - Interactive shell for git workflows.

Wraps git operations, directory navigation and process execution behind
one REPL with persistent history, fuzzy history search and aliases.

Example usage:
    from gitrepl import AliasTable, HistoryStore, resolve, search

    aliases = AliasTable()
    aliases.set("st", "status --short")
    resolve("st", aliases)           # verb="status", args=["--short"]

    search("stat", ["git status", "git commit", "status check"])
    # ["status check", "git status"]
"""

__version__ = "0.1.0"

from gitrepl.core import (
    AliasError,
    AliasTable,
    HistoryStore,
    LineStore,
    NotARepositoryError,
    RepositoryError,
    ResolvedCommand,
    ShellError,
    UsageError,
    fuzzy_match,
    fuzzy_score,
    resolve,
    search,
)


# Lazy import for the CLI (pulls in prompt_toolkit)
def __getattr__(name):
    if name == "ShellContext":
        from gitrepl.cli import ShellContext
        return ShellContext
    if name == "repl":
        from gitrepl.cli import repl
        return repl
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",
    # Core
    "AliasTable",
    "HistoryStore",
    "LineStore",
    "ResolvedCommand",
    "resolve",
    "search",
    "fuzzy_match",
    "fuzzy_score",
    # Exceptions
    "ShellError",
    "RepositoryError",
    "NotARepositoryError",
    "UsageError",
    "AliasError",
    # CLI (lazy loaded)
    "ShellContext",
    "repl",
]
