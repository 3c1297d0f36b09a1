"""
Core module for the gitrepl package.

Provides history, aliases, command resolution and fuzzy history search.
"""

from gitrepl.core.aliases import AliasTable, parse_alias_line
from gitrepl.core.exceptions import (
    AliasError,
    CommandLoadError,
    NotARepositoryError,
    RepositoryError,
    ShellError,
    UsageError,
)
from gitrepl.core.fuzzy import fuzzy_match, fuzzy_score, search
from gitrepl.core.history import MAX_HISTORY, HistoryStore
from gitrepl.core.resolver import ResolvedCommand, resolve, tokenize
from gitrepl.core.storage import LineStore

__all__ = [
    # Stores
    "AliasTable",
    "HistoryStore",
    "LineStore",
    "MAX_HISTORY",
    "parse_alias_line",
    # Resolution
    "ResolvedCommand",
    "resolve",
    "tokenize",
    # Fuzzy search
    "fuzzy_match",
    "fuzzy_score",
    "search",
    # Exceptions
    "ShellError",
    "RepositoryError",
    "NotARepositoryError",
    "UsageError",
    "AliasError",
    "CommandLoadError",
]
