"""
Command resolution: raw input line -> verb and arguments.

The first token, lower-cased, is looked up in the alias table. A hit
rewrites the line to ``<expansion> <args...>`` and re-tokenizes it. Expansion is applied once;
an alias whose expansion starts with another alias name is not expanded
further.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from gitrepl.core.aliases import AliasTable


class ResolvedCommand(BaseModel):
    """A tokenized, alias-expanded command ready for dispatch."""

    verb: str
    args: list[str] = Field(default_factory=list)
    alias: Optional[str] = None  # alias name that was expanded, if any

    @property
    def line(self) -> str:
        """The resolved command as a single line."""
        return " ".join([self.verb, *self.args])


def tokenize(line: str) -> list[str]:
    """Split on runs of whitespace."""
    return line.split()


def resolve(raw_input: str, aliases: AliasTable | None = None) -> ResolvedCommand:
    """Resolve a raw input line.

    Args:
        raw_input: The line as typed. Must contain at least one token.
        aliases: Alias table to expand the first token against.

    Returns:
        ResolvedCommand with the verb lower-cased and arguments in their
        original case.

    Raises:
        ValueError: If the input is empty or whitespace only.
    """
    tokens = tokenize(raw_input)
    if not tokens:
        raise ValueError("Cannot resolve an empty command line")

    # Aliases are looked up by the lower-cased verb
    alias_name = None
    key = tokens[0].lower()
    expansion = aliases.get(key) if aliases is not None else None
    if expansion is not None:
        alias_name = key
        tokens = tokenize(f"{expansion} {' '.join(tokens[1:])}")
        if not tokens:
            raise ValueError(f"Alias '{alias_name}' expands to an empty command")

    return ResolvedCommand(verb=tokens[0].lower(), args=tokens[1:], alias=alias_name)
