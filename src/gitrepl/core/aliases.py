"""
User-defined command aliases.

Aliases are persisted one per line as ``name=expansion``. The first ``=``
separates the two, so expansions may contain ``=`` themselves.
"""

from __future__ import annotations

import logging
from pathlib import Path

from gitrepl.core.exceptions import AliasError
from gitrepl.core.storage import LineStore

logger = logging.getLogger(__name__)


def parse_alias_line(line: str) -> tuple[str, str] | None:
    """Parse a ``name=expansion`` line.

    Returns:
        (name, expansion) with surrounding whitespace stripped, or None for
        lines without ``=`` or with an empty name.
    """
    if "=" not in line:
        return None
    name, expansion = line.split("=", 1)
    name = name.strip()
    if not name:
        return None
    return name, expansion.strip()


class AliasTable:
    """Mapping of alias name to replacement command string.

    Names are case-sensitive. Setting an existing name overwrites it.
    """

    def __init__(self, store: LineStore | None = None):
        self.store = store
        self._aliases: dict[str, str] = {}

    @classmethod
    def from_file(cls, path: Path | str) -> "AliasTable":
        """Create a table backed by path and load it."""
        table = cls(LineStore(path))
        table.load()
        return table

    def set(self, name: str, expansion: str) -> None:
        """Define or redefine an alias.

        Raises:
            AliasError: If name is empty or whitespace.
        """
        if not name or not name.strip():
            raise AliasError("Alias name must not be empty")
        self._aliases[name] = expansion

    def get(self, name: str) -> str | None:
        """Get an alias expansion, or None if name isn't an alias."""
        return self._aliases.get(name)

    def list(self) -> list[tuple[str, str]]:
        """All (name, expansion) pairs sorted by name."""
        return sorted(self._aliases.items())

    def names(self) -> list[str]:
        return sorted(self._aliases)

    def load(self) -> bool:
        """Replace the table with the aliases in the backing file.

        Malformed lines are skipped. On a read error the table is left
        empty and a warning is logged.

        Returns:
            True if the file was read (or is absent), False on a read error.
        """
        if self.store is None:
            return True
        self._aliases = {}
        try:
            lines = self.store.read_lines()
        except (OSError, UnicodeError) as e:
            logger.warning(f"Could not load aliases from {self.store.path}: {e}")
            return False

        for line in lines:
            parsed = parse_alias_line(line)
            if parsed is None:
                continue
            name, expansion = parsed
            self._aliases[name] = expansion
        logger.debug(f"Loaded {len(self._aliases)} aliases from {self.store.path}")
        return True

    def save(self) -> bool:
        """Rewrite the backing file with the current table.

        Returns:
            True on success, False if the write failed.
        """
        if self.store is None:
            return True
        lines = [f"{name}={expansion}" for name, expansion in self.list()]
        try:
            self.store.write_lines(lines)
        except OSError as e:
            logger.warning(f"Could not save aliases to {self.store.path}: {e}")
            return False
        return True

    def __contains__(self, name: object) -> bool:
        return name in self._aliases

    def __len__(self) -> int:
        return len(self._aliases)
