"""
Bounded command history.
"""

from __future__ import annotations

import logging
from pathlib import Path

from gitrepl.core.storage import LineStore

logger = logging.getLogger(__name__)

MAX_HISTORY = 1000


class HistoryStore:
    """Ordered log of input lines, oldest first, capped at max_size.

    The cap is enforced on every append. Loading replaces the in-memory
    log with the file contents as-is, even when the file holds more than
    max_size entries; the next append trims it back down.
    """

    def __init__(self, store: LineStore | None = None, max_size: int = MAX_HISTORY):
        if max_size < 1:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self.store = store
        self.max_size = max_size
        self._entries: list[str] = []

    @classmethod
    def from_file(cls, path: Path | str, max_size: int = MAX_HISTORY) -> "HistoryStore":
        """Create a store backed by path and load it."""
        history = cls(LineStore(path), max_size=max_size)
        history.load()
        return history

    def append(self, line: str) -> None:
        self._entries.append(line)
        overflow = len(self._entries) - self.max_size
        if overflow > 0:
            del self._entries[:overflow]

    def snapshot(self) -> list[str]:
        """Return a copy of all entries, oldest first."""
        return list(self._entries)

    def load(self) -> bool:
        """Replace the in-memory history with the backing file's lines.

        Returns:
            True if the file was read (or is absent), False on a read error.
        """
        if self.store is None:
            return True
        try:
            self._entries = self.store.read_lines()
        except (OSError, UnicodeError) as e:
            logger.warning(f"Could not load command history from {self.store.path}: {e}")
            return False
        logger.debug(f"Loaded {len(self._entries)} history entries from {self.store.path}")
        return True

    def save(self) -> bool:
        """Write every entry to the backing file, one per line.

        Returns:
            True on success, False if the write failed.
        """
        if self.store is None:
            return True
        try:
            self.store.write_lines(self._entries)
        except OSError as e:
            logger.warning(f"Could not save command history to {self.store.path}: {e}")
            return False
        return True

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self.snapshot())
