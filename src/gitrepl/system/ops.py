"""
Operating-system collaborator: working directory, listings, processes.

The shell keeps its own working directory instead of changing the
process-wide one. Spawned commands and repository operations run there.
"""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Sequence

from pydantic import BaseModel


class DirEntry(BaseModel):
    """A single directory listing entry."""

    name: str
    is_dir: bool

    def display(self) -> str:
        return f"{'[DIR] ' if self.is_dir else '[FILE]'} {self.name}"


class SystemOps:
    """Process spawning and filesystem navigation relative to a cwd."""

    def __init__(self, cwd: Path | str | None = None):
        self._cwd = Path(cwd).resolve() if cwd is not None else Path.cwd()

    @property
    def cwd(self) -> Path:
        return self._cwd

    def resolve_path(self, path: str) -> Path:
        """Resolve path against the shell's cwd, expanding ~ and normalizing."""
        p = Path(path).expanduser()
        if not p.is_absolute():
            p = self._cwd / p
        return Path(os.path.normpath(p))

    def change_dir(self, path: str | None = None) -> Path:
        """Change the shell's working directory.

        Args:
            path: Target directory; the user's home when None.

        Returns:
            The new working directory.

        Raises:
            FileNotFoundError: If path doesn't exist.
            NotADirectoryError: If path isn't a directory.
        """
        target = self.resolve_path(path) if path else Path.home()
        if not target.exists():
            raise FileNotFoundError(f"Directory not found: {path}")
        if not target.is_dir():
            raise NotADirectoryError(f"Not a directory: {path}")
        self._cwd = target
        return target

    def list_dir(self, path: str | None = None) -> list[DirEntry]:
        """List a directory (the cwd by default), sorted by name."""
        target = self.resolve_path(path) if path else self._cwd
        return [
            DirEntry(name=child.name, is_dir=child.is_dir())
            for child in sorted(target.iterdir(), key=lambda p: p.name)
        ]

    def run(self, args: Sequence[str]) -> int:
        """Run a command in the cwd with inherited stdin/stdout/stderr.

        Blocks until the command exits.

        Returns:
            The command's exit code.

        Raises:
            ValueError: If args is empty.
            OSError: If the command can't be started (e.g. not found).
        """
        if not args:
            raise ValueError("No command given")
        result = subprocess.run(list(args), cwd=self._cwd)
        return result.returncode
