"""
Line-oriented file storage for history and alias persistence.
"""

from __future__ import annotations

from pathlib import Path


class LineStore:
    """A UTF-8 text file read and written as a list of lines.

    Errors (OSError, UnicodeError) propagate to the caller, which decides
    whether they are fatal.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def exists(self) -> bool:
        return self.path.is_file()

    def read_lines(self) -> list[str]:
        """Read all lines without their line terminators.

        Returns:
            Lines in file order, or an empty list if the file doesn't exist.
        """
        if not self.path.exists():
            return []
        # Universal newlines turn \r\n and \r into \n; nothing else ends a line
        content = self.path.read_text(encoding="utf-8")
        if not content:
            return []
        lines = content.split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines

    def write_lines(self, lines: list[str]) -> Path:
        """Rewrite the file with the given lines, one per line."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        content = "\n".join(lines) + "\n" if lines else ""
        self.path.write_text(content, encoding="utf-8")
        return self.path

    def __repr__(self) -> str:
        return f"LineStore({str(self.path)!r})"
