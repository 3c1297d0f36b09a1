"""
Repository capability used by the shell's version-control commands.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from pydantic import BaseModel, Field


# Porcelain status letters
CHANGE_LABELS = {
    "A": "Added",
    "M": "Modified",
    "D": "Deleted",
    "R": "Renamed",
    "C": "Copied",
    "T": "Type changed",
    "U": "Unmerged",
}


class FileChange(BaseModel):
    """A path with its one-letter porcelain status code."""

    code: str
    path: str

    @property
    def label(self) -> str:
        return CHANGE_LABELS.get(self.code, "Changed")


class RepoStatus(BaseModel):
    """Working tree status.

    ``staged`` holds index changes and ``modified`` holds unstaged work tree
    changes, each with the status letter git reported for that side.
    """

    branch: Optional[str] = None
    staged: list[FileChange] = Field(default_factory=list)
    modified: list[FileChange] = Field(default_factory=list)
    untracked: list[str] = Field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return not (self.staged or self.modified or self.untracked)


class LogEntry(BaseModel):
    """One commit in the log."""

    sha: str
    author: str
    date: str
    subject: str


class Repository(Protocol):
    """Protocol for repository operations.

    Every operation returns human-readable text describing the outcome.
    Failures raise RepositoryError with the reason; NotARepositoryError
    when the working directory isn't inside a repository.
    """

    def current_branch(self) -> str | None: ...

    def init(self) -> str: ...

    def status(self) -> str: ...

    def stage(self, paths: Sequence[str]) -> str: ...

    def commit(self, message: str) -> str: ...

    def push(self) -> str: ...

    def pull(self) -> str: ...

    def list_branches(self) -> str: ...

    def create_branch(self, name: str) -> str: ...

    def delete_branch(self, name: str) -> str: ...

    def checkout(self, name: str) -> str: ...

    def log(self, count: int = 10) -> str: ...

    def diff(self) -> str: ...


def format_status(status: RepoStatus) -> str:
    """Render a RepoStatus the way the status command prints it."""
    lines = ["=== Git Status ===", f"Branch: {status.branch or '(unknown)'}"]
    if status.staged:
        lines.append("\nStaged files:")
        lines.extend(f"  {change.code} {change.path}" for change in status.staged)
    if status.modified:
        lines.append("\nModified files:")
        lines.extend(f"  {change.code} {change.path}" for change in status.modified)
    if status.untracked:
        lines.append("\nUntracked files:")
        lines.extend(f"  ? {path}" for path in status.untracked)
    if status.is_clean:
        lines.append("Working directory clean")
    return "\n".join(lines)


def format_log(entries: list[LogEntry]) -> str:
    lines = ["=== Commit Log ==="]
    for entry in entries:
        lines.append(f"Commit: {entry.sha}")
        lines.append(f"Author: {entry.author}")
        lines.append(f"Date: {entry.date}")
        lines.append(f"Message: {entry.subject}")
        lines.append("")
    return "\n".join(lines).rstrip("\n")
