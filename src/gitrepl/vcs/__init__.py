"""Version-control collaborator for gitrepl."""

from gitrepl.vcs.base import FileChange, LogEntry, RepoStatus, Repository, format_log, format_status
from gitrepl.vcs.git import GitRepository, parse_porcelain

__all__ = [
    "Repository",
    "RepoStatus",
    "FileChange",
    "LogEntry",
    "GitRepository",
    "format_status",
    "format_log",
    "parse_porcelain",
]
