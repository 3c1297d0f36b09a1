"""
Repository operations backed by the git command-line client.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Sequence

from gitrepl.core.exceptions import NotARepositoryError, RepositoryError
from gitrepl.system import SystemOps
from gitrepl.vcs.base import FileChange, LogEntry, RepoStatus, format_log, format_status

logger = logging.getLogger(__name__)

# Field separator for --format output
_SEP = "\x1f"


def parse_porcelain(output: str) -> RepoStatus:
    """Parse ``git status --porcelain`` (v1) output."""
    status = RepoStatus()
    for line in output.splitlines():
        if len(line) < 4:
            continue
        index, worktree, path = line[0], line[1], line[3:]
        if " -> " in path:
            path = path.split(" -> ", 1)[1]
        if index == "?" and worktree == "?":
            status.untracked.append(path)
            continue
        if index not in (" ", "?", "!"):
            status.staged.append(FileChange(code=index, path=path))
        if worktree not in (" ", "?", "!"):
            status.modified.append(FileChange(code=worktree, path=path))
    return status


class GitRepository:
    """Repository capability that runs git in the shell's working directory.

    Args:
        system: Supplies the working directory git runs in.
        executable: git binary name or path.
    """

    def __init__(self, system: SystemOps, executable: str = "git"):
        self.system = system
        self.executable = executable

    def _run(self, *args: str, check: bool = True) -> subprocess.CompletedProcess:
        cmd = [self.executable, *args]
        logger.debug(f"Running {' '.join(cmd)} in {self.system.cwd}")
        try:
            result = subprocess.run(
                cmd,
                cwd=self.system.cwd,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            raise RepositoryError(f"git executable not found: {self.executable}") from e
        except OSError as e:
            raise RepositoryError(f"Could not run git: {e}") from e
        if check and result.returncode != 0:
            reason = (result.stderr or result.stdout).strip()
            raise RepositoryError(reason or f"git {args[0]} failed with code {result.returncode}")
        return result

    def is_repository(self) -> bool:
        try:
            result = self._run("rev-parse", "--is-inside-work-tree", check=False)
        except RepositoryError:
            return False
        return result.returncode == 0 and result.stdout.strip() == "true"

    def _require_repo(self) -> None:
        if not self.is_repository():
            raise NotARepositoryError()

    def current_branch(self) -> str | None:
        """Current branch name, "HEAD" when detached, None outside a repository."""
        if not self.is_repository():
            return None
        try:
            branch = self._run("branch", "--show-current").stdout.strip()
        except RepositoryError:
            return None
        return branch or "HEAD"

    def init(self) -> str:
        result = self._run("init")
        return result.stdout.strip() or "Initialized empty Git repository"

    def get_status(self) -> RepoStatus:
        self._require_repo()
        status = parse_porcelain(self._run("status", "--porcelain").stdout)
        status.branch = self.current_branch()
        return status

    def status(self) -> str:
        return format_status(self.get_status())

    def stage(self, paths: Sequence[str]) -> str:
        self._require_repo()
        if not paths or list(paths) == ["."]:
            self._run("add", ".")
            return "Added all files"
        lines = []
        for path in paths:
            self._run("add", "--", path)
            lines.append(f"Added: {path}")
        return "\n".join(lines)

    def commit(self, message: str) -> str:
        self._require_repo()
        if not message.strip():
            raise RepositoryError("Commit message required")
        self._run("commit", "-m", message)
        sha, subject = self._run("log", "-1", f"--format=%h{_SEP}%s").stdout.strip().split(_SEP, 1)
        return f"Committed: {subject}\nSHA: {sha}"

    def push(self) -> str:
        self._require_repo()
        self._run("push")
        return "Pushed to remote"

    def pull(self) -> str:
        self._require_repo()
        self._run("pull")
        return "Pulled from remote"

    def branches(self) -> list[str]:
        self._require_repo()
        output = self._run("branch", "--format=%(refname:short)").stdout
        return [line.strip() for line in output.splitlines() if line.strip()]

    def list_branches(self) -> str:
        current = self.current_branch()
        lines = ["Branches:"]
        for name in self.branches():
            marker = "* " if name == current else "  "
            lines.append(f"{marker}{name}")
        return "\n".join(lines)

    def create_branch(self, name: str) -> str:
        self._require_repo()
        self._run("branch", "--", name)
        return f"Created branch: {name}"

    def delete_branch(self, name: str) -> str:
        self._require_repo()
        self._run("branch", "-d", "--", name)
        return f"Deleted branch: {name}"

    def checkout(self, name: str) -> str:
        if not name:
            raise RepositoryError("Branch name required")
        if name.startswith("-"):
            raise RepositoryError(f"Invalid branch name: {name}")
        self._require_repo()
        self._run("checkout", name)
        return f"Switched to branch: {name}"

    def get_log(self, count: int = 10) -> list[LogEntry]:
        self._require_repo()
        fmt = _SEP.join(["%h", "%an", "%ad", "%s"])
        output = self._run("log", f"--max-count={count}", f"--format={fmt}", "--date=local").stdout
        entries = []
        for line in output.splitlines():
            parts = line.split(_SEP, 3)
            if len(parts) == 4:
                entries.append(LogEntry(sha=parts[0], author=parts[1], date=parts[2], subject=parts[3]))
        return entries

    def log(self, count: int = 10) -> str:
        return format_log(self.get_log(count))

    def diff(self) -> str:
        status = self.get_status()
        if not status.modified and not status.staged:
            return "No changes to show"
        lines = ["=== Changes ==="]
        lines.extend(f"{change.label}: {change.path}" for change in status.modified)
        lines.extend(f"{change.label}: {change.path}" for change in status.staged)
        return "\n".join(lines)
