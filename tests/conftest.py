"""
Shared fixtures: a scripted repository and a shell context on tmp_path.
"""

import pytest

from gitrepl.cli.commands import load_builtin_commands
from gitrepl.cli.context import ShellContext
from gitrepl.config import Config
from gitrepl.core import AliasTable, HistoryStore, LineStore, NotARepositoryError
from gitrepl.system import SystemOps


class FakeRepository:
    """Records calls and returns canned text."""

    def __init__(self, in_repo: bool = True):
        self.in_repo = in_repo
        self.calls = []

    def _call(self, name, *args):
        self.calls.append((name, *args))
        if not self.in_repo and name != "init":
            raise NotARepositoryError()
        return f"{name} ok"

    def current_branch(self):
        return "main" if self.in_repo else None

    def init(self):
        self.in_repo = True
        return self._call("init")

    def status(self):
        return self._call("status")

    def stage(self, paths):
        return self._call("stage", list(paths))

    def commit(self, message):
        return self._call("commit", message)

    def push(self):
        return self._call("push")

    def pull(self):
        return self._call("pull")

    def list_branches(self):
        return self._call("list_branches")

    def create_branch(self, name):
        return self._call("create_branch", name)

    def delete_branch(self, name):
        return self._call("delete_branch", name)

    def checkout(self, name):
        return self._call("checkout", name)

    def log(self, count=10):
        return self._call("log", count)

    def diff(self):
        return self._call("diff")


@pytest.fixture
def fake_repo():
    return FakeRepository()


@pytest.fixture
def shell(tmp_path, fake_repo):
    """ShellContext with file-backed stores under tmp_path and a fake repo."""
    load_builtin_commands()
    workdir = tmp_path / "work"
    workdir.mkdir()
    return ShellContext(
        history=HistoryStore(LineStore(tmp_path / "history")),
        aliases=AliasTable(LineStore(tmp_path / "aliases")),
        system=SystemOps(workdir),
        repo=fake_repo,
        config=Config(),
    )
