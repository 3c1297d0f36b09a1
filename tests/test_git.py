#!/usr/bin/env python3
"""
Tests for the git-backed repository.

Tests that need a real git binary are skipped when it isn't installed.
"""

import shutil

import pytest

from gitrepl.core.exceptions import NotARepositoryError, RepositoryError
from gitrepl.system import SystemOps
from gitrepl.vcs import FileChange, GitRepository, LogEntry, RepoStatus, format_log, format_status, parse_porcelain

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


@pytest.fixture
def git_env(tmp_path, monkeypatch):
    """Isolate git from the user's config and give it an identity."""
    gitconfig = tmp_path / "gitconfig"
    gitconfig.write_text("")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(gitconfig))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for var in ("GIT_AUTHOR_NAME", "GIT_COMMITTER_NAME"):
        monkeypatch.setenv(var, "Test User")
    for var in ("GIT_AUTHOR_EMAIL", "GIT_COMMITTER_EMAIL"):
        monkeypatch.setenv(var, "test@example.com")
    workdir = tmp_path / "repo"
    workdir.mkdir()
    return workdir


@pytest.fixture
def repo(git_env):
    """An initialized repository whose branch is 'trunk'."""
    repository = GitRepository(SystemOps(git_env))
    repository.init()
    repository._run("symbolic-ref", "HEAD", "refs/heads/trunk")
    return repository


# ============================================================================
# Parsing and Formatting Tests
# ============================================================================

class TestParsePorcelain:
    """Tests for parse_porcelain."""

    def test_empty(self):
        assert parse_porcelain("") == RepoStatus()

    def test_categories(self):
        output = "\n".join([
            "A  new.txt",
            " M changed.txt",
            "MM both.txt",
            "?? notes.md",
            " D removed.txt",
        ])
        status = parse_porcelain(output)
        assert [(c.code, c.path) for c in status.staged] == [("A", "new.txt"), ("M", "both.txt")]
        assert [(c.code, c.path) for c in status.modified] == [
            ("M", "changed.txt"),
            ("M", "both.txt"),
            ("D", "removed.txt"),
        ]
        assert status.untracked == ["notes.md"]

    def test_rename_uses_new_path(self):
        status = parse_porcelain("R  old.txt -> new.txt")
        assert status.staged == [FileChange(code="R", path="new.txt")]

    def test_index_codes_kept(self):
        status = parse_porcelain("D  gone.txt\nT  link\nAD tmp.txt")
        assert [c.code for c in status.staged] == ["D", "T", "A"]
        assert status.modified == [FileChange(code="D", path="tmp.txt")]

    def test_short_lines_ignored(self):
        assert parse_porcelain("??\n").untracked == []


class TestFormatting:
    """Tests for status and log rendering."""

    def test_clean_status(self):
        text = format_status(RepoStatus(branch="main"))
        assert "=== Git Status ===" in text
        assert "Branch: main" in text
        assert "Working directory clean" in text

    def test_dirty_status(self):
        status = RepoStatus(
            branch="dev",
            staged=[FileChange(code="A", path="a")],
            modified=[FileChange(code="M", path="b")],
            untracked=["c"],
        )
        text = format_status(status)
        assert "Staged files:\n  A a" in text
        assert "Modified files:\n  M b" in text
        assert "Untracked files:\n  ? c" in text
        assert "Working directory clean" not in text

    def test_log(self):
        entry = LogEntry(sha="abc1234", author="Ann", date="today", subject="Fix bug")
        text = format_log([entry])
        assert text.startswith("=== Commit Log ===")
        assert "Commit: abc1234" in text
        assert "Author: Ann" in text
        assert "Message: Fix bug" in text


# ============================================================================
# GitRepository Tests
# ============================================================================

class TestGitRepositoryErrors:
    """Failure paths that don't depend on repository contents."""

    def test_missing_executable(self, tmp_path):
        repository = GitRepository(SystemOps(tmp_path), executable="no-such-git-xyz")
        with pytest.raises(RepositoryError, match="git executable not found"):
            repository.init()
        assert repository.current_branch() is None

    def test_checkout_rejects_option_like_name(self, tmp_path):
        repository = GitRepository(SystemOps(tmp_path))
        with pytest.raises(RepositoryError, match="Invalid branch name: -b"):
            repository.checkout("-b")

    @requires_git
    def test_outside_repository(self, git_env):
        repository = GitRepository(SystemOps(git_env))
        assert repository.current_branch() is None
        with pytest.raises(NotARepositoryError, match="Not in a git repository"):
            repository.status()
        with pytest.raises(NotARepositoryError):
            repository.commit("msg")


@requires_git
class TestGitRepository:
    """End-to-end tests against a real repository in tmp_path."""

    def test_init_and_branch(self, repo):
        assert repo.is_repository()
        assert repo.current_branch() == "trunk"

    def test_untracked_status(self, repo):
        (repo.system.cwd / "a.txt").write_text("one\n")
        text = repo.status()
        assert "Branch: trunk" in text
        assert "Untracked files:\n  ? a.txt" in text

    def test_stage_commit_cycle(self, repo):
        (repo.system.cwd / "a.txt").write_text("one\n")
        assert repo.stage([]) == "Added all files"
        assert "Added: a.txt" in repo.diff()

        result = repo.commit("First commit")
        assert result.startswith("Committed: First commit\nSHA: ")
        assert "Working directory clean" in repo.status()
        assert repo.diff() == "No changes to show"

        log = repo.log(5)
        assert "Message: First commit" in log
        assert "Author: Test User" in log

    def test_stage_named_paths(self, repo):
        (repo.system.cwd / "a.txt").write_text("a\n")
        (repo.system.cwd / "b.txt").write_text("b\n")
        assert repo.stage(["a.txt"]) == "Added: a.txt"
        status = repo.get_status()
        assert status.staged == [FileChange(code="A", path="a.txt")]
        assert status.untracked == ["b.txt"]

    def test_modified_file(self, repo):
        path = repo.system.cwd / "a.txt"
        path.write_text("one\n")
        repo.stage(["a.txt"])
        repo.commit("init")
        path.write_text("two\n")
        assert "Modified files:\n  M a.txt" in repo.status()
        assert "Modified: a.txt" in repo.diff()

    def test_commit_with_nothing_staged(self, repo):
        with pytest.raises(RepositoryError):
            repo.commit("empty")

    def test_branches(self, repo):
        (repo.system.cwd / "a.txt").write_text("one\n")
        repo.stage([])
        repo.commit("init")

        assert repo.create_branch("feat") == "Created branch: feat"
        listing = repo.list_branches()
        assert listing.startswith("Branches:")
        assert "* trunk" in listing
        assert "  feat" in listing

        assert repo.checkout("feat") == "Switched to branch: feat"
        assert repo.current_branch() == "feat"

        repo.checkout("trunk")
        assert repo.delete_branch("feat") == "Deleted branch: feat"
        assert repo.branches() == ["trunk"]

    def test_checkout_unknown_branch(self, repo):
        (repo.system.cwd / "a.txt").write_text("one\n")
        repo.stage([])
        repo.commit("init")
        with pytest.raises(RepositoryError):
            repo.checkout("does-not-exist")

    def test_follows_shell_directory(self, repo, git_env):
        (git_env / "sub").mkdir()
        repo.system.change_dir("sub")
        assert repo.current_branch() == "trunk"
        repo.system.change_dir("..")
        repo.system.change_dir("..")
        assert repo.current_branch() is None

    def test_status_reports_real_codes(self, repo):
        for name in ("keep.txt", "gone.txt", "staged.txt"):
            (repo.system.cwd / name).write_text("one\n")
        repo.stage([])
        repo.commit("init")

        (repo.system.cwd / "gone.txt").unlink()
        (repo.system.cwd / "staged.txt").write_text("two\n")
        repo.stage(["staged.txt"])

        text = repo.status()
        assert "Staged files:\n  M staged.txt" in text
        assert "Modified files:\n  D gone.txt" in text
        assert "Deleted: gone.txt" in repo.diff()

    def test_dashed_branch_name_not_treated_as_option(self, repo):
        (repo.system.cwd / "a.txt").write_text("one\n")
        repo.stage([])
        repo.commit("init")

        with pytest.raises(RepositoryError):
            repo.create_branch("--force")
        repo.create_branch("feat")
        with pytest.raises(RepositoryError):
            repo.delete_branch("-r")
        assert repo.branches() == ["feat", "trunk"]
