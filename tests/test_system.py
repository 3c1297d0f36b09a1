#!/usr/bin/env python3
"""
Tests for SystemOps.
"""

import os
import sys
from pathlib import Path

import pytest

from gitrepl.system import DirEntry, SystemOps


@pytest.fixture
def system(tmp_path):
    (tmp_path / "b_dir").mkdir()
    (tmp_path / "a_file.txt").write_text("hello")
    return SystemOps(tmp_path)


class TestDirEntry:
    def test_display_dir(self):
        assert DirEntry(name="src", is_dir=True).display() == "[DIR]  src"

    def test_display_file(self):
        assert DirEntry(name="a.txt", is_dir=False).display() == "[FILE] a.txt"


class TestSystemOps:
    """Tests for working directory handling and process spawning."""

    def test_defaults_to_process_cwd(self):
        assert SystemOps().cwd == Path.cwd()

    def test_change_dir_relative(self, system, tmp_path):
        before = os.getcwd()
        assert system.change_dir("b_dir") == tmp_path.resolve() / "b_dir"
        assert system.cwd.name == "b_dir"
        assert os.getcwd() == before

    def test_change_dir_parent(self, system, tmp_path):
        system.change_dir("b_dir")
        assert system.change_dir("..") == tmp_path.resolve()

    def test_change_dir_home(self, system):
        assert system.change_dir() == Path.home()

    def test_change_dir_missing(self, system):
        cwd = system.cwd
        with pytest.raises(FileNotFoundError, match="Directory not found"):
            system.change_dir("nope")
        assert system.cwd == cwd

    def test_change_dir_to_file(self, system):
        with pytest.raises(NotADirectoryError):
            system.change_dir("a_file.txt")

    def test_list_dir_sorted(self, system):
        entries = system.list_dir()
        assert [e.name for e in entries] == ["a_file.txt", "b_dir"]
        assert [e.is_dir for e in entries] == [False, True]

    def test_list_dir_follows_cwd(self, system):
        (system.cwd / "b_dir" / "inner").mkdir()
        system.change_dir("b_dir")
        assert [e.name for e in system.list_dir()] == ["inner"]

    def test_run_exit_code(self, system):
        assert system.run([sys.executable, "-c", "import sys; sys.exit(3)"]) == 3

    def test_run_in_cwd(self, system):
        code = "import os, sys; sys.exit(0 if os.path.exists('a_file.txt') else 1)"
        assert system.run([sys.executable, "-c", code]) == 0

    def test_run_missing_program(self, system):
        with pytest.raises(OSError):
            system.run(["definitely-not-a-real-program-xyz"])

    def test_run_empty(self, system):
        with pytest.raises(ValueError):
            system.run([])
