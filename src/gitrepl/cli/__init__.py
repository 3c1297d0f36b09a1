"""
CLI module for the gitrepl package.

Provides the interactive shell front-ends and the shared shell context.
"""

from gitrepl.cli._repl import repl
from gitrepl.cli._simple_repl import repl as simple_repl
from gitrepl.cli.context import ShellContext

__all__ = [
    "ShellContext",
    "repl",
    "simple_repl",
]
