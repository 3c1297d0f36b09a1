"""
Plain REPL (Read-Eval-Print Loop) built on input() and readline.

Used when prompt_toolkit isn't wanted or stdin isn't a terminal.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

try:
    import readline
except ImportError:  # Windows
    readline = None

if TYPE_CHECKING:
    from gitrepl.cli.context import ShellContext


def print_welcome() -> None:
    print("=" * 41)
    print("     gitrepl - Git Workflow Shell")
    print("=" * 41)
    print("Type 'help' for available commands")
    print("Type 'exit' to quit")


class VerbCompleter:
    """readline completer for verbs and alias names on the first word."""

    def __init__(self, ctx: "ShellContext"):
        self.ctx = ctx
        self.matches: list[str] = []

    def complete(self, text: str, state: int) -> str | None:
        """Return the state-th completion for text."""
        if state == 0:
            line = readline.get_line_buffer() if readline else text
            if line.strip() and " " in line.lstrip():
                self.matches = []
            else:
                names = sorted({*self.ctx.registry.verbs(), *self.ctx.aliases.names()})
                self.matches = [name for name in names if name.startswith(text)]
        if state < len(self.matches):
            return self.matches[state]
        return None


def setup_readline(ctx: "ShellContext") -> None:
    """Seed readline history from the history store and enable completion."""
    if readline is None:
        return
    readline.clear_history()
    for entry in ctx.history.snapshot():
        readline.add_history(entry)
    readline.set_history_length(ctx.history.max_size)

    completer = VerbCompleter(ctx)
    readline.set_completer(completer.complete)
    readline.parse_and_bind("tab: complete")

    # History search with up/down after typing
    readline.parse_and_bind('"\\e[A": history-search-backward')
    readline.parse_and_bind('"\\e[B": history-search-forward')


def repl(ctx: "ShellContext") -> None:
    """Run the interactive loop until exit/quit or end of input.

    History and aliases are saved when the loop stops, however it stops.

    Args:
        ctx: Shell state to read commands into.
    """
    if sys.stdin.isatty():
        setup_readline(ctx)

    print_welcome()

    try:
        while ctx.running:
            try:
                line = input(f"\n{ctx.prompt_label()} > ")
            except EOFError:
                print()
                break
            except KeyboardInterrupt:
                # Ctrl+C during prompt - just continue
                print()
                continue

            if ctx.execute(line):
                break
    finally:
        ctx.shutdown()
        print("Goodbye!")
