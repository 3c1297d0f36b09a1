"""
Feature-rich REPL (Read-Eval-Print Loop) implementation using prompt_toolkit.

Provides in-session history, verb/alias completion, fuzzy history
completion and a branch-aware prompt.
"""

from __future__ import annotations

import html
from typing import TYPE_CHECKING

from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.completion import Completer, Completion, merge_completers
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.styles import Style

from gitrepl.cli._simple_repl import print_welcome
from gitrepl.core.fuzzy import search

if TYPE_CHECKING:
    from gitrepl.cli.context import ShellContext

# Max fuzzy history suggestions offered at once
HISTORY_COMPLETIONS = 10


class CommandCompleter(Completer):
    """Completer for verbs and alias names on the first word."""

    def __init__(self, ctx: "ShellContext"):
        self.ctx = ctx

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor.lstrip()

        if " " in text:
            return

        for verb, description in sorted(self.ctx.registry.get_completions().items()):
            if verb.startswith(text):
                yield Completion(verb, start_position=-len(text), display_meta=description)

        for name, expansion in self.ctx.aliases.list():
            if name.startswith(text):
                yield Completion(name, start_position=-len(text), display_meta=f"alias: {expansion}")


class FuzzyHistoryCompleter(Completer):
    """Completer that suggests past commands ranked by fuzzy match."""

    def __init__(self, ctx: "ShellContext", limit: int = HISTORY_COMPLETIONS):
        self.ctx = ctx
        self.limit = limit

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor.strip()
        if not text:
            return

        # Most recent first, without duplicates
        seen = set()
        recent = []
        for entry in reversed(self.ctx.history.snapshot()):
            if entry not in seen:
                seen.add(entry)
                recent.append(entry)

        for entry in search(text, recent)[: self.limit]:
            if entry == text:
                continue
            yield Completion(
                entry,
                start_position=-len(document.text_before_cursor),
                display_meta="history",
            )


def get_style() -> Style:
    """Get the prompt style."""
    return Style.from_dict({
        "branch": "ansicyan bold",
        "prompt": "ansigreen",
    })


def repl(ctx: "ShellContext") -> None:
    """Run the interactive REPL until exit/quit or Ctrl+D.

    Features:
        - Up/down history seeded from the history file
        - Tab completion for verbs and aliases
        - Fuzzy completion from history
        - Ctrl+C to cancel input, Ctrl+D to exit

    History and aliases are saved when the loop stops.

    Args:
        ctx: Shell state to read commands into.
    """
    history = InMemoryHistory()
    for entry in ctx.history.snapshot():
        history.append_string(entry)

    bindings = KeyBindings()

    @bindings.add("c-l")
    def _(event):
        """Handle Ctrl+L - clear the screen."""
        event.app.renderer.clear()

    session: PromptSession = PromptSession(
        history=history,
        completer=merge_completers([CommandCompleter(ctx), FuzzyHistoryCompleter(ctx)]),
        auto_suggest=AutoSuggestFromHistory(),
        key_bindings=bindings,
        style=get_style(),
        complete_while_typing=False,
    )

    print_welcome()

    try:
        while ctx.running:
            try:
                line = session.prompt(
                    HTML(f"\n<branch>{html.escape(ctx.prompt_label())}</branch> <prompt>&gt;</prompt> ")
                )
            except EOFError:
                break
            except KeyboardInterrupt:
                continue

            if ctx.execute(line):
                break
    finally:
        ctx.shutdown()
        print("Goodbye!")
