"""
Shell state and the record -> resolve -> dispatch step shared by the REPLs.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

from gitrepl.cli.commands import CommandRegistry, command_registry, load_builtin_commands
from gitrepl.config import Config
from gitrepl.core import (
    AliasTable,
    HistoryStore,
    NotARepositoryError,
    RepositoryError,
    ShellError,
    UsageError,
    resolve,
)
from gitrepl.system import SystemOps
from gitrepl.vcs import GitRepository, Repository

logger = logging.getLogger(__name__)

# ANSI escape codes for grey text
GREY = "\033[90m"
RESET = "\033[0m"


def feedback(msg: str) -> None:
    """Print feedback message in grey to stderr."""
    print(f"{GREY}{msg}{RESET}", file=sys.stderr)


@dataclass
class ShellContext:
    """Everything a command handler can reach."""

    history: HistoryStore
    aliases: AliasTable
    system: SystemOps
    repo: Repository
    config: Config = field(default_factory=Config)
    registry: CommandRegistry = field(default_factory=lambda: command_registry)
    running: bool = True
    current_line: str = ""

    @classmethod
    def from_config(
        cls,
        config: Config,
        history_file: Path | str | None = None,
        alias_file: Path | str | None = None,
        cwd: Path | str | None = None,
    ) -> "ShellContext":
        """Build a context and load history and aliases from disk."""
        history = HistoryStore.from_file(
            history_file or config.get("history_file"),
            max_size=config.get("history_size"),
        )
        aliases = AliasTable.from_file(alias_file or config.get("alias_file"))
        system = SystemOps(cwd)
        repo = GitRepository(system, executable=config.get("git_executable"))
        return cls(history=history, aliases=aliases, system=system, repo=repo, config=config)

    def prompt_label(self) -> str:
        """Branch label shown in the prompt."""
        try:
            branch = self.repo.current_branch()
        except ShellError:
            branch = None
        return f"[{branch}]" if branch else "[no-git]"

    def execute(self, line: str) -> bool:
        """Record, resolve and dispatch one input line.

        Args:
            line: Raw input. Blank lines are ignored and not recorded.

        Returns:
            True if the shell should stop.
        """
        line = line.strip()
        if not line:
            return False

        self.history.append(line)
        self.current_line = line
        load_builtin_commands()

        try:
            resolved = resolve(line, self.aliases)
        except ValueError as e:
            print(f"Error: {e}")
            return False

        entry = self.registry.get(resolved.verb)
        if entry is None:
            print(f"Unknown command: {resolved.verb}")
            print("Type 'help' for available commands")
            return False

        logger.debug(f"Dispatching {resolved.line!r} to '{entry.name}'")
        try:
            result = entry.handler(self, resolved.args)
        except NotARepositoryError as e:
            print(e)
        except UsageError as e:
            print(f"Usage: {e.usage}")
        except RepositoryError as e:
            print(f"Error: {e}", file=sys.stderr)
        except ShellError as e:
            print(f"Error: {e}")
        except Exception as e:
            logger.debug("Command failed", exc_info=True)
            print(f"Command error: {e}")
        else:
            if result is True:
                self.running = False
                return True
        return False

    def shutdown(self) -> None:
        """Persist history and aliases; failures are logged, not raised."""
        feedback("Saving configuration...")
        self.history.save()
        self.aliases.save()
