"""
Command registry for the gitrepl shell.

Commands are registered with a name, handler function, and metadata.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from gitrepl.cli.context import ShellContext


@dataclass
class CommandEntry:
    """Entry for a registered command."""

    name: str
    handler: Callable[["ShellContext", list[str]], bool | None]
    description: str
    usage: str | None = None
    group: str = "Tool"
    aliases: list[str] = field(default_factory=list)


class CommandRegistry:
    """Registry for shell commands (verbs)."""

    def __init__(self):
        self._commands: dict[str, CommandEntry] = {}
        self._aliases: dict[str, str] = {}

    def register(
        self,
        name: str,
        description: str,
        usage: str | None = None,
        group: str = "Tool",
        aliases: list[str] | None = None,
    ) -> Callable:
        """Decorator to register a command.

        Args:
            name: Verb that invokes the command (e.g., "status")
            description: Short description for help
            usage: Usage string (e.g., "log [n]")
            group: Help section ("Git", "System" or "Tool")
            aliases: Synonyms for the verb (e.g., ["st"])

        Returns:
            Decorator function

        Example:
            @command_registry.register("pwd", "Show current directory", group="System")
            def cmd_pwd(ctx, args):
                print(ctx.system.cwd)
        """
        def decorator(func: Callable) -> Callable:
            entry = CommandEntry(
                name=name,
                handler=func,
                description=description,
                usage=usage or name,
                group=group,
                aliases=aliases or [],
            )
            previous = self._commands.get(name)
            if previous is not None:
                for alias in previous.aliases:
                    self._aliases.pop(alias, None)
            self._commands[name] = entry

            for alias in entry.aliases:
                self._aliases[alias] = name

            return func
        return decorator

    def get(self, name: str) -> CommandEntry | None:
        """Get a command by name or synonym."""
        if name in self._commands:
            return self._commands[name]
        if name in self._aliases:
            return self._commands[self._aliases[name]]
        return None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def all_commands(self) -> list[CommandEntry]:
        """Get all registered commands sorted by name."""
        return sorted(self._commands.values(), key=lambda e: e.name)

    def verbs(self) -> list[str]:
        """All names and synonyms, sorted."""
        return sorted([*self._commands, *self._aliases])

    def get_completions(self) -> dict[str, str]:
        """Get verbs and descriptions for completion."""
        result = {}
        for entry in self._commands.values():
            result[entry.name] = entry.description
            for alias in entry.aliases:
                result[alias] = entry.description
        return result


# Global command registry
command_registry = CommandRegistry()
