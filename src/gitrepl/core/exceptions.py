"""
Exception classes for the shell core and its collaborators.
"""


class ShellError(Exception):
    """Base exception for shell-related errors."""


class RepositoryError(ShellError):
    """A repository operation failed."""


class NotARepositoryError(RepositoryError):
    """The working directory is not inside a repository."""

    def __init__(self, message: str = "Not in a git repository"):
        super().__init__(message)


class UsageError(ShellError):
    """Command invoked with missing or invalid arguments."""

    def __init__(self, usage: str, message: str | None = None):
        self.usage = usage
        super().__init__(message or f"Usage: {usage}")


class AliasError(ShellError):
    """Invalid alias definition."""


class CommandLoadError(ShellError):
    """A user command module could not be imported."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Failed to load command '{name}': {reason}")
