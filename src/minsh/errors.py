"""Shell-level exception types for minsh."""

from __future__ import annotations


class ShellError(Exception):
    """Base exception for one failed command."""

    # Messages for user-facing errors go to stdout, like a traditional shell.
    user_facing: bool = False


class IoFailure(ShellError):
    """Raised when an underlying OS call fails."""

    def __init__(self, error: OSError) -> None:
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return f"I/O error: {self.error}"


class ShellMessage(ShellError):
    """Raised with a builtin-specific message that is shown as-is."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NotFound(ShellError):
    """Raised when a name is neither a builtin nor on the search path."""

    user_facing = True

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"{self.name}: not found"


class CommandNotFound(NotFound):
    """Raised when an external command cannot be resolved."""

    def __str__(self) -> str:
        return f"{self.name}: command not found"
