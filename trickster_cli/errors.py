"""Exceptions raised by Trickster commands.

Every command-level failure is a ``TricksterError``.  The dispatcher prints
the message (and hint, when present) and exits with ``exit_code``.
Filesystem ``OSError`` is not part of this hierarchy and is never caught:
a failed write aborts the process as-is.
"""

from __future__ import annotations


class TricksterError(Exception):
    """Base class for errors reported to the user with a non-zero exit."""

    exit_code: int = 1

    def __init__(self, message: str, hint: str | None = None) -> None:
        self.message = message
        self.hint = hint
        super().__init__(message)


class UsageError(TricksterError):
    """A required argument is missing or an option value is invalid."""


class AlreadyExistsError(TricksterError):
    """The scaffold target path is already occupied."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Directory '{path}' already exists")


class UnknownCommandError(TricksterError):
    """The first CLI argument does not name a registered command."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(
            f"Unknown command: {command}",
            hint="Run 'trickster help' for usage information.",
        )


class UnknownTypeError(TricksterError):
    """``generate`` was asked for an artifact type it does not know."""

    def __init__(self, artifact_type: str, available: list[str]) -> None:
        self.artifact_type = artifact_type
        super().__init__(
            f"Unknown type '{artifact_type}'",
            hint=f"Available types: {', '.join(available)}",
        )


class MissingEntryPointError(TricksterError):
    """The current directory has no application entry-point file."""

    def __init__(self, entry_point: str) -> None:
        self.entry_point = entry_point
        super().__init__(
            f"{entry_point} not found",
            hint="Run this command from your application directory",
        )


class ServerNotFoundError(TricksterError):
    """The external development server program is not installed."""

    def __init__(self, program: str) -> None:
        self.program = program
        super().__init__(
            f"Server program '{program}' not found on PATH",
            hint=f"Install it with: pip install {program}",
        )
