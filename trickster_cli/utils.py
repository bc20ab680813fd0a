"""Shared utility functions for the Trickster CLI.

Provides the Rich console used for all output, message helpers, the
filesystem writer used by every generator, and name helpers.  Filesystem
helpers never swallow errors: the first ``OSError`` propagates to the caller.
"""

from __future__ import annotations

import stat
from pathlib import Path

from rich.console import Console
from rich.markup import escape

console = Console(soft_wrap=True)

# ---------------------------------------------------------------------------
# Name helpers
# ---------------------------------------------------------------------------


def ucfirst(name: str) -> str:
    """Upper-case the first character of *name*, leaving the rest untouched.

    Examples::

        ucfirst("myapp")   -> "Myapp"
        ucfirst("blogAPI") -> "BlogAPI"
    """
    return name[:1].upper() + name[1:]


def detect_namespace(cwd: str | Path | None = None) -> str:
    """Derive the project namespace from the last segment of *cwd*.

    Defaults to the current working directory.
    """
    directory = Path(cwd) if cwd is not None else Path.cwd()
    return ucfirst(directory.resolve().name)


# ---------------------------------------------------------------------------
# Filesystem writer
# ---------------------------------------------------------------------------


def make_dir(path: str | Path) -> Path:
    """Create a directory and any missing parents.

    Args:
        path: Directory path, usually relative to the working directory.

    Returns:
        The ``Path`` that was created.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def write_file(path: str | Path, content: str, *, executable: bool = False) -> Path:
    """Write *content* to *path*, optionally marking it executable.

    The parent directory must already exist.  The file handle is closed
    before returning, on every exit path.

    Raises:
        OSError: If the file cannot be opened or written.
    """
    file_path = Path(path)
    with open(file_path, "w", encoding="utf-8") as fh:
        fh.write(content)
    if executable:
        _make_executable(file_path)
    return file_path


def _make_executable(path: Path) -> None:
    """Set the executable bit on a file."""
    current = path.stat().st_mode
    path.chmod(current | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_created(path: str) -> None:
    """Print a ``Created:`` line for a generated path."""
    console.print(f"  [green]Created:[/green] {escape(path)}")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_hint(message: str) -> None:
    """Print a dimmed follow-up line (usage hints, next steps)."""
    console.print(f"[dim]{escape(message)}[/dim]")
