"""Trickster command-line entry point.

Maps the first argument to a registered command and passes the remaining
arguments to its handler, which validates them itself::

    trickster new blog
    trickster generate controller Post
    trickster server --port 3000 --reload
    python -m trickster_cli routes
"""

from __future__ import annotations

import platform
import sys
from collections.abc import Callable
from dataclasses import dataclass

from rich.markup import escape
from rich.table import Table

from trickster_cli import __version__
from trickster_cli.errors import TricksterError, UnknownCommandError
from trickster_cli.routes import report_routes
from trickster_cli.scaffolder import ComponentGenerator, ProjectGenerator
from trickster_cli.server import launch_server
from trickster_cli.utils import console, print_error, print_hint

Handler = Callable[[list[str]], "int | None"]


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def cmd_new(args: list[str]) -> int:
    """``new <name> [args...]`` -- extra arguments are reserved."""
    name = args[0] if args else None
    ProjectGenerator().generate(name)
    return 0


def cmd_generate(args: list[str]) -> int:
    artifact_type = args[0] if len(args) > 0 else None
    name = args[1] if len(args) > 1 else None
    ComponentGenerator().generate(artifact_type, name)
    return 0


def cmd_server(args: list[str]) -> int | None:
    return launch_server(args)


def cmd_routes(args: list[str]) -> int:
    return report_routes(args)


def cmd_version(args: list[str]) -> int:
    console.print(f"Trickster v{__version__}", highlight=False)
    console.print(f"Python {platform.python_version()}", highlight=False)
    return 0


def cmd_help(args: list[str]) -> int:
    show_help()
    return 0


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Command:
    name: str
    handler: Handler
    usage: str
    summary: str


COMMANDS: dict[str, Command] = {
    c.name: c
    for c in (
        Command("new", cmd_new, "new <name>", "Create a new Trickster application"),
        Command(
            "generate",
            cmd_generate,
            "generate <type> <name>",
            "Generate a component (controller, model, template)",
        ),
        Command("server", cmd_server, "server [options]", "Start the development server"),
        Command("routes", cmd_routes, "routes", "Display all registered routes"),
        Command("version", cmd_version, "version", "Show Trickster version"),
        Command("help", cmd_help, "help", "Show this help message"),
    )
}

EXAMPLES: list[str] = [
    "trickster new myapp",
    "trickster generate controller User",
    "trickster server --port 3000",
    "trickster routes",
]


def show_help() -> None:
    """Print the banner, command table and examples."""
    console.print(f"[bold]Trickster v{__version__}[/bold] - scaffolding for Python web apps")
    console.print()
    console.print("Usage: trickster <command> " + escape("[options]"))
    console.print()

    table = Table(title="Commands", show_header=False, box=None, title_justify="left")
    table.add_column("Command", style="cyan", no_wrap=True)
    table.add_column("Description")
    for command in COMMANDS.values():
        table.add_row(escape(command.usage), command.summary)
    console.print(table)
    console.print()

    console.print("Examples:")
    for example in EXAMPLES:
        console.print(f"  {example}", highlight=False)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def dispatch(argv: list[str]) -> int:
    """Run the command named by ``argv[0]``; show help when *argv* is empty.

    Raises:
        UnknownCommandError: If ``argv[0]`` is not registered.
    """
    if not argv:
        show_help()
        return 0

    name, args = argv[0], argv[1:]
    command = COMMANDS.get(name)
    if command is None:
        raise UnknownCommandError(name)
    result = command.handler(args)
    return 0 if result is None else result


def main(argv: list[str] | None = None) -> int:
    """Entry point; returns the process exit status.

    ``TricksterError`` is reported and mapped to its exit code.  Filesystem
    errors are not caught and abort with a traceback.
    """
    if argv is None:
        argv = sys.argv[1:]
    try:
        return dispatch(argv)
    except TricksterError as exc:
        print_error(exc.message)
        if exc.hint:
            for line in exc.hint.splitlines():
                print_hint(line)
        return exc.exit_code


def run() -> None:
    """Console-script wrapper around :func:`main`."""
    sys.exit(main())


if __name__ == "__main__":
    run()
