"""Development server launcher for ``trickster server``.

Resolves the network settings, checks that the working directory is a
project root, and hands the process over to the external ASGI server.  On
POSIX the hand-off is a real ``exec``: the launcher never regains control and
the server's exit status becomes the tool's.  Elsewhere the server runs as a
child process and its exit status is forwarded.
"""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from pathlib import Path

from pydantic import ValidationError

from trickster_cli.config import Config, ServerConfig
from trickster_cli.errors import MissingEntryPointError, ServerNotFoundError, UsageError
from trickster_cli.utils import console

# Platforms where exec replaces the process image in place
EXEC_SUPPORTED = os.name == "posix"


class _OptionParser(argparse.ArgumentParser):
    """``ArgumentParser`` that raises ``UsageError`` instead of exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message, hint="Usage: trickster server [--port P] [--host H] [--reload]")


def parse_server_args(args: list[str], defaults: ServerConfig | None = None) -> ServerConfig:
    """Parse ``server`` options into a validated ``ServerConfig``.

    ``-h`` means ``--host`` here, so argparse's own help flag is disabled.
    """
    defaults = defaults or ServerConfig()
    parser = _OptionParser(prog="trickster server", add_help=False)
    parser.add_argument("--port", "-p", type=int, default=defaults.port)
    parser.add_argument("--host", "-h", default=defaults.host)
    parser.add_argument("--reload", "-r", action="store_true", default=defaults.reload)
    ns = parser.parse_args(args)
    try:
        return ServerConfig(port=ns.port, host=ns.host, reload=ns.reload)
    except ValidationError as exc:
        raise UsageError(f"Invalid server option: {exc.errors()[0]['msg']}") from exc


def build_command(server: ServerConfig, config: Config) -> list[str]:
    """Return the argv that starts the external server."""
    cmd = [config.server_program, "--host", server.host, "--port", str(server.port)]
    if server.reload:
        cmd.append("--reload")
        for directory in config.reload_dirs:
            cmd.extend(["--reload-dir", directory])
    cmd.append(config.app_target)
    return cmd


def require_entry_point(config: Config, cwd: str | Path | None = None) -> Path:
    """Return the entry-point path, or raise if the cwd is not a project root."""
    base = Path(cwd) if cwd is not None else Path(".")
    entry = base / config.entry_point
    if not entry.is_file():
        raise MissingEntryPointError(config.entry_point)
    return entry


def launch_server(args: list[str], config: Config | None = None) -> int | None:
    """Start the development server; on POSIX this does not return.

    Returns:
        The server's exit status (non-POSIX platforms only).

    Raises:
        MissingEntryPointError: If the entry point is not in the cwd.
        UsageError: If an option or TRICKSTER_PORT is malformed.
        ServerNotFoundError: If the server program is not installed.
    """
    config = config or Config.from_env()
    require_entry_point(config)
    server = parse_server_args(args, config.server)

    console.print("Starting Trickster development server...")
    console.print(f"Listening on {server.url}", highlight=False)
    console.print("Press Ctrl+C to stop")
    console.print()

    return _hand_off(build_command(server, config))


def _hand_off(cmd: list[str]) -> int | None:
    """Replace the current process with *cmd* (or run it and wait)."""
    # Buffered output would be lost across exec
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        if not EXEC_SUPPORTED:
            return subprocess.call(cmd)
        os.execvp(cmd[0], cmd)
    except FileNotFoundError as exc:
        raise ServerNotFoundError(cmd[0]) from exc
    return None
