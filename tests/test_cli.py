"""Tests for the command dispatcher (trickster_cli.cli).

Covers:
- Registry contents and order
- Help (explicit and with no arguments) and version output
- Dispatch to each command handler with the remaining arguments
- Error reporting and exit codes for every TricksterError
"""

from __future__ import annotations

from pathlib import Path

import pytest

from trickster_cli import __version__
from trickster_cli import cli
from trickster_cli.cli import COMMANDS, Command, dispatch, main
from trickster_cli.errors import UnknownCommandError

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TestRegistry:
    def test_command_names(self):
        assert list(COMMANDS) == ["new", "generate", "server", "routes", "version", "help"]

    def test_entries_are_commands(self):
        for name, command in COMMANDS.items():
            assert isinstance(command, Command)
            assert command.name == name
            assert callable(command.handler)

    def test_commands_are_immutable(self):
        from dataclasses import FrozenInstanceError

        with pytest.raises(FrozenInstanceError):
            COMMANDS["new"].name = "old"


# ---------------------------------------------------------------------------
# Help and version
# ---------------------------------------------------------------------------


class TestHelpAndVersion:
    def test_no_arguments_shows_help(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert f"Trickster v{__version__}" in out
        assert "Usage: trickster <command> [options]" in out
        for command in COMMANDS.values():
            assert command.usage in out

    def test_help_command(self, capsys):
        assert main(["help"]) == 0
        out = capsys.readouterr().out
        assert "Examples:" in out
        assert "trickster generate controller User" in out

    def test_help_ignores_extra_arguments(self, capsys):
        assert main(["help", "new"]) == 0

    def test_version(self, capsys):
        assert main(["version"]) == 0
        out = capsys.readouterr().out
        assert f"Trickster v{__version__}" in out
        assert "Python 3." in out


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


class TestDispatch:
    def test_unknown_command_raises(self):
        with pytest.raises(UnknownCommandError) as exc_info:
            dispatch(["foo"])
        assert exc_info.value.command == "foo"

    def test_unknown_command_exit_code_and_hint(self, capsys):
        assert main(["foo", "bar"]) == 1
        out = capsys.readouterr().out
        assert "Unknown command: foo" in out
        assert "trickster help" in out

    def test_handler_receives_remaining_args(self, monkeypatch):
        seen: list[list[str]] = []
        fake = Command("routes", lambda args: seen.append(args), "routes", "")
        monkeypatch.setitem(COMMANDS, "routes", fake)
        assert dispatch(["routes", "-x", "y"]) == 0
        assert seen == [["-x", "y"]]

    def test_handler_status_is_returned(self, monkeypatch):
        monkeypatch.setitem(COMMANDS, "server", Command("server", lambda args: 7, "server", ""))
        assert main(["server"]) == 7

    def test_os_errors_propagate(self, monkeypatch):
        def broken(args):
            raise OSError("read-only file system")

        monkeypatch.setitem(COMMANDS, "new", Command("new", broken, "new", ""))
        with pytest.raises(OSError):
            main(["new", "x"])

    def test_run_exits_with_status(self, monkeypatch):
        monkeypatch.setattr(cli.sys, "argv", ["trickster", "foo"])
        with pytest.raises(SystemExit) as exc_info:
            cli.run()
        assert exc_info.value.code == 1


# ---------------------------------------------------------------------------
# Commands through main()
# ---------------------------------------------------------------------------


class TestCommands:
    def test_new(self, workdir: Path, capsys):
        assert main(["new", "myapp", "--reserved"]) == 0
        assert (workdir / "myapp" / "app.py").is_file()
        assert "Application created successfully!" in capsys.readouterr().out

    def test_new_without_name(self, workdir: Path, capsys):
        assert main(["new"]) == 1
        out = capsys.readouterr().out
        assert "Application name required" in out
        assert "Usage: trickster new <name>" in out

    def test_new_twice(self, workdir: Path, capsys):
        assert main(["new", "myapp"]) == 0
        capsys.readouterr()
        assert main(["new", "myapp"]) == 1
        assert "Directory 'myapp' already exists" in capsys.readouterr().out

    def test_generate(self, bare_dir: Path):
        assert main(["generate", "controller", "Foo"]) == 0
        source = (bare_dir / "lib" / "Bar" / "Controller" / "Foo.py").read_text()
        assert "Hello from Foo controller" in source

    def test_generate_missing_name(self, bare_dir: Path, capsys):
        assert main(["generate", "controller"]) == 1
        out = capsys.readouterr().out
        assert "Type and name required" in out
        assert "Types: controller, model, template" in out

    def test_generate_unknown_type(self, bare_dir: Path, capsys):
        assert main(["generate", "widget", "Foo"]) == 1
        out = capsys.readouterr().out
        assert "Unknown type 'widget'" in out
        assert "Available types" in out

    def test_server_without_entry_point(self, workdir: Path, capsys):
        assert main(["server"]) == 1
        out = capsys.readouterr().out
        assert "app.py not found" in out
        assert "application directory" in out

    def test_server_with_entry_point(self, project_dir: Path, monkeypatch, capsys):
        from trickster_cli import server

        calls: list[list[str]] = []
        monkeypatch.setattr(server, "EXEC_SUPPORTED", True)
        monkeypatch.setattr(server.os, "execvp", lambda file, args: calls.append(args))
        monkeypatch.delenv("TRICKSTER_PORT", raising=False)
        monkeypatch.delenv("TRICKSTER_HOST", raising=False)

        assert main(["server", "-p", "9000"]) == 0
        assert "http://0.0.0.0:9000" in capsys.readouterr().out
        assert calls[0][-1] == "app:app"

    def test_routes(self, project_dir: Path, capsys):
        assert main(["routes"]) == 0
        assert "not yet implemented" in capsys.readouterr().out

    def test_routes_without_entry_point(self, workdir: Path):
        assert main(["routes"]) == 1
