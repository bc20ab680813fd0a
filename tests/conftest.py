"""Shared pytest fixtures for the Trickster test suite.

Provides reusable fixtures for:
- An isolated working directory (every test that touches the filesystem
  runs inside ``tmp_path``)
- A freshly scaffolded project to run ``generate``/``server``/``routes`` in
- Loading generated Python modules from disk
"""

from __future__ import annotations

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest

from trickster_cli.scaffolder import ProjectGenerator


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty directory that is also the current working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A scaffolded ``bar`` project; the cwd is its root."""
    ProjectGenerator().generate("bar", cwd=tmp_path)
    root = tmp_path / "bar"
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def bare_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A ``bar`` directory with controller/model folders but no ``app.py``."""
    root = tmp_path / "bar"
    (root / "lib" / "Bar" / "Controller").mkdir(parents=True)
    (root / "lib" / "Bar" / "Model").mkdir(parents=True)
    (root / "templates").mkdir()
    monkeypatch.chdir(root)
    return root


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def load_module(path: Path, name: str = "generated") -> ModuleType:
    """Import a generated source file by path."""
    spec = importlib.util.spec_from_file_location(name, path)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def load_generated():
    """Return the :func:`load_module` helper."""
    return load_module
