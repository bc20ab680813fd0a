"""Project scaffolding for ``trickster new``.

Builds a ``ProjectSpec`` for an application name (the directory tree plus
the fixed set of files, in creation order) and materialises it below the
working directory.  Preconditions are checked before anything is written;
once writing starts, the first filesystem error aborts the whole command and
whatever was already created stays on disk.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from rich.markup import escape

from trickster_cli.config import DEFAULT_PORT
from trickster_cli.errors import AlreadyExistsError, UsageError
from trickster_cli.utils import (
    console,
    make_dir,
    print_created,
    print_hint,
    print_success,
    ucfirst,
    write_file,
)

from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Specification models
# ---------------------------------------------------------------------------


class FileSpec(BaseModel):
    """One generated file: where it goes and how it is rendered."""

    path: str = Field(..., description="Path relative to the working directory")
    template_id: str = Field(..., description="Key in the template registry")
    context: dict[str, str] = Field(default_factory=dict)
    executable: bool = False


class ProjectSpec(BaseModel):
    """Everything ``new`` creates, in the order it is created."""

    name: str = Field(..., min_length=1, description="Application (and root directory) name")
    namespace: str = Field(..., description="Package directory under lib/")
    directories: list[str] = Field(default_factory=list)
    files: list[FileSpec] = Field(default_factory=list)


def build_project_spec(name: str) -> ProjectSpec:
    """Describe the project tree for application *name*.

    Directories come first and are ordered parent-before-child, so every
    file's directory exists by the time the file is written.
    """
    namespace = ucfirst(name)
    ctx = {"app_name": name}

    directories = [
        name,
        f"{name}/lib",
        f"{name}/lib/{namespace}",
        f"{name}/lib/{namespace}/Controller",
        f"{name}/lib/{namespace}/Model",
        f"{name}/templates",
        f"{name}/templates/layouts",
        f"{name}/public",
        f"{name}/public/css",
        f"{name}/public/js",
        f"{name}/t",
    ]
    files = [
        FileSpec(path=f"{name}/app.py", template_id="entry_point", context=ctx, executable=True),
        FileSpec(path=f"{name}/pyproject.toml", template_id="manifest", context=ctx),
        FileSpec(path=f"{name}/.gitignore", template_id="gitignore"),
        FileSpec(path=f"{name}/README.md", template_id="readme", context=ctx),
        FileSpec(path=f"{name}/templates/layouts/main.html", template_id="layout"),
        FileSpec(path=f"{name}/public/css/style.css", template_id="stylesheet"),
        FileSpec(path=f"{name}/public/js/app.js", template_id="script"),
        FileSpec(path=f"{name}/templates/home.html", template_id="home", context=ctx),
        FileSpec(path=f"{name}/t/test_app.py", template_id="test_stub", context=ctx),
    ]
    return ProjectSpec(name=name, namespace=namespace, directories=directories, files=files)


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Scaffolds a new Trickster application.

    Given an application name, generates:
    - ``lib/<Namespace>/Controller`` and ``lib/<Namespace>/Model`` packages
    - ``app.py`` entry point with home route and static file mounts
    - ``pyproject.toml``, ``.gitignore`` and ``README.md``
    - Jinja2 layout and home page, stylesheet and script
    - A smoke test under ``t/``
    """

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def generate(self, name: str | None, cwd: str | Path | None = None) -> Path:
        """Generate the complete project structure.

        Args:
            name: Application name; also the new root directory.
            cwd: Directory to create the project in.  Defaults to the
                current working directory.

        Returns:
            Path to the generated project root.

        Raises:
            UsageError: If *name* is empty.
            AlreadyExistsError: If *name* already exists in *cwd*.
            OSError: If any directory or file cannot be created.
        """
        if not name:
            raise UsageError(
                "Application name required",
                hint="Usage: trickster new <name>",
            )

        base = Path(cwd) if cwd is not None else Path(".")
        if (base / name).exists() or (base / name).is_symlink():
            raise AlreadyExistsError(name)

        spec = build_project_spec(name)

        console.print(f"Creating new Trickster application: [bold]{escape(name)}[/bold]")
        console.print()

        # 1. Directory tree
        for directory in spec.directories:
            make_dir(base / directory)
            print_created(f"{directory}/")

        # 2. Files
        for file_spec in spec.files:
            content = self.renderer.render(file_spec.template_id, file_spec.context)
            write_file(base / file_spec.path, content, executable=file_spec.executable)
            print_created(file_spec.path)

        self._print_next_steps(name)
        return base / name

    # -- Output ------------------------------------------------------------

    @staticmethod
    def _print_next_steps(name: str) -> None:
        console.print()
        print_success("Application created successfully!")
        console.print()
        console.print("Next steps:")
        print_hint(f"  cd {name}")
        print_hint('  pip install -e ".[test]"')
        print_hint("  trickster server")
        console.print()
        console.print(f"Visit http://localhost:{DEFAULT_PORT}", highlight=False)
