"""Single-artifact generation for ``trickster generate``.

Writes one controller, model, or page template into an existing project.
The project namespace is never taken from the command line: it is inferred
from the name of the working directory.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from trickster_cli.errors import UnknownTypeError, UsageError
from trickster_cli.utils import console, detect_namespace, print_hint, print_success, write_file

from .templates import TemplateRenderer


class ArtifactType(str, Enum):
    """Kinds of artifact ``generate`` can produce."""
    CONTROLLER = "controller"
    MODEL = "model"
    TEMPLATE = "template"


ARTIFACT_TYPES: list[str] = [t.value for t in ArtifactType]


class ArtifactRequest(BaseModel):
    """A validated request to generate one artifact."""

    type: ArtifactType
    name: str = Field(..., min_length=1)
    namespace: str = Field(..., min_length=1)

    @property
    def relative_path(self) -> Path:
        """Where the artifact is written, relative to the project root."""
        if self.type is ArtifactType.CONTROLLER:
            return Path("lib") / self.namespace / "Controller" / f"{self.name}.py"
        if self.type is ArtifactType.MODEL:
            return Path("lib") / self.namespace / "Model" / f"{self.name}.py"
        return Path("templates") / f"{self.name}.html"

    @property
    def template_id(self) -> str:
        return "page" if self.type is ArtifactType.TEMPLATE else self.type.value


class ComponentGenerator:
    """Renders one artifact from its fixed template into the project."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def generate(
        self,
        artifact_type: str | None,
        name: str | None,
        *,
        namespace: str | None = None,
        cwd: str | Path | None = None,
    ) -> Path:
        """Generate a single artifact.

        Args:
            artifact_type: ``controller``, ``model`` or ``template``.
            name: Class or template name, used verbatim.
            namespace: Override for the detected project namespace.
            cwd: Project root.  Defaults to the current working directory.

        Returns:
            Path of the written file.

        Raises:
            UsageError: If either argument is missing.
            UnknownTypeError: If *artifact_type* is not supported.
            OSError: If the file cannot be written (e.g. the target
                directory does not exist).
        """
        if not artifact_type or not name:
            raise UsageError(
                "Type and name required",
                hint=(
                    "Usage: trickster generate <type> <name>\n"
                    f"Types: {', '.join(ARTIFACT_TYPES)}"
                ),
            )
        if artifact_type not in ARTIFACT_TYPES:
            raise UnknownTypeError(artifact_type, ARTIFACT_TYPES)

        base = Path(cwd) if cwd is not None else Path(".")
        request = ArtifactRequest(
            type=ArtifactType(artifact_type),
            name=name,
            namespace=namespace or detect_namespace(base),
        )

        content = self.renderer.render(
            request.template_id,
            {"namespace": request.namespace, "name": request.name},
        )
        write_file(base / request.relative_path, content)

        print_success(f"Created {request.type.value}: {request.relative_path.as_posix()}")
        console.print()
        for line in usage_hint(request):
            print_hint(line)
        return base / request.relative_path


def usage_hint(request: ArtifactRequest) -> list[str]:
    """Lines telling the user how to wire *request*'s artifact into the app."""
    ns, name = request.namespace, request.name
    var = name.lower()
    if request.type is ArtifactType.CONTROLLER:
        return [
            "Add to your app.py:",
            f"  from {ns}.Controller.{name} import {name}",
            f"  {var}_controller = {name}()",
            "and to its routes list:",
            f'  Route("/{var}", {var}_controller.index),',
            f'  Route("/{var}/{{id}}", {var}_controller.show),',
        ]
    if request.type is ArtifactType.MODEL:
        return [
            "Use in your app:",
            f"  from {ns}.Model.{name} import {name}",
            f"  {var}_model = {name}()",
        ]
    return [
        "Render in your route:",
        f'  templates.TemplateResponse(request, "{name}.html", {{"title": "Page Title"}})',
    ]
