"""Trickster scaffolder -- generates projects and single artifacts.

Quick usage::

    from trickster_cli.scaffolder import ComponentGenerator, ProjectGenerator

    ProjectGenerator().generate("blog")
    ComponentGenerator().generate("controller", "Post", cwd="blog")
"""

from trickster_cli.scaffolder.components import ArtifactRequest, ArtifactType, ComponentGenerator
from trickster_cli.scaffolder.generator import ProjectGenerator, ProjectSpec, build_project_spec
from trickster_cli.scaffolder.templates import TemplateRenderer

__all__ = [
    "ArtifactRequest",
    "ArtifactType",
    "ComponentGenerator",
    "ProjectGenerator",
    "ProjectSpec",
    "TemplateRenderer",
    "build_project_spec",
]
