"""Jinja2 template rendering for project scaffolding.

Provides the ``TemplateRenderer`` class which loads Jinja2 templates from the
``trickster_cli/scaffolder/templates/`` directory and renders them with a
substitution map, plus the registry of every template the generators use and
the placeholder keys each one requires.

Substituted values are inserted verbatim.  Nothing is escaped, so a value
containing quotes or markup ends up in the generated file unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# Template registry
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TemplateSpec:
    key: str
    path: str  # relative to the template directory
    required_placeholders: tuple[str, ...] = ()
    static: bool = False  # copied as-is, never passed through Jinja2


REGISTRY: dict[str, TemplateSpec] = {
    # Project skeleton
    "entry_point": TemplateSpec("entry_point", "project/app.py.j2", ("app_name",)),
    "manifest": TemplateSpec("manifest", "project/pyproject.toml.j2", ("app_name",)),
    "gitignore": TemplateSpec("gitignore", "project/gitignore", static=True),
    "readme": TemplateSpec("readme", "project/README.md.j2", ("app_name",)),
    "layout": TemplateSpec("layout", "project/templates/layouts/main.html.j2"),
    "stylesheet": TemplateSpec("stylesheet", "project/public/css/style.css", static=True),
    "script": TemplateSpec("script", "project/public/js/app.js", static=True),
    "home": TemplateSpec("home", "project/templates/home.html.j2", ("app_name",)),
    "test_stub": TemplateSpec("test_stub", "project/t/test_app.py.j2", ("app_name",)),
    # Single artifacts
    "controller": TemplateSpec("controller", "components/controller.py.j2", ("namespace", "name")),
    "model": TemplateSpec("model", "components/model.py.j2", ("namespace", "name")),
    "page": TemplateSpec("page", "components/page.html.j2", ("name",)),
}


class MissingPlaceholderError(KeyError):
    """A substitution map lacks a key its template requires."""


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    Templates are addressed by their registry key.  A render fails before
    touching Jinja2 when a required placeholder is missing from the
    substitution map, and fails inside Jinja2 on any other undefined name.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )

    # -- Rendering ---------------------------------------------------------

    def render(self, template_id: str, context: dict[str, str] | None = None) -> str:
        """Render a registered template with the provided substitution map.

        Args:
            template_id: Key in :data:`REGISTRY` (e.g. ``"controller"``).
            context: Placeholder key -> replacement string.

        Returns:
            The rendered content as a string.

        Raises:
            KeyError: If *template_id* is not registered.
            MissingPlaceholderError: If a required key is absent.
        """
        spec = REGISTRY[template_id]
        context = context or {}
        missing = [key for key in spec.required_placeholders if key not in context]
        if missing:
            raise MissingPlaceholderError(
                f"Template '{template_id}' requires: {', '.join(missing)}"
            )
        if spec.static:
            return self.source(spec.path)
        template = self.env.get_template(spec.path)
        return template.render(**context)

    def source(self, template_path: str) -> str:
        """Return the raw text of a template file without rendering it."""
        text, _, _ = self.env.loader.get_source(self.env, template_path)
        return text
