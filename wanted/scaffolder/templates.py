"""Jinja2 template rendering for project scaffolding.

Templates live as ``<id>.j2`` files in the ``templates/`` directory next to
this module.  The fixed catalog is read into memory once, when a
:class:`TemplateRenderer` is built, and served through a ``DictLoader`` so
rendering depends only on the (catalog, context) pair.

Rendering is strict: an id outside the catalog raises
:class:`~wanted.errors.UnknownTemplate` and any variable missing from the
context raises :class:`~wanted.errors.MissingContextKey` instead of being
rendered as an empty string.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from jinja2 import (
    DictLoader,
    Environment,
    StrictUndefined,
    TemplateNotFound,
    UndefinedError,
    select_autoescape,
)

from wanted.errors import MissingContextKey, UnknownTemplate


# ---------------------------------------------------------------------------
# Template catalog
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

CATALOG_IDS: tuple[str, ...] = (
    "readme",
    "gitignore",
    "gitmodules",
    "makefile",
    "pyproject",
    "config",
    "lib",
    "test_helper",
    "test",
)


def load_catalog(template_dir: str | Path | None = None) -> dict[str, str]:
    """Read every catalog template from *template_dir*.

    Returns:
        Mapping of template id to template source text.

    Raises:
        FileNotFoundError: If a catalog template is missing on disk.
    """
    base = Path(template_dir) if template_dir is not None else _DEFAULT_TEMPLATE_DIR
    return {
        template_id: (base / f"{template_id}.j2").read_text(encoding="utf-8")
        for template_id in CATALOG_IDS
    }


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders catalog templates against a context mapping."""

    def __init__(self, catalog: Mapping[str, str] | None = None) -> None:
        if catalog is None:
            catalog = load_catalog()
        self.catalog = dict(catalog)
        self.env = Environment(
            loader=DictLoader(self.catalog),
            undefined=StrictUndefined,
            autoescape=select_autoescape([], default_for_string=False),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["toml_str"] = _toml_str_filter

    def render(self, template_id: str, context: Mapping[str, Any]) -> str:
        """Render the catalog template *template_id* with *context*.

        Args:
            template_id: One of :data:`CATALOG_IDS` (or a key of the custom
                catalog passed to the constructor).
            context: Variables available inside the template.

        Raises:
            UnknownTemplate: If *template_id* is not in the catalog.
            MissingContextKey: If the template references an absent key.
        """
        try:
            template = self.env.get_template(template_id)
        except TemplateNotFound as exc:
            raise UnknownTemplate(
                f"Unknown template {template_id!r}", template_id=template_id
            ) from exc
        try:
            return template.render(**context)
        except UndefinedError as exc:
            raise MissingContextKey(
                f"Template {template_id!r}: {exc.message}", template_id=template_id
            ) from exc

    def render_string(self, template_string: str, context: Mapping[str, Any]) -> str:
        """Render an inline template string with the same strict rules."""
        try:
            return self.env.from_string(template_string).render(**context)
        except UndefinedError as exc:
            raise MissingContextKey(f"Inline template: {exc.message}") from exc

    def list_templates(self) -> list[str]:
        """Return the sorted template ids of the catalog."""
        return sorted(self.catalog)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------


def _toml_str_filter(value: str) -> str:
    """Quote *value* as a TOML basic string."""
    escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
