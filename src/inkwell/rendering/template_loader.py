"""Jinja2 template loader for HTML fragments.

Templates ship inside the package under ``inkwell/rendering/templates``.
"""

from __future__ import annotations

from functools import lru_cache
from importlib.resources import files
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, select_autoescape

from inkwell.utils.slugify import slugify


class TemplateLoader:
    """Loads and renders the package's Jinja2 templates.

    Autoescaping is on for ``.html`` and ``.xml`` templates; undefined variables
    raise instead of rendering empty strings.
    """

    def __init__(self, template_dir: Path | None = None) -> None:
        """Initialize TemplateLoader.

        Args:
            template_dir: Path to template directory. Defaults to the templates
                bundled with ``inkwell.rendering``.

        """
        if template_dir is None:
            template_dir = Path(str(files("inkwell.rendering").joinpath("templates")))

        self.template_dir = template_dir
        self.env = Environment(
            loader=FileSystemLoader(self.template_dir),
            autoescape=select_autoescape(enabled_extensions=("html", "xml", "jinja")),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
        )
        self._register_filters()

    def _register_filters(self) -> None:
        self.env.filters["slugify"] = slugify

    def load_template(self, template_name: str) -> Template:
        """Load a template by name.

        Raises:
            TemplateNotFound: If template does not exist

        """
        return self.env.get_template(template_name)

    def render_template(self, template_name: str, **context: Any) -> str:
        """Load and render a template with context."""
        template = self.load_template(template_name)
        return template.render(**context)


@lru_cache(maxsize=1)
def default_loader() -> TemplateLoader:
    """Shared loader over the bundled templates."""
    return TemplateLoader()
