"""Inline directives: component tags in article bodies that render widgets.

Articles embed widgets the way MDX does, with a self-closing component tag on
its own line::

    Some prose.

    <Newsletter />

    <Newsletter title="Bądź na bieżąco" />

Names start with an upper-case letter, which keeps them apart from ordinary
HTML. Attributes are ``key="value"`` pairs and are passed to the widget
template on top of the directive's defaults.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from jinja2 import TemplateError

from inkwell.config.settings import NewsletterSettings
from inkwell.rendering.template_loader import TemplateLoader, default_loader

logger = logging.getLogger(__name__)

_DIRECTIVE_RE = re.compile(
    r"""^\s*<(?P<name>[A-Z][A-Za-z0-9]*)
        (?P<attrs>(?:\s+[A-Za-z_][\w-]*\s*=\s*"[^"]*")*)
        \s*/>\s*$""",
    re.VERBOSE,
)
_ATTR_RE = re.compile(r'([A-Za-z_][\w-]*)\s*=\s*"([^"]*)"')
# Any line holding only a component tag, well-formed or not: single-quoted or
# ``{expression}`` attributes, open/close pairs and stray closing tags.
_CANDIDATE_RE = re.compile(
    r"""^\s*</?(?P<name>[A-Z][\w.]*)
        (?:\s.*)?/?>
        (?:\s*</(?P=name)\s*>)?\s*$""",
    re.VERBOSE,
)


@dataclass(frozen=True, slots=True)
class Directive:
    """A parsed component tag."""

    name: str
    attrs: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class DirectiveSpec:
    """How to render one directive."""

    template: str
    defaults: Mapping[str, Any] = field(default_factory=dict)


def parse_directive(text: str) -> Directive | None:
    """Return the directive in ``text``, or ``None`` if it is not a component tag."""
    match = _DIRECTIVE_RE.match(text)
    if match is None:
        return None
    attrs = dict(_ATTR_RE.findall(match.group("attrs") or ""))
    return Directive(name=match.group("name"), attrs=attrs)


def is_directive_candidate(text: str) -> bool:
    """Whether ``text`` is nothing but a component tag, even one ``parse_directive`` rejects."""
    return _CANDIDATE_RE.match(text) is not None


class DirectiveRegistry:
    """Maps directive names to widget templates."""

    def __init__(self, loader: TemplateLoader | None = None) -> None:
        self._loader = loader
        self._specs: dict[str, DirectiveSpec] = {}

    @property
    def loader(self) -> TemplateLoader:
        if self._loader is None:
            self._loader = default_loader()
        return self._loader

    def register(self, name: str, template: str, defaults: Mapping[str, Any] | None = None) -> None:
        self._specs[name] = DirectiveSpec(template=template, defaults=dict(defaults or {}))

    def resolve(self, name: str) -> DirectiveSpec | None:
        return self._specs.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def names(self) -> list[str]:
        return sorted(self._specs)

    def render(self, directive: Directive) -> str | None:
        """Render ``directive`` to HTML.

        Returns ``None`` when the directive is unknown or its template fails; the
        caller then omits it and keeps rendering the rest of the page.
        """
        spec = self.resolve(directive.name)
        if spec is None:
            logger.warning("Unknown directive <%s />, omitting it", directive.name)
            return None

        context = {**spec.defaults, **directive.attrs}
        try:
            return self.loader.render_template(spec.template, **context)
        except TemplateError as exc:
            logger.warning("Directive <%s /> failed to render: %s", directive.name, exc)
            return None


def build_default_registry(
    newsletter: Mapping[str, Any] | None = None,
    *,
    loader: TemplateLoader | None = None,
) -> DirectiveRegistry:
    """Registry with the widgets articles use, currently the newsletter signup.

    Args:
        newsletter: Default context for ``<Newsletter />`` (``action_url``,
            ``title``, ``description``, ``button_label``).
        loader: Template loader; the bundled templates when omitted.

    """
    if newsletter is None:
        newsletter = NewsletterSettings().model_dump()

    registry = DirectiveRegistry(loader)
    registry.register("Newsletter", "widgets/newsletter.html.jinja", newsletter)
    return registry
