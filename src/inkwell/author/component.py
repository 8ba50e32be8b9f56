"""Author card: portrait, biography and social links."""

from __future__ import annotations

from inkwell.author.profile import AuthorProfile, load_author_profile
from inkwell.rendering.template_loader import TemplateLoader, default_loader

AUTHOR_TEMPLATE = "author.html.jinja"


def render_author(profile: AuthorProfile | None = None, *, loader: TemplateLoader | None = None) -> str:
    """Render the author card to HTML.

    With no arguments the bundled profile is used. Output depends only on the
    profile, so repeated renders are identical.
    """
    profile = profile if profile is not None else load_author_profile()
    loader = loader if loader is not None else default_loader()
    return loader.render_template(AUTHOR_TEMPLATE, profile=profile)
