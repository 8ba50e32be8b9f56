"""Rendering: article bodies, widget directives and the Atom feed."""

from inkwell.rendering.body import BodyRenderer, CodeSample, Heading, RenderedBody, default_renderer
from inkwell.rendering.directives import (
    Directive,
    DirectiveRegistry,
    build_default_registry,
    parse_directive,
)
from inkwell.rendering.template_loader import TemplateLoader

__all__ = [
    "BodyRenderer",
    "CodeSample",
    "Directive",
    "DirectiveRegistry",
    "Heading",
    "RenderedBody",
    "TemplateLoader",
    "build_default_registry",
    "default_renderer",
    "parse_directive",
]
