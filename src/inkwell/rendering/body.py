"""Render article bodies from Markdown to HTML.

Rendering is a pure transformation: the same source always produces the same
:class:`RenderedBody`, and nothing outside the returned value is touched. Code
samples are displayed, never executed.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Final

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml, unescapeAll
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from inkwell.rendering.directives import (
    DirectiveRegistry,
    build_default_registry,
    is_directive_candidate,
    parse_directive,
)
from inkwell.utils.slugify import slugify, unique_slug

if TYPE_CHECKING:
    from collections.abc import Sequence

    from markdown_it.renderer import RendererHTML
    from markdown_it.rules_block import StateBlock
    from markdown_it.rules_core import StateCore
    from markdown_it.token import Token

    from inkwell.config.settings import InkwellConfig

logger = logging.getLogger(__name__)

TOC_LEVELS: Final[frozenset[int]] = frozenset({2, 3})
_LANGUAGE_RE = re.compile(r"[\w+#.-]+")

# Keys of the per-render ``env`` mapping shared by the rules below.
_REGISTRY = "inkwell_registry"
_FORMATTER = "inkwell_formatter"
_HEADINGS = "inkwell_headings"
_ANCHORS = "inkwell_anchors"
_CODE_SAMPLES = "inkwell_code_samples"
_DIRECTIVES = "inkwell_directives"


@dataclass(frozen=True, slots=True)
class Heading:
    level: int
    text: str
    anchor: str


@dataclass(frozen=True, slots=True)
class CodeSample:
    """A fenced code block, kept exactly as authored."""

    language: str | None
    source: str


@dataclass(frozen=True, slots=True)
class RenderedBody:
    """Displayable form of an article body."""

    html: str
    headings: tuple[Heading, ...] = ()
    code_samples: tuple[CodeSample, ...] = ()
    directives: tuple[str, ...] = ()


def _fence_language(info: str) -> str | None:
    match = _LANGUAGE_RE.match(unescapeAll(info).strip()) if info else None
    return match.group(0).lower() if match else None


def _highlight(source: str, language: str | None, formatter: HtmlFormatter | None) -> str | None:
    if formatter is None or not language:
        return None
    try:
        lexer = get_lexer_by_name(language, stripnl=False)
    except ClassNotFound:
        logger.debug("No lexer for %r, rendering code sample as plain text", language)
        return None
    return highlight(source, lexer, formatter)


def _inline_text(token: Token) -> str:
    children = token.children or []
    text = "".join(child.content for child in children if child.type in {"text", "code_inline"})
    return (text or token.content).strip()


def _render_directive(text: str, env: dict[str, Any]) -> str | None:
    """Render ``text`` if it is a directive; ``None`` means it is not one."""
    directive = parse_directive(text)
    if directive is None:
        if is_directive_candidate(text):
            logger.warning("Malformed directive %r, omitting it", text.strip())
            return ""
        return None
    registry: DirectiveRegistry = env[_REGISTRY]
    html = registry.render(directive)
    if html is None:
        return ""
    env[_DIRECTIVES].append(directive.name)
    return html + "\n"


def _directive_block(state: StateBlock, start_line: int, end_line: int, silent: bool) -> bool:
    # A line holding only a component tag is a block of its own, never part of a paragraph.
    if state.sCount[start_line] - state.blkIndent >= 4:
        return False
    start = state.bMarks[start_line] + state.tShift[start_line]
    line = state.src[start : state.eMarks[start_line]]
    if not is_directive_candidate(line):
        return False
    if silent:
        return True

    state.line = start_line + 1
    token = state.push("inkwell_directive", "", 0)
    token.content = line
    token.map = [start_line, state.line]
    token.block = True
    return True


def _anchor_headings(state: StateCore) -> None:
    headings: list[Heading] = state.env[_HEADINGS]
    taken: set[str] = state.env[_ANCHORS]
    tokens = state.tokens
    for idx, token in enumerate(tokens):
        if token.type != "heading_open" or idx + 1 >= len(tokens):
            continue
        text = _inline_text(tokens[idx + 1])
        anchor = unique_slug(slugify(text, fallback="section"), taken)
        taken.add(anchor)
        token.attrSet("id", anchor)
        level = int(token.tag[1:])
        if level in TOC_LEVELS:
            headings.append(Heading(level=level, text=text, anchor=anchor))


def _render_fence(
    renderer: RendererHTML, tokens: Sequence[Token], idx: int, options: Any, env: dict[str, Any]
) -> str:
    token = tokens[idx]
    language = _fence_language(token.info)
    env[_CODE_SAMPLES].append(CodeSample(language=language, source=token.content))

    highlighted = _highlight(token.content, language, env[_FORMATTER])
    if highlighted is not None:
        return f'<div class="code-sample" data-language="{escapeHtml(language or "")}">{highlighted}</div>\n'

    class_attr = f' class="language-{escapeHtml(language)}"' if language else ""
    return f"<pre><code{class_attr}>{escapeHtml(token.content)}</code></pre>\n"


def _render_html_block(
    renderer: RendererHTML, tokens: Sequence[Token], idx: int, options: Any, env: dict[str, Any]
) -> str:
    # A raw HTML block runs until the next blank line, so directives and
    # ordinary markup can share one block.
    parts = []
    for line in tokens[idx].content.splitlines(keepends=True):
        rendered = _render_directive(line, env)
        parts.append(line if rendered is None else rendered)
    return "".join(parts)


def _render_directive_token(
    renderer: RendererHTML, tokens: Sequence[Token], idx: int, options: Any, env: dict[str, Any]
) -> str:
    return _render_directive(tokens[idx].content, env) or ""


def _render_html_inline(
    renderer: RendererHTML, tokens: Sequence[Token], idx: int, options: Any, env: dict[str, Any]
) -> str:
    # Widgets are block content; a component tag inside running text is dropped.
    content = tokens[idx].content
    if is_directive_candidate(content):
        logger.warning("Directive %r is not on its own line, omitting it", content.strip())
        return ""
    return content


class BodyRenderer:
    """Markdown-to-HTML renderer for article bodies.

    CommonMark with tables and raw HTML, heading anchors, Pygments highlighting
    of fenced code and widget directives resolved through a
    :class:`~inkwell.rendering.directives.DirectiveRegistry`.
    """

    def __init__(
        self,
        registry: DirectiveRegistry | None = None,
        *,
        highlight: bool = True,
        pygments_style: str = "default",
    ) -> None:
        self.registry = registry if registry is not None else build_default_registry()
        self._formatter = self._build_formatter(pygments_style) if highlight else None

        self._md = MarkdownIt("commonmark", {"html": True}).enable("table")
        self._md.block.ruler.before(
            "html_block",
            "inkwell_directive",
            _directive_block,
            {"alt": ["paragraph", "reference", "blockquote"]},
        )
        self._md.core.ruler.push("inkwell_heading_anchors", _anchor_headings)
        self._md.add_render_rule("fence", _render_fence)
        self._md.add_render_rule("inkwell_directive", _render_directive_token)
        self._md.add_render_rule("html_block", _render_html_block)
        self._md.add_render_rule("html_inline", _render_html_inline)

    @classmethod
    def from_config(cls, config: InkwellConfig) -> BodyRenderer:
        registry = build_default_registry(config.newsletter.model_dump())
        return cls(
            registry,
            highlight=config.render.highlight,
            pygments_style=config.render.pygments_style,
        )

    @staticmethod
    def _build_formatter(style: str) -> HtmlFormatter:
        try:
            return HtmlFormatter(style=style, cssclass="highlight", wrapcode=True)
        except ClassNotFound:
            logger.warning("Unknown Pygments style %r, using 'default'", style)
            return HtmlFormatter(style="default", cssclass="highlight", wrapcode=True)

    @property
    def stylesheet(self) -> str:
        """CSS for highlighted code samples (empty when highlighting is off)."""
        if self._formatter is None:
            return ""
        return self._formatter.get_style_defs(".highlight")

    def render(self, source: str) -> RenderedBody:
        """Render a Markdown body.

        Unknown directives are omitted with a warning; they never fail the render.
        """
        env: dict[str, Any] = {
            _REGISTRY: self.registry,
            _FORMATTER: self._formatter,
            _HEADINGS: [],
            _ANCHORS: set(),
            _CODE_SAMPLES: [],
            _DIRECTIVES: [],
        }
        html = self._md.render(source or "", env)
        return RenderedBody(
            html=html,
            headings=tuple(env[_HEADINGS]),
            code_samples=tuple(env[_CODE_SAMPLES]),
            directives=tuple(env[_DIRECTIVES]),
        )


@lru_cache(maxsize=1)
def default_renderer() -> BodyRenderer:
    """Shared renderer with default settings."""
    return BodyRenderer()
