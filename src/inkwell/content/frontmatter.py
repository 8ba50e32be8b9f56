"""Helpers for parsing YAML front matter from article files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import frontmatter
import yaml

from inkwell.content.exceptions import FrontMatterError

logger = logging.getLogger(__name__)


def parse_frontmatter(content: str, *, source: str | Path = "<string>") -> tuple[dict[str, Any], str]:
    """Parse YAML front matter using python-frontmatter.

    Args:
        content: Markdown content that may include front matter.
        source: Name used in error messages, usually the file path.

    Returns:
        Tuple of (metadata dict, body string). Content without a header yields an
        empty dict and the whole text as body.

    Raises:
        FrontMatterError: If the header is not valid YAML or is not a mapping.

    """
    try:
        parsed = frontmatter.loads(content)
    except yaml.YAMLError as exc:
        raise FrontMatterError(source, str(exc).splitlines()[0] if str(exc) else "YAML error") from exc
    except (TypeError, ValueError) as exc:
        # python-frontmatter fails this way on scalar or list headers.
        raise FrontMatterError(source, str(exc)) from exc

    raw_metadata = parsed.metadata
    if raw_metadata is None:
        metadata: dict[str, Any] = {}
    elif not isinstance(raw_metadata, dict):
        raise FrontMatterError(source, f"expected a mapping, got {type(raw_metadata).__name__}")
    else:
        metadata = dict(raw_metadata)

    body = parsed.content if isinstance(parsed.content, str) else str(parsed.content)
    logger.debug("Parsed front matter from %s: %s", source, sorted(metadata))
    return metadata, body


def parse_frontmatter_file(path: Path, *, encoding: str = "utf-8") -> tuple[dict[str, Any], str]:
    """Read an article file and parse its front matter.

    Raises:
        OSError: If the file cannot be read.
        FrontMatterError: If the header is malformed.

    """
    content = path.read_text(encoding=encoding)
    return parse_frontmatter(content, source=path)
