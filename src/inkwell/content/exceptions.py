"""Exceptions raised while loading authored content.

Every error here is an authoring error: it is reported to the author when the
content set is loaded and is never recovered from at render time.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from inkwell.exceptions import InkwellError


class ContentError(InkwellError):
    """Base exception for content loading errors."""


class FrontMatterError(ContentError):
    """Raised when the front-matter header cannot be parsed."""

    def __init__(self, source: str | Path, reason: str) -> None:
        self.source = str(source)
        self.reason = reason
        super().__init__(f"{self.source}: malformed front matter: {reason}")


class MissingMetadataError(ContentError):
    """Raised when required front-matter keys are absent."""

    def __init__(self, source: str | Path, missing: Iterable[str]) -> None:
        self.source = str(source)
        self.missing = tuple(missing)
        super().__init__(f"{self.source}: missing required front matter: {', '.join(self.missing)}")


class InvalidMetadataError(ContentError):
    """Raised when a front-matter value has the wrong type or shape."""

    def __init__(self, source: str | Path, errors: Sequence[dict[str, Any]]) -> None:
        self.source = str(source)
        self.errors = list(errors)
        details = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ())) or 'metadata'}: {err.get('msg', 'invalid')}"
            for err in self.errors
        )
        super().__init__(f"{self.source}: invalid front matter: {details}")


class DuplicateSlugError(ContentError):
    """Raised when two articles resolve to the same slug."""

    def __init__(self, slug: str, sources: Iterable[str | Path | None]) -> None:
        self.slug = slug
        self.sources = tuple(str(source) for source in sources if source is not None)
        where = f" ({', '.join(self.sources)})" if self.sources else ""
        super().__init__(f"Duplicate article slug '{slug}'{where}")


class ContentValidationError(ContentError):
    """Aggregates every authoring error found in one content directory."""

    def __init__(self, errors: Sequence[ContentError]) -> None:
        self.errors = list(errors)
        lines = "\n".join(f"  - {error}" for error in self.errors)
        super().__init__(f"Found {len(self.errors)} content error(s):\n{lines}")


class ArticleNotFoundError(ContentError):
    """Raised when no article has the requested slug."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"Article not found: '{slug}'")
