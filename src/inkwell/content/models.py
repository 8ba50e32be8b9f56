"""Article data model."""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from datetime import date, datetime
from functools import cached_property
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from inkwell.config.settings import DEFAULT_WORDS_PER_MINUTE
from inkwell.content.exceptions import InvalidMetadataError, MissingMetadataError

if TYPE_CHECKING:
    from inkwell.rendering.body import RenderedBody

# Front-matter keys an article cannot be listed without.
REQUIRED_KEYS: Final[tuple[str, ...]] = ("title", "category", "publishedAt", "isPublished", "excerpt")
KNOWN_KEYS: Final[frozenset[str]] = frozenset({*REQUIRED_KEYS, "popular", "image", "slug"})

_FENCE_RE = re.compile(r"^(`{3,}|~{3,}).*?^\1[ \t]*$", re.MULTILINE | re.DOTALL)
_WORD_RE = re.compile(r"\w+", re.UNICODE)


def estimate_reading_time(text: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> int:
    """Return whole minutes needed to read ``text``, never less than one.

    Fenced code samples are not counted.
    """
    prose = _FENCE_RE.sub(" ", text or "")
    words = len(_WORD_RE.findall(prose))
    return max(1, math.ceil(words / max(1, words_per_minute)))


class ArticleSummary(BaseModel):
    """Listing record for a published article."""

    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    excerpt: str
    category: str
    published_at: date
    image: str | None = None
    popular: bool = False


class Article(BaseModel):
    """One authored article: front-matter metadata plus the Markdown body."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    slug: str = Field(min_length=1)
    title: str
    category: str
    published_at: date = Field(alias="publishedAt")
    is_published: bool = Field(alias="isPublished")
    excerpt: str
    popular: bool = False
    image: str | None = None
    body_source: str = ""
    source_path: Path | None = None
    extra: dict[str, Any] = Field(default_factory=dict)

    @field_validator("title", "category", "excerpt", mode="before")
    @classmethod
    def _require_text(cls, value: Any) -> Any:
        # YAML reads `title: 2048` as a number.
        if isinstance(value, int | float) and not isinstance(value, bool):
            value = str(value)
        if isinstance(value, str):
            value = value.strip()
            if not value:
                msg = "must not be blank"
                raise ValueError(msg)
        return value

    @field_validator("published_at", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any) -> Any:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str):
            try:
                return datetime.fromisoformat(value.strip().replace("Z", "+00:00")).date()
            except ValueError:
                return value
        return value

    @field_validator("image", mode="before")
    @classmethod
    def _blank_image_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @classmethod
    def from_metadata(
        cls,
        metadata: Mapping[str, Any],
        body: str,
        *,
        slug: str,
        source_path: Path | None = None,
    ) -> Article:
        """Build an article from parsed front matter.

        Args:
            metadata: Front-matter mapping, keyed by the authored names
                (``publishedAt``, ``isPublished``, ...).
            body: Markdown body following the header.
            slug: Identifier resolved by the caller.
            source_path: File the article was read from, for error messages.

        Raises:
            MissingMetadataError: A required key is absent or null.
            InvalidMetadataError: A value fails validation.

        """
        source = source_path if source_path is not None else slug
        missing = [key for key in REQUIRED_KEYS if metadata.get(key) is None]
        if missing:
            raise MissingMetadataError(source, missing)

        fields = {key: metadata[key] for key in KNOWN_KEYS - {"slug"} if key in metadata}
        extra = {key: value for key, value in metadata.items() if key not in KNOWN_KEYS}
        try:
            return cls.model_validate(
                {
                    **fields,
                    "slug": slug,
                    "body_source": body,
                    "source_path": source_path,
                    "extra": extra,
                }
            )
        except ValidationError as exc:
            raise InvalidMetadataError(source, exc.errors()) from exc

    def summary(self) -> ArticleSummary:
        """Return the record shown in listings."""
        return ArticleSummary(
            slug=self.slug,
            title=self.title,
            excerpt=self.excerpt,
            category=self.category,
            published_at=self.published_at,
            image=self.image,
            popular=self.popular,
        )

    @cached_property
    def body(self) -> RenderedBody:
        """Rendered body, produced on first access with the default renderer."""
        from inkwell.rendering.body import default_renderer

        return default_renderer().render(self.body_source)

    @property
    def reading_time(self) -> int:
        """Minutes to read the body at the default rate; see :meth:`minutes_to_read`."""
        return self.minutes_to_read()

    def minutes_to_read(self, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> int:
        """Minutes to read the body at ``words_per_minute`` (``render.words_per_minute``)."""
        return estimate_reading_time(self.body_source, words_per_minute)
