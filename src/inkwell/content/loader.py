"""Load authored articles from disk and answer listing queries.

The loader is a one-shot, synchronous read of a fixed set of files. Once built,
a :class:`ContentLoader` is an immutable index: nothing is written back and no
query mutates it.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Iterator
from pathlib import Path

from inkwell.content.exceptions import (
    ArticleNotFoundError,
    ContentError,
    ContentValidationError,
    DuplicateSlugError,
)
from inkwell.content.frontmatter import parse_frontmatter_file
from inkwell.content.models import Article, ArticleSummary
from inkwell.utils.slugify import slugify

logger = logging.getLogger(__name__)

ARTICLE_SUFFIXES = frozenset({".md", ".mdx", ".markdown"})
INDEX_STEMS = frozenset({"index", "_index"})


def _newest_first(article: Article) -> tuple[int, str]:
    # Negated ordinal sorts newest first while keeping slug ascending on ties.
    return (-article.published_at.toordinal(), article.slug)


def resolve_slug(path: Path, explicit: object = None) -> str:
    """Return the slug for an article file.

    An explicit ``slug`` front-matter value wins; otherwise the file stem is
    used, or the parent directory name for ``index.md`` style bundles.
    """
    if isinstance(explicit, str) and explicit.strip():
        return slugify(explicit)
    stem = path.stem
    if stem.lower() in INDEX_STEMS and path.parent.name:
        stem = path.parent.name
    return slugify(stem)


def load_article(path: Path, *, encoding: str = "utf-8") -> Article:
    """Parse one article file.

    Raises:
        FrontMatterError: If the header is malformed.
        MissingMetadataError: If a required key is missing.
        InvalidMetadataError: If a value fails validation.
        OSError: If the file cannot be read.

    """
    metadata, body = parse_frontmatter_file(path, encoding=encoding)
    slug = resolve_slug(path, metadata.get("slug"))
    return Article.from_metadata(metadata, body, slug=slug, source_path=path)


class ContentLoader:
    """Immutable, in-memory index over a fixed set of articles."""

    def __init__(self, articles: Iterable[Article]) -> None:
        self._articles: tuple[Article, ...] = tuple(articles)
        self._by_slug: dict[str, Article] = {}
        for article in self._articles:
            existing = self._by_slug.get(article.slug)
            if existing is not None:
                raise DuplicateSlugError(article.slug, [existing.source_path, article.source_path])
            self._by_slug[article.slug] = article

        self._published: tuple[Article, ...] = tuple(
            sorted((a for a in self._articles if a.is_published), key=_newest_first)
        )

    @classmethod
    def from_directory(cls, directory: Path, *, encoding: str = "utf-8") -> ContentLoader:
        """Load every article file under ``directory``.

        Files are read in path order. All authoring errors are collected before
        anything is raised, so one run reports every broken file.

        Args:
            directory: Root of the content tree; searched recursively.
            encoding: Encoding of the article files.

        Raises:
            FileNotFoundError: If ``directory`` does not exist.
            ContentValidationError: If any file fails to load.

        """
        if not directory.is_dir():
            msg = f"Content directory not found: {directory}"
            raise FileNotFoundError(msg)

        paths = sorted(
            p for p in directory.rglob("*") if p.is_file() and p.suffix.lower() in ARTICLE_SUFFIXES
        )
        articles: list[Article] = []
        errors: list[ContentError] = []
        seen: dict[str, Article] = {}

        for path in paths:
            try:
                article = load_article(path, encoding=encoding)
            except ContentError as exc:
                errors.append(exc)
                continue
            except (OSError, UnicodeDecodeError) as exc:
                errors.append(ContentError(f"{path}: cannot read file: {exc}"))
                continue

            previous = seen.get(article.slug)
            if previous is not None:
                errors.append(DuplicateSlugError(article.slug, [previous.source_path, path]))
                continue
            seen[article.slug] = article
            articles.append(article)

        if errors:
            for error in errors:
                logger.error("%s", error)
            raise ContentValidationError(errors)

        logger.info("Loaded %d article(s) from %s", len(articles), directory)
        return cls(articles)

    def __len__(self) -> int:
        return len(self._articles)

    def __iter__(self) -> Iterator[Article]:
        return iter(self._articles)

    def __contains__(self, slug: object) -> bool:
        return slug in self._by_slug

    def list_published(self) -> list[Article]:
        """Published articles, newest ``published_at`` first."""
        return list(self._published)

    def list_by_category(self, category: str) -> list[Article]:
        """Published articles in ``category`` (case-insensitive), newest first."""
        wanted = category.strip().casefold()
        return [a for a in self._published if a.category.casefold() == wanted]

    def list_popular(self, limit: int | None = None) -> list[Article]:
        """Published articles flagged ``popular``, newest first."""
        popular = [a for a in self._published if a.popular]
        return popular if limit is None else popular[: max(0, limit)]

    def get_by_slug(self, slug: str) -> Article:
        """Return the article with ``slug``, drafts included.

        Raises:
            ArticleNotFoundError: If no article has that slug.

        """
        try:
            return self._by_slug[slug]
        except KeyError:
            raise ArticleNotFoundError(slug) from None

    def categories(self) -> dict[str, int]:
        """Published article count per category, most used first.

        Categories are grouped case-insensitively, like :meth:`list_by_category`,
        under the spelling of the newest article.
        """
        counts: Counter[str] = Counter()
        labels: dict[str, str] = {}
        for article in self._published:
            key = article.category.strip().casefold()
            labels.setdefault(key, article.category)
            counts[key] += 1
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        return {labels[key]: count for key, count in ranked}

    def summaries(self) -> list[ArticleSummary]:
        """Listing records for :meth:`list_published`."""
        return [a.summary() for a in self._published]
