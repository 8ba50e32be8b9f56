"""Authored content: front matter, the article model and the loader."""

from inkwell.content.exceptions import (
    ArticleNotFoundError,
    ContentError,
    ContentValidationError,
    DuplicateSlugError,
    FrontMatterError,
    InvalidMetadataError,
    MissingMetadataError,
)
from inkwell.content.loader import ContentLoader, load_article
from inkwell.content.models import Article, ArticleSummary

__all__ = [
    "Article",
    "ArticleNotFoundError",
    "ArticleSummary",
    "ContentError",
    "ContentLoader",
    "ContentValidationError",
    "DuplicateSlugError",
    "FrontMatterError",
    "InvalidMetadataError",
    "MissingMetadataError",
    "load_article",
]
