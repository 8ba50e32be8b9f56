"""Inkwell: content engine for a personal blog."""

from inkwell.content.loader import ContentLoader
from inkwell.content.models import Article, ArticleSummary

__version__ = "0.1.0"
__all__ = [
    "Article",
    "ArticleSummary",
    "ContentLoader",
]
