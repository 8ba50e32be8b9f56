"""Canonical slugify implementation for Inkwell."""

from __future__ import annotations

from collections.abc import Container

from pymdownx.slugs import slugify as _md_slugify

# Pre-configured slugifiers, shared by every call.
slugify_lower = _md_slugify(case="lower", separator="-", normalize="NFKD")
slugify_case = _md_slugify(separator="-", normalize="NFKD")


def slugify(text: str | None, max_len: int = 80, *, lowercase: bool = True, fallback: str = "post") -> str:
    """Convert text to a URL-safe slug using Python Markdown heading semantics.

    Produces ASCII-only slugs; accented letters are transliterated where Unicode
    decomposition allows it and dropped otherwise.

    Args:
        text: Input text to slugify
        max_len: Maximum length of output slug (default 80)
        lowercase: Whether to lowercase the slug (default True)
        fallback: Returned when nothing URL-safe is left of ``text``

    Returns:
        Safe slug string suitable for URLs and file names

    Examples:
        >>> slugify("Hello World!")
        'hello-world'
        >>> slugify("Testowanie w Jest")
        'testowanie-w-jest'
        >>> slugify("Café à Paris")
        'cafe-a-paris'
        >>> slugify("../../etc/passwd")
        'etcpasswd'

    """
    if text is None:
        return ""

    slugifier = slugify_lower if lowercase else slugify_case
    slug = slugifier(text, sep="-")

    # NFKD alone does not guarantee ASCII (e.g. "ł").
    slug = slug.encode("ascii", "ignore").decode("ascii")

    slug = slug or fallback
    if len(slug) > max_len:
        slug = slug[:max_len]

    return slug.strip("-") or fallback


def unique_slug(base: str, taken: Container[str]) -> str:
    """Return ``base`` or the first ``base-N`` (N >= 1) not present in ``taken``."""
    if base not in taken:
        return base
    counter = 1
    while f"{base}-{counter}" in taken:
        counter += 1
    return f"{base}-{counter}"
