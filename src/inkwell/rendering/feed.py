"""Atom feed serialization for the published listing."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, date, datetime, time
from xml.etree.ElementTree import Element, SubElement, tostring

from inkwell.content.models import Article

ATOM_NS = "http://www.w3.org/2005/Atom"


def _as_datetime(value: date) -> datetime:
    return datetime.combine(value, time.min, tzinfo=UTC)


def _iso(value: datetime) -> str:
    return value.isoformat().replace("+00:00", "Z")


def article_url(base_url: str, slug: str) -> str:
    return f"{base_url.rstrip('/')}/{slug}"


def build_feed(
    articles: Iterable[Article],
    *,
    title: str,
    base_url: str,
    author_name: str,
    limit: int | None = None,
    language: str | None = None,
) -> str:
    """Serialize published articles to an Atom XML string, newest first.

    Drafts are skipped even if passed in. ``updated`` is the newest publication
    date, so the same articles always produce the same document.
    """
    published = sorted(
        (a for a in articles if a.is_published),
        key=lambda a: (-a.published_at.toordinal(), a.slug),
    )
    if limit is not None:
        published = published[: max(0, limit)]

    base_url = base_url.rstrip("/")
    root = Element("feed", attrib={"xmlns": ATOM_NS})
    if language:
        root.set("xml:lang", language)
    SubElement(root, "id").text = f"{base_url}/"
    SubElement(root, "title").text = title
    updated = _as_datetime(published[0].published_at) if published else datetime(1970, 1, 1, tzinfo=UTC)
    SubElement(root, "updated").text = _iso(updated)
    SubElement(root, "link", attrib={"href": f"{base_url}/", "rel": "alternate"})
    SubElement(root, "link", attrib={"href": f"{base_url}/feed.xml", "rel": "self"})
    author_el = SubElement(root, "author")
    SubElement(author_el, "name").text = author_name

    for article in published:
        url = article_url(base_url, article.slug)
        stamp = _iso(_as_datetime(article.published_at))
        entry_el = SubElement(root, "entry")
        SubElement(entry_el, "id").text = url
        SubElement(entry_el, "title").text = article.title
        SubElement(entry_el, "link", attrib={"href": url, "rel": "alternate"})
        SubElement(entry_el, "published").text = stamp
        SubElement(entry_el, "updated").text = stamp
        SubElement(entry_el, "category", attrib={"term": article.category})
        SubElement(entry_el, "summary").text = article.excerpt
        if article.image:
            image_href = article.image if "://" in article.image else f"{base_url}/{article.image.lstrip('/')}"
            SubElement(entry_el, "link", attrib={"href": image_href, "rel": "enclosure"})

    return "<?xml version='1.0' encoding='UTF-8'?>\n" + tostring(root, encoding="unicode")
