from __future__ import annotations

import os
from collections.abc import Callable
from datetime import date
from pathlib import Path
from typing import Any

import pytest
import yaml

NEWSLETTER_BODY = """\
Mockowanie modułów w Jest potrafi zaskoczyć.

## Konfiguracja

<Newsletter />

```js
jest.mock('./api');
```

## Podsumowanie

Koniec.
"""


def render_article_file(metadata: dict[str, Any], body: str) -> str:
    header = yaml.safe_dump(metadata, allow_unicode=True, sort_keys=False)
    return f"---\n{header}---\n\n{body}"


@pytest.fixture(autouse=True)
def _clean_inkwell_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("INKWELL_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def write_article(tmp_path: Path) -> Callable[..., Path]:
    """Write an article file under ``tmp_path / 'posts'`` and return its path."""
    posts = tmp_path / "posts"

    def _write(name: str, body: str = "Treść artykułu.", **metadata: Any) -> Path:
        defaults: dict[str, Any] = {
            "title": name.replace("-", " ").title(),
            "category": "Frontend",
            "publishedAt": date(2021, 6, 28),
            "isPublished": True,
            "excerpt": f"Zajawka {name}",
        }
        defaults.update(metadata)
        path = posts / name
        if path.suffix not in {".md", ".mdx", ".markdown"}:
            path = path.with_suffix(".mdx")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_article_file(defaults, body), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def content_dir(write_article: Callable[..., Path], tmp_path: Path) -> Path:
    """Three articles: two published, one draft newer than both."""
    write_article(
        "mockowanie-w-jest",
        body=NEWSLETTER_BODY,
        title="Mockowanie w Jest",
        category="Testowanie",
        publishedAt=date(2021, 6, 28),
        popular=True,
        image="/images/jest.png",
    )
    write_article(
        "szkic",
        title="Szkic",
        category="Testowanie",
        publishedAt=date(2021, 7, 1),
        isPublished=False,
    )
    write_article(
        "css-grid.md",
        title="CSS Grid od podstaw",
        category="CSS",
        publishedAt=date(2021, 5, 10),
    )
    return tmp_path / "posts"
