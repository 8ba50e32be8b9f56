import pytest

from inkwell.utils.slugify import slugify, unique_slug


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Hello World!", "hello-world"),
        ("Mockowanie w Jest", "mockowanie-w-jest"),
        ("Café à Paris", "cafe-a-paris"),
        ("../../etc/passwd", "etcpasswd"),
    ],
)
def test_slugify(text, expected):
    assert slugify(text) == expected


def test_slugify_keeps_case_when_asked():
    assert slugify("Hello World", lowercase=False) == "Hello-World"


def test_slugify_truncates_without_trailing_hyphen():
    assert slugify("abc def", max_len=4) == "abc"


def test_slugify_fallback():
    assert slugify("!!!") == "post"
    assert slugify("???", fallback="section") == "section"
    assert slugify(None) == ""


def test_unique_slug():
    assert unique_slug("intro", set()) == "intro"
    assert unique_slug("intro", {"intro"}) == "intro-1"
    assert unique_slug("intro", {"intro", "intro-1"}) == "intro-2"
