"""Tests for article body rendering."""

import pytest

from inkwell.config.settings import InkwellConfig
from inkwell.rendering.body import BodyRenderer, CodeSample, Heading, default_renderer

ARTICLE = """\
Wstęp do mockowania.

## Konfiguracja

<Newsletter />

```js
const a = 1 < 2;
jest.mock('./api');
```

## Konfiguracja

Koniec.
"""


@pytest.fixture
def renderer() -> BodyRenderer:
    return BodyRenderer()


def test_renders_prose(renderer):
    body = renderer.render("Hello *world*")
    assert body.html == "<p>Hello <em>world</em></p>\n"


def test_empty_body(renderer):
    body = renderer.render("")
    assert body.html == ""
    assert body.headings == ()


def test_newsletter_directive_is_resolved(renderer):
    body = renderer.render(ARTICLE)
    assert '<aside class="newsletter">' in body.html
    assert "<Newsletter" not in body.html
    assert body.directives == ("Newsletter",)


def test_unknown_directive_is_omitted_and_rest_renders(renderer):
    body = renderer.render("Przed.\n\n<Poll />\n\nPo.\n")
    assert "Poll" not in body.html
    assert "<p>Przed.</p>" in body.html
    assert "<p>Po.</p>" in body.html
    assert body.directives == ()


def test_directive_right_after_paragraph_is_its_own_block(renderer):
    body = renderer.render("Zapisz się:\n<Newsletter />\nDzięki!\n")
    assert body.html.startswith('<p>Zapisz się:</p>\n<aside class="newsletter">')
    assert body.html.endswith("</aside>\n<p>Dzięki!</p>\n")
    assert body.directives == ("Newsletter",)


def test_directive_in_running_text_is_dropped(renderer, caplog):
    body = renderer.render("Zapisz się <Newsletter /> teraz.\n")
    assert body.html == "<p>Zapisz się  teraz.</p>\n"
    assert body.directives == ()
    assert "not on its own line" in caplog.text


@pytest.mark.parametrize(
    "tag",
    [
        "<Newsletter title='Bądź na bieżąco' />",
        "<Poll count={3} />",
        "<Poll></Poll>",
        "<Poll>",
    ],
)
def test_malformed_directive_is_omitted(renderer, tag, caplog):
    body = renderer.render(f"Przed.\n\n{tag}\n\nPo.\n")
    assert body.html == "<p>Przed.</p>\n<p>Po.</p>\n"
    assert body.directives == ()
    assert "Malformed directive" in caplog.text


def test_malformed_directive_inside_html_block_is_omitted(renderer):
    body = renderer.render("<div class=\"note\">\n<Poll count={3} />\n</div>\n")
    assert body.html == '<div class="note">\n</div>\n'


def test_directive_in_code_is_left_alone(renderer):
    body = renderer.render("```jsx\n<Newsletter />\n```\n\n    <Newsletter />\n")
    assert "newsletter__form" not in body.html
    assert "&lt;Newsletter" in body.html
    assert body.directives == ()


def test_ordinary_html_passes_through(renderer):
    body = renderer.render('<div class="note">\n<Newsletter />\n</div>\n')
    assert '<div class="note">' in body.html
    assert "</div>" in body.html
    assert '<aside class="newsletter">' in body.html


def test_code_samples_are_kept_verbatim(renderer):
    body = renderer.render(ARTICLE)
    assert body.code_samples == (CodeSample(language="js", source="const a = 1 < 2;\njest.mock('./api');\n"),)


def test_code_is_highlighted(renderer):
    body = renderer.render(ARTICLE)
    assert '<div class="code-sample" data-language="js">' in body.html
    assert 'class="highlight"' in body.html
    assert "1 < 2" not in body.html


def test_unknown_language_falls_back_to_plain_block(renderer):
    body = renderer.render("```nosuchlanguage\nx < y\n```\n")
    assert '<pre><code class="language-nosuchlanguage">x &lt; y\n</code></pre>' in body.html
    assert body.code_samples[0].language == "nosuchlanguage"


def test_fence_without_language(renderer):
    body = renderer.render("```\nplain\n```\n")
    assert "<pre><code>plain\n</code></pre>" in body.html
    assert body.code_samples == (CodeSample(language=None, source="plain\n"),)


def test_fence_info_attributes_are_ignored(renderer):
    body = renderer.render('```js title="app.js"\nlet x;\n```\n')
    assert body.code_samples[0].language == "js"


def test_highlighting_can_be_disabled():
    body = BodyRenderer(highlight=False).render("```js\nlet x = 1;\n```\n")
    assert body.html == '<pre><code class="language-js">let x = 1;\n</code></pre>\n'


def test_headings_get_unique_anchors(renderer):
    body = renderer.render(ARTICLE)
    assert body.headings == (
        Heading(level=2, text="Konfiguracja", anchor="konfiguracja"),
        Heading(level=2, text="Konfiguracja", anchor="konfiguracja-1"),
    )
    assert '<h2 id="konfiguracja">' in body.html
    assert '<h2 id="konfiguracja-1">' in body.html


def test_table_of_contents_levels(renderer):
    body = renderer.render("# Tytuł\n\n## Część `kod`\n\n### Szczegóły\n\n#### Drobiazg\n")
    assert [(h.level, h.text) for h in body.headings] == [(2, "Część kod"), (3, "Szczegóły")]
    assert '<h4 id="drobiazg">' in body.html


def test_tables_are_enabled(renderer):
    body = renderer.render("| a | b |\n|---|---|\n| 1 | 2 |\n")
    assert "<table>" in body.html


def test_rendering_is_deterministic(renderer):
    assert renderer.render(ARTICLE) == renderer.render(ARTICLE)


def test_unknown_pygments_style_falls_back():
    renderer = BodyRenderer(pygments_style="no-such-style")
    assert ".highlight" in renderer.stylesheet


def test_from_config_uses_newsletter_settings(tmp_path):
    (tmp_path / ".inkwell.toml").write_text(
        '[newsletter]\naction_url = "https://example.com/join"\n\n[render]\nhighlight = false\n',
        encoding="utf-8",
    )
    renderer = BodyRenderer.from_config(InkwellConfig.load(tmp_path))
    body = renderer.render("<Newsletter />\n\n```js\nx\n```\n")

    assert 'action="https://example.com/join"' in body.html
    assert '<pre><code class="language-js">' in body.html
    assert renderer.stylesheet == ""


def test_default_renderer_is_shared():
    assert default_renderer() is default_renderer()
