"""Tests for the author card."""

from pathlib import Path

import pytest

from inkwell.author.component import render_author
from inkwell.author.profile import AuthorProfile, AuthorProfileError, load_author_profile

PROFILE_YAML = """\
name: Ada Lovelace
portrait:
  src: /images/ada.png
  alt: Ada Lovelace
bio: Pisze o <maszynach> & algorytmach.
social_links:
  - platform: github
    url: https://github.com/ada
  - platform: mastodon
    label: Mastodon
    url: https://example.social/@ada
"""


@pytest.fixture
def profile_file(tmp_path: Path) -> Path:
    path = tmp_path / "author.yml"
    path.write_text(PROFILE_YAML, encoding="utf-8")
    return path


class TestBundledProfile:
    def test_loads(self):
        profile = load_author_profile()
        assert profile.name == "Olaf Sulich"
        assert profile.portrait.src == "/images/olaf-circle.png"
        assert (profile.portrait.width, profile.portrait.height) == (200, 200)
        assert profile.bio.startswith("Olaf jest Frontend Developerem")
        assert profile.heading == "O autorze"
        assert [link.platform for link in profile.social_links] == ["github", "linkedin", "twitter", "instagram"]

    def test_is_a_singleton(self):
        assert load_author_profile() is load_author_profile()


class TestProfileFile:
    def test_label_defaults_to_platform(self, profile_file):
        profile = load_author_profile(profile_file)
        assert [link.label for link in profile.social_links] == ["github", "Mastodon"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(AuthorProfileError):
            load_author_profile(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("name: [unclosed", encoding="utf-8")
        with pytest.raises(AuthorProfileError):
            load_author_profile(path)

    def test_invalid_link(self, tmp_path):
        path = tmp_path / "bad-link.yml"
        path.write_text(PROFILE_YAML.replace("https://github.com/ada", "not a url"), encoding="utf-8")
        with pytest.raises(AuthorProfileError) as excinfo:
            load_author_profile(path)
        assert "social_links" in str(excinfo.value)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(AuthorProfileError):
            load_author_profile(path)


class TestRenderAuthor:
    def test_default_render(self):
        html = render_author()

        assert html.startswith('<section class="author">')
        assert '<h2 class="visually-hidden">O autorze</h2>' in html
        assert 'src="/images/olaf-circle.png"' in html
        assert 'alt="Olaf Sulich"' in html
        assert 'width="200"' in html
        assert "nosi śmieszny kapelusz" in html

    def test_render_is_deterministic(self):
        assert render_author() == render_author()

    def test_links_are_outbound_and_ordered(self, profile_file):
        html = render_author(load_author_profile(profile_file))

        assert html.count('target="_blank" rel="noopener noreferrer"') == 2
        assert html.index("https://github.com/ada") < html.index("https://example.social/@ada")
        assert "social-links__item--mastodon" in html

    def test_bio_is_escaped(self, profile_file):
        html = render_author(load_author_profile(profile_file))
        assert "Pisze o &lt;maszynach&gt; &amp; algorytmach." in html

    def test_profile_without_links(self):
        profile = AuthorProfile.model_validate(
            {"name": "Ada", "portrait": {"src": "/a.png", "alt": "Ada"}, "bio": "Bio"}
        )
        html = render_author(profile)
        assert "<ul" not in html
        assert "<p class=\"author__text\">Bio</p>" in html
