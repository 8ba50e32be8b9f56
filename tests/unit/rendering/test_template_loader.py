from pathlib import Path

import pytest
from jinja2 import TemplateNotFound, UndefinedError

from inkwell.rendering.template_loader import TemplateLoader, default_loader


@pytest.fixture
def loader(tmp_path: Path) -> TemplateLoader:
    (tmp_path / "card.html.jinja").write_text(
        '<div id="{{ name | slugify }}">{{ label }}</div>', encoding="utf-8"
    )
    return TemplateLoader(tmp_path)


def test_slugify_filter_and_autoescape(loader):
    html = loader.render_template("card.html.jinja", name="Cześć Świecie", label="<b>")
    assert html == '<div id="czesc-swiecie">&lt;b&gt;</div>'


def test_undefined_variables_raise(loader):
    with pytest.raises(UndefinedError):
        loader.render_template("card.html.jinja", name="x")


def test_missing_template(loader):
    with pytest.raises(TemplateNotFound):
        loader.load_template("nope.html.jinja")


def test_default_loader_uses_bundled_templates():
    loader = default_loader()
    assert loader is default_loader()
    assert (loader.template_dir / "author.html.jinja").is_file()
