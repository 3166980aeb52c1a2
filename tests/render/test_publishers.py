"""Tests for site publishers."""

from pathlib import Path

import pytest
import yaml

from folio.content.registry import default_registry
from folio.render.elements import h
from folio.render.pages import Page, build_pages
from folio.render.publishers import OutputFormat, create_publisher
from folio.render.publishers.base import SitePublisher
from folio.render.publishers.html import HtmlPublisher, render_html
from folio.render.publishers.markdown import MarkdownPublisher, render_markdown


def _make_page(**kwargs) -> Page:
    defaults = {
        "slug": "projects",
        "title": "Projects",
        "path": "/projects/",
        "body": h("main", h("h1", "Projects"), h("p", "Hello"), class_="page"),
    }
    defaults.update(kwargs)
    return Page(**defaults)


class TestRenderHtml:
    def test_none_is_empty(self):
        assert render_html(None) == ""

    def test_escapes_text(self):
        assert render_html(h("p", "<b>&</b>")) == "<p>&lt;b&gt;&amp;&lt;/b&gt;</p>"

    def test_escapes_attributes(self):
        assert render_html(h("a", "x", href='/a?b="c"')) == '<a href="/a?b=&quot;c&quot;">x</a>'

    def test_void_tags(self):
        assert render_html(h("img", src="a.png", alt="")) == '<img src="a.png" alt="" />'

    def test_nested(self):
        tree = h("ul", h("li", "a"), h("li", "b"), class_="tags")
        assert render_html(tree) == '<ul class="tags"><li>a</li><li>b</li></ul>'


class TestRenderMarkdown:
    def test_none_is_empty(self):
        assert render_markdown(None) == ""

    def test_headings_and_paragraphs(self):
        tree = h("main", h("h1", "Title"), h("p", "Body"))
        assert render_markdown(tree) == "# Title\n\nBody\n"

    def test_links_and_images(self):
        tree = h(
            "div",
            h("p", h("a", "GitHub", href="https://github.com")),
            h("figure", h("img", src="/images/a.png", alt="A")),
        )
        assert render_markdown(tree) == "[GitHub](https://github.com)\n\n![A](/images/a.png)\n"

    def test_lists(self):
        tree = h("ul", h("li", "a"), h("li", "b"))
        assert render_markdown(tree) == "- a\n- b\n"


class TestHtmlPublisher:
    def test_document(self):
        result = HtmlPublisher(lang="zh").format_page(_make_page(), "Site")
        assert result.startswith("<!DOCTYPE html>")
        assert '<html lang="zh">' in result
        assert "<title>Projects · Site</title>" in result
        assert "<p>Hello</p>" in result

    def test_page_path(self):
        pub = HtmlPublisher()
        assert pub.page_path(Path("/out"), _make_page()) == Path("/out/projects/index.html")

    def test_home_page_path(self):
        pub = HtmlPublisher()
        home = _make_page(slug="home", path="/")
        assert pub.page_path(Path("/out"), home) == Path("/out/index.html")

    def test_index(self):
        pub = HtmlPublisher()
        result = pub.format_index([_make_page()], "Site")
        assert '<a href="/projects/">Projects</a>' in result
        assert pub.index_path(Path("/out")) == Path("/out/sitemap.html")

    def test_byte_identical_rerender(self):
        pub = HtmlPublisher()
        first = [pub.format_page(p, "Site") for p in build_pages(default_registry())]
        second = [pub.format_page(p, "Site") for p in build_pages(default_registry())]
        assert first == second


class TestMarkdownPublisher:
    def test_frontmatter(self):
        result = MarkdownPublisher().format_page(_make_page(), "Site")
        assert result.startswith("---\n")
        frontmatter = yaml.safe_load(result.split("---")[1])
        assert frontmatter == {"title": "Projects", "site": "Site", "path": "/projects/"}

    def test_frontmatter_quotes_titles(self):
        page = _make_page(title='Oleksii "Trekhleb" \\ 至今')
        result = MarkdownPublisher().format_page(page, "Ada's \"Site\": notes")
        frontmatter = yaml.safe_load(result.split("---")[1])
        assert frontmatter["title"] == 'Oleksii "Trekhleb" \\ 至今'
        assert frontmatter["site"] == "Ada's \"Site\": notes"

    def test_contains_body(self):
        result = MarkdownPublisher().format_page(_make_page(), "Site")
        assert "# Projects\n\nHello\n" in result

    def test_page_paths(self):
        pub = MarkdownPublisher()
        assert pub.page_path(Path("/out"), _make_page()) == Path("/out/projects.md")
        home = _make_page(slug="home", path="/")
        assert pub.page_path(Path("/out"), home) == Path("/out/index.md")

    def test_index(self):
        pub = MarkdownPublisher()
        result = pub.format_index([_make_page(), _make_page(slug="home", title="Home", path="/")], "Site")
        assert "# Site" in result
        assert "- [Projects](projects.md)" in result
        assert "- [Home](index.md)" in result
        assert pub.index_path(Path("/out")) == Path("/out/README.md")

    def test_real_pages_have_no_wiki_links(self):
        pub = MarkdownPublisher()
        for page in build_pages(default_registry()):
            assert "[[" not in pub.format_page(page, "Site")


class TestCreatePublisher:
    @pytest.mark.parametrize(
        ("fmt", "cls"),
        [(OutputFormat.HTML, HtmlPublisher), ("markdown", MarkdownPublisher)],
    )
    def test_known_formats(self, fmt, cls):
        pub = create_publisher(fmt)
        assert isinstance(pub, cls)
        assert isinstance(pub, SitePublisher)

    def test_lang_passed_to_html(self):
        assert create_publisher("html", lang="zh").lang == "zh"

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            create_publisher("pdf")
