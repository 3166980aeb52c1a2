"""HTML publisher, one static document per page."""

from __future__ import annotations

import html
from pathlib import Path

from folio.render.elements import Element, Node
from folio.render.pages import Page
from folio.render.publishers.base import OutputFormat, SitePublisher

VOID_TAGS = frozenset({"br", "hr", "img", "input", "link", "meta"})


def render_html(node: Node | None) -> str:
    """Serialize an element tree to HTML, escaping text and attributes."""
    if node is None:
        return ""
    if isinstance(node, str):
        return html.escape(node, quote=False)
    attrs = "".join(f' {key}="{html.escape(value, quote=True)}"' for key, value in node.attrs)
    if node.tag in VOID_TAGS:
        return f"<{node.tag}{attrs} />"
    inner = "".join(render_html(child) for child in node.children)
    return f"<{node.tag}{attrs}>{inner}</{node.tag}>"


class HtmlPublisher(SitePublisher):
    """Formats pages as standalone HTML documents."""

    output_format = OutputFormat.HTML

    def __init__(self, lang: str = "en") -> None:
        self.lang = lang

    def render(self, node: Element | None) -> str:
        return render_html(node)

    def format_page(self, page: Page, site_title: str) -> str:
        return self._document(f"{page.title} · {site_title}", render_html(page.body))

    def page_path(self, output_dir: Path, page: Page) -> Path:
        section = page.path.strip("/")
        if not section:
            return output_dir / "index.html"
        return output_dir / section / "index.html"

    def format_index(self, pages: list[Page], site_title: str) -> str:
        items = "".join(
            f'<li><a href="{html.escape(p.path)}">{html.escape(p.title)}</a></li>'
            for p in pages
        )
        return self._document(f"Sitemap · {site_title}", f'<main class="sitemap"><ul>{items}</ul></main>')

    def index_path(self, output_dir: Path) -> Path:
        return output_dir / "sitemap.html"

    def _document(self, title: str, body: str) -> str:
        lines = [
            "<!DOCTYPE html>",
            f'<html lang="{html.escape(self.lang)}">',
            "<head>",
            '<meta charset="utf-8" />',
            '<meta name="viewport" content="width=device-width, initial-scale=1" />',
            f"<title>{html.escape(title, quote=False)}</title>",
            "</head>",
            "<body>",
            body,
            "</body>",
            "</html>",
            "",
        ]
        return "\n".join(lines)
