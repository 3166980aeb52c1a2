"""Plain markdown publisher for GitHub Pages and repositories."""

from __future__ import annotations

import json
import re
from pathlib import Path

from folio.render.elements import Element, Node
from folio.render.pages import Page
from folio.render.publishers.base import OutputFormat, SitePublisher

_HEADING_RE = re.compile(r"^h([1-6])$")


def _inline(node: Node) -> str:
    if isinstance(node, str):
        return node
    if node.tag == "img":
        return f"![{node.attr('alt') or ''}]({node.attr('src') or ''})"
    text = "".join(_inline(child) for child in node.children)
    if node.tag == "a":
        return f"[{text}]({node.attr('href') or ''})"
    return text


def _blocks(node: Node) -> list[str]:
    if isinstance(node, str):
        return [node] if node.strip() else []
    heading = _HEADING_RE.match(node.tag)
    if heading:
        return [f"{'#' * int(heading.group(1))} {_inline(node)}"]
    if node.tag == "p":
        return [_inline(node)]
    if node.tag == "ul":
        items = [f"- {_inline(li)}" for li in node.children]
        return ["\n".join(items)] if items else []
    if node.tag in ("a", "img", "span", "time"):
        return [_inline(node)]
    blocks: list[str] = []
    for child in node.children:
        blocks.extend(_blocks(child))
    return blocks


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def render_markdown(node: Node | None) -> str:
    """Serialize an element tree to markdown blocks separated by blank lines."""
    if node is None:
        return ""
    blocks = _blocks(node)
    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"


class MarkdownPublisher(SitePublisher):
    """Formats pages as plain markdown with minimal frontmatter."""

    output_format = OutputFormat.MARKDOWN

    def render(self, node: Element | None) -> str:
        return render_markdown(node)

    def format_page(self, page: Page, site_title: str) -> str:
        lines: list[str] = ["---"]
        # JSON strings are valid YAML double-quoted scalars.
        lines.append(f"title: {_quote(page.title)}")
        lines.append(f"site: {_quote(site_title)}")
        lines.append(f"path: {_quote(page.path)}")
        lines.append("---")
        lines.append("")
        return "\n".join(lines) + render_markdown(page.body)

    def page_path(self, output_dir: Path, page: Page) -> Path:
        section = page.path.strip("/")
        return output_dir / f"{section or 'index'}.md"

    def format_index(self, pages: list[Page], site_title: str) -> str:
        lines: list[str] = [f"# {site_title}", ""]
        for page in pages:
            lines.append(f"- [{page.title}]({page.path.strip('/') or 'index'}.md)")
        lines.append("")
        return "\n".join(lines)

    def index_path(self, output_dir: Path) -> Path:
        return output_dir / "README.md"
