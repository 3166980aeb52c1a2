"""Site publisher factory and registry."""

from __future__ import annotations

from folio.render.publishers.base import OutputFormat, SitePublisher


def create_publisher(output_format: OutputFormat | str, *, lang: str = "en") -> SitePublisher:
    """Create a publisher for the given output format.

    Args:
        output_format: The target format.
        lang: Document language, used where the format records one.

    Returns:
        A SitePublisher instance for the format.

    Raises:
        ValueError: If the format is unknown.
    """
    if isinstance(output_format, str):
        output_format = OutputFormat(output_format)

    from folio.render.publishers.html import HtmlPublisher
    from folio.render.publishers.markdown import MarkdownPublisher

    publishers: dict[OutputFormat, SitePublisher] = {
        OutputFormat.HTML: HtmlPublisher(lang=lang),
        OutputFormat.MARKDOWN: MarkdownPublisher(),
    }

    if output_format in publishers:
        return publishers[output_format]

    raise ValueError(f"Unknown output format: {output_format!r}")


__all__ = ["OutputFormat", "SitePublisher", "create_publisher"]
