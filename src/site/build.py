"""Static site build: render every page and write it to disk."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from folio.config import FolioConfig
from folio.content.registry import ContentRegistry, default_registry, load_registry
from folio.render.pages import build_pages
from folio.render.publishers import OutputFormat, create_publisher

logger = logging.getLogger(__name__)


class BuildResult(BaseModel):
    """Outcome of a site build."""

    output_dir: Path
    written: list[Path] = Field(default_factory=list)
    pages: int = 0


def registry_from_config(config: FolioConfig) -> ContentRegistry:
    """Load the configured content file, or the built-in content if none is set."""
    if config.content.path:
        return load_registry(config.content.path)
    return default_registry()


def build_site(
    registry: ContentRegistry,
    config: FolioConfig,
    output_format: OutputFormat | str | None = None,
) -> BuildResult:
    """Render all pages through a publisher and write them under the output directory.

    Args:
        registry: Validated site content.
        config: Site configuration.
        output_format: Overrides ``config.output.format`` when given.

    Returns:
        BuildResult listing every file written.
    """
    fmt = output_format or config.output.format
    publisher = create_publisher(fmt, lang=config.site.locale)
    ctx = config.render_context()
    output_dir = Path(config.output.directory)

    pages = build_pages(registry, ctx)
    result = BuildResult(output_dir=output_dir, pages=len(pages))

    for page in pages:
        path = publisher.page_path(output_dir, page)
        _write(path, publisher.format_page(page, config.site.title))
        result.written.append(path)

    index = publisher.index_path(output_dir)
    _write(index, publisher.format_index(pages, config.site.title))
    result.written.append(index)

    logger.info("Built %d page(s) as %s into %s", len(pages), publisher.output_format, output_dir)
    return result


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.debug("Wrote %s", path)
