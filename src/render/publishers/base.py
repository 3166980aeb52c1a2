"""Base class for output-format-specific site publishing."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum
from pathlib import Path

from folio.render.elements import Element
from folio.render.pages import Page


class OutputFormat(StrEnum):
    """Available output formats."""

    HTML = "html"
    MARKDOWN = "markdown"


class SitePublisher(ABC):
    """Base class for output-format-specific site publishing."""

    output_format: OutputFormat

    @abstractmethod
    def render(self, node: Element | None) -> str:
        """Serialize an element tree; ``None`` serializes to an empty string."""

    @abstractmethod
    def format_page(self, page: Page, site_title: str) -> str:
        """Format a complete page document."""

    @abstractmethod
    def page_path(self, output_dir: Path, page: Page) -> Path:
        """Compute the output file path for a page."""

    @abstractmethod
    def format_index(self, pages: list[Page], site_title: str) -> str:
        """Generate an index listing every page."""

    @abstractmethod
    def index_path(self, output_dir: Path) -> Path:
        """Compute the output file path for the index."""
