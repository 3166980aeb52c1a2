"""Unified configuration loaded from .folio.toml, env vars, and CLI flags.

Loading order: defaults → TOML file → env vars → CLI flags.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from folio.errors import ConfigError
from folio.render.context import RenderContext
from folio.render.publishers.base import OutputFormat

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".folio.toml"
CONFIG_SEARCH_PATHS = [
    Path("."),
]
GLOBAL_CONFIG_PATH = Path.home() / ".config" / "folio" / "config.toml"


class OutputConfig(BaseModel):
    """[output] section."""

    directory: str = "./site"
    format: OutputFormat = OutputFormat.HTML


class SiteConfig(BaseModel):
    """[site] section."""

    title: str = "Portfolio"
    locale: str = "en"
    asset_root: str = "/images"


class ContentConfig(BaseModel):
    """[content] section. An empty path means the built-in content."""

    path: str = ""


class FolioConfig(BaseModel):
    """Top-level configuration model for the site build."""

    output: OutputConfig = Field(default_factory=OutputConfig)
    site: SiteConfig = Field(default_factory=SiteConfig)
    content: ContentConfig = Field(default_factory=ContentConfig)

    def render_context(self) -> RenderContext:
        """Build the context components render with."""
        return RenderContext(asset_root=self.site.asset_root, locale=self.site.locale)


def load_config(path: str | Path | None = None) -> FolioConfig:
    """Load configuration from a TOML file.

    Search order:
    1. Explicit path (if provided)
    2. .folio.toml in CWD
    3. ~/.config/folio/config.toml

    Then overlay environment variables.

    Args:
        path: Explicit path to a TOML file.

    Returns:
        Merged FolioConfig.

    Raises:
        ConfigError: If a file or environment value does not validate.
    """
    data: dict[str, object] = {}

    if path is not None:
        toml_path = Path(path)
        if toml_path.exists():
            data = _load_toml(toml_path)
        else:
            logger.warning("Config file not found: %s", toml_path)
    else:
        for search_dir in CONFIG_SEARCH_PATHS:
            candidate = search_dir / CONFIG_FILENAME
            if candidate.exists():
                data = _load_toml(candidate)
                logger.info("Loaded config from %s", candidate)
                break
        if not data and GLOBAL_CONFIG_PATH.exists():
            data = _load_toml(GLOBAL_CONFIG_PATH)
            logger.info("Loaded config from %s", GLOBAL_CONFIG_PATH)

    config = _validate(data) if data else FolioConfig()

    return _apply_env_vars(config)


def merge_cli_overrides(config: FolioConfig, **cli_kwargs: object) -> FolioConfig:
    """Overlay explicitly-set CLI flags onto the config.

    Only overrides values where the CLI flag was explicitly provided
    (i.e., not None).

    Args:
        config: Base config.
        **cli_kwargs: CLI flag values, e.g. ``output_directory``, ``locale``.

    Returns:
        Updated config with CLI overrides applied.

    Raises:
        ConfigError: If an override does not validate.
    """
    data = config.model_dump()

    mapping: dict[str, tuple[str, str]] = {
        "output_directory": ("output", "directory"),
        "output_format": ("output", "format"),
        "locale": ("site", "locale"),
        "asset_root": ("site", "asset_root"),
        "title": ("site", "title"),
        "content_path": ("content", "path"),
    }

    for key, value in cli_kwargs.items():
        if value is None:
            continue
        if key in mapping:
            section, field = mapping[key]
            data[section][field] = str(value) if isinstance(value, Path) else value

    return _validate(data)


def _load_toml(path: Path) -> dict[str, object]:
    """Load a TOML file and return the data dict."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as exc:
        logger.warning("Failed to parse %s: %s", path, exc)
        return {}


def _apply_env_vars(config: FolioConfig) -> FolioConfig:
    """Apply environment variable overrides to config."""
    data = config.model_dump()

    env_mapping: dict[str, tuple[str, str]] = {
        "FOLIO_OUTPUT_DIR": ("output", "directory"),
        "FOLIO_FORMAT": ("output", "format"),
        "FOLIO_LOCALE": ("site", "locale"),
        "FOLIO_ASSET_ROOT": ("site", "asset_root"),
        "FOLIO_SITE_TITLE": ("site", "title"),
        "FOLIO_CONTENT_PATH": ("content", "path"),
    }

    for env_var, (section, field) in env_mapping.items():
        value = os.environ.get(env_var)
        if value is not None:
            data[section][field] = value

    return _validate(data)


def _validate(data: dict[str, object]) -> FolioConfig:
    try:
        return FolioConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError.from_pydantic(exc) from exc
