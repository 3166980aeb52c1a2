"""Content domain — entity models and the registries that hold site content.

Models are pure, frozen Pydantic types; registries bundle the authored
instances and validate content files before anything is rendered.
"""

from folio.content.models import (
    Image,
    Link,
    Location,
    Profile,
    Project,
    Publication,
    Publisher,
    PublisherData,
    Tag,
    parse_date_string,
)
from folio.content.registry import ContentRegistry, default_registry, load_registry

__all__ = [
    "ContentRegistry",
    "Image",
    "Link",
    "Location",
    "Profile",
    "Project",
    "Publication",
    "Publisher",
    "PublisherData",
    "Tag",
    "default_registry",
    "load_registry",
    "parse_date_string",
]
