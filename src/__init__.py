"""folio: typed portfolio and blog content rendered to static pages."""

__version__ = "0.1.0"
