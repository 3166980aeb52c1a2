"""Internal route table.

Every internal ``Link`` on the site is produced from here so page paths
live in one place.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from folio.content.models import Link


class Route(BaseModel):
    """A top-level site section."""

    model_config = ConfigDict(frozen=True)

    slug: str
    path: str
    title: str

    @property
    def url(self) -> str:
        return f"{self.path}/"

    def link(self, label: str | None = None) -> Link:
        return Link(url=self.url, label=label)


class Routes(BaseModel):
    """The fixed set of sections the site renders."""

    model_config = ConfigDict(frozen=True)

    home: Route
    projects: Route
    blog: Route

    def all(self) -> list[Route]:
        return [self.home, self.projects, self.blog]


ROUTES = Routes(
    home=Route(slug="home", path="", title="Home"),
    projects=Route(slug="projects", path="/projects", title="Projects"),
    blog=Route(slug="blog", path="/blog", title="Blog"),
)
