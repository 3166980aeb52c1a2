"""Arrange components into the site's pages."""

from __future__ import annotations

from dataclasses import dataclass

from folio.content.registry import ContentRegistry
from folio.render.components import greeting, profile_card, project_preview, publication_preview
from folio.render.context import DEFAULT_CONTEXT, RenderContext
from folio.render.elements import Element, h
from folio.site.routes import ROUTES, Route


@dataclass(frozen=True)
class Page:
    """A rendered page, ready for a publisher to serialize."""

    slug: str
    title: str
    path: str
    body: Element


def _page(route: Route, title: str, *sections: Element | None, heading: bool = True) -> Page:
    title_el = h("h1", title, class_="page-title") if heading else None
    body = h("main", title_el, *sections, class_=f"page page-{route.slug}")
    return Page(slug=route.slug, title=title, path=route.url, body=body)


def home_page(registry: ContentRegistry, ctx: RenderContext = DEFAULT_CONTEXT) -> Page:
    profile = registry.profile_for(ctx.locale)
    return _page(
        ROUTES.home, profile.full_name, profile_card(profile, ctx), greeting(ctx), heading=False
    )


def projects_page(registry: ContentRegistry, ctx: RenderContext = DEFAULT_CONTEXT) -> Page:
    cards = [project_preview(project, ctx) for project in registry.projects_sorted()]
    grid = h("div", cards, class_="card-grid") if cards else None
    return _page(ROUTES.projects, ROUTES.projects.title, grid)


def blog_page(registry: ContentRegistry, ctx: RenderContext = DEFAULT_CONTEXT) -> Page:
    cards = [
        publication_preview(pub, registry.publisher_data(pub.publisher), ctx)
        for pub in registry.publications_sorted()
    ]
    listing = h("div", cards, class_="card-list") if cards else None
    return _page(ROUTES.blog, ROUTES.blog.title, listing)


def build_pages(registry: ContentRegistry, ctx: RenderContext = DEFAULT_CONTEXT) -> list[Page]:
    """Render every page of the site, home first."""
    return [
        home_page(registry, ctx),
        projects_page(registry, ctx),
        blog_page(registry, ctx),
    ]
