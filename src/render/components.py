"""Presentational components.

Each component is a pure function from one content value (or ``None``)
to an ``Element`` tree.  A missing entity renders to ``None``; an absent
or empty optional field contributes no section at all.
"""

from __future__ import annotations

from collections.abc import Sequence
from urllib.parse import urlsplit

from folio.content.models import (
    Image,
    Link,
    Profile,
    Project,
    Publication,
    PublisherData,
    Tag,
)
from folio.render.context import DEFAULT_CONTEXT, RenderContext
from folio.render.elements import Child, Element, h
from folio.site.routes import ROUTES

DATE_RANGE_SEPARATOR = " – "


# ---------------------------------------------------------------------------
# Shared building blocks
# ---------------------------------------------------------------------------


def card(*children: Child) -> Element:
    return h("article", *children, class_="card")


def card_media(*children: Child) -> Element | None:
    media = h("div", *children, class_="card-media")
    return media if media.children else None


def card_content(*children: Child) -> Element | None:
    content = h("div", *children, class_="card-content")
    return content if content.children else None


def card_title(*children: Child) -> Element:
    return h("h2", *children, class_="card-title")


def link_label(link: Link) -> str:
    """Display text for a link that carries no label of its own.

    Absolute URLs drop the scheme, a leading ``www.`` and the trailing
    slash; internal paths and other schemes are shown as written.
    """
    if link.label:
        return link.label
    parts = urlsplit(link.url)
    if not parts.netloc:
        return parts.path if parts.scheme else link.url
    host = parts.netloc.removeprefix("www.")
    return f"{host}{parts.path}".rstrip("/")


def hyper_link(link: Link, *children: Child, class_: str | None = None) -> Element:
    """Anchor for a link; explicit children override the link's label."""
    content: tuple[Child, ...] = children or (link_label(link),)
    if link.is_external:
        return h(
            "a",
            *content,
            href=link.url,
            class_=class_,
            target="_blank",
            rel="noopener noreferrer",
        )
    return h("a", *content, href=link.url, class_=class_)


def fluid_image(image: Image | None, ctx: RenderContext = DEFAULT_CONTEXT) -> Element | None:
    if image is None:
        return None
    img = h(
        "img",
        src=ctx.asset_url(image.src_path),
        alt=image.caption or "",
        loading="lazy",
    )
    return h("figure", img, class_="fluid-image")


def date_range(
    start_date: str,
    end_date: str | None = None,
    ctx: RenderContext = DEFAULT_CONTEXT,
) -> Element:
    end = end_date if end_date else ctx.present_label
    return h("span", f"{start_date}{DATE_RANGE_SEPARATOR}{end}", class_="date-range")


def tag_list(tags: Sequence[Tag] | None) -> Element | None:
    if not tags:
        return None
    return h("ul", [h("li", tag.name, class_="tag") for tag in tags], class_="tags")


def summary_lines(lines: Sequence[str] | None) -> Element | None:
    if not lines:
        return None
    return h("div", [h("p", line) for line in lines], class_="summary")


# ---------------------------------------------------------------------------
# Entity previews
# ---------------------------------------------------------------------------


def project_preview(
    project: Project | None, ctx: RenderContext = DEFAULT_CONTEXT
) -> Element | None:
    """card for a portfolio project."""
    if project is None:
        return None

    title: Child = hyper_link(project.link, project.name) if project.link else project.name
    tags = tag_list(project.tags)
    return card(
        card_media(fluid_image(project.cover, ctx)),
        card_content(
            card_title(title),
            summary_lines(project.summary),
            h("div", tags, class_="card-tags") if tags else None,
            h("div", date_range(project.start_date, project.end_date, ctx), class_="card-dates"),
        ),
    )


def publication_preview(
    publication: Publication | None,
    publisher_data: PublisherData | None = None,
    ctx: RenderContext = DEFAULT_CONTEXT,
) -> Element | None:
    """card for an externally published article."""
    if publication is None:
        return None

    logo = fluid_image(publisher_data.logo, ctx) if publisher_data else None
    description = publisher_data.description if publisher_data else None
    publisher = h(
        "div",
        logo,
        h("span", publication.publisher.value, class_="publisher-name"),
        h("span", description, class_="publisher-description") if description else None,
        class_="publisher",
    )
    tags = tag_list(publication.tags)
    return card(
        card_content(
            card_title(hyper_link(publication.link, publication.title)),
            publisher,
            summary_lines(publication.summary),
            h("div", tags, class_="card-tags") if tags else None,
            h("time", publication.date, datetime=publication.date, class_="card-date"),
        ),
    )


def profile_card(
    profile: Profile | None, ctx: RenderContext = DEFAULT_CONTEXT
) -> Element | None:
    """Header block introducing the site owner."""
    if profile is None:
        return None

    social = None
    if profile.social_links:
        social = h(
            "ul",
            [h("li", hyper_link(link), class_="social-link") for link in profile.social_links],
            class_="social-links",
        )
    return h(
        "section",
        h("div", fluid_image(profile.avatar, ctx), class_="avatar") if profile.avatar else None,
        h("h1", profile.full_name, class_="profile-name"),
        h("p", profile.position, class_="position") if profile.position else None,
        h("p", profile.location.name, class_="location") if profile.location else None,
        summary_lines(profile.summary),
        tag_list(profile.tags),
        social,
        class_="profile",
    )


GREETING_TEXT_ZH = (
    "大模型的出现让我们进入了AI时代，也给程序员这一职业带来了新的机遇和挑战。"
    "本网站聚焦于AI赋能，跟大家探讨AI时代的程序员们该如抓住这一历史机遇，"
    "在这一轮的技术革命中找到自己的位置，实现更好的发展。"
)


def greeting(ctx: RenderContext = DEFAULT_CONTEXT) -> Element:
    """Home page greeting paragraph."""
    if ctx.locale == "zh":
        return h("p", GREETING_TEXT_ZH, class_="greeting")

    def inline(link: Link, text: str) -> Element:
        return h("span", hyper_link(link, text, class_="underline"), class_="inline-block")

    return h(
        "p",
        "Welcome! Here you'll find my ",
        inline(ROUTES.projects.link(), "projects"),
        " and ",
        inline(ROUTES.blog.link(), "articles"),
        ".",
        class_="greeting",
    )
