"""Tests for presentational components."""

import inspect

import pytest

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
)
from folio.render import components
from folio.render.components import (
    card,
    card_content,
    card_media,
    card_title,
    date_range,
    fluid_image,
    greeting,
    hyper_link,
    link_label,
    profile_card,
    project_preview,
    publication_preview,
    tag_list,
)
from folio.render.context import RenderContext
from folio.render.publishers.html import render_html


def _make_project(**kwargs) -> Project:
    defaults = {
        "name": "Demo",
        "summary": ["One line."],
        "start_date": "2023-01-01",
    }
    defaults.update(kwargs)
    return Project(**defaults)


def _make_publication(**kwargs) -> Publication:
    defaults = {
        "title": "Self-parking car",
        "summary": ["Genetic algorithm."],
        "link": Link(url="https://itnext.io/self-parking-car"),
        "date": "2021-11-01",
        "publisher": Publisher.ITNEXT,
    }
    defaults.update(kwargs)
    return Publication(**defaults)


class TestDateRange:
    def test_open_ended(self):
        assert date_range("2023-01-01").text == "2023-01-01 – present"

    def test_closed(self):
        assert date_range("2021-08-01", "2021-09-30").text == "2021-08-01 – 2021-09-30"

    def test_localized_present_label(self):
        ctx = RenderContext(locale="zh")
        assert date_range("2023-01-01", None, ctx).text == "2023-01-01 – 至今"

    def test_unknown_locale_falls_back_to_english(self):
        assert date_range("2023", None, RenderContext(locale="fr")).text == "2023 – present"


class TestFluidImage:
    def test_resolves_against_asset_root(self):
        el = fluid_image(Image(src_path="projects/a.png", caption="A"))
        img = el.children[0]
        assert img.attr("src") == "/images/projects/a.png"
        assert img.attr("alt") == "A"

    def test_custom_asset_root(self):
        ctx = RenderContext(asset_root="https://cdn.example.com/assets/")
        img = fluid_image(Image(src_path="a.png"), ctx).children[0]
        assert img.attr("src") == "https://cdn.example.com/assets/a.png"

    def test_missing_caption_gives_empty_alt(self):
        img = fluid_image(Image(src_path="a.png")).children[0]
        assert img.attr("alt") == ""

    def test_none(self):
        assert fluid_image(None) is None


class TestHyperLink:
    def test_uses_label(self):
        assert hyper_link(Link(url="https://github.com/x", label="GitHub")).text == "GitHub"

    def test_children_override_label(self):
        assert hyper_link(Link(url="/blog/", label="Blog"), "articles").text == "articles"

    def test_external_opens_new_tab(self):
        el = hyper_link(Link(url="https://github.com/x"))
        assert el.attr("target") == "_blank"
        assert el.attr("rel") == "noopener noreferrer"

    def test_internal_stays_in_tab(self):
        el = hyper_link(Link(url="/projects/"))
        assert el.attr("target") is None
        assert el.attr("href") == "/projects/"

    @pytest.mark.parametrize(
        ("url", "label"),
        [
            ("https://www.linkedin.com/in/trekhleb/", "linkedin.com/in/trekhleb"),
            ("https://github.com/", "github.com"),
            ("/projects/", "/projects/"),
            ("mailto:ada@example.com", "ada@example.com"),
            ("#contact", "#contact"),
        ],
    )
    def test_derived_label(self, url, label):
        assert link_label(Link(url=url)) == label


class TestTags:
    def test_preserves_order(self):
        el = tag_list([Tag(name="c"), Tag(name="a"), Tag(name="b")])
        assert [li.text for li in el.children] == ["c", "a", "b"]

    def test_empty_collapses(self):
        assert tag_list([]) is None

    def test_absent_collapses(self):
        assert tag_list(None) is None


class TestCardSections:
    def test_card_wraps_title(self):
        el = card(card_title("Demo"))
        assert el.attr("class") == "card"
        assert el.find("card-title").text == "Demo"

    def test_empty_media_collapses(self):
        assert card_media(None) is None

    def test_empty_content_collapses(self):
        assert card_content() is None


class TestProjectPreview:
    def test_none_renders_nothing(self):
        assert project_preview(None) is None

    def test_demo_scenario(self):
        el = project_preview(_make_project())
        assert len(el.find_all("card-title")) == 1
        assert el.find("card-title").text == "Demo"
        assert [p.text for p in el.find("summary").children] == ["One line."]
        assert el.find("tags") is None
        assert el.find("date-range").text == "2023-01-01 – present"
        assert el.find("card-media") is None

    def test_empty_summary_has_no_section(self):
        assert project_preview(_make_project(summary=[])).find("summary") is None

    def test_tags_section_present(self):
        el = project_preview(_make_project(tags=[Tag(name="python")]))
        assert el.find("card-tags") is not None
        assert el.find("tag").text == "python"

    def test_empty_tags_have_no_section(self):
        el = project_preview(_make_project(tags=[]))
        assert el.find("card-tags") is None

    def test_date_range_always_present(self):
        el = project_preview(_make_project(summary=[], end_date="2023-06-01"))
        assert el.find("date-range").text == "2023-01-01 – 2023-06-01"

    def test_cover_rendered_in_media(self):
        el = project_preview(_make_project(cover=Image(src_path="c.png", caption="Cover")))
        media = el.find("card-media")
        assert media.find("fluid-image") is not None

    def test_summary_order_preserved(self):
        el = project_preview(_make_project(summary=["a", "b", "c"]))
        assert [p.text for p in el.find("summary").children] == ["a", "b", "c"]

    def test_linked_title(self):
        el = project_preview(_make_project(link=Link(url="https://github.com/x/demo")))
        anchor = el.find("card-title").children[0]
        assert anchor.tag == "a"
        assert anchor.text == "Demo"

    def test_rendering_is_idempotent(self):
        project = _make_project(tags=[Tag(name="x")], cover=Image(src_path="c.png"))
        assert project_preview(project) == project_preview(project)
        assert render_html(project_preview(project)) == render_html(project_preview(project))


class TestPublicationPreview:
    def test_none_renders_nothing(self):
        assert publication_preview(None) is None

    def test_title_links_to_article(self):
        el = publication_preview(_make_publication())
        anchor = el.find("card-title").children[0]
        assert anchor.attr("href") == "https://itnext.io/self-parking-car"
        assert anchor.text == "Self-parking car"

    def test_publisher_name(self):
        el = publication_preview(_make_publication())
        assert el.find("publisher-name").text == "ITNEXT"

    def test_publisher_logo_when_known(self):
        data = PublisherData(logo=Image(src_path="publishers/itnext.png"), description="Tech")
        el = publication_preview(_make_publication(), data)
        assert el.find("publisher").find("fluid-image") is not None
        assert el.find("publisher-description").text == "Tech"

    def test_no_logo_without_publisher_data(self):
        el = publication_preview(_make_publication())
        assert el.find("fluid-image") is None
        assert el.find("publisher-description") is None

    def test_optional_sections_collapse(self):
        el = publication_preview(_make_publication(summary=[], tags=None))
        assert el.find("summary") is None
        assert el.find("card-tags") is None

    def test_date(self):
        el = publication_preview(_make_publication())
        date_el = el.find("card-date")
        assert date_el.text == "2021-11-01"
        assert date_el.attr("datetime") == "2021-11-01"


class TestProfileCard:
    def test_none_renders_nothing(self):
        assert profile_card(None) is None

    def test_ada_scenario(self):
        profile = Profile(
            first_name="Ada",
            position="Engineer",
            summary=[],
            avatar=Image(src_path="profile/ada.jpg", caption="Ada"),
            tags=[],
            social_links=[],
        )
        el = profile_card(profile)
        assert el.find("profile-name").text == "Ada"
        assert el.find("position").text == "Engineer"
        assert el.find("summary") is None
        assert el.find("avatar") is not None
        assert el.find("tags") is None
        assert el.find("social-links") is None
        assert el.find("location") is None

    def test_full_profile(self):
        profile = Profile(
            first_name="Ada",
            last_name="Lovelace",
            summary=["a", "b"],
            location=Location(name="London"),
            tags=[Tag(name="math")],
            social_links=[Link(url="https://github.com/ada", label="GitHub")],
        )
        el = profile_card(profile)
        assert el.find("profile-name").text == "Ada Lovelace"
        assert el.find("location").text == "London"
        assert [p.text for p in el.find("summary").children] == ["a", "b"]
        assert el.find("social-link").text == "GitHub"
        assert el.find("avatar") is None
        assert el.find("position") is None


class TestGreeting:
    def test_links_to_projects_and_blog(self):
        el = greeting()
        hrefs = [a.attr("href") for a in el.iter() if a.tag == "a"]
        assert hrefs == ["/projects/", "/blog/"]

    def test_link_texts(self):
        texts = [a.text for a in greeting().iter() if a.tag == "a"]
        assert texts == ["projects", "articles"]

    def test_chinese_variant(self):
        el = greeting(RenderContext(locale="zh"))
        assert "AI时代" in el.text
        assert not [a for a in el.iter() if a.tag == "a"]


class TestComponentNames:
    def test_public_functions_are_snake_case(self):
        names = [
            name
            for name, obj in vars(components).items()
            if inspect.isfunction(obj) and obj.__module__ == components.__name__
        ]
        assert "project_preview" in names
        assert all(name == name.lower() for name in names)
