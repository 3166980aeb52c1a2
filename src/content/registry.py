"""Content registries: the literal site content and its TOML loader.

The built-in tables below are the authored content of the site.  A site
can also keep its content in a TOML file; ``load_registry`` validates
such a file against the entity models so every authoring mistake is
reported before anything is rendered.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError

from folio.content.models import (
    ContentModel,
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
from folio.errors import ContentLoadError, ContentValidationError, UnknownLocaleError

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

SOCIAL_LINKS: tuple[Link, ...] = (
    Link(url="https://github.com/trekhleb", label="GitHub"),
    Link(url="https://www.linkedin.com/in/trekhleb/", label="LinkedIn"),
    Link(url="https://x.com/Trekhleb", label="X"),
    Link(url="https://www.instagram.com/trekhleb/", label="Instagram"),
)

PROFILES: dict[str, Profile] = {
    "en": Profile(
        first_name="Oleksii",
        last_name="Trekhleb",
        position="Senior Software Engineer @ Uber",
        summary=(
            "Author of 180k ★️ js-algorithms GitHub repo",
            "8+ times on HackerNews homepage",
            "15+ years of full-stack experience",
        ),
        avatar=Image(src_path="profile/avatar_500x500_v2.jpg", caption="Oleksii Trekhleb"),
        location=Location(name="Amsterdam, The Netherlands • (from Ukraine)"),
        tags=(),
        social_links=SOCIAL_LINKS,
    ),
    "zh": Profile(
        first_name="Oleksii",
        position="软件工程师",
        avatar=Image(src_path="profile/avatar_500x500_v2.jpg", caption="Oleksii"),
        social_links=SOCIAL_LINKS,
    ),
}

PROJECTS: tuple[Project, ...] = (
    Project(
        name="JavaScript Algorithms and Data Structures",
        summary=(
            "Algorithms and data structures implemented in JavaScript "
            "with explanations and links to further readings.",
        ),
        cover=Image(src_path="projects/js-algorithms.png", caption="JavaScript Algorithms"),
        tags=(Tag(name="JavaScript"), Tag(name="Algorithms"), Tag(name="Open Source")),
        start_date="2018-03-24",
        link=Link(url="https://github.com/trekhleb/javascript-algorithms"),
    ),
    Project(
        name="Homemade Machine Learning",
        summary=(
            "Python examples of popular machine learning algorithms "
            "with interactive Jupyter demos and math being explained.",
        ),
        cover=Image(src_path="projects/homemade-ml.png", caption="Homemade Machine Learning"),
        tags=(Tag(name="Python"), Tag(name="Machine Learning")),
        start_date="2018-11-08",
        link=Link(url="https://github.com/trekhleb/homemade-machine-learning"),
    ),
    Project(
        name="Self-parking Car Evolution",
        summary=(
            "Training the car to do self-parking using a genetic algorithm.",
            "Runs entirely in the browser.",
        ),
        cover=Image(src_path="projects/self-parking-car.jpg", caption="Self-parking car"),
        tags=(Tag(name="Genetic Algorithm"), Tag(name="TypeScript")),
        start_date="2021-08-01",
        end_date="2021-09-30",
        link=Link(url="https://trekhleb.dev/self-parking-car-evolution"),
    ),
    Project(
        name="NanoNeuron",
        summary=("Seven simple JavaScript functions that show how machines can learn.",),
        start_date="2020-02-01",
        end_date="2020-03-01",
        link=Link(url="https://github.com/trekhleb/nano-neuron"),
    ),
)

PUBLICATIONS: tuple[Publication, ...] = (
    Publication(
        title="Self-parking car in <500 lines of code",
        summary=("Training the car to do self-parking using a genetic algorithm.",),
        link=Link(url="https://itnext.io/self-parking-car-in-500-lines-of-code-b1f8a5b4c7b2"),
        date="2021-11-01",
        publisher=Publisher.ITNEXT,
        tags=(Tag(name="Genetic Algorithm"), Tag(name="JavaScript")),
    ),
    Publication(
        title="NanoNeuron — 7 simple JS functions that explain how machines learn",
        summary=(
            "A collection of simple functions that explain how a machine "
            "could actually learn from data.",
        ),
        link=Link(url="https://www.freecodecamp.org/news/nanoneuron/"),
        date="2020-03-11",
        publisher=Publisher.HACKER_NEWS,
        tags=(Tag(name="Machine Learning"),),
    ),
    Publication(
        title="Interactive Machine Learning Experiments",
        summary=("Trained models demos in the browser with TensorFlow.js.",),
        link=Link(url="https://www.kdnuggets.com/2020/05/interactive-machine-learning-experiments.html"),
        date="2020-05-20",
        publisher=Publisher.KDNUGGETS,
    ),
)

PUBLISHERS: dict[Publisher, PublisherData] = {
    Publisher.ITNEXT: PublisherData(logo=Image(src_path="publishers/itnext.png", caption="ITNEXT")),
    Publisher.HACKER_NEWS: PublisherData(
        logo=Image(src_path="publishers/hacker-news.png", caption="Hacker News"),
        description="Featured on the Hacker News front page",
    ),
    Publisher.KDNUGGETS: PublisherData(
        logo=Image(src_path="publishers/kdnuggets.png", caption="KDnuggets"),
    ),
}


class ContentRegistry(ContentModel):
    """All site content bundled together, as authored."""

    profiles: dict[str, Profile]
    projects: tuple[Project, ...] = ()
    publications: tuple[Publication, ...] = ()
    publishers: dict[Publisher, PublisherData] = Field(default_factory=dict)
    social_links: tuple[Link, ...] = ()

    @property
    def locales(self) -> list[str]:
        return sorted(self.profiles)

    def profile_for(self, locale: str = DEFAULT_LOCALE) -> Profile:
        """Return the profile variant for a locale.

        Raises UnknownLocaleError if the locale has no profile.
        """
        try:
            return self.profiles[locale]
        except KeyError:
            raise UnknownLocaleError(locale, self.locales) from None

    def publisher_data(self, publisher: Publisher) -> PublisherData | None:
        return self.publishers.get(publisher)

    def projects_sorted(self) -> tuple[Project, ...]:
        """Projects newest first; projects starting the same day keep source order."""
        return tuple(sorted(self.projects, key=lambda p: p.sort_key, reverse=True))

    def publications_sorted(self) -> tuple[Publication, ...]:
        """Publications newest first; same-day publications keep source order."""
        return tuple(sorted(self.publications, key=lambda p: p.sort_key, reverse=True))


def default_registry() -> ContentRegistry:
    """Return the built-in site content."""
    return ContentRegistry(
        profiles=PROFILES,
        projects=PROJECTS,
        publications=PUBLICATIONS,
        publishers=PUBLISHERS,
        social_links=SOCIAL_LINKS,
    )


def load_registry(path: str | Path) -> ContentRegistry:
    """Load and validate site content from a TOML file.

    Profiles that do not list their own social links share the
    top-level ``social_links`` table.

    Raises:
        ContentLoadError: If the file is missing or not valid TOML.
        ContentValidationError: If any entity has the wrong shape.
    """
    content_path = Path(path)
    data = _read_toml(content_path)
    _share_social_links(data)

    try:
        registry = ContentRegistry.model_validate(data)
    except ValidationError as exc:
        raise ContentValidationError.from_pydantic(content_path, exc) from exc

    logger.info(
        "Loaded %d profile(s), %d project(s), %d publication(s) from %s",
        len(registry.profiles),
        len(registry.projects),
        len(registry.publications),
        content_path,
    )
    return registry


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        raise ContentLoadError(path, "file not found") from None
    except tomllib.TOMLDecodeError as exc:
        raise ContentLoadError(path, f"invalid TOML ({exc})") from exc
    except OSError as exc:
        raise ContentLoadError(path, exc.strerror or str(exc)) from exc


def _share_social_links(data: dict[str, Any]) -> None:
    shared = data.get("social_links", data.get("socialLinks"))
    if shared is None:
        return
    profiles = data.get("profiles")
    if not isinstance(profiles, dict):
        return
    for profile in profiles.values():
        if isinstance(profile, dict) and not ({"social_links", "socialLinks"} & profile.keys()):
            profile["social_links"] = shared
