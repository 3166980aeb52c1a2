"""Typed site content: the owner profile, projects, publications and their value types.

These models describe everything the site knows about its owner: the
profile, portfolio projects and externally published articles, plus the
small value types (tags, links, dates, images) they are built from.
Every model is frozen and closed, so a typo in authored content fails
validation at load time instead of surfacing as a broken page.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from enum import StrEnum
from typing import Annotated, Any
from urllib.parse import urlsplit

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    StringConstraints,
    TypeAdapter,
    ValidationError,
    model_validator,
)
from pydantic.alias_generators import to_camel

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

_YEAR_RE = re.compile(r"^\d{4}$")
_YEAR_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")

# Schemes whose URIs must name a host.
_HIERARCHICAL_SCHEMES = {"http", "https", "ftp", "ws", "wss"}

_ANY_URL = TypeAdapter(AnyUrl)


def parse_date_string(value: str) -> date:
    """Parse an ISO-like date string to the first day it covers.

    Accepts ``YYYY``, ``YYYY-MM``, ``YYYY-MM-DD`` and full ISO datetimes.

    Raises:
        ValueError: If the value is not one of those forms.
    """
    text = value.strip()
    if _YEAR_RE.match(text):
        return date(int(text), 1, 1)
    match = _YEAR_MONTH_RE.match(text)
    if match:
        return date(int(match.group(1)), int(match.group(2)), 1)
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        raise ValueError(f"Not an ISO-like date: {value!r}") from None


def _check_date_string(value: str) -> str:
    parse_date_string(value)
    return value


def _check_url(value: str) -> str:
    if not value or any(ch.isspace() for ch in value):
        raise ValueError("URL must be non-empty and contain no whitespace")
    if value.startswith(("/", "#")):
        return value
    try:
        _ANY_URL.validate_python(value)
    except ValidationError:
        raise ValueError(f"URL {value!r} is not a valid absolute URI or internal path") from None
    # AnyUrl repairs "https:///path" into a host named "path".
    parts = urlsplit(value)
    if parts.scheme in _HIERARCHICAL_SCHEMES and not parts.netloc:
        raise ValueError(f"URL {value!r} has no host")
    return value


def _check_asset_path(value: str) -> str:
    if urlsplit(value).scheme or value.startswith("/"):
        raise ValueError(f"Image path {value!r} must be relative to the asset root")
    return value


DateString = Annotated[NonEmptyStr, AfterValidator(_check_date_string)]
UrlString = Annotated[str, AfterValidator(_check_url)]
AssetPath = Annotated[NonEmptyStr, AfterValidator(_check_asset_path)]


class ContentModel(BaseModel):
    """Base for all content types: immutable, closed, camelCase aliases."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------


class Tag(ContentModel):
    """A topical label attached to content."""

    name: NonEmptyStr

    @model_validator(mode="before")
    @classmethod
    def _from_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"name": data}
        return data


class Link(ContentModel):
    """A URL reference, optionally with display text."""

    url: UrlString
    label: NonEmptyStr | None = None

    @property
    def is_external(self) -> bool:
        return urlsplit(self.url).scheme in ("http", "https")


class Image(ContentModel):
    """A visual asset, addressed relative to the site's asset root."""

    src_path: AssetPath
    caption: str | None = None


class Location(ContentModel):
    """Where the site owner is based."""

    name: NonEmptyStr

    @model_validator(mode="before")
    @classmethod
    def _from_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"name": data}
        return data


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------


class Profile(ContentModel):
    """The site owner's identity and public metadata.

    Only ``first_name`` is required; every other field is left out of the
    rendered page when absent.
    """

    first_name: NonEmptyStr
    last_name: NonEmptyStr | None = None
    position: NonEmptyStr | None = None
    summary: tuple[str, ...] = ()
    avatar: Image | None = None
    location: Location | None = None
    tags: tuple[Tag, ...] = ()
    social_links: tuple[Link, ...] = ()

    @property
    def full_name(self) -> str:
        if self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.first_name


class Project(ContentModel):
    """A portfolio entry. A missing ``end_date`` means the project is ongoing."""

    name: NonEmptyStr
    summary: tuple[str, ...] = ()
    cover: Image | None = None
    tags: tuple[Tag, ...] | None = None
    start_date: DateString
    end_date: DateString | None = None
    link: Link | None = None

    @model_validator(mode="after")
    def _check_date_order(self) -> Project:
        if self.end_date is not None:
            if parse_date_string(self.end_date) < parse_date_string(self.start_date):
                raise ValueError(
                    f"end_date {self.end_date} precedes start_date {self.start_date}"
                )
        return self

    @property
    def ongoing(self) -> bool:
        return self.end_date is None

    @property
    def sort_key(self) -> date:
        return parse_date_string(self.start_date)


class Publisher(StrEnum):
    """Outlets that have published the owner's articles.

    Closed set: a new outlet needs a new member here before content can
    reference it.
    """

    AI_TIME_JOURNAL = "AI Time Journal"
    CODE_PROJECT = "CodeProject"
    DOU = "DOU"
    DATA_DRIVEN_INVESTOR = "Data Driven Investor"
    GEEKS_FOR_GEEKS = "GeeksForGeeks"
    HACKER_NEWS = "Hacker News"
    HACKER_NOON = "HackerNoon"
    HOW_I_GOT_JOB = "HowIGotJob"
    ITNEXT = "ITNEXT"
    JAVASCRIPT_IN_PLAIN_ENGLISH = "JavaScript in Plain English"
    KDNUGGETS = "KDnuggets"
    NEWLINE = "Newline"
    TECHCRUNCH = "TechCrunch"
    TOWARDS_DATA_SCIENCE = "Towards Data Science"


class PublisherData(ContentModel):
    """Presentation data for a publisher."""

    logo: Image
    description: str | None = None


class Publication(ContentModel):
    """An article published by an external outlet."""

    title: NonEmptyStr
    summary: tuple[str, ...] = ()
    link: Link
    date: DateString
    publisher: Publisher
    tags: tuple[Tag, ...] | None = None

    @property
    def sort_key(self) -> date:
        return parse_date_string(self.date)
