"""
Diffbot API – Pydantic models shared across endpoints.

Page type enumeration, page metadata, and the base record every
Diffbot extraction result derives from.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

# Value of one URL query-string parameter; valueless parameters are True.
QueryValue = str | bool


class PageType(str, Enum):
    """Page type Diffbot reports in the `type` key of a result."""

    ARTICLE = "article"
    FRONTPAGE = "frontpage"
    IMAGE = "image"
    PRODUCT = "product"
    VIDEO = "video"
    LOCATION = "location"
    FAQ = "faq"
    PROFILE = "profile"
    SERP = "serp"
    DOWNLOAD = "download"
    EVENT = "event"
    AUDIO = "audio"
    CHART = "chart"
    DISCUSSION = "discussion"
    RECIPE = "recipe"
    ERROR = "error"
    OTHER = "other"


class Meta(BaseModel):
    """
    Full contents of the page meta tags.

    OpenGraph, Twitter card, schema.org microdata and oEmbed data come as
    sub-objects; any other meta tag is kept as an extra attribute.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    og: dict[str, Any] | None = None
    twitter: dict[str, Any] | None = None
    microdata: dict[str, Any] | None = None
    oembed: dict[str, Any] | None = None

    def tag(self, name: str) -> Any:
        """Value of a plain meta tag (e.g. description), or None."""
        return (self.model_extra or {}).get(name)


class DiffbotModel(BaseModel):
    """Base for every Diffbot result: read-only, unknown keys dropped."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    url: str | None = None
    type: PageType | None = None
