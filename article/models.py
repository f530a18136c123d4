"""
Diffbot Article API – Pydantic models for the article extraction result.

Used for JSON parsing and as the single source of truth for the
Article API response shape (and nested comments/images/videos/categories).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator

from common.models import DiffbotModel, Meta, QueryValue


class Comments(BaseModel):
    """Comment count of an article (returned when the comments parameter is used)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    count: int = 0

    @field_validator("count", mode="before")
    @classmethod
    def _missing_count_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    def __str__(self) -> str:
        return f"Comments [count={self.count}]"


class Image(BaseModel):
    """One image found in the article."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    url: str | None = None
    pixel_height: int | None = Field(None, alias="pixelHeight")
    pixel_width: int | None = Field(None, alias="pixelWidth")
    caption: str | None = None
    primary: bool | None = None

    def __str__(self) -> str:
        return f"Image [url={self.url}]"


class Video(BaseModel):
    """One video embedded in the article."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    url: str | None = None
    pixel_height: int | None = Field(None, alias="pixelHeight")
    pixel_width: int | None = Field(None, alias="pixelWidth")
    primary: bool | None = None

    def __str__(self) -> str:
        return f"Video [url={self.url}]"


class Categories(RootModel[dict[str, float]]):
    """Category name -> score of the extracted article."""

    model_config = ConfigDict(frozen=True)

    def score(self, name: str) -> float | None:
        return self.root.get(name)


class Article(DiffbotModel):
    """
    The result of an article extraction (Article API).

    Fields marked "on request" are only populated when named in the
    `fields` parameter (see article.analyze.Analyze.with_fields).
    """

    text: str | None = None
    title: str | None = None
    date: str | None = None
    author: str | None = None
    videos: list[Video] | None = None
    images: list[Image] | None = None
    # Only set when the submitted URL redirects (e.g. link shorteners)
    resolved_url: str | None = None
    icon: str | None = None
    html: str | None = None
    tag_list: list[str] | None = Field(None, alias="tags")  # on request
    summary: str | None = None
    categories: Categories | None = None  # on request
    links: list[str] | None = None  # on request
    human_language: str | None = Field(None, alias="humanLanguage")  # on request, ISO 639-1
    meta: Meta | None = None  # on request
    # Pages concatenated into text/html for multi-page articles
    num_pages: int | None = Field(None, alias="numPages")
    querystring: dict[str, QueryValue] | None = None  # on request
    comments: Comments | None = None

    @field_validator("querystring", mode="before")
    @classmethod
    def _valueless_params_are_true(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        params = {}
        for key, param in value.items():
            if param is None:
                params[key] = True
            elif isinstance(param, (int, float)) and not isinstance(param, bool):
                params[key] = str(param)
            elif isinstance(param, list):
                # repeated parameter: ?tag=a&tag=b
                params[key] = ",".join(str(item) for item in param)
            else:
                params[key] = param
        return params

    @property
    def tags(self) -> list[str]:
        """Tags of the article as a new list; empty when none were returned."""
        return list(self.tag_list) if self.tag_list else []

    def __str__(self) -> str:
        return f"Article [url={self.url}]"


class SlimArticle(BaseModel):
    """
    Analysis-ready slim record for one extracted article.

    Used for validation when transforming; matches the slim NDJSON output.
    """

    model_config = ConfigDict(extra="ignore")

    url: str | None = None
    resolved_url: str | None = None
    title: str | None = None
    author: str | None = None
    date: str | None = None
    human_language: str | None = None
    type: str | None = None
    num_pages: int | None = None
    tags: list[str] = Field(default_factory=list)
    image_count: int = 0
    video_count: int = 0
    primary_image_url: str | None = None
    comment_count: int | None = None
