"""Caller-facing request/response models and the Tavily wire request.

The caller-facing ``SearchRequest`` carries only query and topic; everything else
the Tavily API accepts is owned by ``TavilySearchConfig`` and merged into
``TavilySearchRequest`` at call time.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

ACCEPTED_TOPICS = ("general", "news")


class SearchRequest(BaseModel):
    """Search request as issued by the calling agent."""

    query: str = Field(description="The search query to execute with Tavily.")
    topic: str = Field(default="", description="The category of the search. general or news.")

    @field_validator("topic", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class SearchResult(BaseModel):
    """A single ranked search result."""

    title: str = Field(default="", description="The title of the search result.")
    url: str = Field(default="", description="The URL of the search result.")
    content: str = Field(default="", description="A short description of the search result.")
    score: float = Field(default=0.0, description="The relevance score of the search result.")
    raw_content: str = Field(
        default="",
        description=(
            "The cleaned and parsed HTML content of the search result. "
            "Only if include_raw_content is true."
        ),
    )

    @field_validator("title", "url", "content", "raw_content", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class ImageResult(BaseModel):
    """A query-related image."""

    url: str = Field(default="", description="Image url")
    description: str = Field(default="", description="Image description")

    @field_validator("url", "description", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class SearchResponse(BaseModel):
    """Decoded Tavily search response."""

    query: str = Field(default="", description="The search query that was executed.")
    answer: str = Field(
        default="",
        description=(
            "A short answer to the user's query, generated by an LLM. "
            "Included only if include_answer is requested."
        ),
    )
    results: list[SearchResult] = Field(
        default_factory=list,
        description="A list of sorted search results, ranked by relevancy.",
    )
    images: list[ImageResult] = Field(
        default_factory=list,
        description=(
            "List of query-related images. If include_image_descriptions is true, "
            "each item will have url and description."
        ),
    )

    @field_validator("query", "answer", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("results", mode="before")
    @classmethod
    def _null_results(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("images", mode="before")
    @classmethod
    def _parse_images(cls, v: Any) -> Any:
        """Accept bare URL strings, which Tavily sends without image descriptions."""
        if v is None:
            return []
        if isinstance(v, list):
            return [{"url": item} if isinstance(item, str) else item for item in v]
        return v


class TavilySearchRequest(BaseModel):
    """Wire request body for ``POST /search``.

    ``None`` means "unset": the field is omitted and the upstream default applies.
    """

    query: str
    auto_parameters: bool | None = None
    topic: str | None = None
    search_depth: str | None = None
    chunks_per_source: int | None = None
    max_results: int | None = None
    time_range: str | None = None
    days: int | None = None
    include_answer: bool | None = None
    include_raw_content: bool | None = None
    include_images: bool | None = None
    include_image_descriptions: bool | None = None
    include_domains: list[str] | None = None
    exclude_domains: list[str] | None = None
    country: str | None = None

    def to_body(self) -> bytes:
        """Serialize to the JSON body, omitting unset fields."""
        return self.model_dump_json(exclude_none=True).encode("utf-8")
