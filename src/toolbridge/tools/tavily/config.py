"""Tavily search tool configuration.

Every search parameter here is optional: ``None`` means the caller did not
specify it, which is distinct from specifying the zero value. Set fields
always override what the caller-facing request implies.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from toolbridge.tools.base.exceptions import ConfigurationError

DEFAULT_TOOL_NAME = "tavily_search"
DEFAULT_TOOL_DESC = "search web for information by tavily"


class TavilySearchConfig(BaseModel):
    """Configuration of a Tavily search tool.

    Frozen once constructed; call ``validated()`` (the tool does) to fill
    defaults and derive the auth headers.
    """

    model_config = ConfigDict(frozen=True)

    tool_name: str = Field(default="", description=f"Tool name, default '{DEFAULT_TOOL_NAME}'")
    tool_desc: str = Field(default="", description=f"Tool description, default '{DEFAULT_TOOL_DESC}'")

    api_key: str = Field(default="", description="Tavily API key (required)")

    auto_parameters: bool | None = Field(
        default=None,
        description=(
            "Let Tavily configure search parameters from the query's content and intent. "
            "Explicit values still override the automatic ones."
        ),
    )
    topic: str | None = Field(default=None, description="Search category: general, news")
    search_depth: str | None = Field(
        default=None,
        description="basic (1 credit) or advanced (2 credits)",
    )
    chunks_per_source: int | None = Field(
        default=None,
        description="Max content chunks per source, 1-3. Only with search_depth=advanced",
    )
    max_results: int | None = Field(default=None, description="Maximum number of results, 1-20")
    time_range: str | None = Field(
        default=None,
        description="Time range back from today: day, week, month, year, d, w, m, y",
    )
    days: int | None = Field(default=None, description="Days back from today. Only with topic=news")
    include_answer: bool | None = Field(default=None, description="Include an LLM-generated answer")
    include_raw_content: bool | None = Field(
        default=None,
        description="Include the cleaned and parsed HTML content of each result",
    )
    include_images: bool | None = Field(default=None, description="Also perform an image search")
    include_image_descriptions: bool | None = Field(
        default=None,
        description="With include_images, add a descriptive text for each image",
    )
    include_domains: list[str] | None = Field(default=None, description="Domains to specifically include")
    exclude_domains: list[str] | None = Field(default=None, description="Domains to specifically exclude")
    country: str | None = Field(
        default=None,
        description="Boost results from a country (e.g. 'united states'). Only with topic=general",
    )

    headers: dict[str, str] | None = Field(
        default=None,
        description="Extra HTTP headers sent with each request (e.g. User-Agent)",
    )
    timeout: float | None = Field(
        default=None,
        description="Per-request timeout in seconds; None never times out",
    )

    def validated(self) -> TavilySearchConfig:
        """Return a copy with defaults applied and derived headers injected.

        Idempotent: validating a validated config yields an equal config.

        Raises:
            ConfigurationError: If the API key is missing.
        """
        if not self.api_key:
            raise ConfigurationError("tavily search tool config is missing API key")

        headers = dict(self.headers or {})
        headers["Authorization"] = f"Bearer {self.api_key}"
        headers["Content-Type"] = "application/json"

        updates: dict[str, Any] = {
            "tool_name": self.tool_name or DEFAULT_TOOL_NAME,
            "tool_desc": self.tool_desc or DEFAULT_TOOL_DESC,
            "headers": headers,
        }
        return self.model_copy(update=updates)
