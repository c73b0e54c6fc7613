"""Tavily tool — Web search via the Tavily Search API.

API reference:
  POST https://api.tavily.com/search
    Authorization: Bearer <api_key>
    {"query": "...", "topic": "...", "max_results": 5, ...}
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from toolbridge.tools.base.exceptions import (
    ConfigurationError,
    DecodeError,
    RequestBuildError,
    SerializationError,
)
from toolbridge.tools.base.http import execute
from toolbridge.tools.base.tool import InvokableTool
from toolbridge.tools.tavily.config import TavilySearchConfig
from toolbridge.tools.tavily.models import (
    ACCEPTED_TOPICS,
    SearchRequest,
    SearchResponse,
    TavilySearchRequest,
)

logger = logging.getLogger(__name__)

SEARCH_API_URL = "https://api.tavily.com/search"

# Config fields copied onto the wire request whenever they are set.
_OVERRIDE_FIELDS = (
    "auto_parameters",
    "topic",
    "search_depth",
    "chunks_per_source",
    "max_results",
    "time_range",
    "days",
    "include_answer",
    "include_raw_content",
    "include_images",
    "include_image_descriptions",
    "include_domains",
    "exclude_domains",
    "country",
)


def build_wire_request(request: SearchRequest, config: TavilySearchConfig) -> TavilySearchRequest:
    """Merge a caller request with the config overrides.

    The query always comes from the request. The request's topic is used only
    if it is an accepted value and the config does not set one. Every other
    field comes from the config; ranges and enum values are not checked here.

    Args:
        request: The caller-facing search request.
        config: A validated tool config.

    Returns:
        The wire request for this call.
    """
    fields: dict[str, object] = {"query": request.query}
    if request.topic in ACCEPTED_TOPICS:
        fields["topic"] = request.topic

    for name in _OVERRIDE_FIELDS:
        value = getattr(config, name)
        if value is None:
            continue
        if isinstance(value, list):
            # an empty domain list means "no filter", same as unset
            if not value:
                continue
            value = list(value)
        fields[name] = value

    return TavilySearchRequest(**fields)


class TavilySearchTool(InvokableTool[SearchRequest]):
    """Search tool backed by the Tavily Search API.

    Args:
        config: Tool configuration; validated once here.
        client: Optional shared HTTP client. When omitted, the tool creates
            one using ``config.timeout``.

    Raises:
        ConfigurationError: If the config is missing or has no API key.
    """

    request_model = SearchRequest

    def __init__(self, config: TavilySearchConfig | None, *, client: httpx.AsyncClient | None = None) -> None:
        if config is None:
            raise ConfigurationError("tavily search tool config is required")
        self._config = config.validated()
        super().__init__(client=client, timeout=self._config.timeout)

    @property
    def name(self) -> str:
        return self._config.tool_name

    @property
    def description(self) -> str:
        return self._config.tool_desc

    @property
    def config(self) -> TavilySearchConfig:
        return self._config

    async def run(self, request: SearchRequest) -> SearchResponse:
        return await self.search(request)

    async def search(self, request: SearchRequest) -> SearchResponse:
        """Search the web for a query.

        Args:
            request: Query plus optional topic.

        Returns:
            The decoded response. Non-2xx replies are decoded like any other body.

        Raises:
            SerializationError: If the wire request cannot be encoded.
            RequestBuildError: If the HTTP request cannot be built.
            TransportError: If the request fails or times out.
            ResponseReadError: If the body cannot be read.
            DecodeError: If the body is not a valid search response.
        """
        wire = build_wire_request(request, self._config)
        try:
            body = wire.to_body()
        except PydanticSerializationError as e:
            raise SerializationError(f"failed to serialize search request: {e}") from e

        try:
            http_request = self._client.build_request(
                "POST",
                SEARCH_API_URL,
                content=body,
                headers=self._config.headers,
                timeout=self._config.timeout,
            )
        except (httpx.InvalidURL, UnicodeEncodeError) as e:
            raise RequestBuildError(f"failed to create request: {e}") from e

        logger.debug("Tavily search: query=%s, topic=%s", wire.query, wire.topic)
        raw = await execute(self._client, http_request)

        try:
            response = SearchResponse.model_validate_json(raw)
        except ValidationError as e:
            raise DecodeError(f"failed to decode search response: {e}") from e

        logger.debug("Tavily search: query=%s, results=%d", wire.query, len(response.results))
        return response
