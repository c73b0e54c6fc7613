"""Tavily search tool."""

from toolbridge.tools.tavily.config import TavilySearchConfig
from toolbridge.tools.tavily.models import ImageResult, SearchRequest, SearchResponse, SearchResult
from toolbridge.tools.tavily.tool import TavilySearchTool, build_wire_request

__all__ = [
    "ImageResult",
    "SearchRequest",
    "SearchResponse",
    "SearchResult",
    "TavilySearchConfig",
    "TavilySearchTool",
    "build_wire_request",
]
