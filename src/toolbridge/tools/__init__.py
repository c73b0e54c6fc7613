"""Tool layer — Callable tools backed by one upstream HTTP call each.

Built-in tools:
  - tavily_search: Tavily Search API (web search)
  - requests_delete: generic HTTP DELETE

Implement ``InvokableTool`` to add your own.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from toolbridge.tools.base import InvokableTool, ToolInfo, ToolRegistry
from toolbridge.tools.httprequest import DeleteRequestTool
from toolbridge.tools.tavily import TavilySearchTool

if TYPE_CHECKING:
    import httpx

    from toolbridge.config.settings import Settings

logger = logging.getLogger(__name__)

__all__ = [
    "DeleteRequestTool",
    "InvokableTool",
    "TavilySearchTool",
    "ToolInfo",
    "ToolRegistry",
    "create_registry",
]


def create_registry(settings: Settings, *, client: httpx.AsyncClient | None = None) -> ToolRegistry:
    """Build a registry with every tool the settings allow.

    The Tavily tool needs an API key; without one it is skipped.

    Args:
        settings: Application settings.
        client: Optional HTTP client shared by all tools.

    Returns:
        A populated ToolRegistry.
    """
    registry = ToolRegistry()
    registry.register(DeleteRequestTool(settings.http.to_delete_config(), client=client))

    if settings.tavily.api_key:
        registry.register(TavilySearchTool(settings.tavily.to_config(), client=client))
    else:
        logger.warning("Tavily API key not configured; skipping tavily search tool")

    return registry
