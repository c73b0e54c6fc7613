"""Tool Registry — Manages registration and retrieval of tool instances.

The registry is the single place an agent framework looks up tools by name
and discovers their parameter schemas.
"""

from __future__ import annotations

import logging
from typing import Any

from toolbridge.tools.base.tool import InvokableTool, ToolInfo

logger = logging.getLogger(__name__)


class ToolNotFoundError(Exception):
    """Raised when a requested tool is not registered."""


class ToolRegistry:
    """Registry for managing tool instances.

    Example:
        >>> registry = ToolRegistry()
        >>> registry.register(TavilySearchTool(TavilySearchConfig(api_key="...")))
        >>> tool = registry.get("tavily_search")
        >>> await registry.shutdown_all()
    """

    def __init__(self) -> None:
        self._tools: dict[str, InvokableTool[Any]] = {}

    def register(self, tool: InvokableTool[Any]) -> None:
        """Register a tool instance under its own name.

        Args:
            tool: The tool to register.
        """
        if tool.name in self._tools:
            logger.warning("Overwriting existing tool registration: %s", tool.name)
        self._tools[tool.name] = tool
        logger.info("Registered tool: %s", tool.name)

    def get(self, name: str) -> InvokableTool[Any]:
        """Get a registered tool by name.

        Raises:
            ToolNotFoundError: If no tool is registered under this name.
        """
        if name not in self._tools:
            raise ToolNotFoundError(
                f"No tool registered with name '{name}'. "
                f"Available tools: {list(self._tools.keys())}"
            )
        return self._tools[name]

    def infos(self) -> list[ToolInfo]:
        """Discovery information for every registered tool."""
        return [tool.info() for tool in self._tools.values()]

    async def shutdown_all(self) -> None:
        """Close all registered tools."""
        for name, tool in self._tools.items():
            try:
                await tool.shutdown()
                logger.info("Shut down tool: %s", name)
            except Exception:
                logger.warning("Error shutting down tool: %s", name, exc_info=True)
        self._tools.clear()

    @property
    def registered_tools(self) -> list[str]:
        """List all registered tool names."""
        return list(self._tools.keys())
