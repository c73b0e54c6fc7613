"""Base tool interface — Abstract classes and plumbing shared by all tools."""

from toolbridge.tools.base.registry import ToolRegistry
from toolbridge.tools.base.tool import InvokableTool, ToolInfo

__all__ = ["InvokableTool", "ToolInfo", "ToolRegistry"]
