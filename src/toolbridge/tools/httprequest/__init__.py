"""Generic HTTP request tools."""

from toolbridge.tools.httprequest.delete import DeleteConfig, DeleteRequest, DeleteRequestTool

__all__ = ["DeleteConfig", "DeleteRequest", "DeleteRequestTool"]
