"""Tool-specific exceptions.

Every failure of a tool call surfaces as exactly one of these, wrapping the
underlying cause. Nothing here is retried.
"""


class ToolError(Exception):
    """Base exception for tool errors."""


class ConfigurationError(ToolError):
    """Raised when tool configuration is invalid."""


class ToolArgumentsError(ToolError):
    """Raised when invocation arguments do not match the tool's request model."""


class SerializationError(ToolError):
    """Raised when the wire request cannot be serialized."""


class RequestBuildError(ToolError):
    """Raised when the HTTP request cannot be constructed (e.g. malformed URL)."""


class TransportError(ToolError):
    """Raised when the HTTP request fails to reach the upstream or times out."""


class ResponseReadError(ToolError):
    """Raised when the response body cannot be read."""


class DecodeError(ToolError):
    """Raised when the response body does not match the expected shape."""
