"""Tool that issues an HTTP DELETE and returns the body as text."""

from __future__ import annotations

import logging

import httpx
from pydantic import BaseModel, ConfigDict, Field

from toolbridge.tools.base.exceptions import ConfigurationError, RequestBuildError
from toolbridge.tools.base.http import execute
from toolbridge.tools.base.tool import InvokableTool

logger = logging.getLogger(__name__)

DEFAULT_TOOL_NAME = "requests_delete"
DEFAULT_TOOL_DESC = (
    "A portal to the internet. Use this when you need to make a DELETE request to a URL. "
    "Input should be a specific url, and the output will be the text response of the DELETE request."
)
DEFAULT_TIMEOUT = 30.0


class DeleteConfig(BaseModel):
    """Configuration of the DELETE tool."""

    model_config = ConfigDict(frozen=True)

    tool_name: str = Field(default="", description=f"Tool name, default '{DEFAULT_TOOL_NAME}'")
    tool_desc: str = Field(default="", description="Tool description")
    headers: dict[str, str] | None = Field(
        default=None,
        description="HTTP headers sent with each request (e.g. Authorization)",
    )
    timeout: float | None = Field(
        default=DEFAULT_TIMEOUT,
        description="Per-request timeout in seconds; None never times out",
    )

    def validated(self) -> DeleteConfig:
        """Return a copy with defaults applied. No secret is required."""
        return self.model_copy(
            update={
                "tool_name": self.tool_name or DEFAULT_TOOL_NAME,
                "tool_desc": self.tool_desc or DEFAULT_TOOL_DESC,
                "headers": dict(self.headers or {}),
            }
        )


class DeleteRequest(BaseModel):
    """DELETE request as issued by the calling agent."""

    url: str = Field(description="The URL to perform the DELETE request")


class DeleteRequestTool(InvokableTool[DeleteRequest]):
    """Tool that sends one HTTP DELETE and returns the raw response body.

    Args:
        config: Tool configuration; defaults apply when omitted fields are empty.
        client: Optional shared HTTP client.

    Raises:
        ConfigurationError: If the config is missing.
    """

    request_model = DeleteRequest

    def __init__(self, config: DeleteConfig | None, *, client: httpx.AsyncClient | None = None) -> None:
        if config is None:
            raise ConfigurationError("request tool configuration is required")
        self._config = config.validated()
        super().__init__(client=client, timeout=self._config.timeout)

    @property
    def name(self) -> str:
        return self._config.tool_name

    @property
    def description(self) -> str:
        return self._config.tool_desc

    @property
    def config(self) -> DeleteConfig:
        return self._config

    async def run(self, request: DeleteRequest) -> str:
        return await self.delete(request)

    async def delete(self, request: DeleteRequest) -> str:
        """Send a DELETE to ``request.url``.

        Returns:
            The response body as text, whatever its status or content type.

        Raises:
            RequestBuildError: If the URL cannot be parsed. No I/O happens.
            TransportError: If the request fails or times out.
            ResponseReadError: If the body cannot be read.
        """
        try:
            http_request = self._client.build_request(
                "DELETE",
                request.url,
                headers=self._config.headers,
                timeout=self._config.timeout,
            )
        except (httpx.InvalidURL, UnicodeEncodeError) as e:
            raise RequestBuildError(f"failed to create request: {e}") from e

        logger.debug("DELETE request: url=%s", request.url)
        body = await execute(self._client, http_request)
        return body.decode("utf-8", errors="replace")
