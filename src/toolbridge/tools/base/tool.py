"""Base tool — Abstract interface for all callable tools.

A tool translates one caller-facing request into exactly one upstream HTTP
call and back. Every tool:
  1. Advertises its name, description and parameter schema via ``info()``
  2. Exposes a typed async operation (``run()``)
  3. Accepts JSON arguments from an agent framework via ``invoke()``
  4. Owns (or borrows) a single ``httpx.AsyncClient``
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Self, TypeVar

import httpx
from pydantic import BaseModel, Field, ValidationError

from toolbridge.tools.base.exceptions import ToolArgumentsError
from toolbridge.tools.base.schema import params_schema

RequestT = TypeVar("RequestT", bound=BaseModel)


class ToolInfo(BaseModel):
    """Discovery information for a tool."""

    name: str = Field(description="Unique tool name")
    description: str = Field(description="Human-readable tool description")
    parameters: dict[str, Any] = Field(default_factory=dict, description="Parameter JSON schema")


class InvokableTool(ABC, Generic[RequestT]):
    """Abstract base class for callable tools.

    Subclasses set ``request_model`` and implement ``run()``. Tools hold no
    per-call state, so one instance may serve concurrent calls.

    Args:
        client: HTTP client to use. When omitted the tool creates its own
            and closes it on ``shutdown()``.
        timeout: Per-request timeout in seconds for a tool-created client.
    """

    request_model: ClassVar[type[BaseModel]]

    def __init__(self, *, client: httpx.AsyncClient | None = None, timeout: float | None = None) -> None:
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(timeout=timeout)

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique tool name (e.g., 'tavily_search')."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Description shown to the calling agent."""

    @abstractmethod
    async def run(self, request: RequestT) -> BaseModel | str:
        """Execute one call for a typed request."""

    def info(self) -> ToolInfo:
        return ToolInfo(
            name=self.name,
            description=self.description,
            parameters=params_schema(self.request_model),
        )

    async def invoke(self, arguments: str) -> str:
        """Run the tool from a JSON arguments string.

        Args:
            arguments: JSON object matching ``request_model``.

        Returns:
            The result as a JSON string, or the raw text for text results.

        Raises:
            ToolArgumentsError: If the arguments do not parse.
        """
        try:
            request = self.request_model.model_validate_json(arguments)
        except ValidationError as e:
            raise ToolArgumentsError(f"invalid arguments for tool '{self.name}': {e}") from e

        result = await self.run(request)  # type: ignore[arg-type]
        if isinstance(result, str):
            return result
        return result.model_dump_json()

    async def shutdown(self) -> None:
        """Close the HTTP client if this tool created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.shutdown()
