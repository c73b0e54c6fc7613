"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. YAML config file (if specified)
  2. Environment variables (TOOLBRIDGE_ prefix)
  3. Default values
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from toolbridge.tools.httprequest.delete import DEFAULT_TIMEOUT, DeleteConfig
from toolbridge.tools.tavily.config import TavilySearchConfig


def _parse_list(v: Any) -> Any:
    """Parse a list from a JSON string or comma-separated env var value."""
    if isinstance(v, str):
        import json

        try:
            parsed = json.loads(v)
            if isinstance(parsed, list):
                return [str(item) for item in parsed]
        except (json.JSONDecodeError, TypeError):
            pass
        return [item.strip() for item in v.split(",") if item.strip()]
    return v


class TavilySettings(BaseModel):
    """Tavily search tool configuration."""

    api_key: str = Field(default="", description="Tavily API key")
    tool_name: str = Field(default="", description="Override the advertised tool name")
    tool_desc: str = Field(default="", description="Override the advertised tool description")
    timeout: float | None = Field(default=None, description="Request timeout in seconds")
    headers: dict[str, str] = Field(default_factory=dict, description="Extra HTTP headers")

    auto_parameters: bool | None = None
    topic: str | None = None
    search_depth: str | None = None
    chunks_per_source: int | None = None
    max_results: int | None = None
    time_range: str | None = None
    days: int | None = None
    include_answer: bool | None = None
    include_raw_content: bool | None = None
    include_images: bool | None = None
    include_image_descriptions: bool | None = None
    include_domains: list[str] | None = None
    exclude_domains: list[str] | None = None
    country: str | None = None

    @field_validator("include_domains", "exclude_domains", mode="before")
    @classmethod
    def _parse_domains(cls, v: Any) -> Any:
        return _parse_list(v)

    def to_config(self) -> TavilySearchConfig:
        return TavilySearchConfig(**self.model_dump())


class HttpSettings(BaseModel):
    """Generic HTTP request tool configuration."""

    delete_tool_name: str = Field(default="", description="Override the DELETE tool name")
    delete_tool_desc: str = Field(default="", description="Override the DELETE tool description")
    headers: dict[str, str] = Field(default_factory=dict, description="HTTP headers for every request")
    timeout: float | None = Field(default=DEFAULT_TIMEOUT, description="Request timeout in seconds")

    def to_delete_config(self) -> DeleteConfig:
        return DeleteConfig(
            tool_name=self.delete_tool_name,
            tool_desc=self.delete_tool_desc,
            headers=self.headers,
            timeout=self.timeout,
        )


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="console", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Configuration is loaded from environment variables with the TOOLBRIDGE_ prefix.
    Nested settings use double underscores.

    Example:
        TOOLBRIDGE_TAVILY__API_KEY=tvly-...
        TOOLBRIDGE_TAVILY__MAX_RESULTS=5
        TOOLBRIDGE_HTTP__TIMEOUT=10
    """

    model_config = {
        "env_prefix": "TOOLBRIDGE_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    tavily: TavilySettings = Field(default_factory=TavilySettings)
    http: HttpSettings = Field(default_factory=HttpSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values from the YAML file take precedence over environment variables.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
