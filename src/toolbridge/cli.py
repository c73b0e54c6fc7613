"""CLI entry point for toolbridge tools."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from toolbridge.config.settings import Settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="toolbridge",
        description="toolbridge — Tavily search and HTTP request tools",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"toolbridge {_get_version()}",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    search = commands.add_parser("search", help="Search the web with Tavily")
    search.add_argument("query", help="Search query")
    search.add_argument("--topic", default="", help="Search category: general or news")

    delete = commands.add_parser("delete", help="Send an HTTP DELETE request")
    delete.add_argument("url", help="Target URL")

    commands.add_parser("tools", help="List available tools and their parameter schemas")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    from toolbridge.config.settings import Settings
    from toolbridge.observability.logging import setup_logging

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        settings = Settings.from_yaml(config_path)
    else:
        settings = Settings()

    if args.log_level:
        settings.observability.log_level = args.log_level
    setup_logging(settings.observability)

    from toolbridge.tools.base.exceptions import ToolError
    from toolbridge.tools.base.registry import ToolNotFoundError

    try:
        output = asyncio.run(_run(args, settings))
    except (ToolError, ToolNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(output)


async def _run(args: argparse.Namespace, settings: Settings) -> str:
    from toolbridge.tools import create_registry
    from toolbridge.tools.httprequest import DeleteRequest
    from toolbridge.tools.httprequest.delete import DEFAULT_TOOL_NAME as DELETE_TOOL_NAME
    from toolbridge.tools.tavily import SearchRequest
    from toolbridge.tools.tavily.config import DEFAULT_TOOL_NAME as SEARCH_TOOL_NAME

    registry = create_registry(settings)
    try:
        if args.command == "tools":
            return json.dumps([info.model_dump() for info in registry.infos()], indent=2)

        if args.command == "search":
            if not settings.tavily.api_key:
                from toolbridge.tools.base.exceptions import ConfigurationError

                raise ConfigurationError("Tavily API key is required. Set TOOLBRIDGE_TAVILY__API_KEY")
            name = settings.tavily.tool_name or SEARCH_TOOL_NAME
            request = SearchRequest(query=args.query, topic=args.topic)
            return await registry.get(name).invoke(request.model_dump_json())

        name = settings.http.delete_tool_name or DELETE_TOOL_NAME
        request_json = DeleteRequest(url=args.url).model_dump_json()
        return await registry.get(name).invoke(request_json)
    finally:
        await registry.shutdown_all()


def _get_version() -> str:
    """Get the package version."""
    try:
        from toolbridge import __version__

        return __version__
    except ImportError:
        return "unknown"


if __name__ == "__main__":
    main()
