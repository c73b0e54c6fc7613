"""toolbridge — Tavily search and HTTP request tools for agent frameworks."""

__version__ = "0.1.0"
