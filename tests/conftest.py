"""Shared test fixtures and configuration."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from toolbridge.tools.tavily.config import TavilySearchConfig

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def mock_api_key() -> str:
    return "{mock_api_key}"


@pytest.fixture
def tavily_config(mock_api_key: str) -> TavilySearchConfig:
    """Config with only the secret set."""
    return TavilySearchConfig(api_key=mock_api_key)


@pytest.fixture
def make_client() -> Callable[[Handler], httpx.AsyncClient]:
    """Factory for an AsyncClient whose transport is a handler function."""

    def _make(handler: Handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def sample_search_payload() -> dict[str, Any]:
    """Tavily search reply: five results, no answer, no images."""
    return {
        "query": "what is transformer",
        "follow_up_questions": None,
        "answer": None,
        "images": [],
        "results": [
            {
                "title": "Transformer: What is it? (Definition And Working Principle)",
                "url": "https://www.electrical4u.com/what-is-transformer-definition-working-principle-of-transformer/",
                "content": (
                    "A transformer is defined as a passive electrical device that transfers electrical "
                    "energy from one circuit to another through the process of electromagnetic induction."
                ),
                "score": 0.9006087,
                "raw_content": None,
            },
            {
                "title": "Transformer | Definition, Types, & Facts | Britannica",
                "url": "https://www.britannica.com/technology/transformer-electronics",
                "content": (
                    "Transformer, device that transfers electric energy from one alternating-current "
                    "circuit to one or more other circuits, either increasing or reducing the voltage."
                ),
                "score": 0.8440111,
                "raw_content": None,
            },
            {
                "title": "How do electricity transformers work? - Explain that Stuff",
                "url": "https://www.explainthatstuff.com/transformers.html",
                "content": (
                    "How does a transformer work? A transformer is based on a very simple fact about "
                    'electricity: when a fluctuating electric current flows through a wire, it generates "magnetic flux".'
                ),
                "score": 0.6364215,
                "raw_content": None,
            },
            {
                "title": "Transformer - Wikipedia",
                "url": "https://en.wikipedia.org/wiki/Transformer",
                "content": "[Jump to content](https://en.wikipedia.org/wiki/Transformer#bodyContent) 112 languages",
                "score": 0.57637566,
                "raw_content": None,
            },
            {
                "title": "What is a Transformer ? Construction, Working, Types & Uses",
                "url": "https://www.electricaltechnology.org/2012/02/working-principle-of-transformer.html",
                "content": (
                    "Learn what is an electrical transformer, how it works on the principle of mutual "
                    "induction, and what are its parts, types and applications."
                ),
                "score": 0.47928494,
                "raw_content": None,
            },
        ],
        "response_time": 1.58,
    }
