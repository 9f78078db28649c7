"""Shared test fixtures and configuration."""

from __future__ import annotations

from typing import Any

import pytest

from pagesift.config.settings import Settings


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults and no pacing delay."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        debug=True,
        wikipedia={"pacing_delay": 0.0},
    )


@pytest.fixture
def cat_search_response() -> dict[str, Any]:
    """A one-hit ``list=search`` response for the query "cat"."""
    return {
        "batchcomplete": "",
        "continue": {"sroffset": 10, "continue": "-||"},
        "query": {
            "searchinfo": {"totalhits": 4321},
            "search": [
                {
                    "ns": 0,
                    "title": "Cat",
                    "pageid": 111,
                    "size": 190000,
                    "wordcount": 18000,
                    "snippet": '<span class="searchmatch">Cat</span> is an animal &amp; pet',
                    "timestamp": "2025-01-15T12:00:00Z",
                },
            ],
        },
    }


@pytest.fixture
def cat_extract_response() -> dict[str, Any]:
    """A ``prop=extracts`` response for page 111."""
    return {
        "batchcomplete": "",
        "query": {
            "pages": {
                "111": {
                    "pageid": 111,
                    "ns": 0,
                    "title": "Cat",
                    "extract": "Cats are small carnivorous mammals...",
                },
            },
        },
    }
