"""Result models — The stable page shape consumed by rendering layers.

A provider response is reshaped into a ``ResultPage`` holding ordered
``ResultItem`` entries plus the pagination cursor for the next request.
Both are built fresh for every call and never mutated afterwards.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

SOURCE_LABEL = "Wikipedia"


class ResultItem(BaseModel):
    """A single normalized search result.

    Example::

        ResultItem(
            id="111",
            title="Cat",
            snippet="Cat is an animal & pet",
            description="The cat is a small domesticated carnivorous mammal...",
            pageid=111,
        )
    """

    id: str = Field(description="Stable identifier derived from the provider page id")
    title: str = Field(default="", description="Page title")
    snippet: str = Field(
        default="",
        description="Short plain-text excerpt (at most 160 characters plus an ellipsis)",
    )
    description: str = Field(
        default="",
        description="Long-form text: the page extract when available, else the full cleaned snippet",
    )
    source: str = Field(default=SOURCE_LABEL, description="Constant provider badge label")
    trend: None = Field(default=None, description="Trend indicator (never provided by this source)")
    pageid: int = Field(description="Raw provider page identifier")


class ResultPage(BaseModel):
    """One page of normalized results.

    ``next_offset`` carries two distinct sentinels besides a real offset:
    ``0`` when no query was submitted and ``None`` when there is no further
    page (including when the provider request failed).
    """

    results: list[ResultItem] = Field(default_factory=list, description="Results in provider rank order")
    next_offset: int | None = Field(default=None, description="Offset of the next page, or None when exhausted")
    total_hits: int = Field(default=0, ge=0, description="Total hits reported by the provider")

    @classmethod
    def not_submitted(cls) -> ResultPage:
        """Page returned for an empty query, before any request is made."""
        return cls(results=[], next_offset=0, total_hits=0)

    @classmethod
    def failed(cls) -> ResultPage:
        """Page returned when the provider request was attempted and failed."""
        return cls(results=[], next_offset=None, total_hits=0)
