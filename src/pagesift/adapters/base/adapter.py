"""Base search adapter — Abstract interface for search provider connectors.

Every provider must implement this interface to plug into PageSift.
The adapter is responsible for:
  1. Querying the provider with a free-text query and pagination cursor
  2. Reshaping the provider response into a ``ResultPage``
  3. Absorbing provider failures so callers always receive a well-formed page
  4. Reporting health status
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, Field

from pagesift.models.result import ResultPage


class AdapterHealth(BaseModel):
    """Health status of a search adapter."""

    status: str = Field(description="Health status: healthy, degraded, unhealthy")
    latency_ms: int = Field(default=0, description="Latency of last health check in ms")
    last_check: str | None = Field(default=None, description="ISO timestamp of last health check")
    message: str | None = Field(default=None, description="Additional health message")


class SearchAdapter(ABC):
    """Abstract base class for search provider adapters.

    All adapters must implement:
      - initialize() / shutdown(): manage the outbound HTTP client
      - fetch_page(): query the provider and return a normalized page
      - health_check(): report adapter health status

    Adapters hold no per-call state, so ``fetch_page`` may be awaited
    concurrently from several tasks.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique adapter name (e.g., 'wikipedia')."""

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the adapter (HTTP client, headers, etc.)."""

    @abstractmethod
    async def shutdown(self) -> None:
        """Release resources held by the adapter."""

    @abstractmethod
    async def fetch_page(self, query: str | None, offset: int = 0, limit: int = 10) -> ResultPage:
        """Fetch one page of normalized results.

        Implementations must never raise: provider failures degrade to an
        empty page.

        Args:
            query: Free-text query; surrounding whitespace is ignored.
            offset: Zero-based offset into the provider's result set.
            limit: Maximum number of results to request.

        Returns:
            The normalized result page.
        """

    @abstractmethod
    async def health_check(self) -> AdapterHealth:
        """Check the health of the search provider."""

    async def __aenter__(self) -> SearchAdapter:
        await self.initialize()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.shutdown()
