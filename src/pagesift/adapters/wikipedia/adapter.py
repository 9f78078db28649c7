"""Wikipedia adapter — Full-text search via the MediaWiki Action API.

Queries ``action=query&list=search`` for one page of hits, then makes a
best-effort ``prop=extracts`` batch lookup to give each hit a long-form
description. Snippets are stripped of highlight markup and cut to the
budgets the result page promises.

Usage::

    async with WikipediaAdapter(language="en") as adapter:
        page = await adapter.fetch_page("solar nowcasting", offset=0, limit=10)

API Reference: https://www.mediawiki.org/wiki/API:Search
"""

from __future__ import annotations

import asyncio
import logging
import time
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

import httpx

from pagesift.adapters.base.adapter import AdapterHealth, SearchAdapter
from pagesift.adapters.base.exceptions import (
    AdapterError,
    ConfigurationError,
    ConnectionError,
    EnrichmentError,
    QueryError,
)
from pagesift.adapters.wikipedia.schema import ExtractResponse, SearchHit, SearchResponse
from pagesift.config.settings import DEFAULT_USER_AGENT
from pagesift.core.text import strip_html, truncate
from pagesift.models.result import SOURCE_LABEL, ResultItem, ResultPage

if TYPE_CHECKING:
    from pagesift.config.settings import WikipediaSettings

logger = logging.getLogger(__name__)


class WikipediaAdapter(SearchAdapter):
    """Search adapter for Wikipedia's full-text search.

    Args:
        language: Wikipedia language code (e.g. ``"en"``, ``"de"``).
        endpoint: Action API URL. Defaults to the ``language`` wiki.
        user_agent: User-agent string for Wikimedia API requests.
        timeout: HTTP client timeout in seconds.
        pacing_delay: Seconds to wait before each primary request (0 disables).
        snippet_max_chars: Budget for the short snippet.
        description_max_chars: Budget for extract-based descriptions.
        max_limit: Upper bound applied to the requested page size.
        enrich: Whether to look up page extracts for descriptions.
        **kwargs: Extra keyword arguments (ignored, for config compat).
    """

    def __init__(
        self,
        language: str = "en",
        endpoint: str | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 15.0,
        pacing_delay: float = 0.4,
        snippet_max_chars: int = 160,
        description_max_chars: int = 600,
        max_limit: int = 500,
        enrich: bool = True,
        **kwargs: Any,
    ) -> None:
        self._language = language
        self._endpoint = endpoint or f"https://{language}.wikipedia.org/w/api.php"
        self._user_agent = user_agent
        self._timeout = timeout
        self._pacing_delay = pacing_delay
        self._snippet_max_chars = snippet_max_chars
        self._description_max_chars = description_max_chars
        self._max_limit = max_limit
        self._enrich = enrich
        self._client: httpx.AsyncClient | None = None
        self._extra_kwargs = kwargs

    @classmethod
    def from_settings(cls, settings: WikipediaSettings) -> WikipediaAdapter:
        """Build an adapter from the ``wikipedia`` settings section."""
        return cls(**settings.model_dump())

    @property
    def name(self) -> str:
        return "wikipedia"

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def initialize(self) -> None:
        """Create the shared HTTP client.

        Raises:
            ConfigurationError: If the endpoint or result budgets are invalid.
        """
        if not self._endpoint.startswith(("http://", "https://")):
            raise ConfigurationError(f"Wikipedia endpoint must be an http(s) URL, got: {self._endpoint!r}")
        if self._snippet_max_chars < 1 or self._description_max_chars < 1 or self._max_limit < 1:
            raise ConfigurationError("Wikipedia adapter budgets and max_limit must be positive.")

        self._client = httpx.AsyncClient(
            headers={
                "User-Agent": self._user_agent,
                "Accept": "application/json",
            },
            timeout=self._timeout,
        )
        logger.info(
            "Wikipedia adapter initialized (endpoint=%s, enrich=%s)",
            self._endpoint,
            self._enrich,
        )

    async def shutdown(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    # ── Search ───────────────────────────────────────────────────────────

    async def fetch_page(self, query: str | None, offset: int = 0, limit: int = 10) -> ResultPage:
        """Fetch one page of Wikipedia results for *query*.

        An empty query returns the "not submitted" page (cursor ``0``)
        without touching the network. A failed primary request returns the
        "failed" page (cursor ``None``). A failed extract lookup only costs
        the long-form descriptions.

        Args:
            query: Free-text query; surrounding whitespace is ignored.
            offset: Zero-based offset into the result set (``sroffset``).
            limit: Page size (``srlimit``), clamped to ``[1, max_limit]``.

        Returns:
            The normalized result page.
        """
        trimmed = (query or "").strip()
        if not trimmed:
            return ResultPage.not_submitted()

        offset = max(offset, 0)
        limit = min(max(limit, 1), self._max_limit)

        if self._pacing_delay > 0:
            await asyncio.sleep(self._pacing_delay)

        try:
            start = time.monotonic()
            response = await self._lookup(trimmed, offset, limit)
            took_ms = int((time.monotonic() - start) * 1000)
        except AdapterError as e:
            logger.error("Error fetching search results from Wikipedia: %s", e)
            return ResultPage.failed()

        hits = response.query.search
        total_hits = max(response.query.searchinfo.totalhits or 0, 0)
        next_offset = response.next_offset

        logger.debug(
            "Wikipedia search: query=%s, offset=%d, results=%d, total=%d, took=%dms",
            trimmed,
            offset,
            len(hits),
            total_hits,
            took_ms,
        )

        if not hits:
            return ResultPage(results=[], next_offset=next_offset, total_hits=total_hits)

        extracts = await self._enrich_descriptions(hits) if self._enrich else {}
        results = [self._to_result_item(hit, extracts) for hit in hits]

        return ResultPage(results=results, next_offset=next_offset, total_hits=total_hits)

    async def _lookup(self, query: str, offset: int, limit: int) -> SearchResponse:
        """Run the primary ``list=search`` request.

        Raises:
            ConnectionError: Transport failure or adapter not initialized.
            QueryError: Non-2xx status or a malformed payload.
        """
        params: dict[str, Any] = {
            "action": "query",
            "list": "search",
            "format": "json",
            "origin": "*",
            "srsearch": query,
            "sroffset": offset,
            "srlimit": limit,
        }
        try:
            response = SearchResponse.model_validate(await self._get_json(params))
        except httpx.HTTPStatusError as e:
            raise QueryError(f"Wikipedia API error ({e.response.status_code}): {e.response.text[:200]}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise ConnectionError(f"Wikipedia request failed: {e}") from e
        except ValueError as e:
            raise QueryError(f"Malformed Wikipedia search response: {e}") from e

        if response.error:
            raise QueryError(
                f"Wikipedia API error ({response.error.get('code', 'unknown')}): {response.error.get('info', '')}"
            )
        return response

    async def _enrich_descriptions(self, hits: list[SearchHit]) -> dict[str, str]:
        """Look up extracts for *hits*, falling back to an empty map on failure."""
        try:
            return await self._fetch_extracts([hit.pageid for hit in hits])
        except EnrichmentError as e:
            logger.warning("Could not fetch Wikipedia extracts, using snippets instead: %s", e)
            return {}

    async def _fetch_extracts(self, pageids: list[int]) -> dict[str, str]:
        """Fetch intro extracts for *pageids* in a single batch request.

        Returns:
            Cleaned, truncated extracts keyed by page identifier. Pages
            without an extract are left out.

        Raises:
            EnrichmentError: If the request fails or the payload is malformed.
        """
        params: dict[str, Any] = {
            "action": "query",
            "prop": "extracts",
            "exintro": 1,
            "explaintext": 1,
            "pageids": "|".join(str(pageid) for pageid in pageids),
            "format": "json",
            "origin": "*",
        }
        try:
            response = ExtractResponse.model_validate(await self._get_json(params))
        except (AdapterError, httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            raise EnrichmentError(f"Wikipedia extract lookup failed: {e}") from e

        if response.error:
            raise EnrichmentError(f"Wikipedia API error ({response.error.get('code', 'unknown')})")

        extracts: dict[str, str] = {}
        for key, page in response.query.pages.items():
            text = strip_html(page.extract)
            if not text:
                continue
            page_key = str(page.pageid) if page.pageid is not None else key
            extracts[page_key] = truncate(text, self._description_max_chars)
        return extracts

    async def _get_json(self, params: dict[str, Any]) -> Any:
        if self._client is None:
            raise ConnectionError("Wikipedia adapter not initialized.")

        response = await self._client.get(self._endpoint, params=params)
        response.raise_for_status()
        return response.json()

    # ── Schema mapping ───────────────────────────────────────────────────

    def _to_result_item(self, hit: SearchHit, extracts: dict[str, str]) -> ResultItem:
        """Map a search hit to ``ResultItem``.

        The description falls back to the full cleaned snippet, never the
        truncated one.
        """
        identifier = str(hit.pageid)
        clean_snippet = strip_html(hit.snippet)

        return ResultItem(
            id=identifier,
            title=hit.title or "",
            snippet=truncate(clean_snippet, self._snippet_max_chars),
            description=extracts.get(identifier, clean_snippet),
            source=SOURCE_LABEL,
            trend=None,
            pageid=hit.pageid,
        )

    # ── Health ───────────────────────────────────────────────────────────

    async def health_check(self) -> AdapterHealth:
        """Check Wikipedia API connectivity with a lightweight siteinfo query."""
        if self._client is None:
            return AdapterHealth(status="unhealthy", message="Wikipedia client not initialized")

        try:
            start = time.monotonic()
            response = await self._client.get(
                self._endpoint,
                params={"action": "query", "meta": "siteinfo", "format": "json"},
            )
            latency_ms = int((time.monotonic() - start) * 1000)

            if response.status_code == 200:
                return AdapterHealth(
                    status="healthy",
                    latency_ms=latency_ms,
                    last_check=datetime.now(UTC).isoformat(),
                    message=f"Wikipedia ({self._language}) OK",
                )
            return AdapterHealth(
                status="degraded",
                latency_ms=latency_ms,
                last_check=datetime.now(UTC).isoformat(),
                message=f"HTTP {response.status_code}",
            )
        except Exception as e:
            return AdapterHealth(status="unhealthy", message=str(e))
