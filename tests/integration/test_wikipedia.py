"""Integration tests for WikipediaAdapter against the live Wikipedia API.

No container needed — tests hit the public Wikipedia API directly.
Run with ``pytest -m integration``.
"""

from __future__ import annotations

import pytest

from pagesift.adapters.wikipedia.adapter import WikipediaAdapter

pytestmark = [pytest.mark.integration, pytest.mark.asyncio, pytest.mark.wikipedia]


@pytest.fixture
async def adapter():
    a = WikipediaAdapter(language="en", pacing_delay=0)
    await a.initialize()
    yield a
    await a.shutdown()


class TestWikipediaHealth:
    async def test_health_check_returns_healthy(self, adapter):
        health = await adapter.health_check()
        assert health.status == "healthy"
        assert health.latency_ms >= 0


class TestWikipediaFetchPage:
    async def test_returns_results(self, adapter):
        page = await adapter.fetch_page("Albert Einstein", limit=5)
        assert page.total_hits > 0
        assert 0 < len(page.results) <= 5
        assert page.next_offset == 5

    async def test_results_are_normalized(self, adapter):
        page = await adapter.fetch_page("Python programming language", limit=3)
        for item in page.results:
            assert item.source == "Wikipedia"
            assert item.id == str(item.pageid)
            assert "<span" not in item.snippet
            assert len(item.snippet) <= 161
            assert len(item.description) <= 601

    async def test_second_page(self, adapter):
        first = await adapter.fetch_page("machine learning", limit=3)
        second = await adapter.fetch_page("machine learning", offset=first.next_offset, limit=3)
        assert {r.id for r in first.results}.isdisjoint({r.id for r in second.results})

    async def test_no_results_for_gibberish(self, adapter):
        page = await adapter.fetch_page("xyzzy999qqq888zzz")
        assert page.results == []
        assert page.total_hits == 0
        assert page.next_offset is None
