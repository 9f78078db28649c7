"""Search endpoint — One page of normalized Wikipedia results.

The adapter never raises for provider failures, so both forms always answer
200 with a ``ResultPage``. Callers distinguish the outcomes by cursor:

- ``next_offset == 0`` with no results: no query was submitted.
- ``next_offset is None`` with no results: the provider request failed or
  matched nothing on the final page.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from pagesift.adapters.base.adapter import SearchAdapter
from pagesift.api.deps import get_adapter
from pagesift.models.query import SearchRequest
from pagesift.models.result import ResultPage

router = APIRouter()


@router.post(
    "/search",
    response_model=ResultPage,
    summary="Search",
    description=(
        "Run a full-text search and return one normalized result page.\n\n"
        "An empty `query` returns `next_offset: 0` without contacting the provider; "
        "a failed provider request returns `next_offset: null`."
    ),
    responses={
        422: {"description": "Validation error — negative offset, limit out of range, etc."},
    },
)
async def search(
    request: SearchRequest,
    adapter: SearchAdapter = Depends(get_adapter),
) -> ResultPage:
    """Execute a search from a JSON body."""
    return await adapter.fetch_page(request.query, offset=request.offset, limit=request.limit)


@router.get(
    "/search",
    response_model=ResultPage,
    summary="Search (query string)",
    description="Same as `POST /v1/search`, with parameters taken from the query string.",
)
async def search_get(
    q: str = Query(default="", max_length=300, description="Free-text search query"),
    offset: int = Query(default=0, ge=0, description="Zero-based result offset"),
    limit: int = Query(default=10, ge=1, le=500, description="Maximum number of results"),
    adapter: SearchAdapter = Depends(get_adapter),
) -> ResultPage:
    """Execute a search from query-string parameters."""
    return await adapter.fetch_page(q, offset=offset, limit=limit)
