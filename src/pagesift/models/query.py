"""Search request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SearchRequest(BaseModel):
    """Incoming search request from the API.

    An empty ``query`` is accepted: it yields the "not submitted" page
    rather than a validation error.
    """

    query: str = Field(default="", max_length=300, description="Free-text search query")
    offset: int = Field(default=0, ge=0, description="Zero-based offset into the provider result set")
    limit: int = Field(default=10, ge=1, le=500, description="Maximum number of results to return")
