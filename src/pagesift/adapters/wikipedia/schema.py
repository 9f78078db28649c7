"""MediaWiki Action API payloads consumed by the Wikipedia adapter.

Only the fields the adapter reads are modelled; everything else the API
returns is ignored. Validation failures surface as ``pydantic.ValidationError``
and are translated into adapter exceptions by the caller.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class SearchHit(BaseModel):
    """One ``list=search`` hit."""

    model_config = ConfigDict(extra="ignore")

    pageid: int
    title: str | None = None
    snippet: str | None = None


class SearchInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    totalhits: int | None = None


class SearchQuery(BaseModel):
    model_config = ConfigDict(extra="ignore")

    searchinfo: SearchInfo = Field(default_factory=SearchInfo)
    search: list[SearchHit] = Field(default_factory=list)

    @field_validator("searchinfo", "search", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None:
            return [] if info.field_name == "search" else {}
        return v


class SearchResponse(BaseModel):
    """Top-level ``action=query&list=search`` response."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    query: SearchQuery = Field(default_factory=SearchQuery)
    error: dict[str, Any] | None = None
    continuation: dict[str, Any] = Field(default_factory=dict, alias="continue")

    @field_validator("query", "continuation", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return {} if v is None else v

    @property
    def next_offset(self) -> int | None:
        """The continuation offset, or None when the provider signals the last page."""
        sroffset = self.continuation.get("sroffset")
        if isinstance(sroffset, int) and not isinstance(sroffset, bool):
            return sroffset
        return None


class ExtractPage(BaseModel):
    """One ``prop=extracts`` page entry."""

    model_config = ConfigDict(extra="ignore")

    pageid: int | None = None
    title: str | None = None
    extract: str | None = None


class ExtractQuery(BaseModel):
    model_config = ConfigDict(extra="ignore")

    pages: dict[str, ExtractPage] = Field(default_factory=dict)


class ExtractResponse(BaseModel):
    """Top-level ``action=query&prop=extracts`` response."""

    model_config = ConfigDict(extra="ignore")

    query: ExtractQuery = Field(default_factory=ExtractQuery)
    error: dict[str, Any] | None = None
