"""Health check endpoints — Service and provider health monitoring."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from pagesift import __version__
from pagesift.adapters.base.adapter import AdapterHealth, SearchAdapter
from pagesift.api.deps import get_adapter

router = APIRouter()


class HealthResponse(BaseModel):
    """Service health check response."""

    status: str = Field(description="Health status (e.g. 'healthy')")
    version: str = Field(description="PageSift server version")
    service: str = Field(description="Service name ('pagesift')")
    adapter: str = Field(description="Name of the active search adapter")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service Health Check",
    description="Returns service status, server version and the active adapter name.",
)
async def health_check(
    adapter: SearchAdapter = Depends(get_adapter),
) -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        service="pagesift",
        adapter=adapter.name,
    )


@router.get(
    "/health/adapter",
    response_model=AdapterHealth,
    summary="Provider Health Check",
    description="Probe the search provider and report status, latency and a diagnostic message.",
)
async def adapter_health(
    adapter: SearchAdapter = Depends(get_adapter),
) -> AdapterHealth:
    """Check health of the search provider."""
    return await adapter.health_check()
