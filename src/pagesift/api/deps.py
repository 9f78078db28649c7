"""API dependencies — Dependency injection for FastAPI endpoints."""

from __future__ import annotations

from pagesift.adapters.base.adapter import SearchAdapter

# Global adapter instance (set during application lifespan)
_adapter: SearchAdapter | None = None


def set_adapter(adapter: SearchAdapter | None) -> None:
    """Set the global adapter instance (called during app lifespan)."""
    global _adapter
    _adapter = adapter


def get_adapter() -> SearchAdapter:
    """Get the global search adapter instance.

    Raises:
        RuntimeError: If the adapter is not initialized.
    """
    if _adapter is None:
        raise RuntimeError("PageSift adapter not initialized. Is the server running?")
    return _adapter
