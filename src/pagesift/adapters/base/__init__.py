"""Base adapter interface — Abstract classes for search provider connectors."""

from pagesift.adapters.base.adapter import AdapterHealth, SearchAdapter

__all__ = ["AdapterHealth", "SearchAdapter"]
