"""Adapter-specific exceptions."""


class AdapterError(Exception):
    """Base exception for adapter errors."""


class ConnectionError(AdapterError):
    """Raised when the adapter cannot reach the search provider."""


class QueryError(AdapterError):
    """Raised when a search request fails or returns an unusable payload."""


class EnrichmentError(AdapterError):
    """Raised when the secondary extract lookup fails."""


class ConfigurationError(AdapterError):
    """Raised when adapter configuration is invalid."""
