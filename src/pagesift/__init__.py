"""PageSift — Wikipedia search results reshaped into a stable, UI-friendly page format."""

__version__ = "0.1.0"
