"""Search adapter layer — Connectors that reshape provider responses into result pages.

Built-in adapters:
  - wikipedia: MediaWiki Action API full-text search with extract enrichment

Implement ``SearchAdapter`` to connect another provider.
"""
