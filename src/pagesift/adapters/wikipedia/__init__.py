"""Wikipedia (MediaWiki Action API) search adapter."""

from pagesift.adapters.wikipedia.adapter import WikipediaAdapter

__all__ = ["WikipediaAdapter"]
