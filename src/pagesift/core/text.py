"""Text normalization helpers for provider snippets and extracts.

MediaWiki search snippets contain highlight markup such as
``<span class="searchmatch">`` plus a handful of HTML entities. These helpers
turn them into plain display text and enforce the length budgets of the
result page.
"""

from __future__ import annotations

import re

ELLIPSIS = "…"

# Decoded in this order, one pass each; "&amp;quot;" stays "&quot;" but "&amp;lt;" ends up as "<".
_ENTITIES: tuple[tuple[str, str], ...] = (
    ("&quot;", '"'),
    ("&#039;", "'"),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
)


def strip_html(html: str | None) -> str:
    """Strip markup from *html* and return clean, single-spaced text.

    Tags are replaced with a space rather than removed so adjacent words
    are not glued together, then a fixed set of entities is decoded and
    whitespace runs are collapsed.

    Args:
        html: Raw provider snippet. ``None`` is treated as empty.

    Returns:
        The cleaned text, trimmed at both ends.
    """
    if not html:
        return ""

    text = re.sub(r"<[^>]+>", " ", html)
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return re.sub(r"\s+", " ", text).strip()


def truncate(text: str, max_chars: int) -> str:
    """Cut *text* to *max_chars* and mark the cut with a single ellipsis glyph.

    Trailing whitespace left by the cut is removed before the ellipsis is
    appended. Text that already fits is returned unchanged.
    """
    if len(text) <= max_chars:
        return text
    return text[:max_chars].rstrip() + ELLIPSIS
