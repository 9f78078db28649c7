"""Tests for snippet sanitization and truncation."""

from __future__ import annotations

import pytest

from pagesift.core.text import ELLIPSIS, strip_html, truncate


class TestStripHtml:
    def test_search_match_markup(self) -> None:
        html = '<span class="searchmatch">Cat</span> is an animal &amp; pet'
        assert strip_html(html) == "Cat is an animal & pet"

    def test_tags_become_spaces(self) -> None:
        # Adjacent words separated only by markup must not be glued together
        assert strip_html("alpha<br>beta<br/>gamma") == "alpha beta gamma"

    @pytest.mark.parametrize(
        ("html", "expected"),
        [
            ("&quot;quoted&quot;", '"quoted"'),
            ("it&#039;s", "it's"),
            ("salt &amp; pepper", "salt & pepper"),
            ("1 &lt; 2 &gt; 0", "1 < 2 > 0"),
        ],
    )
    def test_decodes_entity(self, html: str, expected: str) -> None:
        assert strip_html(html) == expected

    def test_amp_decoded_once(self) -> None:
        assert strip_html("&amp;quot;") == "&quot;"

    def test_other_entities_left_alone(self) -> None:
        assert strip_html("caf&eacute; &nbsp;") == "caf&eacute; &nbsp;"

    def test_decoded_angle_brackets_are_not_stripped(self) -> None:
        assert strip_html("&lt;b&gt;bold&lt;/b&gt;") == "<b>bold</b>"

    def test_collapses_whitespace_and_trims(self) -> None:
        assert strip_html("  many \n\t spaces   here  ") == "many spaces here"

    @pytest.mark.parametrize("html", ["", None, "<span></span>", "   "])
    def test_empty_input(self, html: str | None) -> None:
        assert strip_html(html) == ""


class TestTruncate:
    def test_short_text_unchanged(self) -> None:
        assert truncate("short", 160) == "short"

    def test_exact_length_unchanged(self) -> None:
        text = "z" * 160
        assert truncate(text, 160) == text

    def test_long_text_cut_with_ellipsis(self) -> None:
        result = truncate("x" * 200, 160)
        assert result == "x" * 160 + ELLIPSIS
        assert result.count(ELLIPSIS) == 1
        assert not result.endswith("...")

    def test_trailing_whitespace_trimmed_before_ellipsis(self) -> None:
        text = "a" * 159 + " " + "b" * 40
        assert truncate(text, 160) == "a" * 159 + ELLIPSIS

    def test_ellipsis_is_single_glyph(self) -> None:
        assert ELLIPSIS == "…"
