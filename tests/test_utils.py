"""Tests for width measurement and truncation utilities."""

from __future__ import annotations

from pi.prompt.utils import is_whitespace_char, truncate_to_width, visible_width


class TestVisibleWidth:
    def test_ascii(self) -> None:
        assert visible_width("hello") == 5

    def test_empty(self) -> None:
        assert visible_width("") == 0

    def test_ansi_codes_ignored(self) -> None:
        assert visible_width("\x1b[31mred\x1b[39m") == 3

    def test_wide_characters(self) -> None:
        assert visible_width("日本") == 4

    def test_decomposed_accent(self) -> None:
        assert visible_width("e\u0301") == 1

    def test_emoji(self) -> None:
        assert visible_width("👍") == 2


class TestTruncateToWidth:
    def test_fits(self) -> None:
        assert truncate_to_width("hello", 10) == "hello"

    def test_truncated_with_ellipsis(self) -> None:
        assert truncate_to_width("hello world", 8) == "hello..."

    def test_wide_characters_not_split(self) -> None:
        result = truncate_to_width("日本語テキスト", 8)
        assert result == "日本..."
        assert visible_width(result) <= 8

    def test_tiny_width(self) -> None:
        assert truncate_to_width("hello", 2) == ".."
        assert truncate_to_width("hello", 0) == ""

    def test_custom_ellipsis(self) -> None:
        assert truncate_to_width("hello world", 6, "…") == "hello…"


class TestIsWhitespace:
    def test_whitespace(self) -> None:
        for ch in (" ", "\t", "\u00a0", "\u3000"):
            assert is_whitespace_char(ch)

    def test_not_whitespace(self) -> None:
        for ch in ("a", "-", "_"):
            assert not is_whitespace_char(ch)
