"""Display width helpers used to keep each option on a single terminal row."""

from __future__ import annotations

import re
import unicodedata

import grapheme
import wcwidth

_SGR_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")

# Code points that turn a cluster into a two-column emoji presentation
_EMOJI_JOINERS = {0xFE0F, 0x200D}
_SKIN_TONES = range(0x1F3FB, 0x1F400)
_REGIONAL_INDICATORS = range(0x1F1E6, 0x1F200)


def cluster_width(cluster: str) -> int:
    """Columns taken by one grapheme cluster."""
    first = cluster[:1]
    if not first:
        return 0

    if len(cluster) > 1:
        for cp in map(ord, cluster):
            if cp in _EMOJI_JOINERS or cp in _SKIN_TONES or cp in _REGIONAL_INDICATORS:
                return 2
        if ord(first) >= 0x1F000:
            return 2
        if unicodedata.category(first) in ("Mn", "Me", "Mc", "Cf"):
            return 0

    # wcwidth reports -1 for control characters
    return max(wcwidth.wcwidth(first), 0)


def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*, ignoring ANSI codes."""
    plain = _SGR_RE.sub("", text)
    if plain.isascii() and plain.isprintable():
        return len(plain)
    return sum(cluster_width(g) for g in grapheme.graphemes(plain))


def truncate_to_width(text: str, max_width: int, ellipsis: str = "...") -> str:
    """Truncate *text* to fit within *max_width* columns.

    The cut falls on a grapheme boundary and *ellipsis* counts towards the
    width. Text that already fits is returned unchanged.
    """
    if max_width <= 0:
        return ""
    if visible_width(text) <= max_width:
        return text

    room = max_width - visible_width(ellipsis)
    if room <= 0:
        return _head(ellipsis, max_width)
    return _head(text, room) + ellipsis


def _head(text: str, columns: int) -> str:
    """Longest prefix of whole clusters that fits in *columns*."""
    used = 0
    end = 0
    for g in grapheme.graphemes(text):
        used += cluster_width(g)
        if used > columns:
            break
        end += len(g)
    return text[:end]


def is_whitespace_char(char: str) -> bool:
    """Return ``True`` if *char* separates words in the input line."""
    return char in " \t\n\r\f\v\u00a0\u3000"
