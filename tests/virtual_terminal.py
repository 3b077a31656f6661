"""Virtual terminal for testing -- implements the Backend protocol in-memory.

This module provides a ``VirtualTerminal`` class that satisfies the
``pi.prompt.terminal.Backend`` protocol without performing any real I/O.
Keys are served from a scripted list, all output is captured for
assertions, and a tiny screen model replays cursor movement and line
clearing so tests can check what is left visible.
"""

from __future__ import annotations

import re
from typing import Iterable

from pi.prompt.errors import EndOfInputError
from pi.prompt.keys import Key, key_from_id
from pi.prompt.style import Attributes, Color
from pi.prompt.terminal import (
    CLEAR_LINE,
    HIDE_CURSOR,
    RESET_ATTRIBUTES,
    RESET_BG,
    RESET_FG,
    SHOW_CURSOR,
    sgr,
)

_SGR_RE = re.compile(r"\x1b\[[0-9;]*m")


def type_text(text: str) -> list[Key]:
    """One key per character of *text*."""
    return [Key.of_char(ch) for ch in text]


def press(*key_ids: str) -> list[Key]:
    """Keys for the given key ids, e.g. ``press("left", "ctrl+w")``."""
    return [key_from_id(key_id) for key_id in key_ids]


class VirtualTerminal:
    """In-memory backend that records all writes for test inspection.

    Parameters
    ----------
    keys:
        Keys returned by ``read_key``, in order. When they run out,
        ``read_key`` raises :class:`EndOfInputError`.
    columns:
        Number of terminal columns (width).
    """

    def __init__(self, keys: Iterable[Key] = (), columns: int = 80) -> None:
        self._keys = list(keys)
        self._columns = columns
        self._buffer: list[str] = []
        self._rows: list[str] = [""]
        self._row = 0
        self._col = 0
        self.started = False
        self.start_count = 0
        self.stop_count = 0
        self.cursor_visible = True
        self.flush_count = 0
        self.keys_read = 0

    # -- Backend protocol: lifecycle ----------------------------------------

    def start(self) -> None:
        self.started = True
        self.start_count += 1

    def stop(self) -> None:
        self.started = False
        self.stop_count += 1

    # -- Backend protocol: input --------------------------------------------

    def read_key(self) -> Key:
        if self.keys_read >= len(self._keys):
            raise EndOfInputError("Custom stream of characters has ended")
        key = self._keys[self.keys_read]
        self.keys_read += 1
        return key

    def feed(self, keys: Iterable[Key]) -> None:
        self._keys.extend(keys)

    # -- Backend protocol: output -------------------------------------------

    @property
    def columns(self) -> int:
        return self._columns

    def write(self, data: str) -> None:
        """Append *data* to the buffer and draw it on the screen model."""
        self._buffer.append(data)
        if data.startswith("\x1b"):
            return
        for i, piece in enumerate(data.split("\n")):
            if i > 0:
                self._row += 1
                self._col = 0
                if self._row == len(self._rows):
                    self._rows.append("")
            line = self._rows[self._row].ljust(self._col)
            self._rows[self._row] = line[: self._col] + piece + line[self._col + len(piece) :]
            self._col += len(piece)

    def flush(self) -> None:
        self.flush_count += 1

    def set_fg_color(self, color: Color) -> None:
        self._buffer.append(sgr(color.fg_code))

    def set_bg_color(self, color: Color) -> None:
        self._buffer.append(sgr(color.bg_code))

    def set_attributes(self, att: Attributes) -> None:
        codes = att.sgr_codes()
        if codes:
            self._buffer.append(sgr(*codes))

    def reset_fg_color(self) -> None:
        self._buffer.append(RESET_FG)

    def reset_bg_color(self) -> None:
        self._buffer.append(RESET_BG)

    def reset_attributes(self) -> None:
        self._buffer.append(RESET_ATTRIBUTES)

    # -- Backend protocol: cursor/line manipulation -------------------------

    def cursor_up(self, lines: int = 1) -> None:
        self._buffer.append(f"\x1b[{lines}A")
        self._row = max(0, self._row - lines)

    def cursor_horizontal_reset(self) -> None:
        self._buffer.append("\r")
        self._col = 0

    def clear_line(self) -> None:
        self._buffer.append(CLEAR_LINE)
        self._rows[self._row] = ""

    def hide_cursor(self) -> None:
        self.cursor_visible = False
        self._buffer.append(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.cursor_visible = True
        self._buffer.append(SHOW_CURSOR)

    # -- Test helpers -------------------------------------------------------

    @property
    def output(self) -> str:
        """Return everything written to the terminal as a single string."""
        return "".join(self._buffer)

    @property
    def plain_output(self) -> str:
        """Output with color and attribute sequences removed."""
        return _SGR_RE.sub("", self.output)

    @property
    def screen(self) -> list[str]:
        """Visible rows, without trailing empty rows."""
        rows = list(self._rows)
        while rows and not rows[-1]:
            rows.pop()
        return rows

    @property
    def cursor_row(self) -> int:
        return self._row

    def clear_buffer(self) -> None:
        """Discard all recorded output (the screen model is kept)."""
        self._buffer.clear()
