"""Terminal backend: the capability set the prompt engine needs.

Provides a ``Backend`` protocol and a concrete ``ProcessTerminal`` that reads
keys from stdin in raw mode and writes ANSI escape sequences to stdout.
"""

from __future__ import annotations

import codecs
import logging
import os
import sys
import termios
import tty
from collections import deque
from typing import Protocol, TextIO

from pi.prompt.errors import BackendError, EndOfInputError
from pi.prompt.keys import Key, parse_key, split_input
from pi.prompt.style import Attributes, Color

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CLEAR_LINE = "\x1b[2K"
CURSOR_UP_FMT = "\x1b[{}A"
CURSOR_HORIZONTAL_RESET = "\r"
RESET_FG = "\x1b[39m"
RESET_BG = "\x1b[49m"
RESET_ATTRIBUTES = "\x1b[22;23;24;27m"


def sgr(*codes: int) -> str:
    """Select Graphic Rendition sequence for *codes*."""
    return "\x1b[" + ";".join(str(c) for c in codes) + "m"


# ---------------------------------------------------------------------------
# Backend protocol
# ---------------------------------------------------------------------------


class Backend(Protocol):
    """Interface for the terminal a prompt runs in."""

    def start(self) -> None: ...

    def stop(self) -> None: ...

    def read_key(self) -> Key: ...

    def write(self, data: str) -> None: ...

    def flush(self) -> None: ...

    @property
    def columns(self) -> int: ...

    def set_fg_color(self, color: Color) -> None: ...

    def set_bg_color(self, color: Color) -> None: ...

    def set_attributes(self, att: Attributes) -> None: ...

    def reset_fg_color(self) -> None: ...

    def reset_bg_color(self) -> None: ...

    def reset_attributes(self) -> None: ...

    def cursor_up(self, lines: int = 1) -> None: ...

    def cursor_horizontal_reset(self) -> None: ...

    def clear_line(self) -> None: ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Backend on the process's stdin/stdout.

    ``start`` switches stdin to raw mode and ``stop`` restores the saved
    attributes; it is also usable as a context manager. Writes are buffered
    until ``flush``.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._original_termios: list | None = None
        self._pending: deque[str] = deque()
        self._out: list[str] = []
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._write_log_path: str = os.environ.get("PI_PROMPT_WRITE_LOG", "")

    def __enter__(self) -> ProcessTerminal:
        self.start()
        return self

    def __exit__(self, *exc: object) -> None:
        self.stop()

    # -- properties ---------------------------------------------------------

    @property
    def columns(self) -> int:
        try:
            return os.get_terminal_size(self._stdout.fileno()).columns
        except (ValueError, OSError):
            return 80

    # -- start / stop -------------------------------------------------------

    def start(self) -> None:
        """Save the terminal attributes and enable raw mode."""
        fd = self._stdin.fileno()
        try:
            self._original_termios = termios.tcgetattr(fd)
            tty.setraw(fd)
        except termios.error as e:
            raise BackendError(f"stdin is not a terminal: {e}") from e
        logger.debug("raw mode enabled on fd %d", fd)

    def stop(self) -> None:
        """Flush pending output and restore the saved terminal attributes."""
        try:
            self.flush()
        finally:
            if self._original_termios is not None:
                fd = self._stdin.fileno()
                termios.tcsetattr(fd, termios.TCSADRAIN, self._original_termios)
                self._original_termios = None
                logger.debug("terminal attributes restored on fd %d", fd)

    # -- input --------------------------------------------------------------

    def read_key(self) -> Key:
        """Block until a recognised key arrives."""
        while True:
            while self._pending:
                chunk = self._pending.popleft()
                key = parse_key(chunk)
                if key is not None:
                    return key
                logger.debug("ignoring unrecognised input %r", chunk)

            try:
                raw = os.read(self._stdin.fileno(), 1024)
            except OSError as e:
                raise BackendError(f"failed to read from terminal: {e}") from e

            if not raw:
                raise EndOfInputError()

            self._pending.extend(split_input(self._decoder.decode(raw)))

    # -- output -------------------------------------------------------------

    def write(self, data: str) -> None:
        self._out.append(data)

    def flush(self) -> None:
        """Write buffered output to stdout and optionally to the write log."""
        if not self._out:
            return
        data = "".join(self._out)
        self._out.clear()
        try:
            self._stdout.write(data)
            self._stdout.flush()
        except OSError as e:
            raise BackendError(f"failed to write to terminal: {e}") from e

        if self._write_log_path:
            try:
                with open(self._write_log_path, "a") as f:
                    f.write(data)
            except OSError:
                logger.warning("could not append to write log %s", self._write_log_path)

    # -- styles -------------------------------------------------------------

    def set_fg_color(self, color: Color) -> None:
        self.write(sgr(color.fg_code))

    def set_bg_color(self, color: Color) -> None:
        self.write(sgr(color.bg_code))

    def set_attributes(self, att: Attributes) -> None:
        codes = att.sgr_codes()
        if codes:
            self.write(sgr(*codes))

    def reset_fg_color(self) -> None:
        self.write(RESET_FG)

    def reset_bg_color(self) -> None:
        self.write(RESET_BG)

    def reset_attributes(self) -> None:
        self.write(RESET_ATTRIBUTES)

    # -- cursor / line manipulation -----------------------------------------

    def cursor_up(self, lines: int = 1) -> None:
        if lines > 0:
            self.write(CURSOR_UP_FMT.format(lines))

    def cursor_horizontal_reset(self) -> None:
        self.write(CURSOR_HORIZONTAL_RESET)

    def clear_line(self) -> None:
        self.write(CLEAR_LINE)

    def hide_cursor(self) -> None:
        self.write(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.write(SHOW_CURSOR)
