"""Tests for ProcessTerminal using pipes instead of a real tty."""

from __future__ import annotations

import io
import os

import pytest

from pi.prompt.errors import BackendError, EndOfInputError
from pi.prompt.keys import Key, KeyModifiers
from pi.prompt.style import Attributes, Color
from pi.prompt.terminal import ProcessTerminal


@pytest.fixture
def make_terminal():
    """Build a ProcessTerminal whose stdin is a pipe preloaded with *data*."""
    opened = []

    def _make(data: bytes = b"") -> tuple[ProcessTerminal, io.StringIO]:
        r, w = os.pipe()
        os.write(w, data)
        os.close(w)
        stdin = os.fdopen(r, "rb")
        opened.append(stdin)
        stdout = io.StringIO()
        return ProcessTerminal(stdin=stdin, stdout=stdout), stdout

    yield _make
    for f in opened:
        f.close()


class TestProcessTerminalInput:
    def test_reads_keys_in_order(self, make_terminal) -> None:
        term, _ = make_terminal(b"ab\x1b[A\r")
        assert term.read_key() == Key.of_char("a")
        assert term.read_key() == Key.of_char("b")
        assert term.read_key() == Key("up")
        assert term.read_key() == Key("enter")

    def test_modified_keys(self, make_terminal) -> None:
        term, _ = make_terminal(b"\x1b[1;5D\x03")
        assert term.read_key().id == "ctrl+left"
        assert term.read_key() == Key.of_char("c", KeyModifiers.CONTROL)

    def test_utf8_input(self, make_terminal) -> None:
        term, _ = make_terminal("\u00e9\u65e5".encode())
        assert term.read_key() == Key.of_char("\u00e9")
        assert term.read_key() == Key.of_char("\u65e5")

    def test_unrecognised_sequences_skipped(self, make_terminal) -> None:
        term, _ = make_terminal(b"\x1b[99~x")
        assert term.read_key() == Key.of_char("x")

    def test_end_of_input(self, make_terminal) -> None:
        term, _ = make_terminal(b"a")
        term.read_key()
        with pytest.raises(EndOfInputError):
            term.read_key()


class TestProcessTerminalOutput:
    def test_writes_buffered_until_flush(self, make_terminal) -> None:
        term, stdout = make_terminal()
        term.write("hello")
        assert stdout.getvalue() == ""
        term.flush()
        assert stdout.getvalue() == "hello"

    def test_escape_sequences(self, make_terminal) -> None:
        term, stdout = make_terminal()
        term.set_fg_color(Color.RED)
        term.set_bg_color(Color.BLUE)
        term.set_attributes(Attributes.BOLD | Attributes.UNDERLINE)
        term.reset_fg_color()
        term.cursor_up(2)
        term.cursor_up(0)
        term.cursor_horizontal_reset()
        term.clear_line()
        term.hide_cursor()
        term.show_cursor()
        term.flush()
        assert stdout.getvalue() == (
            "\x1b[31m\x1b[44m\x1b[1;4m\x1b[39m\x1b[2A\r\x1b[2K\x1b[?25l\x1b[?25h"
        )

    def test_columns_fallback(self, make_terminal) -> None:
        term, _ = make_terminal()
        assert term.columns == 80

    def test_write_log(self, make_terminal, tmp_path, monkeypatch) -> None:
        log_path = tmp_path / "writes.log"
        monkeypatch.setenv("PI_PROMPT_WRITE_LOG", str(log_path))
        term, _ = make_terminal()
        term.write("abc")
        term.flush()
        term.write("def")
        term.flush()
        assert log_path.read_text() == "abcdef"


class TestProcessTerminalLifecycle:
    def test_start_requires_tty(self, make_terminal) -> None:
        term, _ = make_terminal()
        with pytest.raises(BackendError):
            term.start()

    def test_stop_without_start_flushes(self, make_terminal) -> None:
        term, stdout = make_terminal()
        term.write("bye")
        term.stop()
        assert stdout.getvalue() == "bye"
