"""Input buffer - single-line text being typed, with a cursor.

The cursor counts Unicode code points, not bytes, so every edit moves by one
character regardless of its encoded size. All edits absorb edge conditions
(cursor already at a bound) as no-ops.
"""

from __future__ import annotations

from pi.prompt.actions import InputAction
from pi.prompt.utils import is_whitespace_char


class Input:
    """Text content plus a cursor index in ``[0, len(content)]``."""

    def __init__(self, content: str = "") -> None:
        self._content = content
        self._cursor = len(content)

    @classmethod
    def with_cursor(cls, content: str, cursor: int) -> Input:
        inp = cls(content)
        inp._cursor = max(0, min(cursor, len(content)))
        return inp

    @property
    def content(self) -> str:
        return self._content

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._content)

    def is_empty(self) -> bool:
        return not self._content

    def clear(self) -> None:
        self._content = ""
        self._cursor = 0

    # -- edits --------------------------------------------------------------

    def handle(self, action: InputAction) -> bool:
        """Apply *action*; return ``True`` if content or cursor changed."""
        before = (self._content, self._cursor)

        kind = action.kind
        if kind == "insert":
            self.insert(action.char)
        elif kind == "delete_left":
            self.delete_left()
        elif kind == "delete_right":
            self.delete_right()
        elif kind == "delete_word_left":
            self.delete_word_left()
        elif kind == "delete_word_right":
            self.delete_word_right()
        elif kind == "move_left":
            self.move_left()
        elif kind == "move_right":
            self.move_right()
        elif kind == "move_word_left":
            self.move_word_left()
        elif kind == "move_word_right":
            self.move_word_right()
        elif kind == "move_to_start":
            self.move_to_start()
        elif kind == "move_to_end":
            self.move_to_end()

        return before != (self._content, self._cursor)

    def insert(self, char: str) -> None:
        self._content = self._content[: self._cursor] + char + self._content[self._cursor :]
        self._cursor += len(char)

    def delete_left(self) -> None:
        if self._cursor == 0:
            return
        self._content = self._content[: self._cursor - 1] + self._content[self._cursor :]
        self._cursor -= 1

    def delete_right(self) -> None:
        if self._cursor >= len(self._content):
            return
        self._content = self._content[: self._cursor] + self._content[self._cursor + 1 :]

    def delete_word_left(self) -> None:
        end = self._cursor
        self.move_word_left()
        self._content = self._content[: self._cursor] + self._content[end:]

    def delete_word_right(self) -> None:
        start = self._cursor
        end = self._word_right_index()
        self._content = self._content[:start] + self._content[end:]

    # -- movement -----------------------------------------------------------

    def move_left(self) -> None:
        if self._cursor > 0:
            self._cursor -= 1

    def move_right(self) -> None:
        if self._cursor < len(self._content):
            self._cursor += 1

    def move_to_start(self) -> None:
        self._cursor = 0

    def move_to_end(self) -> None:
        self._cursor = len(self._content)

    def move_word_left(self) -> None:
        idx = self._cursor
        # Skip whitespace before the cursor, then the word itself
        while idx > 0 and is_whitespace_char(self._content[idx - 1]):
            idx -= 1
        while idx > 0 and not is_whitespace_char(self._content[idx - 1]):
            idx -= 1
        self._cursor = idx

    def move_word_right(self) -> None:
        self._cursor = self._word_right_index()

    def _word_right_index(self) -> int:
        idx = self._cursor
        size = len(self._content)
        # Skip the rest of the current word, then the whitespace after it
        while idx < size and not is_whitespace_char(self._content[idx]):
            idx += 1
        while idx < size and is_whitespace_char(self._content[idx]):
            idx += 1
        return idx

    # -- rendering ----------------------------------------------------------

    def split(self) -> tuple[str, str, str]:
        """Return ``(before, at, after)`` around the cursor.

        ``at`` is a single space when the cursor sits past the last
        character, so the cursor is always drawable.
        """
        before = self._content[: self._cursor]
        at = self._content[self._cursor : self._cursor + 1] or " "
        after = self._content[self._cursor + 1 :]
        return before, at, after
