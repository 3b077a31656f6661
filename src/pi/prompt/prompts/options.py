"""Filterable option list shared by the list-style prompts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Sequence, TypeVar

from pi.prompt.pager import Page, paginate

T = TypeVar("T")

# (filter text, option, option as displayed, option index) -> keep?
Filter = Callable[[str, T, str, int], bool]


@dataclass(frozen=True)
class ListOption(Generic[T]):
    """An option together with its index in the original list."""

    index: int
    value: T

    def __str__(self) -> str:
        return str(self.value)


def default_filter(filter_text: str, option: object, string_value: str, index: int) -> bool:
    """Keep options whose text contains *filter_text*, ignoring case."""
    return filter_text.lower() in string_value.lower()


class OptionList(Generic[T]):
    """Options, the subset matching the current filter and a cursor into it.

    Up/down movement wraps around the filtered list; page movement and
    home/end clamp at the ends.
    """

    def __init__(
        self,
        options: Sequence[T],
        page_size: int,
        filter_fn: Filter[T] = default_filter,
        cursor: int = 0,
    ) -> None:
        self._options = list(options)
        self._strings = [str(o) for o in self._options]
        self._page_size = page_size
        self._filter_fn = filter_fn
        self._filtered: list[int] = list(range(len(self._options)))
        self._cursor = cursor

    @property
    def options(self) -> list[T]:
        return self._options

    @property
    def filtered(self) -> list[int]:
        """Indices into :attr:`options` that match the filter."""
        return self._filtered

    @property
    def cursor(self) -> int:
        return self._cursor

    def current(self) -> int | None:
        """Index into :attr:`options` of the highlighted option."""
        if not self._filtered:
            return None
        return self._filtered[self._cursor]

    def string_value(self, index: int) -> str:
        return self._strings[index]

    def apply_filter(self, text: str) -> None:
        """Recompute the filtered subset, keeping the highlighted option if
        it still matches.
        """
        previous = self.current()
        self._filtered = [
            i
            for i, option in enumerate(self._options)
            if self._filter_fn(text, option, self._strings[i], i)
        ]
        if previous is not None and previous in self._filtered:
            self._cursor = self._filtered.index(previous)
        else:
            self._cursor = 0

    def move(self, kind: str) -> bool:
        """Move the cursor; return ``True`` if it moved."""
        total = len(self._filtered)
        if total == 0:
            return False

        old = self._cursor
        if kind == "move_up":
            self._cursor = (self._cursor - 1) % total
        elif kind == "move_down":
            self._cursor = (self._cursor + 1) % total
        elif kind == "page_up":
            self._cursor = max(0, self._cursor - self._page_size)
        elif kind == "page_down":
            self._cursor = min(total - 1, self._cursor + self._page_size)
        elif kind == "move_to_start":
            self._cursor = 0
        elif kind == "move_to_end":
            self._cursor = total - 1
        return self._cursor != old

    def page(self) -> Page[int]:
        """The visible window, as indices into :attr:`options`."""
        window = paginate(len(self._filtered), self._page_size, self._cursor)
        return Page(
            content=[self._filtered[i] for i in window.content],
            selection=window.selection,
            first=window.first,
            last=window.last,
            start=window.start,
            total=window.total,
        )

    def page_strings(self) -> Page[str]:
        page = self.page()
        return Page(
            content=[self._strings[i] for i in page.content],
            selection=page.selection,
            first=page.first,
            last=page.last,
            start=page.start,
            total=page.total,
        )
