"""Pagination of option lists.

:func:`paginate` is stateless: it only looks at the list length, the page
size and the cursor. Wrap-around movement is the caller's job, done by
adjusting the cursor before paginating.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """The visible window of a list.

    ``selection`` indexes into ``content``. ``first`` and ``last`` tell
    whether the window touches the start and the end of the full list.
    ``start`` is the index of ``content[0]`` in the full list.
    """

    content: list[T]
    selection: int
    first: bool
    last: bool
    start: int
    total: int

    @property
    def end(self) -> int:
        """Index one past the last visible entry."""
        return self.start + len(self.content)


def window(total_len: int, page_size: int, cursor: int) -> tuple[int, int]:
    """Return ``(start, end)`` of the window holding *cursor*.

    The cursor is kept centred when the list is longer than a page, except
    near either end of the list where the window is clamped.
    """
    if page_size < 1:
        raise ValueError("page_size must be at least 1")
    if total_len <= 0:
        return 0, 0
    if not 0 <= cursor < total_len:
        raise ValueError(f"cursor {cursor} out of range for {total_len} entries")

    if total_len <= page_size:
        return 0, total_len

    half = page_size // 2
    if cursor < half:
        return 0, page_size
    if total_len - cursor - 1 < half:
        return total_len - page_size, total_len
    start = cursor - half
    return start, start + page_size


def paginate(total_len: int, page_size: int, cursor: int) -> Page[int]:
    """Compute the visible window as a page of indices into the full list."""
    start, end = window(total_len, page_size, cursor)
    return Page(
        content=list(range(start, end)),
        selection=cursor - start if end > start else 0,
        first=start == 0,
        last=end == total_len,
        start=start,
        total=total_len,
    )


def paginate_options(options: Sequence[T], page_size: int, cursor: int) -> Page[T]:
    """Like :func:`paginate` but the page holds the options themselves."""
    start, end = window(len(options), page_size, cursor)
    return Page(
        content=list(options[start:end]),
        selection=cursor - start if end > start else 0,
        first=start == 0,
        last=end == len(options),
        start=start,
        total=len(options),
    )
