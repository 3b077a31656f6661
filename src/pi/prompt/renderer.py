"""Renderer - draws prompt frames and redraws them in place.

The renderer remembers how many lines the previous frame wrote
(``cur_line``). :meth:`Renderer.reset_prompt` moves up and clears exactly
that many lines before the next frame, so no stale output is left behind and
nothing above the prompt is erased. Every ``print_*`` method ends its lines
through :meth:`Renderer._new_line`, which is the only place ``cur_line``
grows. Token text is flattened to a single line before it is written.

The terminal cursor is hidden while the renderer is active; use it as a
context manager so the cursor is shown again on every exit path.
"""

from __future__ import annotations

import calendar
import datetime as dt
import re
from dataclasses import dataclass, field
from typing import Sequence

from pi.prompt.input import Input
from pi.prompt.pager import Page
from pi.prompt.style import RenderConfig, Styled, StyleSheet
from pi.prompt.terminal import Backend
from pi.prompt.utils import truncate_to_width


_MIN_ORDINAL = dt.date.min.toordinal()
_MAX_ORDINAL = dt.date.max.toordinal()

_LINE_BREAKS_RE = re.compile("\r\n|[\n\r\v\f\x1c-\x1e\x85\u2028\u2029]")


def single_line(text: str) -> str:
    """Replace line breaks in *text* with spaces."""
    return _LINE_BREAKS_RE.sub(" ", text)


@dataclass(frozen=True)
class Token:
    """A run of text printed with a single style."""

    content: str
    style: StyleSheet = field(default_factory=StyleSheet)

    @classmethod
    def styled(cls, styled: Styled) -> Token:
        return cls(styled.content, styled.style)

    def print(self, backend: Backend) -> None:
        if not self.content:
            return

        style = self.style
        if style.fg is not None:
            backend.set_fg_color(style.fg)
        if style.bg is not None:
            backend.set_bg_color(style.bg)
        if style.att:
            backend.set_attributes(style.att)

        backend.write(single_line(self.content))

        if style.fg is not None:
            backend.reset_fg_color()
        if style.bg is not None:
            backend.reset_bg_color()
        if style.att:
            backend.reset_attributes()


class Renderer:
    def __init__(self, backend: Backend, render_config: RenderConfig | None = None) -> None:
        self._backend = backend
        self._config = render_config or RenderConfig()
        self._cur_line = 0
        self._active = False

    @property
    def cur_line(self) -> int:
        """Number of terminal lines the current frame occupies."""
        return self._cur_line

    @property
    def config(self) -> RenderConfig:
        return self._config

    # -- lifecycle ----------------------------------------------------------

    def __enter__(self) -> Renderer:
        self.start()
        return self

    def __exit__(self, *exc: object) -> None:
        self.stop()

    def start(self) -> None:
        self._backend.hide_cursor()
        self._active = True

    def stop(self) -> None:
        if not self._active:
            return
        self._active = False
        self._backend.show_cursor()
        self._backend.flush()

    # -- frame management ---------------------------------------------------

    def reset_prompt(self) -> None:
        """Erase the lines of the previous frame."""
        for _ in range(self._cur_line):
            self._backend.cursor_up()
            self._backend.cursor_horizontal_reset()
            self._backend.clear_line()
        self._cur_line = 0

    def flush(self) -> None:
        self._backend.flush()

    def cleanup(self, message: str, answer: str) -> None:
        """Replace the frame with the permanent ``? <message> <answer>`` line."""
        self.reset_prompt()
        self.print_prompt_answer(message, answer)
        self._cur_line = 0

    def cleanup_canceled(self, message: str) -> None:
        """Replace the frame with a permanent canceled-prompt line."""
        self.reset_prompt()
        self.print_tokens(
            [
                Token.styled(self._config.prompt_prefix),
                Token(" "),
                Token(message, self._config.prompt),
                Token(" "),
                Token.styled(self._config.canceled_prompt_indicator),
            ]
        )
        self._new_line()
        self._cur_line = 0

    # -- primitives ---------------------------------------------------------

    def print_tokens(self, tokens: Sequence[Token]) -> None:
        for token in tokens:
            token.print(self._backend)

    def _new_line(self) -> None:
        self._backend.cursor_horizontal_reset()
        self._backend.write("\n")
        self._cur_line += 1

    def _fit(self, text: str, used: int) -> str:
        """Truncate *text* so one option occupies exactly one terminal row."""
        return truncate_to_width(single_line(text), self._backend.columns - used - 1)

    # -- layouts ------------------------------------------------------------

    def print_prompt(
        self,
        message: str,
        default: str | None = None,
        content: str | None = None,
    ) -> None:
        cfg = self._config
        tokens = [Token.styled(cfg.prompt_prefix), Token(" "), Token(message, cfg.prompt)]
        if default is not None:
            tokens.append(Token(f" ({default})", cfg.default_value))
        if content:
            tokens.append(Token(f" {content}", cfg.text_input))
        self.print_tokens(tokens)
        self._new_line()

    def print_prompt_input(
        self,
        message: str,
        default: str | None,
        content: Input,
        placeholder: str | None = None,
    ) -> None:
        cfg = self._config
        tokens = [Token.styled(cfg.prompt_prefix), Token(" "), Token(message, cfg.prompt)]
        if default is not None:
            tokens.append(Token(f" ({default})", cfg.default_value))
        tokens.append(Token(" "))

        if content.is_empty() and placeholder:
            tokens.append(Token(placeholder[0], cfg.text_cursor))
            tokens.append(Token(placeholder[1:], cfg.placeholder))
        else:
            before, at, after = content.split()
            tokens.extend(
                [
                    Token(before, cfg.text_input),
                    Token(at, cfg.text_cursor),
                    Token(after, cfg.text_input),
                ]
            )

        self.print_tokens(tokens)
        self._new_line()

    def print_prompt_answer(self, message: str, answer: str) -> None:
        cfg = self._config
        self.print_tokens(
            [
                Token.styled(cfg.answered_prompt_prefix),
                Token(" "),
                Token(message, cfg.prompt),
                Token(f" {answer}", cfg.answer),
            ]
        )
        self._new_line()

    def print_error_message(self, message: str) -> None:
        cfg = self._config
        self.print_tokens(
            [
                Token.styled(cfg.error_prefix),
                Token(" "),
                Token(message, cfg.error_message),
            ]
        )
        self._new_line()

    def print_help(self, message: str) -> None:
        self.print_tokens([Token(f"[{message}]", self._config.help_message)])
        self._new_line()

    def print_option(self, cursor: bool, content: str) -> None:
        cfg = self._config
        if cursor:
            prefix = Token.styled(cfg.highlighted_option_prefix)
            style = cfg.selected_option
        else:
            prefix = Token(" " * len(cfg.highlighted_option_prefix.content))
            style = cfg.option
        used = len(prefix.content) + 1
        self.print_tokens([prefix, Token(" "), Token(self._fit(content, used), style)])
        self._new_line()

    def print_options(self, page: Page[str]) -> None:
        """Print a page of options with the cursor and scroll markers."""
        cfg = self._config
        width = len(cfg.highlighted_option_prefix.content)
        length = len(page.content)
        for idx, option in enumerate(page.content):
            if idx == 0 and not page.first:
                prefix = Token.styled(cfg.scroll_up_prefix)
            elif idx + 1 == length and not page.last:
                prefix = Token.styled(cfg.scroll_down_prefix)
            else:
                prefix = Token(" ")

            if idx == page.selection:
                marker = Token.styled(cfg.highlighted_option_prefix)
                style = cfg.selected_option
            else:
                marker = Token(" " * width)
                style = cfg.option

            used = len(prefix.content) + width + 1
            self.print_tokens([prefix, marker, Token(" "), Token(self._fit(option, used), style)])
            self._new_line()

    def print_multi_option(
        self,
        cursor: bool,
        checked: bool,
        content: str,
        scroll: str = " ",
    ) -> None:
        cfg = self._config
        width = len(cfg.highlighted_option_prefix.content)
        marker = (
            Token.styled(cfg.highlighted_option_prefix) if cursor else Token(" " * width)
        )
        checkbox = Token.styled(cfg.selected_checkbox if checked else cfg.unselected_checkbox)
        style = cfg.selected_option if cursor else cfg.option
        used = len(scroll) + width + 1 + len(checkbox.content) + 1
        self.print_tokens(
            [
                Token(scroll),
                marker,
                Token(" "),
                checkbox,
                Token(" "),
                Token(self._fit(content, used), style),
            ]
        )
        self._new_line()

    def print_multi_options(self, page: Page[str], checked: Sequence[bool]) -> None:
        length = len(page.content)
        for idx, option in enumerate(page.content):
            if idx == 0 and not page.first:
                scroll = self._config.scroll_up_prefix.content
            elif idx + 1 == length and not page.last:
                scroll = self._config.scroll_down_prefix.content
            else:
                scroll = " "
            self.print_multi_option(idx == page.selection, checked[idx], option, scroll)

    def print_calendar_month(
        self,
        year: int,
        month: int,
        week_start: int,
        today: dt.date,
        selected_date: dt.date,
        min_date: dt.date | None = None,
        max_date: dt.date | None = None,
    ) -> None:
        """Print a month header, a weekday header and six week rows.

        *week_start* uses :mod:`calendar` numbering (0 is Monday).
        """
        cfg = self._config.calendar
        prefix = Token.styled(cfg.prefix)

        header = f"{calendar.month_name[month].lower()} {year}"
        self.print_tokens([prefix, Token(" "), Token(f"{header:^20}", cfg.header)])
        self._new_line()

        week_days = " ".join(
            calendar.day_abbr[(week_start + i) % 7][:2].lower() for i in range(7)
        )
        self.print_tokens([prefix, Token(" "), Token(week_days, cfg.week_header)])
        self._new_line()

        # Six rows so the frame height never changes between months. The grid
        # opens on the last week_start before the 1st, a full week earlier when
        # the 1st itself falls on week_start.
        first = dt.date(year, month, 1)
        lead = (first.weekday() - week_start) % 7 or 7
        start = first.toordinal() - lead

        for row in range(6):
            tokens = [prefix, Token(" ")]
            for col in range(7):
                if col > 0:
                    tokens.append(Token(" "))
                ordinal = start + row * 7 + col
                if not _MIN_ORDINAL <= ordinal <= _MAX_ORDINAL:
                    tokens.append(Token("  "))
                    continue
                date = dt.date.fromordinal(ordinal)
                tokens.append(
                    Token(
                        f"{date.day:2}",
                        self._date_style(date, month, today, selected_date, min_date, max_date),
                    )
                )
            self.print_tokens(tokens)
            self._new_line()

    def _date_style(
        self,
        date: dt.date,
        month: int,
        today: dt.date,
        selected_date: dt.date,
        min_date: dt.date | None,
        max_date: dt.date | None,
    ) -> StyleSheet:
        cfg = self._config.calendar
        if date == selected_date:
            return cfg.selected_date
        if (min_date is not None and date < min_date) or (
            max_date is not None and date > max_date
        ):
            return cfg.unavailable_date
        if date == today:
            return cfg.today_date
        if date.month != month:
            return cfg.different_month_date
        return StyleSheet()
