"""DateSelect prompt - pick a date on a calendar."""

from __future__ import annotations

import calendar
import datetime as dt
from typing import Callable

from pi.prompt.actions import DateSelectAction
from pi.prompt.config import PromptConfig
from pi.prompt.driver import Prompt
from pi.prompt.errors import InvalidConfigurationError
from pi.prompt.keys import Key
from pi.prompt.renderer import Renderer
from pi.prompt.validator import Validation, Validator, run_validators

DEFAULT_HELP_MESSAGE = "arrows to move, with ctrl to move months and years, enter to select"


def default_formatter(answer: dt.date) -> str:
    return answer.isoformat()


def add_months(date: dt.date, months: int) -> dt.date:
    """Shift *date* by whole months, clamping the day to the month's end.

    Moves past either end of the supported range stop at ``date.min`` or
    ``date.max``.
    """
    year, month = divmod(date.year * 12 + date.month - 1 + months, 12)
    if year < dt.MINYEAR:
        return dt.date.min
    if year > dt.MAXYEAR:
        return dt.date.max
    month += 1
    day = min(date.day, calendar.monthrange(year, month)[1])
    return dt.date(year, month, day)


def add_days(date: dt.date, days: int) -> dt.date:
    ordinal = date.toordinal() + days
    ordinal = max(dt.date.min.toordinal(), min(ordinal, dt.date.max.toordinal()))
    return dt.date.fromordinal(ordinal)


class DateSelect(Prompt[dt.date]):
    def __init__(self, message: str, config: PromptConfig | None = None) -> None:
        super().__init__(message, config)
        self.starting_date: dt.date | None = None
        self.min_date: dt.date | None = None
        self.max_date: dt.date | None = None
        self.week_start = calendar.SUNDAY
        self.help_message: str | None = DEFAULT_HELP_MESSAGE
        self.formatter: Callable[[dt.date], str] = default_formatter
        self.validators: list[Validator[dt.date]] = []

    def with_starting_date(self, date: dt.date) -> DateSelect:
        self.starting_date = date
        return self

    def with_min_date(self, date: dt.date) -> DateSelect:
        self.min_date = date
        return self

    def with_max_date(self, date: dt.date) -> DateSelect:
        self.max_date = date
        return self

    def with_week_start(self, weekday: int) -> DateSelect:
        """Set the first column of the calendar (``calendar.MONDAY`` etc.)."""
        self.week_start = weekday
        return self

    def with_help_message(self, message: str) -> DateSelect:
        self.help_message = message
        return self

    def without_help_message(self) -> DateSelect:
        self.help_message = None
        return self

    def with_formatter(self, formatter: Callable[[dt.date], str]) -> DateSelect:
        self.formatter = formatter
        return self

    def with_validator(self, validator: Validator[dt.date]) -> DateSelect:
        self.validators.append(validator)
        return self

    def _build_state(self) -> _DateSelectState:
        if not 0 <= self.week_start <= 6:
            raise InvalidConfigurationError(f"Invalid week start {self.week_start}")
        if (
            self.min_date is not None
            and self.max_date is not None
            and self.min_date > self.max_date
        ):
            raise InvalidConfigurationError(
                f"Minimum date {self.min_date} is after maximum date {self.max_date}"
            )
        today = dt.date.today()
        start = self.starting_date or today
        if (self.min_date is not None and start < self.min_date) or (
            self.max_date is not None and start > self.max_date
        ):
            raise InvalidConfigurationError(
                f"Starting date {start} is outside the allowed range"
            )
        return _DateSelectState(self, start, today)


class _DateSelectState:
    confirmable = False

    def __init__(self, prompt: DateSelect, start: dt.date, today: dt.date) -> None:
        self.message = prompt.message
        self._selected = start
        self._today = today
        self._min_date = prompt.min_date
        self._max_date = prompt.max_date
        self._week_start = prompt.week_start
        self._vim_mode = prompt.config.vim_mode
        self._help_message = prompt.help_message
        self._formatter = prompt.formatter
        self._validators = prompt.validators

    def map_key(self, key: Key) -> DateSelectAction | None:
        return DateSelectAction.from_key(key, vim_mode=self._vim_mode)

    def handle(self, action: DateSelectAction) -> bool:
        date = self._selected
        kind = action.kind
        if kind == "prev_day":
            target = add_days(date, -1)
        elif kind == "next_day":
            target = add_days(date, 1)
        elif kind == "prev_week":
            target = add_days(date, -7)
        elif kind == "next_week":
            target = add_days(date, 7)
        elif kind == "prev_month":
            target = add_months(date, -1)
        elif kind == "next_month":
            target = add_months(date, 1)
        elif kind == "prev_year":
            target = add_months(date, -12)
        else:
            target = add_months(date, 12)

        if self._min_date is not None and target < self._min_date:
            target = self._min_date
        if self._max_date is not None and target > self._max_date:
            target = self._max_date

        self._selected = target
        return target != date

    def answer(self) -> dt.date:
        return self._selected

    def validate(self, answer: dt.date) -> Validation:
        return run_validators(self._validators, answer)

    def format_answer(self, answer: dt.date) -> str:
        return self._formatter(answer)

    def render(self, renderer: Renderer, confirming: bool) -> None:
        renderer.print_prompt(self.message)
        renderer.print_calendar_month(
            self._selected.year,
            self._selected.month,
            self._week_start,
            self._today,
            self._selected,
            self._min_date,
            self._max_date,
        )
        if self._help_message:
            renderer.print_help(self._help_message)

    def begin_confirmation(self) -> None:
        pass
