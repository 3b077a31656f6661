"""Select prompt - pick exactly one option from a list."""

from __future__ import annotations

from typing import Callable, Generic, Sequence, TypeVar

from pi.prompt.actions import SelectAction
from pi.prompt.config import PromptConfig
from pi.prompt.driver import Prompt
from pi.prompt.errors import InvalidConfigurationError
from pi.prompt.input import Input
from pi.prompt.keys import Key
from pi.prompt.prompts.options import Filter, ListOption, OptionList, default_filter
from pi.prompt.renderer import Renderer
from pi.prompt.validator import Invalid, Valid, Validation

T = TypeVar("T")

DEFAULT_HELP_MESSAGE = "↑↓ to move, enter to select, type to filter"


class Select(Prompt[T], Generic[T]):
    """Ask the user to pick one of *options*.

    The list is paginated and filtered by what the user types. Moving past
    the last option wraps to the first one and vice versa.
    """

    def __init__(
        self,
        message: str,
        options: Sequence[T],
        config: PromptConfig | None = None,
    ) -> None:
        super().__init__(message, config)
        self.options = list(options)
        self.help_message: str | None = DEFAULT_HELP_MESSAGE
        self.starting_cursor = 0
        self.filter: Filter[T] = default_filter
        self.formatter: Callable[[ListOption[T]], str] = str

    def with_help_message(self, message: str) -> Select[T]:
        self.help_message = message
        return self

    def without_help_message(self) -> Select[T]:
        self.help_message = None
        return self

    def with_starting_cursor(self, cursor: int) -> Select[T]:
        self.starting_cursor = cursor
        return self

    def with_filter(self, filter_fn: Filter[T]) -> Select[T]:
        self.filter = filter_fn
        return self

    def with_formatter(self, formatter: Callable[[ListOption[T]], str]) -> Select[T]:
        self.formatter = formatter
        return self

    def raw_prompt(self, backend=None) -> ListOption[T]:
        """Return the selected option together with its index."""
        return super().prompt(backend)

    def prompt(self, backend=None) -> T:
        return self.raw_prompt(backend).value

    def _build_state(self) -> _SelectState[T]:
        if not self.options:
            raise InvalidConfigurationError("Available options can not be empty")
        if not 0 <= self.starting_cursor < len(self.options):
            raise InvalidConfigurationError(
                f"Starting cursor index {self.starting_cursor} is out-of-bounds "
                f"for length {len(self.options)} of options"
            )
        return _SelectState(self)


class _SelectState(Generic[T]):
    confirmable = False

    def __init__(self, select: Select[T]) -> None:
        self.message = select.message
        self._help_message = select.help_message
        self._formatter = select.formatter
        self._vim_mode = select.config.vim_mode
        self._filter_input = Input()
        self._list = OptionList(
            select.options,
            select.config.page_size,
            select.filter,
            cursor=select.starting_cursor,
        )

    def map_key(self, key: Key) -> SelectAction | None:
        return SelectAction.from_key(key, vim_mode=self._vim_mode)

    def handle(self, action: SelectAction) -> bool:
        if action.kind == "filter_input":
            assert action.input is not None
            before = self._filter_input.content
            changed = self._filter_input.handle(action.input)
            if self._filter_input.content != before:
                self._list.apply_filter(self._filter_input.content)
            return changed
        return self._list.move(action.kind)

    def answer(self) -> ListOption[T] | None:
        index = self._list.current()
        if index is None:
            return None
        return ListOption(index, self._list.options[index])

    def validate(self, answer: ListOption[T] | None) -> Validation:
        if answer is None:
            return Invalid("No option matches the filter")
        return Valid()

    def format_answer(self, answer: ListOption[T]) -> str:
        return self._formatter(answer)

    def render(self, renderer: Renderer, confirming: bool) -> None:
        renderer.print_prompt(self.message, content=self._filter_input.content)
        renderer.print_options(self._list.page_strings())
        if self._help_message:
            renderer.print_help(self._help_message)

    def begin_confirmation(self) -> None:
        pass
