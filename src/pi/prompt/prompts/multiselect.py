"""MultiSelect prompt - pick any number of options from a list."""

from __future__ import annotations

from typing import Callable, Generic, Sequence, TypeVar

from pi.prompt.actions import MultiSelectAction
from pi.prompt.config import PromptConfig
from pi.prompt.driver import Prompt
from pi.prompt.errors import InvalidConfigurationError
from pi.prompt.input import Input
from pi.prompt.keys import Key
from pi.prompt.prompts.options import Filter, ListOption, OptionList, default_filter
from pi.prompt.renderer import Renderer
from pi.prompt.validator import Validation, Validator, run_validators

T = TypeVar("T")

DEFAULT_HELP_MESSAGE = (
    "↑↓ to move, space to select one, → to all, ← to none, type to filter"
)


def default_formatter(answer: list[ListOption[T]]) -> str:
    return ", ".join(str(option.value) for option in answer)


class MultiSelect(Prompt[list[T]], Generic[T]):
    """Ask the user to check any subset of *options*."""

    def __init__(
        self,
        message: str,
        options: Sequence[T],
        config: PromptConfig | None = None,
    ) -> None:
        super().__init__(message, config)
        self.options = list(options)
        self.default: list[int] = []
        self.help_message: str | None = DEFAULT_HELP_MESSAGE
        self.starting_cursor = 0
        self.keep_filter = True
        self.filter: Filter[T] = default_filter
        self.formatter: Callable[[list[ListOption[T]]], str] = default_formatter
        self.validators: list[Validator[list[ListOption[T]]]] = []

    def with_default(self, indexes: Sequence[int]) -> MultiSelect[T]:
        self.default = list(indexes)
        return self

    def with_help_message(self, message: str) -> MultiSelect[T]:
        self.help_message = message
        return self

    def without_help_message(self) -> MultiSelect[T]:
        self.help_message = None
        return self

    def with_starting_cursor(self, cursor: int) -> MultiSelect[T]:
        self.starting_cursor = cursor
        return self

    def with_keep_filter(self, keep_filter: bool) -> MultiSelect[T]:
        """Whether the filter text survives toggling an option."""
        self.keep_filter = keep_filter
        return self

    def with_filter(self, filter_fn: Filter[T]) -> MultiSelect[T]:
        self.filter = filter_fn
        return self

    def with_formatter(
        self, formatter: Callable[[list[ListOption[T]]], str]
    ) -> MultiSelect[T]:
        self.formatter = formatter
        return self

    def with_validator(self, validator: Validator[list[ListOption[T]]]) -> MultiSelect[T]:
        self.validators.append(validator)
        return self

    def raw_prompt(self, backend=None) -> list[ListOption[T]]:
        """Return the checked options together with their indexes."""
        return super().prompt(backend)

    def prompt(self, backend=None) -> list[T]:
        return [option.value for option in self.raw_prompt(backend)]

    def _build_state(self) -> _MultiSelectState[T]:
        if not self.options:
            raise InvalidConfigurationError("Available options can not be empty")
        if not 0 <= self.starting_cursor < len(self.options):
            raise InvalidConfigurationError(
                f"Starting cursor index {self.starting_cursor} is out-of-bounds "
                f"for length {len(self.options)} of options"
            )
        for index in self.default:
            if not 0 <= index < len(self.options):
                raise InvalidConfigurationError(
                    f"Index {index} is out-of-bounds for length {len(self.options)} of options"
                )
        return _MultiSelectState(self)


class _MultiSelectState(Generic[T]):
    confirmable = False

    def __init__(self, prompt: MultiSelect[T]) -> None:
        self.message = prompt.message
        self._help_message = prompt.help_message
        self._formatter = prompt.formatter
        self._validators = prompt.validators
        self._keep_filter = prompt.keep_filter
        self._vim_mode = prompt.config.vim_mode
        self._filter_input = Input()
        self._checked: set[int] = set(prompt.default)
        self._list = OptionList(
            prompt.options,
            prompt.config.page_size,
            prompt.filter,
            cursor=prompt.starting_cursor,
        )

    def map_key(self, key: Key) -> MultiSelectAction | None:
        return MultiSelectAction.from_key(key, vim_mode=self._vim_mode)

    def handle(self, action: MultiSelectAction) -> bool:
        kind = action.kind
        if kind == "filter_input":
            assert action.input is not None
            before = self._filter_input.content
            changed = self._filter_input.handle(action.input)
            if self._filter_input.content != before:
                self._list.apply_filter(self._filter_input.content)
            return changed

        if kind == "toggle":
            index = self._list.current()
            if index is None:
                return False
            self._checked ^= {index}
            if not self._keep_filter and not self._filter_input.is_empty():
                self._filter_input.clear()
                self._list.apply_filter("")
            return True

        if kind == "select_all":
            before = set(self._checked)
            self._checked.update(self._list.filtered)
            return self._checked != before

        if kind == "clear_all":
            before = set(self._checked)
            self._checked.difference_update(self._list.filtered)
            return self._checked != before

        return self._list.move(kind)

    def answer(self) -> list[ListOption[T]]:
        options = self._list.options
        return [ListOption(i, options[i]) for i in sorted(self._checked)]

    def validate(self, answer: list[ListOption[T]]) -> Validation:
        return run_validators(self._validators, answer)

    def format_answer(self, answer: list[ListOption[T]]) -> str:
        return self._formatter(answer)

    def render(self, renderer: Renderer, confirming: bool) -> None:
        renderer.print_prompt(self.message, content=self._filter_input.content)
        page = self._list.page()
        renderer.print_multi_options(
            self._list.page_strings(),
            [index in self._checked for index in page.content],
        )
        if self._help_message:
            renderer.print_help(self._help_message)

    def begin_confirmation(self) -> None:
        pass
