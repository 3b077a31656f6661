"""Text prompt - free text entry with optional suggestions."""

from __future__ import annotations

from typing import Callable

from pi.prompt.actions import TextAction
from pi.prompt.config import PromptConfig
from pi.prompt.driver import Prompt
from pi.prompt.input import Input
from pi.prompt.keys import Key
from pi.prompt.pager import paginate_options
from pi.prompt.renderer import Renderer
from pi.prompt.validator import Validation, Validator, run_validators

DEFAULT_SUGGESTIONS_HELP_MESSAGE = "↑↓ to move, tab to autocomplete, enter to submit"

Suggester = Callable[[str], list[str]]


class Text(Prompt[str]):
    """Ask the user to type a line of text.

    Submitting an empty input returns the default value when one is set.
    """

    def __init__(self, message: str, config: PromptConfig | None = None) -> None:
        super().__init__(message, config)
        self.default: str | None = None
        self.initial_value = ""
        self.placeholder: str | None = None
        self.help_message: str | None = None
        self.suggester: Suggester | None = None
        self.formatter: Callable[[str], str] = str
        self.validators: list[Validator[str]] = []

    def with_default(self, default: str) -> Text:
        self.default = default
        return self

    def with_initial_value(self, value: str) -> Text:
        self.initial_value = value
        return self

    def with_placeholder(self, placeholder: str) -> Text:
        self.placeholder = placeholder
        return self

    def with_help_message(self, message: str) -> Text:
        self.help_message = message
        return self

    def with_suggester(self, suggester: Suggester) -> Text:
        self.suggester = suggester
        return self

    def with_formatter(self, formatter: Callable[[str], str]) -> Text:
        self.formatter = formatter
        return self

    def with_validator(self, validator: Validator[str]) -> Text:
        self.validators.append(validator)
        return self

    def _build_state(self) -> _TextState:
        return _TextState(self)


class _TextState:
    confirmable = False

    def __init__(self, prompt: Text) -> None:
        self.message = prompt.message
        self._default = prompt.default
        self._placeholder = prompt.placeholder
        self._help_message = prompt.help_message
        self._suggester = prompt.suggester
        self._formatter = prompt.formatter
        self._validators = prompt.validators
        self._page_size = prompt.config.page_size
        self._input = Input(prompt.initial_value)
        self._suggestions: list[str] = []
        self._suggestion_cursor = 0
        self._update_suggestions()

    def _update_suggestions(self) -> None:
        if self._suggester is None:
            return
        self._suggestions = list(self._suggester(self._input.content))
        self._suggestion_cursor = 0

    def map_key(self, key: Key) -> TextAction | None:
        return TextAction.from_key(key)

    def handle(self, action: TextAction) -> bool:
        kind = action.kind
        if kind == "value_input":
            assert action.input is not None
            before = self._input.content
            changed = self._input.handle(action.input)
            if self._input.content != before:
                self._update_suggestions()
            return changed

        total = len(self._suggestions)
        if total == 0:
            return False

        old = self._suggestion_cursor
        if kind == "suggestion_up":
            self._suggestion_cursor = (self._suggestion_cursor - 1) % total
        elif kind == "suggestion_down":
            self._suggestion_cursor = (self._suggestion_cursor + 1) % total
        elif kind == "suggestion_page_up":
            self._suggestion_cursor = max(0, self._suggestion_cursor - self._page_size)
        elif kind == "suggestion_page_down":
            self._suggestion_cursor = min(total - 1, self._suggestion_cursor + self._page_size)
        elif kind == "use_suggestion":
            self._input = Input(self._suggestions[self._suggestion_cursor])
            self._update_suggestions()
            return True
        return self._suggestion_cursor != old

    def answer(self) -> str:
        if self._input.is_empty() and self._default is not None:
            return self._default
        return self._input.content

    def validate(self, answer: str) -> Validation:
        return run_validators(self._validators, answer)

    def format_answer(self, answer: str) -> str:
        return self._formatter(answer)

    def render(self, renderer: Renderer, confirming: bool) -> None:
        renderer.print_prompt_input(self.message, self._default, self._input, self._placeholder)
        if self._suggestions:
            renderer.print_options(
                paginate_options(self._suggestions, self._page_size, self._suggestion_cursor)
            )
        help_message = self._help_message
        if help_message is None and self._suggestions:
            help_message = DEFAULT_SUGGESTIONS_HELP_MESSAGE
        if help_message:
            renderer.print_help(help_message)

    def begin_confirmation(self) -> None:
        pass
