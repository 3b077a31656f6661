"""Confirm prompt - a yes/no question answered by typing."""

from __future__ import annotations

from typing import Callable

from pi.prompt.actions import ConfirmAction
from pi.prompt.config import PromptConfig
from pi.prompt.driver import Prompt
from pi.prompt.input import Input
from pi.prompt.keys import Key
from pi.prompt.renderer import Renderer
from pi.prompt.validator import Invalid, Valid, Validation

DEFAULT_ERROR_MESSAGE = "Invalid answer, try typing 'y' for yes or 'n' for no"

_YES = {"y", "yes"}
_NO = {"n", "no"}


def default_parser(text: str) -> bool | None:
    """Parse y/yes/n/no, ignoring case; ``None`` when unrecognised."""
    value = text.strip().lower()
    if value in _YES:
        return True
    if value in _NO:
        return False
    return None


def default_formatter(answer: bool) -> str:
    return "Yes" if answer else "No"


class Confirm(Prompt[bool]):
    def __init__(self, message: str, config: PromptConfig | None = None) -> None:
        super().__init__(message, config)
        self.default: bool | None = None
        self.placeholder: str | None = None
        self.help_message: str | None = None
        self.error_message = DEFAULT_ERROR_MESSAGE
        self.parser: Callable[[str], bool | None] = default_parser
        self.formatter: Callable[[bool], str] = default_formatter

    def with_default(self, default: bool) -> Confirm:
        self.default = default
        return self

    def with_placeholder(self, placeholder: str) -> Confirm:
        self.placeholder = placeholder
        return self

    def with_help_message(self, message: str) -> Confirm:
        self.help_message = message
        return self

    def with_error_message(self, message: str) -> Confirm:
        self.error_message = message
        return self

    def with_parser(self, parser: Callable[[str], bool | None]) -> Confirm:
        self.parser = parser
        return self

    def with_formatter(self, formatter: Callable[[bool], str]) -> Confirm:
        self.formatter = formatter
        return self

    def _build_state(self) -> _ConfirmState:
        return _ConfirmState(self)


class _ConfirmState:
    confirmable = False

    def __init__(self, prompt: Confirm) -> None:
        self.message = prompt.message
        self._default = prompt.default
        self._placeholder = prompt.placeholder
        self._help_message = prompt.help_message
        self._error_message = prompt.error_message
        self._parser = prompt.parser
        self._formatter = prompt.formatter
        self._input = Input()

    def map_key(self, key: Key) -> ConfirmAction | None:
        return ConfirmAction.from_key(key)

    def handle(self, action: ConfirmAction) -> bool:
        assert action.input is not None
        return self._input.handle(action.input)

    def answer(self) -> bool | None:
        if self._input.is_empty():
            return self._default
        return self._parser(self._input.content)

    def validate(self, answer: bool | None) -> Validation:
        return Valid() if answer is not None else Invalid(self._error_message)

    def format_answer(self, answer: bool) -> str:
        return self._formatter(answer)

    def render(self, renderer: Renderer, confirming: bool) -> None:
        default = None
        if self._default is not None:
            default = "Y/n" if self._default else "y/N"
        renderer.print_prompt_input(self.message, default, self._input, self._placeholder)
        if self._help_message:
            renderer.print_help(self._help_message)

    def begin_confirmation(self) -> None:
        pass
