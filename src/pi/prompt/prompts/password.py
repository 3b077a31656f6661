"""Password prompt - masked text entry with an optional confirmation."""

from __future__ import annotations

from typing import Callable, Literal

from pi.prompt.actions import PasswordAction
from pi.prompt.config import PromptConfig
from pi.prompt.driver import Prompt
from pi.prompt.input import Input
from pi.prompt.keys import Key
from pi.prompt.renderer import Renderer
from pi.prompt.validator import Validation, Validator, run_validators

DisplayMode = Literal["hidden", "masked", "full"]

DEFAULT_CONFIRMATION_MESSAGE = "Confirmation:"
DEFAULT_TOGGLE_HELP_MESSAGE = "(ctrl+r to reveal/hide)"


def default_formatter(answer: str) -> str:
    return "********"


class Password(Prompt[str]):
    """Ask for a secret.

    By default nothing is echoed and the user has to type the value twice;
    the second entry must match the first one exactly.
    """

    def __init__(self, message: str, config: PromptConfig | None = None) -> None:
        super().__init__(message, config)
        self.display_mode: DisplayMode = "hidden"
        self.display_toggle = False
        self.confirmation_message: str | None = DEFAULT_CONFIRMATION_MESSAGE
        self.help_message: str | None = None
        self.formatter: Callable[[str], str] = default_formatter
        self.validators: list[Validator[str]] = []

    def with_display_mode(self, mode: DisplayMode) -> Password:
        self.display_mode = mode
        return self

    def with_display_toggle_enabled(self) -> Password:
        """Let ctrl+r switch between the configured mode and full display."""
        self.display_toggle = True
        return self

    def with_confirmation_message(self, message: str) -> Password:
        self.confirmation_message = message
        return self

    def without_confirmation(self) -> Password:
        self.confirmation_message = None
        return self

    def with_help_message(self, message: str) -> Password:
        self.help_message = message
        return self

    def with_formatter(self, formatter: Callable[[str], str]) -> Password:
        self.formatter = formatter
        return self

    def with_validator(self, validator: Validator[str]) -> Password:
        self.validators.append(validator)
        return self

    def _build_state(self) -> _PasswordState:
        return _PasswordState(self)


class _PasswordState:
    def __init__(self, prompt: Password) -> None:
        self.message = prompt.message
        self.confirmable = prompt.confirmation_message is not None
        self._confirmation_message = prompt.confirmation_message or ""
        self._standard_mode: DisplayMode = prompt.display_mode
        self._display_mode: DisplayMode = prompt.display_mode
        self._display_toggle = prompt.display_toggle
        self._help_message = prompt.help_message
        if self._help_message is None and self._display_toggle:
            self._help_message = DEFAULT_TOGGLE_HELP_MESSAGE
        self._mask = prompt.config.render_config.password_mask
        self._formatter = prompt.formatter
        self._validators = prompt.validators
        self._input = Input()

    def map_key(self, key: Key) -> PasswordAction | None:
        return PasswordAction.from_key(key, display_toggle=self._display_toggle)

    def handle(self, action: PasswordAction) -> bool:
        if action.kind == "toggle_display_mode":
            if self._display_mode == "full":
                self._display_mode = self._standard_mode
            else:
                self._display_mode = "full"
            return True
        assert action.input is not None
        return self._input.handle(action.input)

    def answer(self) -> str:
        return self._input.content

    def validate(self, answer: str) -> Validation:
        return run_validators(self._validators, answer)

    def format_answer(self, answer: str) -> str:
        return self._formatter(answer)

    def begin_confirmation(self) -> None:
        self._input.clear()

    def render(self, renderer: Renderer, confirming: bool) -> None:
        message = self._confirmation_message if confirming else self.message

        if self._display_mode == "hidden":
            renderer.print_prompt(message)
        elif self._display_mode == "masked":
            masked = Input.with_cursor(self._mask * len(self._input), self._input.cursor)
            renderer.print_prompt_input(message, None, masked)
        else:
            renderer.print_prompt_input(message, None, self._input)

        if self._help_message:
            renderer.print_help(self._help_message)
