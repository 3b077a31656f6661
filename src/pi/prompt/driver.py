"""The read -> act -> render loop every prompt runs.

A concrete prompt supplies a :class:`PromptState`: it maps keys to its own
actions, applies them, renders itself and produces the current answer. The
loop owns everything else: the control keys, validation, the error line,
the confirmation stage and terminal setup/teardown.

Submitting an invalid answer redraws the frame with an error line and keeps
the typed input untouched. For confirmable prompts a valid first answer
starts a confirmation stage with an empty input; the second answer must
equal the first one or :class:`ConfirmationMismatchError` is raised. There
is no retry after a mismatch.
"""

from __future__ import annotations

import logging
from typing import Generic, Protocol, TypeVar

from pi.prompt.actions import CANCEL, INTERRUPT, SUBMIT, action_from_key
from pi.prompt.config import PromptConfig
from pi.prompt.errors import (
    ConfirmationMismatchError,
    OperationCanceledError,
    OperationInterruptedError,
)
from pi.prompt.keys import Key
from pi.prompt.renderer import Renderer
from pi.prompt.terminal import Backend, ProcessTerminal
from pi.prompt.validator import Invalid, Validation

logger = logging.getLogger(__name__)

A = TypeVar("A")
R = TypeVar("R")


class PromptState(Protocol[A, R]):
    """What the loop needs from a concrete prompt."""

    message: str
    confirmable: bool

    def map_key(self, key: Key) -> A | None:
        """Map a non-control key to this prompt's action, if bound."""
        ...

    def handle(self, action: A) -> bool:
        """Apply *action*; return ``True`` when the state changed."""
        ...

    def answer(self) -> R: ...

    def validate(self, answer: R) -> Validation: ...

    def format_answer(self, answer: R) -> str: ...

    def render(self, renderer: Renderer, confirming: bool) -> None: ...

    def begin_confirmation(self) -> None:
        """Clear the input for the confirmation stage.

        Only called when ``confirmable`` is true.
        """
        ...


def run_prompt(
    state: PromptState[A, R],
    backend: Backend,
    config: PromptConfig,
) -> R:
    """Run *state* to completion on *backend* and return the answer.

    The backend's raw mode and the hidden cursor are released on every exit
    path, including exceptions from validators, formatters and the backend.
    """
    backend.start()
    try:
        with Renderer(backend, config.render_config) as renderer:
            return _loop(state, backend, renderer)
    finally:
        backend.stop()


def _loop(state: PromptState[A, R], backend: Backend, renderer: Renderer) -> R:
    error: str | None = None
    confirming = False
    first_answer: R | None = None

    while True:
        renderer.reset_prompt()
        if error is not None:
            renderer.print_error_message(error)
        state.render(renderer, confirming)
        renderer.flush()

        key = backend.read_key()
        action = action_from_key(key, state.map_key)

        if action is None:
            logger.debug("no action bound to key %s", key.id)
            continue

        if action == CANCEL or action == INTERRUPT:
            renderer.cleanup_canceled(state.message)
            logger.debug("prompt %r ended by %s", state.message, key.id)
            if action == CANCEL:
                raise OperationCanceledError()
            raise OperationInterruptedError()

        if action != SUBMIT:
            if state.handle(action):
                error = None
            continue

        answer = state.answer()

        if confirming:
            if answer != first_answer:
                renderer.reset_prompt()
                logger.debug("confirmation of %r did not match", state.message)
                raise ConfirmationMismatchError()
            break

        result = state.validate(answer)
        if isinstance(result, Invalid):
            logger.debug("answer to %r rejected: %s", state.message, result.message)
            error = result.message
            continue

        error = None
        if state.confirmable:
            logger.debug("prompt %r entering confirmation stage", state.message)
            first_answer = answer
            confirming = True
            state.begin_confirmation()
            continue

        break

    renderer.cleanup(state.message, state.format_answer(answer))
    return answer


class Prompt(Generic[R]):
    """Base class of the public prompt types.

    Subclasses build a :class:`PromptState` in :meth:`_build_state`, raising
    :class:`~pi.prompt.errors.InvalidConfigurationError` before any terminal
    setup when the options make no sense.
    """

    def __init__(self, message: str, config: PromptConfig | None = None) -> None:
        self.message = message
        self.config = config or PromptConfig()

    def with_config(self, config: PromptConfig):
        self.config = config
        return self

    def _build_state(self) -> PromptState:
        raise NotImplementedError

    def prompt(self, backend: Backend | None = None) -> R:
        """Ask the question and return the answer.

        Raises :class:`~pi.prompt.errors.OperationCanceledError` when the user
        presses ESC.
        """
        state = self._build_state()
        return run_prompt(state, backend or ProcessTerminal(), self.config)

    def prompt_skippable(self, backend: Backend | None = None) -> R | None:
        """Like :meth:`prompt`, but canceling returns ``None``."""
        try:
            return self.prompt(backend)
        except OperationCanceledError:
            return None
