"""Exceptions raised by prompts.

Every prompt either returns an answer or raises one of these. Canceling is
an expected outcome rather than a failure; ``prompt_skippable`` turns it into
``None`` for callers that treat it as "no answer".
"""

from __future__ import annotations


class PromptError(Exception):
    """Base class for every error raised by a prompt."""


class OperationCanceledError(PromptError):
    """The user pressed the cancel key (ESC)."""

    def __init__(self) -> None:
        super().__init__("Operation was canceled by the user")


class OperationInterruptedError(PromptError):
    """The user pressed ctrl+c."""

    def __init__(self) -> None:
        super().__init__("Operation was interrupted by the user")


class ConfirmationMismatchError(PromptError):
    """The confirmation entry did not match the first entry."""

    def __init__(self) -> None:
        super().__init__("The confirmation does not match the first entry")


class InvalidConfigurationError(PromptError):
    """The prompt was built with options it cannot run with."""


class EndOfInputError(PromptError):
    """The backend has no more key events to deliver."""

    def __init__(self, message: str = "Input stream has ended") -> None:
        super().__init__(message)


class BackendError(PromptError):
    """The terminal backend failed to read or write."""
