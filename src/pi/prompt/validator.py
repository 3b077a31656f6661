"""Validation results and stock validators.

A validator is a pure function of the current answer returning
:class:`Valid` or :class:`Invalid`. It may be called any number of times
with the same value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sized, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Valid:
    pass


@dataclass(frozen=True)
class Invalid:
    message: str = "Invalid input"


Validation = Union[Valid, Invalid]
Validator = Callable[[T], Validation]


def run_validators(validators: list[Validator[T]], value: T) -> Validation:
    """Return the first :class:`Invalid` result, or :class:`Valid`."""
    for validator in validators:
        result = validator(value)
        if isinstance(result, Invalid):
            return result
    return Valid()


def required(message: str = "A response is required.") -> Validator[Sized]:
    def validate(value: Sized) -> Validation:
        return Valid() if len(value) > 0 else Invalid(message)

    return validate


def min_length(length: int, message: str | None = None) -> Validator[Sized]:
    msg = message or f"The length of the response should be at least {length}"

    def validate(value: Sized) -> Validation:
        return Valid() if len(value) >= length else Invalid(msg)

    return validate


def max_length(length: int, message: str | None = None) -> Validator[Sized]:
    msg = message or f"The length of the response should be at most {length}"

    def validate(value: Sized) -> Validation:
        return Valid() if len(value) <= length else Invalid(msg)

    return validate
