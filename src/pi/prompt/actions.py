"""Semantic actions and the key -> action mappers of every prompt type.

Each prompt type has its own closed action type. Prompts that edit text
wrap the shared :class:`InputAction` in a ``value_input`` / ``filter_input``
member instead of inheriting from it. Mappers are pure lookups: navigation
tables are consulted before the shared text-editing table, and vim mode only
adds key ids that point at the same action kinds.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal, TypeVar, Union

from pi.prompt.keybindings import (
    CONTROL_KEYBINDINGS,
    DATE_KEYBINDINGS,
    DEFAULT_INPUT_KEYBINDINGS,
    LIST_KEYBINDINGS,
    MULTI_SELECT_KEYBINDINGS,
    PASSWORD_KEYBINDINGS,
    SUGGESTION_KEYBINDINGS,
    VIM_DATE_KEYBINDINGS,
    VIM_LIST_KEYBINDINGS,
    VIM_MULTI_SELECT_KEYBINDINGS,
    Keybindings,
)
from pi.prompt.keys import Key

# ---------------------------------------------------------------------------
# Control actions (shared by every prompt)
# ---------------------------------------------------------------------------

ControlActionKind = Literal["submit", "cancel", "interrupt"]


@dataclass(frozen=True)
class ControlAction:
    kind: ControlActionKind


SUBMIT = ControlAction("submit")
CANCEL = ControlAction("cancel")
INTERRUPT = ControlAction("interrupt")

_control_bindings: Keybindings[ControlActionKind] = Keybindings(CONTROL_KEYBINDINGS)

# ---------------------------------------------------------------------------
# Shared text-editing actions
# ---------------------------------------------------------------------------

InputActionKind = Literal[
    "insert",
    "delete_left",
    "delete_right",
    "delete_word_left",
    "delete_word_right",
    "move_left",
    "move_right",
    "move_word_left",
    "move_word_right",
    "move_to_start",
    "move_to_end",
]

_input_bindings: Keybindings[InputActionKind] = Keybindings(DEFAULT_INPUT_KEYBINDINGS)


@dataclass(frozen=True)
class InputAction:
    kind: InputActionKind
    char: str = ""

    @classmethod
    def from_key(cls, key: Key) -> InputAction | None:
        kind = _input_bindings.lookup(key)
        if kind is not None:
            return cls(kind)
        if key.is_plain_char():
            return cls("insert", key.char)
        return None


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

TextActionKind = Literal[
    "value_input",
    "suggestion_up",
    "suggestion_down",
    "suggestion_page_up",
    "suggestion_page_down",
    "use_suggestion",
]

_suggestion_bindings: Keybindings[TextActionKind] = Keybindings(SUGGESTION_KEYBINDINGS)


@dataclass(frozen=True)
class TextAction:
    kind: TextActionKind
    input: InputAction | None = None

    @classmethod
    def from_key(cls, key: Key) -> TextAction | None:
        kind = _suggestion_bindings.lookup(key)
        if kind is not None:
            return cls(kind)
        return _wrap_input(cls, "value_input", key)


# ---------------------------------------------------------------------------
# Password
# ---------------------------------------------------------------------------

PasswordActionKind = Literal["value_input", "toggle_display_mode"]

_password_bindings: Keybindings[PasswordActionKind] = Keybindings(PASSWORD_KEYBINDINGS)


@dataclass(frozen=True)
class PasswordAction:
    kind: PasswordActionKind
    input: InputAction | None = None

    @classmethod
    def from_key(cls, key: Key, *, display_toggle: bool = False) -> PasswordAction | None:
        if display_toggle and _password_bindings.matches(key, "toggle_display_mode"):
            return cls("toggle_display_mode")
        return _wrap_input(cls, "value_input", key)


# ---------------------------------------------------------------------------
# Select
# ---------------------------------------------------------------------------

SelectActionKind = Literal[
    "filter_input",
    "move_up",
    "move_down",
    "page_up",
    "page_down",
    "move_to_start",
    "move_to_end",
]

_select_bindings: Keybindings[SelectActionKind] = Keybindings(LIST_KEYBINDINGS)
_vim_select_bindings: Keybindings[SelectActionKind] = Keybindings(
    LIST_KEYBINDINGS, VIM_LIST_KEYBINDINGS
)


@dataclass(frozen=True)
class SelectAction:
    kind: SelectActionKind
    input: InputAction | None = None

    @classmethod
    def from_key(cls, key: Key, *, vim_mode: bool = False) -> SelectAction | None:
        bindings = _vim_select_bindings if vim_mode else _select_bindings
        kind = bindings.lookup(key)
        if kind is not None:
            return cls(kind)
        return _wrap_input(cls, "filter_input", key)


# ---------------------------------------------------------------------------
# MultiSelect
# ---------------------------------------------------------------------------

MultiSelectActionKind = Literal[
    "filter_input",
    "move_up",
    "move_down",
    "page_up",
    "page_down",
    "move_to_start",
    "move_to_end",
    "toggle",
    "select_all",
    "clear_all",
]

_multi_select_bindings: Keybindings[MultiSelectActionKind] = Keybindings(
    LIST_KEYBINDINGS, MULTI_SELECT_KEYBINDINGS
)
_vim_multi_select_bindings: Keybindings[MultiSelectActionKind] = Keybindings(
    LIST_KEYBINDINGS,
    MULTI_SELECT_KEYBINDINGS,
    VIM_LIST_KEYBINDINGS,
    VIM_MULTI_SELECT_KEYBINDINGS,
)


@dataclass(frozen=True)
class MultiSelectAction:
    kind: MultiSelectActionKind
    input: InputAction | None = None

    @classmethod
    def from_key(cls, key: Key, *, vim_mode: bool = False) -> MultiSelectAction | None:
        bindings = _vim_multi_select_bindings if vim_mode else _multi_select_bindings
        kind = bindings.lookup(key)
        if kind is not None:
            return cls(kind)
        return _wrap_input(cls, "filter_input", key)


# ---------------------------------------------------------------------------
# Confirm
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ConfirmAction:
    kind: Literal["value_input"]
    input: InputAction | None = None

    @classmethod
    def from_key(cls, key: Key) -> ConfirmAction | None:
        return _wrap_input(cls, "value_input", key)


# ---------------------------------------------------------------------------
# DateSelect
# ---------------------------------------------------------------------------

DateSelectActionKind = Literal[
    "prev_day",
    "next_day",
    "prev_week",
    "next_week",
    "prev_month",
    "next_month",
    "prev_year",
    "next_year",
]

_date_bindings: Keybindings[DateSelectActionKind] = Keybindings(DATE_KEYBINDINGS)
_vim_date_bindings: Keybindings[DateSelectActionKind] = Keybindings(
    DATE_KEYBINDINGS, VIM_DATE_KEYBINDINGS
)


@dataclass(frozen=True)
class DateSelectAction:
    kind: DateSelectActionKind

    @classmethod
    def from_key(cls, key: Key, *, vim_mode: bool = False) -> DateSelectAction | None:
        bindings = _vim_date_bindings if vim_mode else _date_bindings
        kind = bindings.lookup(key)
        return cls(kind) if kind is not None else None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

T = TypeVar("T")


def _wrap_input(cls: Callable[..., T], kind: str, key: Key) -> T | None:
    action = InputAction.from_key(key)
    if action is None:
        return None
    return cls(kind, action)


def action_from_key(
    key: Key, inner: Callable[[Key], T | None]
) -> Union[ControlAction, T, None]:
    """Map *key* to a control action, falling back to the prompt's mapper."""
    kind = _control_bindings.lookup(key)
    if kind is not None:
        return ControlAction(kind)
    return inner(key)
