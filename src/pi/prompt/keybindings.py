"""Keybinding tables: which key ids trigger which action kinds."""

from __future__ import annotations

from typing import Generic, Mapping, TypeVar

from pi.prompt.keys import Key, KeyId

A = TypeVar("A", bound=str)

KeybindingsConfig = Mapping[A, KeyId | list[KeyId]]

CONTROL_KEYBINDINGS: dict[str, KeyId | list[KeyId]] = {
    "submit": "enter",
    "cancel": "escape",
    "interrupt": "ctrl+c",
}

DEFAULT_INPUT_KEYBINDINGS: dict[str, KeyId | list[KeyId]] = {
    # Cursor movement
    "move_left": ["left", "ctrl+b"],
    "move_right": ["right", "ctrl+f"],
    "move_word_left": ["ctrl+left", "alt+left", "alt+b"],
    "move_word_right": ["ctrl+right", "alt+right", "alt+f"],
    "move_to_start": ["home", "ctrl+a"],
    "move_to_end": ["end", "ctrl+e"],
    # Deletion
    "delete_left": "backspace",
    "delete_right": ["delete", "ctrl+d"],
    "delete_word_left": ["ctrl+w", "alt+backspace", "ctrl+backspace"],
    "delete_word_right": ["ctrl+delete", "alt+d", "alt+delete"],
}

LIST_KEYBINDINGS: dict[str, KeyId | list[KeyId]] = {
    "move_up": "up",
    "move_down": "down",
    "page_up": "pageUp",
    "page_down": "pageDown",
    "move_to_start": "home",
    "move_to_end": "end",
}

VIM_LIST_KEYBINDINGS: dict[str, KeyId | list[KeyId]] = {
    "move_up": "k",
    "move_down": "j",
}

MULTI_SELECT_KEYBINDINGS: dict[str, KeyId | list[KeyId]] = {
    "toggle": "space",
    "select_all": "right",
    "clear_all": "left",
}

VIM_MULTI_SELECT_KEYBINDINGS: dict[str, KeyId | list[KeyId]] = {
    "select_all": "l",
    "clear_all": "h",
}

SUGGESTION_KEYBINDINGS: dict[str, KeyId | list[KeyId]] = {
    "suggestion_up": "up",
    "suggestion_down": "down",
    "suggestion_page_up": "pageUp",
    "suggestion_page_down": "pageDown",
    "use_suggestion": "tab",
}

PASSWORD_KEYBINDINGS: dict[str, KeyId | list[KeyId]] = {
    "toggle_display_mode": "ctrl+r",
}

DATE_KEYBINDINGS: dict[str, KeyId | list[KeyId]] = {
    "prev_day": "left",
    "next_day": "right",
    "prev_week": "up",
    "next_week": "down",
    "prev_month": ["ctrl+left", "pageUp"],
    "next_month": ["ctrl+right", "pageDown"],
    "prev_year": "ctrl+up",
    "next_year": "ctrl+down",
}

VIM_DATE_KEYBINDINGS: dict[str, KeyId | list[KeyId]] = {
    "prev_day": "h",
    "next_day": "l",
    "prev_week": "k",
    "next_week": "j",
}


class Keybindings(Generic[A]):
    """Maps key ids to action kinds.

    Later tables in *sources* win when two of them bind the same key.
    """

    def __init__(self, *sources: KeybindingsConfig[A]) -> None:
        self._action_to_keys: dict[A, list[KeyId]] = {}
        self._key_to_action: dict[KeyId, A] = {}
        for source in sources:
            for action, keys in source.items():
                key_array = keys if isinstance(keys, list) else [keys]
                self._action_to_keys.setdefault(action, []).extend(key_array)
                for key_id in key_array:
                    self._key_to_action[key_id] = action

    def lookup(self, key: Key) -> A | None:
        """Return the action bound to *key*, if any."""
        return self._key_to_action.get(key.id)

    def matches(self, key: Key, action: A) -> bool:
        return self._key_to_action.get(key.id) == action

    def get_keys(self, action: A) -> list[KeyId]:
        """Get keys bound to an action."""
        return list(self._action_to_keys.get(action, []))
