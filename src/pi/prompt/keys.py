"""Key model and raw terminal input decoding.

A :class:`Key` is what prompts consume: a key name, the character for
``char`` keys, and a modifier set. Raw terminal chunks are decoded with
:func:`parse_key`, which understands the legacy xterm/VT sequences emitted by
common terminals (arrow and editing keys with optional modifier parameters),
control letters, ESC-prefixed alt keys and plain printable characters.

Keys also have a canonical string identifier (``Key.id``) such as
``"ctrl+left"`` or ``"alt+b"``; keybinding tables are written in that form.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntFlag

KeyId = str


class KeyModifiers(IntFlag):
    NONE = 0
    SHIFT = 1
    ALT = 2
    CONTROL = 4


# ---------------------------------------------------------------------------
# Key names
# ---------------------------------------------------------------------------

KEY_NAMES: frozenset[str] = frozenset(
    {
        "char",
        "enter",
        "escape",
        "backspace",
        "delete",
        "up",
        "down",
        "left",
        "right",
        "tab",
        "backtab",
        "pageUp",
        "pageDown",
        "home",
        "end",
    }
)

# Order in which modifier prefixes appear in a key id
_MODIFIER_PREFIXES: list[tuple[str, KeyModifiers]] = [
    ("ctrl", KeyModifiers.CONTROL),
    ("shift", KeyModifiers.SHIFT),
    ("alt", KeyModifiers.ALT),
]


@dataclass(frozen=True)
class Key:
    """A single decoded key press."""

    name: str
    char: str = ""
    modifiers: KeyModifiers = KeyModifiers.NONE

    def __post_init__(self) -> None:
        if self.name not in KEY_NAMES:
            raise ValueError(f"Unknown key name: {self.name!r}")
        if self.name == "char" and len(self.char) != 1:
            raise ValueError("char keys carry exactly one character")

    @classmethod
    def of_char(cls, char: str, modifiers: KeyModifiers = KeyModifiers.NONE) -> Key:
        return cls("char", char, modifiers)

    @property
    def id(self) -> KeyId:
        """Canonical identifier, e.g. ``"ctrl+shift+left"`` or ``"a"``."""
        prefix = "".join(
            f"{name}+" for name, flag in _MODIFIER_PREFIXES if self.modifiers & flag
        )
        if self.name == "char":
            return prefix + ("space" if self.char == " " else self.char)
        return prefix + self.name

    def is_plain_char(self) -> bool:
        """True for a printable character typed without ctrl or alt."""
        return (
            self.name == "char"
            and not self.modifiers & (KeyModifiers.CONTROL | KeyModifiers.ALT)
            and self.char.isprintable()
        )


def key_from_id(key_id: KeyId) -> Key:
    """Build a :class:`Key` from its canonical identifier.

    >>> key_from_id("ctrl+left")
    Key(name='left', char='', modifiers=<KeyModifiers.CONTROL: 4>)
    """
    if not key_id:
        raise ValueError("Empty key id")

    modifiers = KeyModifiers.NONE
    rest = key_id
    # A bare "+" is a character, not a separator
    while "+" in rest[:-1]:
        head, _, tail = rest.partition("+")
        flag = dict(_MODIFIER_PREFIXES).get(head)
        if flag is None:
            raise ValueError(f"Unknown modifier {head!r} in key id {key_id!r}")
        modifiers |= flag
        rest = tail

    if rest == "space":
        return Key("char", " ", modifiers)
    if rest in KEY_NAMES and rest != "char":
        return Key(rest, "", modifiers)
    if len(rest) == 1:
        return Key("char", rest, modifiers)
    raise ValueError(f"Unknown key id: {key_id!r}")


# ---------------------------------------------------------------------------
# Raw sequence decoding
# ---------------------------------------------------------------------------

ESC = "\x1b"

# Legacy escape sequences -> key names
LEGACY_KEY_SEQUENCES: dict[str, str] = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1bOH": "home",
    "\x1bOF": "end",
    "\x1b[3~": "delete",
    "\x1b[5~": "pageUp",
    "\x1b[6~": "pageDown",
    "\x1b[1~": "home",
    "\x1b[4~": "end",
    "\x1b[7~": "home",
    "\x1b[8~": "end",
    "\x1b[Z": "backtab",
}

# CSI 1;<mod><letter>  e.g. "\x1b[1;5D" is ctrl+left
_CSI_MODIFIED_LETTER_RE = re.compile(r"^\x1b\[1;(\d+)([ABCDHF])$")
# CSI <n>;<mod>~  e.g. "\x1b[3;5~" is ctrl+delete
_CSI_MODIFIED_TILDE_RE = re.compile(r"^\x1b\[(\d+);(\d+)~$")

_CSI_LETTER_KEYS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
}

_CSI_TILDE_KEYS: dict[int, str] = {
    1: "home",
    3: "delete",
    4: "end",
    5: "pageUp",
    6: "pageDown",
    7: "home",
    8: "end",
}

# Modifier parameter bits, xterm style: parameter = 1 + bits
_LOCK_MASK = 64 + 128


def _modifiers_from_param(param: int) -> KeyModifiers:
    bits = (param - 1) & ~_LOCK_MASK
    return KeyModifiers(bits & 0b111)


def parse_key(data: str) -> Key | None:  # noqa: C901
    """Decode one raw terminal chunk into a :class:`Key`, or ``None``."""
    if not data:
        return None

    name = LEGACY_KEY_SEQUENCES.get(data)
    if name is not None:
        return Key(name)

    match = _CSI_MODIFIED_LETTER_RE.match(data)
    if match:
        return Key(
            _CSI_LETTER_KEYS[match.group(2)],
            "",
            _modifiers_from_param(int(match.group(1))),
        )

    match = _CSI_MODIFIED_TILDE_RE.match(data)
    if match:
        name = _CSI_TILDE_KEYS.get(int(match.group(1)))
        if name is None:
            return None
        return Key(name, "", _modifiers_from_param(int(match.group(2))))

    # --- Simple single-byte keys ---
    if data == ESC:
        return Key("escape")
    if data in ("\r", "\n"):
        return Key("enter")
    if data == "\t":
        return Key("tab")
    if data in ("\x7f", "\x08"):
        return Key("backspace")
    if data == "\x00":
        return Key("char", " ", KeyModifiers.CONTROL)

    # --- Ctrl + letter (0x01 - 0x1a) ---
    if len(data) == 1 and 1 <= ord(data) <= 26:
        return Key("char", chr(ord(data) + ord("a") - 1), KeyModifiers.CONTROL)

    # --- Alt + key (ESC prefix) ---
    if len(data) == 2 and data[0] == ESC:
        inner = parse_key(data[1])
        if inner is None:
            return None
        return Key(inner.name, inner.char, inner.modifiers | KeyModifiers.ALT)

    # --- Plain printable character ---
    if len(data) == 1 and data.isprintable():
        return Key("char", data)

    return None


def split_input(data: str) -> list[str]:
    """Split a raw chunk into chunks that each hold a single key.

    Terminals deliver pasted text and fast typing as one read; escape
    sequences are kept whole.
    """
    chunks: list[str] = []
    i = 0
    while i < len(data):
        if data[i] != ESC:
            chunks.append(data[i])
            i += 1
            continue

        if i + 1 >= len(data):
            chunks.append(ESC)
            break

        nxt = data[i + 1]
        if nxt == "[":
            # CSI: parameters then a final byte in 0x40..0x7E
            j = i + 2
            while j < len(data) and not (0x40 <= ord(data[j]) <= 0x7E):
                j += 1
            chunks.append(data[i : j + 1])
            i = j + 1
        elif nxt == "O":
            chunks.append(data[i : i + 3])
            i += 3
        else:
            chunks.append(data[i : i + 2])
            i += 2

    return chunks
