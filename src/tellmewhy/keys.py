"""Input events and decoding of raw terminal key sequences.

Only the keys the prompt reacts to are told apart; every other sequence
decodes to ``KeyCode.OTHER`` and is ignored by the controller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class KeyCode(Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    """A decoded key press. ``char`` is set only for ``KeyCode.CHAR``."""

    code: KeyCode
    char: str | None = None
    raw: str = ""

    @classmethod
    def character(cls, char: str) -> KeyEvent:
        return cls(KeyCode.CHAR, char, char)


@dataclass(frozen=True)
class ResizeEvent:
    """The terminal was resized; forces a re-render without editing."""


Event = Union[KeyEvent, ResizeEvent]


# Legacy (xterm / VT100) sequences for the keys we care about
LEGACY_KEY_SEQUENCES: dict[str, KeyCode] = {
    "\x1b[D": KeyCode.LEFT,
    "\x1bOD": KeyCode.LEFT,
    "\x1b[C": KeyCode.RIGHT,
    "\x1bOC": KeyCode.RIGHT,
    "\x1bOM": KeyCode.ENTER,
}


def parse_key(data: str) -> KeyEvent:
    """Decode one complete input sequence into a :class:`KeyEvent`."""
    if data in LEGACY_KEY_SEQUENCES:
        return KeyEvent(LEGACY_KEY_SEQUENCES[data], raw=data)

    if data == "\r" or data == "\n":
        return KeyEvent(KeyCode.ENTER, raw=data)
    if data == "\x7f" or data == "\x08":
        return KeyEvent(KeyCode.BACKSPACE, raw=data)

    # Plain printable character
    if len(data) == 1 and data.isprintable():
        return KeyEvent.character(data)

    return KeyEvent(KeyCode.OTHER, raw=data)
