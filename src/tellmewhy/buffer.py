"""Character-accurate editing of the prompt buffer."""

from __future__ import annotations

from tellmewhy.types import Config
from tellmewhy.utils import char_count, char_prefix, char_suffix


def insert_char(value: str | None, cursor: int, config: Config, char: str) -> str | None:
    """Insert *char* at *cursor* and return the new value.

    Nothing changes once the value holds ``config.max_length`` characters.
    """
    if config.max_length is not None and char_count(value) == config.max_length:
        return value
    if value is None:
        return char
    return char_prefix(value, cursor) + char + char_suffix(value, cursor)


def remove_char(value: str | None, cursor: int, config: Config) -> str | None:
    """Remove the character just before *cursor* and return the new value.

    At cursor 0 the value is unchanged. Removing the last remaining
    character yields ``None`` so the hint is shown again.
    """
    if value is None:
        return None
    if cursor <= 0:
        return value
    result = char_prefix(value, cursor - 1) + char_suffix(value, cursor)
    return result or None


def move_cursor(cursor: int, delta: int, length: int) -> int:
    """Move *cursor* by *delta*, saturating at ``0`` and ``length``."""
    if delta > 0:
        return min(cursor + delta, length)
    return max(cursor + delta, 0)
