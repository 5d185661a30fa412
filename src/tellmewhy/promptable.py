"""Value kinds a prompt can edit.

A prompt is generic over the value it produces. Each value kind supplies
the same set of capabilities; ``TextPromptable`` is the one shipped here.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from tellmewhy import buffer
from tellmewhy.types import Config, Status
from tellmewhy.utils import char_count
from tellmewhy.validation import validate_text

T = TypeVar("T")


@runtime_checkable
class Promptable(Protocol[T]):
    """Editing, validation and display capabilities of one value kind."""

    def insert(self, value: T | None, cursor: int, config: Config, char: str) -> T | None: ...

    def delete(self, value: T | None, cursor: int, config: Config) -> T | None: ...

    def length(self, value: T | None) -> int: ...

    def validate(self, value: T | None) -> Status: ...

    def render_text(self, value: T | None, config: Config) -> str: ...


class TextPromptable:
    """Free text; rejects values containing digits."""

    def insert(self, value: str | None, cursor: int, config: Config, char: str) -> str | None:
        return buffer.insert_char(value, cursor, config, char)

    def delete(self, value: str | None, cursor: int, config: Config) -> str | None:
        return buffer.remove_char(value, cursor, config)

    def length(self, value: str | None) -> int:
        return char_count(value)

    def validate(self, value: str | None) -> Status:
        return validate_text(value)

    def render_text(self, value: str | None, config: Config) -> str:
        """Text to draw: the hint while untouched, else the value itself."""
        return config.hint_text if value is None else value
