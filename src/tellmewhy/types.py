"""Core data types shared by the editing, validation and rendering layers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class Role(Enum):
    """Display hint supplied by the caller. Never changed by the prompt."""

    INACTIVE = "inactive"
    ACTIVE = "active"
    COMPLETED = "completed"
    ABORTED = "aborted"


class Status(Enum):
    """Validation classification of the current buffer."""

    NEUTRAL = "neutral"
    UNCERTAIN = "uncertain"
    VALID = "valid"
    INVALID = "invalid"


ACCEPTING_STATUSES = frozenset({Status.VALID, Status.NEUTRAL})


@dataclass(frozen=True)
class Config:
    """Per-session prompt options."""

    prompt_label: str = ""
    hint_text: str = ""
    max_display_width: int | None = None
    max_length: int | None = None


@dataclass
class State(Generic[T]):
    """Mutable session state.

    ``value`` is ``None`` while nothing has been typed (or after the last
    character was deleted); the hint is shown instead of the value then.
    An explicit empty value is a different state and shows nothing.
    """

    value: T | None = None
    cursor: int = 0
    role: Role = Role.ACTIVE
    status: Status = Status.NEUTRAL
