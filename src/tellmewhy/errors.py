"""Exceptions raised by a prompt session.

Every error aborts the current session. There is no local recovery; the
caller starts a new session if it wants to ask again.
"""

from __future__ import annotations


class PromptError(Exception):
    """Base class for all prompt failures."""


class PromptIOError(PromptError, OSError):
    """The terminal size query or a terminal write failed."""


class NoInputError(PromptError):
    """The input stream ended before a value was accepted."""

    def __init__(self, message: str = "Prompt exited without input") -> None:
        super().__init__(message)


class RangeError(PromptError, ValueError):
    """A width or screen column fell outside the addressable column range."""
