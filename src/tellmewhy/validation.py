"""Buffer validation."""

from __future__ import annotations

from tellmewhy.types import Status


def validate_text(value: str | None) -> Status:
    """Classify *value*: untouched is uncertain, any ASCII digit is invalid."""
    if value is None:
        return Status.UNCERTAIN
    if any(ch in "0123456789" for ch in value):
        return Status.INVALID
    return Status.VALID
