"""Tests for buffer validation."""

from __future__ import annotations

from tellmewhy.types import Status
from tellmewhy.validation import validate_text


class TestValidateText:
    def test_untouched_is_uncertain(self) -> None:
        assert validate_text(None) is Status.UNCERTAIN

    def test_letters_are_valid(self) -> None:
        assert validate_text("Ada Lovelace") is Status.VALID

    def test_empty_value_is_valid(self) -> None:
        assert validate_text("") is Status.VALID

    def test_any_digit_is_invalid(self) -> None:
        assert validate_text("test1") is Status.INVALID
        assert validate_text("0") is Status.INVALID

    def test_non_ascii_digits_are_not_rejected(self) -> None:
        # Arabic-Indic and fullwidth digits are not ASCII digits
        assert validate_text("٣") is Status.VALID
        assert validate_text("３") is Status.VALID

    def test_same_content_same_status(self) -> None:
        a = "".join(["te", "st"])
        b = "test"
        assert validate_text(a) is validate_text(b)
