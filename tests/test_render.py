"""Tests for prompt line rendering."""

from __future__ import annotations

from tellmewhy.render import ROLE_COLORS, STATUS_COLORS, Color, RenderInstruction, render_line
from tellmewhy.types import Role, Status


def _instruction(**overrides: object) -> RenderInstruction:
    fields: dict[str, object] = {
        "status_color": Color.GREEN,
        "role_color": Color.WHITE,
        "prompt_label": "Name: ",
        "visible_text": "Ada",
        "cursor_column": 9,
    }
    fields.update(overrides)
    return RenderInstruction(**fields)  # type: ignore[arg-type]


class TestColorMaps:
    def test_every_status_has_a_color(self) -> None:
        assert set(STATUS_COLORS) == set(Status)

    def test_every_role_has_a_color(self) -> None:
        assert set(ROLE_COLORS) == set(Role)

    def test_status_colors(self) -> None:
        assert STATUS_COLORS[Status.NEUTRAL] is Color.YELLOW
        assert STATUS_COLORS[Status.UNCERTAIN] is Color.GREY
        assert STATUS_COLORS[Status.VALID] is Color.GREEN
        assert STATUS_COLORS[Status.INVALID] is Color.RED

    def test_sgr_sequence(self) -> None:
        assert Color.RED.sgr == "\x1b[91m"


class TestRenderLine:
    def test_clears_line_and_returns_to_column_zero_first(self) -> None:
        assert render_line(_instruction()).startswith("\x1b[2K\r")

    def test_label_drawn_in_status_color_then_text_in_role_color(self) -> None:
        line = render_line(_instruction())
        assert "\x1b[92mName: \x1b[97mAda" in line

    def test_cursor_positioned_one_based(self) -> None:
        line = render_line(_instruction(cursor_column=9))
        assert "\x1b[10G" in line

    def test_colors_reset_at_end(self) -> None:
        assert render_line(_instruction()).endswith("\x1b[0m")
