"""Drawing a prompt line with ANSI escape sequences."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tellmewhy.types import Role, Status

_CLEAR_LINE = "\x1b[2K\r"
_RESET = "\x1b[0m"
_MOVE_TO_COLUMN_FMT = "\x1b[{}G"


class Color(Enum):
    """Foreground colours, valued by their SGR parameter."""

    GREY = 37
    WHITE = 97
    YELLOW = 93
    GREEN = 92
    RED = 91

    @property
    def sgr(self) -> str:
        return f"\x1b[{self.value}m"


STATUS_COLORS: dict[Status, Color] = {
    Status.NEUTRAL: Color.YELLOW,
    Status.UNCERTAIN: Color.GREY,
    Status.VALID: Color.GREEN,
    Status.INVALID: Color.RED,
}

ROLE_COLORS: dict[Role, Color] = {
    Role.INACTIVE: Color.GREY,
    Role.ACTIVE: Color.WHITE,
    Role.COMPLETED: Color.GREEN,
    Role.ABORTED: Color.RED,
}


@dataclass(frozen=True)
class RenderInstruction:
    """Everything needed to redraw the prompt line once.

    ``cursor_column`` is the zero-based screen column the cursor ends on.
    """

    status_color: Color
    role_color: Color
    prompt_label: str
    visible_text: str
    cursor_column: int


def render_line(instruction: RenderInstruction) -> str:
    """Return the escape sequence that redraws the current line."""
    return (
        _CLEAR_LINE
        + instruction.status_color.sgr
        + instruction.prompt_label
        + instruction.role_color.sgr
        + instruction.visible_text
        + _MOVE_TO_COLUMN_FMT.format(instruction.cursor_column + 1)
        + _RESET
    )
