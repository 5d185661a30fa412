"""Horizontal scrolling window over a single line of text.

The window follows the cursor: it always covers the ``width`` characters
ending at the cursor, so text scrolls left as the user types past the
right edge. Characters hidden on either side are marked with an ellipsis
when the window is wide enough to spare the columns.

Known limitation kept for compatibility: when text is hidden on the right,
the trailing ellipsis is appended after a full-width slice, so the drawn
text is one glyph wider than ``width``.
"""

from __future__ import annotations

from dataclasses import dataclass

from tellmewhy.errors import RangeError

ELLIPSIS = "…"

# Largest column a cursor-positioning escape sequence can address.
MAX_COLUMN = 0xFFFF


@dataclass(frozen=True)
class Window:
    """Visible part of a line plus the cursor's column inside it."""

    text: str
    cursor_column: int
    ellipsis_left: bool = False
    ellipsis_right: bool = False


def window(text: str, width: int, cursor: int) -> Window:
    """Compute the visible window of *text* for a *width*-character area."""
    width = max(width, 0)
    cursor = max(cursor, 0)
    length = len(text)
    cursor_column = min(cursor, width)

    if length < width:
        return Window(text, cursor_column)

    start = max(cursor - width, 0)
    end = start + width
    visible = text[start:end]

    min_width = 2 * len(ELLIPSIS) + 1
    show_ellipsis = width > min_width
    ellipsis_left = start > 0 and show_ellipsis
    ellipsis_right = end < length and show_ellipsis

    if ellipsis_left:
        visible = ELLIPSIS + visible[len(ELLIPSIS):]
    if ellipsis_right:
        visible += ELLIPSIS

    return Window(visible, cursor_column, ellipsis_left, ellipsis_right)


def truncate(text: str, width: int, cursor: int) -> tuple[str, int]:
    """Return ``(visible_text, column_limit)`` for *text*.

    ``column_limit`` is the widest cursor column the window allows; the
    cursor is drawn at ``min(cursor, column_limit)``.
    """
    return window(text, width, cursor).text, max(width, 0)


def screen_column(prompt_width: int, cursor_column: int, total_width: int) -> int:
    """Map a window cursor column to an absolute screen column.

    Raises :class:`RangeError` if any input is negative or the total width
    is beyond what a terminal can address.
    """
    if prompt_width < 0 or cursor_column < 0 or total_width < 0:
        raise RangeError(
            f"negative column input: prompt={prompt_width} "
            f"cursor={cursor_column} width={total_width}"
        )
    if total_width > MAX_COLUMN:
        raise RangeError(f"terminal width {total_width} exceeds column limit {MAX_COLUMN}")
    return min(prompt_width + cursor_column, total_width)
