"""tellmewhy: single-line interactive text prompt for terminal programs."""

# Errors
from tellmewhy.errors import NoInputError, PromptError, PromptIOError, RangeError

# Keyboard input
from tellmewhy.keys import Event, KeyCode, KeyEvent, ResizeEvent, parse_key

# Session
from tellmewhy.prompt import PromptController, prompt

# Value kinds
from tellmewhy.promptable import Promptable, TextPromptable

# Rendering
from tellmewhy.render import ROLE_COLORS, STATUS_COLORS, Color, RenderInstruction, render_line

# Terminal interface and implementation
from tellmewhy.terminal import ProcessTerminal, Terminal

# Core types
from tellmewhy.types import Config, Role, State, Status

# Viewport
from tellmewhy.viewport import ELLIPSIS, Window, screen_column, truncate, window

__all__ = [
    "Color",
    "Config",
    "ELLIPSIS",
    "Event",
    "KeyCode",
    "KeyEvent",
    "NoInputError",
    "ProcessTerminal",
    "PromptController",
    "PromptError",
    "PromptIOError",
    "Promptable",
    "ROLE_COLORS",
    "RangeError",
    "RenderInstruction",
    "ResizeEvent",
    "Role",
    "STATUS_COLORS",
    "State",
    "Status",
    "Terminal",
    "TextPromptable",
    "Window",
    "parse_key",
    "prompt",
    "render_line",
    "screen_column",
    "truncate",
    "window",
]
