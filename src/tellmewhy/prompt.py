"""Prompt session: the edit, validate, render loop.

Each input event runs one full cycle. The buffer and cursor are updated
first, then the status is recomputed from the new buffer, then the line
is redrawn. The only way out of the loop is Enter on an acceptable value.
"""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from tellmewhy.buffer import move_cursor
from tellmewhy.errors import NoInputError
from tellmewhy.keys import KeyCode, KeyEvent, ResizeEvent
from tellmewhy.promptable import Promptable, TextPromptable
from tellmewhy.render import ROLE_COLORS, STATUS_COLORS, RenderInstruction, render_line
from tellmewhy.terminal import ProcessTerminal, Terminal
from tellmewhy.types import ACCEPTING_STATUSES, Config, Role, State, Status
from tellmewhy.utils import visible_width
from tellmewhy.viewport import screen_column, truncate

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PromptController(Generic[T]):
    """Drives one prompt session against a terminal."""

    def __init__(
        self,
        terminal: Terminal,
        config: Config,
        state: State[T],
        promptable: Promptable[T],
    ) -> None:
        self._terminal = terminal
        self._config = config
        self._state = state
        self._promptable = promptable
        self._accepted = False

    @property
    def state(self) -> State[T]:
        return self._state

    @property
    def accepted(self) -> bool:
        return self._accepted

    # -- one cycle ----------------------------------------------------------

    def handle_event(self, event: KeyEvent | None) -> bool:
        """Apply *event* (``None`` only redraws) and render.

        Returns True once the value has been accepted.
        """
        if event is not None:
            self._apply(event)
        self._state.status = self._promptable.validate(self._state.value)
        self._terminal.write(render_line(self.build_instruction()))
        return self._accepted

    def _apply(self, event: KeyEvent) -> None:
        state = self._state
        p = self._promptable
        logger.debug("handling %s key at cursor %d", event.code.value, state.cursor)

        if event.code is KeyCode.CHAR and event.char is not None:
            state.value = p.insert(state.value, state.cursor, self._config, event.char)
            self._move(1)
        elif event.code is KeyCode.BACKSPACE:
            state.value = p.delete(state.value, state.cursor, self._config)
            self._move(-1)
        elif event.code is KeyCode.LEFT:
            self._move(-1)
        elif event.code is KeyCode.RIGHT:
            self._move(1)
        elif event.code is KeyCode.ENTER:
            if state.status in ACCEPTING_STATUSES and state.value is not None:
                logger.debug("value accepted with status %s", state.status.value)
                self._accepted = True
            else:
                logger.debug("enter ignored with status %s", state.status.value)
        else:
            logger.debug("ignoring key %r", event.raw)

    def _move(self, delta: int) -> None:
        length = self._promptable.length(self._state.value)
        self._state.cursor = move_cursor(self._state.cursor, delta, length)

    # -- rendering ----------------------------------------------------------

    def usable_width(self) -> int:
        """Terminal width, narrowed to ``max_display_width`` when set."""
        width = self._terminal.columns
        if self._config.max_display_width is not None:
            width = min(width, self._config.max_display_width)
        return width

    def build_instruction(self) -> RenderInstruction:
        config = self._config
        state = self._state

        prompt_width = visible_width(config.prompt_label)
        full_width = self.usable_width()
        width = max(full_width - prompt_width, 0)

        text = self._promptable.render_text(state.value, config)
        visible, column_limit = truncate(text, width, state.cursor)
        column = screen_column(prompt_width, min(state.cursor, column_limit), full_width)

        return RenderInstruction(
            status_color=STATUS_COLORS[state.status],
            role_color=ROLE_COLORS[state.role],
            prompt_label=config.prompt_label,
            visible_text=visible,
            cursor_column=column,
        )

    # -- loop ---------------------------------------------------------------

    def run(self) -> T:
        """Render, then process events until a value is accepted."""
        self.handle_event(None)
        while not self._accepted:
            event = self._terminal.read_event()
            if event is None:
                raise NoInputError()
            if isinstance(event, ResizeEvent):
                self.handle_event(None)
            else:
                self.handle_event(event)

        value = self._state.value
        if value is None:
            raise NoInputError()
        return value


def prompt(
    initial_value: T | None = None,
    initial_role: Role = Role.ACTIVE,
    initial_status: Status = Status.NEUTRAL,
    config: Config | None = None,
    *,
    terminal: Terminal | None = None,
    promptable: Promptable[T] | None = None,
) -> T:
    """Ask for a single line of input and return the accepted value.

    Raw mode is held only while the session runs and is released on every
    exit path before an error propagates.
    """
    config = config or Config()
    terminal = terminal or ProcessTerminal()
    if promptable is None:
        promptable = TextPromptable()

    state: State[T] = State(
        value=initial_value,
        cursor=0,
        role=initial_role,
        status=initial_status,
    )
    controller = PromptController(terminal, config, state, promptable)

    try:
        with terminal.raw_mode():
            value = controller.run()
    except Exception as exc:
        logger.debug("prompt session aborted: %s", exc)
        raise

    terminal.write("\n")
    return value
