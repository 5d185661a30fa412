"""Terminal abstraction for raw-mode stdin/stdout interaction.

Provides a ``Terminal`` protocol and a concrete ``ProcessTerminal``
implementation that manages raw mode, blocking key reads, and
SIGWINCH-based resize detection.
"""

from __future__ import annotations

import codecs
import logging
import os
import selectors
import signal
import sys
import termios
import tty
from collections import deque
from contextlib import AbstractContextManager, contextmanager
from typing import Iterator, Protocol

from tellmewhy.errors import PromptIOError
from tellmewhy.keys import Event, ResizeEvent, parse_key
from tellmewhy.stdin_buffer import StdinBuffer

logger = logging.getLogger(__name__)

# Seconds to wait for the rest of a partial escape sequence.
_ESCAPE_TIMEOUT = 0.01


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for the terminal a prompt session runs on."""

    @property
    def columns(self) -> int: ...

    def raw_mode(self) -> AbstractContextManager[None]: ...

    def read_event(self) -> Event | None: ...

    def write(self, data: str) -> None: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Concrete terminal implementation backed by ``sys.stdin``/``sys.stdout``.

    Raw mode is entered through :meth:`raw_mode`, a context manager that
    restores the saved terminal attributes and the previous SIGWINCH
    handler on every exit path.
    """

    def __init__(self) -> None:
        self._original_termios: list | None = None
        self._prev_sigwinch_handler: signal.Handlers | None = None
        self._wake_r: int | None = None
        self._wake_w: int | None = None
        self._resized: bool = False
        self._stdin_buffer = StdinBuffer()
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._pending: deque[str] = deque()
        self._write_log_path: str = os.environ.get("TELLMEWHY_WRITE_LOG", "")

    # -- properties ---------------------------------------------------------

    @property
    def columns(self) -> int:
        try:
            return os.get_terminal_size(sys.stdout.fileno()).columns
        except (ValueError, OSError) as exc:
            raise PromptIOError(f"Cannot query terminal size: {exc}") from exc

    # -- raw mode -----------------------------------------------------------

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        """Enable raw mode and resize detection for the duration of the block."""
        fd = sys.stdin.fileno()
        try:
            self._original_termios = termios.tcgetattr(fd)
            tty.setraw(fd)
        except termios.error as exc:
            self._original_termios = None
            raise PromptIOError(f"Cannot enter raw mode: {exc}") from exc

        try:
            try:
                self._wake_r, self._wake_w = os.pipe()
                os.set_blocking(self._wake_w, False)
                prev_handler = signal.getsignal(signal.SIGWINCH)
                signal.signal(signal.SIGWINCH, self._on_sigwinch)
                self._prev_sigwinch_handler = prev_handler
            except (OSError, ValueError) as exc:
                # signal.signal raises ValueError outside the main thread
                raise PromptIOError(f"Cannot watch for terminal resize: {exc}") from exc
            logger.debug("raw mode enabled on fd %d", fd)
            yield
        finally:
            self._restore(fd)

    def _restore(self, fd: int) -> None:
        if self._original_termios is not None:
            termios.tcsetattr(fd, termios.TCSADRAIN, self._original_termios)
            self._original_termios = None

        if self._prev_sigwinch_handler is not None:
            signal.signal(signal.SIGWINCH, self._prev_sigwinch_handler)
            self._prev_sigwinch_handler = None

        for wake_fd in (self._wake_r, self._wake_w):
            if wake_fd is not None:
                os.close(wake_fd)
        self._wake_r = self._wake_w = None
        logger.debug("raw mode released on fd %d", fd)

    # -- input --------------------------------------------------------------

    def read_event(self) -> Event | None:
        """Block until the next key press or resize.

        Returns ``None`` once stdin reaches end of file.
        """
        while not self._pending:
            if not self._fill():
                return None
            if self._resized:
                self._resized = False
                return ResizeEvent()

        return parse_key(self._pending.popleft())

    def _fill(self) -> bool:
        """Wait for input and queue complete sequences. False on EOF."""
        fd = sys.stdin.fileno()
        timeout = _ESCAPE_TIMEOUT if self._stdin_buffer.pending else None

        with selectors.DefaultSelector() as selector:
            selector.register(fd, selectors.EVENT_READ)
            if self._wake_r is not None:
                selector.register(self._wake_r, selectors.EVENT_READ)
            ready = selector.select(timeout)

        if not ready:
            self._pending.extend(self._stdin_buffer.flush())
            return True

        for key, _ in ready:
            if key.fd == self._wake_r:
                os.read(self._wake_r, 512)
                continue
            try:
                raw = os.read(fd, 4096)
            except OSError as exc:
                raise PromptIOError(f"Cannot read from terminal: {exc}") from exc
            if not raw:
                self._pending.extend(self._stdin_buffer.flush())
                return bool(self._pending)
            data = self._decoder.decode(raw)
            self._pending.extend(self._stdin_buffer.process(data))
        return True

    # -- output -------------------------------------------------------------

    def write(self, data: str) -> None:
        """Write data to stdout and optionally to the write log."""
        try:
            sys.stdout.write(data)
            sys.stdout.flush()
        except OSError as exc:
            raise PromptIOError(f"Cannot write to terminal: {exc}") from exc

        if self._write_log_path:
            try:
                with open(self._write_log_path, "a") as f:
                    f.write(data)
            except OSError:
                logger.debug("cannot append to write log %s", self._write_log_path)

    # -- private: SIGWINCH -------------------------------------------------

    def _on_sigwinch(
        self,
        signum: int,
        frame: object,
    ) -> None:
        """Handle terminal resize signals by waking up a pending read."""
        self._resized = True
        if self._wake_w is not None:
            try:
                os.write(self._wake_w, b"\0")
            except BlockingIOError:
                pass
