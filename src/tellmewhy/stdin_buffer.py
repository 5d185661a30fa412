"""StdinBuffer splits raw stdin chunks into complete key sequences.

A single read can carry several key presses, or only the first half of an
escape sequence. Complete sequences are handed out immediately; a partial
escape sequence is held until more data arrives or the caller flushes it.
"""

from __future__ import annotations

ESC = "\x1b"


def _is_complete_sequence(data: str) -> str:
    """Check if a string is a complete escape sequence or needs more data.

    Returns 'complete', 'incomplete', or 'not-escape'.
    """
    if not data.startswith(ESC):
        return "not-escape"

    if len(data) == 1:
        return "incomplete"

    after_esc = data[1:]

    # CSI sequences: ESC [ <params> <final byte 0x40-0x7E>
    if after_esc.startswith("["):
        if len(data) < 3:
            return "incomplete"
        return "complete" if 0x40 <= ord(data[-1]) <= 0x7E else "incomplete"

    # SS3 sequences: ESC O <char>
    if after_esc.startswith("O"):
        return "complete" if len(after_esc) >= 2 else "incomplete"

    # Meta key sequences: ESC followed by a single character
    return "complete"


def _extract_complete_sequences(buffer: str) -> tuple[list[str], str]:
    """Split accumulated buffer into complete sequences.

    Returns (sequences, remainder).
    """
    sequences: list[str] = []
    pos = 0

    while pos < len(buffer):
        remaining = buffer[pos:]

        if remaining.startswith(ESC):
            seq_end = 1
            while seq_end <= len(remaining):
                candidate = remaining[:seq_end]
                if _is_complete_sequence(candidate) == "complete":
                    sequences.append(candidate)
                    pos += seq_end
                    break
                seq_end += 1
            else:
                return sequences, remaining
        else:
            sequences.append(remaining[0])
            pos += 1

    return sequences, ""


class StdinBuffer:
    """Accumulates decoded stdin text and emits complete sequences."""

    def __init__(self) -> None:
        self._buffer: str = ""

    @property
    def pending(self) -> bool:
        """True while a partial escape sequence is held back."""
        return bool(self._buffer)

    def process(self, data: str) -> list[str]:
        """Feed *data* and return every sequence completed by it."""
        self._buffer += data
        sequences, self._buffer = _extract_complete_sequences(self._buffer)
        return sequences

    def flush(self) -> list[str]:
        """Give up waiting and return the held-back data as one sequence."""
        if not self._buffer:
            return []
        data, self._buffer = self._buffer, ""
        return [data]
