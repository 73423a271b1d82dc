"""Raw-mode terminal handling and screen clearing."""

from __future__ import annotations

import os
import sys
import termios
from typing import IO, Any

CLEAR_SCREEN = "\033[2J\033[H"


class TerminalError(Exception):
    """Raised when the terminal cannot be configured or read."""


class RawTerminal:
    """Context manager that puts a terminal into non-canonical, no-echo mode.

    ``min_bytes`` is the minimum number of bytes a read waits for: 0 makes
    reads return immediately, 1 makes them block for a key press.
    """

    def __init__(self, min_bytes: int = 0, stream: IO[Any] | None = None) -> None:
        self.min_bytes = min_bytes
        self._stream = sys.stdin if stream is None else stream
        self._fd = self._stream.fileno()
        self._saved: list[Any] | None = None

    def __enter__(self) -> "RawTerminal":
        try:
            saved = termios.tcgetattr(self._fd)
        except termios.error as exc:
            raise TerminalError(f"cannot read terminal settings: {exc}") from exc
        raw = termios.tcgetattr(self._fd)
        raw[3] &= ~(termios.ECHO | termios.ICANON)
        raw[6][termios.VMIN] = self.min_bytes
        raw[6][termios.VTIME] = 0
        try:
            termios.tcsetattr(self._fd, termios.TCSAFLUSH, raw)
        except termios.error as exc:
            raise TerminalError(f"cannot enter raw mode: {exc}") from exc
        self._saved = saved
        return self

    def __exit__(self, *args: Any) -> None:
        saved, self._saved = self._saved, None
        if saved is None:
            return
        try:
            termios.tcsetattr(self._fd, termios.TCSAFLUSH, saved)
        except termios.error as exc:
            raise TerminalError(f"cannot restore terminal settings: {exc}") from exc

    def read_key(self) -> str:
        """Read one byte as a character; empty when no byte was available."""
        try:
            data = os.read(self._fd, 1)
        except OSError as exc:
            raise TerminalError(f"cannot read from terminal: {exc}") from exc
        return data.decode("latin-1")


def clear_term(out: IO[str] | None = None) -> None:
    """Clear the screen and move the cursor home."""
    target = sys.stdout if out is None else out
    target.write(CLEAR_SCREEN)
    target.flush()