"""Non-blocking keyboard input from a terminal."""

from __future__ import annotations

import os
import select
import sys
from typing import TextIO

try:
    import termios
except ImportError:  # pragma: no cover - not available on Windows
    termios = None

try:
    import msvcrt
except ImportError:  # pragma: no cover - only available on Windows
    msvcrt = None

ESCAPE = 0x1B

_ANSI_ARROWS = {
    "A": "U",
    "B": "D",
    "C": "R",
    "D": "L",
}

_WINDOWS_ARROW_PREFIXES = ("\x00", "\xe0")

_WINDOWS_ARROWS = {
    72: "U",
    80: "D",
    75: "L",
    77: "R",
}


def decode_key(data: bytes | str) -> str | None:
    """Turn one raw read from the terminal into a key.

    Arrow-key escape sequences become ``"U"``, ``"D"``, ``"L"`` or ``"R"``;
    any other input yields its first character. Unknown escape sequences and
    empty input yield ``None``.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    if not data:
        return None
    if data[0] == ESCAPE:
        if len(data) < 3:
            return None
        return _ANSI_ARROWS.get(chr(data[2]))
    text = data.decode("utf-8", errors="ignore")
    return text[0] if text else None


class KeyReader:
    """Reads single key presses without waiting and without echo."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdin
        self._saved_attrs = None

    def _is_tty(self) -> bool:
        isatty = getattr(self.stream, "isatty", None)
        return bool(isatty and isatty())

    def _use_console(self) -> bool:
        return msvcrt is not None and self._is_tty()

    def open(self) -> "KeyReader":
        """Switch the terminal to unbuffered, non-echoing input."""
        if termios is None or self._saved_attrs is not None or not self._is_tty():
            return self
        fd = self.stream.fileno()
        self._saved_attrs = termios.tcgetattr(fd)
        attrs = termios.tcgetattr(fd)
        attrs[3] &= ~(termios.ICANON | termios.ECHO)
        termios.tcsetattr(fd, termios.TCSANOW, attrs)
        return self

    def close(self) -> None:
        """Restore the terminal settings saved by :meth:`open`."""
        if termios is None or self._saved_attrs is None:
            return
        termios.tcsetattr(self.stream.fileno(), termios.TCSANOW, self._saved_attrs)
        self._saved_attrs = None

    def get_key(self) -> str | None:
        """Return the pending key press, or ``None`` if there is none."""
        if self._use_console():
            return self._get_console_key()
        fd = self.stream.fileno()
        ready, _, _ = select.select([fd], [], [], 0)
        if not ready:
            return None
        return decode_key(os.read(fd, 3))

    @staticmethod
    def _get_console_key() -> str | None:
        if not msvcrt.kbhit():
            return None
        ch = msvcrt.getwch()
        if ch in _WINDOWS_ARROW_PREFIXES:
            return _WINDOWS_ARROWS.get(ord(msvcrt.getwch()))
        return ch

    def __enter__(self) -> "KeyReader":
        return self.open()

    def __exit__(self, *args) -> None:
        self.close()