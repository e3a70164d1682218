"""Terminal keyboard input for the timer controls."""

import os
import select
import sys
import termios
import threading
import tty
from typing import TextIO

ESCAPE = "\x1b"
CTRL_C = "\x03"

_KEY_NAMES = {
    " ": "space",
    ESCAPE: "escape",
    CTRL_C: "ctrl+c",
}


class KeyboardHandler:
    """Reads single key presses with the terminal in cbreak mode.

    Each key press is delivered on its own, without line buffering or echo.
    The saved terminal attributes are restored by ``stop()``.
    """

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream or sys.stdin
        self.fd = self.stream.fileno()
        self.old_settings = None
        self._restore_lock = threading.Lock()
        self._setup()

    def _setup(self):
        """Setup terminal for per-key input."""
        try:
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except termios.error:
            # Not a TTY; keys still arrive, just line-buffered.
            self.old_settings = None

    def wait_for_key(self, timeout: float) -> str | None:
        """
        Wait up to ``timeout`` seconds for a key press.

        Returns the lower-cased key, a name for special keys ("space",
        "escape", "ctrl+c"), or None when nothing usable arrived in time.
        Raises EOFError once the input stream is exhausted.
        """
        ready, _, _ = select.select([self.fd], [], [], timeout)
        if not ready:
            return None

        key = self._read_char()
        if key == ESCAPE and self._drain_escape_sequence():
            # Arrow and function keys start with ESC; they are not a quit.
            return None
        return _KEY_NAMES.get(key, key.lower())

    def _read_char(self) -> str:
        data = os.read(self.fd, 1)
        if not data:
            raise EOFError("keyboard input closed")
        return data.decode("utf-8", errors="ignore")

    def _drain_escape_sequence(self) -> bool:
        drained = False
        while select.select([self.fd], [], [], 0)[0]:
            if not os.read(self.fd, 1):
                break
            drained = True
        return drained

    def stop(self):
        """Restore terminal settings. Safe to call more than once."""
        with self._restore_lock:
            if self.old_settings is None:
                return
            try:
                termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            except termios.error:
                pass
            self.old_settings = None
