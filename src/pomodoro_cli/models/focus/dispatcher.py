"""Command source: turns key presses into timer commands."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from rich.console import Console

from pomodoro_cli.utils.logger import get_logger

from .channel import CommandChannel
from .commands import Command
from .exceptions import ChannelSendError
from .keyboard import KeyboardHandler
from .ui import show_controls

CONTROLS = (
    "Controls: [p] Pause | [Space] Toggle | [r] Resume | [s] Skip break | "
    "[x] Reset | [q]/[Esc]/[Ctrl+C] Quit"
)

KEY_BINDINGS: dict[str, Command] = {
    "p": Command.PAUSE,
    "space": Command.PAUSE_RESUME,
    "r": Command.RESUME,
    "x": Command.RESET,
    "s": Command.SKIP,
}

QUIT_KEYS = frozenset({"q", "escape", "ctrl+c"})


def parse_key(key: str) -> Command | None:
    """Map a key name to its command, or None for unbound keys."""
    return KEY_BINDINGS.get(key)


class CommandDispatcher:
    """Reads the keyboard on a background thread and publishes commands.

    A quit key ends the loop. On every exit path the terminal is restored and
    the channel is closed, which is what stops the active session.
    """

    def __init__(
        self,
        channel: CommandChannel,
        *,
        keyboard_factory: Callable[[], KeyboardHandler] = KeyboardHandler,
        poll_interval: float = 1.0,
        console: Console | None = None,
        logger: logging.Logger | None = None,
    ):
        self.channel = channel
        self.poll_interval = poll_interval
        self.console = console
        self.error: ChannelSendError | None = None
        self.quit_requested = False
        self._keyboard_factory = keyboard_factory
        self._keyboard: KeyboardHandler | None = None
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._logger = logger or get_logger("dispatcher")

    def start(self) -> threading.Thread:
        self._thread = threading.Thread(
            target=self.run, name="command-dispatcher", daemon=True
        )
        self._thread.start()
        return self._thread

    def run(self) -> None:
        show_controls(CONTROLS, self.console)
        try:
            self._keyboard = self._keyboard_factory()
        except (OSError, ValueError) as error:
            self._logger.warning("Keyboard unavailable, controls disabled: %s", error)
            self._idle_until_stopped()
            return

        try:
            self._loop(self._keyboard)
        except ChannelSendError as error:
            self.error = error
            self._logger.error("Command dispatcher stopped: %s", error)
        finally:
            self._keyboard.stop()
            self.channel.close()

    def _loop(self, keyboard: KeyboardHandler) -> None:
        while not self._stop.is_set() and not self.channel.closed:
            try:
                key = keyboard.wait_for_key(self.poll_interval)
            except EOFError:
                self._logger.warning("Keyboard input closed, controls disabled")
                self._idle_until_stopped()
                return

            if key is None:
                continue
            if key in QUIT_KEYS:
                self.quit_requested = True
                self._logger.info("Quit requested (%s)", key)
                return

            command = parse_key(key)
            if command is None:
                self._logger.debug("Ignoring unbound key %r", key)
                continue
            self._logger.debug("Key %r -> %s", key, command.name)
            self.channel.send(command)

    def _idle_until_stopped(self) -> None:
        self._stop.wait()

    def stop(self, timeout: float | None = None) -> None:
        """Ask the loop to exit, wait for it, and make sure the terminal is restored."""
        self._stop.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout if timeout is not None else self.poll_interval + 1.0)
        if self._keyboard is not None:
            self._keyboard.stop()
