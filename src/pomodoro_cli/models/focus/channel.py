"""Single long-lived command channel shared by sequential session timers."""

from __future__ import annotations

import queue
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from .commands import Command
from .exceptions import ChannelRecvError, ChannelRecvTimeoutError, ChannelSendError

_CLOSED = object()


class CommandChannel:
    """FIFO channel carrying commands from the command source to the active timer.

    Closing enqueues a sentinel behind any pending commands, so commands sent
    before the close are still delivered before receivers start failing.
    Every receiver that hits the sentinel puts it back for the next one.
    """

    def __init__(self) -> None:
        self._queue: queue.Queue = queue.Queue()
        self._closed = threading.Event()
        self._close_lock = threading.Lock()
        self._borrow_lock = threading.Lock()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def send(self, command: Command) -> None:
        if self._closed.is_set():
            raise ChannelSendError(f"cannot send {command.name}: channel is closed")
        self._queue.put(command)

    def recv(self) -> Command:
        """Block until the next command arrives."""
        item = self._queue.get()
        if item is _CLOSED:
            self._queue.put(_CLOSED)
            raise ChannelRecvError("channel closed while waiting for a command")
        return item

    def recv_timeout(self, timeout: float) -> Command | None:
        """Wait up to *timeout* seconds for a command; ``None`` means it timed out."""
        try:
            item = self._queue.get(timeout=timeout)
        except queue.Empty:
            return None
        if item is _CLOSED:
            self._queue.put(_CLOSED)
            raise ChannelRecvTimeoutError("channel closed while waiting for a command")
        return item

    def close(self) -> None:
        with self._close_lock:
            if self._closed.is_set():
                return
            self._closed.set()
            self._queue.put(_CLOSED)

    @contextmanager
    def borrow(self) -> Iterator[CommandChannel]:
        """Hold the receiving end for the duration of one session."""
        if not self._borrow_lock.acquire(blocking=False):
            raise RuntimeError("command channel is already borrowed by another session")
        try:
            yield self
        finally:
            self._borrow_lock.release()
