"""Countdown state machine for a single work or break session."""

from __future__ import annotations

import logging
from collections.abc import Callable

from pomodoro_cli.services.audio.player import TonePlayer
from pomodoro_cli.services.notification_service import Notifier
from pomodoro_cli.utils.logger import get_logger

from .channel import CommandChannel
from .commands import Command, SessionType, completion_message, warning_message
from .exceptions import ChannelError
from .state import CompletedCounter, SessionOutcome, TimerPhase, TimerState
from .ui import SessionProgress

WARNING_THRESHOLD_SECONDS = 10

ProgressFactory = Callable[[int, str], SessionProgress]


class SessionTimer:
    """Runs one countdown session while reacting to commands from the channel.

    While running, each receive waits at most one tick; a timeout is a tick.
    While paused, the receive blocks with no timeout, so pausing never
    consumes countdown time. A closed channel is fatal and propagates as a
    ``ChannelError`` subclass.
    """

    def __init__(
        self,
        channel: CommandChannel,
        duration_seconds: int,
        session_type: SessionType,
        current_cycle: int,
        total_cycles: int,
        *,
        sound: bool = True,
        counter: CompletedCounter | None = None,
        progress_factory: ProgressFactory = SessionProgress,
        notifier: Notifier | None = None,
        player: TonePlayer | None = None,
        tick_interval: float = 1.0,
        logger: logging.Logger | None = None,
    ):
        if duration_seconds <= 0:
            raise ValueError("duration_seconds must be greater than zero")

        self.channel = channel
        self.session_type = session_type
        self.sound = sound
        self.counter = counter if counter is not None else CompletedCounter()
        self.tick_interval = tick_interval
        self.state = TimerState(duration_seconds, current_cycle, total_cycles)
        self.phase = TimerPhase.RUNNING
        self._progress_factory = progress_factory
        self._notifier = notifier or Notifier()
        self._player = player or TonePlayer()
        self._logger = logger or get_logger("timer")

    @property
    def remaining_seconds(self) -> int:
        return self.state.remaining_seconds

    @property
    def is_paused(self) -> bool:
        return self.state.is_paused

    def describe(self) -> str:
        return f"{self.session_type.label} ({self.state.cycle_label})"

    def run(self) -> SessionOutcome:
        """Run the session to completion or skip.

        Raises a ``ChannelError`` when the command channel closes.
        """
        progress = self._progress_factory(self.state.duration, self.describe())
        self._logger.info(
            "Session started: %s duration=%ss", self.describe(), self.state.duration
        )
        try:
            with self.channel.borrow():
                outcome = self._countdown(progress)
        except ChannelError as error:
            self.phase = TimerPhase.FAILED
            self._logger.warning(
                "Session failed: %s remaining=%ss (%s)",
                self.describe(),
                self.state.remaining_seconds,
                error,
            )
            raise
        finally:
            progress.finish()

        if outcome is SessionOutcome.COMPLETED:
            self._on_completed()
        else:
            self._logger.info(
                "Session skipped: %s elapsed=%ss remaining=%ss",
                self.describe(),
                self.state.elapsed_seconds,
                self.state.remaining_seconds,
            )
        return outcome

    def _countdown(self, progress: SessionProgress) -> SessionOutcome:
        while self.state.remaining_seconds > 0:
            if self.state.is_paused:
                self._handle_paused(self.channel.recv(), progress)
                continue

            command = self.channel.recv_timeout(self.tick_interval)
            if command is None:
                self._tick(progress)
            elif self._handle_running(command, progress):
                self.phase = TimerPhase.SKIPPED
                return SessionOutcome.SKIPPED

        self.phase = TimerPhase.COMPLETED
        return SessionOutcome.COMPLETED

    def _tick(self, progress: SessionProgress) -> None:
        remaining = self.state.tick()
        progress.advance()
        if remaining == WARNING_THRESHOLD_SECONDS and not self.state.warning_sent:
            self.state.warning_sent = True
            self._notifier.send(warning_message(self.session_type))

    def _handle_running(self, command: Command, progress: SessionProgress) -> bool:
        """Apply a command received while running. Returns True to skip."""
        if command in (Command.PAUSE, Command.PAUSE_RESUME):
            self.state.is_paused = True
            self.phase = TimerPhase.PAUSED
            progress.set_message(f"{self.describe()} (paused)")
            self._logger.info(
                "Session paused: %s remaining=%ss",
                self.describe(),
                self.state.remaining_seconds,
            )
        elif command is Command.RESET:
            self.state.reset()
            progress.set_position(0)
            progress.reset_eta()
            self._logger.info("Session reset: %s", self.describe())
        elif command is Command.SKIP:
            if self.session_type.allows_skip:
                return True
            self._logger.debug("Skip ignored during %s", self.session_type.label)
        return False

    def _handle_paused(self, command: Command, progress: SessionProgress) -> None:
        if command not in (Command.RESUME, Command.PAUSE_RESUME):
            self._logger.debug("Ignoring %s while paused", command.name)
            return
        self.state.is_paused = False
        self.phase = TimerPhase.RUNNING
        progress.set_message(self.describe())
        progress.reset_eta()
        self._logger.info(
            "Session resumed: %s remaining=%ss",
            self.describe(),
            self.state.remaining_seconds,
        )

    def _on_completed(self) -> None:
        if self.session_type is SessionType.WORK:
            total = self.counter.increment()
            self._logger.info("Work session completed (total=%d)", total)
        else:
            self._logger.info("Session completed: %s", self.describe())

        if self.sound:
            self._player.play_completion_tone()
            self._notifier.send(completion_message(self.session_type))
