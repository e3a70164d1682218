"""Sequencing of work and break sessions into repeating cycles."""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.console import Console

from pomodoro_cli.services.audio.player import TonePlayer
from pomodoro_cli.services.notification_service import Notifier
from pomodoro_cli.utils.logger import get_logger
from pomodoro_cli.utils.ui.console import get_console

from .channel import CommandChannel
from .commands import SessionType
from .exceptions import ChannelError
from .state import CompletedCounter, SessionOutcome
from .timer import SessionTimer

if TYPE_CHECKING:
    from pomodoro_cli.models.config_models import PomodoroConfig


@dataclass
class CycleState:
    """Position in the repeating work/break sequence."""

    cycle_number: int = 1
    session_type: SessionType = SessionType.WORK
    passes_completed: int = 0

    def next_session(self, config: PomodoroConfig) -> tuple[int, SessionType]:
        """Return the (cycle, session type) that follows the current session."""
        if self.session_type is SessionType.WORK:
            return self.cycle_number, config.break_type(self.cycle_number)
        if self.cycle_number >= config.cycles:
            return 1, SessionType.WORK
        return self.cycle_number + 1, SessionType.WORK

    def advance(self, config: PomodoroConfig) -> None:
        # The break of the last cycle wraps back to cycle 1.
        wrapped = self.session_type.is_break and self.cycle_number >= config.cycles
        self.cycle_number, self.session_type = self.next_session(config)
        if wrapped:
            self.passes_completed += 1

    def get_duration(self, config: PomodoroConfig) -> int:
        """Get duration in seconds for the current session."""
        return config.seconds_for(self.session_type)


TimerFactory = Callable[..., SessionTimer]


class SessionController:
    """Runs session timers one after another until the command channel breaks.

    Each session runs on a single worker thread while this loop waits for it.
    A ``ChannelError`` from a session ends sequencing; any other exception is
    reported and the next scheduled session starts.
    """

    def __init__(
        self,
        config: PomodoroConfig,
        channel: CommandChannel,
        counter: CompletedCounter,
        *,
        timer_factory: TimerFactory = SessionTimer,
        notifier: Notifier | None = None,
        player: TonePlayer | None = None,
        tick_interval: float = 1.0,
        error_console: Console | None = None,
        logger: logging.Logger | None = None,
    ):
        self.config = config
        self.channel = channel
        self.counter = counter
        self.state = CycleState()
        self.tick_interval = tick_interval
        self._timer_factory = timer_factory
        self._notifier = notifier or Notifier()
        self._player = player or TonePlayer()
        self._error_console = error_console or get_console(stderr=True)
        self._logger = logger or get_logger("controller")

    def build_timer(self) -> SessionTimer:
        return self._timer_factory(
            self.channel,
            self.state.get_duration(self.config),
            self.state.session_type,
            self.state.cycle_number,
            self.config.cycles,
            sound=self.config.sound,
            counter=self.counter,
            notifier=self._notifier,
            player=self._player,
            tick_interval=self.tick_interval,
        )

    def run(self) -> ChannelError:
        """Sequence sessions indefinitely; return the channel error that stopped us."""
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="session")
        try:
            while True:
                future = executor.submit(self.build_timer().run)
                try:
                    outcome = future.result()
                except ChannelError as error:
                    self._logger.info("Sequencing stopped: %s", error)
                    return error
                except Exception as error:
                    self._report_crash(error)
                else:
                    self._log_outcome(outcome)
                self.state.advance(self.config)
        finally:
            # A session still blocked on the channel ends once the channel closes.
            executor.shutdown(wait=False, cancel_futures=True)

    def _log_outcome(self, outcome: SessionOutcome) -> None:
        next_cycle, next_type = self.state.next_session(self.config)
        self._logger.info(
            "%s #%d/%d finished: %s (completed work sessions=%d, full passes=%d); next: %s #%d/%d",
            self.state.session_type.label,
            self.state.cycle_number,
            self.config.cycles,
            outcome.value,
            self.counter.value,
            self.state.passes_completed,
            next_type.label,
            next_cycle,
            self.config.cycles,
        )

    def _report_crash(self, error: Exception) -> None:
        self._logger.error(
            "Session worker crashed during %s #%d/%d",
            self.state.session_type.label,
            self.state.cycle_number,
            self.config.cycles,
            exc_info=error,
        )
        self._error_console.print(
            f"Session worker crashed: {error!r}", style="red", markup=False
        )
