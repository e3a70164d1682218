"""One Pomodoro run: command source, session controller and shutdown summary."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from rich.console import Console

from pomodoro_cli.models.config_models import PomodoroConfig
from pomodoro_cli.models.focus.channel import CommandChannel
from pomodoro_cli.models.focus.cycling import SessionController
from pomodoro_cli.models.focus.dispatcher import CommandDispatcher
from pomodoro_cli.models.focus.state import CompletedCounter
from pomodoro_cli.models.focus.ui import show_start_banner, show_summary
from pomodoro_cli.utils.logger import get_logger
from pomodoro_cli.utils.ui.console import get_console


@dataclass(frozen=True)
class PomodoroSummary:
    """Totals reported when the run ends."""

    completed_sessions: int
    work_minutes: int

    @property
    def total_minutes(self) -> int:
        return self.completed_sessions * self.work_minutes

    @property
    def message(self) -> str:
        return (
            "Pomodoro session ended. Total work cycles completed: "
            f"{self.completed_sessions} for a total of {self.total_minutes} min"
        )


class PomodoroService:
    """Owns the command channel and the completed-session counter for one run."""

    def __init__(
        self,
        config: PomodoroConfig,
        *,
        console: Console | None = None,
        dispatcher_factory: Callable[..., CommandDispatcher] = CommandDispatcher,
        controller_factory: Callable[..., SessionController] = SessionController,
        logger: logging.Logger | None = None,
    ):
        self.config = config
        self.console = console or get_console()
        self.channel = CommandChannel()
        self.counter = CompletedCounter()
        self._dispatcher_factory = dispatcher_factory
        self._controller_factory = controller_factory
        self._logger = logger or get_logger("service")

    def run(self) -> PomodoroSummary:
        """Run sessions until the user quits or the channel breaks."""
        self._logger.info("Run started: %s", self.config.model_dump())
        show_start_banner(self.config, self.console)

        dispatcher = self._dispatcher_factory(self.channel, console=self.console)
        dispatcher.start()
        controller = self._controller_factory(self.config, self.channel, self.counter)

        try:
            controller.run()
        except KeyboardInterrupt:
            self._logger.info("Interrupted from the terminal")
        finally:
            dispatcher.stop()
            self.channel.close()

        if dispatcher.quit_requested:
            self._logger.info("Stopped from the keyboard")
        elif dispatcher.error is not None:
            self._logger.error("Command source failed: %s", dispatcher.error)

        summary = PomodoroSummary(
            completed_sessions=self.counter.value,
            work_minutes=self.config.work_minutes,
        )
        self._logger.info("Run ended: %s", summary.message)
        show_summary(summary, self.console)
        return summary
