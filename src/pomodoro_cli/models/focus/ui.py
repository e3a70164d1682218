"""Terminal display for running sessions and the end-of-run summary."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeRemainingColumn,
)

from pomodoro_cli.utils.ui.console import get_console

if TYPE_CHECKING:
    from pomodoro_cli.models.config_models import PomodoroConfig
    from pomodoro_cli.services.pomodoro_service import PomodoroSummary


class SessionProgress:
    """Progress bar for one countdown session.

    One step per second of the session; the description carries the session
    label and cycle position.
    """

    def __init__(self, total_seconds: int, message: str, console: Console | None = None):
        self.console = console or get_console()
        self.position = 0
        self._finished = False
        self._progress = Progress(
            SpinnerColumn(style="green"),
            BarColumn(bar_width=40, complete_style="cyan", finished_style="blue"),
            MofNCompleteColumn(),
            TimeRemainingColumn(),
            TextColumn("< {task.description} >"),
            console=self.console,
        )
        self._task_id = self._progress.add_task(message, total=total_seconds)
        self._progress.start()

    def advance(self, steps: int = 1) -> None:
        self.position += steps
        self._progress.update(self._task_id, completed=self.position)

    def set_message(self, message: str) -> None:
        self._progress.update(self._task_id, description=message)

    def set_position(self, position: int) -> None:
        self.position = position
        self._progress.update(self._task_id, completed=position)

    def reset_eta(self) -> None:
        """Drop speed samples so the estimate restarts from now."""
        self._progress.reset(self._task_id, completed=self.position)

    def finish(self) -> None:
        if self._finished:
            return
        self._finished = True
        self._progress.stop()


def show_start_banner(config: PomodoroConfig, console: Console | None = None) -> None:
    console = console or get_console()
    console.print(f"[bold]{config.describe()}[/bold]\n", soft_wrap=True)


def show_controls(controls: str, console: Console | None = None) -> None:
    console = console or get_console()
    console.print(controls, style="dim", markup=False, soft_wrap=True)
    console.print()


def show_summary(summary: PomodoroSummary, console: Console | None = None) -> None:
    """Print the one-line shutdown summary."""
    console = console or get_console()
    console.print()
    style = "green" if summary.completed_sessions else "yellow"
    console.print(summary.message, style=style, soft_wrap=True)
