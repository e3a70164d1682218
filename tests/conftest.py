"""Shared test fixtures and configuration.

Keeps log files out of the real user log directory and provides recording
stand-ins for the timer's collaborators (progress bar, notifier, player).
"""

from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

import pytest

from pomodoro_cli.models.focus.channel import CommandChannel
from pomodoro_cli.models.focus.commands import SessionType
from pomodoro_cli.models.focus.timer import SessionTimer
from pomodoro_cli.services.audio.player import TonePlayer
from pomodoro_cli.services.notification_service import Notifier

FAST_TICK = 0.001


# ---------------------------------------------------------------------------
# Logger isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Point the application logger at a temporary directory."""
    import pomodoro_cli.utils.logger as logger_mod

    logger_mod._logger = None
    app_logger = logging.getLogger("pomodoro_cli")
    app_logger.handlers.clear()

    with patch("pomodoro_cli.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield

    for handler in app_logger.handlers:
        handler.close()
    app_logger.handlers.clear()
    logger_mod._logger = None


# ---------------------------------------------------------------------------
# Timer collaborators
# ---------------------------------------------------------------------------


class RecordingProgress:
    """Progress display stand-in that records every call in order."""

    def __init__(self, total_seconds: int, message: str):
        self.total_seconds = total_seconds
        self.message = message
        self.position = 0
        self.events: list[tuple] = []
        self.finished = False

    def advance(self, steps: int = 1) -> None:
        self.position += steps
        self.events.append(("advance", self.position))

    def set_message(self, message: str) -> None:
        self.message = message
        self.events.append(("message", message))

    def set_position(self, position: int) -> None:
        self.position = position
        self.events.append(("position", position))

    def reset_eta(self) -> None:
        self.events.append(("reset_eta",))

    def finish(self) -> None:
        self.finished = True
        self.events.append(("finish",))

    @property
    def advances(self) -> int:
        return sum(1 for event in self.events if event[0] == "advance")


@pytest.fixture
def progress_bars() -> list[RecordingProgress]:
    """Every progress display created through ``progress_factory``."""
    return []


@pytest.fixture
def progress_factory(progress_bars):
    def _factory(total_seconds: int, message: str) -> RecordingProgress:
        progress = RecordingProgress(total_seconds, message)
        progress_bars.append(progress)
        return progress

    return _factory


@pytest.fixture
def channel() -> CommandChannel:
    return CommandChannel()


@pytest.fixture
def notifier() -> MagicMock:
    mock = MagicMock(spec=Notifier)
    mock.send.return_value = True
    return mock


@pytest.fixture
def player() -> MagicMock:
    mock = MagicMock(spec=TonePlayer)
    mock.play_completion_tone.return_value = True
    return mock


@pytest.fixture
def make_timer(channel, notifier, player, progress_factory):
    """Build a SessionTimer with fast ticks and recording collaborators."""

    def _make(
        duration: int = 3,
        session_type: SessionType = SessionType.WORK,
        *,
        sound: bool = True,
        counter=None,
        cycle: tuple[int, int] = (1, 4),
    ) -> SessionTimer:
        return SessionTimer(
            channel,
            duration,
            session_type,
            cycle[0],
            cycle[1],
            sound=sound,
            counter=counter,
            progress_factory=progress_factory,
            notifier=notifier,
            player=player,
            tick_interval=FAST_TICK,
        )

    return _make
