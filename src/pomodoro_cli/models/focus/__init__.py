"""Focus mode - the session timer engine and its collaborators."""

from .channel import CommandChannel
from .commands import Command, SessionType
from .cycling import CycleState, SessionController
from .dispatcher import CommandDispatcher
from .exceptions import (
    ChannelError,
    ChannelRecvError,
    ChannelRecvTimeoutError,
    ChannelSendError,
)
from .keyboard import KeyboardHandler
from .state import CompletedCounter, SessionOutcome, TimerPhase, TimerState
from .timer import SessionTimer
from .ui import SessionProgress, show_start_banner, show_summary

__all__ = [
    "ChannelError",
    "ChannelRecvError",
    "ChannelRecvTimeoutError",
    "ChannelSendError",
    "Command",
    "CommandChannel",
    "CommandDispatcher",
    "CompletedCounter",
    "CycleState",
    "KeyboardHandler",
    "SessionController",
    "SessionOutcome",
    "SessionProgress",
    "SessionTimer",
    "SessionType",
    "TimerPhase",
    "TimerState",
    "show_start_banner",
    "show_summary",
]
