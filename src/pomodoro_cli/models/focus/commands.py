"""Commands and session types shared by the focus timer components."""

from enum import Enum


class Command(Enum):
    """User intents published by the command source."""

    PAUSE = "pause"
    RESUME = "resume"
    PAUSE_RESUME = "pause_resume"
    SKIP = "skip"
    RESET = "reset"


class SessionType(Enum):
    """Kinds of countdown sessions, each carrying its display label."""

    WORK = "Work session"
    SHORT_BREAK = "Short break"
    LONG_BREAK = "Long break"

    @property
    def label(self) -> str:
        return self.value

    @property
    def is_break(self) -> bool:
        return self is not SessionType.WORK

    @property
    def allows_skip(self) -> bool:
        """Breaks can be skipped; a work session ignores SKIP."""
        return self.is_break

    def __str__(self) -> str:
        return self.label


def completion_message(session_type: SessionType) -> str:
    """Notification text sent when a session runs down to zero."""
    if session_type is SessionType.WORK:
        return "Work session is over. Time for a break!"
    return f"{session_type.label} is over. Back to work!"


def warning_message(session_type: SessionType) -> str:
    return f"{session_type.label}: 00:10s left"
