"""Configuration model for a Pomodoro run."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .focus.commands import SessionType


class PomodoroConfig(BaseModel):
    """Session lengths (minutes), cycle count and sound switch."""

    work_minutes: int = Field(default=25, ge=1)
    short_break_minutes: int = Field(default=5, ge=1)
    long_break_minutes: int = Field(default=15, ge=1)
    cycles: int = Field(default=4, ge=1)
    sound: bool = Field(default=True)

    def minutes_for(self, session_type: SessionType) -> int:
        if session_type is SessionType.WORK:
            return self.work_minutes
        if session_type is SessionType.SHORT_BREAK:
            return self.short_break_minutes
        return self.long_break_minutes

    def seconds_for(self, session_type: SessionType) -> int:
        return self.minutes_for(session_type) * 60

    def break_type(self, cycle: int) -> SessionType:
        """The last cycle ends with a long break, every other with a short one."""
        if cycle == self.cycles:
            return SessionType.LONG_BREAK
        return SessionType.SHORT_BREAK

    def describe(self) -> str:
        return (
            f"Starting Pomodoro: {self.work_minutes} min work, "
            f"{self.short_break_minutes} min short break, "
            f"{self.long_break_minutes} min long break, "
            f"{self.cycles} cycles, sound: {'on' if self.sound else 'off'}"
        )
