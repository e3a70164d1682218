"""Data models for Pomodoro CLI."""

from .config_models import PomodoroConfig

__all__ = ["PomodoroConfig"]
