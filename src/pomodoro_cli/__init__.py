"""Pomodoro CLI - a terminal Pomodoro timer with keyboard controls."""

__version__ = "0.1.0"
