"""Per-session timer state and the process-wide completed-session counter."""

import threading
from dataclasses import dataclass, field
from enum import Enum


class TimerPhase(Enum):
    """Where a session timer is in its lifecycle."""

    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"
    SKIPPED = "skipped"
    FAILED = "failed"


class SessionOutcome(Enum):
    """How a session ended without error."""

    COMPLETED = "completed"
    SKIPPED = "skipped"


@dataclass
class TimerState:
    """Countdown state owned by one session timer run."""

    duration: int  # seconds
    current_cycle: int
    total_cycles: int
    remaining_seconds: int = field(init=False)
    is_paused: bool = False
    warning_sent: bool = False

    def __post_init__(self) -> None:
        self.remaining_seconds = self.duration

    @property
    def elapsed_seconds(self) -> int:
        return self.duration - self.remaining_seconds

    @property
    def cycle_label(self) -> str:
        return f"#{self.current_cycle}/{self.total_cycles}"

    def tick(self) -> int:
        """Count down one second and return what is left."""
        self.remaining_seconds = max(0, self.remaining_seconds - 1)
        return self.remaining_seconds

    def reset(self) -> None:
        self.remaining_seconds = self.duration


class CompletedCounter:
    """Thread-safe tally of work sessions that ran to completion."""

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value
