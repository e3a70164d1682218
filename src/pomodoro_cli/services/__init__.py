"""Services wiring the timer to the outside world (sound, notifications, runs)."""
