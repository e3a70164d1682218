"""Completion tone playback through the default audio output."""

from __future__ import annotations

import logging

import numpy as np

from pomodoro_cli.utils.logger import get_logger

SOUNDDEVICE_AVAILABLE = False

try:
    import sounddevice as sd

    SOUNDDEVICE_AVAILABLE = True
except (ImportError, OSError):
    # OSError: the PortAudio shared library is missing.
    sd = None

SAMPLE_RATE_HZ = 44100
TONE_FREQUENCY_HZ = 440.0
TONE_DURATION_SECONDS = 0.25
TONE_AMPLITUDE = 0.20


def synthesize_tone(
    frequency_hz: float = TONE_FREQUENCY_HZ,
    duration_seconds: float = TONE_DURATION_SECONDS,
    amplitude: float = TONE_AMPLITUDE,
    sample_rate_hz: int = SAMPLE_RATE_HZ,
) -> np.ndarray:
    """Return a mono float32 sine wave."""
    samples = int(duration_seconds * sample_rate_hz)
    t = np.arange(samples, dtype=np.float32) / sample_rate_hz
    return (amplitude * np.sin(2 * np.pi * frequency_hz * t)).astype(np.float32)


class TonePlayer:
    """Plays the short completion tone, blocking until playback ends."""

    def __init__(
        self,
        sample_rate_hz: int = SAMPLE_RATE_HZ,
        logger: logging.Logger | None = None,
    ):
        self.sample_rate_hz = sample_rate_hz
        self._logger = logger or get_logger("audio")

    def play_completion_tone(self) -> bool:
        if not SOUNDDEVICE_AVAILABLE:
            self._logger.info("sounddevice unavailable; skipping completion tone")
            return False

        wave = synthesize_tone(sample_rate_hz=self.sample_rate_hz)
        try:
            sd.play(wave, self.sample_rate_hz)
            sd.wait()
        except Exception as error:  # PortAudioError, no output device, ...
            self._logger.warning("Completion tone playback failed: %s", error)
            return False
        return True
