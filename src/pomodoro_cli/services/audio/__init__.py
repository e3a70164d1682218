"""Audio output for completion tones."""

from .player import TonePlayer, synthesize_tone

__all__ = ["TonePlayer", "synthesize_tone"]
