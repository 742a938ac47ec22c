"""Magnitude envelopes for termwave demos and tests."""

from .generators import (
    WAVETABLES,
    generate_cosine,
    generate_linear,
    generate_silence,
    generate_sine,
    generate_triangle,
    resample_to_width,
)

__all__ = [
    "WAVETABLES",
    "generate_cosine",
    "generate_linear",
    "generate_silence",
    "generate_sine",
    "generate_triangle",
    "resample_to_width",
]
