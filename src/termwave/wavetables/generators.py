"""Synthetic magnitude envelopes.

All generators return float64 arrays with values in [0.0, 1.0], ready to be
passed to render() with or without scaling.
"""

from typing import Callable, Dict

import numpy as np


def _check_length(length: int):
    if length < 1:
        raise ValueError(f"Length must be positive, got {length}")


def generate_linear(length: int = 128) -> np.ndarray:
    """Generate linear ramp from 0.0 to 1.0.

    Args:
        length: Number of magnitudes

    Returns:
        Array of float64 values ramping from 0.0 to 1.0
    """
    _check_length(length)
    return np.linspace(0.0, 1.0, length)


def generate_sine(length: int = 128, periods: float = 1.0) -> np.ndarray:
    """Generate a sine envelope, scaled 0.0-1.0.

    Midpoint at index 0, peak a quarter period in.

    Args:
        length: Number of magnitudes
        periods: Number of full periods across the array

    Returns:
        Array of float64 values representing the envelope
    """
    _check_length(length)
    t = np.linspace(0, 2 * np.pi * periods, length, endpoint=False)
    return 0.5 + 0.5 * np.sin(t)


def generate_cosine(length: int = 128, periods: float = 1.0) -> np.ndarray:
    """Generate a cosine envelope, scaled 0.0-1.0.

    Peak at index 0, midpoint a quarter period in.
    """
    _check_length(length)
    t = np.linspace(0, 2 * np.pi * periods, length, endpoint=False)
    return 0.5 + 0.5 * np.cos(t)


def generate_triangle(length: int = 128) -> np.ndarray:
    """Generate one period of triangle envelope.

    Starts at 0.0, peaks at 1.0 at length/2.
    """
    _check_length(length)
    half = length // 2
    up = np.linspace(0.0, 1.0, half)
    down = np.linspace(1.0, 0.0, length - half)
    return np.concatenate([up, down])


def generate_silence(length: int = 128) -> np.ndarray:
    """Generate an all-zero envelope."""
    _check_length(length)
    return np.zeros(length)


WAVETABLES: Dict[str, Callable[[int], np.ndarray]] = {
    "linear": generate_linear,
    "sine": generate_sine,
    "cosine": generate_cosine,
    "triangle": generate_triangle,
    "silence": generate_silence,
}


def resample_to_width(magnitudes: np.ndarray, width: int) -> np.ndarray:
    """Linearly resample magnitudes to exactly `width` columns.

    Args:
        magnitudes: Source magnitudes (at least one)
        width: Target number of columns

    Returns:
        Array of float64 magnitudes with length `width`
    """
    _check_length(width)
    values = np.asarray(magnitudes, dtype=np.float64).ravel()
    if values.size == 0:
        raise ValueError("Cannot resample an empty magnitude sequence")
    if values.size == width:
        return values.copy()
    if values.size == 1:
        return np.full(width, values[0])

    indices = np.linspace(0, values.size - 1, width)
    return np.interp(indices, np.arange(values.size), values)
