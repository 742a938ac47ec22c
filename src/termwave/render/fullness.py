"""Fullness classification for terminal waveforms.

Each magnitude is scaled into row units, then every row of the grid takes a
one-row window of that scaled value and reduces it to a discrete fullness:

  Row 0 (centerline)   window [0, 0.5)   doubled before the partial rule
  Row y >= 1           window mag - 0.5 - y, compared against [0, 1)

Characters are rendered differently above and below the centerline, so the
classifier only records how full a cell is. Picking the glyph is deferred to
the charset (see charsets.py).
"""

from enum import Enum, IntEnum
from typing import List, Sequence

import numpy as np

from ..errors import EmptyInputError, InvalidMagnitudeError


class Fullness(IntEnum):
    """Approximate vertical fill of a character cell, ordered by rank."""
    EMPTY = 0
    THIRD = 1
    HALF = 2
    TWO_THIRD = 3
    FULL = 4


class Position(Enum):
    """Where a row sits relative to the centerline."""
    UPPER = "upper"
    LOWER = "lower"
    MIDDLE = "middle"


Row = List[Fullness]

# Window ceilings (in scaled row units)
CENTER_CEILING = 0.5
ROW_CEILING = 1.0


def as_magnitudes(magnitudes: Sequence[float]) -> np.ndarray:
    """Normalise input to a 1-D float64 array and validate it.

    Raises:
        EmptyInputError: If there are no magnitudes
        InvalidMagnitudeError: If any value is NaN, infinite or negative
    """
    values = np.asarray(magnitudes, dtype=np.float64).ravel()
    if values.size == 0:
        raise EmptyInputError("No magnitudes to render")

    bad = ~np.isfinite(values)
    if bad.any():
        index = int(np.argmax(bad))
        raise InvalidMagnitudeError(f"Magnitude {index} is not finite: {values[index]}")

    negative = values < 0
    if negative.any():
        index = int(np.argmax(negative))
        raise InvalidMagnitudeError(f"Magnitude {index} is negative: {values[index]}")

    return values


def scale_magnitudes(values: np.ndarray, wave_height: int, scale: bool) -> np.ndarray:
    """Convert magnitudes to row units.

    With scale, the loudest sample lands half a row below the drawable edge.
    Without it, a magnitude of 1.0 spans the full half-height.

    Scaled values are normalised by the peak before multiplying out to the
    height, so subnormal or near-overflow peaks still reach the same rows.
    """
    if not scale:
        return values / (1.0 / wave_height)

    max_mag = float(values.max())
    if max_mag == 0.0:
        # Every magnitude is zero; avoid 0/0
        return np.zeros_like(values)
    return values / max_mag * (wave_height - 0.5)


def classify_window(window: np.ndarray, ceiling: float, charset) -> Row:
    """Reduce windowed values to fullness levels.

    Values at or below zero are empty, values at or above the ceiling are
    full, and anything in between goes through the charset's partial rule
    as a fraction of the ceiling.
    """
    row = []
    for value in window:
        if value <= 0.0:
            row.append(Fullness.EMPTY)
        elif value >= ceiling:
            row.append(Fullness.FULL)
        else:
            row.append(charset.partial(float(value) / ceiling))
    return row


def classify(
    magnitudes: Sequence[float],
    wave_height: int,
    scale: bool,
    charset,
) -> List[Row]:
    """Build the fullness grid for a magnitude sequence.

    Args:
        magnitudes: Non-negative magnitudes, one per column
        wave_height: Rows from the centerline (inclusive) to the edge
        scale: Fit the loudest sample to the available height
        charset: Charset providing the partial-fullness rule

    Returns:
        wave_height rows, row 0 being the centerline, each holding one
        Fullness per magnitude in input order
    """
    if isinstance(wave_height, bool) or not isinstance(wave_height, (int, np.integer)):
        raise ValueError(f"wave_height must be an integer, got {wave_height!r}")
    if wave_height < 1:
        raise ValueError(f"wave_height must be positive, got {wave_height}")

    values = as_magnitudes(magnitudes)
    mags = scale_magnitudes(values, wave_height, scale)

    rows = [classify_window(mags, CENTER_CEILING, charset)]
    for y in range(1, wave_height):
        rows.append(classify_window(mags - 0.5 - y, ROW_CEILING, charset))
    return rows
