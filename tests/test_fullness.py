"""Tests for scaling and fullness classification."""

import math

import numpy as np
import pytest

from termwave.errors import EmptyInputError, InvalidMagnitudeError
from termwave.render import CHARSETS, Fullness, WaveCharset, classify, scale_magnitudes
from termwave.render.fullness import as_magnitudes

E, T, H, TT, F = (
    Fullness.EMPTY, Fullness.THIRD, Fullness.HALF, Fullness.TWO_THIRD, Fullness.FULL,
)


# =============================================================================
# Input validation
# =============================================================================

def test_empty_input_rejected():
    with pytest.raises(EmptyInputError):
        as_magnitudes([])


def test_empty_input_rejected_by_classify(blocks):
    with pytest.raises(EmptyInputError):
        classify(np.array([]), 4, True, blocks)


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, -0.25])
def test_invalid_magnitude_rejected(bad):
    with pytest.raises(InvalidMagnitudeError):
        as_magnitudes([0.1, bad, 0.2])


def test_magnitudes_flattened_to_float64():
    values = as_magnitudes([[1, 2], [3, 4]])
    assert values.dtype == np.float64
    assert values.tolist() == [1.0, 2.0, 3.0, 4.0]


@pytest.mark.parametrize("height", [0, -3])
def test_non_positive_height_rejected(blocks, height):
    with pytest.raises(ValueError):
        classify([0.5], height, True, blocks)


# =============================================================================
# Scaling
# =============================================================================

def test_scaling_without_scale_multiplies_by_height():
    assert scale_magnitudes(np.array([0.5, 1.0]), 4, False).tolist() == [2.0, 4.0]


def test_scaling_leaves_half_row_margin():
    mags = scale_magnitudes(np.array([0.7, 1.4]), 3, True)
    assert mags.tolist() == pytest.approx([1.25, 2.5])


def test_scaling_all_zero_is_degenerate():
    assert scale_magnitudes(np.zeros(5), 3, True).tolist() == [0.0] * 5


# (peak, wave_height): peaks whose naive max / (height - 0.5) factor
# underflows to zero or overflows to infinity
EXTREME_PEAKS = [
    (5e-324, 4),
    (1e-310, 2),
    (1e308, 1),
    (1.7e308, 3),
]


@pytest.mark.parametrize("peak, wave_height", EXTREME_PEAKS)
def test_scaling_extreme_peaks(peak, wave_height):
    mags = scale_magnitudes(np.array([peak, 0.0]), wave_height, True)
    assert mags.tolist() == [wave_height - 0.5, 0.0]


@pytest.mark.parametrize("height", [2.0, "3", None, True])
def test_non_integer_height_rejected(blocks, height):
    with pytest.raises(ValueError):
        classify([0.5], height, True, blocks)


def test_numpy_integer_height_accepted(blocks):
    rows = classify([0.0, 3.5], np.int64(4), True, blocks)
    assert len(rows) == 4


@pytest.mark.parametrize("scale", [True, False])
def test_all_zero_magnitudes_classify_empty(blocks, scale):
    rows = classify(np.zeros(6), 3, scale, blocks)
    assert all(cell == E for row in rows for cell in row)


def test_loudest_column_stops_below_top_row(blocks):
    # max 3.5 over (4 - 0.5) rows gives a scaling factor of exactly 1
    rows = classify([0.0, 3.5], 4, True, blocks)
    column = [row[1] for row in rows]
    assert column[:3] == [F, F, F]
    assert column[3] == E


# =============================================================================
# Windowing
# =============================================================================

# (magnitude, expected centerline fullness) with wave_height=1, no scaling,
# so the scaled magnitude equals the input
CENTERLINE_CASES = [
    (0.0, E),
    (0.2, H),     # 0.4 of the window
    (0.33, H),    # exactly at the 0.66 threshold
    (0.34, F),
    (0.5, F),
    (3.0, F),
]


@pytest.mark.parametrize("magnitude, expected", CENTERLINE_CASES)
def test_centerline_window(blocks, magnitude, expected):
    rows = classify([magnitude], 1, False, blocks)
    assert rows == [[expected]]


# wave_height=2, no scaling: scaled = 2 * m, row 1 window = 2m - 1.5
ROW_ONE_CASES = [
    (0.5, E),
    (0.75, E),    # window exactly 0
    (0.8, H),
    (1.0, H),     # window 0.5
    (1.1, F),     # window 0.7
    (1.25, F),    # window exactly 1
    (5.0, F),
]


@pytest.mark.parametrize("magnitude, expected", ROW_ONE_CASES)
def test_outer_row_window(blocks, magnitude, expected):
    rows = classify([magnitude], 2, False, blocks)
    assert rows[1] == [expected]
    assert rows[0] == [F]


def test_dots_use_three_partial_levels(dots):
    # scaled: [0.2, 0.3, 0.4] -> centerline fractions 0.4, 0.6, 0.8
    rows = classify([0.1, 0.15, 0.2], 2, False, dots)
    assert rows[0] == [T, TT, F]
    assert rows[1] == [E, E, E]


def test_grid_shape(blocks, noisy_magnitudes):
    rows = classify(noisy_magnitudes, 5, True, blocks)
    assert len(rows) == 5
    assert all(len(row) == len(noisy_magnitudes) for row in rows)


def test_no_scale_saturates(blocks):
    rows = classify([3.0, 30.0], 3, False, blocks)
    assert rows == [[F, F], [F, F], [F, F]]


# =============================================================================
# Partial rules
# =============================================================================

@pytest.mark.parametrize("fraction, expected", [
    (0.01, H), (0.5, H), (0.66, H), (0.67, F), (0.99, F),
])
def test_two_level_partial(blocks, ascii_charset, fraction, expected):
    assert blocks.partial(fraction) == expected
    assert ascii_charset.partial(fraction) == expected


@pytest.mark.parametrize("fraction, expected", [
    (0.01, T), (0.5, T), (0.51, TT), (0.75, TT), (0.76, F),
])
def test_dots_partial(dots, fraction, expected):
    assert dots.partial(fraction) == expected


# =============================================================================
# Monotonicity
# =============================================================================

@pytest.mark.parametrize("choice", list(WaveCharset))
@pytest.mark.parametrize("scale", [True, False])
def test_fullness_never_increases_away_from_centerline(choice, scale, rng):
    magnitudes = rng.uniform(0.0, 1.2, size=200)
    rows = classify(magnitudes, 6, scale, CHARSETS[choice])
    for column in range(len(magnitudes)):
        ranks = [int(row[column]) for row in rows]
        assert ranks == sorted(ranks, reverse=True)
        # A non-empty outer row means everything inside it is full
        for y in range(1, len(rows)):
            if ranks[y] > 0:
                assert all(r == int(F) for r in ranks[:y])
