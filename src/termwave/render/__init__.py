"""Terminal waveform rendering with block, ASCII and Braille glyphs."""

from .charsets import (
    AsciiCharset,
    BlocksCharset,
    Charset,
    CHARSETS,
    DEFAULT_CHARSET,
    DotsCharset,
    WaveCharset,
    get_charset,
)
from .fullness import Fullness, Position, classify, scale_magnitudes
from .waves import Density, draw_waves, render, render_grid, row_order

__all__ = [
    "AsciiCharset",
    "BlocksCharset",
    "Charset",
    "CHARSETS",
    "DEFAULT_CHARSET",
    "DotsCharset",
    "WaveCharset",
    "get_charset",
    "Fullness",
    "Position",
    "classify",
    "scale_magnitudes",
    "Density",
    "draw_waves",
    "render",
    "render_grid",
    "row_order",
]
