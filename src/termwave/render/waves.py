"""Waveform assembly: fullness grid to printable lines.

Rows are emitted top to bottom:

  rows wave_height-1 .. 1     Position.UPPER   (farthest first)
  row 0                       Position.MIDDLE  (centerline, never mirrored)
  rows 1 .. wave_height-1     Position.LOWER   (nearest first)

which always yields 2 * wave_height - 1 lines.
"""

import sys
from enum import Enum
from typing import List, Optional, Sequence, TextIO, Tuple, Union

from loguru import logger

from .charsets import DEFAULT_CHARSET, Charset, WaveCharset, get_charset
from .fullness import Position, Row, classify


class Density(Enum):
    """How many magnitudes share one character column."""
    STANDARD = "standard"
    HIGH = "high"

    @property
    def columns_per_char(self) -> int:
        return 2 if self is Density.HIGH else 1


def _as_density(density: Union[Density, str]) -> Density:
    if isinstance(density, str):
        return Density(density.lower())
    return density


def _as_charset(charset: Union[WaveCharset, Charset, str]) -> Charset:
    if isinstance(charset, Charset):
        return charset
    return get_charset(charset)


def row_order(wave_height: int) -> List[Tuple[int, Position]]:
    """Grid row index and position for each output line, top to bottom."""
    upper = [(y, Position.UPPER) for y in range(wave_height - 1, 0, -1)]
    lower = [(y, Position.LOWER) for y in range(1, wave_height)]
    return upper + [(0, Position.MIDDLE)] + lower


def render_row(row: Row, position: Position, charset: Charset, density: Density) -> str:
    """Render one grid row.

    In high density, cells are consumed in pairs and an odd trailing cell
    is dropped.
    """
    if density is Density.HIGH:
        return "".join(
            charset.glyph_pair(row[i], row[i + 1], position)
            for i in range(0, len(row) - 1, 2)
        )
    return "".join(charset.glyph_single(fullness, position) for fullness in row)


def render_grid(
    rows: List[Row],
    charset: Union[WaveCharset, Charset, str] = DEFAULT_CHARSET,
    density: Union[Density, str] = Density.STANDARD,
) -> List[str]:
    """Turn a fullness grid (row 0 = centerline) into output lines."""
    charset = _as_charset(charset)
    density = _as_density(density)
    return [
        render_row(rows[y], position, charset, density)
        for y, position in row_order(len(rows))
    ]


def render(
    wave_height: int,
    magnitudes: Sequence[float],
    scale: bool = True,
    charset: Union[WaveCharset, Charset, str] = DEFAULT_CHARSET,
    density: Union[Density, str] = Density.STANDARD,
) -> List[str]:
    """Render magnitudes as a two-sided waveform.

    Args:
        wave_height: Rows from the centerline (inclusive) to each edge
        magnitudes: Non-negative magnitudes, one per column
        scale: If True, fit the loudest magnitude to the height; otherwise
            assume magnitudes are already normalised to [0, 1]
        charset: Charset choice (enum member, implementation, or name)
        density: Density.HIGH packs two magnitudes into each character.
            The caller is responsible for supplying a sensible column count.

    Returns:
        2 * wave_height - 1 lines, top to bottom

    Raises:
        EmptyInputError: If magnitudes is empty
        InvalidMagnitudeError: If a magnitude is NaN, infinite or negative
    """
    charset = _as_charset(charset)
    density = _as_density(density)

    rows = classify(magnitudes, wave_height, scale, charset)
    columns = len(rows[0])
    if density is Density.HIGH and columns % 2:
        logger.debug(f"Dropping trailing column of {columns} in high density")

    logger.debug(
        f"Rendering {columns} columns, wave_height={wave_height}, "
        f"scale={scale}, charset={charset.name}, density={density.value}"
    )
    return render_grid(rows, charset, density)


def draw_waves(
    wave_height: int,
    magnitudes: Sequence[float],
    scale: bool = True,
    charset: Union[WaveCharset, Charset, str] = DEFAULT_CHARSET,
    density: Union[Density, str] = Density.STANDARD,
    file: Optional[TextIO] = None,
) -> None:
    """Render magnitudes and print the lines (stdout by default).

    Nothing is printed unless every line rendered successfully.
    """
    lines = render(wave_height, magnitudes, scale, charset, density)
    out = file if file is not None else sys.stdout
    for line in lines:
        print(line, file=out)
