"""Terminal geometry: how many magnitudes and rows fit on screen."""

import shutil
from dataclasses import dataclass

from .config import RESERVED_COLUMNS, RESERVED_ROWS
from .render import Density


@dataclass(frozen=True)
class TerminalGeometry:
    """Drawable area for one waveform."""
    columns: int        # Magnitudes needed to fill one line
    wave_height: int    # Half-height passed to render()


def terminal_geometry(density: Density = Density.STANDARD) -> TerminalGeometry:
    """Size the waveform to the current terminal.

    Honours COLUMNS/LINES and falls back to 80x24 when not attached to a tty.
    In high density each character holds two magnitudes, so twice as many
    columns are requested.
    """
    size = shutil.get_terminal_size()
    return geometry_for(size.columns, size.lines, density)


def geometry_for(term_width: int, term_height: int,
                 density: Density = Density.STANDARD) -> TerminalGeometry:
    """Geometry for an explicit terminal size."""
    chars = max(1, term_width - RESERVED_COLUMNS)
    wave_height = max(1, (term_height - RESERVED_ROWS) // 2)
    return TerminalGeometry(columns=chars * density.columns_per_char,
                            wave_height=wave_height)
