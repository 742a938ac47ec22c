"""
termwave Configuration
======================

Defaults and the RenderConfig dataclass bundling every rendering option.

Usage:
    config = RenderConfig(wave_height=6, charset="dots", density="high")
    for line in config.render(magnitudes):
        print(line)
"""

from dataclasses import dataclass
from typing import List, Sequence

from .render import DEFAULT_CHARSET, Density, WaveCharset, render

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_WAVE_HEIGHT = 8

# Terminal rows kept free around the waveform: the command line, one spare
# line and the shell prompt
RESERVED_ROWS = 3

# Terminal columns kept free so the cursor never wraps
RESERVED_COLUMNS = 1


@dataclass
class RenderConfig:
    """
    Rendering options for one waveform.

    - wave_height: rows from the centerline (inclusive) to each edge;
      output is 2 * wave_height - 1 lines
    - scale: fit the loudest magnitude to the height
    - charset: glyph palette
    - density: one or two magnitudes per character
    """

    wave_height: int = DEFAULT_WAVE_HEIGHT
    scale: bool = True
    charset: WaveCharset = DEFAULT_CHARSET
    density: Density = Density.STANDARD

    def __post_init__(self):
        """Validate and coerce field values after initialization."""
        if isinstance(self.wave_height, bool) or not isinstance(self.wave_height, int):
            raise ValueError(f"wave_height must be an integer, got {self.wave_height!r}")
        if self.wave_height < 1:
            raise ValueError(f"wave_height = {self.wave_height} must be positive")

        if isinstance(self.charset, str):
            try:
                self.charset = WaveCharset(self.charset.lower())
            except ValueError:
                choices = ", ".join(c.value for c in WaveCharset)
                raise ValueError(f"Unknown charset {self.charset!r} (choose from {choices})")

        if isinstance(self.density, str):
            try:
                self.density = Density(self.density.lower())
            except ValueError:
                choices = ", ".join(d.value for d in Density)
                raise ValueError(f"Unknown density {self.density!r} (choose from {choices})")

    @property
    def line_count(self) -> int:
        """Number of lines a render produces."""
        return 2 * self.wave_height - 1

    def render(self, magnitudes: Sequence[float]) -> List[str]:
        """Render magnitudes with these options."""
        return render(self.wave_height, magnitudes, self.scale, self.charset, self.density)


def parse_density(hd: bool) -> Density:
    """Map the --hd flag to a Density."""
    return Density.HIGH if hd else Density.STANDARD
