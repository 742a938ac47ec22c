"""termwave: render magnitude sequences as terminal waveforms."""

from loguru import logger

from .config import RenderConfig
from .errors import EmptyInputError, InvalidMagnitudeError, InvariantViolation, TermwaveError
from .render import Density, WaveCharset, draw_waves, render

__version__ = "0.1.0"

# Library stays quiet until an application enables it (see cli.setup_logging)
logger.disable("termwave")

__all__ = [
    "RenderConfig",
    "EmptyInputError",
    "InvalidMagnitudeError",
    "InvariantViolation",
    "TermwaveError",
    "Density",
    "WaveCharset",
    "draw_waves",
    "render",
]
