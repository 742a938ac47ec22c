#!/usr/bin/env python3
"""
termwave command-line renderer
==============================

Draws a pre-aggregated magnitude sequence (one value per column, e.g. RMS
per audio chunk) as a waveform sized to the terminal.

Usage:
    termwave mags.txt                     # Whitespace/comma separated floats
    termwave mags.npy --hd -c dots        # numpy array, Braille, double density
    some-rms-tool song.mp3 | termwave -   # Read floats from stdin
    termwave --wavetable sine --no-scale  # Built-in test envelope

Rendered lines go to stdout, diagnostics to stderr.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import numpy as np
from loguru import logger

from .config import RenderConfig, parse_density
from .errors import TermwaveError
from .render import DEFAULT_CHARSET, WaveCharset
from .terminal import terminal_geometry
from .wavetables import WAVETABLES, resample_to_width


def setup_logging(verbose: bool = False):
    """Configure loguru for CLI output."""
    logger.remove()  # Remove default handler

    if verbose:
        log_level = "DEBUG"
        log_format = (
            "<green>{time:HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        )
    else:
        log_level = "INFO"
        log_format = (
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<level>{message}</level>"
        )

    logger.add(
        sys.stderr,
        format=log_format,
        level=log_level,
        colorize=True,
    )
    logger.enable("termwave")


def load_magnitudes(source: str) -> np.ndarray:
    """Load magnitudes from a .npy file, a text file, or stdin ("-").

    Text input may separate values with whitespace, newlines or commas.
    """
    if source == "-":
        text = sys.stdin.read()
    else:
        path = Path(source)
        if path.suffix == ".npy":
            return np.load(path).astype(np.float64).ravel()
        text = path.read_text(encoding="utf-8")

    tokens = text.replace(",", " ").split()
    return np.array(tokens, dtype=np.float64)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termwave",
        description="Render a magnitude sequence as a terminal waveform",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  termwave mags.txt
  termwave mags.npy --hd --charset dots
  termwave --wavetable triangle --height 6 --width 60
        """,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        'source',
        nargs='?',
        help='Magnitude file (.npy or text), or - for stdin',
    )
    source.add_argument(
        '--wavetable',
        choices=sorted(WAVETABLES),
        help='Render a built-in envelope instead of a file',
    )

    parser.add_argument(
        '--charset', '-c',
        choices=[c.value for c in WaveCharset],
        default=DEFAULT_CHARSET.value,
        help=f'Character set to use for rendering (default: {DEFAULT_CHARSET.value})',
    )
    parser.add_argument(
        '--hd',
        action='store_true',
        help='Render two magnitudes per character',
    )
    parser.add_argument(
        '--no-scale',
        action='store_true',
        help="Don't scale the waveform to fit; treat 1.0 as full height",
    )
    parser.add_argument(
        '--height',
        type=int,
        help='Rows from the centerline to each edge (default: fit terminal)',
    )
    parser.add_argument(
        '--width',
        type=int,
        help='Magnitude columns for --fit and --wavetable (default: fit terminal)',
    )
    parser.add_argument(
        '--fit',
        action='store_true',
        help='Resample the loaded magnitudes to the column count',
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose/debug logging output',
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    density = parse_density(args.hd)
    geometry = None
    if args.height is None or (args.width is None and (args.fit or args.wavetable)):
        geometry = terminal_geometry(density)
        logger.debug(f"Terminal geometry: {geometry}")
    width = args.width if args.width is not None else (geometry.columns if geometry else None)
    height = args.height if args.height is not None else geometry.wave_height

    try:
        if args.wavetable:
            magnitudes = WAVETABLES[args.wavetable](width)
        else:
            magnitudes = load_magnitudes(args.source)
            if args.fit:
                magnitudes = resample_to_width(magnitudes, width)

        config = RenderConfig(
            wave_height=height,
            scale=not args.no_scale,
            charset=args.charset,
            density=density,
        )
        lines = config.render(magnitudes)
    except (TermwaveError, ValueError, OSError) as e:
        logger.error(f"{e}")
        return 1

    logger.debug(f"{len(magnitudes)} magnitudes -> {len(lines)} lines")
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
