"""Glyph selection for terminal waveforms.

Implements three charset backends:
- Blocks: half-blocks, 2-level granularity (default)
- ASCII: ,'*# glyphs, 2-level granularity (universal fallback)
- Dots: Braille cells, 3-level granularity

Every charset exposes the same three operations:
- partial(fraction): fullness for a window that is neither empty nor full
- glyph_single(fullness, position): one magnitude per character
- glyph_pair(a, b, position): two magnitudes per character (high density)

The set is closed. Each backend must handle every fullness its own partial
rule can produce, and raise InvariantViolation for anything else.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, FrozenSet, Tuple, Union

from ..errors import InvariantViolation
from .fullness import Fullness, Position


# =============================================================================
# Glyph Tables
# =============================================================================

# An entry is either one glyph for every position, or a per-position map
GlyphEntry = Union[str, Dict[Position, str]]


def _by_position(upper: str, lower: str, middle: str) -> Dict[Position, str]:
    return {Position.UPPER: upper, Position.LOWER: lower, Position.MIDDLE: middle}


# Upper half-cells hang from the bottom and lower ones from the top, so the
# filled part always touches the centerline.
ASCII_SINGLE: Dict[Fullness, GlyphEntry] = {
    Fullness.EMPTY: " ",
    Fullness.HALF: _by_position(",", "'", "*"),
    Fullness.FULL: "#",
}

BLOCKS_SINGLE: Dict[Fullness, GlyphEntry] = {
    Fullness.EMPTY: " ",
    Fullness.HALF: _by_position("▄", "▀", "█"),
    Fullness.FULL: "█",
}
BLOCKS_LEFT = "▌"
BLOCKS_RIGHT = "▐"
BLOCKS_FILL = "█"

DOTS_SINGLE: Dict[Fullness, GlyphEntry] = {
    Fullness.EMPTY: "⠀",
    Fullness.THIRD: _by_position("⠤", "⠉", "⠒"),
    Fullness.TWO_THIRD: _by_position("⠶", "⠛", "⠿"),
    Fullness.FULL: "⠿",
}

# Hand-picked Braille cells for every unequal pair. Column order matters:
# the denser side of the cell follows the denser magnitude.
DOTS_PAIR: Dict[Tuple[Fullness, Fullness], GlyphEntry] = {
    (Fullness.EMPTY, Fullness.THIRD): _by_position("⠠", "⠈", "⠐"),
    (Fullness.EMPTY, Fullness.TWO_THIRD): _by_position("⠰", "⠘", "⠸"),
    (Fullness.EMPTY, Fullness.FULL): "⠸",

    (Fullness.THIRD, Fullness.EMPTY): _by_position("⠄", "⠁", "⠇"),
    (Fullness.THIRD, Fullness.TWO_THIRD): _by_position("⠴", "⠙", "⠿"),
    (Fullness.THIRD, Fullness.FULL): _by_position("⠼", "⠹", "⠿"),

    (Fullness.TWO_THIRD, Fullness.EMPTY): _by_position("⠆", "⠃", "⠇"),
    (Fullness.TWO_THIRD, Fullness.THIRD): _by_position("⠦", "⠙", "⠿"),
    (Fullness.TWO_THIRD, Fullness.FULL): _by_position("⠾", "⠻", "⠿"),

    (Fullness.FULL, Fullness.EMPTY): "⠇",
    (Fullness.FULL, Fullness.THIRD): _by_position("⠧", "⠏", "⠿"),
    (Fullness.FULL, Fullness.TWO_THIRD): _by_position("⠷", "⠟", "⠿"),
}


def _lookup(table: dict, key, position: Position, charset: str) -> str:
    entry = table.get(key)
    if entry is None:
        raise InvariantViolation(f"{charset} charset has no glyph for {key!r}")
    if isinstance(entry, str):
        return entry
    return entry[position]


# =============================================================================
# Charset Base Class
# =============================================================================

class Charset(ABC):
    """Abstract base class for waveform charsets."""

    name: str = ""

    @property
    @abstractmethod
    def levels(self) -> FrozenSet[Fullness]:
        """Fullness levels this charset can produce and render."""

    @abstractmethod
    def partial(self, fraction: float) -> Fullness:
        """Choose a fullness for a window fraction strictly between 0 and 1."""

    @abstractmethod
    def glyph_single(self, fullness: Fullness, position: Position) -> str:
        """Glyph for one magnitude per character."""

    @abstractmethod
    def glyph_pair(self, a: Fullness, b: Fullness, position: Position) -> str:
        """Glyph for two adjacent magnitudes merged into one character."""

    def _check(self, *levels: Fullness):
        for fullness in levels:
            if fullness not in self.levels:
                raise InvariantViolation(
                    f"{self.name} charset cannot render {fullness!r}"
                )


class _TwoLevelCharset(Charset):
    """Shared partial rule for the Blocks and ASCII charsets."""

    FULL_THRESHOLD = 0.66

    @property
    def levels(self) -> FrozenSet[Fullness]:
        return frozenset({Fullness.EMPTY, Fullness.HALF, Fullness.FULL})

    def partial(self, fraction: float) -> Fullness:
        if fraction > self.FULL_THRESHOLD:
            return Fullness.FULL
        return Fullness.HALF


# =============================================================================
# Concrete Charset Implementations
# =============================================================================

class AsciiCharset(_TwoLevelCharset):
    """ASCII charset. High density just keeps the fuller of the two cells."""

    name = "ascii"

    def glyph_single(self, fullness: Fullness, position: Position) -> str:
        return _lookup(ASCII_SINGLE, fullness, position, self.name)

    def glyph_pair(self, a: Fullness, b: Fullness, position: Position) -> str:
        self._check(a, b)
        return self.glyph_single(max(a, b), position)


class BlocksCharset(_TwoLevelCharset):
    """Unicode half-block charset."""

    name = "blocks"

    def glyph_single(self, fullness: Fullness, position: Position) -> str:
        return _lookup(BLOCKS_SINGLE, fullness, position, self.name)

    def glyph_pair(self, a: Fullness, b: Fullness, position: Position) -> str:
        self._check(a, b)
        if a == b:
            return self.glyph_single(a, position)
        # (EMPTY, EMPTY) is handled above
        if a == Fullness.EMPTY:
            return BLOCKS_RIGHT
        if b == Fullness.EMPTY:
            return BLOCKS_LEFT
        return BLOCKS_FILL


class DotsCharset(Charset):
    """Braille charset with three partial levels."""

    name = "dots"

    FULL_THRESHOLD = 0.75
    TWO_THIRD_THRESHOLD = 0.5

    @property
    def levels(self) -> FrozenSet[Fullness]:
        return frozenset({
            Fullness.EMPTY, Fullness.THIRD, Fullness.TWO_THIRD, Fullness.FULL,
        })

    def partial(self, fraction: float) -> Fullness:
        if fraction > self.FULL_THRESHOLD:
            return Fullness.FULL
        if fraction > self.TWO_THIRD_THRESHOLD:
            return Fullness.TWO_THIRD
        return Fullness.THIRD

    def glyph_single(self, fullness: Fullness, position: Position) -> str:
        return _lookup(DOTS_SINGLE, fullness, position, self.name)

    def glyph_pair(self, a: Fullness, b: Fullness, position: Position) -> str:
        if a == b:
            return self.glyph_single(a, position)
        return _lookup(DOTS_PAIR, (a, b), position, self.name)


# =============================================================================
# Charset Selection
# =============================================================================

class WaveCharset(Enum):
    """Available charsets."""
    ASCII = "ascii"
    BLOCKS = "blocks"
    DOTS = "dots"

    @property
    def charset(self) -> Charset:
        """The implementation behind this choice."""
        return CHARSETS[self]


DEFAULT_CHARSET = WaveCharset.BLOCKS

CHARSETS: Dict[WaveCharset, Charset] = {
    WaveCharset.ASCII: AsciiCharset(),
    WaveCharset.BLOCKS: BlocksCharset(),
    WaveCharset.DOTS: DotsCharset(),
}


def get_charset(choice: Union[WaveCharset, str]) -> Charset:
    """Get a charset implementation by enum member or name.

    Raises:
        ValueError: If the name is not a known charset
    """
    if isinstance(choice, str):
        choice = WaveCharset(choice.lower())
    return CHARSETS[choice]
