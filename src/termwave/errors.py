"""Exceptions raised by the termwave rendering engine."""


class TermwaveError(Exception):
    """Base class for all termwave errors."""


class EmptyInputError(TermwaveError, ValueError):
    """No magnitudes were supplied, so there is nothing to render."""


class InvalidMagnitudeError(TermwaveError, ValueError):
    """A magnitude was NaN, infinite or negative."""


class InvariantViolation(TermwaveError, AssertionError):
    """A fullness level reached a glyph table that does not define it.

    This is a classifier/charset mismatch and is never recoverable.
    """
