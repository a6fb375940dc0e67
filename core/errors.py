"""
core/errors.py

Typed errors raised by the transform core.

All of them derive from ValueError so callers that already guard the
numeric helpers with `except ValueError` keep working.
"""


class FFTError(ValueError):
    """Base class for every error raised by the FFT core."""


class InvalidDimension(FFTError):
    """A transform axis length is not a power of two."""

    def __init__(self, length: int, axis: str = "sequence"):
        self.length = length
        self.axis = axis
        super().__init__(f"{axis} length {length} is not a power of two.")


class DimensionMismatch(FFTError):
    """A buffer disagrees with the dimensions it was declared with."""

    def __init__(self, expected, actual, what: str = "buffer"):
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what} dimension mismatch: expected {expected}, got {actual}.")
