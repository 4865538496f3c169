"""
Exceptions raised by the sorting library.

Both concrete errors subclass ValueError so callers that only care about
"bad input" can keep catching the builtin type.
"""

from __future__ import annotations

__all__ = ["SortError", "InvalidInputError", "UnsupportedAlgorithmError"]


class SortError(Exception):
    """Base class for every error raised by sortcore."""


class InvalidInputError(SortError, ValueError):
    """
    Raised when the input is not a sequence of mutually comparable elements,
    or when a range passed to a low-level sorter is out of bounds.
    """


class UnsupportedAlgorithmError(SortError, ValueError):
    """Raised when an algorithm selector does not name a known algorithm."""

    def __init__(self, value: object, supported: list[str]) -> None:
        super().__init__(
            f"Unsupported sorting algorithm: {value!r}. Supported: {supported}"
        )
        self.value = value
        self.supported = supported
