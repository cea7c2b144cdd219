"""Consumption records returned by cursor operations.

A Consumed value summarizes how far a single cursor operation advanced:
the number of code points and the number of UTF-8 bytes those code points
occupy. Classifiers use the bound checks to reject malformed runs without
counting by hand:

    cursor.take_while(str.isdigit).at_least(1)  # raises UnexpectedInput if none

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from lexcursor.diagnostics import ErrorTemplate, UnexpectedInput

__all__ = ["Consumed", "utf8_width"]


def utf8_width(char: str) -> int:
    """Return the number of bytes ``char`` occupies when UTF-8 encoded.

    Lone surrogates count as 3 bytes, matching the ``surrogatepass``
    error handler.

    Example:
        >>> utf8_width("a"), utf8_width("é"), utf8_width("€"), utf8_width("👋")
        (1, 2, 3, 4)
    """
    code = ord(char)
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4


@dataclass(frozen=True, slots=True)
class Consumed:
    """Characters and bytes consumed by one cursor operation.

    Invariant: ``bytes`` is the sum of the UTF-8 widths of exactly
    ``chars`` code points. Instances come from Cursor operations,
    Consumed.zero(), or Consumed.of(); they are immutable.

    Attributes:
        chars: Number of code points consumed
        bytes: Number of UTF-8 bytes consumed
    """

    chars: int
    bytes: int

    @classmethod
    def zero(cls) -> Consumed:
        """A record that has consumed nothing."""
        return _ZERO

    @classmethod
    def of(cls, chars: Iterable[str]) -> Consumed:
        """Build a record from the code points that were consumed."""
        if isinstance(chars, str):
            return cls(len(chars), len(chars.encode("utf-8", "surrogatepass")))
        count = 0
        width = 0
        for char in chars:
            count += 1
            width += utf8_width(char)
        return cls(count, width)

    def any(self) -> bool:
        """Return True if a non-zero number of bytes were consumed."""
        return self.bytes > 0

    def at_least(self, n: int) -> Consumed:
        """Return self if at least ``n`` characters were consumed.

        Raises:
            UnexpectedInput: If fewer than ``n`` characters were consumed
        """
        if self.chars >= n:
            return self
        raise UnexpectedInput(ErrorTemplate.bound_not_met("at least", n, self.chars))

    def at_most(self, n: int) -> Consumed:
        """Return self if at most ``n`` characters were consumed.

        Raises:
            UnexpectedInput: If more than ``n`` characters were consumed
        """
        if self.chars <= n:
            return self
        raise UnexpectedInput(ErrorTemplate.bound_not_met("at most", n, self.chars))

    def __add__(self, other: Consumed) -> Consumed:
        if not isinstance(other, Consumed):
            return NotImplemented
        return Consumed(self.chars + other.chars, self.bytes + other.bytes)

    def __bool__(self) -> bool:
        return self.any()


_ZERO = Consumed(0, 0)
