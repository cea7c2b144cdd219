"""Cursor infrastructure for classifier-driven scanning.

A Cursor is a position over an immutable source string. Classifiers
inspect it with peek() and advance it with bump(), take() and
take_while(); nothing else mutates it.

Design Philosophy:
    - Cursor is mutable (slots dataclass) - classifiers advance it in place
    - Source is borrowed, never copied - snapshot() is O(1)
    - Positions are integer offsets - comparison relies on identity only
      for the source ``str`` object itself
    - Positions never decrease - there is no way to move backwards
    - Line:column computed on-demand (O(n) only for diagnostics)

Offsets:
    ``pos`` is a code-point index, Python's native string index, so it is
    always on a character boundary. ``byte_pos`` is the UTF-8 byte offset
    of the same position, maintained incrementally as the cursor advances.

Line Ending Support:
    compute_line_col() uses \\n as the line delimiter. CRLF input works
    because the \\n is still present; CR-only input is reported as one line.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from dataclasses import dataclass, field

from lexcursor.constants import DIAGNOSTIC_PREVIEW_LENGTH
from lexcursor.diagnostics import (
    ContractViolationError,
    ErrorTemplate,
    SourceSpan,
    UnexpectedEndOfInput,
)
from lexcursor.scanning.consumed import Consumed, utf8_width

__all__ = ["Cursor"]


@dataclass(slots=True)
class Cursor:
    """Forward-only position tracker over a source string.

    Mutability Note:
        Intentionally mutable (not frozen=True). A classifier receives the
        cursor and advances it in place; the orchestration layer keeps a
        snapshot() from before the call to measure how far it went.

    Example:
        >>> cursor = Cursor("1 + 2")
        >>> cursor.peek()
        '1'
        >>> cursor.take_while(str.isdigit)
        Consumed(chars=1, bytes=1)
        >>> cursor.take(" + ").any()
        True
        >>> cursor.remaining
        '2'

    Attributes:
        source: The text being scanned (borrowed)
        pos: Current code-point offset into source
        byte_pos: UTF-8 byte offset corresponding to pos
    """

    source: str
    pos: int = 0
    byte_pos: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Validate the starting position and derive byte_pos.

        Raises:
            ValueError: If pos is outside [0, len(source)]
        """
        if not 0 <= self.pos <= len(self.source):
            msg = f"Cursor position {self.pos} outside source of length {len(self.source)}"
            raise ValueError(msg)
        if self.pos:
            self.byte_pos = len(self.source[: self.pos].encode("utf-8", "surrogatepass"))

    def __repr__(self) -> str:
        return f"Cursor({self._preview()!r} @ {self.pos})"

    @property
    def is_eof(self) -> bool:
        """Check if all input has been consumed."""
        return self.pos >= len(self.source)

    @property
    def remaining(self) -> str:
        """The text that has not been consumed yet."""
        return self.source[self.pos :]

    def peek(self) -> str:
        """Return the next code point without advancing.

        Raises:
            UnexpectedEndOfInput: If no input remains
        """
        if self.is_eof:
            raise UnexpectedEndOfInput(ErrorTemplate.unexpected_eof(self.pos))
        return self.source[self.pos]

    def bump(self) -> None:
        """Consume exactly one code point.

        Always peek() first: bumping at the end of input is a bug in the
        classifier, not a property of the input.

        Raises:
            ContractViolationError: If no input remains
        """
        if self.is_eof:
            raise ContractViolationError(ErrorTemplate.bump_past_eof(self.source_span()))
        self.byte_pos += utf8_width(self.source[self.pos])
        self.pos += 1

    def take(self, literal: str) -> Consumed:
        """Consume ``literal`` if the remaining input starts with it.

        Returns:
            The record for ``literal`` on a match, Consumed.zero() otherwise
        """
        if not literal or not self.source.startswith(literal, self.pos):
            return Consumed.zero()
        consumed = Consumed.of(literal)
        self.pos += consumed.chars
        self.byte_pos += consumed.bytes
        return consumed

    def take_while(self, predicate: Callable[[str], bool]) -> Consumed:
        """Consume the longest prefix whose code points all satisfy ``predicate``.

        May consume nothing. Never raises.
        """
        source = self.source
        end = len(source)
        start = pos = self.pos
        width = 0
        while pos < end and predicate(source[pos]):
            width += utf8_width(source[pos])
            pos += 1
        self.pos = pos
        self.byte_pos += width
        return Consumed(pos - start, width)

    def consume(self, length: int) -> Consumed:
        """Skip ``length`` code points already measured by a previous scan.

        Used by hand-written iterator lexers that run an extraction against a
        snapshot and then move their own cursor past the resulting token.

        Raises:
            ContractViolationError: If fewer than ``length`` code points remain
        """
        remaining = len(self.source) - self.pos
        if length < 0 or length > remaining:
            raise ContractViolationError(
                ErrorTemplate.consume_past_eof(self.source_span(), length, remaining)
            )
        consumed = Consumed.of(self.source[self.pos : self.pos + length])
        self.pos += consumed.chars
        self.byte_pos += consumed.bytes
        return consumed

    def snapshot(self) -> Cursor:
        """Return an independent cursor at the same position (source shared)."""
        return copy.copy(self)

    def distance_since(self, previous: Cursor) -> Consumed:
        """Measure how far this cursor has advanced since ``previous``.

        Raises:
            ContractViolationError: If the cursors scan different ``str``
                objects, or ``previous`` is ahead of this cursor. Equal text
                held in two distinct objects counts as different.
        """
        self._check_predecessor(previous)
        return Consumed(self.pos - previous.pos, self.byte_pos - previous.byte_pos)

    def string_since(self, previous: Cursor) -> str:
        """Return the text consumed between ``previous`` and this cursor.

        Raises:
            ContractViolationError: Under the same conditions as distance_since()
        """
        self._check_predecessor(previous)
        return self.source[previous.pos : self.pos]

    def _check_predecessor(self, previous: Cursor) -> None:
        if previous.source is not self.source:
            raise ContractViolationError(ErrorTemplate.foreign_cursor())
        if previous.pos > self.pos:
            raise ContractViolationError(
                ErrorTemplate.cursor_out_of_order(previous.pos, self.pos)
            )

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position. Only call for error reporting.

        Example:
            >>> cursor = Cursor("line1\\nline2", 8)
            >>> cursor.compute_line_col()
            (2, 3)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)

    def source_span(self, end: int | None = None) -> SourceSpan:
        """Build a SourceSpan from the current position to ``end``."""
        line, col = self.compute_line_col()
        return SourceSpan(
            start=self.pos,
            end=self.pos if end is None else end,
            line=line,
            column=col,
        )

    def _preview(self) -> str:
        return self.source[self.pos : self.pos + DIAGNOSTIC_PREVIEW_LENGTH]
