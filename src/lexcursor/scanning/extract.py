"""Single-token extraction.

Runs a classifier once against a cursor and enforces the invariants every
extraction must satisfy:

1. Return None if no input remains (the only way a stream ends).
2. Snapshot the cursor.
3. Call the classifier; a RecoverableScanError it raises becomes the outcome.
4. Measure how far the cursor moved.
5. Raise ContractViolationError if it did not move at all.
6. Attach the consumed length (or text) to the outcome.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeAlias, TypeVar

from lexcursor.diagnostics import ContractViolationError, ErrorTemplate, RecoverableScanError
from lexcursor.scanning.attach import (
    ErrorConversion,
    ErrorKind,
    Token,
    attach,
    resolve_error_kind,
)
from lexcursor.scanning.config import DEFAULT_CONFIG, ScanConfig
from lexcursor.scanning.cursor import Cursor

__all__ = ["Classifier", "Scanner", "extract", "wrap"]

logger = logging.getLogger(__name__)

K = TypeVar("K")

Classifier: TypeAlias = Callable[[Cursor], K]


def extract(
    cursor: Cursor,
    classify: Classifier[K],
    convert: ErrorConversion[K],
    *,
    attach_text: bool = False,
) -> Any | None:
    """Extract at most one token, advancing ``cursor`` past it.

    Args:
        cursor: Cursor positioned at the start of the next token
        classify: Classifier that advances the cursor and returns a kind
        convert: Conversion from RecoverableScanError to a kind
        attach_text: Attach the consumed text instead of its length

    Returns:
        SizedToken (or Token with attach_text) for the consumed span,
        the result of ``outcome.attach()`` for Attach outcomes, or None
        when the input is exhausted

    Raises:
        ContractViolationError: If the classifier consumed nothing, or
            misused the cursor
    """
    if cursor.is_eof:
        return None

    start = cursor.snapshot()
    try:
        outcome: K | RecoverableScanError = classify(cursor)
    except RecoverableScanError as error:
        outcome = error

    consumed = cursor.distance_since(start)
    if not consumed.any():
        raise ContractViolationError(
            ErrorTemplate.no_progress(start.source_span(), start._preview())
        )

    if isinstance(outcome, RecoverableScanError):
        logger.debug(
            "Recoverable %s at offset %d (%d chars) converted to token",
            outcome.kind,
            start.pos,
            consumed.chars,
        )

    span: str | int = cursor.string_since(start) if attach_text else consumed.chars
    return attach(outcome, span, convert)


def wrap(
    cursor: Cursor,
    classify: Classifier[K],
    *,
    error_kind: ErrorKind[K],
) -> Any | None:
    """Measure the next token without moving ``cursor``.

    Runs the extraction on a snapshot and returns the ``(kind, length)``
    pair. Iterator-style lexers then advance their own cursor with
    ``cursor.consume(token.length)``.

    Example:
        >>> token = wrap(cursor, classify, error_kind=Kind)
        >>> if token is not None:
        ...     cursor.consume(token.length)
    """
    return extract(cursor.snapshot(), classify, resolve_error_kind(error_kind))


class Scanner(Generic[K]):
    """Stateful helper owning a cursor and wrapping classifier calls.

    Each wrap() call extracts one token and attaches the consumed text.

    Example:
        >>> scanner = Scanner("1+2", error_kind=Kind)
        >>> scanner.wrap(classify)
        Token(kind=<Kind.INTEGER: 1>, text='1')
    """

    __slots__ = ("_convert", "cursor")

    def __init__(
        self,
        source: str,
        *,
        error_kind: ErrorKind[K],
        config: ScanConfig | None = None,
    ) -> None:
        """Initialize scanner over ``source``.

        Args:
            source: Text to scan
            error_kind: Kind class implementing from_scan_error, or a
                callable converting RecoverableScanError to a kind
            config: Scan limits (default: ScanConfig())

        Raises:
            SourceTooLargeError: If source exceeds config.max_source_size
        """
        (config or DEFAULT_CONFIG).check_source_size(source)
        self._convert = resolve_error_kind(error_kind)
        self.cursor = Cursor(source)

    def __repr__(self) -> str:
        return f"Scanner({self.cursor!r})"

    def wrap(self, classify: Classifier[K]) -> Token[K] | None:
        """Extract the next token with its text, or None at end of input."""
        return extract(self.cursor, classify, self._convert, attach_text=True)
