"""Sequence adapters over single-token extraction.

- tokens(): lazy, pull-driven stream of ``(kind, length)`` pairs
- string_slices(): maps those lengths back onto the source text
- lex(): both composed

Streams are single-pass. Each pull does work proportional to the next
token only; nothing is buffered ahead of the consumer. Once a stream
reports exhaustion it stays exhausted; scan again with a fresh stream.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from lexcursor.diagnostics import ContractViolationError, ErrorTemplate
from lexcursor.scanning.attach import ErrorKind, SizedToken, Token, resolve_error_kind
from lexcursor.scanning.config import DEFAULT_CONFIG, ScanConfig
from lexcursor.scanning.cursor import Cursor
from lexcursor.scanning.extract import Classifier, extract

__all__ = ["TokenStream", "lex", "string_slices", "tokens"]

K = TypeVar("K")

logger = logging.getLogger(__name__)


class TokenStream(Generic[K]):
    """Iterator of SizedToken values produced by repeated extraction.

    States:
        Ready: another extraction may run (``is_done`` is False)
        Done: input exhausted; terminal, every further pull stops

    Example:
        >>> stream = TokenStream("1 + 2", classify, error_kind=Kind)
        >>> next(stream)
        SizedToken(kind=<Kind.INTEGER: 5>, length=1)

    A StopIteration escaping the classifier is re-raised as RuntimeError,
    as generators do, so it cannot be mistaken for end of input.
    """

    __slots__ = ("_classify", "_convert", "_count", "_done", "cursor")

    def __init__(
        self,
        source: str,
        classify: Classifier[K],
        *,
        error_kind: ErrorKind[K],
        config: ScanConfig | None = None,
    ) -> None:
        """Initialize stream over ``source``.

        Args:
            source: Text to scan
            classify: Classifier invoked once per token
            error_kind: Kind class implementing from_scan_error, or a
                callable converting RecoverableScanError to a kind
            config: Scan limits (default: ScanConfig())

        Raises:
            SourceTooLargeError: If source exceeds config.max_source_size
        """
        (config or DEFAULT_CONFIG).check_source_size(source)
        self._classify = classify
        self._convert = resolve_error_kind(error_kind)
        self._count = 0
        self._done = False
        self.cursor = Cursor(source)
        logger.debug("Token stream started over %d characters", len(source))

    def __iter__(self) -> TokenStream[K]:
        return self

    def __next__(self) -> SizedToken[K]:
        if self._done:
            raise StopIteration
        start = self.cursor.pos
        try:
            token = extract(self.cursor, self._classify, self._convert)
        except StopIteration as exc:
            msg = f"Classifier raised StopIteration at offset {start}"
            raise RuntimeError(msg) from exc
        if token is None:
            self._done = True
            logger.debug("Token stream exhausted after %d tokens", self._count)
            raise StopIteration
        self._count += 1
        return token

    @property
    def is_done(self) -> bool:
        """True once the stream has reported exhaustion."""
        return self._done

    @property
    def token_count(self) -> int:
        """Number of tokens yielded so far."""
        return self._count


def tokens(
    source: str,
    classify: Classifier[K],
    *,
    error_kind: ErrorKind[K],
    config: ScanConfig | None = None,
) -> TokenStream[K]:
    """Scan ``source`` lazily into ``(kind, length)`` pairs.

    Lengths are in code points, so they slice ``source`` directly.
    """
    return TokenStream(source, classify, error_kind=error_kind, config=config)


def string_slices(source: str, sized_tokens: Iterable[tuple[K, int]]) -> Iterator[Token[K]]:
    """Resolve ``(kind, length)`` pairs into ``(kind, text)`` pairs.

    Keeps a running offset into ``source`` and yields
    ``source[offset:offset + length]`` for each pair. Performs no scanning.

    Raises:
        ContractViolationError: If a length runs past the end of ``source``
    """
    offset = 0
    for kind, length in sized_tokens:
        end = offset + length
        if length < 0 or end > len(source):
            raise ContractViolationError(
                ErrorTemplate.slice_out_of_bounds(offset, length, len(source))
            )
        yield Token(kind, source[offset:end])
        offset = end


def lex(
    source: str,
    classify: Classifier[K],
    *,
    error_kind: ErrorKind[K],
    config: ScanConfig | None = None,
) -> Iterator[Token[K]]:
    """Scan ``source`` lazily into ``(kind, text)`` pairs."""
    return string_slices(source, tokens(source, classify, error_kind=error_kind, config=config))
