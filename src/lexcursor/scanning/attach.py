"""Attachment protocol: pairing classification outcomes with consumed spans.

A classifier either returns a token kind or raises a RecoverableScanError.
Either way the text it consumed is kept: successes become ``(kind, span)``
and errors are converted into the caller's error kind and become
``(error_kind, span)``. Lexical errors are therefore ordinary tokens in the
output stream rather than stream-terminating failures.

The conversion from error to kind comes from one of:

- an ``error_kind`` callable passed when the scanner is built, or
- a token-kind class implementing ``from_scan_error`` (ErrorConvertible).

Outcomes that need a different pairing implement the Attach protocol.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, Generic, NamedTuple, Protocol, Self, TypeAlias, TypeVar, runtime_checkable

from lexcursor.diagnostics import RecoverableScanError

__all__ = [
    "Attach",
    "ErrorConversion",
    "ErrorConvertible",
    "ErrorKind",
    "SizedToken",
    "Token",
    "attach",
    "resolve_error_kind",
]

K = TypeVar("K")
T = TypeVar("T")

ErrorConversion: TypeAlias = Callable[[RecoverableScanError], K]


class Token(NamedTuple, Generic[K]):
    """A token kind paired with the exact text it covers."""

    kind: K
    text: str


class SizedToken(NamedTuple, Generic[K]):
    """A token kind paired with the number of code points it covers."""

    kind: K
    length: int


@runtime_checkable
class ErrorConvertible(Protocol):
    """Token-kind types that know how to represent a lexical error.

    Example:
        >>> class Kind(Enum):
        ...     ERROR = auto()
        ...     WORD = auto()
        ...
        ...     @classmethod
        ...     def from_scan_error(cls, error: RecoverableScanError) -> Kind:
        ...         return cls.ERROR
    """

    @classmethod
    def from_scan_error(cls, error: RecoverableScanError) -> Self: ...


ErrorKind: TypeAlias = ErrorConversion[K] | type[ErrorConvertible]


class Attach(Protocol[T]):
    """Outcome objects that build their own token from the consumed span.

    Only a method defined on the outcome's class counts. An ``attach``
    attribute set on an instance, or an enum member named ``attach``, does
    not divert the outcome.
    """

    def attach(self, span: Any) -> T: ...


def resolve_error_kind(error_kind: ErrorKind[K]) -> ErrorConversion[K]:
    """Return the error conversion function for ``error_kind``.

    Args:
        error_kind: A class implementing ``from_scan_error``, or any callable
            mapping a RecoverableScanError to a token kind

    Raises:
        TypeError: If a class without ``from_scan_error`` is given
    """
    if isinstance(error_kind, type):
        if isinstance(error_kind, ErrorConvertible):
            return error_kind.from_scan_error
        msg = (
            f"{error_kind.__name__} does not implement from_scan_error(); "
            "pass error_kind=<callable> instead"
        )
        raise TypeError(msg)
    return error_kind


@functools.lru_cache(maxsize=256)
def _defines_attach(outcome_type: type) -> bool:
    return callable(getattr(outcome_type, "attach", None))


def attach(outcome: K | RecoverableScanError, span: Any, convert: ErrorConversion[K]) -> Any:
    """Pair a classifier outcome with the span it consumed.

    Args:
        outcome: Kind returned by the classifier, or the error it raised
        span: Consumed text (str) or length (int)
        convert: Error conversion from resolve_error_kind()

    Returns:
        ``outcome.attach(span)`` for Attach outcomes, otherwise a
        ``(kind, span)`` pair built as a Token (text) or SizedToken (length)
    """
    if isinstance(outcome, RecoverableScanError):
        kind = convert(outcome)
    elif _defines_attach(type(outcome)):
        return outcome.attach(span)
    else:
        kind = outcome
    if isinstance(span, str):
        return Token(kind, span)
    return SizedToken(kind, span)
