"""lexcursor - Incremental, lossless text scanning.

A cursor over text plus an orchestration layer: a caller-supplied
classifier carves the input into tokens while lexcursor guarantees that
the tokens reconstruct the input exactly, that every token makes
progress, and that lexical errors become ordinary tokens.

Public API:
    Cursor - Position over the source; peek/bump/take/take_while
    Consumed - Characters and bytes consumed by one cursor operation
    tokens - Lazy stream of (kind, length) pairs
    string_slices - Map (kind, length) pairs onto source text
    lex - tokens() and string_slices() composed
    Scanner - Stateful helper extracting one (kind, text) token per call
    ScanConfig - Scan limits

Exceptions:
    ScanError - Base exception class
    UnexpectedInput - Recoverable: classifier rejected the span
    UnexpectedEndOfInput - Recoverable: classifier ran out of input
    ContractViolationError - Fatal: classifier or caller bug

Submodules:
    lexcursor.scanning - Cursor, attachment protocol, extraction, streams
    lexcursor.diagnostics - Error types, codes, and formatting
"""

from .diagnostics import (
    ContractViolationError,
    RecoverableScanError,
    ScanError,
    ScanErrorKind,
    SourceTooLargeError,
    UnexpectedEndOfInput,
    UnexpectedInput,
)
from .scanning import (
    Consumed,
    Cursor,
    ScanConfig,
    Scanner,
    SizedToken,
    Token,
    TokenStream,
    lex,
    string_slices,
    tokens,
    wrap,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("lexcursor")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Consumed",
    "ContractViolationError",
    "Cursor",
    "RecoverableScanError",
    "ScanConfig",
    "ScanError",
    "ScanErrorKind",
    "Scanner",
    "SizedToken",
    "SourceTooLargeError",
    "Token",
    "TokenStream",
    "UnexpectedEndOfInput",
    "UnexpectedInput",
    "__version__",
    "lex",
    "string_slices",
    "tokens",
    "wrap",
]
