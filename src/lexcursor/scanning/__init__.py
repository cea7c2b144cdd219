"""Cursor, consumption records, and classifier orchestration.

Leaves first:
    consumed - Consumed records and UTF-8 width helper
    cursor - Cursor over a source string
    attach - Pairing classifier outcomes with consumed spans
    extract - Single-token extraction and the Scanner helper
    stream - Lazy token streams and the slice materializer

Python 3.13+. Zero external dependencies.
"""

from .attach import (
    Attach,
    ErrorConversion,
    ErrorConvertible,
    ErrorKind,
    SizedToken,
    Token,
    attach,
)
from .config import ScanConfig
from .consumed import Consumed, utf8_width
from .cursor import Cursor
from .extract import Classifier, Scanner, extract, wrap
from .stream import TokenStream, lex, string_slices, tokens

__all__ = [
    "Attach",
    "Classifier",
    "Consumed",
    "Cursor",
    "ErrorConversion",
    "ErrorConvertible",
    "ErrorKind",
    "ScanConfig",
    "Scanner",
    "SizedToken",
    "Token",
    "TokenStream",
    "attach",
    "extract",
    "lex",
    "string_slices",
    "tokens",
    "utf8_width",
    "wrap",
]
