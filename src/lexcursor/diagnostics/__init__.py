"""Diagnostic system for scanning errors.

Provides the exception hierarchy plus structured diagnostics with codes,
spans, and hints. Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ScanErrorKind, SourceSpan
from .errors import (
    ContractViolationError,
    RecoverableScanError,
    ScanError,
    SourceTooLargeError,
    UnexpectedEndOfInput,
    UnexpectedInput,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ContractViolationError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "RecoverableScanError",
    "ScanError",
    "ScanErrorKind",
    "SourceSpan",
    "SourceTooLargeError",
    "UnexpectedEndOfInput",
    "UnexpectedInput",
]
