"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ScanErrorKind",
    "SourceSpan",
]


class ScanErrorKind(StrEnum):
    """The two recoverable conditions a classifier can signal.

    Inherits from ``StrEnum`` so log aggregation and JSON output receive
    plain strings (``"unexpected-input"``) rather than an enum repr.

    Kinds:
        UNEXPECTED_INPUT: Content the classifier could not recognize
        UNEXPECTED_EOF: Classifier needed more input than remained
    """

    UNEXPECTED_INPUT = "unexpected-input"
    UNEXPECTED_EOF = "unexpected-eof"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Recoverable scan errors (become error tokens)
        2000-2999: Contract violations (bugs in the classifier or caller)
        3000-3999: Input limits and configuration
    """

    # Recoverable scan errors (1000-1999)
    UNEXPECTED_INPUT = 1001
    UNEXPECTED_EOF = 1002

    # Contract violations (2000-2999)
    BUMP_PAST_EOF = 2001
    FOREIGN_CURSOR = 2002
    CURSOR_OUT_OF_ORDER = 2003
    NO_PROGRESS = 2004
    SLICE_OUT_OF_BOUNDS = 2005
    CONSUME_PAST_EOF = 2006

    # Input limits and configuration (3000-3999)
    SOURCE_TOO_LARGE = 3001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Offsets are code-point indices into the Python ``str`` being
        scanned, not UTF-8 byte offsets.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or
                line/column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when no position applies)
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like the Rust compiler.

        Example output:
            error[NO_PROGRESS]: Classifier consumed nothing at offset 3
              --> line 1, column 4
              = help: Every classifier branch must advance the cursor

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
