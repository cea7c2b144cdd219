"""Scanning exception hierarchy with structured diagnostics.

All exceptions may carry a Diagnostic object for rich error information.

Two families live here:

- RecoverableScanError: raised by classifiers. The orchestration layer
  converts these into ordinary error tokens and keeps scanning.
- ContractViolationError: raised by the core when a classifier or caller
  breaks a precondition. Never converted, never caught by the core.

Python 3.13+. Zero external dependencies.
"""

from typing import ClassVar

from .codes import Diagnostic, ScanErrorKind
from .templates import ErrorTemplate

__all__ = [
    "ContractViolationError",
    "RecoverableScanError",
    "ScanError",
    "SourceTooLargeError",
    "UnexpectedEndOfInput",
    "UnexpectedInput",
]


class ScanError(Exception):
    """Base exception for all lexcursor errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ScanError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class RecoverableScanError(ScanError):
    """A lexical error that becomes an error token.

    Classifiers raise subclasses of this to reject the span they have
    consumed so far. The span is preserved in the output stream, converted
    to the caller's error kind, and scanning resumes right after it.

    Attributes:
        kind: Which of the two recoverable conditions occurred
    """

    kind: ClassVar[ScanErrorKind]

    def __init__(self, message: str | Diagnostic | None = None) -> None:
        super().__init__(message if message is not None else self._default_diagnostic())

    @classmethod
    def _default_diagnostic(cls) -> Diagnostic:
        raise NotImplementedError


class UnexpectedInput(RecoverableScanError):
    """The classifier encountered content it could not recognize."""

    kind = ScanErrorKind.UNEXPECTED_INPUT

    @classmethod
    def _default_diagnostic(cls) -> Diagnostic:
        return ErrorTemplate.unexpected_input()


class UnexpectedEndOfInput(RecoverableScanError):
    """The classifier needed more input than remained."""

    kind = ScanErrorKind.UNEXPECTED_EOF

    @classmethod
    def _default_diagnostic(cls) -> Diagnostic:
        return ErrorTemplate.unexpected_eof()


class ContractViolationError(ScanError, AssertionError):
    """A precondition of the scanning core was violated.

    Indicates a bug in the classifier (bumping past the end, consuming
    nothing on non-empty input) or in the caller (comparing cursors from
    different buffers or out of order, slicing past the end). Inherits
    from AssertionError so test runners report it as a failed assertion.
    Checked explicitly, so ``python -O`` does not disable it.
    """


class SourceTooLargeError(ScanError, ValueError):
    """Source exceeds the configured maximum size.

    Raised before any scanning takes place.
    """
