"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    # ------------------------------------------------------------------
    # Recoverable scan errors
    # ------------------------------------------------------------------

    @staticmethod
    def unexpected_input() -> Diagnostic:
        """Classifier rejected the consumed span."""
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_INPUT,
            message="Unexpected input",
        )

    @staticmethod
    def bound_not_met(bound: str, expected: int, actual: int) -> Diagnostic:
        """A consumption record failed an at_least/at_most check.

        Args:
            bound: "at least" or "at most"
            expected: The bound that was requested
            actual: Number of characters actually consumed

        Returns:
            Diagnostic for UNEXPECTED_INPUT
        """
        msg = f"Unexpected input: expected {bound} {expected} character(s), consumed {actual}"
        return Diagnostic(code=DiagnosticCode.UNEXPECTED_INPUT, message=msg)

    @staticmethod
    def unexpected_eof(position: int | None = None) -> Diagnostic:
        """Classifier needed more input than remained.

        Args:
            position: Character offset where input ran out (optional)

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = "Unexpected end of input"
        if position is not None:
            msg = f"Unexpected end of input at position {position}"
        return Diagnostic(code=DiagnosticCode.UNEXPECTED_EOF, message=msg)

    # ------------------------------------------------------------------
    # Contract violations
    # ------------------------------------------------------------------

    @staticmethod
    def bump_past_eof(span: SourceSpan | None) -> Diagnostic:
        """bump() was called with no input remaining."""
        return Diagnostic(
            code=DiagnosticCode.BUMP_PAST_EOF,
            message="Bumped past end of input",
            span=span,
            hint="Call peek() before bump(); peek() raises UnexpectedEndOfInput at the end",
        )

    @staticmethod
    def foreign_cursor() -> Diagnostic:
        """Two cursors over different buffers were compared."""
        return Diagnostic(
            code=DiagnosticCode.FOREIGN_CURSOR,
            message="Cursors do not originate from the same source",
            hint="Only compare a cursor with an earlier snapshot of itself",
        )

    @staticmethod
    def cursor_out_of_order(previous: int, current: int) -> Diagnostic:
        """The 'previous' cursor was ahead of the current one.

        Args:
            previous: Position of the cursor passed as the earlier one
            current: Position of the cursor it was compared against
        """
        msg = f"Previous cursor (position {previous}) is ahead of current cursor (position {current})"
        return Diagnostic(
            code=DiagnosticCode.CURSOR_OUT_OF_ORDER,
            message=msg,
            hint="Cursor positions never decrease; pass the older snapshot as 'previous'",
        )

    @staticmethod
    def no_progress(span: SourceSpan | None, preview: str) -> Diagnostic:
        """Classifier returned without consuming anything.

        Args:
            span: Location where the classifier was invoked
            preview: Beginning of the remaining input
        """
        msg = f"Classifier consumed nothing before {preview!r}; this would loop forever"
        return Diagnostic(
            code=DiagnosticCode.NO_PROGRESS,
            message=msg,
            span=span,
            hint="Every classifier branch must advance the cursor, e.g. bump() in the fallback branch",
        )

    @staticmethod
    def slice_out_of_bounds(offset: int, length: int, source_length: int) -> Diagnostic:
        """A token length ran past the end of the source being sliced."""
        msg = (
            f"Token of length {length} at offset {offset} runs past end of source "
            f"(length {source_length})"
        )
        return Diagnostic(
            code=DiagnosticCode.SLICE_OUT_OF_BOUNDS,
            message=msg,
            hint="Slice the same source the tokens were scanned from",
        )

    @staticmethod
    def consume_past_eof(span: SourceSpan | None, length: int, remaining: int) -> Diagnostic:
        """consume() was asked to skip more than remains."""
        msg = f"Cannot consume {length} character(s), only {remaining} remaining"
        return Diagnostic(
            code=DiagnosticCode.CONSUME_PAST_EOF,
            message=msg,
            span=span,
        )

    # ------------------------------------------------------------------
    # Input limits
    # ------------------------------------------------------------------

    @staticmethod
    def source_too_large(size: int, limit: int) -> Diagnostic:
        """Source exceeds the configured maximum size."""
        msg = f"Source size ({size:,} characters) exceeds maximum ({limit:,} characters)"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            hint="Configure max_source_size in ScanConfig to increase the limit",
        )
