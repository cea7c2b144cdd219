"""Tests for Cursor.

Validates lookahead, consumption primitives, and cursor comparison.
"""

from __future__ import annotations

import pytest

from lexcursor import ContractViolationError, Consumed, Cursor, UnexpectedEndOfInput
from lexcursor.diagnostics import DiagnosticCode

# ============================================================================
# CONSTRUCTION
# ============================================================================


class TestCursorBasic:
    """Test basic cursor functionality."""

    def test_create_cursor(self) -> None:
        """Create cursor at position 0."""
        cursor = Cursor("hello")

        assert cursor.source == "hello"
        assert cursor.pos == 0
        assert cursor.byte_pos == 0
        assert not cursor.is_eof

    def test_create_cursor_at_middle_derives_byte_pos(self) -> None:
        """Starting mid-source computes the UTF-8 byte offset."""
        cursor = Cursor("привет", 2)

        assert cursor.pos == 2
        assert cursor.byte_pos == 4
        assert cursor.peek() == "и"

    def test_position_out_of_range(self) -> None:
        """Positions outside the source are rejected."""
        with pytest.raises(ValueError, match="outside source"):
            Cursor("hi", 3)

    def test_empty_source_is_eof(self) -> None:
        """Empty source starts exhausted."""
        assert Cursor("").is_eof

    def test_remaining(self) -> None:
        """remaining is the unconsumed text."""
        cursor = Cursor("hello", 2)

        assert cursor.remaining == "llo"

    def test_repr_shows_remaining_text(self) -> None:
        """repr quotes what is left to scan."""
        cursor = Cursor("hello", 3)

        assert repr(cursor) == "Cursor('lo' @ 3)"


# ============================================================================
# PEEK AND BUMP
# ============================================================================


class TestCursorPeekBump:
    """Test single code point lookahead and advance."""

    def test_peek_does_not_advance(self) -> None:
        """peek() has no side effects."""
        cursor = Cursor("ab")

        assert cursor.peek() == "a"
        assert cursor.peek() == "a"
        assert cursor.pos == 0

    def test_peek_at_eof_raises(self) -> None:
        """peek() at the end raises the recoverable EOF error."""
        cursor = Cursor("a", 1)

        with pytest.raises(UnexpectedEndOfInput, match="position 1"):
            cursor.peek()

    def test_bump_advances_one_code_point(self) -> None:
        """bump() moves past exactly one code point."""
        cursor = Cursor("👋a")

        cursor.bump()

        assert cursor.pos == 1
        assert cursor.byte_pos == 4
        assert cursor.peek() == "a"

    def test_bump_past_eof_is_contract_violation(self) -> None:
        """bump() at the end is a fatal contract error, not a recoverable one."""
        cursor = Cursor("a\nb", 3)

        with pytest.raises(ContractViolationError, match="Bumped past end") as exc_info:
            cursor.bump()

        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code == DiagnosticCode.BUMP_PAST_EOF
        assert diagnostic.span is not None
        assert (diagnostic.span.line, diagnostic.span.column) == (2, 2)

    def test_contract_violation_is_assertion_error(self) -> None:
        """Contract violations surface as assertion failures."""
        with pytest.raises(AssertionError):
            Cursor("").bump()


# ============================================================================
# TAKE
# ============================================================================


class TestCursorTake:
    """Test literal-match consumption."""

    def test_take_matching_literal(self) -> None:
        """take() consumes a matching prefix."""
        cursor = Cursor("abcdef")

        consumed = cursor.take("abc")

        assert consumed == Consumed(3, 3)
        assert consumed.any()
        assert cursor.pos == 3
        assert cursor.remaining == "def"

    def test_take_non_matching_literal(self) -> None:
        """take() leaves the cursor alone when nothing matches."""
        cursor = Cursor("xyz")

        consumed = cursor.take("abc")

        assert not consumed.any()
        assert consumed == Consumed.zero()
        assert cursor.pos == 0

    def test_take_partial_match_consumes_nothing(self) -> None:
        """A literal longer than the remaining input does not match."""
        cursor = Cursor("ab")

        assert not cursor.take("abc").any()
        assert cursor.pos == 0

    def test_take_multibyte_literal(self) -> None:
        """take() reports UTF-8 bytes for multi-byte literals."""
        cursor = Cursor("→x")

        assert cursor.take("→") == Consumed(1, 3)
        assert cursor.byte_pos == 3

    def test_take_empty_literal(self) -> None:
        """The empty literal consumes nothing."""
        cursor = Cursor("abc")

        assert not cursor.take("").any()

    def test_take_at_eof(self) -> None:
        """take() never fails at the end of input."""
        cursor = Cursor("ab", 2)

        assert not cursor.take("a").any()


# ============================================================================
# TAKE_WHILE
# ============================================================================


class TestCursorTakeWhile:
    """Test predicate-driven consumption."""

    def test_take_while_maximal_prefix(self) -> None:
        """take_while() consumes every leading match."""
        cursor = Cursor("123abc")

        consumed = cursor.take_while(str.isdigit)

        assert consumed == Consumed(3, 3)
        assert cursor.remaining == "abc"

    def test_take_while_zero(self) -> None:
        """take_while() may consume nothing."""
        cursor = Cursor("abc")

        consumed = cursor.take_while(str.isdigit)

        assert consumed == Consumed.zero()
        assert cursor.pos == 0

    def test_take_while_to_end(self) -> None:
        """take_while() stops at the end of input without failing."""
        cursor = Cursor("   ")

        assert cursor.take_while(str.isspace).chars == 3
        assert cursor.is_eof

    def test_take_while_unicode_bytes(self) -> None:
        """take_while() counts UTF-8 bytes of the consumed run."""
        cursor = Cursor("ééé!")

        assert cursor.take_while(str.isalpha) == Consumed(3, 6)
        assert cursor.byte_pos == 6


# ============================================================================
# CONSUME AND SNAPSHOT
# ============================================================================


class TestCursorConsume:
    """Test skipping a previously measured length."""

    def test_consume(self) -> None:
        cursor = Cursor("日本語!")

        assert cursor.consume(3) == Consumed(3, 9)
        assert cursor.peek() == "!"

    def test_consume_past_eof(self) -> None:
        cursor = Cursor("ab")

        with pytest.raises(ContractViolationError, match="only 2 remaining"):
            cursor.consume(3)

    def test_consume_negative(self) -> None:
        cursor = Cursor("ab")

        with pytest.raises(ContractViolationError):
            cursor.consume(-1)


class TestCursorComparison:
    """Test snapshot(), distance_since() and string_since()."""

    def test_snapshot_is_independent(self) -> None:
        """Advancing a cursor does not move its snapshot."""
        cursor = Cursor("hello")
        start = cursor.snapshot()

        cursor.take("he")

        assert start.pos == 0
        assert cursor.pos == 2
        assert start.source is cursor.source

    def test_string_since(self) -> None:
        cursor = Cursor("1 + 2")
        start = cursor.snapshot()
        cursor.take_while(lambda c: c != "2")

        assert cursor.string_since(start) == "1 + "

    def test_distance_since(self) -> None:
        cursor = Cursor("a€b")
        start = cursor.snapshot()
        cursor.bump()
        cursor.bump()

        assert cursor.distance_since(start) == Consumed(2, 4)

    def test_distance_since_self_is_zero(self) -> None:
        cursor = Cursor("abc", 1)

        assert cursor.distance_since(cursor.snapshot()) == Consumed.zero()

    def test_foreign_cursor(self) -> None:
        """Cursors over different buffers cannot be compared."""
        first = Cursor("".join(["ab", "c"]))
        second = Cursor("".join(["a", "bc"]))

        with pytest.raises(ContractViolationError, match="same source") as exc_info:
            first.distance_since(second)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.FOREIGN_CURSOR

    def test_shared_str_object_is_same_source(self) -> None:
        """Separately constructed cursors over one str object compare."""
        source = "".join(["ab", "c"])
        first = Cursor(source)
        second = Cursor(source, 2)

        assert second.string_since(first) == "ab"

    def test_out_of_order(self) -> None:
        """The 'previous' cursor may not be ahead."""
        cursor = Cursor("abc")
        later = cursor.snapshot()
        later.bump()

        with pytest.raises(ContractViolationError, match="ahead of current") as exc_info:
            cursor.string_since(later)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.CURSOR_OUT_OF_ORDER


# ============================================================================
# LINE:COLUMN
# ============================================================================


class TestCursorLineCol:
    """Test on-demand line:column computation."""

    @pytest.mark.parametrize(
        ("pos", "expected"),
        [(0, (1, 1)), (5, (1, 6)), (6, (2, 1)), (8, (2, 3))],
    )
    def test_compute_line_col(self, pos: int, expected: tuple[int, int]) -> None:
        assert Cursor("line1\nline2", pos).compute_line_col() == expected

    def test_source_span(self) -> None:
        span = Cursor("ab\ncd", 4).source_span(end=5)

        assert (span.start, span.end, span.line, span.column) == (4, 5, 2, 2)
