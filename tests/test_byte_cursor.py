"""Tests for the immutable ByteCursor and DecodeResult.

Covers construction invariants, bounded movement, UTF-8 aware skipping,
line/column computation, and DecodeResult accessors including unwrap().
"""

from __future__ import annotations

import pytest
from hypothesis import event, example, given
from hypothesis import strategies as st

from qqescape import (
    ByteCursor,
    DecodeResult,
    EmptyBodyError,
    Failure,
    InvalidControlTargetError,
    Success,
)
from qqescape.diagnostics import ErrorTemplate

# ============================================================================
# CONSTRUCTION
# ============================================================================


class TestConstruction:
    """ByteCursor validates its position and bound."""

    def test_over_defaults_to_whole_buffer(self) -> None:
        cursor = ByteCursor.over(b"x41")
        assert (cursor.pos, cursor.end, cursor.utf8) == (0, 3, False)

    def test_over_with_explicit_end(self) -> None:
        cursor = ByteCursor.over(b"x41}", 1, end=3, utf8=True)
        assert (cursor.pos, cursor.end, cursor.utf8) == (1, 3, True)

    @pytest.mark.parametrize(
        ("pos", "end"),
        [(-1, 3), (4, 3), (0, 5), (2, 1)],
    )
    def test_rejects_out_of_range(self, pos: int, end: int) -> None:
        with pytest.raises(ValueError, match="pos <= end"):
            ByteCursor(b"abc", pos, end)

    def test_frozen(self) -> None:
        cursor = ByteCursor.over(b"abc")
        with pytest.raises(AttributeError):
            cursor.pos = 2  # type: ignore[misc]


# ============================================================================
# MOVEMENT
# ============================================================================


class TestMovement:
    """advance/seek/skip never move past the bound."""

    def test_advance_returns_new_cursor(self) -> None:
        cursor = ByteCursor.over(b"abc")
        moved = cursor.advance()
        assert moved.pos == 1
        assert cursor.pos == 0

    def test_advance_clamps_to_end(self) -> None:
        cursor = ByteCursor.over(b"abcdef", end=3)
        assert cursor.advance(10).pos == 3

    def test_current_and_peek(self) -> None:
        cursor = ByteCursor.over(b"ab")
        assert cursor.current == ord("a")
        assert cursor.peek(1) == ord("b")
        assert cursor.peek(2) is None

    def test_peek_respects_bound_not_buffer(self) -> None:
        cursor = ByteCursor.over(b"abc", end=1)
        assert cursor.peek(1) is None

    def test_current_at_end_raises_eof(self) -> None:
        cursor = ByteCursor.over(b"ab", 2)
        assert cursor.is_eof
        with pytest.raises(EOFError, match="offset 2"):
            _ = cursor.current

    def test_remaining(self) -> None:
        assert ByteCursor.over(b"abcdef", 2, end=5).remaining == 3

    def test_skip_while(self) -> None:
        cursor = ByteCursor.over(b"0178z")
        assert cursor.skip_while(b"01234567").pos == 3

    def test_find_within_bound(self) -> None:
        cursor = ByteCursor.over(b"{12}", end=3)
        assert cursor.find(ord("}")) is None
        assert ByteCursor.over(b"{12}").find(ord("}")) == 3

    def test_slice_to(self) -> None:
        assert ByteCursor.over(b"o{17}", 2).slice_to(4) == b"17"


class TestSkipCharacter:
    """skip_character steps over a whole UTF-8 sequence in UTF-8 mode."""

    def test_byte_mode_skips_one_byte(self) -> None:
        assert ByteCursor.over("é".encode()).skip_character().pos == 1

    def test_utf8_mode_skips_sequence(self) -> None:
        cursor = ByteCursor.over("☺}".encode(), utf8=True)
        assert cursor.skip_character().pos == 3

    def test_truncated_sequence_clamped(self) -> None:
        cursor = ByteCursor.over(b"\xe2\x98", utf8=True)
        assert cursor.skip_character().pos == 2

    def test_at_end_does_not_move(self) -> None:
        cursor = ByteCursor.over(b"a", 1, utf8=True)
        assert cursor.skip_character().pos == 1

    @given(st.binary(max_size=16), st.booleans())
    @example(b"\xff", True)
    def test_skip_stays_within_bound(self, data: bytes, utf8: bool) -> None:
        """Property: skipping from any offset lands inside [pos, end]."""
        event(f"utf8={utf8}")
        for pos in range(len(data) + 1):
            cursor = ByteCursor.over(data, pos, utf8=utf8)
            skipped = cursor.skip_character()
            assert cursor.pos <= skipped.pos <= cursor.end
            if not cursor.is_eof:
                assert skipped.pos > cursor.pos


# ============================================================================
# LINE / COLUMN
# ============================================================================


class TestLineColumn:
    """compute_line_col is 1-indexed."""

    def test_first_line(self) -> None:
        assert ByteCursor.over(b"abc", 2).compute_line_col() == (1, 3)

    def test_after_newline(self) -> None:
        assert ByteCursor.over(b"ab\ncd", 4).compute_line_col() == (2, 2)

    def test_on_newline_start(self) -> None:
        assert ByteCursor.over(b"ab\ncd", 3).compute_line_col() == (2, 1)


# ============================================================================
# DECODE RESULT
# ============================================================================


class TestDecodeResult:
    """DecodeResult accessors and unwrap()."""

    def test_success_accessors(self) -> None:
        result = DecodeResult(Success(65), ByteCursor.over(b"x41", 3))
        assert result.ok
        assert result.codepoint == 65
        assert result.diagnostic is None
        assert result.message is None
        assert result.unwrap() == 65

    def test_failure_accessors(self) -> None:
        diagnostic = ErrorTemplate.empty_octal()
        result = DecodeResult(Failure(diagnostic), ByteCursor.over(b"o{}", 3))
        assert not result.ok
        assert result.codepoint is None
        assert result.diagnostic is diagnostic
        assert result.message == "Empty \\o{}"
        assert result.outcome.message == "Empty \\o{}"  # type: ignore[union-attr]

    def test_unwrap_raises_matching_error(self) -> None:
        source = b"o{}rest"
        result = DecodeResult(Failure(ErrorTemplate.empty_octal()), ByteCursor.over(source, 3))
        with pytest.raises(EmptyBodyError) as exc_info:
            result.unwrap()
        assert exc_info.value.position == 3
        assert exc_info.value.source == source
        assert exc_info.value.message == "Empty \\o{}"

    def test_unwrap_control_failure(self) -> None:
        failure = Failure(ErrorTemplate.control_missing())
        result = DecodeResult(failure, ByteCursor.over(b"c", 1))
        with pytest.raises(InvalidControlTargetError, match="Missing control char name"):
            result.unwrap()
