"""Property-based invariants shared by all escape decoders.

These run every decoder over arbitrary buffers and check the guarantees a
lexer relies on: the cursor always moves forward and stays in bounds,
successes never exceed the maximum, failures always explain themselves,
and strict mode never accepts what lenient mode warns about.
"""

from __future__ import annotations

import pytest
from hypothesis import event, example, given, settings
from hypothesis import strategies as st

from qqescape import (
    MAX_LEGAL_CODEPOINT,
    ByteCursor,
    CollectingReporter,
    EscapeConfig,
    decode_escape,
)
from tests.strategies import escape_buffers

# ============================================================================
# CURSOR AND OUTCOME INVARIANTS
# ============================================================================


class TestDecoderInvariants:
    """Cursor progress, bounds and outcome shape."""

    @given(escape_buffers(), st.booleans(), st.booleans())
    @example(b"o{", False, False)
    @example(b"x{}", True, False)
    @example(b"x\xff", True, True)
    def test_cursor_advances_within_bound(self, data: bytes, strict: bool, utf8: bool) -> None:
        cursor = ByteCursor.over(data, utf8=utf8)
        result = decode_escape(cursor, strict=strict, reporter=CollectingReporter())
        event(f"ok={result.ok}")
        assert cursor.pos < result.cursor.pos <= cursor.end

    @given(escape_buffers(), st.booleans())
    def test_outcome_shape(self, data: bytes, strict: bool) -> None:
        result = decode_escape(ByteCursor.over(data), strict=strict, reporter=CollectingReporter())
        if result.ok:
            assert result.codepoint is not None
            assert 0 <= result.codepoint <= MAX_LEGAL_CODEPOINT
            assert result.message is None
        else:
            event(f"failure={result.diagnostic.code.name if result.diagnostic else None}")
            assert result.codepoint is None
            assert result.message
            assert result.diagnostic is not None
            assert result.diagnostic.kind is not None

    @given(escape_buffers(), st.integers(min_value=0xFF, max_value=0x10FFFF))
    def test_configured_maximum_respected(self, data: bytes, maximum: int) -> None:
        config = EscapeConfig(max_codepoint=maximum)
        result = decode_escape(ByteCursor.over(data), config=config, reporter=CollectingReporter())
        if result.codepoint is not None:
            assert result.codepoint <= maximum

    @given(escape_buffers(), st.binary(max_size=8))
    def test_bound_is_never_crossed(self, data: bytes, trailer: bytes) -> None:
        """Property: bytes past the bound never influence the result."""
        bounded = ByteCursor.over(data + trailer, end=len(data))
        alone = ByteCursor.over(data)
        reporter = CollectingReporter()
        left = decode_escape(bounded, reporter=reporter)
        right = decode_escape(alone, reporter=reporter)
        event(f"trailer={bool(trailer)}")
        assert left.outcome == right.outcome
        assert left.cursor.pos == right.cursor.pos


# ============================================================================
# MODES
# ============================================================================


class TestStrictEscalation:
    """Whatever lenient mode warns about, strict mode rejects."""

    @given(escape_buffers().filter(lambda data: data[0] != ord("c")), st.booleans())
    def test_warning_implies_strict_failure(self, data: bytes, utf8: bool) -> None:
        lenient_reporter = CollectingReporter()
        lenient = decode_escape(ByteCursor.over(data, utf8=utf8), reporter=lenient_reporter)
        strict = decode_escape(
            ByteCursor.over(data, utf8=utf8), strict=True, reporter=CollectingReporter()
        )
        event(f"warned={len(lenient_reporter) > 0}")
        if len(lenient_reporter) > 0:
            assert lenient.ok
            assert not strict.ok

    @given(escape_buffers().filter(lambda data: data[0] != ord("c")))
    def test_strict_success_implies_lenient_success(self, data: bytes) -> None:
        strict = decode_escape(ByteCursor.over(data), strict=True, reporter=CollectingReporter())
        lenient = decode_escape(ByteCursor.over(data), reporter=CollectingReporter())
        if strict.ok:
            event("strict=ok")
            assert lenient.codepoint == strict.codepoint
            assert lenient.cursor.pos == strict.cursor.pos


class TestDeterminism:
    """Decoding is a pure function of its inputs."""

    @given(escape_buffers(), st.booleans())
    def test_repeatable(self, data: bytes, strict: bool) -> None:
        first_reporter = CollectingReporter()
        second_reporter = CollectingReporter()
        first = decode_escape(ByteCursor.over(data), strict=strict, reporter=first_reporter)
        second = decode_escape(ByteCursor.over(data), strict=strict, reporter=second_reporter)
        assert first == second
        assert first_reporter.outcomes == second_reporter.outcomes


# ============================================================================
# FUZZ
# ============================================================================


@pytest.mark.fuzz
class TestFuzzDecoders:
    """Long-running sweep over raw bytes (run with: pytest -m fuzz)."""

    @settings(max_examples=5000, deadline=None)
    @given(st.sampled_from(b"cox"), st.binary(max_size=64), st.booleans(), st.booleans())
    def test_raw_bytes(self, introducer: int, tail: bytes, strict: bool, utf8: bool) -> None:
        data = bytes([introducer]) + tail
        cursor = ByteCursor.over(data, utf8=utf8)
        result = decode_escape(cursor, strict=strict, reporter=CollectingReporter())
        event(f"ok={result.ok}")
        assert cursor.pos < result.cursor.pos <= cursor.end
        if result.codepoint is not None:
            assert result.codepoint <= MAX_LEGAL_CODEPOINT
