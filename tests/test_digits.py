"""Tests for the digit-run scanner (scan_digits)."""

from __future__ import annotations

import math
import time

import pytest
from hypothesis import event, example, given

from qqescape import MAX_LEGAL_CODEPOINT, scan_digits
from qqescape.enums import Radix
from tests.strategies import alien_bytes, digit_runs


def _assert_run_value(value: int | float, overflowed: bool, expected: int) -> None:
    assert overflowed == (expected > MAX_LEGAL_CODEPOINT)
    if overflowed:
        assert math.isclose(value, expected, rel_tol=1e-12)
    else:
        assert value == expected


# ============================================================================
# BASIC SCANNING
# ============================================================================


class TestScanDigits:
    """Longest-prefix scanning for both radixes."""

    def test_octal(self) -> None:
        run = scan_digits(b"777", Radix.OCTAL)
        assert (run.length, run.value, run.overflowed, run.stopped_on_illegal) == (
            3,
            511,
            False,
            False,
        )

    def test_hex_mixed_case(self) -> None:
        assert scan_digits(b"fF", 16).value == 255

    def test_stops_on_illegal(self) -> None:
        run = scan_digits(b"129", Radix.OCTAL)
        assert run.length == 2
        assert run.value == 0o12
        assert run.stopped_on_illegal

    def test_empty_span(self) -> None:
        run = scan_digits(b"", Radix.HEX)
        assert (run.length, run.value, run.stopped_on_illegal) == (0, 0, False)

    def test_illegal_first_byte(self) -> None:
        run = scan_digits(b"g1", Radix.HEX)
        assert (run.length, run.value, run.stopped_on_illegal) == (0, 0, True)

    def test_accepts_plain_int_radix(self) -> None:
        assert scan_digits(b"10", 8).value == 8

    def test_rejects_other_radix(self) -> None:
        with pytest.raises(ValueError, match="10"):
            scan_digits(b"10", 10)


class TestUnderscores:
    """Underscores are consumed only between digits."""

    def test_disallowed_by_default(self) -> None:
        run = scan_digits(b"1_2", Radix.OCTAL)
        assert run.length == 1
        assert run.stopped_on_illegal

    def test_single_underscore(self) -> None:
        run = scan_digits(b"1_2", Radix.OCTAL, allow_underscores=True)
        assert (run.length, run.value, run.stopped_on_illegal) == (3, 0o12, False)

    def test_double_underscore_stops(self) -> None:
        run = scan_digits(b"1__2", Radix.OCTAL, allow_underscores=True)
        assert run.length == 1
        assert run.stopped_on_illegal

    def test_trailing_underscore_stops(self) -> None:
        run = scan_digits(b"1_", Radix.HEX, allow_underscores=True)
        assert run.length == 1
        assert run.stopped_on_illegal

    def test_leading_underscore_consumed(self) -> None:
        run = scan_digits(b"_1", Radix.HEX, allow_underscores=True)
        assert (run.length, run.value) == (2, 1)

    def test_underscore_before_illegal_digit_stops(self) -> None:
        run = scan_digits(b"7_8", Radix.OCTAL, allow_underscores=True)
        assert run.length == 1


class TestOverflow:
    """Values above the limit are flagged, never wrapped."""

    def test_at_limit(self) -> None:
        run = scan_digits(b"7fffffffffffffff", Radix.HEX)
        assert run.value == MAX_LEGAL_CODEPOINT
        assert not run.overflowed

    def test_above_limit(self) -> None:
        run = scan_digits(b"8000000000000000", Radix.HEX)
        assert run.value == 2**63
        assert run.overflowed

    def test_keeps_scanning_after_overflow(self) -> None:
        run = scan_digits(b"1000g", Radix.HEX, limit=0xFF)
        assert run.length == 4
        assert run.value == 0x1000
        assert run.overflowed
        assert run.stopped_on_illegal

    def test_custom_limit(self) -> None:
        assert not scan_digits(b"10ffff", Radix.HEX, limit=0x10FFFF).overflowed
        assert scan_digits(b"110000", Radix.HEX, limit=0x10FFFF).overflowed

    def test_value_becomes_float_past_limit(self) -> None:
        run = scan_digits(b"1" + b"0" * 20, Radix.HEX)
        assert isinstance(run.value, float)
        assert run.value == 16.0**20

    def test_value_saturates_to_inf(self) -> None:
        run = scan_digits(b"f" * 300, Radix.HEX)
        assert run.length == 300
        assert math.isinf(run.value)

    @pytest.mark.parametrize("radix", [Radix.OCTAL, Radix.HEX])
    def test_long_run_scans_in_linear_time(self, radix: Radix) -> None:
        digits = b"7" * 1_000_000
        start = time.perf_counter()
        run = scan_digits(digits, radix, allow_underscores=True)
        elapsed = time.perf_counter() - start
        assert run.length == len(digits)
        assert run.overflowed
        assert elapsed < 5.0


# ============================================================================
# PROPERTIES
# ============================================================================


class TestScanProperties:
    """scan_digits agrees with int() on well-formed runs."""

    @given(digit_runs(Radix.OCTAL))
    @example(b"0")
    def test_octal_matches_int(self, text: bytes) -> None:
        run = scan_digits(text, Radix.OCTAL, allow_underscores=True)
        assert run.length == len(text)
        assert not run.stopped_on_illegal
        _assert_run_value(run.value, run.overflowed, int(text.decode().replace("_", ""), 8))

    @given(digit_runs(Radix.HEX))
    def test_hex_matches_int(self, text: bytes) -> None:
        run = scan_digits(text, Radix.HEX, allow_underscores=True)
        assert run.length == len(text)
        event(f"overflowed={run.overflowed}")
        _assert_run_value(run.value, run.overflowed, int(text.decode().replace("_", ""), 16))

    @given(digit_runs(Radix.HEX), alien_bytes(Radix.HEX))
    def test_alien_byte_stops_run(self, text: bytes, alien: int) -> None:
        run = scan_digits(text + bytes([alien]) + b"1", Radix.HEX, allow_underscores=True)
        assert run.length == len(text)
        assert run.stopped_on_illegal
