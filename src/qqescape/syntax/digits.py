"""Digit-run scanning for octal and hex escapes.

A digit run is the longest prefix of a span made of digits of one radix.
The scanner reports how many bytes it consumed, the value, whether the value
passed a limit, and whether a non-digit byte (rather than the end of the
span) stopped it.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from qqescape.constants import MAX_LEGAL_CODEPOINT, UNDERSCORE
from qqescape.enums import Radix

__all__ = ["DigitRun", "scan_digits"]


@dataclass(frozen=True, slots=True)
class DigitRun:
    """Result of scanning one digit run.

    Attributes:
        length: Bytes consumed, underscores included
        value: Numeric value of the consumed digits, never wrapped. Exact
            while within the limit; once past it, a float approximation
            (possibly ``inf``) that is only good for diagnostics.
        overflowed: True if ``value`` exceeds the scan limit
        stopped_on_illegal: True if a byte inside the span ended the run
    """

    length: int
    value: int | float
    overflowed: bool
    stopped_on_illegal: bool


def scan_digits(
    span: bytes | bytearray | memoryview,
    radix: Radix | int,
    *,
    allow_underscores: bool = False,
    limit: int = MAX_LEGAL_CODEPOINT,
) -> DigitRun:
    """Scan the longest prefix of ``span`` made of ``radix`` digits.

    With ``allow_underscores``, an underscore is consumed only when the byte
    after it is still inside ``span`` and is a valid digit, so ``1_2`` is one
    run while ``1__2`` and a trailing ``1_`` stop at the first underscore.

    Scanning continues past ``limit`` so the whole run is consumed, but the
    exact integer is dropped at that point in favour of a float: each further
    digit costs constant time, keeping the scan linear in the span length.

    Args:
        span: Bytes to scan; nothing beyond it is read
        radix: 8 or 16
        allow_underscores: Accept single underscores between digits
        limit: Largest value that does not count as overflow

    Returns:
        DigitRun describing the consumed prefix

    Example:
        >>> scan_digits(b"1_7}", 8, allow_underscores=True)
        DigitRun(length=3, value=15, overflowed=False, stopped_on_illegal=True)
        >>> scan_digits(b"ff", 16).value
        255
    """
    radix = Radix(radix)
    alphabet = radix.alphabet
    size = len(span)
    value = 0
    approximate: float | None = None
    pos = 0

    while pos < size:
        byte = span[pos]
        if byte in alphabet:
            digit = int(chr(byte), radix)
            if approximate is not None:
                approximate = approximate * radix + digit
            else:
                value = value * radix + digit
                if value > limit:
                    approximate = float(value)
            pos += 1
        elif (
            allow_underscores
            and byte == UNDERSCORE
            and pos + 1 < size
            and span[pos + 1] in alphabet
        ):
            pos += 1
        else:
            break

    return DigitRun(
        length=pos,
        value=value if approximate is None else approximate,
        overflowed=approximate is not None,
        stopped_on_illegal=pos < size,
    )
