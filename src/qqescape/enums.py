"""Enumerations for qqescape type-safe constants.

Uses Flag for warning categories (they combine into a bitmask) and IntEnum
for the two radixes so that a Radix is usable wherever an int base is.

Python 3.13+.
"""

from enum import Flag, IntEnum, StrEnum

__all__ = [
    "ErrorKind",
    "Radix",
    "WarningCategory",
]


class WarningCategory(Flag):
    """Warning classes that can be enabled or disabled independently.

    Flag members combine with ``|`` into a packed mask, the same way a
    caller may collect several categories from one decode.
    """

    NONE = 0

    SYNTAX = 1
    """Legal but discouraged spelling, e.g. \\c` instead of a literal space."""

    DIGIT = 2
    """A digit run cut short by a byte outside the radix alphabet."""

    ALL = SYNTAX | DIGIT


class Radix(IntEnum):
    """Numeric base of a digit-run escape."""

    OCTAL = 8
    HEX = 16

    @property
    def label(self) -> str:
        """Word used in diagnostics ("octal" or "hex")."""
        return "octal" if self is Radix.OCTAL else "hex"

    @property
    def alphabet(self) -> bytes:
        """Valid digit bytes for this radix."""
        if self is Radix.OCTAL:
            return b"01234567"
        return b"0123456789abcdefABCDEF"


class ErrorKind(StrEnum):
    """Failure taxonomy for escape decoding.

    StrEnum provides automatic string conversion:
    str(ErrorKind.EMPTY_BODY) == "empty-body"
    """

    MALFORMED_DELIMITER = "malformed-delimiter"
    """Missing opening or closing brace."""

    EMPTY_BODY = "empty-body"
    """Brace-delimited escape (or trailing \\x) with no digits."""

    INVALID_DIGIT = "invalid-digit"
    """A byte in the digit span is outside the radix alphabet."""

    CODEPOINT_OVERFLOW = "codepoint-overflow"
    """Decoded value exceeds the maximum legal codepoint."""

    INVALID_CONTROL_TARGET = "invalid-control-target"
    """\\c target is missing, not printable ASCII, or is '{'."""
