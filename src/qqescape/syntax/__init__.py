"""Cursor, digit scanning and escape decoders.

Python 3.13+. Zero external dependencies.
"""

from .cursor import ByteCursor, DecodeOutcome, DecodeResult, Failure, Success
from .digits import DigitRun, scan_digits
from .escapes import (
    decode_control_escape,
    decode_escape,
    decode_hex_escape,
    decode_octal_escape,
    to_control,
)

__all__ = [
    "ByteCursor",
    "DecodeOutcome",
    "DecodeResult",
    "DigitRun",
    "Failure",
    "Success",
    "decode_control_escape",
    "decode_escape",
    "decode_hex_escape",
    "decode_octal_escape",
    "scan_digits",
    "to_control",
]
