r"""Escape decoders for double-quoted literals.

Each decoder starts at the introducer byte (the backslash is already
consumed) and returns a DecodeResult carrying the outcome and the cursor
to resume from:

    - decode_control_escape: ``\cX`` (takes the byte after ``\c``)
    - decode_octal_escape: ``\o{...}``
    - decode_hex_escape: ``\xHH`` and ``\x{...}``
    - decode_escape: picks one of the above from the introducer
"""

from qqescape.config import EscapeConfig
from qqescape.constants import INTRODUCER_CONTROL, INTRODUCER_HEX, INTRODUCER_OCTAL
from qqescape.diagnostics import ErrorTemplate
from qqescape.reporting import Reporter
from qqescape.syntax.cursor import ByteCursor, DecodeResult, Failure, Success

from .control import decode_control_escape, to_control
from .hexadecimal import decode_hex_escape
from .octal import decode_octal_escape

__all__ = [
    "decode_control_escape",
    "decode_escape",
    "decode_hex_escape",
    "decode_octal_escape",
    "to_control",
]


def decode_escape(
    cursor: ByteCursor,
    *,
    strict: bool = False,
    reporter: Reporter | None = None,
    config: EscapeConfig | None = None,
) -> DecodeResult:
    r"""Decode the escape whose introducer (``c``, ``o`` or ``x``) is at the cursor.

    For ``\c`` the cursor moves past the target byte on success and stays
    on it on failure. ``\c`` at the end of the buffer fails with
    "Missing control char name in \c". ``strict`` only affects ``\o`` and
    ``\x``.

    Raises:
        ValueError: If the cursor is not on ``c``, ``o`` or ``x``

    Example:
        >>> decode_escape(ByteCursor.over(b"c@")).codepoint
        0
        >>> decode_escape(ByteCursor.over(b"o{101}")).codepoint
        65
    """
    introducer = cursor.peek()
    if introducer == INTRODUCER_OCTAL:
        return decode_octal_escape(cursor, strict=strict, reporter=reporter, config=config)
    if introducer == INTRODUCER_HEX:
        return decode_hex_escape(cursor, strict=strict, reporter=reporter, config=config)
    if introducer != INTRODUCER_CONTROL:
        msg = f"No escape decoder for introducer {introducer!r} at offset {cursor.pos}"
        raise ValueError(msg)

    target = cursor.advance()
    if target.is_eof:
        return DecodeResult(Failure(ErrorTemplate.control_missing()), target)
    outcome = decode_control_escape(target.current, reporter=reporter, config=config)
    if isinstance(outcome, Success):
        return DecodeResult(outcome, target.advance())
    return DecodeResult(outcome, target)
