r"""Hexadecimal escapes: unbraced ``\xHH`` and brace-delimited ``\x{...}``.

Strict mode is stricter than for octal in one more way: an unbraced escape
must have exactly two digits, and a third hex digit right after them is an
error rather than the start of the following text. Lenient mode reads at
most two digits and never looks at the third byte.

A NUL byte is an ordinary non-hex character here, braced or not: ``\x4``
followed by NUL resolves to 0x04 with a DIGIT warning, exactly as if any
other non-digit had followed. Only the end of the buffer ends a lenient
unbraced run silently. Older C scanners that stop at NUL as if it were the
end of the string are not imitated.

The decoded value always fits, as extended UTF-8, in the bytes the escape
occupied, so a caller may rewrite a buffer in place.
"""

from qqescape.config import EscapeConfig, get_config
from qqescape.constants import (
    INTRODUCER_HEX,
    LEFT_BRACE,
    UNBRACED_HEX_DIGITS,
    UNBRACED_HEX_DIGITS_STRICT,
)
from qqescape.diagnostics import Diagnostic, ErrorTemplate, alien_digit_message
from qqescape.enums import Radix, WarningCategory
from qqescape.reporting import Reporter, resolve_reporter
from qqescape.syntax.cursor import ByteCursor, DecodeResult, Failure, Success
from qqescape.syntax.digits import scan_digits
from qqescape.syntax.escapes.braced import decode_braced_body

__all__ = ["decode_hex_escape"]


def _decode_unbraced(
    cursor: ByteCursor,
    *,
    strict: bool,
    config: EscapeConfig,
) -> tuple[DecodeResult, Diagnostic | None]:
    width = UNBRACED_HEX_DIGITS_STRICT if strict else UNBRACED_HEX_DIGITS
    span_end = min(cursor.pos + width, cursor.end)
    run = scan_digits(cursor.slice_to(span_end), Radix.HEX)
    cursor = cursor.advance(run.length)

    # A run cut short by the end of the buffer is only an error when strict
    if run.length == UNBRACED_HEX_DIGITS or not (strict or run.stopped_on_illegal):
        return DecodeResult(Success(int(run.value)), cursor), None

    if run.length == UNBRACED_HEX_DIGITS_STRICT:
        return DecodeResult(Failure(ErrorTemplate.too_many_hex_digits()), cursor), None
    if strict:
        failure = Failure(ErrorTemplate.non_digit(Radix.HEX))
        return DecodeResult(failure, cursor.skip_character()), None

    warning = None
    if config.is_category_enabled(WarningCategory.DIGIT):
        message = alien_digit_message(
            Radix.HEX,
            run.length,
            cursor.source,
            cursor.pos,
            cursor.end,
            utf8=cursor.utf8,
            braced=False,
        )
        warning = ErrorTemplate.alien_digit(message)
    return DecodeResult(Success(int(run.value)), cursor), warning


def decode_hex_escape(
    cursor: ByteCursor,
    *,
    strict: bool = False,
    reporter: Reporter | None = None,
    config: EscapeConfig | None = None,
) -> DecodeResult:
    r"""Decode ``\xHH`` or ``\x{...}`` starting at the ``x``.

    Lenient mode keeps some historical leniency: a bare ``\x`` at the end of
    the buffer and an empty ``\x{}`` both decode to 0.

    Args:
        cursor: Positioned on ``x`` (the backslash is already consumed)
        strict: Reject anything out of the ordinary instead of warning
        reporter: Receives the DIGIT warning (default: EmittingReporter)
        config: Overrides the active configuration

    Returns:
        DecodeResult whose cursor is just past the escape on success, or at
        the spot a "<-- HERE" marker belongs on failure

    Raises:
        ValueError: If the cursor is not on ``x``

    Example:
        >>> decode_hex_escape(ByteCursor.over(b"x41")).codepoint
        65
        >>> decode_hex_escape(ByteCursor.over(b"x{1_F600}")).codepoint
        128512
        >>> decode_hex_escape(ByteCursor.over(b"x414"), strict=True).message
        'Use \\x{...} for more than two hex characters'
    """
    if cursor.peek() != INTRODUCER_HEX:
        msg = f"decode_hex_escape() requires the cursor on 'x' (offset {cursor.pos})"
        raise ValueError(msg)
    if config is None:
        config = get_config()

    cursor = cursor.advance()
    if cursor.is_eof:
        if strict:
            return DecodeResult(Failure(ErrorTemplate.empty_hex(braced=False)), cursor)
        return DecodeResult(Success(0), cursor)

    if cursor.peek() == LEFT_BRACE:
        result, warning = decode_braced_body(
            cursor,
            Radix.HEX,
            strict=strict,
            config=config,
            empty=ErrorTemplate.empty_hex(braced=True) if strict else None,
        )
    else:
        result, warning = _decode_unbraced(cursor, strict=strict, config=config)

    if warning is not None:
        resolve_reporter(reporter).report(warning)
    return result
