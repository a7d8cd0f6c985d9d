"""Shared body of the brace-delimited escapes ``\\o{...}`` and ``\\x{...}``.

Both forms differ only in their radix and their messages, so the scan from
the opening brace to just past the closing one lives here.
"""

from qqescape.config import EscapeConfig
from qqescape.constants import RIGHT_BRACE
from qqescape.diagnostics import Diagnostic, ErrorTemplate, alien_digit_message
from qqescape.enums import Radix, WarningCategory
from qqescape.syntax.cursor import ByteCursor, DecodeResult, Failure, Success
from qqescape.syntax.digits import scan_digits

__all__ = ["decode_braced_body"]


def decode_braced_body(
    cursor: ByteCursor,
    radix: Radix,
    *,
    strict: bool,
    config: EscapeConfig,
    empty: Diagnostic | None,
) -> tuple[DecodeResult, Diagnostic | None]:
    """Decode from the opening brace to just past the closing brace.

    Args:
        cursor: Positioned on ``{``
        radix: Digit radix of the escape
        strict: Fail on alien digits instead of warning
        config: Active configuration (limit and enabled categories)
        empty: Failure for ``{}``; None decodes ``{}`` to 0

    Returns:
        Tuple of (result, warning). The warning is not reported here so the
        public decoder can report it with the right stack level.
    """
    close = cursor.find(RIGHT_BRACE)
    if close is None:
        cursor = cursor.advance().skip_while(radix.alphabet)
        return DecodeResult(Failure(ErrorTemplate.missing_right_brace(radix)), cursor), None

    cursor = cursor.advance()
    if cursor.pos == close:
        after = cursor.advance()
        if empty is not None:
            return DecodeResult(Failure(empty), after), None
        return DecodeResult(Success(0), after), None

    limit = config.max_codepoint
    run = scan_digits(cursor.slice_to(close), radix, allow_underscores=True, limit=limit)
    if run.overflowed:
        diagnostic = ErrorTemplate.codepoint_overflow(run.value, limit, radix)
        return DecodeResult(Failure(diagnostic), cursor.seek(close)), None

    warning = None
    if run.stopped_on_illegal:
        # Everything from the alien byte to the brace is ignored
        cursor = cursor.advance(run.length)
        if strict:
            failure = Failure(ErrorTemplate.non_digit(radix))
            return DecodeResult(failure, cursor.skip_character()), None
        if config.is_category_enabled(WarningCategory.DIGIT):
            message = alien_digit_message(
                radix,
                run.length,
                cursor.source,
                cursor.pos,
                cursor.end,
                utf8=cursor.utf8,
                braced=True,
            )
            warning = ErrorTemplate.alien_digit(message)

    return DecodeResult(Success(int(run.value)), cursor.seek(close + 1)), warning
