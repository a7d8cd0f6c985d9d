r"""Brace-delimited octal escapes: ``\o{...}``."""

from qqescape.config import EscapeConfig, get_config
from qqescape.constants import INTRODUCER_OCTAL, LEFT_BRACE
from qqescape.diagnostics import ErrorTemplate
from qqescape.enums import Radix
from qqescape.reporting import Reporter, resolve_reporter
from qqescape.syntax.cursor import ByteCursor, DecodeResult, Failure
from qqescape.syntax.escapes.braced import decode_braced_body

__all__ = ["decode_octal_escape"]


def decode_octal_escape(
    cursor: ByteCursor,
    *,
    strict: bool = False,
    reporter: Reporter | None = None,
    config: EscapeConfig | None = None,
) -> DecodeResult:
    r"""Decode ``\o{...}`` starting at the ``o``.

    Digits may be separated by single underscores. In lenient mode a
    non-octal byte ends the value with a DIGIT warning and the rest of the
    braces is ignored; in strict mode it is a failure that points just past
    the offending character.

    Args:
        cursor: Positioned on ``o`` (the backslash is already consumed)
        strict: Fail instead of warning on non-octal bytes
        reporter: Receives the DIGIT warning (default: EmittingReporter)
        config: Overrides the active configuration

    Returns:
        DecodeResult whose cursor is past the ``}`` on success, or at the
        spot a "<-- HERE" marker belongs on failure

    Raises:
        ValueError: If the cursor is not on ``o``

    Example:
        >>> result = decode_octal_escape(ByteCursor.over(b"o{777}rest"))
        >>> result.codepoint, result.cursor.pos
        (511, 6)
        >>> decode_octal_escape(ByteCursor.over(b"o{}")).message
        'Empty \\o{}'
    """
    if cursor.peek() != INTRODUCER_OCTAL:
        msg = f"decode_octal_escape() requires the cursor on 'o' (offset {cursor.pos})"
        raise ValueError(msg)
    if config is None:
        config = get_config()

    cursor = cursor.advance()
    if cursor.peek() != LEFT_BRACE:
        return DecodeResult(Failure(ErrorTemplate.missing_braces_octal()), cursor)

    result, warning = decode_braced_body(
        cursor,
        Radix.OCTAL,
        strict=strict,
        config=config,
        empty=ErrorTemplate.empty_octal(),
    )
    if warning is not None:
        resolve_reporter(reporter).report(warning)
    return result
