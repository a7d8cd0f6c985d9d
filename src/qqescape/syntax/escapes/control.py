r"""Control-character escapes: \c followed by one printable ASCII byte.

``\cX`` maps X to its caret-notation control: the byte is upper-cased and
bit 6 is toggled, so ``\cA`` is 0x01, ``\c[`` is ESC and ``\c?`` is DEL.
"""

from qqescape.config import EscapeConfig, get_config
from qqescape.constants import CONTROL_TOGGLE, LEFT_BRACE
from qqescape.diagnostics import ErrorTemplate, is_print_ascii, is_word_char
from qqescape.enums import WarningCategory
from qqescape.reporting import Reporter, resolve_reporter
from qqescape.syntax.cursor import DecodeOutcome, Failure, Success

__all__ = ["decode_control_escape", "to_control"]


def to_control(byte: int) -> int:
    """Caret-notation control for ``byte``.

    Example:
        >>> to_control(ord("a")), to_control(ord("?")), to_control(ord("{"))
        (1, 127, 59)
    """
    if ord("a") <= byte <= ord("z"):
        byte -= 0x20
    return byte ^ CONTROL_TOGGLE


def _as_byte(next_byte: int | str | bytes) -> int:
    match next_byte:
        case int():
            value = next_byte
        case str() | bytes() if len(next_byte) == 1:
            value = ord(next_byte)
        case _:
            msg = f"Expected one byte or character after \\c, got {next_byte!r}"
            raise ValueError(msg)
    if value < 0:
        msg = f"Byte value must be non-negative, got {value}"
        raise ValueError(msg)
    return value


def decode_control_escape(
    next_byte: int | str | bytes,
    *,
    reporter: Reporter | None = None,
    config: EscapeConfig | None = None,
) -> DecodeOutcome:
    r"""Decode ``\c`` given the byte that follows it.

    Args:
        next_byte: The byte after ``\c`` (int, or a length-1 str or bytes)
        reporter: Receives the SYNTAX warning (default: EmittingReporter)
        config: Overrides the active configuration

    Returns:
        Success with the control codepoint, or Failure

    Raises:
        ValueError: If ``next_byte`` is not a single byte or character

    Example:
        >>> decode_control_escape("?")
        Success(codepoint=127)
        >>> decode_control_escape("{").message
        'Use ";" instead of "\\c{"'
    """
    source = _as_byte(next_byte)

    if not is_print_ascii(source):
        return Failure(ErrorTemplate.control_not_printable())

    if source == LEFT_BRACE:
        return Failure(ErrorTemplate.control_brace(to_control(LEFT_BRACE)))

    result = to_control(source)
    if is_print_ascii(result):
        if config is None:
            config = get_config()
        if config.is_category_enabled(WarningCategory.SYNTAX):
            clearer = chr(result) if is_word_char(result) else "\\" + chr(result)
            resolve_reporter(reporter).report(
                ErrorTemplate.control_more_clearly(source, clearer)
            )

    return Success(result)
