"""Messages for digit runs cut short by an alien character.

Builds the text reported when an octal or hex escape contains a byte that
is not a digit of its radix, for example::

    Non-hex character 'g' terminates \\x early.  Resolved as "\\x{01}"

The message tells the reader both which byte ended the escape and what the
escape was read as, spelled the way they could have written it.

Python 3.13+. Zero external dependencies.
"""

from qqescape.core.utf8 import decode_utf8_char, is_invariant, is_utf8_char
from qqescape.diagnostics.display import display_quote, is_print_ascii
from qqescape.enums import Radix

__all__ = ["alien_digit_message", "display_bad_character"]


def display_bad_character(source: bytes, bad_pos: int, end: int, *, utf8: bool) -> str:
    """Display form of the character at ``bad_pos``.

    ASCII is shown through ``display_quote``; so is a well-formed UTF-8
    character when the buffer is UTF-8. Anything else (a byte of a non-UTF-8
    buffer, or a broken sequence) is shown as the single byte ``\\x{NN}``.
    """
    byte = source[bad_pos]
    if is_invariant(byte):
        return display_quote(byte)
    if utf8 and is_utf8_char(source, bad_pos, end):
        return display_quote(decode_utf8_char(source, bad_pos, end))
    return f"\\x{{{byte:02x}}}"


def alien_digit_message(
    radix: Radix | int,
    valid_len: int,
    source: bytes,
    bad_pos: int,
    end: int,
    *,
    utf8: bool,
    braced: bool,
) -> str:
    """Build the warning for a digit run terminated early.

    Args:
        radix: 8 or 16
        valid_len: Bytes of the run consumed before the bad one, underscores
            included; they are the bytes right before ``bad_pos``
        source: Buffer holding the escape
        bad_pos: Offset of the first byte that is not a digit
        end: Exclusive bound of the scan region
        utf8: True if ``source`` is UTF-8 encoded
        braced: True for ``\\o{...}`` / ``\\x{...}`` forms

    Returns:
        The complete message text

    Example:
        >>> alien_digit_message(8, 0, b"o{9}", 2, 4, utf8=False, braced=True)
        'Non-octal character \\'9\\' terminates \\\\o early.  Resolved as "\\\\o{000}"'
    """
    radix = Radix(radix)
    display = display_bad_character(source, bad_pos, end, utf8=utf8)

    if radix is Radix.OCTAL:
        symbol = "o" if braced else "0"
    else:
        symbol = "x"

    quote = "'" if is_print_ascii(source[bad_pos]) else ""

    parts = [
        f"Non-{radix.label} character ",
        f"{quote}{display}{quote}",
        f' terminates \\{symbol} early.  Resolved as "\\{symbol}',
    ]
    if braced:
        parts.append("{")

    # Octal constants have an extra leading 0, but \0 already includes it
    if symbol == "o" and valid_len < 3:
        parts.append("0")
    if valid_len == 0:
        parts.append("00")
    elif valid_len == 1:
        parts.append("0")
    parts.append(source[bad_pos - valid_len : bad_pos].decode("ascii"))

    parts.append("}" if braced else display)
    parts.append('"')
    return "".join(parts)
