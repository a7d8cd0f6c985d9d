"""Human-readable rendering of characters inside diagnostics.

Python 3.13+. Zero external dependencies.
"""

from qqescape.constants import ASCII_PRINTABLE_FIRST, ASCII_PRINTABLE_LAST

__all__ = ["display_quote", "is_print_ascii", "is_word_char"]

# Controls shown by their mnemonic escape. Backspace is deliberately absent:
# "\b" reads as a word boundary to most users.
_MNEMONICS: dict[int, str] = {
    0x07: "\\a",
    0x09: "\\t",
    0x0A: "\\n",
    0x0C: "\\f",
    0x0D: "\\r",
    0x1B: "\\e",
}


def is_print_ascii(byte: int) -> bool:
    """Return True for printable ASCII (space through tilde)."""
    return ASCII_PRINTABLE_FIRST <= byte <= ASCII_PRINTABLE_LAST


def is_word_char(byte: int) -> bool:
    """Return True for ASCII letters, digits and underscore."""
    return byte < 0x80 and (chr(byte).isalnum() or byte == ord("_"))


def display_quote(codepoint: int) -> str:
    """Render one character the way a double-quoted literal would show it.

    Args:
        codepoint: Character to render (any non-negative integer)

    Returns:
        A mnemonic escape for common controls, ``\\\\`` for backslash, the
        character itself for printable ASCII, ``\\x{...}`` otherwise.

    Example:
        >>> display_quote(ord("9"))
        '9'
        >>> display_quote(ord("\\n"))
        '\\\\n'
        >>> display_quote(0x263A)
        '\\\\x{263a}'
    """
    if codepoint in _MNEMONICS:
        return _MNEMONICS[codepoint]
    if codepoint == ord("\\"):
        return "\\\\"
    if is_print_ascii(codepoint):
        return chr(codepoint)
    return f"\\x{{{codepoint:x}}}"
