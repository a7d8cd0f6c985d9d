"""UTF-8 structural helpers.

Byte-level helpers for skipping and recognising UTF-8 characters without
decoding a whole buffer. The encoding understood here is the extended form
used for escape values: surrogates, noncharacters and values above U+10FFFF
are structurally valid as long as the sequence is not overlong.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "decode_utf8_char",
    "is_invariant",
    "is_utf8_char",
    "utf8_length",
    "utf8_safe_skip",
    "utf8_skip",
]

# Payload bits carried by the start byte, indexed by sequence length.
_START_MASKS: dict[int, int] = {2: 0x1F, 3: 0x0F, 4: 0x07, 5: 0x03, 6: 0x01, 7: 0x00, 13: 0x00}

# Largest value encodable in each sequence length (extended UTF-8).
_LENGTH_LIMITS: tuple[tuple[int, int], ...] = (
    (0x7F, 1),
    (0x7FF, 2),
    (0xFFFF, 3),
    (0x1FFFFF, 4),
    (0x3FFFFFF, 5),
    (0x7FFFFFFF, 6),
    (0xFFFFFFFFF, 7),
)

_CONTINUATION_MASK: int = 0xC0
_CONTINUATION_TAG: int = 0x80


def is_invariant(byte: int) -> bool:
    """Return True if ``byte`` encodes the same character in UTF-8 and not."""
    return byte < 0x80


def utf8_skip(byte: int) -> int:
    """Return the sequence length announced by a start byte.

    Continuation bytes and ASCII both count as 1, so that skipping never
    stalls on malformed input.
    """
    if byte < 0xC0:
        return 1
    if byte < 0xE0:
        return 2
    if byte < 0xF0:
        return 3
    if byte < 0xF8:
        return 4
    if byte < 0xFC:
        return 5
    if byte < 0xFE:
        return 6
    if byte == 0xFE:
        return 7
    return 13


def utf8_safe_skip(source: bytes, pos: int, end: int) -> int:
    """Return how many bytes to skip at ``pos`` without crossing ``end``.

    Args:
        source: Buffer being scanned
        pos: Position of the start byte
        end: Exclusive bound

    Returns:
        0 at or past ``end``; otherwise the announced length clamped to the
        bytes that remain.
    """
    if pos >= end:
        return 0
    return min(end - pos, utf8_skip(source[pos]))


def utf8_length(codepoint: int) -> int:
    """Return the number of bytes extended UTF-8 needs for ``codepoint``."""
    for limit, length in _LENGTH_LIMITS:
        if codepoint <= limit:
            return length
    return 13


def is_utf8_char(source: bytes, pos: int, end: int) -> int:
    """Check for a well-formed character starting at ``pos``.

    Args:
        source: Buffer being scanned
        pos: Position of the candidate start byte
        end: Exclusive bound; the sequence must fit before it

    Returns:
        Length of the character in bytes, or 0 if the bytes at ``pos`` are
        truncated, malformed, or overlong.

    Example:
        >>> is_utf8_char("é".encode(), 0, 2)
        2
        >>> is_utf8_char(b"\\xc3", 0, 1)
        0
        >>> is_utf8_char(b"\\xc0\\x80", 0, 2)  # overlong NUL
        0
    """
    if pos >= end:
        return 0
    lead = source[pos]
    if is_invariant(lead):
        return 1
    length = utf8_skip(lead)
    if length == 1 or end - pos < length:
        return 0
    codepoint = _START_MASKS[length] & lead
    for byte in source[pos + 1 : pos + length]:
        if byte & _CONTINUATION_MASK != _CONTINUATION_TAG:
            return 0
        codepoint = (codepoint << 6) | (byte & 0x3F)
    if utf8_length(codepoint) != length:
        return 0
    return length


def decode_utf8_char(source: bytes, pos: int, end: int) -> int:
    """Decode the character at ``pos``.

    Raises:
        ValueError: If ``is_utf8_char`` rejects the bytes at ``pos``
    """
    length = is_utf8_char(source, pos, end)
    if length == 0:
        msg = f"Malformed UTF-8 character at offset {pos}"
        raise ValueError(msg)
    lead = source[pos]
    if length == 1:
        return lead
    codepoint = _START_MASKS[length] & lead
    for byte in source[pos + 1 : pos + length]:
        codepoint = (codepoint << 6) | (byte & 0x3F)
    return codepoint
