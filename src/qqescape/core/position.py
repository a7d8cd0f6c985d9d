"""Position utilities for byte buffers.

Converts byte offsets to line/column positions for error reporting. Both the
cursor and the diagnostic formatter use this one routine.
"""

__all__ = ["line_col"]


def line_col(source: bytes, pos: int) -> tuple[int, int]:
    """Get 1-based (line, column) for a byte offset.

    Args:
        source: Complete buffer
        pos: Byte offset in source (clamped to the buffer)

    Returns:
        (line, column) tuple; the column counts bytes

    Example:
        >>> line_col(b"ab\\ncd", 4)
        (2, 2)
        >>> line_col(b"ab", 0)
        (1, 1)

    Raises:
        ValueError: If pos is negative
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))
    line = source.count(b"\n", 0, pos) + 1
    last_newline = source.rfind(b"\n", 0, pos)
    return (line, pos - last_newline if last_newline >= 0 else pos + 1)
