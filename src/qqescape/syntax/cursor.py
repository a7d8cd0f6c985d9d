"""Immutable byte cursor and decode results.

Implements the immutable cursor pattern for escape decoding.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - The scan bound travels with the cursor, so no decoder can read past it
    - Every advance() returns NEW cursor, clamped to the bound
    - Decoders return the advanced cursor together with the outcome, on
      success AND on failure; there is no separate out-parameter to forget
    - Line:column computed on-demand (only for error reporting)

Positions are byte offsets. The ``utf8`` flag says whether the buffer holds
UTF-8; it changes how far a decoder skips past an offending byte and how the
byte is displayed in diagnostics.

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass

from qqescape.core.position import line_col
from qqescape.core.utf8 import utf8_safe_skip
from qqescape.diagnostics import Diagnostic, ErrorTemplate
from qqescape.diagnostics.errors import error_for

__all__ = ["ByteCursor", "DecodeOutcome", "DecodeResult", "Failure", "Success"]


@dataclass(frozen=True, slots=True)
class ByteCursor:
    """Immutable position within a byte buffer.

    Attributes:
        source: The whole buffer
        pos: Current offset
        end: Exclusive bound; the cursor never reads or moves past it
        utf8: True if ``source`` is UTF-8 encoded

    Example:
        >>> cursor = ByteCursor.over(b"x41")
        >>> cursor.current == ord("x")
        True
        >>> cursor.advance().pos
        1
        >>> cursor.pos  # Original unchanged (immutability)
        0
        >>> cursor.advance(10).pos  # Clamped to the bound
        3
    """

    source: bytes
    pos: int
    end: int
    utf8: bool = False

    def __post_init__(self) -> None:
        """Validate position invariants.

        Raises:
            ValueError: If not 0 <= pos <= end <= len(source)
        """
        if not 0 <= self.pos <= self.end <= len(self.source):
            msg = (
                f"Cursor requires 0 <= pos <= end <= len(source), "
                f"got pos={self.pos}, end={self.end}, len={len(self.source)}"
            )
            raise ValueError(msg)

    @classmethod
    def over(
        cls,
        source: bytes,
        pos: int = 0,
        *,
        end: int | None = None,
        utf8: bool = False,
    ) -> "ByteCursor":
        """Create a cursor bounded by ``end`` (default: end of ``source``)."""
        return cls(source, pos, len(source) if end is None else end, utf8)

    @property
    def is_eof(self) -> bool:
        """Check if the cursor sits on the bound."""
        return self.pos >= self.end

    @property
    def remaining(self) -> int:
        """Number of bytes left before the bound."""
        return self.end - self.pos

    @property
    def current(self) -> int:
        """Get the byte at the current position.

        Raises:
            EOFError: If at the bound
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> int | None:
        """Byte at ``pos + offset``, or None at or beyond the bound."""
        target_pos = self.pos + offset
        if target_pos >= self.end:
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "ByteCursor":
        """Return new cursor advanced by ``count`` bytes, clamped to the bound."""
        new_pos = min(self.pos + count, self.end)
        return ByteCursor(self.source, new_pos, self.end, self.utf8)

    def seek(self, pos: int) -> "ByteCursor":
        """Return new cursor at absolute offset ``pos``."""
        return ByteCursor(self.source, pos, self.end, self.utf8)

    def skip_character(self) -> "ByteCursor":
        """Skip one character: a whole UTF-8 sequence in UTF-8 mode, else one byte.

        The skip is clamped to the bound, so a truncated sequence at the end
        of the buffer is consumed without reading past it.

        Example:
            >>> cursor = ByteCursor.over("é}".encode(), utf8=True)
            >>> cursor.skip_character().pos
            2
            >>> ByteCursor.over("é}".encode()).skip_character().pos
            1
        """
        if self.utf8:
            return self.advance(utf8_safe_skip(self.source, self.pos, self.end))
        return self.advance()

    def skip_while(self, alphabet: bytes) -> "ByteCursor":
        """Skip consecutive bytes that belong to ``alphabet``."""
        pos = self.pos
        while pos < self.end and self.source[pos] in alphabet:
            pos += 1
        return self.seek(pos)

    def find(self, byte: int) -> int | None:
        """Offset of the first ``byte`` in [pos, end), or None if absent."""
        found = self.source.find(bytes((byte,)), self.pos, self.end)
        return None if found < 0 else found

    def slice_to(self, end_pos: int) -> bytes:
        """Extract source bytes from the current position to ``end_pos``."""
        return self.source[self.pos : end_pos]

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, column counted in bytes)

        Example:
            >>> ByteCursor.over(b"ab\\ncd", 4).compute_line_col()
            (2, 2)
        """
        return line_col(self.source, self.pos)


@dataclass(frozen=True, slots=True)
class Success:
    """Escape decoded to ``codepoint``."""

    codepoint: int


@dataclass(frozen=True, slots=True)
class Failure:
    """Escape rejected; ``diagnostic`` explains why."""

    diagnostic: Diagnostic

    @property
    def message(self) -> str:
        return self.diagnostic.message


type DecodeOutcome = Success | Failure


@dataclass(frozen=True, slots=True)
class DecodeResult:
    """Decoder result containing the outcome and the new cursor position.

    The cursor is meaningful for both outcomes: after a success it points
    just past the escape, after a failure it points just past the offending
    spot so a "<-- HERE" marker lands in the right place.

    Example:
        >>> result = DecodeResult(Success(65), ByteCursor.over(b"x41", 3))
        >>> result.ok, result.codepoint, result.cursor.pos
        (True, 65, 3)
    """

    outcome: DecodeOutcome
    cursor: ByteCursor

    @property
    def ok(self) -> bool:
        return isinstance(self.outcome, Success)

    @property
    def codepoint(self) -> int | None:
        """Decoded value, or None on failure."""
        match self.outcome:
            case Success(codepoint=codepoint):
                return codepoint
            case _:
                return None

    @property
    def diagnostic(self) -> Diagnostic | None:
        """Failure diagnostic, or None on success."""
        match self.outcome:
            case Failure(diagnostic=diagnostic):
                return diagnostic
            case _:
                return None

    @property
    def message(self) -> str | None:
        diagnostic = self.diagnostic
        return None if diagnostic is None else diagnostic.message

    def unwrap(self) -> int:
        """Return the codepoint or raise the matching EscapeError.

        Raises:
            EscapeError: Subclass chosen by the failure's ErrorKind, carrying
                the diagnostic and the cursor offset
        """
        match self.outcome:
            case Success(codepoint=codepoint):
                return codepoint
            case Failure(diagnostic=diagnostic):
                raise error_for(diagnostic, self.cursor.source, self.cursor.pos)
