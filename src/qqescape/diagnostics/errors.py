"""Escape exception hierarchy with structured diagnostics.

Decoders report malformed input as a Failure outcome and never raise for it.
These exceptions exist for callers that prefer raising, via
``DecodeResult.unwrap()``. Each one stores the Diagnostic together with the
buffer and the offset the failure points at.

Python 3.13+. Zero external dependencies.
"""

from qqescape.enums import ErrorKind

from .codes import Diagnostic

__all__ = [
    "CodepointOverflowError",
    "EmptyBodyError",
    "EscapeError",
    "InvalidControlTargetError",
    "InvalidDigitError",
    "MalformedDelimiterError",
    "error_for",
]


class EscapeError(Exception):
    """Base exception for all escape decoding errors.

    Attributes:
        diagnostic: Structured diagnostic information
        source: Buffer holding the escape (empty if unknown)
        position: Offset the failure points at ("<-- HERE")
    """

    def __init__(
        self,
        diagnostic: Diagnostic,
        *,
        source: bytes = b"",
        position: int = 0,
    ) -> None:
        """Initialize EscapeError.

        Args:
            diagnostic: Failure diagnostic
            source: Buffer holding the escape
            position: Offset the failure points at
        """
        super().__init__(diagnostic.format_error())
        self.diagnostic = diagnostic
        self.source = source
        self.position = position

    @property
    def message(self) -> str:
        """Bare message text, without code or hints."""
        return self.diagnostic.message


class MalformedDelimiterError(EscapeError):
    """Missing '{' after \\o, or no closing '}' before the end of input."""


class EmptyBodyError(EscapeError):
    """Braces with nothing between them, or a strict trailing \\x."""


class InvalidDigitError(EscapeError):
    """Strict mode: non-digit inside the escape, or three unbraced hex digits."""


class CodepointOverflowError(EscapeError):
    """Value above the maximum legal codepoint.

    Never silently wrapped; the message shows both the value and the maximum.
    """


class InvalidControlTargetError(EscapeError):
    """\\c followed by a non-printable byte, by '{', or by nothing."""


_ERROR_CLASSES: dict[ErrorKind, type[EscapeError]] = {
    ErrorKind.MALFORMED_DELIMITER: MalformedDelimiterError,
    ErrorKind.EMPTY_BODY: EmptyBodyError,
    ErrorKind.INVALID_DIGIT: InvalidDigitError,
    ErrorKind.CODEPOINT_OVERFLOW: CodepointOverflowError,
    ErrorKind.INVALID_CONTROL_TARGET: InvalidControlTargetError,
}


def error_for(diagnostic: Diagnostic, source: bytes = b"", position: int = 0) -> EscapeError:
    """Build the exception matching the diagnostic's ErrorKind.

    Args:
        diagnostic: Failure diagnostic
        source: Buffer holding the escape
        position: Offset the failure points at

    Returns:
        EscapeError subclass instance (not raised)

    Raises:
        ValueError: If ``diagnostic`` is a warning rather than a failure
    """
    kind = diagnostic.kind
    if kind is None:
        msg = f"{diagnostic.code.name} is not a failure code"
        raise ValueError(msg)
    return _ERROR_CLASSES[kind](diagnostic, source=source, position=position)
