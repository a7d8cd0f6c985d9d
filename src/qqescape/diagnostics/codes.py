"""Diagnostic codes and data structures.

Defines error codes and the diagnostic message record shared by failures
and warnings.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from qqescape.enums import ErrorKind, WarningCategory

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Diagnostic codes with unique identifiers.

    Organized by category:
        1000-1999: Delimiter errors (missing braces)
        2000-2999: Empty escape bodies
        3000-3999: Digit errors (alien characters, too many digits)
        4000-4999: Range errors (codepoint overflow)
        5000-5999: Control escape errors (\\c targets)
        6000-6999: Warnings (legal but discouraged input)
        9000-9999: Cursor misuse (raised, never returned)
    """

    # Delimiter errors (1000-1999)
    MISSING_BRACES = 1001
    MISSING_RIGHT_BRACE = 1002

    # Empty bodies (2000-2999)
    EMPTY_ESCAPE = 2001

    # Digit errors (3000-3999)
    NON_OCTAL_CHARACTER = 3001
    NON_HEX_CHARACTER = 3002
    TOO_MANY_HEX_DIGITS = 3003

    # Range errors (4000-4999)
    CODEPOINT_OVERFLOW = 4001

    # Control escape errors (5000-5999)
    CONTROL_NOT_PRINTABLE = 5001
    CONTROL_BRACE = 5002
    CONTROL_MISSING = 5003

    # Warnings (6000-6999)
    CONTROL_MORE_CLEARLY = 6001
    ALIEN_DIGIT = 6002

    # Cursor misuse (9000-9999)
    UNEXPECTED_EOF = 9001

    @property
    def kind(self) -> ErrorKind | None:
        """Failure taxonomy entry, or None for warning codes."""
        return _KINDS.get(self)


_KINDS: dict[DiagnosticCode, ErrorKind] = {
    DiagnosticCode.MISSING_BRACES: ErrorKind.MALFORMED_DELIMITER,
    DiagnosticCode.MISSING_RIGHT_BRACE: ErrorKind.MALFORMED_DELIMITER,
    DiagnosticCode.EMPTY_ESCAPE: ErrorKind.EMPTY_BODY,
    DiagnosticCode.NON_OCTAL_CHARACTER: ErrorKind.INVALID_DIGIT,
    DiagnosticCode.NON_HEX_CHARACTER: ErrorKind.INVALID_DIGIT,
    DiagnosticCode.TOO_MANY_HEX_DIGITS: ErrorKind.INVALID_DIGIT,
    DiagnosticCode.CODEPOINT_OVERFLOW: ErrorKind.CODEPOINT_OVERFLOW,
    DiagnosticCode.CONTROL_NOT_PRINTABLE: ErrorKind.INVALID_CONTROL_TARGET,
    DiagnosticCode.CONTROL_BRACE: ErrorKind.INVALID_CONTROL_TARGET,
    DiagnosticCode.CONTROL_MISSING: ErrorKind.INVALID_CONTROL_TARGET,
}


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique diagnostic code
        message: Human-readable text; never empty
        severity: "error" for failures, "warning" for reported warnings
        category: Warning category for warnings, None for errors
        hint: Suggestion for fixing the input
    """

    code: DiagnosticCode
    message: str
    severity: Literal["error", "warning"] = "error"
    category: WarningCategory | None = None
    hint: str | None = None

    def __post_init__(self) -> None:
        """Validate Diagnostic invariants.

        Raises:
            ValueError: If message is empty
        """
        if not self.message:
            msg = f"Diagnostic {self.code.name} requires a non-empty message"
            raise ValueError(msg)

    def __str__(self) -> str:
        """Return human-readable description."""
        return self.message

    @property
    def kind(self) -> ErrorKind | None:
        return self.code.kind

    def format_error(self) -> str:
        """Format diagnostic like a compiler message.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[EMPTY_ESCAPE]: Empty \\o{}
              = help: Put at least one octal digit between the braces
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
