r"""qqescape - backslash-escape decoding for double-quoted literals.

Decodes the numeric and control escapes a lexer meets inside quoted strings,
with byte-exact cursor positioning for "<-- HERE" error pointers, overflow
detection against a configurable maximum codepoint, and a strict mode that
turns every warning into a failure.

Public API:
    ByteCursor - Immutable, bounded position in a byte buffer
    decode_escape - Decode \c, \o{} or \x at the cursor
    decode_control_escape - \cX
    decode_octal_escape - \o{...}
    decode_hex_escape - \xHH and \x{...}
    DecodeResult / Success / Failure - Outcome plus the cursor to resume from
    scan_digits - Digit-run scanner used by the numeric escapes
    alien_digit_message / display_quote - Diagnostic text builders

Configuration:
    EscapeConfig, get_config, set_config, configured

Warnings:
    Reporter, EmittingReporter, CollectingReporter, WarningOutcome,
    WarningCategory

Exceptions (raised only by DecodeResult.unwrap()):
    EscapeError - Base exception class
    MalformedDelimiterError, EmptyBodyError, InvalidDigitError,
    CodepointOverflowError, InvalidControlTargetError

Submodules:
    qqescape.syntax - Cursor, scanner and decoders
    qqescape.diagnostics - Codes, templates, exceptions and formatting
    qqescape.core - UTF-8 structural helpers
"""

from .config import EscapeConfig, configured, get_config, set_config
from .constants import MAX_LEGAL_CODEPOINT
from .diagnostics import (
    CodepointOverflowError,
    EmptyBodyError,
    EscapeError,
    InvalidControlTargetError,
    InvalidDigitError,
    MalformedDelimiterError,
    alien_digit_message,
    display_quote,
)
from .enums import WarningCategory
from .reporting import CollectingReporter, EmittingReporter, Reporter, WarningOutcome
from .syntax import (
    ByteCursor,
    DecodeResult,
    Failure,
    Success,
    decode_control_escape,
    decode_escape,
    decode_hex_escape,
    decode_octal_escape,
    scan_digits,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("qqescape")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "MAX_LEGAL_CODEPOINT",
    "ByteCursor",
    "CodepointOverflowError",
    "CollectingReporter",
    "DecodeResult",
    "EmittingReporter",
    "EmptyBodyError",
    "EscapeConfig",
    "EscapeError",
    "Failure",
    "InvalidControlTargetError",
    "InvalidDigitError",
    "MalformedDelimiterError",
    "Reporter",
    "Success",
    "WarningCategory",
    "WarningOutcome",
    "__version__",
    "alien_digit_message",
    "configured",
    "decode_control_escape",
    "decode_escape",
    "decode_hex_escape",
    "decode_octal_escape",
    "display_quote",
    "get_config",
    "scan_digits",
    "set_config",
]
