"""Diagnostic system for escape decoding.

Provides structured diagnostics with codes, hints and categories, the
exception hierarchy used by ``DecodeResult.unwrap()``, and the text
builders shared by the octal and hex decoders.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .digit_message import alien_digit_message, display_bad_character
from .display import display_quote, is_print_ascii, is_word_char
from .errors import (
    CodepointOverflowError,
    EmptyBodyError,
    EscapeError,
    InvalidControlTargetError,
    InvalidDigitError,
    MalformedDelimiterError,
    error_for,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate, format_hex_float

__all__ = [
    "CodepointOverflowError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "EmptyBodyError",
    "ErrorTemplate",
    "EscapeError",
    "InvalidControlTargetError",
    "InvalidDigitError",
    "MalformedDelimiterError",
    "OutputFormat",
    "alien_digit_message",
    "display_bad_character",
    "display_quote",
    "error_for",
    "format_hex_float",
    "is_print_ascii",
    "is_word_char",
]
