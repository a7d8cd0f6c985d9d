"""Shared constants for qqescape.

This module provides the numeric limits and byte values used across the
syntax and diagnostics packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Codepoint limits: the legal range of a decoded escape
- ASCII classes: printable range and control transform
- Escape syntax: introducers and delimiters

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Codepoint limits
    "MAX_LEGAL_CODEPOINT",
    "MAX_UNSIGNED_CODEPOINT",
    "MIN_CONFIGURABLE_CODEPOINT",
    # ASCII classes
    "ASCII_PRINTABLE_FIRST",
    "ASCII_PRINTABLE_LAST",
    "CONTROL_TOGGLE",
    # Escape syntax
    "BACKSLASH",
    "LEFT_BRACE",
    "RIGHT_BRACE",
    "UNDERSCORE",
    "INTRODUCER_CONTROL",
    "INTRODUCER_OCTAL",
    "INTRODUCER_HEX",
    "UNBRACED_HEX_DIGITS",
    "UNBRACED_HEX_DIGITS_STRICT",
]

# ============================================================================
# CODEPOINT LIMITS
# ============================================================================
#
# A decoded escape is an integer, not necessarily a Unicode scalar value.
# The default ceiling is the largest signed 64-bit integer, which is what an
# extended UTF-8 encoder can still represent. Applications that only want
# Unicode can lower it to 0x10FFFF through EscapeConfig.max_codepoint.
#
# ============================================================================

MAX_LEGAL_CODEPOINT: int = 2**63 - 1

# Upper bound accepted by EscapeConfig.max_codepoint (unsigned 64-bit).
MAX_UNSIGNED_CODEPOINT: int = 2**64 - 1

# Lower bound accepted by EscapeConfig.max_codepoint. An unbraced \xHH can
# always reach 0xFF and is never range checked.
MIN_CONFIGURABLE_CODEPOINT: int = 0xFF

# ============================================================================
# ASCII CLASSES
# ============================================================================

ASCII_PRINTABLE_FIRST: int = 0x20
ASCII_PRINTABLE_LAST: int = 0x7E

# Caret notation: \cA == 0x01, \c? == 0x7F
CONTROL_TOGGLE: int = 0x40

# ============================================================================
# ESCAPE SYNTAX
# ============================================================================

BACKSLASH: int = ord("\\")
LEFT_BRACE: int = ord("{")
RIGHT_BRACE: int = ord("}")
UNDERSCORE: int = ord("_")

INTRODUCER_CONTROL: int = ord("c")
INTRODUCER_OCTAL: int = ord("o")
INTRODUCER_HEX: int = ord("x")

# Bytes scanned after an unbraced \x. Strict mode reads one extra so that a
# third digit can be rejected instead of silently ending the escape.
UNBRACED_HEX_DIGITS: int = 2
UNBRACED_HEX_DIGITS_STRICT: int = 3
