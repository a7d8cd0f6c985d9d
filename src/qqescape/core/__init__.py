"""Core utilities shared across the diagnostics and syntax layers.

This package provides foundational helpers that both the diagnostics layer
(message building) and the syntax layer (cursors, decoders) depend on. By
isolating them here, we keep a clean dependency graph:

    core <- diagnostics <- syntax

Exports:
    UTF-8 structural helpers (skip lengths, well-formedness, decoding)
    line_col - byte offset to (line, column)

Python 3.13+.
"""

from .position import line_col
from .utf8 import (
    decode_utf8_char,
    is_invariant,
    is_utf8_char,
    utf8_length,
    utf8_safe_skip,
    utf8_skip,
)

__all__ = [
    "decode_utf8_char",
    "is_invariant",
    "is_utf8_char",
    "line_col",
    "utf8_length",
    "utf8_safe_skip",
    "utf8_skip",
]
