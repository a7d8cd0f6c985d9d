"""Hypothesis strategies for qqescape property-based testing.

Strategies are organized by domain:

- escapes: digit runs, alien bytes and whole escape buffers

Usage:
    from tests.strategies import digit_runs, escape_buffers
    from tests.strategies.escapes import alien_bytes

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - digit_runs, escape_buffers, alien_bytes
"""

from .escapes import (
    alien_bytes,
    digit_runs,
    escape_buffers,
    hex_pairs,
    printable_ascii,
)

__all__ = [
    "alien_bytes",
    "digit_runs",
    "escape_buffers",
    "hex_pairs",
    "printable_ascii",
]
