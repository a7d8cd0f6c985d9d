#!/usr/bin/env python3
# FUZZ_PLUGIN_HEADER_START
# FUZZ_PLUGIN: escapes - Control, Octal and Hex Escape Decoding
# Intentional: This header is intentionally placed for dynamic plugin discovery.
# Keep this header: plugin discovery reads it to list the available fuzz targets.
# FUZZ_PLUGIN_HEADER_END
"""Escape Decoder Fuzzer (Atheris).

Targets: qqescape.syntax.escapes (decode_escape and the three decoders)

Concern boundary: This fuzzer feeds arbitrary bytes after a \\c, \\o or \\x
introducer and checks the invariants a lexer depends on: the cursor moves
forward and stays inside its bound, successes never exceed the configured
maximum, failures carry an ErrorKind, strict mode rejects whatever lenient
mode warns about, and unwrap() raises exactly when decoding failed.

Metrics:
- Pattern coverage (lenient, strict_escalation, bounded_view, etc.)
- Outcome counts per diagnostic code
- Performance profiling (mean/p95/max)
- Real memory usage (RSS via psutil)

Requires Python 3.13+ (uses PEP 695 type aliases).
"""

from __future__ import annotations

import argparse
import atexit
import json
import logging
import os
import pathlib
import statistics
import sys
import time
from collections import deque
from dataclasses import dataclass, field
from typing import Any

# --- Dependency Checks ---
_psutil_mod: Any = None
_atheris_mod: Any = None

try:  # noqa: SIM105 - need module ref for check_dependencies
    import psutil as _psutil_mod  # type: ignore[no-redef]
except ImportError:
    pass

try:  # noqa: SIM105 - need module ref for check_dependencies
    import atheris as _atheris_mod  # type: ignore[no-redef]
except ImportError:
    pass


def check_dependencies(dep_names: list[str], dep_modules: list[Any]) -> None:
    """Verify fuzzing dependencies are importable, exit with instructions if not."""
    missing = [name for name, mod in zip(dep_names, dep_modules, strict=True) if mod is None]
    if missing:
        print("-" * 80, file=sys.stderr)
        print("ERROR: Missing required dependencies for fuzzing:", file=sys.stderr)
        for dep in missing:
            print(f"  - {dep}", file=sys.stderr)
        print("", file=sys.stderr)
        print("Install with: pip install -e '.[fuzz]'", file=sys.stderr)
        print("-" * 80, file=sys.stderr)
        sys.exit(1)


check_dependencies(["psutil", "atheris"], [_psutil_mod, _atheris_mod])

import atheris  # noqa: E402  # pylint: disable=C0412,C0413
import psutil  # noqa: E402  # pylint: disable=C0412,C0413

# --- PEP 695 Type Aliases ---

type FuzzStats = dict[str, int | str | float | dict[str, int]]


# --- State ---


@dataclass
class EscapeFuzzerState:
    """Observability state for the escape fuzzer."""

    iterations: int = 0
    findings: int = 0
    status: str = "incomplete"
    checkpoint_interval: int = 500

    performance_history: deque[float] = field(default_factory=lambda: deque(maxlen=10000))
    memory_history: deque[float] = field(default_factory=lambda: deque(maxlen=1000))
    initial_memory_mb: float = 0.0

    pattern_coverage: dict[str, int] = field(default_factory=dict)
    outcome_counts: dict[str, int] = field(default_factory=dict)
    error_counts: dict[str, int] = field(default_factory=dict)


_state = EscapeFuzzerState()
_process = psutil.Process(os.getpid())

# Cheapest-first, so libFuzzer's small-value bias lands on cheap patterns.
_PATTERN_WEIGHTS: tuple[tuple[str, int], ...] = (
    ("lenient", 20),
    ("strict", 15),
    ("unwrap_consistency", 10),
    ("configured_maximum", 10),
    ("strict_escalation", 15),
    ("bounded_view", 10),
    ("pointer_format", 5),
)

_PATTERN_SCHEDULE: tuple[str, ...] = tuple(
    name for name, weight in _PATTERN_WEIGHTS for _ in range(weight)
)

_INTRODUCERS = b"cox"


class EscapeFuzzError(Exception):
    """Raised when a decoder invariant is breached."""


# --- Reporting ---

_REPORT_DIR = pathlib.Path(".fuzz_atheris_corpus") / "escapes"
_REPORT_FILENAME = "fuzz_escapes_report.json"


def _current_rss_mb() -> float:
    return _process.memory_info().rss / (1024 * 1024)


def _build_stats_dict() -> FuzzStats:
    stats: FuzzStats = {
        "status": _state.status,
        "iterations": _state.iterations,
        "findings": _state.findings,
        "pattern_coverage": dict(sorted(_state.pattern_coverage.items())),
        "outcome_counts": dict(sorted(_state.outcome_counts.items())),
        "error_counts": dict(sorted(_state.error_counts.items())),
    }
    if _state.performance_history:
        history = sorted(_state.performance_history)
        stats["perf_mean_ms"] = round(statistics.fmean(history), 4)
        stats["perf_p95_ms"] = round(history[min(len(history) - 1, int(len(history) * 0.95))], 4)
        stats["perf_max_ms"] = round(history[-1], 4)
    if _state.memory_history:
        stats["memory_initial_mb"] = round(_state.initial_memory_mb, 2)
        stats["memory_peak_mb"] = round(max(_state.memory_history), 2)
        stats["memory_growth_mb"] = round(
            _state.memory_history[-1] - _state.initial_memory_mb, 2
        )
    return stats


def _write_report(marker: str) -> None:
    report = json.dumps(_build_stats_dict(), sort_keys=True)
    print(f"\n[{marker}-BEGIN]{report}[{marker}-END]", file=sys.stderr, flush=True)
    try:
        _REPORT_DIR.mkdir(parents=True, exist_ok=True)
        (_REPORT_DIR / _REPORT_FILENAME).write_text(report, encoding="utf-8")
    except OSError:
        pass


def _emit_report() -> None:
    """Emit comprehensive final report (crash-proof)."""
    _state.status = "complete"
    _write_report("SUMMARY-JSON")


atexit.register(_emit_report)

# Suppress logging and instrument imports
logging.getLogger("qqescape").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["qqescape"]):
    from qqescape import (
        MAX_LEGAL_CODEPOINT,
        ByteCursor,
        CollectingReporter,
        EscapeConfig,
        EscapeError,
        decode_escape,
    )
    from qqescape.diagnostics import DiagnosticFormatter


# --- Helpers ---


def _consume_escape(fdp: atheris.FuzzedDataProvider) -> bytes:
    introducer = _INTRODUCERS[fdp.ConsumeIntInRange(0, len(_INTRODUCERS) - 1)]
    return bytes([introducer]) + fdp.ConsumeBytes(fdp.ConsumeIntInRange(0, 48))


def _check_progress(cursor: ByteCursor, resumed: ByteCursor, label: str) -> None:
    if not cursor.pos < resumed.pos <= cursor.end:
        msg = f"{label}: cursor went from {cursor.pos} to {resumed.pos} (end {cursor.end})"
        raise EscapeFuzzError(msg)


def _record_outcome(name: str) -> None:
    _state.outcome_counts[name] = _state.outcome_counts.get(name, 0) + 1


# --- Pattern Implementations ---


def _pattern_lenient(fdp: atheris.FuzzedDataProvider, *, strict: bool = False) -> None:
    """Cursor progress and outcome shape for a single decode."""
    data = _consume_escape(fdp)
    cursor = ByteCursor.over(data, utf8=fdp.ConsumeBool())
    result = decode_escape(cursor, strict=strict, reporter=CollectingReporter())
    _check_progress(cursor, result.cursor, "decode")
    if result.ok:
        _record_outcome("success")
        if result.codepoint is None or not 0 <= result.codepoint <= MAX_LEGAL_CODEPOINT:
            msg = f"Success with out-of-range codepoint {result.codepoint!r} for {data!r}"
            raise EscapeFuzzError(msg)
    else:
        diagnostic = result.diagnostic
        if diagnostic is None or diagnostic.kind is None:
            msg = f"Failure without ErrorKind for {data!r}"
            raise EscapeFuzzError(msg)
        _record_outcome(diagnostic.code.name)


def _pattern_strict(fdp: atheris.FuzzedDataProvider) -> None:
    _pattern_lenient(fdp, strict=True)


def _pattern_unwrap_consistency(fdp: atheris.FuzzedDataProvider) -> None:
    """unwrap() raises EscapeError exactly when the result is a failure."""
    data = _consume_escape(fdp)
    result = decode_escape(
        ByteCursor.over(data), strict=fdp.ConsumeBool(), reporter=CollectingReporter()
    )
    try:
        value = result.unwrap()
    except EscapeError as error:
        if result.ok:
            msg = f"unwrap() raised {type(error).__name__} on success for {data!r}"
            raise EscapeFuzzError(msg) from error
        if error.position != result.cursor.pos:
            msg = f"EscapeError.position {error.position} != cursor {result.cursor.pos}"
            raise EscapeFuzzError(msg) from error
        return
    if value != result.codepoint:
        msg = f"unwrap() returned {value!r}, codepoint is {result.codepoint!r}"
        raise EscapeFuzzError(msg)


def _pattern_configured_maximum(fdp: atheris.FuzzedDataProvider) -> None:
    """Braced escapes never decode above the configured maximum."""
    maximum = fdp.ConsumeIntInRange(0xFF, 0x10FFFF)
    data = _consume_escape(fdp)
    result = decode_escape(
        ByteCursor.over(data),
        config=EscapeConfig(max_codepoint=maximum),
        reporter=CollectingReporter(),
    )
    if result.codepoint is not None and result.codepoint > maximum:
        msg = f"{data!r} decoded to 0x{result.codepoint:X} above 0x{maximum:X}"
        raise EscapeFuzzError(msg)


def _pattern_strict_escalation(fdp: atheris.FuzzedDataProvider) -> None:
    """A numeric escape that warns in lenient mode fails in strict mode."""
    data = bytes([b"ox"[fdp.ConsumeIntInRange(0, 1)]]) + fdp.ConsumeBytes(32)
    utf8 = fdp.ConsumeBool()
    reporter = CollectingReporter()
    lenient = decode_escape(ByteCursor.over(data, utf8=utf8), reporter=reporter)
    strict = decode_escape(
        ByteCursor.over(data, utf8=utf8), strict=True, reporter=CollectingReporter()
    )
    if len(reporter) > 0 and (not lenient.ok or strict.ok):
        msg = f"Warning for {data!r} did not escalate: {reporter.messages}"
        raise EscapeFuzzError(msg)
    if strict.ok and lenient.codepoint != strict.codepoint:
        msg = f"Modes disagree on {data!r}: {lenient.codepoint} vs {strict.codepoint}"
        raise EscapeFuzzError(msg)


def _pattern_bounded_view(fdp: atheris.FuzzedDataProvider) -> None:
    """Bytes past the cursor bound never influence decoding."""
    data = _consume_escape(fdp)
    trailer = fdp.ConsumeBytes(8)
    bounded = decode_escape(
        ByteCursor.over(data + trailer, end=len(data)), reporter=CollectingReporter()
    )
    alone = decode_escape(ByteCursor.over(data), reporter=CollectingReporter())
    if bounded.outcome != alone.outcome or bounded.cursor.pos != alone.cursor.pos:
        msg = f"Trailer {trailer!r} changed the decoding of {data!r}"
        raise EscapeFuzzError(msg)


def _pattern_pointer_format(fdp: atheris.FuzzedDataProvider) -> None:
    """Every failure renders a single-line HERE pointer."""
    data = _consume_escape(fdp)
    utf8 = fdp.ConsumeBool()
    result = decode_escape(
        ByteCursor.over(data, utf8=utf8), strict=True, reporter=CollectingReporter()
    )
    if result.diagnostic is None:
        return
    text = DiagnosticFormatter().format_pointer(
        result.diagnostic, data, result.cursor.pos, utf8=utf8
    )
    if "\n" in text or " <-- HERE " not in text:
        msg = f"Malformed pointer for {data!r}: {text!r}"
        raise EscapeFuzzError(msg)


_PATTERN_DISPATCH: dict[str, Any] = {
    "lenient": _pattern_lenient,
    "strict": _pattern_strict,
    "unwrap_consistency": _pattern_unwrap_consistency,
    "configured_maximum": _pattern_configured_maximum,
    "strict_escalation": _pattern_strict_escalation,
    "bounded_view": _pattern_bounded_view,
    "pointer_format": _pattern_pointer_format,
}


def test_one_input(data: bytes) -> None:
    """Atheris entry point: fuzz escape decoder invariants."""
    if _state.iterations == 0:
        _state.initial_memory_mb = _current_rss_mb()

    _state.iterations += 1
    _state.status = "running"

    if _state.iterations % _state.checkpoint_interval == 0:
        _write_report("CHECKPOINT-JSON")

    start_time = time.perf_counter()
    fdp = atheris.FuzzedDataProvider(data)

    pattern = _PATTERN_SCHEDULE[_state.iterations % len(_PATTERN_SCHEDULE)]
    _state.pattern_coverage[pattern] = _state.pattern_coverage.get(pattern, 0) + 1

    try:
        _PATTERN_DISPATCH[pattern](fdp)

    except EscapeFuzzError:
        _state.findings += 1
        raise

    except Exception as e:  # pylint: disable=broad-exception-caught
        # Decoders report malformed input as outcomes; any exception is a finding.
        _state.findings += 1
        error_key = f"{type(e).__name__}_{str(e)[:30]}"
        _state.error_counts[error_key] = _state.error_counts.get(error_key, 0) + 1
        raise

    finally:
        _state.performance_history.append((time.perf_counter() - start_time) * 1000)
        if _state.iterations % 100 == 0:
            _state.memory_history.append(_current_rss_mb())


def main() -> None:
    """Run the escape decoder fuzzer with CLI support."""
    parser = argparse.ArgumentParser(
        description="Escape decoder fuzzer using Atheris/libFuzzer",
        epilog="All unrecognized arguments are passed to libFuzzer.",
    )
    parser.add_argument(
        "--checkpoint-interval",
        type=int,
        default=500,
        help="Emit report every N iterations (default: 500)",
    )

    args, remaining = parser.parse_known_args()
    _state.checkpoint_interval = args.checkpoint_interval

    sys.argv = [sys.argv[0], *remaining]

    # Inject RSS limit if not specified
    if not any(arg.startswith("-rss_limit_mb") for arg in sys.argv):
        sys.argv.append("-rss_limit_mb=2048")

    print("=" * 80)
    print("Escape Decoder Fuzzer (Atheris)")
    print("=" * 80)
    print(f"Target:     qqescape.decode_escape (max 0x{MAX_LEGAL_CODEPOINT:X})")
    print(f"Schedule:   {len(_PATTERN_SCHEDULE)} slots, {len(_PATTERN_WEIGHTS)} patterns")
    print(f"Checkpoint: every {_state.checkpoint_interval} iterations")
    print("=" * 80)

    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
