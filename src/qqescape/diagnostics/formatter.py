"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from qqescape.core.position import line_col

from .codes import Diagnostic
from .display import display_quote

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


def _escape_controls(text: str) -> str:
    """Replace C0 controls and DEL with their display form."""
    return "".join(
        display_quote(ord(char)) if ord(char) < 0x20 or ord(char) == 0x7F else char
        for char in text
    )


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output. Supports multiple output formats and
    sanitization options.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate content to prevent information leakage
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.empty_octal()
        >>> print(formatter.format(diagnostic))
        error[EMPTY_ESCAPE]: Empty \\o{}
          = help: Put at least one octal digit between the braces

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        EMPTY_ESCAPE: Empty \\o{}
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(
        self,
        diagnostic: Diagnostic,
        *,
        source: bytes | None = None,
        position: int | None = None,
    ) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format
            source: Buffer the diagnostic refers to, for line/column output
            position: Offset within ``source``

        Returns:
            Formatted diagnostic string
        """
        location = None
        if source is not None and position is not None:
            location = line_col(source, position)
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic, location)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic, location)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics.

        Args:
            diagnostics: Iterable of diagnostics to format

        Returns:
            Formatted string with all diagnostics separated by newlines
        """
        return "\n\n".join(self.format(d) for d in diagnostics)

    def format_pointer(
        self,
        diagnostic: Diagnostic,
        source: bytes,
        position: int,
        *,
        utf8: bool = False,
    ) -> str:
        """Format the message with a marker at ``position``.

        Example output:
            Non-hex character in "\\x{4g <-- HERE }"

        Args:
            diagnostic: Diagnostic to show
            source: Buffer holding the escape
            position: Offset the marker goes before
            utf8: Decode ``source`` as UTF-8 (Latin-1 otherwise)

        Returns:
            Single-line pointer text
        """
        encoding = "utf-8" if utf8 else "latin-1"
        before = source[:position].decode(encoding, errors="backslashreplace")
        after = source[position:].decode(encoding, errors="backslashreplace")
        message = self._maybe_sanitize(diagnostic.message)
        return (
            f'{message} in "{_escape_controls(before)} <-- HERE '
            f'{_escape_controls(after)}"'
        )

    def _format_rust(
        self, diagnostic: Diagnostic, location: tuple[int, int] | None
    ) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[NON_HEX_CHARACTER]: Non-hex character
              --> line 1, column 5
        """
        severity = diagnostic.severity

        # Apply color if enabled
        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        message = _escape_controls(diagnostic.message)
        parts = [f"{severity_str}[{diagnostic.code.name}]: {message}"]

        if location is not None:
            parts.append(f"  --> line {location[0]}, column {location[1]}")

        if diagnostic.category is not None:
            parts.append(f"  = category: {diagnostic.category.name}")

        if diagnostic.hint:
            hint = self._maybe_sanitize(diagnostic.hint)
            parts.append(f"  = help: {hint}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            EMPTY_ESCAPE: Empty \\x{}
        """
        message = self._maybe_sanitize(_escape_controls(diagnostic.message))
        return f"{diagnostic.code.name}: {message}"

    def _format_json(
        self, diagnostic: Diagnostic, location: tuple[int, int] | None
    ) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "EMPTY_ESCAPE", "code_value": 2001, "message": "...", ...}
        """
        import json  # noqa: PLC0415

        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.kind is not None:
            data["kind"] = str(diagnostic.kind)

        if diagnostic.category is not None:
            data["category"] = diagnostic.category.name

        if location is not None:
            data["line"] = location[0]
            data["column"] = location[1]

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled.

        Args:
            text: Text to possibly truncate

        Returns:
            Original or truncated text
        """
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
