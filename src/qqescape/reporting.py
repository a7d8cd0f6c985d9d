"""Warning reporters for escape decoding.

A decoder that finds legal-but-suspicious input hands a warning Diagnostic
to a Reporter. Two reporters are provided:

    - EmittingReporter: issue the warning immediately through the standard
      ``warnings`` module (the default when no reporter is passed)
    - CollectingReporter: keep the warnings so the caller can decide later

Each category maps to its own warning class, so applications can filter
them with the usual ``warnings.filterwarnings`` machinery.

Python 3.13+.
"""

import logging
import warnings
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Protocol

from qqescape.diagnostics import Diagnostic
from qqescape.enums import WarningCategory

__all__ = [
    "CollectingReporter",
    "EmittingReporter",
    "EscapeDigitWarning",
    "EscapeSyntaxWarning",
    "EscapeWarning",
    "Reporter",
    "WarningOutcome",
    "resolve_reporter",
    "warning_class_for",
]

logger = logging.getLogger(__name__)


class EscapeWarning(UserWarning):
    """Base class for warnings about escape sequences."""


class EscapeSyntaxWarning(EscapeWarning, SyntaxWarning):
    """Legal escape with a clearer spelling (category SYNTAX)."""


class EscapeDigitWarning(EscapeWarning):
    """Digit run terminated by a byte outside the radix (category DIGIT)."""


def warning_class_for(category: WarningCategory | None) -> type[EscapeWarning]:
    """Return the warning class used to emit ``category``."""
    if category is not None and WarningCategory.SYNTAX in category:
        return EscapeSyntaxWarning
    if category is not None and WarningCategory.DIGIT in category:
        return EscapeDigitWarning
    return EscapeWarning


@dataclass(frozen=True, slots=True)
class WarningOutcome:
    """A warning produced by one decode.

    Attributes:
        message: Warning text
        category: Category the warning belongs to
    """

    message: str
    category: WarningCategory

    @classmethod
    def from_diagnostic(cls, diagnostic: Diagnostic) -> "WarningOutcome":
        return cls(diagnostic.message, diagnostic.category or WarningCategory.NONE)


class Reporter(Protocol):
    """Receiver for warnings found during decoding."""

    def report(self, diagnostic: Diagnostic) -> None:
        """Accept one warning diagnostic."""
        ...  # pragma: no cover  # Protocol stub - not executable


@dataclass(frozen=True, slots=True)
class EmittingReporter:
    """Issue warnings immediately via ``warnings.warn``.

    Attributes:
        stacklevel: Passed to ``warnings.warn``; the default points at the
            code that called the decoder.
    """

    stacklevel: int = 3

    def report(self, diagnostic: Diagnostic) -> None:
        logger.debug("Escape warning [%s]: %s", diagnostic.code.name, diagnostic.message)
        warnings.warn(
            diagnostic.message,
            warning_class_for(diagnostic.category),
            stacklevel=self.stacklevel,
        )


@dataclass(slots=True)
class CollectingReporter:
    """Keep warnings instead of emitting them.

    Example:
        >>> from qqescape import ByteCursor, decode_octal_escape
        >>> reporter = CollectingReporter()
        >>> decode_octal_escape(ByteCursor.over(b"o{9}"), reporter=reporter).codepoint
        0
        >>> reporter.messages[0].startswith("Non-octal character '9'")
        True
    """

    outcomes: list[WarningOutcome] = field(default_factory=list)

    def report(self, diagnostic: Diagnostic) -> None:
        logger.debug("Collected escape warning [%s]", diagnostic.code.name)
        self.outcomes.append(WarningOutcome.from_diagnostic(diagnostic))

    def __iter__(self) -> Iterator[WarningOutcome]:
        return iter(self.outcomes)

    def __len__(self) -> int:
        return len(self.outcomes)

    @property
    def messages(self) -> list[str]:
        """Collected warning texts, in report order."""
        return [outcome.message for outcome in self.outcomes]

    @property
    def categories(self) -> WarningCategory:
        """Packed mask of every collected category."""
        packed = WarningCategory.NONE
        for outcome in self.outcomes:
            packed |= outcome.category
        return packed

    def clear(self) -> None:
        """Forget all collected warnings."""
        self.outcomes.clear()


def resolve_reporter(reporter: Reporter | None) -> Reporter:
    """Return ``reporter``, or a fresh EmittingReporter when None."""
    return EmittingReporter() if reporter is None else reporter
