"""Process-wide decoder configuration.

Provides a single frozen dataclass holding the settings every decoder reads:
which warning categories are enabled and the maximum legal codepoint. The
active configuration is replaced atomically; decoders only ever read it.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, replace

from qqescape.constants import (
    MAX_LEGAL_CODEPOINT,
    MAX_UNSIGNED_CODEPOINT,
    MIN_CONFIGURABLE_CODEPOINT,
)
from qqescape.enums import WarningCategory

__all__ = ["EscapeConfig", "configured", "get_config", "set_config"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EscapeConfig:
    """Immutable configuration for escape decoding.

    Constructing ``EscapeConfig()`` with no arguments produces the default
    policy: every warning category enabled, codepoints up to
    ``MAX_LEGAL_CODEPOINT``.

    Attributes:
        enabled_warnings: Categories that decoders report (default: ALL).
            A disabled category is never built, emitted, or collected.
        max_codepoint: Largest value a braced escape may decode to
            (default: 2**63 - 1). Must lie in [0xFF, 2**64 - 1].

    Example:
        >>> from qqescape.config import EscapeConfig
        >>> from qqescape.enums import WarningCategory
        >>> config = EscapeConfig(enabled_warnings=WarningCategory.DIGIT)
        >>> config.is_category_enabled(WarningCategory.SYNTAX)
        False
        >>> EscapeConfig(max_codepoint=0x10FFFF).max_codepoint
        1114111
    """

    enabled_warnings: WarningCategory = WarningCategory.ALL
    max_codepoint: int = MAX_LEGAL_CODEPOINT

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_codepoint is outside [0xFF, 2**64 - 1].
            TypeError: If enabled_warnings is not a WarningCategory, or
                max_codepoint is not an int.
        """
        if not isinstance(self.enabled_warnings, WarningCategory):
            msg = (
                "enabled_warnings must be a WarningCategory, "
                f"got {type(self.enabled_warnings).__name__}"
            )
            raise TypeError(msg)
        if isinstance(self.max_codepoint, bool) or not isinstance(self.max_codepoint, int):
            msg = f"max_codepoint must be an int, got {type(self.max_codepoint).__name__}"
            raise TypeError(msg)
        if not MIN_CONFIGURABLE_CODEPOINT <= self.max_codepoint <= MAX_UNSIGNED_CODEPOINT:
            msg = (
                f"max_codepoint must be between 0x{MIN_CONFIGURABLE_CODEPOINT:X} and "
                f"0x{MAX_UNSIGNED_CODEPOINT:X}, got 0x{self.max_codepoint:X}"
            )
            raise ValueError(msg)

    def is_category_enabled(self, category: WarningCategory) -> bool:
        """Return True if every bit of ``category`` is enabled."""
        return bool(category) and (self.enabled_warnings & category) == category


_lock = threading.Lock()
_active = EscapeConfig()


def get_config() -> EscapeConfig:
    """Return the active process-wide configuration."""
    return _active


def set_config(config: EscapeConfig) -> EscapeConfig:
    """Install ``config`` as the active configuration.

    Args:
        config: New configuration

    Returns:
        The configuration that was active before the call

    Raises:
        TypeError: If config is not an EscapeConfig
    """
    if not isinstance(config, EscapeConfig):
        msg = f"set_config() requires an EscapeConfig, got {type(config).__name__}"
        raise TypeError(msg)
    global _active  # noqa: PLW0603 - single process-wide setting
    with _lock:
        previous = _active
        _active = config
    logger.debug("Escape configuration changed: %s", config)
    return previous


@contextmanager
def configured(
    *,
    enabled_warnings: WarningCategory | None = None,
    max_codepoint: int | None = None,
) -> Iterator[EscapeConfig]:
    """Temporarily override fields of the active configuration.

    Example:
        >>> from qqescape.enums import WarningCategory
        >>> with configured(enabled_warnings=WarningCategory.NONE) as config:
        ...     config.is_category_enabled(WarningCategory.DIGIT)
        False
    """
    changes: dict[str, object] = {}
    if enabled_warnings is not None:
        changes["enabled_warnings"] = enabled_warnings
    if max_codepoint is not None:
        changes["max_codepoint"] = max_codepoint
    config = replace(get_config(), **changes)  # type: ignore[arg-type]
    previous = set_config(config)
    try:
        yield config
    finally:
        set_config(previous)
