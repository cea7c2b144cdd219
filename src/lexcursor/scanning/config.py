"""Scanner configuration.

Provides a single frozen dataclass holding the tunable limits for a
scanning session.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from lexcursor.constants import MAX_SOURCE_SIZE
from lexcursor.diagnostics import ErrorTemplate, SourceTooLargeError

__all__ = ["ScanConfig"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable configuration for scanning sessions.

    Constructing ``ScanConfig()`` with no arguments produces the default
    configuration used when none is passed.

    Attributes:
        max_source_size: Maximum source length in characters (default: 10 Mi).
            Set to 0 to disable the limit (not recommended for untrusted input).

    Example:
        >>> config = ScanConfig(max_source_size=1024)
        >>> stream = tokens(source, classify, error_kind=Kind, config=config)
    """

    max_source_size: int = MAX_SOURCE_SIZE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_source_size is negative
        """
        if self.max_source_size < 0:
            msg = f"max_source_size must be >= 0, got {self.max_source_size}"
            raise ValueError(msg)
        if self.max_source_size == 0:
            logger.warning("ScanConfig created with max_source_size=0: source size limit disabled")

    def check_source_size(self, source: str) -> None:
        """Reject sources longer than max_source_size.

        Raises:
            SourceTooLargeError: If the limit is enabled and exceeded
        """
        if self.max_source_size > 0 and len(source) > self.max_source_size:
            raise SourceTooLargeError(
                ErrorTemplate.source_too_large(len(source), self.max_source_size)
            )


DEFAULT_CONFIG = ScanConfig()
