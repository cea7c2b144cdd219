"""Shared constants for lexcursor.

Centralized configuration constants used across the scanning and
diagnostics packages. Placing them here avoids circular imports and
provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_SOURCE_SIZE",
    # Diagnostics
    "DIAGNOSTIC_PREVIEW_LENGTH",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 Mi code points).
# A scanning session never copies its buffer, but downstream consumers
# usually materialize every token; cap input to keep that bounded.
# 0 disables the check (see ScanConfig).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# DIAGNOSTICS
# ============================================================================

# Number of characters of remaining input quoted in contract-violation
# messages and in Cursor.__repr__.
DIAGNOSTIC_PREVIEW_LENGTH: int = 20
