# Area: Shared
"""
Shared utilities for the engine and its shells.

This package contains:
- Logging configuration
"""

from .logging_config import (
    setup_logging,
    log_error,
    TerminalFormatter,
    JSONFormatter,
)

__all__ = [
    "setup_logging",
    "log_error",
    "TerminalFormatter",
    "JSONFormatter",
]
