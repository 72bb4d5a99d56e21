"""
emoji_hunt.errors — Custom exception classes
=============================================

Defines the exception hierarchy for the collaborators around the game
engine. The engine itself never raises for gameplay input; these errors
come from loading configuration and from profile storage.
Each exception stores full context for structured logging.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
import json


class EmojiHuntError(Exception):
    """Base exception for all Emoji Hunt package errors."""
    pass


class ConfigurationError(EmojiHuntError):
    """Raised when game settings fail validation."""

    def __init__(
        self,
        source: str,
        raw_values: Dict[str, Any],
        validation_errors: List[str],
    ):
        self.source = source
        self.raw_values = raw_values
        self.validation_errors = validation_errors
        super().__init__(
            f"Invalid settings from {source}: {validation_errors}"
        )

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="CONFIGURATION_ERROR",
            subject=self.source,
            payload=self.raw_values,
            validation_errors=self.validation_errors,
        )


class ProfileStoreError(EmojiHuntError):
    """Raised when a profile store cannot read or write its backing file."""

    def __init__(self, path: str, operation: str, reason: str):
        self.path = path
        self.operation = operation
        self.reason = reason
        super().__init__(f"Profile {operation} failed for '{path}': {reason}")

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="PROFILE_STORE_ERROR",
            subject=self.path,
            payload={"operation": self.operation},
            validation_errors=[self.reason],
        )


def _format_error_block(
    error_type: str,
    subject: str,
    payload: Optional[Dict[str, Any]],
    validation_errors: Optional[List[str]],
) -> str:
    """Format a structured error block for terminal and log output."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " EMOJI HUNT ERROR",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Source:       {subject}",
    ]

    if payload is not None:
        lines.append("")
        lines.append(" ── PAYLOAD " + "─" * 52)
        lines.append(_indent_json(payload))

    if validation_errors:
        lines.append("")
        lines.append(" ── ERRORS " + "─" * 53)
        for error in validation_errors:
            lines.append(f" • {error}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str, ensure_ascii=False)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
