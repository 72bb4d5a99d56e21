# Area: Shared
"""
emoji_hunt.config — Settings loader
====================================

Builds GameSettings from an optional JSON file and EMOJI_HUNT_*
environment variables. Environment values win over the file.

Example config file:
    {
        "max_level": 30,
        "base_time_limits": {"easy": 25, "medium": 15, "hard": 10},
        "hint_penalty_seconds": 2
    }
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError

from ._engine.enums import Difficulty
from .errors import ConfigurationError
from .settings import GameSettings

logger = logging.getLogger("emoji_hunt.config")

# Environment variable → settings field
ENV_MAPPINGS = {
    "EMOJI_HUNT_MIN_TIME_LIMIT": "min_time_limit",
    "EMOJI_HUNT_LEVEL_STEP_FOR_TIME": "level_step_for_time",
    "EMOJI_HUNT_BASE_EMOJI_COUNT": "base_emoji_count",
    "EMOJI_HUNT_EMOJI_INCREMENT": "emoji_increment_per_level",
    "EMOJI_HUNT_MAX_EMOJIS": "max_emojis",
    "EMOJI_HUNT_HINT_PENALTY": "hint_penalty_seconds",
    "EMOJI_HUNT_WRONG_PENALTY": "wrong_penalty_seconds",
    "EMOJI_HUNT_MAX_WRONG_ATTEMPTS": "max_wrong_attempts",
    "EMOJI_HUNT_MAX_LEVEL": "max_level",
    "EMOJI_HUNT_COMBO_WINDOW_MS": "combo_time_window_ms",
    "EMOJI_HUNT_COMBO_MAX": "combo_max_multiplier",
    "EMOJI_HUNT_TIME_WARNING": "time_warning_seconds",
}

# Environment variable → difficulty whose base time limit it sets
ENV_TIME_LIMITS = {
    "EMOJI_HUNT_TIME_EASY": Difficulty.EASY,
    "EMOJI_HUNT_TIME_MEDIUM": Difficulty.MEDIUM,
    "EMOJI_HUNT_TIME_HARD": Difficulty.HARD,
}


def _match_difficulty(key: Any) -> Optional[Difficulty]:
    if isinstance(key, Difficulty):
        return key
    if isinstance(key, str):
        wanted = key.strip().lower()
        for member in Difficulty:
            if wanted in (member.value.lower(), member.name.lower()):
                return member
    return None


def _normalize_time_limits(raw: Mapping[Any, Any], errors: List[str]) -> Dict[Difficulty, Any]:
    """Map difficulty keys of any case onto Difficulty members."""
    limits = GameSettings().base_time_limits.copy()
    for key, value in raw.items():
        difficulty = _match_difficulty(key)
        if difficulty is None:
            errors.append(f"base_time_limits: unknown difficulty '{key}'")
            continue
        limits[difficulty] = value
    return limits


def read_config_file(path: str) -> Dict[str, Any]:
    """Read a JSON config file. A missing file yields an empty dict."""
    config_path = Path(path)
    if not config_path.exists():
        logger.warning(f"Config file not found: {config_path}; using defaults")
        return {}
    try:
        with open(config_path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(str(config_path), {}, [str(e)]) from e
    if not isinstance(data, dict):
        raise ConfigurationError(
            str(config_path), {"value": data}, ["Top-level value must be an object"]
        )
    return data


def collect_env_overrides(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Pick EMOJI_HUNT_* settings out of the environment."""
    environ = os.environ if environ is None else environ
    overrides: Dict[str, Any] = {}

    for env_key, field_name in ENV_MAPPINGS.items():
        if env_key in environ:
            overrides[field_name] = environ[env_key]

    time_limits = {
        difficulty.value: environ[env_key]
        for env_key, difficulty in ENV_TIME_LIMITS.items()
        if env_key in environ
    }
    if time_limits:
        overrides["base_time_limits"] = time_limits
    return overrides


def load_settings(
    config_path: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> GameSettings:
    """
    Load and validate game settings.

    Args:
        config_path: Optional JSON file with settings fields
        environ: Environment mapping (defaults to os.environ)

    Raises:
        ConfigurationError: If the file is unreadable or a value is invalid
    """
    raw: Dict[str, Any] = read_config_file(config_path) if config_path else {}
    env_overrides = collect_env_overrides(environ)

    file_limits = raw.get("base_time_limits")
    env_limits = env_overrides.pop("base_time_limits", None)
    raw.update(env_overrides)

    source = config_path or "environment"
    errors: List[str] = []
    if file_limits is not None or env_limits is not None:
        merged: Dict[Any, Any] = {}
        if isinstance(file_limits, Mapping):
            merged.update(file_limits)
        elif file_limits is not None:
            errors.append("base_time_limits: must be an object")
        if env_limits:
            merged.update(env_limits)
        raw["base_time_limits"] = _normalize_time_limits(merged, errors)

    unknown = sorted(set(raw) - set(GameSettings.model_fields))
    for key in unknown:
        logger.warning(f"Ignoring unknown setting '{key}'")
        raw.pop(key)

    if errors:
        raise ConfigurationError(source, raw, errors)

    try:
        settings = GameSettings.model_validate(raw)
    except ValidationError as e:
        messages = [
            f"{'.'.join(str(part) for part in err['loc']) or 'settings'}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigurationError(source, raw, messages) from e

    if raw:
        logger.info(f"Settings loaded from {source}: {sorted(raw)}")
    return settings
