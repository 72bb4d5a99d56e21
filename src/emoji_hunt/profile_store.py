# Area: Profile
"""
emoji_hunt.profile_store — Player profile storage
==================================================

The ProfileStore interface is what shells use to remember the player's
name, preferred difficulty and high score. The engine never touches it.

Two implementations ship with the package:
- InMemoryProfileStore: for tests and throwaway sessions
- JsonFileProfileStore: one JSON document on disk

Storage failures raise ProfileStoreError. Shells must catch it, log it
and carry on with defaults; a broken disk never stops a game.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from ._engine.enums import Difficulty
from .errors import ProfileStoreError

logger = logging.getLogger("emoji_hunt.profile")

DEFAULT_USERNAME = "Guest"


class Profile(BaseModel):
    """Persisted player profile."""

    username: Optional[str] = None
    difficulty: Optional[str] = None
    high_score: int = Field(default=0, ge=0)

    @field_validator("username")
    @classmethod
    def _strip_username(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        return value or None


class ProfileStore(ABC):
    """Abstract player profile storage."""

    @abstractmethod
    def get_username(self) -> Optional[str]:
        """Stored player name, or None if never set."""

    @abstractmethod
    def set_username(self, username: str) -> None:
        """Store the player name."""

    @abstractmethod
    def get_difficulty(self) -> Optional[str]:
        """Stored difficulty preference as entered, or None."""

    @abstractmethod
    def set_difficulty(self, difficulty: Difficulty) -> None:
        """Store the difficulty preference."""

    @abstractmethod
    def get_high_score(self) -> int:
        """Best score so far (0 if none)."""

    @abstractmethod
    def set_high_score(self, score: int) -> None:
        """Store a new best score."""


class InMemoryProfileStore(ProfileStore):
    """Profile kept in memory for the lifetime of the process."""

    def __init__(self, profile: Optional[Profile] = None) -> None:
        self.profile = profile or Profile()

    def get_username(self) -> Optional[str]:
        return self.profile.username

    def set_username(self, username: str) -> None:
        self.profile = self.profile.model_copy(update={"username": username.strip() or None})

    def get_difficulty(self) -> Optional[str]:
        return self.profile.difficulty

    def set_difficulty(self, difficulty: Difficulty) -> None:
        self.profile = self.profile.model_copy(
            update={"difficulty": Difficulty.parse(difficulty).value}
        )

    def get_high_score(self) -> int:
        return self.profile.high_score

    def set_high_score(self, score: int) -> None:
        self.profile = self.profile.model_copy(update={"high_score": max(0, int(score))})


class JsonFileProfileStore(ProfileStore):
    """
    Profile persisted as a single JSON document.

    The file is read on every get and rewritten on every set, so several
    shells pointed at the same file see each other's changes. A missing
    file reads as an empty profile.
    """

    def __init__(self, path: str) -> None:
        self.path = Path(path)

    def _load(self) -> Profile:
        if not self.path.exists():
            return Profile()
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
            return Profile.model_validate(data)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            raise ProfileStoreError(str(self.path), "read", str(e)) from e

    def _save(self, profile: Profile) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(profile.model_dump_json(indent=2))
        except OSError as e:
            raise ProfileStoreError(str(self.path), "write", str(e)) from e
        logger.debug(f"Profile saved to {self.path}")

    def _update(self, **changes) -> None:
        self._save(self._load().model_copy(update=changes))

    def get_username(self) -> Optional[str]:
        return self._load().username

    def set_username(self, username: str) -> None:
        self._update(username=username.strip() or None)

    def get_difficulty(self) -> Optional[str]:
        return self._load().difficulty

    def set_difficulty(self, difficulty: Difficulty) -> None:
        self._update(difficulty=Difficulty.parse(difficulty).value)

    def get_high_score(self) -> int:
        return self._load().high_score

    def set_high_score(self, score: int) -> None:
        self._update(high_score=max(0, int(score)))


def load_difficulty(store: ProfileStore) -> Difficulty:
    """Preferred difficulty, falling back to Medium on any failure."""
    try:
        return Difficulty.parse(store.get_difficulty())
    except ProfileStoreError as e:
        logger.warning(f"Could not read difficulty preference: {e}")
        return Difficulty.MEDIUM


def load_username(store: ProfileStore) -> str:
    """Player name, falling back to the guest name on any failure."""
    try:
        return store.get_username() or DEFAULT_USERNAME
    except ProfileStoreError as e:
        logger.warning(f"Could not read username: {e}")
        return DEFAULT_USERNAME


def load_high_score(store: ProfileStore) -> int:
    """Stored high score, falling back to 0 on any failure."""
    try:
        return store.get_high_score()
    except ProfileStoreError as e:
        logger.warning(f"Could not read high score: {e}")
        return 0
