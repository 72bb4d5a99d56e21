# Area: Profile Tests
"""Tests for the profile stores and their fallback helpers."""

import json
from unittest.mock import MagicMock

import pytest

from emoji_hunt import (
    Difficulty,
    InMemoryProfileStore,
    JsonFileProfileStore,
    Profile,
    ProfileStoreError,
)
from emoji_hunt.profile_store import (
    DEFAULT_USERNAME,
    load_difficulty,
    load_high_score,
    load_username,
)


class TestProfileModel:
    """Tests for the Profile model."""

    def test_defaults(self):
        """Test that a fresh profile is empty with a zero high score."""
        profile = Profile()
        assert profile.username is None
        assert profile.difficulty is None
        assert profile.high_score == 0

    def test_username_is_stripped(self):
        """Test that usernames are trimmed and blanks become None."""
        assert Profile(username="  Ada ").username == "Ada"
        assert Profile(username="   ").username is None

    def test_negative_high_score_rejected(self):
        """Test that a negative high score fails validation."""
        with pytest.raises(ValueError):
            Profile(high_score=-1)


class TestInMemoryProfileStore:
    """Tests for InMemoryProfileStore."""

    def test_round_trip(self):
        """Test that stored values are read back."""
        store = InMemoryProfileStore()
        store.set_username("Ada")
        store.set_difficulty(Difficulty.HARD)
        store.set_high_score(1200)
        assert store.get_username() == "Ada"
        assert store.get_difficulty() == "Hard"
        assert store.get_high_score() == 1200

    def test_blank_username_clears(self):
        """Test that a blank username clears the stored one."""
        store = InMemoryProfileStore(Profile(username="Ada"))
        store.set_username("  ")
        assert store.get_username() is None


class TestJsonFileProfileStore:
    """Tests for JsonFileProfileStore."""

    def test_missing_file_reads_empty(self, tmp_path):
        """Test that a missing file reads as an empty profile."""
        store = JsonFileProfileStore(str(tmp_path / "profile.json"))
        assert store.get_username() is None
        assert store.get_difficulty() is None
        assert store.get_high_score() == 0

    def test_writes_json_document(self, tmp_path):
        """Test that setters write one JSON document, creating directories."""
        path = tmp_path / "nested" / "profile.json"
        store = JsonFileProfileStore(str(path))
        store.set_username("Ada")
        store.set_difficulty("easy")
        store.set_high_score(550)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == {"username": "Ada", "difficulty": "Easy", "high_score": 550}

    def test_two_stores_share_file(self, tmp_path):
        """Test that a second store sees what the first one wrote."""
        path = str(tmp_path / "profile.json")
        JsonFileProfileStore(path).set_high_score(90)
        assert JsonFileProfileStore(path).get_high_score() == 90

    def test_preserves_other_fields_on_update(self, tmp_path):
        """Test that updating one field keeps the others."""
        store = JsonFileProfileStore(str(tmp_path / "profile.json"))
        store.set_username("Ada")
        store.set_high_score(10)
        assert store.get_username() == "Ada"

    def test_corrupt_file_raises(self, tmp_path):
        """Test that malformed JSON raises ProfileStoreError on read."""
        path = tmp_path / "profile.json"
        path.write_text("{broken", encoding="utf-8")
        store = JsonFileProfileStore(str(path))
        with pytest.raises(ProfileStoreError) as exc_info:
            store.get_username()
        assert exc_info.value.operation == "read"
        assert exc_info.value.path == str(path)

    def test_invalid_values_raise(self, tmp_path):
        """Test that values failing validation raise ProfileStoreError."""
        path = tmp_path / "profile.json"
        path.write_text(json.dumps({"high_score": "lots"}), encoding="utf-8")
        with pytest.raises(ProfileStoreError):
            JsonFileProfileStore(str(path)).get_high_score()

    def test_unwritable_location_raises(self, tmp_path):
        """Test that a write under a regular file raises ProfileStoreError."""
        blocker = tmp_path / "file"
        blocker.write_text("", encoding="utf-8")
        store = JsonFileProfileStore(str(blocker / "profile.json"))
        with pytest.raises(ProfileStoreError) as exc_info:
            store.set_username("Ada")
        assert exc_info.value.operation == "write"


class TestFallbackHelpers:
    """Tests for load_difficulty(), load_username() and load_high_score()."""

    def failing_store(self):
        store = MagicMock()
        error = ProfileStoreError("/tmp/profile.json", "read", "disk on fire")
        store.get_difficulty.side_effect = error
        store.get_username.side_effect = error
        store.get_high_score.side_effect = error
        return store

    def test_stored_values(self):
        """Test that stored values are returned as they are."""
        store = InMemoryProfileStore(Profile(username="Ada", difficulty="Hard", high_score=7))
        assert load_difficulty(store) == Difficulty.HARD
        assert load_username(store) == "Ada"
        assert load_high_score(store) == 7

    def test_lowercase_difficulty_is_understood(self):
        """Test that a lowercase stored difficulty is parsed."""
        store = InMemoryProfileStore(Profile(difficulty="easy"))
        assert load_difficulty(store) == Difficulty.EASY

    def test_defaults_when_unset(self):
        """Test the Guest, Medium and 0 defaults for an empty profile."""
        store = InMemoryProfileStore()
        assert load_difficulty(store) == Difficulty.MEDIUM
        assert load_username(store) == DEFAULT_USERNAME
        assert load_high_score(store) == 0

    def test_defaults_on_store_failure(self):
        """Test that storage errors fall back to the defaults."""
        store = self.failing_store()
        assert load_difficulty(store) == Difficulty.MEDIUM
        assert load_username(store) == DEFAULT_USERNAME
        assert load_high_score(store) == 0
