# Area: Engine Tests
"""Tests for vocabulary normalisation and event payloads."""

import dataclasses

import pytest

from emoji_hunt import RoundLost, RoundStarted, RoundWon
from emoji_hunt.vocabulary import DEFAULT_EMOJIS, normalize_vocabulary


class TestNormalizeVocabulary:
    """Tests for normalize_vocabulary()."""

    def test_default_set_is_unique(self):
        """Test that the default set has no duplicates and fills a full grid."""
        assert len(DEFAULT_EMOJIS) == len(set(DEFAULT_EMOJIS))
        assert len(DEFAULT_EMOJIS) >= 36

    def test_none_uses_default(self):
        """Test that None selects the default set."""
        assert normalize_vocabulary(None) == DEFAULT_EMOJIS

    def test_removes_duplicates_and_blanks(self):
        """Test that duplicates and blanks are removed in order."""
        assert normalize_vocabulary(["🐶", "", "🐱", "🐶", "  ", None, "🐭"]) == ("🐶", "🐱", "🐭")

    def test_empty_falls_back(self):
        """Test that an empty vocabulary falls back to the default set."""
        assert normalize_vocabulary([]) == DEFAULT_EMOJIS
        assert normalize_vocabulary(["", " "]) == DEFAULT_EMOJIS


class TestEventPayloads:
    """Tests for event dataclasses."""

    def test_round_started_to_dict_lists_candidates(self):
        """Test that candidates serialize as a list."""
        event = RoundStarted(level=1, target="a", candidates=("a", "b"), columns=2, time_limit=20)
        assert event.to_dict()["candidates"] == ["a", "b"]

    def test_round_won_to_dict(self):
        """Test that RoundWon serializes every field."""
        event = RoundWon(
            level=3, time_taken=4, stars=3, score=900,
            score_gained=300, combo=2, difficulty="Easy",
        )
        assert event.to_dict() == {
            "level": 3, "time_taken": 4, "stars": 3, "score": 900,
            "score_gained": 300, "combo": 2, "difficulty": "Easy",
        }

    def test_round_lost_reason_defaults_to_none(self):
        """Test that RoundLost has no reason by default."""
        assert RoundLost(level=1, score=0, difficulty="Medium").reason is None

    def test_events_are_frozen(self):
        """Test that events cannot be modified."""
        event = RoundLost(level=1, score=0, difficulty="Medium")
        with pytest.raises(dataclasses.FrozenInstanceError):
            event.level = 2
