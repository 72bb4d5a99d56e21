# Area: Shared Tests
"""Tests for GameSettings validation and the settings loader."""

import json
import logging

import pytest
from pydantic import ValidationError

from emoji_hunt import ConfigurationError, Difficulty, GameSettings, load_settings
from emoji_hunt.config import collect_env_overrides, read_config_file


class TestGameSettings:
    """Tests for the GameSettings model."""

    def test_defaults(self):
        """Test the shipped default constants."""
        settings = GameSettings()
        assert settings.base_time_for(Difficulty.EASY) == 20
        assert settings.base_time_for(Difficulty.MEDIUM) == 14
        assert settings.base_time_for(Difficulty.HARD) == 8
        assert settings.max_level == 50
        assert settings.max_emojis == 36
        assert settings.combo_time_window_ms == 3000
        assert settings.combo_max_multiplier == 5

    def test_is_frozen(self):
        """Test that settings cannot be changed after creation."""
        settings = GameSettings()
        with pytest.raises(ValidationError):
            settings.max_level = 10

    def test_rejects_missing_difficulty(self):
        """Test that every difficulty needs a base time limit."""
        with pytest.raises(ValidationError, match="missing difficulties"):
            GameSettings(base_time_limits={Difficulty.EASY: 20})

    def test_rejects_non_positive_time_limit(self):
        """Test that a zero base time limit is rejected."""
        with pytest.raises(ValidationError, match="must be positive"):
            GameSettings(base_time_limits={
                Difficulty.EASY: 0, Difficulty.MEDIUM: 14, Difficulty.HARD: 8,
            })

    def test_rejects_base_count_above_cap(self):
        """Test that the level 1 pool cannot exceed the cap."""
        with pytest.raises(ValidationError, match="base_emoji_count"):
            GameSettings(base_emoji_count=40, max_emojis=36)

    def test_rejects_zero_wrong_attempts(self):
        """Test that at least one wrong attempt must be allowed."""
        with pytest.raises(ValidationError):
            GameSettings(max_wrong_attempts=0)


class TestReadConfigFile:
    """Tests for read_config_file()."""

    def test_missing_file_returns_empty(self, tmp_path, caplog):
        """Test that a missing file is warned about and yields no values."""
        with caplog.at_level(logging.WARNING, logger="emoji_hunt.config"):
            assert read_config_file(str(tmp_path / "nope.json")) == {}
        assert "Config file not found" in caplog.text

    def test_invalid_json_raises(self, tmp_path):
        """Test that malformed JSON raises ConfigurationError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError) as exc_info:
            read_config_file(str(path))
        assert exc_info.value.source == str(path)

    def test_non_object_raises(self, tmp_path):
        """Test that a top-level JSON array is rejected."""
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="must be an object"):
            read_config_file(str(path))


class TestCollectEnvOverrides:
    """Tests for collect_env_overrides()."""

    def test_maps_known_variables(self):
        """Test that EMOJI_HUNT_* variables map onto settings fields."""
        overrides = collect_env_overrides({
            "EMOJI_HUNT_MAX_LEVEL": "30",
            "EMOJI_HUNT_TIME_HARD": "6",
            "UNRELATED": "x",
        })
        assert overrides == {
            "max_level": "30",
            "base_time_limits": {"Hard": "6"},
        }

    def test_empty_environment(self):
        """Test that an empty environment gives no overrides."""
        assert collect_env_overrides({}) == {}


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_defaults_without_sources(self):
        """Test that no file and no environment give the defaults."""
        assert load_settings(environ={}) == GameSettings()

    def test_file_values(self, tmp_path):
        """Test that file values override the defaults."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({
            "max_level": 30,
            "hint_penalty_seconds": 2,
            "base_time_limits": {"easy": 25},
        }), encoding="utf-8")

        settings = load_settings(str(path), environ={})
        assert settings.max_level == 30
        assert settings.hint_penalty_seconds == 2
        assert settings.base_time_for(Difficulty.EASY) == 25
        assert settings.base_time_for(Difficulty.HARD) == 8

    def test_environment_wins_over_file(self, tmp_path):
        """Test that environment values take precedence over the file."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({
            "max_level": 30,
            "base_time_limits": {"Easy": 25},
        }), encoding="utf-8")

        settings = load_settings(str(path), environ={
            "EMOJI_HUNT_MAX_LEVEL": "10",
            "EMOJI_HUNT_TIME_EASY": "12",
        })
        assert settings.max_level == 10
        assert settings.base_time_for(Difficulty.EASY) == 12

    def test_unknown_keys_are_ignored(self, tmp_path, caplog):
        """Test that unknown keys are warned about and dropped."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"volume": 11}), encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="emoji_hunt.config"):
            settings = load_settings(str(path), environ={})
        assert settings == GameSettings()
        assert "Ignoring unknown setting 'volume'" in caplog.text

    def test_invalid_value_raises_configuration_error(self):
        """Test that a non-numeric value is reported per field."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(environ={"EMOJI_HUNT_MAX_LEVEL": "many"})
        error = exc_info.value
        assert error.source == "environment"
        assert any(msg.startswith("max_level:") for msg in error.validation_errors)

    def test_unknown_difficulty_raises(self, tmp_path):
        """Test that an unknown difficulty key is rejected."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"base_time_limits": {"nightmare": 3}}), encoding="utf-8")
        with pytest.raises(ConfigurationError, match="unknown difficulty 'nightmare'"):
            load_settings(str(path), environ={})

    def test_time_limits_must_be_object(self, tmp_path):
        """Test that base_time_limits must be a JSON object."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"base_time_limits": 5}), encoding="utf-8")
        with pytest.raises(ConfigurationError, match="must be an object"):
            load_settings(str(path), environ={})
