"""Unit tests for configuration."""

from dataclasses import fields

import pytest
from sudoku_levels.catalog import PuzzleCatalog
from sudoku_levels.catalog.puzzles import PUZZLES
from sudoku_levels.config import GameConfig
from sudoku_levels.game import GameSession


class TestGameConfig:
    """Tests for GameConfig defaults and environment overrides."""

    def test_defaults(self):
        """Test the standard rule constants."""
        config = GameConfig()
        assert config.hints_per_level == 3
        assert (config.base_points, config.time_bonus_window, config.mistake_penalty) == (100, 300, 10)

    def test_from_env_without_overrides(self, monkeypatch):
        """Test that an empty environment gives the defaults."""
        for name in ("SUDOKU_HINTS_PER_LEVEL", "SUDOKU_BASE_POINTS",
                     "SUDOKU_TIME_BONUS_WINDOW", "SUDOKU_MISTAKE_PENALTY"):
            monkeypatch.delenv(name, raising=False)
        assert GameConfig.from_env() == GameConfig()

    def test_from_env_overrides(self, monkeypatch):
        """Test environment variables override the defaults."""
        monkeypatch.setenv("SUDOKU_HINTS_PER_LEVEL", "5")
        monkeypatch.setenv("SUDOKU_MISTAKE_PENALTY", "20")
        config = GameConfig.from_env()
        assert config.hints_per_level == 5
        assert config.mistake_penalty == 20
        assert config.base_points == 100

    def test_level_count_comes_from_catalog(self):
        """The number of levels is a property of the catalog, not of the rules."""
        assert "level_count" not in {f.name for f in fields(GameConfig)}
        session = GameSession(catalog=PuzzleCatalog({1: PUZZLES[1]}), config=GameConfig())
        assert session.snapshot().level_count == 1
        assert not session.next_level()

    @pytest.mark.parametrize("raw", ["three", "-1"])
    def test_from_env_rejects_bad_values(self, monkeypatch, raw):
        """Test non-integer and negative overrides are refused."""
        monkeypatch.setenv("SUDOKU_HINTS_PER_LEVEL", raw)
        with pytest.raises(ValueError):
            GameConfig.from_env()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
