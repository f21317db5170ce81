"""Tests for board and run summary images."""

import os

import pytest
from sudoku_levels.catalog import DEFAULT_CATALOG
from sudoku_levels.game.scoring import LevelResult
from sudoku_levels.visual import Visualizer


@pytest.fixture
def results():
    return [
        LevelResult(level=1, elapsed_seconds=42, mistakes=1, hints_used=0, score=348),
        LevelResult(level=6, elapsed_seconds=310, mistakes=0, hints_used=2, score=100),
        LevelResult(level=11, elapsed_seconds=900, mistakes=12, hints_used=3, score=0),
    ]


class TestVisualizer:
    """Tests for Visualizer output files."""

    def test_plot_board(self, tmp_path):
        """Test a board image is written under the output directory."""
        puzzle = DEFAULT_CATALOG.get_puzzle(3)
        viz = Visualizer(output_dir=str(tmp_path))
        path = viz.plot_board(puzzle.solution, clues=puzzle.clues,
                              conflicts={(0, 0)}, title="Level 3")

        assert path == os.path.join(str(tmp_path), "board.png")
        assert os.path.getsize(path) > 0

    def test_plot_board_creates_subdirectory(self, tmp_path):
        """Test nested file names get their directory created."""
        viz = Visualizer(output_dir=str(tmp_path))
        path = viz.plot_board(DEFAULT_CATALOG.get_puzzle(1).clues, filename="boards/one.png")
        assert os.path.exists(path)

    def test_plot_run_summary(self, tmp_path, results):
        """Test the per-level score chart is written."""
        viz = Visualizer(output_dir=str(tmp_path))
        path = viz.plot_run_summary(results)
        assert os.path.basename(path) == "run_summary.png"
        assert os.path.getsize(path) > 0

    def test_plot_run_summary_needs_results(self, tmp_path):
        """Test an empty run is refused."""
        with pytest.raises(ValueError):
            Visualizer(output_dir=str(tmp_path)).plot_run_summary([])

    def test_summary_table(self, results):
        """Test the markdown table lists each level and the total."""
        table = Visualizer.summary_table(results)
        assert "| 1 | Easy | 42 | 1 | 0 | 348 |" in table
        assert "| 11 | Hard | 900 | 12 | 3 | 0 |" in table
        assert table.endswith("Total score: 448")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
