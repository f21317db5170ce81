"""Chart and board images for levels and completed runs."""

from __future__ import annotations
import os
from typing import Iterable, List, Optional, Sequence, Set, Tuple

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from ..catalog import Difficulty
from ..core.board import GridLike, as_array
from ..game.scoring import LevelResult


class Visualizer:
    """
    Image generator for the terminal front-end.

    Draws single boards and a per-level score summary of a run.
    """

    # Color per difficulty tier
    COLORS = {
        Difficulty.EASY: "#2ecc71",     # Green
        Difficulty.MEDIUM: "#f39c12",   # Orange
        Difficulty.HARD: "#e74c3c",     # Red
    }

    CLUE_COLOR = "#2d3748"
    PLAYER_COLOR = "#3498db"
    CONFLICT_COLOR = "#f56565"

    def __init__(self, output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            output_dir: Directory relative paths are saved under.
        """
        self.output_dir = output_dir
        sns.set_theme(style="whitegrid")

    def _resolve(self, filename: str) -> str:
        path = filename if os.path.isabs(filename) else os.path.join(self.output_dir, filename)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        return path

    def plot_board(
        self,
        grid: GridLike,
        filename: str = "board.png",
        clues: Optional[GridLike] = None,
        conflicts: Iterable[Tuple[int, int]] = (),
        title: Optional[str] = None,
    ) -> str:
        """
        Draw a 9x9 board.

        Args:
            grid: Values to draw, 0 for blank.
            filename: Output file name (or absolute path).
            clues: Clue grid; clue cells are drawn dark, the rest blue.
            conflicts: Cells to shade as conflicts.
            title: Optional figure title.

        Returns:
            Path of the saved image.
        """
        values = as_array(grid)
        clue_mask = as_array(clues) != 0 if clues is not None else values != 0
        conflict_set: Set[Tuple[int, int]] = set(conflicts)

        fig, ax = plt.subplots(figsize=(6, 6))
        shade = np.zeros((9, 9))
        for r, c in conflict_set:
            shade[r, c] = 1.0
        ax.imshow(shade, cmap=sns.light_palette(self.CONFLICT_COLOR, as_cmap=True),
                  vmin=0, vmax=1.0, aspect='equal')

        for r in range(9):
            for c in range(9):
                val = int(values[r, c])
                if val == 0:
                    continue
                color = self.CLUE_COLOR if clue_mask[r, c] else self.PLAYER_COLOR
                ax.text(c, r, str(val), ha='center', va='center',
                        fontsize=16, fontweight='bold' if clue_mask[r, c] else 'normal',
                        color=color)

        for i in range(10):
            lw = 2.5 if i % 3 == 0 else 0.5
            ax.axhline(i - 0.5, color=self.CLUE_COLOR, linewidth=lw)
            ax.axvline(i - 0.5, color=self.CLUE_COLOR, linewidth=lw)

        ax.set_xlim(-0.5, 8.5)
        ax.set_ylim(8.5, -0.5)
        ax.set_xticks([])
        ax.set_yticks([])
        ax.grid(False)
        if title:
            ax.set_title(title, fontsize=14, fontweight='bold')

        plt.tight_layout()
        path = self._resolve(filename)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

    def plot_run_summary(self, results: Sequence[LevelResult], filename: str = "run_summary.png") -> str:
        """
        Create a bar chart of the score earned on each completed level.

        Raises:
            ValueError: If there are no results to plot.
        """
        if not results:
            raise ValueError("No completed levels to plot")

        fig, ax = plt.subplots(figsize=(10, 6))

        labels = [str(r.level) for r in results]
        scores = [r.score for r in results]
        colors = [self.COLORS[Difficulty.for_level(r.level)] for r in results]

        bars = ax.bar(labels, scores, color=colors, edgecolor='black', linewidth=0.5)

        for bar, result in zip(bars, results):
            height = bar.get_height()
            ax.annotate(f'{result.score}\n{result.mistakes} err',
                        xy=(bar.get_x() + bar.get_width() / 2, height),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=8)

        handles = [plt.Rectangle((0, 0), 1, 1, color=color) for color in self.COLORS.values()]
        ax.legend(handles, [d.label for d in self.COLORS], title='Difficulty')

        ax.set_xlabel('Level', fontsize=12)
        ax.set_ylabel('Score', fontsize=12)
        ax.set_title(f'Score by Level (total {sum(scores)})', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0, top=max(scores) * 1.2 + 1)

        plt.tight_layout()
        path = self._resolve(filename)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

    @staticmethod
    def summary_table(results: Sequence[LevelResult]) -> str:
        """Markdown table of a run's completed levels."""
        lines: List[str] = [
            "| Level | Difficulty | Time (s) | Mistakes | Hints | Score |",
            "|-------|------------|----------|----------|-------|-------|",
        ]
        for r in results:
            lines.append(
                f"| {r.level} | {Difficulty.for_level(r.level).label} | {r.elapsed_seconds} "
                f"| {r.mistakes} | {r.hints_used} | {r.score} |"
            )
        lines.append(f"\nTotal score: {sum(r.score for r in results)}")
        return "\n".join(lines)
