"""Command-line interface for the fifteen-level Sudoku game."""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from tqdm import tqdm

from .catalog import PuzzleCatalog, DEFAULT_CATALOG, verify_puzzle
from .config import GameConfig
from .core.board import SudokuBoard
from .errors import GameError
from .game import GameSession, MoveOutcome, format_time, key_to_value
from .visual import Visualizer

logger = logging.getLogger(__name__)

PLAY_HELP = """Commands:
  R C          select the cell at row R, column C (1-9)
  1-9          place a digit in the selected cell
  0 / del      erase the selected cell
  hint         reveal the selected cell (limited per level)
  check        list conflicting cells
  next / prev  move to the next / previous level
  new          replay the current level
  restart      start over from level 1 with a zero score
  help         show this help
  quit         leave the game
"""


def main(argv: Optional[List[str]] = None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Fifteen-level Sudoku game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List the levels and their difficulty
  python -m sudoku_levels.cli levels

  # Play from level 6
  python -m sudoku_levels.cli play --level 6

  # Save an image of level 12's clues
  python -m sudoku_levels.cli render --level 12 --output boards/level12.png
        """
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("levels", help="List levels with difficulty and clue count")

    show_parser = subparsers.add_parser("show", help="Print a level's puzzle")
    show_parser.add_argument(
        "--level", "-l", type=int, default=1,
        help="Level to show (default: 1)"
    )
    show_parser.add_argument(
        "--solution", action="store_true",
        help="Also print the solution"
    )

    subparsers.add_parser("check", help="Verify every puzzle in the catalog")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument(
        "--level", "-l", type=int, default=1,
        help="Level to start on (default: 1)"
    )
    play_parser.add_argument(
        "--chart", type=str, default=None,
        help="Save a per-level score chart here when the game ends"
    )

    render_parser = subparsers.add_parser("render", help="Save a board image")
    render_parser.add_argument(
        "--level", "-l", type=int, default=1,
        help="Level to render (default: 1)"
    )
    render_parser.add_argument(
        "--output", "-o", type=str, default="board.png",
        help="Output image path (default: board.png)"
    )
    render_parser.add_argument(
        "--solution", action="store_true",
        help="Render the solution instead of the clues"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logger.debug("Running command %s", args.command)

    try:
        if args.command == "levels":
            cmd_levels(args)
        elif args.command == "show":
            cmd_show(args)
        elif args.command == "check":
            cmd_check(args)
        elif args.command == "play":
            cmd_play(args)
        elif args.command == "render":
            cmd_render(args)
    except GameError as e:
        print(f"Error: {e}")
        sys.exit(1)


def cmd_levels(args, catalog: PuzzleCatalog = DEFAULT_CATALOG):
    """Handle the levels command."""
    print(f"{'Level':>5}  {'Difficulty':<10}  {'Clues':>5}")
    for puzzle in catalog:
        print(f"{puzzle.level:>5}  {puzzle.difficulty.label:<10}  {puzzle.clue_count:>5}")


def cmd_show(args, catalog: PuzzleCatalog = DEFAULT_CATALOG):
    """Handle the show command."""
    puzzle = catalog.get_puzzle(args.level)
    print(f"--- Level {puzzle.level} ({puzzle.difficulty.label}, {puzzle.clue_count} clues) ---")
    print(SudokuBoard(puzzle.clues))
    if args.solution:
        print("\nSolution:")
        print(SudokuBoard(puzzle.solution))


def cmd_check(args, catalog: PuzzleCatalog = DEFAULT_CATALOG):
    """Handle the check command."""
    problems = []
    for puzzle in tqdm(catalog, total=len(catalog), desc="Checking levels"):
        problems.extend(verify_puzzle(puzzle))

    if problems:
        for problem in problems:
            print(f"  ✗ {problem}")
        sys.exit(1)
    print(f"All {len(catalog)} levels OK")


def cmd_render(args, catalog: PuzzleCatalog = DEFAULT_CATALOG):
    """Handle the render command."""
    puzzle = catalog.get_puzzle(args.level)
    grid = puzzle.solution if args.solution else puzzle.clues
    path = Visualizer(output_dir=".").plot_board(
        grid,
        filename=args.output,
        clues=puzzle.clues,
        title=f"Level {puzzle.level} ({puzzle.difficulty.label})",
    )
    print(f"Board saved to {path}")


def print_status(session: GameSession) -> None:
    snap = session.snapshot()
    print(
        f"\nLevel {snap.current_level}/{snap.level_count} ({snap.difficulty.label})"
        f"  Time {format_time(snap.elapsed_seconds)}"
        f"  Score {snap.cumulative_score}"
        f"  Mistakes {snap.mistakes}"
        f"  Hints {snap.hints_remaining}"
    )
    print(SudokuBoard(session.grid))
    if snap.selected_cell is not None:
        row, col = snap.selected_cell
        print(f"Selected: row {row + 1}, column {col + 1}")


def report_move(session: GameSession, result) -> None:
    """Print feedback for a placement or hint."""
    if result.outcome is MoveOutcome.IGNORED:
        if session.selected_cell is None:
            print("Select a cell first")
        else:
            print("Nothing to do")
    elif result.outcome is MoveOutcome.INVALID:
        print(f"✗ {result.value} conflicts at row {result.row + 1}, column {result.col + 1}")
    elif result.outcome is MoveOutcome.COMPLETED:
        last = session.history[-1]
        print(f"\n*** Level {last.level} complete! ***")
        print(f"Time {format_time(last.elapsed_seconds)}  Mistakes {last.mistakes}  Score +{last.score}")
        if session.is_game_complete:
            print(f"\nAll levels complete! Total score: {session.cumulative_score}")
        else:
            print("Type 'next' for the next level or 'new' to replay")


def cmd_play(
    args,
    input_fn: Callable[[str], str] = input,
    catalog: PuzzleCatalog = DEFAULT_CATALOG,
):
    """Handle the play command."""
    session = GameSession(catalog=catalog, config=GameConfig.from_env(), start_level=args.level)
    print(PLAY_HELP)
    print_status(session)

    while True:
        try:
            line = input_fn("> ").strip()
        except EOFError:
            break
        session.catch_up()

        if not line:
            continue
        command = line.lower()
        parts = line.split()

        if command in ("quit", "q", "exit"):
            break
        elif command == "help":
            print(PLAY_HELP)
            continue
        elif len(parts) == 2 and all(p.isdigit() for p in parts):
            row, col = int(parts[0]) - 1, int(parts[1]) - 1
            if not (0 <= row < 9 and 0 <= col < 9):
                print("Rows and columns run from 1 to 9")
                continue
            if not session.select_cell(row, col):
                print("That cell is a clue")
                continue
        elif command in ("del", "delete", "backspace") or key_to_value(line) is not None:
            key = {"del": "Delete", "delete": "Delete", "backspace": "Backspace"}.get(command, line)
            report_move(session, session.place_number(key_to_value(key)))
        elif command == "hint":
            if session.hints_remaining <= 0:
                print("No hints left")
                continue
            report_move(session, session.use_hint())
        elif command == "check":
            conflicts = session.validate_current_grid()
            if conflicts:
                cells = ", ".join(f"({r + 1}, {c + 1})" for r, c in sorted(conflicts))
                print(f"There are some conflicts to fix ✗ {cells}")
            else:
                print("Puzzle looks good so far! ✓")
            continue
        elif command == "next":
            if not session.next_level():
                print("Already on the last level")
                continue
        elif command == "prev":
            if not session.previous_level():
                print("Already on the first level")
                continue
        elif command == "new":
            session.replay()
        elif command == "restart":
            session.restart()
        else:
            print(f"Unknown command: {line!r} (type 'help')")
            continue

        print_status(session)

    if session.history:
        print()
        print(Visualizer.summary_table(session.history))
        if args.chart:
            path = Visualizer(output_dir=".").plot_run_summary(session.history, filename=args.chart)
            print(f"Chart saved to {path}")

    return session


if __name__ == "__main__":
    main()
