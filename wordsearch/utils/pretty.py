"""Pretty-print helpers for word search grids."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from ..engine.generator import PuzzleResult
    from ..engine.grid import WordGrid


def format_grid(grid: WordGrid) -> str:
    """Render the grid with column and row indices, three characters per cell."""

    header = "   " + "".join(f"{c:>2} " for c in range(grid.size))
    lines = [header]
    for r, row in enumerate(grid.rows()):
        cells = "".join(f" {letter} " for letter in row)
        lines.append(f"{r:>2} {cells}")
    return "\n".join(lines)


def format_word_list(words: Sequence[str]) -> str:
    return "\n".join(words)


def pretty_print_grid(grid: WordGrid, *, label: str | None = None, stream=None) -> None:
    """Print the word search grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid), file=stream)


def print_word_list(words: Sequence[str], *, stream=None) -> None:
    stream = stream or sys.stdout
    print("\nWords to find:", file=stream)
    for word in words:
        print(word, file=stream)


def print_puzzle_stats(result: PuzzleResult, *, stream=None) -> None:
    """Print a short placement summary for a finished puzzle."""

    stream = stream or sys.stdout
    print(file=stream)
    print("--- Puzzle ---", file=stream)
    print(f"  Size:          {result.grid.size} x {result.grid.size}", file=stream)
    print(f"  Selected:      {len(result.selected_words)}", file=stream)
    print(f"  Placed:        {len(result.placed_words)}", file=stream)
    if result.unplaced_words:
        print(f"  Unplaced:      {', '.join(result.unplaced_words)}", file=stream)
    if result.seed is not None:
        print(f"  Seed:          {result.seed}", file=stream)
