"""Grid representation and placement helpers."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Tuple

from ..core.constants import ALPHABET, BLANK, DEFAULT_GRID_SIZE, Bounds, Direction
from ..core.exceptions import ConfigurationError
from ..core.models import Placement
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class GridConfig:
    """Configuration values driving the grid layout."""

    size: int = DEFAULT_GRID_SIZE

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ConfigurationError(f"Grid size must be positive, got {self.size}")

    def bounds(self) -> Bounds:
        return Bounds(rows=self.size, cols=self.size)


class WordGrid:
    """Square letter grid stored as one row-major buffer.

    A cell holds :data:`BLANK` until a word or the final fill writes it. Letters
    written by a placement are never replaced by a different letter; crossing
    words may only confirm them.
    """

    def __init__(self, config: GridConfig) -> None:
        self.size = config.size
        self.bounds = config.bounds()
        self.cells: List[str] = [BLANK] * (self.size * self.size)

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def _index(self, row: int, col: int) -> int:
        return row * self.size + col

    def cell(self, row: int, col: int) -> str:
        if not self.bounds.contains(row, col):
            raise IndexError(f"Cell outside grid: {(row, col)}")
        return self.cells[self._index(row, col)]

    def is_blank(self, row: int, col: int) -> bool:
        return self.cell(row, col) == BLANK

    def blank_count(self) -> int:
        return sum(1 for letter in self.cells if letter == BLANK)

    def rows(self) -> List[str]:
        """Return each grid row as a string."""
        return [
            "".join(self.cells[r * self.size:(r + 1) * self.size]) for r in range(self.size)
        ]

    def snapshot(self) -> Tuple[str, ...]:
        return tuple(self.cells)

    def restore(self, snapshot: Tuple[str, ...]) -> None:
        if len(snapshot) != len(self.cells):
            raise ValueError("Snapshot does not match grid size")
        self.cells = list(snapshot)

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def can_place(self, word: str, row: int, col: int, direction: Direction) -> bool:
        """Return True when ``word`` fits at ``(row, col)`` without a letter clash."""

        if not word:
            return False
        dr, dc = direction.step
        end_row = row + dr * (len(word) - 1)
        end_col = col + dc * (len(word) - 1)
        if not self.bounds.contains(row, col) or not self.bounds.contains(end_row, end_col):
            return False

        for i, letter in enumerate(word):
            current = self.cells[self._index(row + i * dr, col + i * dc)]
            if current != BLANK and current != letter:
                return False
        return True

    def place_word(self, word: str, row: int, col: int, direction: Direction) -> bool:
        """Write ``word`` along ``direction`` if every cell accepts it.

        Either the whole word is written or the grid is left untouched.
        """

        if not self.can_place(word, row, col, direction):
            return False
        dr, dc = direction.step
        for i, letter in enumerate(word):
            self.cells[self._index(row + i * dr, col + i * dc)] = letter
        return True

    def apply(self, placement: Placement) -> bool:
        return self.place_word(
            placement.word, placement.start_row, placement.start_col, placement.direction
        )

    def read_path(self, row: int, col: int, direction: Direction, length: int) -> str:
        dr, dc = direction.step
        return "".join(self.cell(row + i * dr, col + i * dc) for i in range(length))

    # ------------------------------------------------------------------
    # Fill
    # ------------------------------------------------------------------
    def fill_empty(self, rng: random.Random) -> int:
        """Replace every blank cell with a random uppercase letter.

        Returns the number of cells filled.
        """

        filled = 0
        for index, letter in enumerate(self.cells):
            if letter == BLANK:
                self.cells[index] = rng.choice(ALPHABET)
                filled += 1
        LOGGER.debug("Filled %d blank cells with noise letters", filled)
        return filled
