"""Shared constants and enumerations for the word search generator."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


BLANK = " "
ALPHABET = string.ascii_uppercase

DEFAULT_GRID_SIZE = 20
DEFAULT_MIN_WORDS = 10
DEFAULT_MAX_WORDS = 20
DEFAULT_MAX_ATTEMPTS = 100


class Direction(str, Enum):
    """Directions a word may run through the grid."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"
    DIAGONAL = "DIAGONAL"

    @property
    def step(self) -> Tuple[int, int]:
        """Row/column delta between consecutive letters."""
        return DIRECTION_STEPS[self]


DIRECTION_STEPS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL: (1, 1),
}


class Strategy(str, Enum):
    """Placement strategies understood by the generator."""

    RANDOM = "random"
    SOLVER = "solver"


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
