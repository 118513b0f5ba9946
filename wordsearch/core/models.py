"""Data models supporting the word search generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import Direction


@dataclass
class Placement:
    """A word anchored at a start cell and running in one direction."""

    word: str
    start_row: int
    start_col: int
    direction: Direction
    _cells: Optional[List[Tuple[int, int]]] = field(default=None, repr=False, compare=False)

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        if self._cells is None:
            dr, dc = self.direction.step
            self._cells = [
                (self.start_row + i * dr, self.start_col + i * dc) for i in range(self.length)
            ]
        return self._cells

    @property
    def end(self) -> Tuple[int, int]:
        dr, dc = self.direction.step
        return (
            self.start_row + dr * (self.length - 1),
            self.start_col + dc * (self.length - 1),
        )
