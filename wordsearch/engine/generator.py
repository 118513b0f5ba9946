"""Main word search generator orchestration.

Three phases:
  1. Selection: shuffle the candidates and keep a bounded slice.
  2. Placement: bounded random retries per word (or one CP-SAT solve).
  3. Fill: replace every untouched cell with a random letter.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..core.constants import (
    DEFAULT_GRID_SIZE,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_WORDS,
    DEFAULT_MIN_WORDS,
    Direction,
    Strategy,
)
from ..core.exceptions import ConfigurationError
from ..core.models import Placement
from ..utils.logger import get_logger
from .grid import GridConfig, WordGrid
from .selection import select_words
from .solver import solve_placements


LOGGER = get_logger(__name__)

DIRECTIONS = tuple(Direction)


@dataclass
class GeneratorConfig:
    size: int = DEFAULT_GRID_SIZE
    min_words: int = DEFAULT_MIN_WORDS
    max_words: int = DEFAULT_MAX_WORDS
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    seed: Optional[int] = None
    strategy: Strategy | str = Strategy.RANDOM
    solver_timeout_seconds: float = 10.0

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ConfigurationError(f"Grid size must be positive, got {self.size}")
        if self.min_words < 0 or self.max_words < 0:
            raise ConfigurationError("Word counts must not be negative")
        if self.min_words > self.max_words:
            raise ConfigurationError(
                f"min_words ({self.min_words}) is larger than max_words ({self.max_words})"
            )
        if self.max_attempts < 1:
            raise ConfigurationError("max_attempts must be at least 1")
        try:
            self.strategy = Strategy(self.strategy)
        except ValueError as exc:
            raise ConfigurationError(f"Unknown placement strategy: {self.strategy}") from exc
        if self.seed is None:
            self.seed = int(time.time())

    def to_grid_config(self) -> GridConfig:
        return GridConfig(size=self.size)


@dataclass
class PuzzleResult:
    grid: WordGrid
    selected_words: List[str]
    placements: List[Placement] = field(default_factory=list)
    unplaced_words: List[str] = field(default_factory=list)
    seed: Optional[int] = None

    @property
    def placed_words(self) -> List[str]:
        return [placement.word for placement in self.placements]


class PuzzleGenerator:
    """High-level orchestrator: selection, placement, then noise fill."""

    def __init__(self, config: GeneratorConfig) -> None:
        self.config = config
        self.rng = random.Random(config.seed)

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, candidates: Sequence[str]) -> PuzzleResult:
        LOGGER.info(
            "Generating %dx%d puzzle (seed=%s, strategy=%s)",
            self.config.size,
            self.config.size,
            self.config.seed,
            self.config.strategy.value,
        )
        selected = select_words(
            candidates, self.config.min_words, self.config.max_words, self.rng
        )
        grid = WordGrid(self.config.to_grid_config())

        placements: Optional[List[Optional[Placement]]] = None
        if self.config.strategy == Strategy.SOLVER:
            placements = self._solver_place(grid, selected)
            if placements is None:
                LOGGER.warning("Solver placement failed; falling back to random placement")
        if placements is None:
            placements = self._random_place(grid, selected)

        result = PuzzleResult(grid=grid, selected_words=selected, seed=self.config.seed)
        for word, placement in zip(selected, placements):
            if placement is None:
                LOGGER.warning("Unable to place word: %s", word)
                result.unplaced_words.append(word)
            else:
                result.placements.append(placement)

        grid.fill_empty(self.rng)
        LOGGER.info(
            "Placed %d of %d selected words", len(result.placements), len(selected)
        )
        return result

    # ------------------------------------------------------------------
    # Placement strategies
    # ------------------------------------------------------------------
    def _random_place(
        self, grid: WordGrid, words: Sequence[str]
    ) -> List[Optional[Placement]]:
        return [self.place_with_retries(grid, word) for word in words]

    def place_with_retries(self, grid: WordGrid, word: str) -> Optional[Placement]:
        """Try random starts and directions until ``word`` fits or attempts run out."""

        for attempt in range(1, self.config.max_attempts + 1):
            direction = self.rng.choice(DIRECTIONS)
            row = self.rng.randrange(grid.size)
            col = self.rng.randrange(grid.size)
            if grid.place_word(word, row, col, direction):
                LOGGER.debug(
                    "Placed %s at (%d,%d) %s after %d attempt(s)",
                    word,
                    row,
                    col,
                    direction.value,
                    attempt,
                )
                return Placement(word, row, col, direction)
        return None

    def _solver_place(
        self, grid: WordGrid, words: Sequence[str]
    ) -> Optional[List[Optional[Placement]]]:
        solution = solve_placements(
            grid.size, words, self.rng, timeout=self.config.solver_timeout_seconds
        )
        if solution is None:
            return None
        before = grid.snapshot()
        for placement in solution:
            if placement is not None and not grid.apply(placement):
                LOGGER.error("Solver returned a conflicting placement: %s", placement)
                grid.restore(before)
                return None
        return solution
