"""CP-SAT word placement using OR-Tools."""

from __future__ import annotations

import random
from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Tuple

from ortools.sat.python import cp_model

from ..core.constants import Direction
from ..core.models import Placement
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

# Random tie-break weights are drawn from [0, JITTER) so that placing one more
# word always outweighs any combination of jitter.
JITTER = 100


def solve_placements(
    size: int,
    words: Sequence[str],
    rng: random.Random,
    timeout: float = 10.0,
) -> Optional[List[Optional[Placement]]]:
    """Place as many ``words`` as possible on an empty ``size`` x ``size`` grid.

    Every word gets one boolean per in-bounds (start, direction) option. A
    cell may carry at most one letter, and choosing an option forces the
    letters along its path. The objective maximizes the number of placed
    words; random weights drawn from ``rng`` break ties so equal seeds give
    equal layouts.

    Returns:
        A list aligned with ``words`` holding a :class:`Placement` or ``None``
        for words left out, or ``None`` when CP-SAT finds no solution in time.
    """
    if not words:
        return []

    model = cp_model.CpModel()

    # ------------------------------------------------------------------
    # Step 1: Cell letter variables, created on demand
    # ------------------------------------------------------------------
    letter_vars: Dict[Tuple[int, int, str], cp_model.IntVar] = {}
    letters_by_cell: Dict[Tuple[int, int], List[cp_model.IntVar]] = defaultdict(list)

    def letter_var(row: int, col: int, letter: str) -> cp_model.IntVar:
        key = (row, col, letter)
        var = letter_vars.get(key)
        if var is None:
            var = model.new_bool_var(f"C_{row}_{col}_{letter}")
            letter_vars[key] = var
            letters_by_cell[(row, col)].append(var)
        return var

    # ------------------------------------------------------------------
    # Step 2: One option variable per candidate placement
    # ------------------------------------------------------------------
    base_weight = JITTER * len(words)
    options: List[List[Tuple[Placement, cp_model.IntVar]]] = []
    objective_vars: List[cp_model.IntVar] = []
    objective_weights: List[int] = []

    for index, word in enumerate(words):
        word_options: List[Tuple[Placement, cp_model.IntVar]] = []
        for direction in Direction:
            for row in range(size):
                for col in range(size):
                    placement = Placement(word, row, col, direction)
                    end_row, end_col = placement.end
                    if not word or end_row >= size or end_col >= size:
                        continue
                    choice = model.new_bool_var(f"P_{index}_{direction.value}_{row}_{col}")
                    for (r, c), letter in zip(placement.cells, word):
                        model.add_implication(choice, letter_var(r, c, letter))
                    word_options.append((placement, choice))
                    objective_vars.append(choice)
                    objective_weights.append(base_weight + rng.randrange(JITTER))
        if word_options:
            model.add_at_most_one([var for _, var in word_options])
        else:
            LOGGER.debug("No in-bounds placement exists for %s", word)
        options.append(word_options)

    # ------------------------------------------------------------------
    # Step 3: A cell holds at most one letter
    # ------------------------------------------------------------------
    for cell_vars in letters_by_cell.values():
        if len(cell_vars) > 1:
            model.add_at_most_one(cell_vars)

    if objective_vars:
        model.maximize(cp_model.LinearExpr.weighted_sum(objective_vars, objective_weights))

    # ------------------------------------------------------------------
    # Step 4: Solve
    # ------------------------------------------------------------------
    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    # Single worker keeps seeded runs reproducible.
    solver.parameters.num_workers = 1
    solver.parameters.random_seed = rng.randrange(2**31 - 1)

    LOGGER.info(
        "CP-SAT: %d words, %d options, %d letter vars, solving (timeout=%0.1fs)...",
        len(words),
        sum(len(opts) for opts in options),
        len(letter_vars),
        timeout,
    )

    status = solver.solve(model)

    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        LOGGER.warning("CP-SAT: no solution found (status=%s)", solver.status_name(status))
        return None

    LOGGER.info(
        "CP-SAT: %s solution found in %.2fs", solver.status_name(status), solver.wall_time
    )

    # ------------------------------------------------------------------
    # Step 5: Extract solution
    # ------------------------------------------------------------------
    result: List[Optional[Placement]] = []
    for word_options in options:
        chosen = next(
            (placement for placement, var in word_options if solver.value(var)), None
        )
        result.append(chosen)
    return result
