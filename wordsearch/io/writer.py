"""Flat text output for finished puzzles."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Sequence

from ..utils.logger import get_logger
from ..utils.pretty import format_grid, format_word_list

if TYPE_CHECKING:
    from ..engine.grid import WordGrid


LOGGER = get_logger(__name__)


def render_puzzle(grid: WordGrid, words: Sequence[str]) -> str:
    """Return the text document written by :func:`write_puzzle`."""

    parts = ["GRID:", format_grid(grid), "", "WORDS TO FIND:"]
    if words:
        parts.append(format_word_list(words))
    return "\n".join(parts) + "\n"


def write_puzzle(path: Path | str, grid: WordGrid, words: Sequence[str]) -> bool:
    """Write the grid and word list to ``path``.

    Returns False (after logging) when the file cannot be written.
    """

    destination = Path(path)
    try:
        destination.write_text(render_puzzle(grid, words), encoding="utf-8")
    except OSError as exc:
        LOGGER.error("Unable to open output file: %s (%s)", destination, exc)
        return False
    LOGGER.info("Wrote puzzle to %s", destination)
    return True
