"""Random selection of the words that go into a puzzle."""

from __future__ import annotations

import random
from typing import List, Sequence

from ..core.exceptions import ConfigurationError, SelectionError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def target_count(candidate_count: int, min_count: int, max_count: int) -> int:
    """Number of words to select for ``candidate_count`` candidates.

    The count is ``min(candidate_count, max_count)`` raised to ``min_count``,
    then capped at ``candidate_count`` since a shuffle cannot yield more words
    than it was given.
    """

    if min_count < 0 or max_count < 0:
        raise ConfigurationError("Word counts must not be negative")
    if min_count > max_count:
        raise ConfigurationError(
            f"min_count ({min_count}) is larger than max_count ({max_count})"
        )

    count = min(candidate_count, max_count)
    if count < min_count:
        count = min_count
    if count > candidate_count:
        LOGGER.warning(
            "Only %d candidate words available, fewer than the minimum of %d",
            candidate_count,
            min_count,
        )
        count = candidate_count
    return count


def select_words(
    candidates: Sequence[str],
    min_count: int,
    max_count: int,
    rng: random.Random,
) -> List[str]:
    """Shuffle ``candidates`` and return the leading slice of the target size.

    Duplicate candidates are kept; each copy is placed independently.
    """

    if not candidates:
        raise SelectionError("No candidate words to select from")

    count = target_count(len(candidates), min_count, max_count)
    shuffled = list(candidates)
    rng.shuffle(shuffled)
    selected = shuffled[:count]
    LOGGER.info("Selected %d of %d candidate words", len(selected), len(candidates))
    return selected
