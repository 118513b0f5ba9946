"""Command line interface for the word search puzzle generator."""

from __future__ import annotations

import argparse
import sys

from .core.constants import (
    DEFAULT_GRID_SIZE,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_WORDS,
    DEFAULT_MIN_WORDS,
    Strategy,
)
from .core.exceptions import ConfigurationError
from .data.word_source import load_words
from .engine.generator import GeneratorConfig, PuzzleGenerator
from .io.writer import write_puzzle
from .utils.logger import LEVEL_NAMES, configure_logging, get_logger
from .utils.pretty import pretty_print_grid, print_puzzle_stats, print_word_list


LOGGER = get_logger(__name__)

WORDS_PROMPT = "Enter the filename containing the list of words: "
OUTPUT_PROMPT = "\nEnter the filename to save the grid: "


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a word search puzzle from a list of words",
    )
    parser.add_argument(
        "--words-file",
        type=str,
        metavar="SOURCE",
        help="File path or http(s) URL with one word per line (prompted for when omitted)",
    )
    parser.add_argument(
        "--output",
        type=str,
        metavar="FILE",
        help="Where to save the grid and word list (prompted for when omitted)",
    )
    parser.add_argument("--size", type=int, default=DEFAULT_GRID_SIZE, help="Grid size in cells")
    parser.add_argument(
        "--min-words",
        type=int,
        default=DEFAULT_MIN_WORDS,
        help="Minimum number of words to select",
    )
    parser.add_argument(
        "--max-words",
        type=int,
        default=DEFAULT_MAX_WORDS,
        help="Maximum number of words to select",
    )
    parser.add_argument(
        "--attempts",
        type=int,
        default=DEFAULT_MAX_ATTEMPTS,
        help="Random placement attempts per word before it is skipped",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--strategy",
        type=str,
        choices=[s.value for s in Strategy],
        default=Strategy.RANDOM.value,
        help="Placement strategy: bounded random retries or a CP-SAT solve",
    )
    parser.add_argument(
        "--solver-timeout",
        type=float,
        default=10.0,
        help="Time limit in seconds for the solver strategy",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print a placement summary after the word list",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=list(LEVEL_NAMES),
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = GeneratorConfig(
            size=args.size,
            min_words=args.min_words,
            max_words=args.max_words,
            max_attempts=args.attempts,
            seed=args.seed,
            strategy=args.strategy,
            solver_timeout_seconds=args.solver_timeout,
        )
    except ConfigurationError as exc:
        parser.error(str(exc))

    source = args.words_file if args.words_file is not None else input(WORDS_PROMPT)
    words = load_words(source, max_length=config.size)
    if not words:
        LOGGER.error("No words loaded. Exiting program.")
        return 1

    result = PuzzleGenerator(config).generate(words)

    print()
    pretty_print_grid(result.grid, label="Generated Word Find Grid:\n")

    output = args.output if args.output is not None else input(OUTPUT_PROMPT)
    if write_puzzle(output, result.grid, result.selected_words):
        print(f"\nGrid and word list have been written to {output}")

    print_word_list(result.selected_words)
    if args.stats:
        print_puzzle_stats(result)
    return 0


def cli() -> None:
    sys.exit(main())
