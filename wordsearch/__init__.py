"""Word search puzzle generator package.

This package exposes the public API surface via:

- ``wordsearch.engine.generator.PuzzleGenerator``: selects, places and fills.
- ``wordsearch.data.word_source.load_words``: loads candidate words.
- ``wordsearch.io.writer.write_puzzle``: persists the finished puzzle.
"""

from .engine.generator import GeneratorConfig, PuzzleGenerator, PuzzleResult
from .data.word_source import load_words
from .io.writer import write_puzzle

__all__ = [
    "GeneratorConfig",
    "PuzzleGenerator",
    "PuzzleResult",
    "load_words",
    "write_puzzle",
]

__version__ = "0.1.0"
