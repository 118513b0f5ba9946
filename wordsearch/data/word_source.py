"""Candidate word loading from files or URLs."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

import requests

from ..core.constants import DEFAULT_GRID_SIZE
from ..core.exceptions import WordSourceError
from ..utils.logger import get_logger
from .normalization import clean_word


LOGGER = get_logger(__name__)

URL_PREFIXES = ("http://", "https://")
DEFAULT_TIMEOUT_SECONDS = 30.0


def is_url(source: str) -> bool:
    return source.strip().lower().startswith(URL_PREFIXES)


def read_source(source: Path | str, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> str:
    """Return the raw text behind ``source``.

    Raises:
        WordSourceError: if the file cannot be read or the URL cannot be fetched.
    """

    text_source = str(source)
    if is_url(text_source):
        try:
            response = requests.get(text_source.strip(), timeout=timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise WordSourceError(f"Unable to fetch word list: {text_source} ({exc})") from exc
        return response.text

    path = Path(text_source)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise WordSourceError(f"Unable to open word file: {path} ({exc})") from exc


def parse_words(lines: Iterable[str], max_length: int = DEFAULT_GRID_SIZE) -> List[str]:
    """Normalize ``lines`` into candidate words.

    Blank lines and # comments are skipped, as are words longer than
    ``max_length``. Order and duplicates are preserved.
    """

    words: List[str] = []
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        word = clean_word(stripped)
        if not word:
            continue
        if len(word) > max_length:
            LOGGER.debug("Skipping %s: longer than %d letters", word, max_length)
            continue
        words.append(word)
    return words


def load_words(
    source: Path | str,
    max_length: int = DEFAULT_GRID_SIZE,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> List[str]:
    """Load candidate words from a path or http(s) URL.

    A source that cannot be read is logged and yields an empty list; the
    caller decides whether that ends the run.
    """

    try:
        text = read_source(source, timeout_seconds)
    except WordSourceError as exc:
        LOGGER.error("%s", exc)
        return []
    words = parse_words(text.splitlines(), max_length)
    LOGGER.info("Loaded %d candidate words from %s", len(words), source)
    return words
