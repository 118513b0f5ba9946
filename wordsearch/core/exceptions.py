"""Custom exception hierarchy for word search generation."""


class WordSearchError(Exception):
    """Base exception for generator failures."""


class ConfigurationError(WordSearchError):
    """Raised when sizes, word counts or the strategy are inconsistent."""


class SelectionError(WordSearchError):
    """Raised when no candidate words are available for selection."""


class WordSourceError(WordSearchError):
    """Raised when the word list cannot be read."""
