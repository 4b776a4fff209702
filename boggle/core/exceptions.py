"""Custom exception hierarchy for the Boggle game core."""


class BoggleError(Exception):
    """Base exception for game core failures."""


class InvalidConfiguration(BoggleError, ValueError):
    """Raised when a board size, difficulty or duration cannot be used."""


class DictionaryUnavailable(BoggleError):
    """Raised when a word list source cannot be fetched or parsed."""
