"""Custom exception hierarchy for crossword design."""


class CrosswordError(Exception):
    """Base exception for crossword design failures."""


class InvalidInputError(CrosswordError):
    """Raised when board dimensions or candidate words are unusable."""


class BoardContractError(CrosswordError):
    """Raised when a row write does not fit the board exactly."""


class LemmaLoadError(CrosswordError):
    """Raised when the lemma list cannot be read."""


class ValidationError(CrosswordError):
    """Raised when a solved board fails the integrity checks."""


class NoSolutionError(CrosswordError):
    """Raised when no board could be designed for the given words."""
