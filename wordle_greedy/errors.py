"""Exception types raised by the solver and its loaders."""

from typing import Optional


class WordleError(Exception):
    """Base class for all solver errors."""


class InvalidWord(WordleError, ValueError):
    """A word is not exactly five letters a-z."""


class MalformedInput(WordleError, ValueError):
    """A weighted corpus line could not be parsed."""

    def __init__(self, message: str, line_number: Optional[int] = None,
                 line: Optional[str] = None):
        if line_number is not None:
            message = f"line {line_number}: {message} ({line!r})"
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class IndexOutOfRange(WordleError, IndexError):
    """Feedback requested for a position outside the word."""


class CandidatesExhausted(WordleError):
    """No corpus word is consistent with the feedback seen so far."""


class GuessLimitExceeded(WordleError):
    """A session used up its guess budget without finding the target."""
