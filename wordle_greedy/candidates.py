"""
Candidate Filtering
===================

A corpus word stays a candidate while replaying every recorded guess
against it reproduces exactly the feedback that guess received. Candidates
come back heaviest first; equal weights keep their corpus order.
"""

import numpy as np
from typing import Iterable, List, NamedTuple, Sequence

from .corpus import WeightedWord
from .errors import CandidatesExhausted
from .feedback import (
    Feedback, compute_feedback_row, feedback_to_pattern, normalize_word, word_to_chars,
    words_to_chars,
)


class Guess(NamedTuple):
    """A guessed word and the feedback it received."""
    word: str
    feedback: Feedback


class CandidatePool:
    """
    Read-only view of a weighted corpus, encoded once for repeated filtering.

    Filtering re-derives the candidates from the whole corpus on every call,
    so one pool can serve any number of sessions.
    """

    def __init__(self, corpus: Iterable[WeightedWord]):
        self.entries: List[WeightedWord] = [
            WeightedWord(normalize_word(w.word), w.weight) for w in corpus
        ]
        self.words = [e.word for e in self.entries]
        self._word_set = set(self.words)
        self.chars = words_to_chars(self.words)
        # Heaviest first, ties in corpus order; exact for large int weights
        self.order = sorted(range(len(self.entries)),
                            key=lambda i: self.entries[i].weight, reverse=True)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, word: str) -> bool:
        return word.strip().lower() in self._word_set

    def mask(self, history: Sequence[Guess]) -> np.ndarray:
        """Boolean mask over the corpus of entries consistent with `history`."""
        mask = np.ones(len(self.entries), dtype=np.bool_)
        for guess in history:
            row = compute_feedback_row(word_to_chars(guess.word), self.chars)
            mask &= row == feedback_to_pattern(guess.feedback)
        return mask

    def filter(self, history: Sequence[Guess]) -> List[WeightedWord]:
        """Entries consistent with every guess in `history`, heaviest first."""
        mask = self.mask(history)
        return [self.entries[i] for i in self.order if mask[i]]

    def count(self, history: Sequence[Guess]) -> int:
        """Number of entries consistent with `history`."""
        return int(np.sum(self.mask(history)))

    def best(self, history: Sequence[Guess]) -> WeightedWord:
        """
        Heaviest entry consistent with `history`.

        Raises:
            CandidatesExhausted: no entry is consistent
        """
        mask = self.mask(history)
        for i in self.order:
            if mask[i]:
                return self.entries[i]
        raise CandidatesExhausted(f"No candidates left after {len(history)} guesses")


def filter_candidates(pool: Iterable[WeightedWord],
                      history: Sequence[Guess]) -> List[WeightedWord]:
    """
    Filter a weighted word list by a guess history.

    Args:
        pool: weighted corpus entries
        history: guesses made so far, with their feedback

    Returns:
        Consistent entries sorted by weight descending, ties in input order
    """
    return CandidatePool(pool).filter(history)
