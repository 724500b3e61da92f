"""
Corpus ranking
==============

Builds the weighted corpus the solver guesses from. A ranker gives every
candidate word a weight; `rank_words` orders the words by it.

Two strategies:
- OracleScoreRanker: total feedback signal a word earns against a set of
  reference answers (correct = 2, present = 1, absent = 0)
- LetterFrequencyRanker: sum over a word's distinct letters of how many
  reference words contain that letter; words with a repeated letter are
  left out
"""

import abc
import logging
from collections import Counter
from typing import Iterable, List, Optional

import numpy as np

from .corpus import Weight, WeightedWord
from .feedback import compute_signal_totals, normalize_word, word_to_chars, words_to_chars

log = logging.getLogger(__name__)


class Ranker(abc.ABC):
    """Assigns a weight to a word, or None to leave it out of the corpus."""

    @abc.abstractmethod
    def rank(self, word: str) -> Optional[Weight]:
        pass

    def rank_all(self, words: List[str]) -> List[Optional[Weight]]:
        return [self.rank(w) for w in words]


class OracleScoreRanker(Ranker):
    """Weight = sum of oracle signals against every reference answer."""

    def __init__(self, answers: Iterable[str]):
        self.answers = [normalize_word(a) for a in answers]
        self.answer_chars = words_to_chars(self.answers)

    def rank(self, word: str) -> int:
        return int(compute_signal_totals(word_to_chars(word)[np.newaxis, :], self.answer_chars)[0])

    def rank_all(self, words: List[str]) -> List[int]:
        totals = compute_signal_totals(words_to_chars(words), self.answer_chars)
        return [int(t) for t in totals]


class LetterFrequencyRanker(Ranker):
    """Weight = summed document frequency of the word's distinct letters."""

    def __init__(self, reference: Iterable[str]):
        self.letter_freq = Counter()
        for w in reference:
            self.letter_freq.update(set(normalize_word(w)))

    def rank(self, word: str) -> Optional[int]:
        w = normalize_word(word)
        letters = set(w)
        if len(letters) != len(w):
            return None
        return sum(self.letter_freq[c] for c in letters)


def rank_words(words: Iterable[str], ranker: Ranker) -> List[WeightedWord]:
    """
    Weight and order words for use as a solver corpus.

    Returns:
        WeightedWords sorted by weight descending, ties in input order
    """
    words = [normalize_word(w) for w in words]
    weights = ranker.rank_all(words)

    ranked = [WeightedWord(w, s) for w, s in zip(words, weights) if s is not None]
    ranked.sort(key=lambda ww: ww.weight, reverse=True)

    log.info("Ranked %d words with %s (%d skipped)",
             len(ranked), type(ranker).__name__, len(words) - len(ranked))
    return ranked
