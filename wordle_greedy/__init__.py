"""
Greedy Wordle Solver
====================

Solves Wordle targets by always guessing the most popular word still
consistent with the feedback received.
"""

__version__ = "1.0.0"

from .candidates import CandidatePool, Guess, filter_candidates
from .corpus import WeightedWord, load_weighted_corpus, load_words
from .errors import (
    CandidatesExhausted, GuessLimitExceeded, IndexOutOfRange, InvalidWord, MalformedInput,
    WordleError,
)
from .feedback import ABSENT, CORRECT, PRESENT, score, score_all
from .ranking import LetterFrequencyRanker, OracleScoreRanker, rank_words
from .solver import (
    GreedySolver, ProgressReporter, SessionResult, SessionStatus, benchmark, print_results,
)
