"""
Greedy Wordle Solver
====================

Plays one session per target word: filter the weighted corpus by all
feedback seen so far, guess the heaviest surviving word, score it against
the target, and repeat.

A session ends in one of three states:
- SOLVED: the last guess is the target
- EXHAUSTED: no corpus word fits the feedback (target not in the corpus)
- GUESS_LIMIT: the guess cap was reached first
"""

import enum
import logging
import time
from collections import Counter
from typing import Callable, Dict, Iterable, List, NamedTuple, Optional

from .candidates import CandidatePool, Guess
from .config import MAX_GUESSES, PROGRESS_EVERY
from .corpus import WeightedWord
from .errors import CandidatesExhausted, GuessLimitExceeded
from .feedback import (
    compute_feedback, feedback_to_string, normalize_word, pattern_to_feedback, word_to_chars,
)

log = logging.getLogger(__name__)


# ============================================================================
# SESSION RESULTS
# ============================================================================

class SessionStatus(enum.Enum):
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    GUESS_LIMIT = "guess_limit"


class SessionResult(NamedTuple):
    """Outcome of one solving session."""
    target: str
    status: SessionStatus
    guesses: List[Guess]

    @property
    def solved(self) -> bool:
        return self.status is SessionStatus.SOLVED

    @property
    def trace(self) -> List[str]:
        """Guessed words in order."""
        return [g.word for g in self.guesses]

    @property
    def n_guesses(self) -> int:
        return len(self.guesses)


Observer = Callable[[int, SessionResult], None]


# ============================================================================
# SOLVER CLASS
# ============================================================================

class GreedySolver:
    """
    Greedy solver over a weighted corpus.

    The corpus is encoded once and never modified, so sessions share no
    state besides it.
    """

    def __init__(self, corpus: Iterable[WeightedWord],
                 max_guesses: Optional[int] = MAX_GUESSES):
        """
        Args:
            corpus: weighted words; the heaviest consistent one is guessed next
            max_guesses: per-session cap, None for no cap
        """
        if max_guesses is not None and max_guesses < 1:
            raise ValueError(f"max_guesses must be positive, got {max_guesses}")
        self.pool = CandidatePool(corpus)
        self.max_guesses = max_guesses
        log.info("Solver ready with %d corpus words", len(self.pool))

    def next_guess(self, history: List[Guess]) -> WeightedWord:
        """
        Heaviest corpus word consistent with `history`.

        Raises:
            GuessLimitExceeded: `history` already holds max_guesses guesses
            CandidatesExhausted: no corpus word is consistent
        """
        if self.max_guesses is not None and len(history) >= self.max_guesses:
            raise GuessLimitExceeded(f"No solution within {self.max_guesses} guesses")
        return self.pool.best(history)

    def solve(self, target: str, verbose: bool = False) -> SessionResult:
        """
        Solve for a given target word.

        Args:
            target: the secret word
            verbose: print every turn

        Returns:
            SessionResult with the guesses made and the terminal status
        """
        target = normalize_word(target)
        target_chars = word_to_chars(target)
        history: List[Guess] = []

        while True:
            if verbose:
                n_cand = self.pool.count(history)
            try:
                candidate = self.next_guess(history)
            except CandidatesExhausted as e:
                log.debug("%s: %s", target, e)
                status = SessionStatus.EXHAUSTED
                break
            except GuessLimitExceeded as e:
                log.warning("%s: %s", target, e)
                status = SessionStatus.GUESS_LIMIT
                break

            guess = candidate.word
            pattern = compute_feedback(word_to_chars(guess), target_chars)
            feedback = pattern_to_feedback(pattern)
            history.append(Guess(guess, feedback))

            if verbose:
                print(f"Turn {len(history)}: {guess} -> {feedback_to_string(feedback)} "
                      f"({n_cand} candidates, weight {candidate.weight})")
            log.debug("%s turn %d: %s %s", target, len(history), guess, feedback)

            if guess == target:
                status = SessionStatus.SOLVED
                break

        if verbose:
            if status is SessionStatus.SOLVED:
                print(f"Solved in {len(history)} guesses")
            else:
                print(f"Unsolved ({status.value}) after {len(history)} guesses")

        return SessionResult(target, status, history)

    def solve_all(self, targets: Iterable[str],
                  observer: Optional[Observer] = None) -> List[SessionResult]:
        """
        Solve every target independently, in input order.

        Args:
            targets: secret words
            observer: called as observer(index, result) after each session
        """
        results = []
        for i, target in enumerate(targets):
            result = self.solve(target)
            results.append(result)
            if observer is not None:
                observer(i, result)
        return results


# ============================================================================
# PROGRESS AND SUMMARIES
# ============================================================================

class ProgressReporter:
    """Session observer keeping a running guess average, logged periodically."""

    def __init__(self, every: int = PROGRESS_EVERY, total: Optional[int] = None):
        self.every = every
        self.total = total
        self.count = 0
        self.total_guesses = 0
        self.unsolved = 0
        self.start = time.time()

    @property
    def average(self) -> float:
        return self.total_guesses / self.count if self.count else 0.0

    def __call__(self, index: int, result: SessionResult):
        self.count += 1
        self.total_guesses += result.n_guesses
        if not result.solved:
            self.unsolved += 1
        if self.every and self.count % self.every == 0:
            elapsed = time.time() - self.start
            rate = self.count / elapsed if elapsed > 0 else 0
            of_total = f"/{self.total}" if self.total is not None else ""
            log.info("[%d%s] avg=%.4f, unsolved=%d, rate=%.1f w/s",
                     self.count, of_total, self.average, self.unsolved, rate)


def summarize(results: List[SessionResult], elapsed: float) -> Dict:
    """
    Aggregate session results.

    The average counts solved sessions only; unsolved ones are listed in
    `failed_words` with their status.
    """
    solved = [r for r in results if r.solved]
    failures = [r for r in results if not r.solved]
    dist = Counter(r.n_guesses for r in solved)

    return {
        'total': len(results),
        'solved': len(solved),
        'average': sum(r.n_guesses for r in solved) / len(solved) if solved else 0.0,
        'total_guesses': sum(r.n_guesses for r in results),
        'distribution': dict(sorted(dist.items())),
        'failures': len(failures),
        'failed_words': [(r.target, r.status.value) for r in failures],
        'time': elapsed,
        'rate': len(results) / elapsed if elapsed > 0 else 0.0,
    }


def benchmark(solver: GreedySolver, targets: Iterable[str],
              progress_every: int = PROGRESS_EVERY):
    """
    Solve all targets with progress logging.

    Returns:
        (results, summary dict)
    """
    targets = list(targets)
    reporter = ProgressReporter(progress_every, total=len(targets))
    t0 = time.time()
    results = solver.solve_all(targets, observer=reporter)
    return results, summarize(results, time.time() - t0)


def print_results(results: Dict):
    """Pretty print a run summary."""
    print("\n" + "=" * 50)
    print("RUN RESULTS")
    print("=" * 50)
    print(f"Words tested: {results['total']}")
    print(f"Solved: {results['solved']}")
    print(f"Average guesses (solved): {results['average']:.4f}")
    if results['total']:
        print(f"Failures: {results['failures']} "
              f"({100 * results['failures'] / results['total']:.2f}%)")
    print(f"Time: {results['time']:.1f}s ({results['rate']:.1f} words/sec)")
    print("\nDistribution:")
    for n, count in results['distribution'].items():
        pct = 100 * count / results['total']
        bar = "█" * int(pct / 2)
        print(f"  {n}: {count:5d} ({pct:5.2f}%) {bar}")
    if results['failed_words']:
        print(f"\nUnsolved: {results['failed_words'][:20]}")
    print("=" * 50)
