"""
Feedback Oracle
===============

Per-position feedback for a guess against a secret word.

The duplicate-letter rule is deliberately simpler than the game's: a
misplaced letter is reported present only when the guess holds no more
copies of it than the secret, and each position is judged on its own
without consuming a shared letter budget. Guess words with surplus copies
therefore see every misplaced copy marked absent, where the game would
still mark some of them present. Candidate filtering relies on the oracle,
so both must keep using this same rule.
"""

import numpy as np
from numba import jit, prange
from typing import Iterable, List, Tuple

from .config import WORD_LENGTH
from .errors import IndexOutOfRange, InvalidWord


# ============================================================================
# CONSTANTS
# ============================================================================

ABSENT = 0
PRESENT = 1
CORRECT = 2
CORRECT_PATTERN = 242  # 2 + 2*3 + 2*9 + 2*27 + 2*81 = 242 (all correct)
N_PATTERNS = 243  # 3^5 possible feedback patterns

Feedback = Tuple[int, int, int, int, int]

ALL_CORRECT: Feedback = (CORRECT,) * WORD_LENGTH


# ============================================================================
# WORD ENCODING
# ============================================================================

def is_word(token: str) -> bool:
    """True for exactly five ASCII letters, in either case."""
    w = token.lower()
    return len(w) == WORD_LENGTH and all('a' <= c <= 'z' for c in w)


def normalize_word(word: str) -> str:
    """Lower-case a word, rejecting anything that is not five letters a-z."""
    if not isinstance(word, str):
        raise InvalidWord(f"Expected a string, got {type(word).__name__}")
    w = word.strip().lower()
    if not is_word(w):
        raise InvalidWord(f"'{word}' is not a {WORD_LENGTH}-letter word")
    return w


def word_to_chars(word: str) -> np.ndarray:
    """Convert one word to a shape (5,) array of char codes (0-25)."""
    w = normalize_word(word)
    return np.array([ord(c) - ord('a') for c in w], dtype=np.int32)


def words_to_chars(words: Iterable[str]) -> np.ndarray:
    """Convert words to a shape (n, 5) char code array."""
    words = list(words)
    arr = np.zeros((len(words), WORD_LENGTH), dtype=np.int32)
    for i, w in enumerate(words):
        arr[i] = word_to_chars(w)
    return arr


# ============================================================================
# NUMBA-ACCELERATED FEEDBACK COMPUTATION
# ============================================================================

@jit(nopython=True, cache=True)
def color_at(guess: np.ndarray, secret: np.ndarray, index: int) -> int:
    """
    Signal for one position of a guess.

    Args:
        guess: shape (5,) array of char codes
        secret: shape (5,) array of char codes
        index: position in [0, 5), not checked here

    Returns:
        ABSENT, PRESENT or CORRECT
    """
    letter = guess[index]
    if secret[index] == letter:
        return 2  # CORRECT

    count_in_secret = 0
    count_in_guess = 0
    for i in range(5):
        if secret[i] == letter:
            count_in_secret += 1
        if guess[i] == letter:
            count_in_guess += 1

    if count_in_secret > 0 and count_in_guess <= count_in_secret:
        return 1  # PRESENT
    return 0  # ABSENT


@jit(nopython=True, cache=True)
def compute_feedback(guess: np.ndarray, secret: np.ndarray) -> int:
    """
    Packed feedback pattern for a guess against a secret.

    Returns:
        Integer pattern f0 + 3*f1 + 9*f2 + 27*f3 + 81*f4 (0-242)
    """
    pattern = 0
    multiplier = 1
    for i in range(5):
        pattern += color_at(guess, secret, i) * multiplier
        multiplier *= 3
    return pattern


@jit(nopython=True, cache=True)
def compute_feedback_row(guess: np.ndarray, secrets: np.ndarray) -> np.ndarray:
    """
    Feedback of one guess against every row of `secrets`.

    Args:
        guess: shape (5,) char codes
        secrets: shape (n, 5) char codes

    Returns:
        shape (n,) array of packed patterns
    """
    n = secrets.shape[0]
    result = np.zeros(n, dtype=np.uint8)
    for j in range(n):
        result[j] = compute_feedback(guess, secrets[j])
    return result


@jit(nopython=True, parallel=True, cache=True)
def compute_signal_totals(guess_chars: np.ndarray, secret_chars: np.ndarray) -> np.ndarray:
    """
    Sum of all per-position signals of each guess against every secret.

    Returns:
        shape (n_guesses,) int64 totals
    """
    n_guesses = guess_chars.shape[0]
    n_secrets = secret_chars.shape[0]
    totals = np.zeros(n_guesses, dtype=np.int64)

    for i in prange(n_guesses):
        total = 0
        for j in range(n_secrets):
            for k in range(5):
                total += color_at(guess_chars[i], secret_chars[j], k)
        totals[i] = total

    return totals


# ============================================================================
# PUBLIC API
# ============================================================================

def score(guess: str, secret: str, position: int) -> int:
    """
    Signal for `position` of `guess` against `secret`.

    Raises:
        IndexOutOfRange: position outside [0, 5)
        InvalidWord: either operand is not a 5-letter word
    """
    if not 0 <= position < WORD_LENGTH:
        raise IndexOutOfRange(f"Position {position} outside [0, {WORD_LENGTH})")
    return int(color_at(word_to_chars(guess), word_to_chars(secret), position))


def score_all(guess: str, secret: str) -> Feedback:
    """Feedback for every position of `guess` against `secret`."""
    return pattern_to_feedback(compute_feedback(word_to_chars(guess), word_to_chars(secret)))


def feedback_to_pattern(feedback: Iterable[int]) -> int:
    """Pack a feedback tuple into its base-3 pattern."""
    signals = list(feedback)
    if len(signals) != WORD_LENGTH:
        raise ValueError(f"Feedback must have {WORD_LENGTH} signals, got {len(signals)}")
    pattern = 0
    multiplier = 1
    for s in signals:
        if s not in (ABSENT, PRESENT, CORRECT):
            raise ValueError(f"Invalid signal: {s}")
        pattern += s * multiplier
        multiplier *= 3
    return pattern


def pattern_to_feedback(pattern: int) -> Feedback:
    """Unpack a base-3 pattern into a feedback tuple."""
    pattern = int(pattern)
    if not 0 <= pattern < N_PATTERNS:
        raise ValueError(f"Pattern {pattern} outside [0, {N_PATTERNS})")
    signals: List[int] = []
    for _ in range(WORD_LENGTH):
        signals.append(pattern % 3)
        pattern //= 3
    return tuple(signals)


def feedback_to_string(feedback: Iterable[int]) -> str:
    """Render feedback as emoji squares."""
    return ''.join(['⬛', '🟨', '🟩'][s] for s in feedback)
