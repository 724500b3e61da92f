"""
Word lists and weighted corpora
===============================

Reading and writing the flat files the solver works from:

- word lists: whitespace separated tokens, one word per line in practice
- weighted corpora: one `word,weight` pair per line
- traces: one solving session per line, guesses comma separated
"""

import logging
import math
from typing import Callable, Iterable, List, NamedTuple, Optional, Union

from .config import (
    FIELD_SEPARATOR, SESSION_SEPARATOR, UNSOLVED_MARKER, WORD_SEPARATOR,
)
from .errors import InvalidWord, MalformedInput
from .feedback import is_word, normalize_word

log = logging.getLogger(__name__)

Weight = Union[int, float]


class WeightedWord(NamedTuple):
    """A corpus word and its popularity weight."""
    word: str
    weight: Weight


# ============================================================================
# WORD LISTS
# ============================================================================

def five_letter_words(tokens: Iterable[str]) -> List[str]:
    """Keep the tokens made of exactly five letters a-z, lower-cased."""
    return [t.lower() for t in tokens if is_word(t)]


def load_words(filepath: str) -> List[str]:
    """Load the five-letter words of a whitespace separated word list."""
    with open(filepath, 'r') as f:
        words = five_letter_words(f.read().split())
    log.info("Loaded %d words from %s", len(words), filepath)
    return words


# ============================================================================
# WEIGHTED CORPORA
# ============================================================================

def parse_weighted_line(line: str, weight_type: Callable[[str], Weight] = int,
                        line_number: Optional[int] = None) -> WeightedWord:
    """
    Parse one `word,weight` line.

    Raises:
        MalformedInput: wrong field count, bad word, or a weight that is
            not a finite non-negative number
    """
    parts = line.strip().split(FIELD_SEPARATOR)
    if len(parts) != 2:
        raise MalformedInput("expected 'word,weight'", line_number, line)

    word, raw_weight = parts[0].strip(), parts[1].strip()
    try:
        word = normalize_word(word)
    except InvalidWord as e:
        raise MalformedInput(str(e), line_number, line) from e

    try:
        weight = weight_type(raw_weight)
    except ValueError as e:
        raise MalformedInput(f"weight '{raw_weight}' is not a valid "
                             f"{weight_type.__name__}", line_number, line) from e
    try:
        finite = math.isfinite(weight)
    except OverflowError:
        finite = False
    if not finite or weight < 0:
        raise MalformedInput(f"weight {raw_weight} is negative or not finite", line_number, line)

    return WeightedWord(word, weight)


def parse_weighted_corpus(lines: Iterable[str],
                          weight_type: Callable[[str], Weight] = int) -> List[WeightedWord]:
    """
    Parse a weighted corpus, keeping file order.

    Blank lines are skipped. Any other bad line fails the whole parse.

    Args:
        lines: `word,weight` lines
        weight_type: `int` for usage counts, `float` for frequency scores
    """
    corpus = []
    for i, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        corpus.append(parse_weighted_line(line, weight_type, line_number=i))
    return corpus


def load_weighted_corpus(filepath: str,
                         weight_type: Callable[[str], Weight] = int) -> List[WeightedWord]:
    """Load a weighted corpus file."""
    with open(filepath, 'r') as f:
        corpus = parse_weighted_corpus(f, weight_type)
    log.info("Loaded %d weighted words from %s", len(corpus), filepath)
    return corpus


def format_weighted_corpus(corpus: Iterable[WeightedWord]) -> str:
    """Serialize a corpus as `word,weight` lines."""
    return "\n".join(f"{w.word}{FIELD_SEPARATOR}{w.weight}" for w in corpus)


def write_weighted_corpus(filepath: str, corpus: Iterable[WeightedWord]):
    corpus = list(corpus)
    with open(filepath, 'w') as f:
        f.write(format_weighted_corpus(corpus))
    log.info("Wrote %d weighted words to %s", len(corpus), filepath)


# ============================================================================
# TRACES
# ============================================================================

def format_trace(guesses: Iterable[str], solved: bool = True,
                 word_sep: str = WORD_SEPARATOR,
                 unsolved_marker: str = UNSOLVED_MARKER) -> str:
    """One session's guesses, with the unsolved marker appended on failure."""
    fields = list(guesses)
    if not solved:
        fields.append(unsolved_marker)
    return word_sep.join(fields)


def format_traces(results, word_sep: str = WORD_SEPARATOR,
                  session_sep: str = SESSION_SEPARATOR,
                  unsolved_marker: str = UNSOLVED_MARKER) -> str:
    """
    Serialize session results, one session per line by default.

    Args:
        results: objects with `trace` and `solved` attributes, in run order
    """
    return session_sep.join(
        format_trace(r.trace, r.solved, word_sep, unsolved_marker) for r in results
    )


def write_traces(filepath: str, results, **kwargs):
    results = list(results)
    with open(filepath, 'w') as f:
        f.write(format_traces(results, **kwargs))
    log.info("Wrote %d session traces to %s", len(results), filepath)
