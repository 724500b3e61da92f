import pytest

from wordle_greedy.corpus import WeightedWord

WORDS = [
    "crane", "slate", "trace", "crate", "react", "apple", "angle", "speed",
    "sheep", "geese", "total", "stoal", "allot", "tally", "alloy", "atoll",
]


@pytest.fixture
def two_words():
    return [WeightedWord("apple", 10), WeightedWord("angle", 5)]


@pytest.fixture
def corpus():
    # Distinct weights, heaviest first in list order
    return [WeightedWord(w, 100 - i) for i, w in enumerate(WORDS)]
