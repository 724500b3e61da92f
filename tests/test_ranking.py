import pytest

from wordle_greedy.corpus import WeightedWord
from wordle_greedy.errors import InvalidWord
from wordle_greedy.feedback import score_all
from wordle_greedy.ranking import LetterFrequencyRanker, OracleScoreRanker, Ranker, rank_words


def test_oracle_ranker_sums_signals():
    ranker = OracleScoreRanker(["apple"])
    assert ranker.rank("apple") == 10
    assert ranker.rank("angle") == sum(score_all("angle", "apple"))
    assert ranker.rank("angle") == 6


def test_oracle_ranker_rank_all_matches_rank():
    answers = ["speed", "crane", "total"]
    ranker = OracleScoreRanker(answers)
    words = ["sheep", "geese", "allot", "react"]
    expected = [sum(sum(score_all(w, a)) for a in answers) for w in words]
    assert ranker.rank_all(words) == expected
    assert [ranker.rank(w) for w in words] == expected


def test_rank_words_orders_by_weight():
    ranked = rank_words(["angle", "apple"], OracleScoreRanker(["apple"]))
    assert ranked == [WeightedWord("apple", 10), WeightedWord("angle", 6)]


def test_rank_words_ties_keep_input_order():
    ranker = OracleScoreRanker(["apple", "angle"])
    assert rank_words(["angle", "apple"], ranker) == [
        WeightedWord("angle", 16), WeightedWord("apple", 16),
    ]


def test_letter_frequency_ranker():
    ranker = LetterFrequencyRanker(["apple", "angle", "crane"])
    assert ranker.rank("crane") == 10
    assert ranker.rank("angle") == 11
    assert ranker.rank("apple") is None


def test_letter_frequency_skips_repeated_letters():
    ranker = LetterFrequencyRanker(["apple", "angle", "crane"])
    ranked = rank_words(["apple", "crane", "angle"], ranker)
    assert ranked == [WeightedWord("angle", 11), WeightedWord("crane", 10)]


def test_ranker_rejects_invalid_words():
    with pytest.raises(InvalidWord):
        rank_words(["toolong"], OracleScoreRanker(["apple"]))


def test_base_ranker_is_abstract():
    with pytest.raises(TypeError):
        Ranker()
