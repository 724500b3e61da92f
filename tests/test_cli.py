import pytest

from wordle_greedy.__main__ import build_parser, main


@pytest.fixture
def files(tmp_path):
    guesses = tmp_path / "guesses.txt"
    guesses.write_text("apple\nangle\nhi\n")
    answers = tmp_path / "answers.txt"
    answers.write_text("apple\n")
    targets = tmp_path / "targets.txt"
    targets.write_text("apple\nangle\nzebra\n")
    return {
        'guesses': str(guesses),
        'answers': str(answers),
        'targets': str(targets),
        'stats': str(tmp_path / "stats.txt"),
        'output': str(tmp_path / "data.txt"),
    }


def _rank(files, *extra):
    return main(["rank", "--guesses", files['guesses'], "--answers", files['answers'],
                 "--stats", files['stats'], *extra])


def test_rank(files, capsys):
    assert _rank(files) == 0
    with open(files['stats']) as f:
        assert f.read() == "apple,10\nangle,6"
    assert "Word stats generated!" in capsys.readouterr().out


def test_rank_letters(files):
    assert _rank(files, "--ranker", "letters") == 0
    with open(files['stats']) as f:
        assert f.read() == "angle,3"


def test_solve(files, capsys):
    _rank(files)
    assert main(["solve", "--stats", files['stats'], "--targets", files['targets'],
                 "--output", files['output']]) == 0
    with open(files['output']) as f:
        assert f.read() == "apple\napple,angle\napple,!"
    out = capsys.readouterr().out
    assert "Words tested: 3" in out


def test_trace(files, capsys):
    _rank(files)
    assert main(["trace", "angle", "--stats", files['stats']]) == 0
    assert "Solved in 2 guesses" in capsys.readouterr().out


def test_run(files, capsys):
    assert main(["run", "--guesses", files['guesses'], "--answers", files['answers'],
                 "--stats", files['stats'], "--targets", files['targets'],
                 "--output", files['output']]) == 0
    with open(files['output']) as f:
        assert f.read() == "apple\napple,angle\napple,!"
    assert "time :" in capsys.readouterr().out


def test_malformed_corpus_exits_nonzero(files, capsys):
    with open(files['stats'], 'w') as f:
        f.write("apple,10\nangle\n")
    assert main(["solve", "--stats", files['stats'], "--targets", files['targets'],
                 "--output", files['output']]) == 1
    assert "line 2" in capsys.readouterr().err


def test_missing_file_exits_nonzero(files, capsys):
    assert main(["trace", "apple", "--stats", files['stats'] + ".missing"]) == 1
    assert "An error occurred" in capsys.readouterr().err


def test_invalid_trace_word_exits_nonzero(files):
    _rank(files)
    assert main(["trace", "toolong", "--stats", files['stats']]) == 1


def test_float_weights_and_no_cap():
    args = build_parser().parse_args(["solve", "--weight-type", "float", "--max-guesses", "0"])
    assert args.weight_type == "float"
    assert args.max_guesses == 0


def test_solve_skips_tokens_that_are_not_words(files, tmp_path):
    _rank(files)
    targets = tmp_path / "mixed.txt"
    targets.write_text("apple\nco-op\nangle\n")
    assert main(["solve", "--stats", files['stats'], "--targets", str(targets),
                 "--output", files['output']]) == 0
    with open(files['output']) as f:
        assert f.read() == "apple\napple,angle"


def test_huge_weight_reports_line(files, capsys):
    with open(files['stats'], 'w') as f:
        f.write("apple,10\nangle," + "9" * 400 + "\n")
    assert main(["trace", "apple", "--stats", files['stats']]) == 1
    assert "line 2" in capsys.readouterr().err
