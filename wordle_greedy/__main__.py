"""
Command-line entry point.

    python -m wordle_greedy rank    # weight guess words against the answers
    python -m wordle_greedy solve   # solve every target, write the traces
    python -m wordle_greedy trace crane
    python -m wordle_greedy run     # rank, then solve, with default files
"""

import argparse
import logging
import sys
import time

from . import config
from .corpus import load_weighted_corpus, load_words, write_traces, write_weighted_corpus
from .errors import WordleError
from .ranking import LetterFrequencyRanker, OracleScoreRanker, rank_words
from .solver import GreedySolver, benchmark, print_results

RANKERS = {
    'oracle': OracleScoreRanker,
    'letters': LetterFrequencyRanker,
}

WEIGHT_TYPES = {
    'int': int,
    'float': float,
}


def cmd_rank(args):
    guesses = load_words(args.guesses)
    answers = load_words(args.answers)
    ranker = RANKERS[args.ranker](answers)
    write_weighted_corpus(args.stats, rank_words(guesses, ranker))
    print("Word stats generated!")


def _make_solver(args) -> GreedySolver:
    corpus = load_weighted_corpus(args.stats, WEIGHT_TYPES[args.weight_type])
    max_guesses = args.max_guesses if args.max_guesses > 0 else None
    return GreedySolver(corpus, max_guesses=max_guesses)


def cmd_solve(args):
    solver = _make_solver(args)
    targets = load_words(args.targets)
    results, summary = benchmark(solver, targets, progress_every=args.progress_every)
    write_traces(args.output, results)
    print(f"Traces written to {args.output}")
    print_results(summary)


def cmd_trace(args):
    solver = _make_solver(args)
    print(f"\n=== Tracing solve for: {args.word} ===\n")
    solver.solve(args.word, verbose=True)


def cmd_run(args):
    t0 = time.time()
    cmd_rank(args)
    cmd_solve(args)
    print(f"time : {time.time() - t0:.0f}")


def _add_corpus_args(parser):
    parser.add_argument('--stats', default=config.STATS_FILE,
                        help="weighted corpus, one word,weight per line")
    parser.add_argument('--weight-type', choices=sorted(WEIGHT_TYPES), default='int')
    parser.add_argument('--max-guesses', type=int, default=config.MAX_GUESSES,
                        help="guess cap per session (0 for none)")


def _add_rank_args(parser):
    parser.add_argument('--guesses', default=config.GUESSES_FILE)
    parser.add_argument('--answers', default=config.ANSWERS_FILE)
    parser.add_argument('--ranker', choices=sorted(RANKERS), default='oracle')


def _add_solve_args(parser):
    parser.add_argument('--targets', default=config.GUESSES_FILE,
                        help="words to solve, whitespace separated")
    parser.add_argument('--output', default=config.OUTPUT_FILE)
    parser.add_argument('--progress-every', type=int, default=config.PROGRESS_EVERY)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='wordle-greedy',
        description="Greedy Wordle solver driven by a weighted word corpus.",
    )
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        default='INFO')
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('rank', help="build the weighted corpus")
    _add_rank_args(p)
    p.add_argument('--stats', default=config.STATS_FILE, help="output corpus file")
    p.set_defaults(func=cmd_rank)

    p = sub.add_parser('solve', help="solve every target word")
    _add_corpus_args(p)
    _add_solve_args(p)
    p.set_defaults(func=cmd_solve)

    p = sub.add_parser('trace', help="solve one word, printing every turn")
    p.add_argument('word')
    _add_corpus_args(p)
    p.set_defaults(func=cmd_trace)

    p = sub.add_parser('run', help="rank, then solve")
    _add_rank_args(p)
    _add_corpus_args(p)
    _add_solve_args(p)
    p.set_defaults(func=cmd_run)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        args.func(args)
    except (WordleError, OSError) as e:
        print(f"An error occurred: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
