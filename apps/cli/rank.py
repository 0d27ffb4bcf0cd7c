# apps/cli/rank.py
"""
CLI entry point: rank guesses by expected remaining candidates.

Usage:
    python -m apps.cli.rank [options] MODE [GUESS FEEDBACK ...]

  MODE      'h' (any case) for hard mode, anything else for normal mode
  GUESS     a word already played
  FEEDBACK  its five-letter code: g = green, y = yellow, anything else = grey

Options must come before MODE; every token after it is read as history, so
feedback codes like "--y--" are fine.

This script:
  1) Loads the word list (one word per line).
  2) Narrows it to the words consistent with the history.
  3) Scores every allowed guess against the survivors (process pool + tqdm bar).
  4) Prints the best ones; on a fresh start (no history) also dumps the full
     ranking to JSON.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from wordlescore.datasets import read_words
from wordlescore.engine import WordScoreError, is_hard_mode, parse_history
from wordlescore.harness import format_ranking, run_ranking, write_scores_json
from wordlescore.harness.io import TOP_N

DEFAULT_WORDS = "words.txt"
DEFAULT_OUT = "scores.json"


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="wordlescore",
        description="Rank guesses by expected remaining candidates")
    ap.add_argument("--words", default=DEFAULT_WORDS, help="word list, one word per line")
    ap.add_argument("--out", default=DEFAULT_OUT,
                    help="JSON file for the full ranking (written only when no history is given)")
    ap.add_argument("--top", type=int, default=TOP_N,
                    help="how many ranked words to print (0 = all)")
    ap.add_argument("--workers", type=int, default=None,
                    help="scoring processes (default: CPU count; 1 = no pool)")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="Show scoring progress (auto=bar only when stderr is a terminal).")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    ap.add_argument("mode", help="'h' for hard mode, anything else for normal mode")
    ap.add_argument("history", nargs=argparse.REMAINDER,
                    help="alternating guess and feedback tokens")
    return ap


def _show_progress(mode: str) -> bool:
    if mode == "auto":
        return sys.stderr.isatty()
    return mode == "bar"


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse args, run the ranking, print/write results. Returns the exit status.
    """
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        history = parse_history(args.history)
        words = read_words(args.words)
        result = run_ranking(
            words, history,
            hard_mode=is_hard_mode(args.mode),
            workers=args.workers,
            progress=_show_progress(args.progress),
        )
    except WordScoreError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print("Results: ")
    for line in format_ranking(result.scores, args.top if args.top > 0 else None):
        print(line)

    # only a fresh start (no history) is dumped
    if not history:
        path = write_scores_json(result.scores, args.out)
        print(f"Wrote: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
