# apps/cli/solve.py
"""
CLI entry point for solving one puzzle.

  python -m apps.cli.solve --word-list-path words_alpha.txt
      interactive: type the game's response after each suggested guess

  python -m apps.cli.solve --word-list-path words_alpha.txt --answer crane
      programmatic: feedback is computed against the given answer

Prints the guess sequence, winning guess last.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from wordlebot.datasets import read_word_list
from wordlebot.engine import WORD_LENGTH, NoCandidatesError, solve
from wordlebot.oracles import InteractiveOracle, ProgrammaticOracle


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordlebot — solve a Wordle-style puzzle")
    ap.add_argument("--word-list-path", default="words_alpha.txt",
                    help="dictionary file (whitespace-separated words)")
    ap.add_argument("--answer",
                    help="secret word; when given, feedback is computed instead of typed")
    ap.add_argument("--word-length", type=int, default=WORD_LENGTH,
                    help="word length (default 5)")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="log candidate counts while solving")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(message)s")

    if args.answer is not None and len(args.answer.strip()) != args.word_length:
        ap.error(f"--answer must have exactly {args.word_length} letters")

    words = read_word_list(args.word_list_path, args.word_length)
    if args.answer is not None:
        oracle = ProgrammaticOracle(args.answer)
    else:
        oracle = InteractiveOracle(args.word_length)

    try:
        sln = solve(words, oracle)
    except NoCandidatesError as e:
        print(f"Gave up: {e}", file=sys.stderr)
        return 1
    except EOFError:
        print("No more input; stopping.", file=sys.stderr)
        return 1

    print(f"Solution: {list(sln.guess_sequence)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
