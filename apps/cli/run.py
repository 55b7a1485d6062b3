# apps/cli/run.py
"""
CLI entry point for batch-evaluating the solver.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Loads the candidate words and the answers to play against.
  3) Solves every answer with a programmatic oracle and writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, word-list hash, git commit, summary
"""

from __future__ import annotations

import argparse
import datetime as dt
import logging
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from wordlebot.datasets import pretty_summary, read_word_list, validate_wordlist
from wordlebot.engine import WORD_LENGTH
from wordlebot.harness import RunReport, run_batch, write_csv


def _run_id() -> str:
    """UTC start time, e.g. 20260119T101500Z; names the output files."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def _git_commit() -> str:
    """Short hash of the checked-out commit, or "unknown" outside a git checkout."""
    try:
        proc = subprocess.run(["git", "rev-parse", "--short", "HEAD"],
                              capture_output=True, text=True, check=False)
    except OSError:
        return "unknown"
    return proc.stdout.strip() if proc.returncode == 0 else "unknown"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordlebot — batch-evaluate the solver")
    ap.add_argument("--word-list-path", default="words_alpha.txt",
                    help="dictionary the solver guesses from")
    ap.add_argument("--answers",
                    help="answers to play against (default: the word list itself)")
    ap.add_argument("--word-length", type=int, default=WORD_LENGTH, help="word length")
    ap.add_argument("--sample", type=int, help="play only the first K answers")
    ap.add_argument("--max-guesses", type=int,
                    help="give up on a case after this many guesses (default: unbounded)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="Show run progress (auto=bar when stderr is a terminal)."
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="log every guess decision")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(name)s: %(message)s")

    # 1) Validate the list and print a one-liner summary
    rep = validate_wordlist(args.word_list_path, args.word_length)
    print(pretty_summary(rep))

    # 2) Load lists into memory
    words = read_word_list(args.word_list_path, args.word_length)
    answers = read_word_list(args.answers, args.word_length) if args.answers else list(words)
    word_set = set(words)
    missing = [a for a in answers if a not in word_set]
    if missing:
        print(f"warning: {len(missing)} answer(s) not in word list (e.g. {missing[:5]})",
              file=sys.stderr)

    # 3) Run batch
    progress = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())
    results = run_batch(words, answers, sample=args.sample,
                        max_guesses=args.max_guesses, progress=progress)
    run_id = _run_id()
    report = RunReport.from_results(results, run_id=run_id, git_commit=_git_commit(),
                                    config=vars(args), wordlist=rep)
    summary = report.summary
    print(f"solved {summary['solved']}/{summary['games']} | "
          f"mean {summary['mean_guesses']:.3f} | worst {summary['worst']} | "
          f"histogram {summary['histogram']}")

    # 4) Write outputs (CSV + report)
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=args.max_guesses)
    report.write(str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
