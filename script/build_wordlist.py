"""
Build a clean N-letter word list from a raw dictionary file.

Features:
- Keeps only purely alphabetic words of exactly N letters, lowercased.
- Preserves original order (stable dedupe, first occurrence wins).
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.
- Writes to --out, or overwrites the input by default.

Usage:
    python -m script.build_wordlist --in words_alpha.txt --out words_5.txt --N 5
"""

import argparse
from pathlib import Path

from wordlebot.datasets import read_word_list, write_lines


def main():
    ap = argparse.ArgumentParser(description="Filter a dictionary to clean N-letter words.")
    ap.add_argument("--in", dest="inp", required=True, help="input dictionary file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--N", type=int, default=5, help="word length to keep")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    words = read_word_list(inp, args.N)
    if args.sort:
        words = sorted(words)

    write_lines(words, outp)
    print(f"Input: {inp} -> Output: {outp} ({len(words)} words of length {args.N})")


if __name__ == "__main__":
    main()
