"""
Clean up a word file for mrdle.

Features:
- Trims whitespace and drops blank lines.
- Lowercases (mrdle is case-insensitive; 'TEARS' == 'tears').
- Removes duplicates, preserving original order by default.
- Optional sorting AFTER dedupe (alphabetical).
- Optional --length N to drop words of any other length, so the output has
  the uniform length the word store requires.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.dedupe_txt --in words/allowed.txt --length 5 --sort
"""

import argparse
from pathlib import Path

from mrdle.datasets.io import read_lines, unique_preserve_order, write_lines


def clean_words(lines: list[str], length: int | None = None) -> list[str]:
    words = [s.strip().lower() for s in lines if s.strip()]
    if length is not None:
        words = [w for w in words if len(w) == length]
    return unique_preserve_order(words)


def main():
    ap = argparse.ArgumentParser(description="Remove duplicate lines from a word file.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--length", type=int, help="keep only words of this length")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    out = clean_words(lines, args.length)
    if args.sort:
        out = sorted(out)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} unique)")


if __name__ == "__main__":
    main()
