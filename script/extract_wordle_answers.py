"""
Build a mrdle word file from the published list of past Wordle answers.

What it does:
- Downloads the page with historical answers.
- Parses visible text and extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Captures the final UPPERCASE token as the answer.
- Lowercases, de-duplicates, and writes one word per line. The result loads
  straight into WordStore.from_file().

Usage:
    python -m script.extract_wordle_answers --out words/answers_5.txt
    # or alphabetically sorted:
    python -m script.extract_wordle_answers --sort --out words/answers_5.txt
"""

import re
import argparse
import logging

import requests
from bs4 import BeautifulSoup

from mrdle.datasets import WordStore
from mrdle.datasets.io import unique_preserve_order, write_lines

log = logging.getLogger("mrdle.extract")

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{5})\b")


def parse_answers(html: str) -> list[str]:
    """Answers found in the page, in calendar order, without repeats."""
    soup = BeautifulSoup(html, "html.parser")
    text = soup.get_text("\n", strip=True)
    answers = [m.group(2).lower() for m in ROW_RE.finditer(text)]
    return unique_preserve_order(answers)


def fetch_answers(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return parse_answers(r.text)


def main():
    ap = argparse.ArgumentParser(description="Extract unique Wordle answers into a word file")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="words/answers_5.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "calendar order")
    args = ap.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    answers = fetch_answers(args.url)
    if args.sort:
        answers = sorted(answers)

    # Refuse to write something the game can't load
    store = WordStore.from_lines(answers)
    write_lines(answers, args.out)
    log.info("Wrote %d unique answers (length %d) -> %s", store.count(), store.word_length(), args.out)


if __name__ == "__main__":
    main()
