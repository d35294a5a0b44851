# apps/cli/play.py
"""
The mrdle program: play in the terminal, or list the words that fit a set
of hints.

  python -m apps.cli.play                          # play, random secret
  python -m apps.cli.play --word-file words.txt    # play with another list
  python -m apps.cli.play --list --hint arise x~x~~ --hint route '!x~x~'
  python -m apps.cli.play --word-stats

Exit status: 0 on success, 1 if the word list or a hint is invalid.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Sequence, TextIO

import colorama

from mrdle import __version__
from mrdle.datasets import WordStore
from mrdle.datasets.stats import format_word_stats
from mrdle.engine import InvalidHint, InvalidWordList, NotAWord, parse_hint
from mrdle.harness import GameSession, MAX_TURNS, win_message, lose_message
from mrdle.harness.render import render_turn

log = logging.getLogger("mrdle")

RULES = f"""\
Guess the secret word in {MAX_TURNS} tries.

Each guess must be a word from the word list. After each guess every letter
is marked:
  !  (green)   the letter is in the word and in the right spot
  ~  (yellow)  the letter is in the word but in another spot
  x  (grey)    the letter is not in the word

A letter guessed more times than it appears in the secret is marked 'x' for
the extra copies.

Solution finder: --list prints every word that fits the hints given with
--hint GUESS FEEDBACK, e.g. --hint arise 'x~x~~'.
"""


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="mrdle", description="mrdle: a terminal word game and solver")
    ap.add_argument("--word-file", default="", help="word list, one word per line (default: built-in list)")
    ap.add_argument("--secret-word", default="", help="play against this word instead of a random one")
    ap.add_argument("--list", action="store_true", help="list the words matching the --hint options")
    ap.add_argument("--hint", nargs=2, action="append", default=[], metavar=("GUESS", "FEEDBACK"),
                    help="a previous guess and its feedback over '!~x' (repeatable, implies --list)")
    ap.add_argument("--exact", action="store_true",
                    help="count-aware hint filtering (repeated letters in a guess)")
    ap.add_argument("--word-stats", action="store_true", help="print letter statistics for the word list")
    ap.add_argument("--rules", action="store_true", help="show the rules and exit")
    ap.add_argument("--version", action="version", version=f"mrdle {__version__}")
    ap.add_argument("--no-color", action="store_true", help="plain output (feedback codes under each guess)")
    ap.add_argument("--seed", type=int, help="seed for picking the secret word")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def load_store(word_file: str, seed: int | None = None) -> WordStore:
    if word_file:
        return WordStore.from_file(word_file, seed=seed)
    return WordStore.default(seed=seed)


def list_words(store: WordStore, raw_hints: Sequence[Sequence[str]], *, exact: bool = False,
               out: TextIO | None = None) -> int:
    """Print every word consistent with the hints. Raises InvalidHint before printing anything."""
    hints = [parse_hint(g, f) for g, f in raw_hints]
    words = store.filter(hints, exact=exact)
    if not words:
        print("<No words matched>", file=out)
    for w in words:
        print(w, file=out)
    return 0


def play(store: WordStore, secret: str = "", *, color: bool = True,
         inp: TextIO | None = None, out: TextIO | None = None) -> bool:
    """Interactive game loop. Returns True on a win."""
    if inp is None:
        inp = sys.stdin
    session = GameSession(store, secret or None)

    while not session.over:
        print(f"{session.turn}: ", end="", file=out, flush=True)
        line = inp.readline()
        if not line:
            break  # EOF
        guess = line.strip().lower()
        if not guess:
            continue

        try:
            feedback = session.guess(guess)
        except NotAWord:
            print("Not a word", file=out)
            continue

        print(render_turn(guess, feedback, session.letter_map, color=color), file=out)

    if session.won:
        print(win_message(len(session.history)), file=out)
    elif session.lost:
        print(f"{lose_message(store.rng)}\nThe word was: {session.secret}", file=out)
    return session.won


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    loglevel = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=loglevel, format="%(name)s: %(message)s")

    if args.rules:
        print(RULES)
        return 0

    try:
        store = load_store(args.word_file, seed=args.seed)
    except InvalidWordList as e:
        log.error("Invalid word file: %s", e)
        return 1
    if store.count() == 0:
        log.error("Word list is empty")
        return 1

    if args.word_stats:
        print(format_word_stats(store.words()))
        return 0

    # any --hint implies --list
    if args.list or args.hint:
        try:
            return list_words(store, args.hint, exact=args.exact)
        except InvalidHint as e:
            log.error("%s", e)
            return 1

    color = not args.no_color
    if color:
        colorama.just_fix_windows_console()
    try:
        play(store, args.secret_word, color=color)
    except NotAWord as e:
        log.error("Secret word is not in the word list: %s", e.word)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
