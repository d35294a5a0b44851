"""
Game harness core primitives.

- GameSession: one game against one secret; accepts guesses, scores them,
  keeps the hint history and the per-letter state map.
- run_case:    let a solver play a single session to the end.
- run_batch:   run many sessions back to back (optionally a sample prefix).

These are UI-agnostic: the terminal loop in apps/cli/play.py and the
batch runner in apps/cli/run.py both sit on top of them.
"""

from __future__ import annotations

import logging
import random
import time
from itertools import islice
from typing import Dict, Iterable, List

from mrdle.datasets.wordstore import WordStore
from mrdle.engine import (
    Feedback, Hint, ResultCode, NotAWord, encode_feedback, evaluate, is_solved, require_word,
)

log = logging.getLogger(__name__)

# Single source of truth for the turn budget.
MAX_TURNS = 6

WIN_EXCLAMATIONS = ("Genius!", "Magnificent", "Impressive", "Splendid", "Great", "Phew")

LOSE_INSULTS = (
    "Wow, that was embarrassing.",
    "At least your head can serve as a hat rack.",
    "Were you dropped on your head as a child?",
    "Stupid is as stupid does.",
    "Don't quit your day job.",
    "You are terrible at this.",
    "Sorry, you suck.",
)


def win_message(guess_count: int) -> str:
    if 1 <= guess_count <= len(WIN_EXCLAMATIONS):
        return WIN_EXCLAMATIONS[guess_count - 1]
    return "Meh"


def lose_message(rng: random.Random) -> str:
    # Most of the time it's just "You lose."
    i = rng.randrange(26)
    return LOSE_INSULTS[i] if i < len(LOSE_INSULTS) else "You lose."


class GameSession:
    """
    One game.

    Args:
      store:     the word store (guesses must be members)
      secret:    the word to find; None or "" picks store.random_word()
      max_turns: guesses allowed before the game is lost
    """

    def __init__(self, store: WordStore, secret: str | None = None, *, max_turns: int = MAX_TURNS):
        if max_turns < 1:
            raise ValueError(f"max_turns must be >= 1; got {max_turns}")
        self.store = store
        self.max_turns = max_turns
        self.secret = require_word(secret, store) if secret else store.random_word()
        self.history: List[Hint] = []
        # letter -> state from the most recent guess containing it
        self.letter_map: Dict[str, ResultCode] = {}
        self.won = False

    @property
    def turn(self) -> int:
        """Number of the next guess (1-based)."""
        return len(self.history) + 1

    @property
    def lost(self) -> bool:
        return not self.won and len(self.history) >= self.max_turns

    @property
    def over(self) -> bool:
        return self.won or self.lost

    def guess(self, word: str) -> Feedback:
        """
        Score one guess.

        Raises NotAWord (turn not consumed) if the store doesn't know the word,
        and RuntimeError if the game is already over.
        """
        if self.over:
            raise RuntimeError("game is over")

        w = require_word(word, self.store)
        feedback = evaluate(self.secret, w)
        self.history.append(Hint(w, feedback))

        for ch, code in zip(w, feedback):
            self.letter_map[ch] = code

        if is_solved(feedback):
            self.won = True
        log.debug("turn %d: %s -> %s", len(self.history), w, encode_feedback(feedback))
        return feedback


def run_case(
        solver,
        answer: str,
        *,
        store: WordStore,
        max_turns: int = MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Let `solver` play one game against `answer`.

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[Hint]), answer (str)
    """
    solver.reset(words=store.words(), N=store.word_length(), seed=seed)
    session = GameSession(store, answer, max_turns=max_turns)

    t0 = time.perf_counter()
    while not session.over:
        guess = solver.next_guess(list(session.history))
        try:
            session.guess(guess)
        except NotAWord:
            # A solver proposing non-words would loop forever; count it as a loss
            log.warning("solver %s proposed a non-word: %r", getattr(solver, "id", "?"), guess)
            break
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "success": session.won,
        "guesses": len(session.history),
        "time_ms": dt,
        "history": list(session.history),
        "answer": session.secret,
    }


def run_batch(
        solver,
        answers: Iterable[str],
        *,
        store: WordStore,
        max_turns: int = MAX_TURNS,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K answers
    are used to speed up quick experiments.

    `answers` is consumed lazily, so a progress-bar iterator can be passed in.
    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    pool = islice(answers, sample)

    out: List[Dict] = []
    for idx, ans in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(solver, ans, store=store, max_turns=max_turns, seed=case_seed)
        r["solver_id"] = getattr(solver, "id", "?")
        out.append(r)
    return out
