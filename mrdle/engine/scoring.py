"""
Feedback for a single (secret, guess) pair.

Conventions (see codes.py):
  - MATCHED   '!' : correct letter in the correct position
  - MISPLACED '~' : correct letter in the wrong position
  - ABSENT    'x' : letter not present (or present fewer times than guessed)

This implementation is:
  - L-aware (any word length)
  - duplicate-safe (a secret letter backs at most one '!' or '~')
  - deterministic (same inputs -> same outputs)

Algorithm (two-pass):
  1) First pass marks exact matches. Their secret positions are claimed.
  2) Second pass walks the remaining guess positions left to right. For
     each one, scan the secret from the start for the same letter,
     skipping positions that are already claimed. The first free
     occurrence makes the guess position MISPLACED and is claimed in turn;
     running off the end of the secret makes it ABSENT.

  secret="abca", guess="aabb" -> "!~~x"
    pos0 'a' matches; pos1 'a' skips claimed secret[0] and takes secret[3];
    pos2 'b' takes secret[1]; pos3 'b' finds secret[1] already claimed.
"""

from __future__ import annotations

from typing import List

from .codes import Feedback, ResultCode, encode_feedback


def evaluate(secret: str, guess: str) -> Feedback:
    """
    Compute the feedback for `guess` against `secret`.

    Preconditions:
      - both are lowercase words of the same length (the caller has already
        checked that the guess is in the word store)

    Returns:
      - tuple of ResultCode, one per guess letter, never UNPROCESSED
    """
    if len(secret) != len(guess):
        raise ValueError(f"secret and guess must be the same length ({len(secret)} != {len(guess)})")

    n = len(guess)
    result: List[ResultCode] = [ResultCode.UNPROCESSED] * n
    claimed = [False] * n

    # Pass 1: exact matches
    for i in range(n):
        if guess[i] == secret[i]:
            result[i] = ResultCode.MATCHED
            claimed[i] = True

    # Pass 2: everything else
    for i in range(n):
        if result[i] is not ResultCode.UNPROCESSED:
            continue

        offset = 0
        while True:
            p = secret.find(guess[i], offset)
            if p < 0:
                result[i] = ResultCode.ABSENT
                break
            if not claimed[p]:
                result[i] = ResultCode.MISPLACED
                claimed[p] = True
                break
            # Already backing another '!' or '~'; look further along
            offset = p + 1

    return tuple(result)


def score(guess: str, answer: str) -> str:
    """
    Boundary form of evaluate(): the feedback as a '!~x' string.

    Examples:
      score("arise", "rebus") -> "x~x~~"
      score("rules", "rebus") -> "!~x~!"
    """
    return encode_feedback(evaluate(answer, guess))


def is_solved(feedback: Feedback) -> bool:
    """True when every position is MATCHED."""
    return bool(feedback) and all(code is ResultCode.MATCHED for code in feedback)
