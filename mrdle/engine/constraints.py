"""
Candidate filtering given recorded hints.

Given:
  - a pool of words (usually the whole word store)
  - a list of hints: (guess, feedback) pairs observed earlier
  - word length N

Return:
  - the words that could still be the secret.

Per hint position the rules are:
  '!' : the candidate has the same letter in this spot
  'x' : the candidate does not contain this letter anywhere
  '~' : the candidate does not have this letter in this spot,
        but has it in some other spot

The 'x' rule is deliberately the simple one: it does not track how many
copies of a letter the secret holds, so a guess with a repeated letter
('~' on one copy, 'x' on the other) prunes every word containing that
letter, the secret included. Pass exact=True to filter by re-scoring
instead, which is count-aware.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, NamedTuple, Sequence, Tuple, Union

from .codes import VALID_CODES, Feedback, ResultCode, decode_feedback, encode_feedback
from .errors import InvalidHint
from .scoring import evaluate

log = logging.getLogger(__name__)


class Hint(NamedTuple):
    guess: str
    feedback: Feedback

    def __str__(self) -> str:
        return f"{self.guess} {encode_feedback(self.feedback)}"


# Hints may arrive already parsed, or as raw (guess, "!~x..") pairs
HintLike = Union[Hint, Tuple[str, str]]


def parse_hint(guess: str, feedback: str) -> Hint:
    """
    Build a Hint from boundary strings. The guess is trimmed and lowercased;
    lengths are checked later against the store in validate_hints().
    """
    guess = guess.strip().lower()
    feedback = feedback.strip()
    try:
        codes = decode_feedback(feedback)
    except ValueError as e:
        raise InvalidHint(guess, feedback, str(e)) from e
    return Hint(guess, codes)


def _as_hint(h: HintLike) -> Hint:
    if isinstance(h, Hint):
        return h
    guess, feedback = h
    if isinstance(feedback, str):
        return parse_hint(guess, feedback)
    return Hint(guess, tuple(feedback))


def validate_hints(hints: Iterable[HintLike], N: int) -> List[Hint]:
    """
    Check every hint before any filtering is done.

    Each guess and each feedback must have length N and each feedback code
    must be one of '!', '~', 'x'. The first bad pair raises InvalidHint;
    nothing is skipped.

    Returns the hints as parsed Hint tuples.
    """
    out: List[Hint] = []
    for h in hints:
        hint = _as_hint(h)
        fb = "".join(c.value for c in hint.feedback)
        if len(hint.guess) != N:
            raise InvalidHint(hint.guess, fb, f"guess must have {N} letters")
        if len(hint.feedback) != N:
            raise InvalidHint(hint.guess, fb, f"feedback must have {N} codes")
        if any(c.value not in VALID_CODES for c in hint.feedback):
            raise InvalidHint(hint.guess, fb, "feedback codes must be one of '!', '~', 'x'")
        out.append(hint)
    return out


def is_consistent(candidate: str, hint: Hint, *, exact: bool = False) -> bool:
    """
    Could `candidate` be the secret, given one recorded hint?

    Args:
      candidate : word of the same length as hint.guess
      hint      : (guess, feedback)
      exact     : compare evaluate(candidate, guess) to the feedback instead
                  of applying the per-position rules
    """
    guess, feedback = hint
    if exact:
        return evaluate(candidate, guess) == tuple(feedback)

    for i, code in enumerate(feedback):
        letter = guess[i]
        if code is ResultCode.MATCHED:
            if candidate[i] != letter:
                return False
        elif code is ResultCode.ABSENT:
            if letter in candidate:
                return False
        elif code is ResultCode.MISPLACED:
            # Not here...
            if candidate[i] == letter:
                return False
            # ...but somewhere else
            if not any(c == letter for j, c in enumerate(candidate) if j != i):
                return False
    return True


def consistent_with_all(candidate: str, hints: Sequence[Hint], *, exact: bool = False) -> bool:
    """AND over all hints; stops at the first one that rules the candidate out."""
    for hint in hints:
        if not is_consistent(candidate, hint, exact=exact):
            return False
    return True


def filter_candidates(
        words: Iterable[str],
        hints: Iterable[HintLike],
        N: int,
        *,
        exact: bool = False,
) -> List[str]:
    """
    Keep only words (length == N) consistent with every hint.

    Hints are validated up front; an InvalidHint aborts the whole batch and
    no partial result is returned.

    Returns:
      List[str] of surviving candidates (order preserved as in `words`).
    """
    checked = validate_hints(hints, N)

    out: List[str] = []
    total = 0
    for w in words:
        total += 1
        if len(w) != N:
            continue
        if consistent_with_all(w, checked, exact=exact):
            out.append(w)

    log.debug("filter: %d hint(s), %d -> %d candidate(s)", len(checked), total, len(out))
    return out
