"""
Feedback codes.

Inside the engine a feedback is a tuple of ResultCode members, one per
letter of the guess. Outside (command line hints, plain-text display,
CSV reports) it is a string over the alphabet:

  '!' : matched  = letter is in the correct spot
  '~' : misplaced = letter is in the word, but in another spot
  'x' : absent   = letter is not in the word (or all of its copies are
                   already accounted for)

UNPROCESSED (' ') only exists while a guess is being scored.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Tuple


class ResultCode(Enum):
    MATCHED = "!"
    MISPLACED = "~"
    ABSENT = "x"
    UNPROCESSED = " "


# Codes allowed in a finished feedback / a user supplied hint
VALID_CODES = frozenset(c.value for c in (ResultCode.MATCHED, ResultCode.MISPLACED, ResultCode.ABSENT))

Feedback = Tuple[ResultCode, ...]


def encode_feedback(feedback: Iterable[ResultCode]) -> str:
    """Feedback -> boundary string, e.g. (MATCHED, ABSENT, ...) -> '!x...'"""
    out = []
    for code in feedback:
        if code is ResultCode.UNPROCESSED:
            raise ValueError("feedback still contains unprocessed positions")
        out.append(code.value)
    return "".join(out)


def decode_feedback(text: str) -> Feedback:
    """
    Boundary string -> Feedback.

    Raises ValueError on any character outside {'!', '~', 'x'}. Hint
    parsing wraps this into InvalidHint with the offending pair.
    """
    codes = []
    for ch in text:
        if ch not in VALID_CODES:
            raise ValueError(f"unknown feedback code {ch!r}")
        codes.append(ResultCode(ch))
    return tuple(codes)
