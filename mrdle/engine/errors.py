"""
Exceptions raised by the engine and the word store.

All of them are ValueErrors: they describe bad input (a malformed word
list, a malformed hint, a guess that isn't a word), never an internal
failure. Callers decide whether to retry, re-prompt or exit.
"""

from __future__ import annotations


class MrdleError(ValueError):
    """Base class for mrdle input errors."""


class InvalidWordList(MrdleError):
    """
    The word list could not be read, or its lines have inconsistent lengths.

    `line` / `lineno` identify the first offending line when known.
    """

    def __init__(self, message: str, *, line: str | None = None, lineno: int | None = None):
        self.line = line
        self.lineno = lineno
        if lineno is not None:
            message = f"{message} (line {lineno}: {line!r})"
        super().__init__(message)


class InvalidHint(MrdleError):
    """A (guess, feedback) pair has the wrong length or an unknown feedback code."""

    def __init__(self, guess: str, feedback: str, reason: str):
        self.guess = guess
        self.feedback = feedback
        self.reason = reason
        super().__init__(f"Invalid hint: {guess} {feedback} ({reason})")


class NotAWord(MrdleError):
    """A guess that is not in the word store. Not fatal: the turn is retried."""

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"Not a word: {word!r}")
