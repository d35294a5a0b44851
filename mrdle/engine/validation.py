"""
Guess validation.

A guess is acceptable iff, after trimming and lowercasing, it is an
alphabetic word present in the word store. The store's own lookup rejects
wrong-length input, so no separate length check is needed.

A rejected guess is not an error for the game: the player is told "Not a
word" and the turn is not consumed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import NotAWord

if TYPE_CHECKING:
    from mrdle.datasets.wordstore import WordStore


def normalize(word: str) -> str:
    return word.strip().lower()


def validate_guess(word: str, store: "WordStore") -> bool:
    """Return True if `word` is a valid guess for this store."""
    if not isinstance(word, str):
        return False

    w = normalize(word)
    if not w.isalpha():
        return False
    return store.contains(w)


def require_word(word: str, store: "WordStore") -> str:
    """Normalized `word`, or NotAWord if the store doesn't know it."""
    if not validate_guess(word, store):
        raise NotAWord(word.strip() if isinstance(word, str) else str(word))
    return normalize(word)
