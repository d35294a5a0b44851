"""
The word store: every word the game may pick as a secret or accept as a guess.

Invariants:
  - all words are lowercase and share one length L
  - words are unique and sorted ascending (membership is a binary search)
  - read-only once built

Each store owns its random generator. Without a seed it is seeded from the
OS entropy pool; pass `seed` for reproducible picks in tests and batch runs.
"""

from __future__ import annotations

import logging
import random
from bisect import bisect_left
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence

from mrdle.engine.constraints import HintLike, filter_candidates
from mrdle.engine.errors import InvalidWordList
from .default_words import DEFAULT_WORD_SIZE, DEFAULT_WORDS_BLOB
from .io import read_lines

log = logging.getLogger(__name__)


class WordStore:

    def __init__(self, words: Sequence[str] = (), *, seed: int | None = None):
        """
        Build a store from already clean words (lowercase, one length).
        Use from_lines()/from_file() for raw input.
        """
        self._words: List[str] = sorted(set(words))
        self._len = len(self._words[0]) if self._words else 0
        if any(len(w) != self._len for w in self._words):
            raise InvalidWordList("Inconsistent word length")
        self.rng = random.Random(seed)

    # ---------- Construction helpers ----------

    @classmethod
    def from_lines(cls, lines: Iterable[str], *, seed: int | None = None) -> "WordStore":
        """
        Build a store from raw lines, one word per line.

        Each line is trimmed and lowercased; blank lines are skipped. The
        first non-blank line fixes the word length and any later line of a
        different length raises InvalidWordList.
        """
        words: List[str] = []
        word_len = 0

        for lineno, raw in enumerate(lines, start=1):
            w = raw.strip().lower()
            if not w:
                continue
            if word_len == 0:
                word_len = len(w)
            if len(w) != word_len:
                raise InvalidWordList("Inconsistent word length", line=w, lineno=lineno)
            words.append(w)

        store = cls(words, seed=seed)
        log.debug("word store: %d line(s) -> %d word(s) of length %d",
                  len(words), store.count(), store.word_length())
        return store

    @classmethod
    def from_file(cls, path: Path | str, *, seed: int | None = None) -> "WordStore":
        """Load a word file (UTF-8, one word per line)."""
        try:
            lines = read_lines(path)
        except (OSError, UnicodeDecodeError) as e:
            raise InvalidWordList(f"Failed to read word file: {path} ({e})") from e
        log.debug("loading word file %s", path)
        return cls.from_lines(lines, seed=seed)

    @classmethod
    def default(cls, *, seed: int | None = None) -> "WordStore":
        """
        The built-in list. The blob is the words run together with no
        separators, so it is sliced every DEFAULT_WORD_SIZE characters.
        """
        blob = DEFAULT_WORDS_BLOB
        n = DEFAULT_WORD_SIZE
        return cls([blob[i:i + n] for i in range(0, len(blob), n)], seed=seed)

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __repr__(self) -> str:
        return f"WordStore(count={self.count()}, word_length={self.word_length()})"

    def count(self) -> int:
        return len(self._words)

    def word_length(self) -> int:
        """Common word length, 0 for an empty store."""
        return self._len

    def words(self) -> List[str]:
        """Return a copy of the sorted word list."""
        return list(self._words)

    def contains(self, word: str) -> bool:
        """True iff `word` (lowercase) is in the store. Wrong lengths are just False."""
        if len(word) != self._len:
            return False
        i = bisect_left(self._words, word)
        return i < len(self._words) and self._words[i] == word

    def random_word(self) -> str:
        """Uniform pick. Check count() > 0 first: an empty store raises IndexError."""
        if not self._words:
            raise IndexError("cannot pick a word from an empty word store")
        return self._words[self.rng.randrange(len(self._words))]

    def filter(self, hints: Iterable[HintLike], *, exact: bool = False) -> List[str]:
        """Words still possible after `hints`, in sorted order."""
        return filter_candidates(self._words, hints, self._len, exact=exact)
