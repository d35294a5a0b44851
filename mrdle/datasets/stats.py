"""
Letter statistics over a word list (the `--word-stats` report).

- letter_counts:     (26,)   how many words contain each letter (once per word)
- positional_counts: (L, 26) how often each letter sits in each slot
- slot_entropy:      (L,)    per-slot Shannon entropy in bits
"""

from __future__ import annotations

from string import ascii_lowercase
from typing import List, Sequence, Tuple

import numpy as np

ALPHABET = ascii_lowercase


def _letter_index(ch: str) -> int:
    """Map a lowercase letter to 0..25."""
    return ord(ch) - 97


def letter_counts(words: Sequence[str]) -> np.ndarray:
    counts = np.zeros(len(ALPHABET), dtype=np.int64)
    for w in words:
        for ch in set(w):
            if ch in ALPHABET:
                counts[_letter_index(ch)] += 1
    return counts


def positional_counts(words: Sequence[str]) -> np.ndarray:
    if not words:
        return np.zeros((0, len(ALPHABET)), dtype=np.int64)
    L = len(words[0])
    counts = np.zeros((L, len(ALPHABET)), dtype=np.int64)
    for w in words:
        for i, ch in enumerate(w):
            if ch in ALPHABET:
                counts[i, _letter_index(ch)] += 1
    return counts


def slot_entropy(words: Sequence[str]) -> np.ndarray:
    pc = positional_counts(words).astype(float)
    totals = pc.sum(axis=1, keepdims=True)
    with np.errstate(divide="ignore", invalid="ignore"):
        p = np.where(totals > 0, pc / totals, 0.0)
        h = -np.where(p > 0, p * np.log2(p), 0.0).sum(axis=1)
    return h


def top_letters(words: Sequence[str], n: int = 10) -> List[Tuple[str, int]]:
    """The `n` letters found in the most words, ties broken alphabetically."""
    counts = letter_counts(words)
    order = sorted(range(len(ALPHABET)), key=lambda i: (-counts[i], i))
    return [(ALPHABET[i], int(counts[i])) for i in order[:n] if counts[i] > 0]


def format_word_stats(words: Sequence[str]) -> str:
    """Plain-text report: totals, letter coverage, and the best letter per slot."""
    n = len(words)
    lines = [f"Words: {n}"]
    if n == 0:
        return lines[0]
    L = len(words[0])
    lines.append(f"Word length: {L}")

    counts = letter_counts(words)
    lines.append("Letter coverage (% of words containing the letter):")
    for ch, c in top_letters(words, len(ALPHABET)):
        lines.append(f"  {ch}: {c:6d}  {100.0 * c / n:5.1f}%")

    pc = positional_counts(words)
    H = slot_entropy(words)
    lines.append("Most common letter per position:")
    for i in range(L):
        j = int(np.argmax(pc[i]))
        lines.append(f"  {i + 1}: {ALPHABET[j]} ({int(pc[i, j])})  H={H[i]:.2f} bits")

    unused = [ALPHABET[i] for i in range(len(ALPHABET)) if counts[i] == 0]
    if unused:
        lines.append("Unused letters: " + " ".join(unused))
    return "\n".join(lines)
