import numpy as np
from mrdle.datasets.stats import (
    format_word_stats, letter_counts, positional_counts, slot_entropy, top_letters,
)

WORDS = ["arise", "route", "rules", "rebus"]


def test_letter_counts_once_per_word():
    counts = letter_counts(["level"])
    assert counts[ord("e") - 97] == 1
    assert counts[ord("l") - 97] == 1
    assert counts.sum() == 3


def test_positional_counts_shape():
    pc = positional_counts(WORDS)
    assert pc.shape == (5, 26)
    assert pc[0, ord("r") - 97] == 3
    assert pc.sum() == 20


def test_slot_entropy_bits():
    h = slot_entropy(["aa", "ab"])
    assert np.allclose(h, [0.0, 1.0])


def test_top_letters_ties_alphabetical():
    assert top_letters(WORDS, 3) == [("e", 4), ("r", 4), ("s", 3)]


def test_format_word_stats():
    text = format_word_stats(WORDS)
    assert text.startswith("Words: 4")
    assert "Word length: 5" in text
    assert format_word_stats([]) == "Words: 0"
