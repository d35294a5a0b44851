import pytest
from mrdle.engine import (
    ResultCode, evaluate, score, is_solved, encode_feedback, decode_feedback,
)

M, P, A = ResultCode.MATCHED, ResultCode.MISPLACED, ResultCode.ABSENT


# --- L=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("arise", "rebus", "x~x~~"),
    ("route", "rebus", "!x~x~"),
    ("rules", "rebus", "!~x~!"),
    ("rebus", "rebus", "!!!!!"),
    ("belle", "level", "x!~~~"),
    ("lemon", "level", "!!xxx"),
    ("cools", "scoop", "~~!x~"),
    ("raise", "crane", "~~xx!"),
    ("stare", "crane", "xx!~!"),
    ("allot", "total", "~~x~~"),
    ("abbey", "cabin", "~x!xx"),
    ("press", "spree", "~~~~x"),
])
def test_score_l5_golden(guess, answer, expected):
    assert score(guess, answer) == expected


# --- L=6 and L=4 samples ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("settle", "letter", "x!!!~~"),
    ("little", "letter", "!x!!x~"),
    ("kitten", "tinket", "~!~~!~"),
    ("aabb", "abca", "!~~x"),
])
def test_score_other_lengths(guess, answer, expected):
    assert score(guess, answer) == expected


def test_evaluate_returns_codes_not_chars():
    fb = evaluate("rebus", "arise")
    assert fb == (A, P, A, P, P)
    assert ResultCode.UNPROCESSED not in fb


def test_repeated_guess_letter_single_in_secret():
    # one unmatched 'e' in the secret: the first 'e' is misplaced, the others absent
    assert evaluate("alert", "eerie") == (P, A, P, A, A)


def test_self_match_all_matched():
    for w in ["arise", "route", "rules", "rebus", "level", "aaaaa"]:
        assert is_solved(evaluate(w, w))


def test_no_overlap_all_absent():
    assert evaluate("abcde", "fghij") == (A,) * 5


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        evaluate("rebus", "rebuss")


def test_is_solved():
    assert is_solved((M, M, M))
    assert not is_solved((M, P, M))
    assert not is_solved(())


def test_feedback_encoding():
    assert encode_feedback((M, P, A)) == "!~x"
    assert decode_feedback("!~x") == (M, P, A)
    with pytest.raises(ValueError):
        decode_feedback("!?x")
    with pytest.raises(ValueError):
        encode_feedback((M, ResultCode.UNPROCESSED))
