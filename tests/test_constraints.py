import itertools

import pytest
from mrdle.datasets import WordStore
from mrdle.engine import (
    Hint, InvalidHint, ResultCode, evaluate, filter_candidates, is_consistent,
    consistent_with_all, parse_hint, validate_hints,
)

WORDS = ["arise", "route", "rules", "rebus"]
HINTS = [("arise", "x~x~~"), ("route", "!x~x~"), ("rules", "!~x~!")]


def test_round_trip_leaves_only_the_secret():
    store = WordStore.from_lines(WORDS)
    assert store.filter(HINTS) == ["rebus"]


def test_each_hint_narrows():
    # arise x~x~~ keeps rules + rebus; route keeps both; rules drops itself
    assert filter_candidates(WORDS, HINTS[:1], 5) == ["rules", "rebus"]
    assert filter_candidates(WORDS, HINTS[:2], 5) == ["rules", "rebus"]
    assert filter_candidates(WORDS, HINTS, 5) == ["rebus"]


def test_no_hints_keeps_everything():
    assert filter_candidates(WORDS, [], 5) == WORDS


@pytest.mark.parametrize("candidate,hint,expected", [
    ("rebus", ("rules", "!~x~!"), True),
    ("rules", ("rules", "!~x~!"), False),   # '~' forbids the letter in its own spot
    ("route", ("arise", "x~x~~"), False),   # no 's' anywhere
    ("arise", ("rebus", "x~xx~"), False),   # 'r' must not occur at all
    ("crane", ("stare", "xx!~!"), True),
    ("crane", ("stare", "xx!!!"), False),
])
def test_is_consistent_rules(candidate, hint, expected):
    assert is_consistent(candidate, parse_hint(*hint)) is expected


def test_simple_absent_rule_prunes_repeated_letter_secret():
    # secret "abca", guess "aabb" -> "!~~x": the second 'b' is absent only
    # because the single 'b' already backs the first one
    hint = Hint("aabb", evaluate("abca", "aabb"))
    assert is_consistent("abca", hint) is False
    assert is_consistent("abca", hint, exact=True) is True


def test_secret_survives_its_own_hints():
    # distinct-letter guesses: the per-position rules never drop the secret
    store = WordStore.default()
    words = [w for w in store.words() if len(set(w)) == len(w)][:60]
    for secret, guess in itertools.product(words, repeat=2):
        assert is_consistent(secret, Hint(guess, evaluate(secret, guess)))


def test_secret_survives_its_own_hints_exact():
    words = WordStore.default().words()[::8]
    for secret, guess in itertools.product(words, repeat=2):
        assert is_consistent(secret, Hint(guess, evaluate(secret, guess)), exact=True)


def test_filtering_is_monotonic():
    store = WordStore.default()
    secret = "rebus"
    history = []
    prev = store.count()
    for guess in ["arise", "route", "rules", "rebus"]:
        history.append(Hint(guess, evaluate(secret, guess)))
        left = store.filter(history)
        assert len(left) <= prev
        assert set(left) <= set(store.filter(history[:-1]))
        prev = len(left)
    assert left == ["rebus"]


def test_consistent_with_all_short_circuits():
    hints = validate_hints(HINTS, 5)
    assert consistent_with_all("rebus", hints)
    assert not consistent_with_all("arise", hints)


def test_parse_hint_normalizes_guess():
    h = parse_hint(" ARISE ", "x~x~~")
    assert h.guess == "arise"
    assert h.feedback[1] is ResultCode.MISPLACED
    assert str(h) == "arise x~x~~"


@pytest.mark.parametrize("hint", [
    ("arise", "x~x?~"),     # unknown code
    ("arise", "x~x~"),      # feedback too short
    ("aris", "x~x~"),       # guess too short
    ("arises", "x~x~~!"),   # both too long
])
def test_invalid_hint_aborts_whole_filter(hint):
    with pytest.raises(InvalidHint) as ei:
        filter_candidates(WORDS, [HINTS[0], hint], 5)
    assert ei.value.guess == hint[0]


def test_invalid_hint_reports_pair():
    store = WordStore.from_lines(WORDS)
    with pytest.raises(InvalidHint, match="arise"):
        store.filter([("arise", "x~x~?")])
