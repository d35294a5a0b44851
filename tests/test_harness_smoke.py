import random

import pytest
from mrdle.datasets import WordStore
from mrdle.engine import NotAWord, ResultCode, is_solved
from mrdle.harness import GameSession, run_case, run_batch, win_message, lose_message
from mrdle.solvers import create_solver, get_solver_ids

WORDS = ["arise", "route", "rules", "rebus"]


@pytest.fixture
def store():
    return WordStore.from_lines(WORDS, seed=1)


def test_session_win(store):
    s = GameSession(store, "REBUS")
    with pytest.raises(NotAWord):
        s.guess("zzzzz")
    assert s.turn == 1  # not-a-word doesn't use a turn

    s.guess("arise")
    assert s.letter_map["a"] is ResultCode.ABSENT
    assert s.letter_map["r"] is ResultCode.MISPLACED
    assert not s.over

    s.guess("rebus")
    assert s.won and s.over and not s.lost
    assert [h.guess for h in s.history] == ["arise", "rebus"]
    with pytest.raises(RuntimeError):
        s.guess("route")


def test_session_loss(store):
    s = GameSession(store, "rebus", max_turns=2)
    s.guess("arise")
    s.guess("arise")
    assert s.lost and s.over and not s.won


def test_session_secret_must_be_a_word(store):
    with pytest.raises(NotAWord):
        GameSession(store, "crane")


def test_session_random_secret(store):
    s = GameSession(store)
    assert s.secret in store


def test_messages():
    assert win_message(1) == "Genius!"
    assert win_message(6) == "Phew"
    assert win_message(7) == "Meh"
    assert lose_message(random.Random(3))


def test_solver_registry():
    assert {"random_consistent", "exact_consistent"} <= set(get_solver_ids())
    with pytest.raises(ValueError):
        create_solver("nope")


@pytest.mark.parametrize("solver_id", ["random_consistent", "exact_consistent"])
def test_run_case_smoke(store, solver_id):
    solver = create_solver(solver_id)
    r = run_case(solver, "rebus", store=store, max_turns=6, seed=42)
    assert r["success"] is True
    assert r["answer"] == "rebus"
    last = r["history"][-1]
    assert last.guess == "rebus" and is_solved(last.feedback)
    assert r["guesses"] <= len(WORDS)


def test_run_batch(store):
    solver = create_solver("random_consistent")
    results = run_batch(solver, store.words(), store=store, seed=5)
    assert len(results) == 4
    assert all(r["success"] for r in results)
    assert {r["solver_id"] for r in results} == {"random_consistent"}
    assert len(run_batch(solver, store.words(), store=store, seed=5, sample=2)) == 2


def test_run_batch_consumes_answers_lazily(store):
    seen = []

    def answers():
        for w in store.words():
            seen.append(w)
            yield w

    results = run_batch(create_solver("random_consistent"), answers(), store=store, seed=5, sample=2)
    assert [r["answer"] for r in results] == seen == ["arise", "rebus"]
