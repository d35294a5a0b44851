"""
Random Consistent solver.

Strategy:
  - Filter the word list through every hint seen so far.
  - Choose uniformly at random from what is left.
  - If the filter leaves nothing (the simple 'x' rule can prune the real
    secret when a guess repeats a letter), fall back to the whole list.

Deterministic across runs with the same seed (via BaseSolver.rng).
"""

from __future__ import annotations

from typing import List

from mrdle.engine import Hint, filter_candidates
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    # True: filter by re-scoring (count-aware) instead of the per-position rules
    exact = False

    def next_guess(self, history: List[Hint]) -> str:
        tried = {h.guess for h in history}
        candidates = [w for w in filter_candidates(self.words, history, self.N, exact=self.exact)
                      if w not in tried]

        pool: List[str] = candidates if candidates else [w for w in self.words if w not in tried]
        if not pool:
            pool = self.words

        i = self.rng.randrange(len(pool))
        return pool[i]


@register
class ExactConsistentSolver(RandomConsistentSolver):
    id = "exact_consistent"
    name = "Random Consistent (count-aware)"
    version = "1.0.0"

    exact = True
