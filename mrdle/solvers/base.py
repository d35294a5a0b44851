from __future__ import annotations
import random
from typing import Dict, List, Type

from mrdle.engine import Hint

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.N: int = 5
        self.words: List[str] = []
        self.rng = random.Random()

    def reset(self, *, words: List[str], N: int, seed: int | None = None) -> None:
        self.words = list(words)
        self.N = int(N)
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, history: List[Hint]) -> str:
        raise NotImplementedError("Override in subclass")
