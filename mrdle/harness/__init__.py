from .core import GameSession, MAX_TURNS, run_case, run_batch, win_message, lose_message
from .io import build_manifest, summarize, write_games_csv, write_manifest

__all__ = ["GameSession", "MAX_TURNS", "run_case", "run_batch", "win_message", "lose_message",
           "build_manifest", "summarize", "write_games_csv", "write_manifest"]
