from .codes import ResultCode, Feedback, encode_feedback, decode_feedback
from .errors import MrdleError, InvalidWordList, InvalidHint, NotAWord
from .scoring import evaluate, score, is_solved
from .constraints import Hint, parse_hint, validate_hints, is_consistent, consistent_with_all, filter_candidates
from .validation import validate_guess, require_word

__all__ = [
    "ResultCode", "Feedback", "encode_feedback", "decode_feedback",
    "MrdleError", "InvalidWordList", "InvalidHint", "NotAWord",
    "evaluate", "score", "is_solved",
    "Hint", "parse_hint", "validate_hints", "is_consistent", "consistent_with_all", "filter_candidates",
    "validate_guess", "require_word",
]
