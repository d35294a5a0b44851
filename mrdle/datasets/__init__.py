from .wordstore import WordStore
from .validator import validate_wordlist, pretty_summary
from .io import read_lines, write_lines

__all__ = ["WordStore", "validate_wordlist", "pretty_summary"]
