from .validator import validate_wordlists, pretty_summary
from .loader import words_from_lines, load_wordset, pick_target
from .io import read_lines, write_lines

__all__ = [
    "validate_wordlists", "pretty_summary",
    "words_from_lines", "load_wordset", "pick_target",
    "read_lines", "write_lines",
]
