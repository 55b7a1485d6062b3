from .validator import validate_wordlist, pretty_summary
from .io import read_word_list, write_lines

__all__ = ["validate_wordlist", "pretty_summary", "read_word_list", "write_lines"]
