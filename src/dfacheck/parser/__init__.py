"""Definition parser module."""

from dfacheck.parser.parser import parse, parse_file, parse_transition
from dfacheck.parser.tokens import split_lines, split_tokens, split_word

__all__ = [
    "parse",
    "parse_file",
    "parse_transition",
    "split_lines",
    "split_tokens",
    "split_word",
]
