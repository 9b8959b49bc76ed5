"""Tokenization of definition lines and query words."""

from typing import List


def split_lines(text: str) -> List[str]:
    """Split a definition block on newlines, dropping trailing blank lines.

    Only LF and CRLF end a line; other Unicode line separators stay
    inside the line text.
    """
    lines = text.replace("\r\n", "\n").split("\n")
    while lines and not lines[-1]:
        lines.pop()
    return lines


def split_tokens(line: str) -> List[str]:
    """Split a line on single spaces, discarding empty pieces."""
    return [token for token in line.split(" ") if token]


def split_word(line: str) -> List[str]:
    """Turn a query line into a word (list of symbols).

    The line ending is stripped first; an empty line is the empty word.
    """
    return split_tokens(line.rstrip("\r\n"))
