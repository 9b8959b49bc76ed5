"""Word checking against a parsed DFA.

Reads a combined stream (definition block, a ``---`` line, then one
query word per line) and answers each query with an accept or reject
label.
"""

import logging
from typing import Iterable, Iterator, List, TextIO

from dfacheck.automaton.dfa import DFA, Symbol
from dfacheck.automaton.evaluator import Evaluator
from dfacheck.config import Config
from dfacheck.parser.parser import parse
from dfacheck.parser.tokens import split_word

logger = logging.getLogger(__name__)


class WordChecker:
    """Answers acceptance queries for a single automaton."""

    def __init__(self, dfa: DFA, config: Config = None):
        self.dfa = dfa
        self.config = config or Config.default()
        self.evaluator = Evaluator(dfa)

    def check(self, word: Iterable[Symbol]) -> bool:
        """Return True if ``word`` is accepted.

        Raises:
            UndefinedTransitionError: If the run hits an undefined transition.
        """
        return self.evaluator.accept(word)

    def check_line(self, line: str) -> str:
        """Tokenize a query line and return its result label."""
        return self.config.label(self.check(split_word(line)))

    def check_lines(self, lines: Iterable[str]) -> Iterator[str]:
        """Yield one result label per query line, in order."""
        for line in lines:
            yield self.check_line(line)


def read_definition(lines: Iterator[str], terminator: str = "---") -> str:
    """Consume a definition block from a line iterator.

    Reading stops at the first line whose stripped text equals
    ``terminator`` (the line is consumed but not returned) or when the
    iterator is exhausted. Lines after the terminator are left in
    ``lines``.

    Returns:
        The definition lines joined with newlines.
    """
    block: List[str] = []
    for line in lines:
        line = line.rstrip("\r\n")
        if line.strip() == terminator:
            break
        block.append(line)
    return "\n".join(block)


def check_stream(reader: TextIO, writer: TextIO, config: Config = None) -> int:
    """Read a definition and its queries from ``reader``, write labels to ``writer``.

    Args:
        reader: Text stream holding the definition block, the terminator
            line and the query words.
        writer: Text stream receiving one label per query.
        config: Optional configuration.

    Returns:
        Number of words checked.

    Raises:
        DataFormatError: If the definition is malformed.
        UndefinedTransitionError: If a word hits an undefined transition.
    """
    config = config or Config.default()
    lines = iter(reader)
    definition = read_definition(lines, config.terminator)
    logger.debug("Read definition block (%d chars)", len(definition))

    checker = WordChecker(parse(definition, config), config)
    count = 0
    for label in checker.check_lines(lines):
        writer.write(label + "\n")
        count += 1

    logger.debug("Checked %d words", count)
    return count


def check_word(definition: str, word: Iterable[Symbol], config: Config = None) -> bool:
    """Convenience function to parse a definition and test one word.

    Args:
        definition: The DFA definition text.
        word: Sequence of symbols.
        config: Optional configuration.

    Returns:
        True if the word is accepted.
    """
    return WordChecker(parse(definition, config), config).check(word)
