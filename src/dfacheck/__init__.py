"""
dfacheck - Check words against a deterministic finite automaton.

The automaton is read from a small line-oriented text format and each
word (a space-separated list of symbols) is answered with ACEITA
(accepted) or REJEITA (rejected).

Example usage:
    >>> from dfacheck import parse, accepts
    >>> dfa = parse("dfa\\n0 1\\nq0 q1\\nq0\\nq1\\nq0 0 q0\\nq0 1 q1\\nq1 0 q0\\nq1 1 q1")
    >>> accepts(dfa, ["1", "0", "1"])
    True

For streams:
    >>> from dfacheck import check_stream, Config
    >>> check_stream(reader, writer, config=Config(strict=True))
"""

import logging

__version__ = "0.1.0"

from dfacheck.automaton.dfa import DFA, State, Symbol, TransitionKey
from dfacheck.automaton.evaluator import Evaluator, accepts
from dfacheck.automaton.validator import is_complete, validate
from dfacheck.checker import WordChecker, check_stream, check_word, read_definition
from dfacheck.config import Config
from dfacheck.exceptions import (
    DataFormatError,
    DfaCheckError,
    EmptyAlphabetError,
    EmptyStatesError,
    EvaluationError,
    MalformedTransitionError,
    MissingFinalStateLineError,
    MissingInitialStateError,
    TooFewLinesError,
    UndefinedTransitionError,
    UnknownStateError,
    UnknownSymbolError,
    WrongKindError,
)
from dfacheck.parser.parser import parse, parse_file

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Main API
    "parse",
    "parse_file",
    "accepts",
    "check_word",
    "check_stream",
    "read_definition",
    "WordChecker",
    "Evaluator",
    # Model
    "DFA",
    "State",
    "Symbol",
    "TransitionKey",
    "validate",
    "is_complete",
    # Configuration
    "Config",
    # Exceptions
    "DfaCheckError",
    "DataFormatError",
    "TooFewLinesError",
    "WrongKindError",
    "EmptyAlphabetError",
    "EmptyStatesError",
    "MissingInitialStateError",
    "MissingFinalStateLineError",
    "MalformedTransitionError",
    "UnknownStateError",
    "UnknownSymbolError",
    "EvaluationError",
    "UndefinedTransitionError",
    # Version
    "__version__",
]
