"""Parser for the line-oriented DFA definition format.

A definition block reads, line by line::

    dfa
    <symbol> <symbol> ...
    <state> <state> ...
    <initial-state>
    <final-state> <final-state> ...   (or !! for no final states)
    <src-state> <symbol> <dst-state>  (zero or more)

Each section is read by its own step function. A step raises a
DataFormatError subclass on the first problem it finds, so no partially
built automaton is ever returned.
"""

import logging
from typing import Dict, FrozenSet, List, Tuple

from dfacheck.automaton.dfa import DFA, State, Symbol, TransitionKey
from dfacheck.automaton.validator import validate
from dfacheck.config import Config
from dfacheck.exceptions import (
    EmptyAlphabetError,
    EmptyStatesError,
    MalformedTransitionError,
    MissingFinalStateLineError,
    MissingInitialStateError,
    TooFewLinesError,
    WrongKindError,
)
from dfacheck.parser.tokens import split_lines, split_tokens

logger = logging.getLogger(__name__)

KIND = "dfa"
NO_FINAL_STATES = "!!"
HEADER_LINES = 5

# 0-based line indexes of the header sections
KIND_LINE = 0
ALPHABET_LINE = 1
STATES_LINE = 2
INITIAL_LINE = 3
FINAL_LINE = 4


# ============================================================================
# Header steps
# ============================================================================


def _check_line_count(lines: List[str]) -> None:
    if len(lines) < HEADER_LINES:
        raise TooFewLinesError(len(lines))


def _check_kind(lines: List[str]) -> None:
    if lines[KIND_LINE] != KIND:
        raise WrongKindError(lines[KIND_LINE])


def _read_alphabet(lines: List[str]) -> FrozenSet[Symbol]:
    symbols = split_tokens(lines[ALPHABET_LINE])
    if not symbols:
        raise EmptyAlphabetError()
    return frozenset(symbols)


def _read_states(lines: List[str]) -> FrozenSet[State]:
    states = split_tokens(lines[STATES_LINE])
    if not states:
        raise EmptyStatesError()
    return frozenset(states)


def _read_initial(lines: List[str]) -> State:
    initial = lines[INITIAL_LINE].strip()
    if not initial:
        raise MissingInitialStateError()
    return initial


def _read_final_states(lines: List[str]) -> FrozenSet[State]:
    tokens = split_tokens(lines[FINAL_LINE])
    if not tokens:
        raise MissingFinalStateLineError()
    # The sentinel wins even when other tokens follow it.
    if tokens[0].strip() == NO_FINAL_STATES:
        return frozenset()
    return frozenset(tokens)


# ============================================================================
# Transitions
# ============================================================================


def parse_transition(line: str, line_number: int) -> Tuple[TransitionKey, State]:
    """Parse a single ``source symbol target`` line.

    Args:
        line: The raw line text.
        line_number: 1-based line number, for error reporting.

    Returns:
        The (state, symbol) key and the target state.
    """
    tokens = split_tokens(line)
    if len(tokens) != 3:
        raise MalformedTransitionError(line_number, line)
    source, symbol, target = tokens
    return TransitionKey(source, symbol), target


def _read_transitions(
    lines: List[str],
) -> Tuple[Dict[TransitionKey, State], Dict[TransitionKey, int]]:
    transitions: Dict[TransitionKey, State] = {}
    line_numbers: Dict[TransitionKey, int] = {}
    for index in range(HEADER_LINES, len(lines)):
        key, target = parse_transition(lines[index], index + 1)
        # Last definition of a (state, symbol) pair wins.
        transitions[key] = target
        line_numbers[key] = index + 1
    return transitions, line_numbers


# ============================================================================
# Public API
# ============================================================================


def parse(text: str, config: Config = None) -> DFA:
    """Parse a DFA definition block.

    Args:
        text: The definition text.
        config: Optional configuration; ``config.strict`` enables
            cross-validation of states and symbols.

    Returns:
        The parsed DFA.

    Raises:
        DataFormatError: If the definition is malformed.
    """
    config = config or Config.default()
    lines = split_lines(text)

    _check_line_count(lines)
    _check_kind(lines)
    alphabet = _read_alphabet(lines)
    states = _read_states(lines)
    initial = _read_initial(lines)
    final_states = _read_final_states(lines)
    transitions, line_numbers = _read_transitions(lines)

    dfa = DFA(
        alphabet=alphabet,
        states=states,
        initial=initial,
        final_states=final_states,
        transitions=transitions,
    )
    if config.strict:
        validate(dfa, line_numbers)

    logger.debug("Parsed %r", dfa)
    return dfa


def parse_file(path: str, config: Config = None) -> DFA:
    """Parse a DFA definition stored in a file.

    Args:
        path: Path to the definition file.
        config: Optional configuration.

    Returns:
        The parsed DFA.
    """
    config = config or Config.default()
    with open(path, encoding=config.encoding) as f:
        return parse(f.read(), config)
