"""Strict cross-validation of a parsed DFA.

The default parser accepts any token wherever a state or symbol is
expected. These checks enforce that every state used is declared and
every transition symbol belongs to the alphabet.
"""

from typing import Dict, Optional

from dfacheck.automaton.dfa import DFA, TransitionKey
from dfacheck.exceptions import UnknownStateError, UnknownSymbolError


def validate(dfa: DFA, line_numbers: Optional[Dict[TransitionKey, int]] = None) -> DFA:
    """Check that ``dfa`` only refers to declared states and symbols.

    Checks run in a fixed order (initial state, final states, transitions
    sorted by key) so the reported error does not depend on set ordering.

    Args:
        dfa: The automaton to check.
        line_numbers: Optional map from transition key to the 1-based line
            it was defined on, used to locate errors.

    Returns:
        The same automaton, unchanged.

    Raises:
        UnknownStateError: A state is used but not declared.
        UnknownSymbolError: A transition symbol is not in the alphabet.
    """
    line_numbers = line_numbers or {}

    if dfa.initial not in dfa.states:
        raise UnknownStateError(dfa.initial, "initial", 4)

    for state in sorted(dfa.final_states):
        if state not in dfa.states:
            raise UnknownStateError(state, "final", 5)

    for key in sorted(dfa.transitions):
        target = dfa.transitions[key]
        line_number = line_numbers.get(key, -1)
        if key.state not in dfa.states:
            raise UnknownStateError(key.state, "transition", line_number)
        if key.symbol not in dfa.alphabet:
            raise UnknownSymbolError(key.symbol, line_number)
        if target not in dfa.states:
            raise UnknownStateError(target, "transition", line_number)

    return dfa


def is_complete(dfa: DFA) -> bool:
    """Return True if every declared (state, symbol) pair has a transition."""
    return all(
        dfa.has_transition(state, symbol)
        for state in dfa.states
        for symbol in dfa.alphabet
    )
