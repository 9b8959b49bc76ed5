"""Automaton model and evaluation."""

from dfacheck.automaton.dfa import DFA, State, Symbol, TransitionKey
from dfacheck.automaton.evaluator import Evaluator, accepts
from dfacheck.automaton.validator import is_complete, validate

__all__ = [
    "DFA",
    "State",
    "Symbol",
    "TransitionKey",
    "Evaluator",
    "accepts",
    "is_complete",
    "validate",
]
