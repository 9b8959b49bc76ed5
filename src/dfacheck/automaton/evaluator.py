"""Word evaluation against a DFA."""

from typing import Iterable, List

from dfacheck.automaton.dfa import DFA, State, Symbol
from dfacheck.exceptions import UndefinedTransitionError


class Evaluator:
    """Executes the transition function of a DFA.

    The evaluator holds no state of its own besides the automaton, so a
    single instance may be shared between threads.
    """

    def __init__(self, dfa: DFA):
        self.dfa = dfa

    def step(self, state: State, symbol: Symbol) -> State:
        """Follow a single transition.

        Raises:
            UndefinedTransitionError: If (state, symbol) has no transition.
        """
        target = self.dfa.transition(state, symbol)
        if target is None:
            raise UndefinedTransitionError(state, symbol)
        return target

    def run(self, state: State, word: Iterable[Symbol]) -> State:
        """Consume ``word`` left to right starting from ``state``.

        The empty word leaves ``state`` unchanged.
        """
        for symbol in word:
            state = self.step(state, symbol)
        return state

    def accept(self, word: Iterable[Symbol]) -> bool:
        """Return True if the run from the initial state ends in a final state."""
        return self.dfa.is_final(self.run(self.dfa.initial, word))

    def trace(self, word: Iterable[Symbol]) -> List[State]:
        """Return every state visited while consuming ``word``.

        The first element is the initial state, so the result has one more
        element than the word has symbols.
        """
        state = self.dfa.initial
        visited = [state]
        for symbol in word:
            state = self.step(state, symbol)
            visited.append(state)
        return visited


def accepts(dfa: DFA, word: Iterable[Symbol]) -> bool:
    """Convenience function to test a single word.

    Args:
        dfa: The automaton.
        word: Sequence of symbols.

    Returns:
        True if the word is accepted.
    """
    return Evaluator(dfa).accept(word)
