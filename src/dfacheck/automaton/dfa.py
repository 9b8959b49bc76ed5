"""Deterministic finite automaton data model."""

import collections.abc
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, NamedTuple, Optional, Tuple, Union

# Both are opaque tokens taken verbatim from the definition text.
Symbol = str
State = str


class TransitionKey(NamedTuple):
    """Source side of a transition: a (state, symbol) pair."""

    state: State
    symbol: Symbol


@dataclass(frozen=True)
class DFA:
    """Deterministic Finite Automaton.

    The transition function is partial: a (state, symbol) pair may have
    no successor. Instances are immutable; ``transitions`` is a read-only
    view over a private copy.

    Attributes:
        alphabet: Declared symbols.
        states: Declared states.
        initial: Initial state.
        final_states: Accepting states, possibly empty.
        transitions: Mapping from (state, symbol) to the successor state.
    """

    alphabet: FrozenSet[Symbol]
    states: FrozenSet[State]
    initial: State
    final_states: FrozenSet[State] = frozenset()
    transitions: Mapping[TransitionKey, State] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    def __post_init__(self) -> None:
        # Copy caller-supplied collections into frozen ones.
        object.__setattr__(self, "alphabet", frozenset(self.alphabet))
        object.__setattr__(self, "states", frozenset(self.states))
        object.__setattr__(self, "final_states", frozenset(self.final_states))
        object.__setattr__(
            self,
            "transitions",
            MappingProxyType(
                {TransitionKey(*key): target for key, target in self.transitions.items()}
            ),
        )

    @classmethod
    def build(
        cls,
        alphabet: Iterable[Symbol],
        states: Iterable[State],
        initial: State,
        final_states: Iterable[State] = (),
        transitions: Optional[
            Union[
                Mapping[Tuple[State, Symbol], State],
                Iterable[Tuple[State, Symbol, State]],
            ]
        ] = None,
    ) -> "DFA":
        """Build a DFA from plain iterables.

        ``transitions`` may be a mapping keyed by (state, symbol) pairs or an
        iterable of (source, symbol, target) triples; with triples, a later
        entry for the same pair replaces an earlier one.
        """
        delta = {}
        if transitions is not None:
            if isinstance(transitions, collections.abc.Mapping):
                items = ((src, sym, dst) for (src, sym), dst in transitions.items())
            else:
                items = transitions
            for src, sym, dst in items:
                delta[TransitionKey(src, sym)] = dst

        return cls(
            alphabet=frozenset(alphabet),
            states=frozenset(states),
            initial=initial,
            final_states=frozenset(final_states),
            transitions=delta,
        )

    def transition(self, state: State, symbol: Symbol) -> Optional[State]:
        """Return the successor of ``state`` on ``symbol``, or None if undefined."""
        return self.transitions.get(TransitionKey(state, symbol))

    def has_transition(self, state: State, symbol: Symbol) -> bool:
        return TransitionKey(state, symbol) in self.transitions

    def is_final(self, state: State) -> bool:
        return state in self.final_states

    def size(self) -> int:
        """Return the number of declared states."""
        return len(self.states)

    def __repr__(self) -> str:
        return (
            f"DFA(states={len(self.states)}, alphabet={len(self.alphabet)}, "
            f"initial={self.initial!r}, final={sorted(self.final_states)!r}, "
            f"transitions={len(self.transitions)})"
        )
