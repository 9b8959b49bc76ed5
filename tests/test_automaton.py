"""Tests for the DFA model, the evaluator and the strict validator."""

import dataclasses
import threading

import pytest

from dfacheck.automaton.dfa import DFA, TransitionKey
from dfacheck.automaton.evaluator import Evaluator, accepts
from dfacheck.automaton.validator import is_complete, validate
from dfacheck.exceptions import (
    DataFormatError,
    EvaluationError,
    UndefinedTransitionError,
    UnknownStateError,
    UnknownSymbolError,
)
from dfacheck.parser.parser import parse

ENDS_IN_ONE_LINES = [
    "dfa",
    "0 1",
    "q0 q1",
    "q0",
    "q1",
    "q0 0 q0",
    "q0 1 q1",
    "q1 0 q0",
    "q1 1 q1",
]


def ends_in_one() -> DFA:
    """DFA accepting binary strings that end in 1."""
    return parse("\n".join(ENDS_IN_ONE_LINES))


def ends_in_one_partial() -> DFA:
    """Same DFA without the q1 --0--> q0 transition."""
    return parse("\n".join(line for line in ENDS_IN_ONE_LINES if line != "q1 0 q0"))


# =============================================================================
# Model
# =============================================================================


class TestDFAModel:
    """Read-only accessors and immutability."""

    def test_transition_lookup(self):
        dfa = ends_in_one()
        assert dfa.transition("q0", "1") == "q1"
        assert dfa.transition("q0", "2") is None
        assert dfa.has_transition("q1", "0")
        assert not dfa.has_transition("q2", "0")

    def test_is_final(self):
        dfa = ends_in_one()
        assert dfa.is_final("q1")
        assert not dfa.is_final("q0")

    def test_transition_key_value_semantics(self):
        assert TransitionKey("q0", "a") == TransitionKey("q0", "a")
        assert hash(TransitionKey("q0", "a")) == hash(("q0", "a"))
        assert {TransitionKey("q0", "a"): 1}[("q0", "a")] == 1

    def test_attributes_cannot_be_reassigned(self):
        dfa = ends_in_one()
        with pytest.raises(dataclasses.FrozenInstanceError):
            dfa.initial = "q1"

    def test_transitions_are_read_only(self):
        dfa = ends_in_one()
        with pytest.raises(TypeError):
            dfa.transitions[TransitionKey("q0", "0")] = "q1"

    def test_sets_are_frozen(self):
        dfa = ends_in_one()
        assert isinstance(dfa.alphabet, frozenset)
        assert isinstance(dfa.states, frozenset)
        assert isinstance(dfa.final_states, frozenset)

    def test_source_mapping_is_copied(self):
        delta = {("s", "a"): "s"}
        dfa = DFA(alphabet={"a"}, states={"s"}, initial="s", transitions=delta)
        delta[("s", "a")] = "t"
        delta[("s", "b")] = "s"
        assert dfa.transition("s", "a") == "s"
        assert not dfa.has_transition("s", "b")

    def test_build_from_triples(self):
        dfa = DFA.build(
            alphabet=["a"],
            states=["s", "t"],
            initial="s",
            final_states=["t"],
            transitions=[("s", "a", "s"), ("s", "a", "t")],
        )
        assert dfa.transition("s", "a") == "t"

    def test_build_from_mapping(self):
        dfa = DFA.build(["a"], ["s"], "s", transitions={("s", "a"): "s"})
        assert dfa.transitions == {TransitionKey("s", "a"): "s"}
        assert dfa.final_states == frozenset()

    def test_equality(self):
        assert ends_in_one() == ends_in_one()
        assert ends_in_one() != ends_in_one_partial()

    def test_hashable(self):
        assert hash(ends_in_one()) == hash(ends_in_one())
        assert len({ends_in_one(), ends_in_one()}) == 1

    def test_repr(self):
        text = repr(ends_in_one())
        assert "states=2" in text
        assert "transitions=4" in text


# =============================================================================
# Evaluator
# =============================================================================


class TestEndsInOne:
    """Acceptance on the binary 'ends in 1' automaton."""

    WORDS = [
        (["1"], True, "single one"),
        (["0"], False, "single zero"),
        (["1", "0", "1"], True, "101"),
        (["1", "1", "0"], False, "110"),
        ([], False, "empty word, q0 not final"),
    ]

    @pytest.mark.parametrize("word,expected,name", WORDS)
    def test_accept(self, word, expected, name):
        assert Evaluator(ends_in_one()).accept(word) is expected, name

    @pytest.mark.parametrize("word,expected,name", WORDS)
    def test_accepts_function(self, word, expected, name):
        assert accepts(ends_in_one(), word) is expected, name

    def test_accept_is_deterministic(self):
        evaluator = Evaluator(ends_in_one())
        word = ["0", "1", "1", "0", "1"]
        assert len({evaluator.accept(word) for _ in range(20)}) == 1

    def test_accepts_any_iterable(self):
        assert Evaluator(ends_in_one()).accept(iter(["0", "1"]))


class TestStepAndRun:
    def test_step(self):
        evaluator = Evaluator(ends_in_one())
        assert evaluator.step("q0", "1") == "q1"
        assert evaluator.step("q1", "0") == "q0"

    def test_run_empty_word_keeps_state(self):
        evaluator = Evaluator(ends_in_one())
        assert evaluator.run("q1", []) == "q1"
        assert evaluator.run("anything", []) == "anything"

    def test_run_folds_left_to_right(self):
        evaluator = Evaluator(ends_in_one())
        assert evaluator.run("q0", ["1", "1", "0"]) == "q0"
        assert evaluator.run("q0", ["0", "0", "1"]) == "q1"

    def test_trace(self):
        evaluator = Evaluator(ends_in_one())
        assert evaluator.trace(["1", "0", "1"]) == ["q0", "q1", "q0", "q1"]
        assert evaluator.trace([]) == ["q0"]


class TestEmptyWord:
    """The empty word is accepted iff the initial state is final."""

    CASES = [
        ("q0", "q0", True, "initial is final"),
        ("q0", "q1", False, "initial not final"),
        ("q0", "!!", False, "no final states"),
    ]

    @pytest.mark.parametrize("initial,finals,expected,name", CASES)
    def test_empty_word(self, initial, finals, expected, name):
        dfa = parse("\n".join(["dfa", "0", "q0 q1", initial, finals]))
        assert Evaluator(dfa).accept([]) is expected, name


class TestUndefinedTransition:
    """Missing transitions are errors, never silent rejections."""

    def test_step_raises(self):
        evaluator = Evaluator(ends_in_one_partial())
        with pytest.raises(UndefinedTransitionError) as excinfo:
            evaluator.step("q1", "0")
        assert excinfo.value.state == "q1"
        assert excinfo.value.symbol == "0"

    def test_accept_raises(self):
        evaluator = Evaluator(ends_in_one_partial())
        with pytest.raises(UndefinedTransitionError) as excinfo:
            evaluator.accept(["1", "0"])
        assert (excinfo.value.state, excinfo.value.symbol) == ("q1", "0")

    def test_words_avoiding_the_gap_still_work(self):
        evaluator = Evaluator(ends_in_one_partial())
        assert evaluator.accept(["0", "1", "1"])

    def test_symbol_outside_alphabet(self):
        with pytest.raises(UndefinedTransitionError):
            Evaluator(ends_in_one()).accept(["2"])

    def test_is_evaluation_error_not_format_error(self):
        error = UndefinedTransitionError("q1", "0")
        assert isinstance(error, EvaluationError)
        assert not isinstance(error, DataFormatError)
        assert "'q1'" in str(error)


class TestConcurrentEvaluation:
    def test_shared_evaluator_across_threads(self):
        evaluator = Evaluator(ends_in_one())
        words = [list(format(n, "b")) for n in range(1, 200)]
        expected = [word[-1] == "1" for word in words]
        results = {}

        def worker(index):
            results[index] = [evaluator.accept(word) for word in words]

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert all(result == expected for result in results.values())


# =============================================================================
# Validator
# =============================================================================


class TestValidator:
    def test_valid_dfa_is_returned(self):
        dfa = ends_in_one()
        assert validate(dfa) is dfa

    def test_unknown_source_state(self):
        dfa = DFA.build(["a"], ["s"], "s", transitions={("x", "a"): "s"})
        with pytest.raises(UnknownStateError) as excinfo:
            validate(dfa)
        assert excinfo.value.state == "x"
        assert excinfo.value.line_number == -1

    def test_unknown_symbol_with_line_numbers(self):
        dfa = DFA.build(["a"], ["s"], "s", transitions={("s", "b"): "s"})
        with pytest.raises(UnknownSymbolError) as excinfo:
            validate(dfa, {TransitionKey("s", "b"): 9})
        assert excinfo.value.line_number == 9
        assert str(excinfo.value).endswith("at line 9")

    def test_initial_checked_before_transitions(self):
        dfa = DFA.build(["a"], ["s"], "x", transitions={("s", "b"): "s"})
        with pytest.raises(UnknownStateError) as excinfo:
            validate(dfa)
        assert excinfo.value.role == "initial"

    def test_is_complete(self):
        assert is_complete(ends_in_one())
        assert not is_complete(ends_in_one_partial())
