"""Custom exceptions for dfacheck."""


class DfaCheckError(Exception):
    """Base exception for all dfacheck errors."""

    pass


# ============================================================================
# Format errors (definition parser)
# ============================================================================


class DataFormatError(DfaCheckError):
    """Raised when an automaton definition is malformed."""

    def __init__(self, message: str, line_number: int = -1) -> None:
        self.line_number = line_number
        super().__init__(message)

    def __str__(self) -> str:
        if self.line_number >= 1:
            return f"{super().__str__()} at line {self.line_number}"
        return super().__str__()


class TooFewLinesError(DataFormatError):
    """Raised when the definition has fewer than five lines."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Definition has {count} lines, at least 5 are required")


class WrongKindError(DataFormatError):
    """Raised when the marker line is not ``dfa``."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Definition is not a DFA: expected 'dfa', got {kind!r}", 1)


class EmptyAlphabetError(DataFormatError):
    """Raised when no alphabet symbol is declared."""

    def __init__(self) -> None:
        super().__init__("No alphabet symbols defined", 2)


class EmptyStatesError(DataFormatError):
    """Raised when no state is declared."""

    def __init__(self) -> None:
        super().__init__("No states defined", 3)


class MissingInitialStateError(DataFormatError):
    """Raised when the initial state line is blank."""

    def __init__(self) -> None:
        super().__init__("No initial state defined", 4)


class MissingFinalStateLineError(DataFormatError):
    """Raised when the final state line is blank."""

    def __init__(self) -> None:
        super().__init__("No final state definition given (use '!!' for none)", 5)


class MalformedTransitionError(DataFormatError):
    """Raised when a transition line does not have exactly three tokens."""

    def __init__(self, line_number: int, line: str) -> None:
        self.line = line
        super().__init__(f"Malformed transition [{line}]", line_number)


class UnknownStateError(DataFormatError):
    """Raised in strict mode when a state is used but never declared.

    Attributes:
        state: The undeclared state.
        role: Where it was used ("initial", "final" or "transition").
    """

    def __init__(self, state: str, role: str, line_number: int = -1) -> None:
        self.state = state
        self.role = role
        super().__init__(f"Undeclared {role} state {state!r}", line_number)


class UnknownSymbolError(DataFormatError):
    """Raised in strict mode when a transition uses an undeclared symbol."""

    def __init__(self, symbol: str, line_number: int = -1) -> None:
        self.symbol = symbol
        super().__init__(f"Undeclared symbol {symbol!r}", line_number)


# ============================================================================
# Evaluation errors
# ============================================================================


class EvaluationError(DfaCheckError):
    """Raised when a word cannot be evaluated against an automaton."""

    pass


class UndefinedTransitionError(EvaluationError):
    """Raised when no transition is defined for a (state, symbol) pair."""

    def __init__(self, state: str, symbol: str) -> None:
        self.state = state
        self.symbol = symbol
        super().__init__(f"No transition defined from state {state!r} on symbol {symbol!r}")
