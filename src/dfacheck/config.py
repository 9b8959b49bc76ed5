"""Configuration for dfacheck."""

from dataclasses import dataclass


@dataclass
class Config:
    """Settings shared by the parser, the word checker and the CLI.

    Attributes:
        strict: Cross-validate states and symbols after parsing.
        terminator: Line that ends the definition block in a combined stream.
        accept_label: Output line for an accepted word.
        reject_label: Output line for a rejected word.
        encoding: Text encoding used for input and output files.
    """

    strict: bool = False
    terminator: str = "---"
    accept_label: str = "ACEITA"
    reject_label: str = "REJEITA"
    encoding: str = "utf-8"

    @classmethod
    def default(cls) -> "Config":
        """Return the default configuration."""
        return cls()

    def label(self, accepted: bool) -> str:
        """Return the output label for an acceptance decision."""
        return self.accept_label if accepted else self.reject_label
