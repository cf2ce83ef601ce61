"""Error taxonomy for sequence validation and scoring configuration."""

from __future__ import annotations

from typing import Iterable


class SeqtoolsError(ValueError):
    """Base class for every user-facing validation failure."""


class InvalidSymbol(SeqtoolsError):
    """Raised when input contains characters outside the accepted alphabet."""

    def __init__(self, text: str, symbols: Iterable[str]) -> None:
        self.text = text
        self.symbols = sorted(set(symbols))
        super().__init__(
            f"Invalid sequence symbols {self.symbols} in input '{text}'"
        )


class EmptySequence(SeqtoolsError):
    """Raised when a required sequence is empty after normalization."""

    def __init__(self, text: str, name: str = "sequence") -> None:
        self.text = text
        self.name = name
        super().__init__(f"{name} is empty after normalization (input: '{text}')")


class InvalidScoringParameter(SeqtoolsError):
    """Raised for negative, non-integer or unknown scoring parameters."""


__all__ = ["SeqtoolsError", "InvalidSymbol", "EmptySequence", "InvalidScoringParameter"]
