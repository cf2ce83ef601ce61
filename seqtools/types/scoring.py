"""
Scoring configuration for affine-gap pairwise alignment, together with the
alignment mode switch that selects boundary conditions and terminal cells.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from seqtools.constants import (
    DEFAULT_GAP_EXTEND,
    DEFAULT_GAP_OPEN,
    GAP_CHARACTER,
    MATCH_SCORE,
    MISMATCH_PENALTY,
)
from seqtools.types.errors import InvalidScoringParameter


class AlignmentMode(str, Enum):
    """Alignment strategy controlling boundary values and the terminal cell."""

    LOCAL = "local"
    GLOBAL = "global"
    SEMIGLOBAL = "semiglobal"

    @classmethod
    def parse(cls, value: "str | AlignmentMode") -> "AlignmentMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            valid = [mode.value for mode in cls]
            raise ValueError(f"mode must be one of {valid}, got '{value}'") from None


def _check_penalty(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidScoringParameter(
            f"{name} must be a non-negative integer, got {value!r}"
        )
    if value < 0:
        raise InvalidScoringParameter(f"{name} must be non-negative, got {value}")
    return value


@dataclass(frozen=True)
class ScoringScheme:
    """Immutable affine-gap scoring parameters.

    A match earns ``match_score``, a mismatch costs ``mismatch_penalty`` and a
    run of ``L`` gap columns costs ``gap_open + L * gap_extend``.
    """

    gap_open: int = DEFAULT_GAP_OPEN
    gap_extend: int = DEFAULT_GAP_EXTEND
    match_score: int = MATCH_SCORE
    mismatch_penalty: int = MISMATCH_PENALTY

    def __post_init__(self) -> None:
        _check_penalty("gap_open", self.gap_open)
        _check_penalty("gap_extend", self.gap_extend)
        _check_penalty("match_score", self.match_score)
        _check_penalty("mismatch_penalty", self.mismatch_penalty)

    @property
    def gap_open_total(self) -> int:
        """Cost of the first column of a gap run."""
        return self.gap_open + self.gap_extend

    def substitution(self, a: str, b: str) -> int:
        """Score of aligning symbol ``a`` against symbol ``b``."""
        if a == b and a != GAP_CHARACTER:
            return self.match_score
        return -self.mismatch_penalty

    def gap_cost(self, length: int) -> int:
        """Total cost of a contiguous gap run of ``length`` columns."""
        if length <= 0:
            return 0
        return self.gap_open + length * self.gap_extend


__all__ = ["AlignmentMode", "ScoringScheme"]
