"""Alignment types."""

from __future__ import annotations

from dataclasses import dataclass, replace

from seqtools.constants import GAP_CHARACTER


@dataclass(frozen=True)
class AlignmentResult:
    """Result of a pairwise alignment.

    Attributes:
        aligned_query: Query symbols with ``-`` inserted for gap columns
        aligned_target: Target symbols with ``-`` inserted for gap columns
        query_start, query_end: Half-open range consumed in the query
        target_start, target_end: Half-open range consumed in the target
        score: Alignment score under the scoring scheme used
        reverse_complemented: True when the query was reverse complemented
    """

    aligned_query: str
    aligned_target: str
    query_start: int
    query_end: int
    target_start: int
    target_end: int
    score: int
    reverse_complemented: bool = False

    def __post_init__(self):
        if len(self.aligned_query) != len(self.aligned_target):
            raise ValueError(
                "aligned_query and aligned_target must have the same length."
            )
        if not 0 <= self.query_start <= self.query_end:
            raise ValueError(
                f"Invalid query range [{self.query_start}, {self.query_end})."
            )
        if not 0 <= self.target_start <= self.target_end:
            raise ValueError(
                f"Invalid target range [{self.target_start}, {self.target_end})."
            )

    @property
    def columns(self) -> int:
        """Number of columns in the alignment."""
        return len(self.aligned_query)

    @property
    def query_range(self) -> tuple:
        return (self.query_start, self.query_end)

    @property
    def target_range(self) -> tuple:
        return (self.target_start, self.target_end)

    @property
    def gaps(self) -> int:
        """Number of gap columns on either side."""
        return sum(
            a == GAP_CHARACTER or b == GAP_CHARACTER
            for a, b in zip(self.aligned_query, self.aligned_target)
        )

    def nmatch(self) -> int:
        """Number of identical non-gap columns."""
        return sum(
            1
            for a, b in zip(self.aligned_query, self.aligned_target)
            if a == b and a != GAP_CHARACTER
        )

    def with_orientation(self, reverse_complemented: bool) -> "AlignmentResult":
        """Return a copy tagged with the given orientation."""
        return replace(self, reverse_complemented=reverse_complemented)


__all__ = ["AlignmentResult"]
