"""Affine-gap (Gotoh) pairwise aligner for local, global and semiglobal modes."""

from __future__ import annotations

from typing import Optional, Union

from seqtools.algorithms.base import PairwiseAligner
from seqtools.algorithms.matrices import AlignmentMatrices, MatrixBuilder
from seqtools.algorithms.traceback import traceback
from seqtools.types import AlignmentMode, AlignmentResult, ScoringScheme, Sequence

SequenceLike = Union[Sequence, str]


def _as_sequence(value: SequenceLike, identifier: str) -> Sequence:
    if isinstance(value, Sequence):
        return value
    return Sequence.from_text(value, identifier=identifier, allow_gaps=True)


class GotohAligner(PairwiseAligner):
    """Fill the Gotoh matrices once and trace back a single optimal alignment.

    Examples:
        >>> aligner = GotohAligner(mode="local")
        >>> aligner.align("ACAGT", "ACGT").aligned_query
        'GT'
    """

    def __init__(
        self,
        scoring: Optional[ScoringScheme] = None,
        mode: Union[AlignmentMode, str] = AlignmentMode.GLOBAL,
    ) -> None:
        self.scoring = scoring if scoring is not None else ScoringScheme()
        self.mode = AlignmentMode.parse(mode)
        self._builder = MatrixBuilder(self.scoring)

    def __repr__(self) -> str:
        return f"GotohAligner(mode={self.mode.value!r}, scoring={self.scoring!r})"

    def fill(self, query: SequenceLike, target: SequenceLike) -> AlignmentMatrices:
        """Return the filled matrices without tracing back."""
        query = _as_sequence(query, "query")
        target = _as_sequence(target, "target")
        return self._builder.build(query.symbols, target.symbols, self.mode)

    def score(self, query: SequenceLike, target: SequenceLike) -> int:
        """Score of the optimal alignment."""
        return self.fill(query, target).score

    def align(self, query: SequenceLike, target: SequenceLike) -> AlignmentResult:
        """Compute one optimal alignment of ``query`` against ``target``."""
        query = _as_sequence(query, "query")
        target = _as_sequence(target, "target")
        matrices = self._builder.build(query.symbols, target.symbols, self.mode)
        return traceback(matrices, query.symbols, target.symbols)


def align(
    query: SequenceLike,
    target: SequenceLike,
    mode: Union[AlignmentMode, str] = AlignmentMode.GLOBAL,
    gap_open: Optional[int] = None,
    gap_extend: Optional[int] = None,
) -> AlignmentResult:
    """
    Convenience wrapper around GotohAligner.

    Parameters:
    -----------
    query : str or Sequence
        Sequence placed on the rows (top line of the diagram)
    target : str or Sequence
        Sequence placed on the columns (bottom line of the diagram)
    mode : str
        "local", "global" or "semiglobal" (default "global")
    gap_open, gap_extend : int, optional
        Affine gap penalties; the defaults are 2 and 1

    Returns:
    --------
    AlignmentResult
    """
    scoring = ScoringScheme()
    if gap_open is not None or gap_extend is not None:
        scoring = ScoringScheme(
            gap_open=scoring.gap_open if gap_open is None else gap_open,
            gap_extend=scoring.gap_extend if gap_extend is None else gap_extend,
        )
    return GotohAligner(scoring=scoring, mode=mode).align(query, target)


__all__ = ["GotohAligner", "align"]
