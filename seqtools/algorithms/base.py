"""Shared interfaces for pairwise alignment algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod

from seqtools.types import AlignmentResult, Sequence


class PairwiseAligner(ABC):
    """Abstract base class for pairwise alignment algorithms."""

    @abstractmethod
    def align(
        self,
        query: Sequence,
        target: Sequence,
    ) -> AlignmentResult:
        """Align ``query`` against ``target``."""
        raise NotImplementedError


__all__ = ["PairwiseAligner"]
