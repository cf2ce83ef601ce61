"""Algorithms for the project."""

from .base import PairwiseAligner
from .gotoh import GotohAligner, align
from .matrices import AlignmentMatrices, MatrixBuilder, State
from .orientation import select_orientation
from .traceback import traceback


__all__ = [
    "PairwiseAligner",
    "GotohAligner",
    "align",
    "AlignmentMatrices",
    "MatrixBuilder",
    "State",
    "select_orientation",
    "traceback",
]
