"""seqtools: nucleotide sequence utilities and affine-gap pairwise alignment."""

from .types import AlignmentMode, AlignmentResult, ScoringScheme, Sequence
from .algorithms import GotohAligner, align, select_orientation
from .utils import render_alignment, reverse_complement

__version__ = "0.3.0"

__all__ = [
    "AlignmentMode",
    "AlignmentResult",
    "ScoringScheme",
    "Sequence",
    "GotohAligner",
    "align",
    "select_orientation",
    "render_alignment",
    "reverse_complement",
    "__version__",
]
