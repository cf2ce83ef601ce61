"""Types for the project."""

from .alignment import AlignmentResult
from .errors import EmptySequence, InvalidScoringParameter, InvalidSymbol, SeqtoolsError
from .scoring import AlignmentMode, ScoringScheme
from .sequence import Sequence, normalize


__all__ = [
    "AlignmentResult",
    "AlignmentMode",
    "ScoringScheme",
    "Sequence",
    "normalize",
    "SeqtoolsError",
    "InvalidSymbol",
    "EmptySequence",
    "InvalidScoringParameter",
]
