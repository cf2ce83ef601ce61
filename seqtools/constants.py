"""Constants for the project."""

from typing import FrozenSet, Tuple

# ============================================================================
# Alphabet
# ============================================================================
NUCLEOTIDE_SYMBOLS: FrozenSet[str] = frozenset("ACGTUNRYSWKMBDHVacgtunryswkmbdhv")
GAP_CHARACTER = "-"
GC_SYMBOLS: FrozenSet[str] = frozenset("GCSgcs")

# ============================================================================
# Scoring defaults
# ============================================================================
MATCH_SCORE = 1
MISMATCH_PENALTY = 1
DEFAULT_GAP_OPEN = 2
DEFAULT_GAP_EXTEND = 1
SCORING_KEYS: Tuple[str, str] = ("gap_open", "gap_extend")

# ============================================================================
# Rendering
# ============================================================================
MATCH_MARK = "|"
MISMATCH_MARK = "."
GAP_MARK = " "
RC_MARKER = "RC"
