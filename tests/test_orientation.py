"""Unit tests for forward / reverse-complement orientation selection."""

from __future__ import annotations

from seqtools.algorithms import GotohAligner, select_orientation
from seqtools.algorithms.orientation import reverse_complement_sequence
from seqtools.types import Sequence


def _seq(text: str, identifier: str = None) -> Sequence:
    return Sequence.from_text(text, identifier=identifier, allow_gaps=True)


def test_reverse_complement_orientation_wins():
    aligner = GotohAligner(mode="semiglobal")
    query = _seq("TGTAATC")
    target = _seq("GGCGATTACAATGACA")

    forward = aligner.align(query, target)
    result = select_orientation(aligner, query, target)

    assert result.reverse_complemented is True
    assert result.aligned_query == "GATTACA"
    assert result.aligned_target == "GATTACA"
    assert result.score == 7
    assert result.score > forward.score
    assert result.query_range == (0, 7)
    assert result.target_range == (3, 10)


def test_forward_orientation_kept_when_better():
    aligner = GotohAligner(mode="local")
    result = select_orientation(aligner, _seq("ACAGT"), _seq("ACGT"))
    assert result.reverse_complemented is False
    assert result.aligned_query == "GT"


def test_tie_keeps_forward_orientation():
    # ACGT is its own reverse complement, so both orientations score the same.
    aligner = GotohAligner(mode="global")
    result = select_orientation(aligner, _seq("ACGT"), _seq("ACGT"))
    assert result.reverse_complemented is False
    assert result.score == 4


def test_parallel_matches_sequential():
    aligner = GotohAligner(mode="semiglobal")
    query = _seq("TGTAATC")
    target = _seq("GGCGATTACAATGACA")
    assert select_orientation(aligner, query, target, parallel=True) == select_orientation(
        aligner, query, target
    )


def test_reverse_complement_sequence_keeps_metadata():
    rc = reverse_complement_sequence(_seq("AC-gt", identifier="seq1"))
    assert str(rc) == "ac-GT"
    assert rc.identifier == "seq1"
    assert rc.gapped is True
