"""End-to-end tests for GotohAligner (matrix fill + traceback)."""

from __future__ import annotations

import pytest

from seqtools.algorithms import GotohAligner, align
from seqtools.types import AlignmentMode, ScoringScheme, Sequence
from seqtools.utils.rendering import annotation_line

PAIRS = [
    ("ACAGT", "ACGT"),
    ("GGGGCCCCGGGGACAGT", "ACGT"),
    ("TGTAATC", "GGCGATTACAATGACA"),
    ("ACGT", "ACAAAAGT"),
    ("AAAA", "CCCC"),
    ("GATTACA", "GCATGCT"),
    ("acgt", "ACGT"),
]


def _column_score(aligned_query: str, aligned_target: str, scoring: ScoringScheme) -> int:
    """Re-score an alignment column by column."""
    score = 0
    previous = None
    for a, b in zip(aligned_query, aligned_target):
        if a == "-" and b == "-":
            raise AssertionError("gap/gap column")
        if b == "-":
            kind = "X"
        elif a == "-":
            kind = "Y"
        else:
            kind = "M"
        if kind == "M":
            score += scoring.substitution(a, b)
        else:
            score -= scoring.gap_extend
            if previous != kind:
                score -= scoring.gap_open
        previous = kind
    return score


def _ungapped(text: str) -> str:
    return text.replace("-", "")


@pytest.mark.parametrize("sequence", ["A", "ACGT", "GATTACAGATTACA", "acgTN"])
def test_global_self_alignment_has_no_gaps(sequence):
    result = align(sequence, sequence, mode="global")
    assert result.aligned_query == sequence
    assert result.aligned_target == sequence
    assert result.score == len(sequence)
    assert result.gaps == 0
    assert annotation_line(result.aligned_query, result.aligned_target) == "|" * len(sequence)


def test_local_example():
    result = align("ACAGT", "ACGT", mode="local")
    assert result.aligned_query == "GT"
    assert result.aligned_target == "GT"
    assert result.score == 2
    assert result.query_range == (3, 5)
    assert result.target_range == (2, 4)


def test_semiglobal_example():
    result = align("ACAGT", "ACGT", mode="semiglobal")
    assert result.aligned_query == "ACAGT"
    assert result.aligned_target == "AC-GT"
    assert result.score == 1
    assert result.query_range == (0, 5)
    assert result.target_range == (0, 4)


def test_global_example_consumes_whole_target():
    query = "GGGGCCCCGGGGACAGT"
    result = align(query, "ACGT", mode="global")
    assert result.aligned_query == query
    assert result.aligned_target == "-" * 12 + "AC-GT"
    assert result.score == 4 - (2 + 12) - (2 + 1)
    assert result.query_range == (0, 17)
    assert result.target_range == (0, 4)


def test_high_gap_penalties_prefer_mismatches():
    result = align("ACGT", "ACAAAAGT", mode="semiglobal", gap_open=5, gap_extend=5)
    assert "-" not in result.aligned_query + result.aligned_target
    assert result.aligned_query == "ACGT"
    assert result.aligned_target == "AAGT"
    assert result.score == 2
    assert result.target_range == (4, 8)


@pytest.mark.parametrize("mode", ["global", "semiglobal", "local"])
def test_free_gaps_prefer_single_gap_run(mode):
    result = align("ACGT", "ACAAAAGT", mode=mode, gap_open=0, gap_extend=0)
    assert result.aligned_query == "AC----GT"
    assert result.aligned_target == "ACAAAAGT"
    assert result.score == 4


@pytest.mark.parametrize("query,target", PAIRS)
def test_local_scores_are_never_negative(query, target):
    assert GotohAligner(mode="local").align(query, target).score >= 0


@pytest.mark.parametrize("query,target", PAIRS)
def test_semiglobal_scores_are_never_negative(query, target):
    assert GotohAligner(mode="semiglobal").align(query, target).score >= 0


@pytest.mark.parametrize("mode", list(AlignmentMode))
@pytest.mark.parametrize("query,target", PAIRS)
def test_reported_score_matches_columns(mode, query, target):
    scoring = ScoringScheme(gap_open=3, gap_extend=1)
    result = GotohAligner(scoring=scoring, mode=mode).align(query, target)
    assert _column_score(result.aligned_query, result.aligned_target, scoring) == result.score
    assert _ungapped(result.aligned_query) == query[result.query_start : result.query_end]
    assert _ungapped(result.aligned_target) == target[result.target_start : result.target_end]


@pytest.mark.parametrize("query,target", PAIRS)
def test_global_covers_both_sequences(query, target):
    result = align(query, target, mode="global")
    assert result.query_range == (0, len(query))
    assert result.target_range == (0, len(target))


def test_global_against_empty_target_is_one_gap_run():
    result = align("ACG", "", mode="global")
    assert result.aligned_query == "ACG"
    assert result.aligned_target == "---"
    assert result.score == -5


def test_local_without_similarity_is_empty():
    result = align("AAAA", "CCCC", mode="local")
    assert result.columns == 0
    assert result.score == 0
    assert result.query_range == (0, 0)
    assert result.target_range == (0, 0)


def test_case_sensitive_comparison():
    result = align("acgt", "ACGT", mode="global")
    assert result.nmatch() == 0
    assert result.score == -4


def test_aligner_accepts_sequences_and_scores():
    aligner = GotohAligner(mode="semiglobal")
    query = Sequence.from_text("ACA GT")
    target = Sequence.from_text("ACGT")
    assert aligner.score(query, target) == 1
    assert aligner.fill(query, target).terminal == (5, 4)
    assert "semiglobal" in repr(aligner)


@pytest.mark.parametrize(
    "query, target, aligned_query, aligned_target",
    [
        ("AC", "AAC", "-AC", "AAC"),
        ("A", "AA", "-A", "AA"),
        ("AA", "A", "AA", "-A"),
    ],
)
def test_tied_paths_resolve_towards_substitution(
    query, target, aligned_query, aligned_target
):
    result = align(query, target, mode="global")
    assert result.aligned_query == aligned_query
    assert result.aligned_target == aligned_target
    assert result.score == _column_score(aligned_query, aligned_target, ScoringScheme())


def test_gap_symbols_in_input_do_not_advance_ranges():
    result = align("AC-GT", "ACGT", mode="global")
    assert result.aligned_query == "AC-GT"
    assert result.aligned_target == "AC-GT"
    assert result.score == 1
    assert result.query_range == (0, 4)
    assert result.target_range == (0, 4)

    result = align("ACGT", "-ACGT", mode="local")
    assert result.aligned_target == "ACGT"
    assert result.target_range == (0, 4)
