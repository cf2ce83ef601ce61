"""Unit tests for complement, reverse complement, length and GC helpers."""

from __future__ import annotations

import math

import pytest

from seqtools.utils.nucleotides import (
    complement,
    gc_content,
    reverse_complement,
    sequence_length,
)


def test_complement():
    assert complement("AAAACGT") == "TTTTGCA"


def test_reverse_complement():
    assert reverse_complement("AAAACGT") == "ACGTTTT"


def test_case_and_iupac_codes_are_complemented():
    assert complement("acgtRYKMBVDHSWN") == "tgcaYRMKVBHDSWN"
    assert reverse_complement("acgT") == "Acgt"


def test_gaps_and_whitespace_pass_through_but_are_reversed():
    assert complement("AC-G T") == "TG-C A"
    assert reverse_complement("AC-G T") == "A C-GT"


@pytest.mark.parametrize(
    "text",
    ["GATTACA", "acgtnACGTN", "RYSWKMBDHV", "AC--GT", "A C\tG", ""],
)
def test_reverse_complement_twice_is_identity(text):
    assert reverse_complement(reverse_complement(text)) == text


def test_sequence_length_ignores_whitespace_and_gaps():
    assert sequence_length("AC-G T\n") == 4
    assert sequence_length("") == 0


def test_gc_content():
    assert math.isclose(gc_content("GGCC AT--"), 4 / 6)
    assert math.isclose(gc_content("gcSa"), 0.75)
    assert gc_content("ATAT") == 0.0
    assert gc_content(" - ") == 0.0
