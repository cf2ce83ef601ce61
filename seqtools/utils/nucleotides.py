"""Nucleotide string helpers: complement, reverse complement, length, GC content."""

from __future__ import annotations

from seqtools.constants import GAP_CHARACTER, GC_SYMBOLS

_COMPLEMENT_PAIRS = {
    "A": "T",
    "T": "A",
    "U": "A",
    "C": "G",
    "G": "C",
    "R": "Y",
    "Y": "R",
    "K": "M",
    "M": "K",
    "B": "V",
    "V": "B",
    "D": "H",
    "H": "D",
    "S": "S",
    "W": "W",
    "N": "N",
}
_COMPLEMENT_TABLE = str.maketrans(
    {
        **_COMPLEMENT_PAIRS,
        **{base.lower(): comp.lower() for base, comp in _COMPLEMENT_PAIRS.items()},
    }
)


def complement(text: str) -> str:
    """Complement every IUPAC nucleotide, preserving case.

    Characters without a complement (gaps, whitespace) pass through unchanged.
    """
    return text.translate(_COMPLEMENT_TABLE)


def reverse_complement(text: str) -> str:
    """Complement ``text`` and reverse it."""
    return complement(text)[::-1]


def _counted_symbols(text: str) -> str:
    return "".join(
        ch for ch in text if not ch.isspace() and ch != GAP_CHARACTER
    )


def sequence_length(text: str) -> int:
    """Number of symbols, ignoring whitespace and gap characters."""
    return len(_counted_symbols(text))


def gc_content(text: str) -> float:
    """Fraction of G/C (and IUPAC S) symbols; 0.0 for an empty sequence."""
    symbols = _counted_symbols(text)
    if not symbols:
        return 0.0
    return sum(ch in GC_SYMBOLS for ch in symbols) / len(symbols)


__all__ = ["complement", "reverse_complement", "sequence_length", "gc_content"]
