"""Sequence types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from seqtools.constants import GAP_CHARACTER, NUCLEOTIDE_SYMBOLS
from seqtools.types.errors import EmptySequence, InvalidSymbol


@dataclass(frozen=True)
class Sequence:
    """Normalized nucleotide sequence with an optional identifier.

    Symbols keep their case; comparison during alignment is case-sensitive.
    """

    symbols: Tuple[str, ...]
    identifier: Optional[str] = None
    gapped: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "symbols", tuple(self.symbols))
        self._validate()

    def __len__(self) -> int:
        return len(self.symbols)

    def __str__(self) -> str:
        return "".join(self.symbols)

    def __getitem__(self, index):
        return self.symbols[index]

    def _validate(self) -> None:
        allowed = NUCLEOTIDE_SYMBOLS | {GAP_CHARACTER} if self.gapped else NUCLEOTIDE_SYMBOLS
        invalid = {ch for ch in self.symbols if ch not in allowed}
        if invalid:
            raise InvalidSymbol(str(self), invalid)

    @classmethod
    def from_text(
        cls,
        text: str,
        identifier: Optional[str] = None,
        allow_gaps: bool = False,
        allow_empty: bool = True,
    ) -> "Sequence":
        """Build a Sequence from raw user input.

        Whitespace is always stripped so multi-fragment input can be entered;
        ``-`` survives only when ``allow_gaps`` is set.
        """
        return normalize(
            text,
            identifier=identifier,
            allow_gaps=allow_gaps,
            allow_empty=allow_empty,
        )


def normalize(
    text: str,
    identifier: Optional[str] = None,
    allow_gaps: bool = False,
    allow_empty: bool = True,
) -> Sequence:
    """Strip whitespace from ``text``, validate it and wrap it in a Sequence."""
    stripped = "".join(ch for ch in text if not ch.isspace())

    allowed = NUCLEOTIDE_SYMBOLS | {GAP_CHARACTER} if allow_gaps else NUCLEOTIDE_SYMBOLS
    invalid = {ch for ch in stripped if ch not in allowed}
    if invalid:
        raise InvalidSymbol(text, invalid)

    if not stripped and not allow_empty:
        raise EmptySequence(text, name=identifier or "sequence")

    return Sequence(symbols=tuple(stripped), identifier=identifier, gapped=allow_gaps)


__all__ = ["Sequence", "normalize"]
