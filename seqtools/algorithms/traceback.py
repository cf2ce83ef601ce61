"""Recover an optimal alignment path from filled Gotoh matrices."""

from __future__ import annotations

import logging
from typing import List, Sequence as SymbolSequence

from seqtools.algorithms.matrices import AlignmentMatrices, State
from seqtools.constants import GAP_CHARACTER
from seqtools.types import AlignmentMode, AlignmentResult

logger = logging.getLogger(__name__)


def _reached_start(matrices: AlignmentMatrices, state: State, i: int, j: int) -> bool:
    """Mode-specific stop rule for the backward walk."""
    mode = matrices.mode
    if mode is AlignmentMode.GLOBAL:
        return i == 0 and j == 0
    if mode is AlignmentMode.SEMIGLOBAL:
        return i == 0 or j == 0
    return matrices.scores(state)[i, j] <= 0


def _residue_offset(sequence: SymbolSequence[str], index: int) -> int:
    """Position ``index`` of the input expressed over its non-gap symbols."""
    return sum(1 for symbol in sequence[:index] if symbol != GAP_CHARACTER)


def traceback(
    matrices: AlignmentMatrices,
    query: SymbolSequence[str],
    target: SymbolSequence[str],
) -> AlignmentResult:
    """Walk back from the terminal cell and build the AlignmentResult.

    Columns are collected end-first and reversed once the walk stops; the
    cell where it stops gives the start of both half-open ranges. Ranges
    count residues only, so a ``-`` already present in the input does not
    shift them.
    """
    i, j = matrices.terminal
    state = matrices.terminal_state
    end_i, end_j = i, j
    aligned_query: List[str] = []
    aligned_target: List[str] = []

    while not _reached_start(matrices, state, i, j):
        prev_state = State(int(matrices.pointers(state)[i, j]))
        if prev_state is State.NONE:
            raise RuntimeError(
                f"Missing back-pointer at ({i}, {j}) in matrix {state.name}"
            )
        if state is State.M:
            aligned_query.append(query[i - 1])
            aligned_target.append(target[j - 1])
            i -= 1
            j -= 1
        elif state is State.X:
            aligned_query.append(query[i - 1])
            aligned_target.append(GAP_CHARACTER)
            i -= 1
        else:  # state is State.Y
            aligned_query.append(GAP_CHARACTER)
            aligned_target.append(target[j - 1])
            j -= 1

        state = prev_state

    aligned_query.reverse()
    aligned_target.reverse()

    logger.debug(
        "Traceback %s: query [%d, %d) target [%d, %d), %d columns",
        matrices.mode.value,
        i,
        end_i,
        j,
        end_j,
        len(aligned_query),
    )
    return AlignmentResult(
        aligned_query="".join(aligned_query),
        aligned_target="".join(aligned_target),
        query_start=_residue_offset(query, i),
        query_end=_residue_offset(query, end_i),
        target_start=_residue_offset(target, j),
        target_end=_residue_offset(target, end_j),
        score=matrices.score,
    )


__all__ = ["traceback"]
