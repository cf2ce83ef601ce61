"""Gotoh affine-gap score matrices for local, global and semiglobal alignment."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence as SymbolSequence
from typing import Tuple

import numpy as np

from seqtools.types import AlignmentMode, ScoringScheme

logger = logging.getLogger(__name__)

NEG_INF = float("-inf")


class State(IntEnum):
    """Matrix a cell value (or back-pointer) refers to.

    ``M`` ends in a substitution column, ``X`` consumes a query symbol against
    a gap in the target and ``Y`` consumes a target symbol against a gap in
    the query. The integer order is the tie-break preference.
    """

    NONE = -1
    M = 0
    X = 1
    Y = 2


STATES: Tuple[State, State, State] = (State.M, State.X, State.Y)


@dataclass(frozen=True)
class AlignmentMatrices:
    """Filled score matrices, back-pointers and the chosen terminal cell.

    All grids have shape ``(len(query) + 1, len(target) + 1)``.
    """

    mode: AlignmentMode
    M: np.ndarray
    X: np.ndarray
    Y: np.ndarray
    ptr_M: np.ndarray
    ptr_X: np.ndarray
    ptr_Y: np.ndarray
    terminal: Tuple[int, int]
    terminal_state: State

    @property
    def shape(self) -> Tuple[int, int]:
        return self.M.shape

    @property
    def score(self) -> int:
        """Score of the optimal alignment ending at the terminal cell."""
        i, j = self.terminal
        return int(self.scores(self.terminal_state)[i, j])

    def scores(self, state: State) -> np.ndarray:
        return (self.M, self.X, self.Y)[state]

    def pointers(self, state: State) -> np.ndarray:
        return (self.ptr_M, self.ptr_X, self.ptr_Y)[state]

    def best(self) -> np.ndarray:
        """Cell-wise maximum over the three matrices."""
        return np.maximum(np.maximum(self.M, self.X), self.Y)


def _best_state(
    M: np.ndarray, X: np.ndarray, Y: np.ndarray, i: int, j: int
) -> Tuple[float, State]:
    candidates = (M[i, j], X[i, j], Y[i, j])
    max_val = max(candidates)
    return max_val, STATES[candidates.index(max_val)]


class MatrixBuilder:
    """Fill the three Gotoh matrices under a given scoring scheme and mode."""

    def __init__(self, scoring: ScoringScheme) -> None:
        self.scoring = scoring

    def _initialize_dp_matrices(
        self, m: int, n: int
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Allocate score grids for M, X, Y seeded with -inf."""
        M = np.full((m + 1, n + 1), NEG_INF, dtype=np.float64)
        X = np.full((m + 1, n + 1), NEG_INF, dtype=np.float64)
        Y = np.full((m + 1, n + 1), NEG_INF, dtype=np.float64)
        return M, X, Y

    def _initialize_backpointers(
        self, m: int, n: int
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Prepare back-pointer grids for traceback."""
        ptr_M = np.full((m + 1, n + 1), State.NONE, dtype=np.int8)
        ptr_X = np.full((m + 1, n + 1), State.NONE, dtype=np.int8)
        ptr_Y = np.full((m + 1, n + 1), State.NONE, dtype=np.int8)
        return ptr_M, ptr_X, ptr_Y

    def _fill_boundaries(
        self,
        M: np.ndarray,
        X: np.ndarray,
        Y: np.ndarray,
        ptr_X: np.ndarray,
        ptr_Y: np.ndarray,
        mode: AlignmentMode,
        m: int,
        n: int,
    ) -> None:
        """Set row 0 and column 0 according to the alignment mode."""
        M[0, 0] = 0

        if mode is AlignmentMode.LOCAL:
            M[:, 0] = X[:, 0] = Y[:, 0] = 0
            M[0, :] = X[0, :] = Y[0, :] = 0
            return

        if mode is AlignmentMode.SEMIGLOBAL:
            M[:, 0] = 0
            M[0, :] = 0
            return

        # Global: a leading overhang is one gap run charged in full.
        open_total = self.scoring.gap_open_total
        extend = self.scoring.gap_extend
        for i in range(1, m + 1):
            if i == 1:
                X[i, 0] = M[0, 0] - open_total
                ptr_X[i, 0] = State.M
            else:
                X[i, 0] = X[i - 1, 0] - extend
                ptr_X[i, 0] = State.X
        for j in range(1, n + 1):
            if j == 1:
                Y[0, j] = M[0, 0] - open_total
                ptr_Y[0, j] = State.M
            else:
                Y[0, j] = Y[0, j - 1] - extend
                ptr_Y[0, j] = State.Y

    def _fill_interior(
        self,
        M: np.ndarray,
        X: np.ndarray,
        Y: np.ndarray,
        ptr_M: np.ndarray,
        ptr_X: np.ndarray,
        ptr_Y: np.ndarray,
        query: SymbolSequence[str],
        target: SymbolSequence[str],
        mode: AlignmentMode,
    ) -> None:
        """Run the affine-gap recurrences over the interior in row-major order."""
        m, n = len(query), len(target)
        open_total = self.scoring.gap_open_total
        extend = self.scoring.gap_extend
        substitution = self.scoring.substitution
        floor = mode is AlignmentMode.LOCAL

        for i in range(1, m + 1):
            q = query[i - 1]
            for j in range(1, n + 1):
                candidates = (M[i - 1, j - 1], X[i - 1, j - 1], Y[i - 1, j - 1])
                max_val = max(candidates)
                if max_val != NEG_INF:
                    value = max_val + substitution(q, target[j - 1])
                    if floor and value <= 0:
                        M[i, j] = 0
                    else:
                        M[i, j] = value
                        ptr_M[i, j] = STATES[candidates.index(max_val)]

                candidates = (M[i - 1, j] - open_total, X[i - 1, j] - extend)
                max_val = max(candidates)
                if floor and max_val <= 0:
                    X[i, j] = 0
                elif max_val != NEG_INF:
                    X[i, j] = max_val
                    ptr_X[i, j] = (State.M, State.X)[candidates.index(max_val)]

                candidates = (M[i, j - 1] - open_total, Y[i, j - 1] - extend)
                max_val = max(candidates)
                if floor and max_val <= 0:
                    Y[i, j] = 0
                elif max_val != NEG_INF:
                    Y[i, j] = max_val
                    ptr_Y[i, j] = (State.M, State.Y)[candidates.index(max_val)]

    def _find_terminal(
        self, best: np.ndarray, mode: AlignmentMode, m: int, n: int
    ) -> Tuple[int, int]:
        """Pick the cell the traceback starts from."""
        if mode is AlignmentMode.GLOBAL:
            return m, n

        if mode is AlignmentMode.SEMIGLOBAL:
            cells = [(m, j) for j in range(n + 1)] + [(i, n) for i in range(m)]
            top = max(best[cell] for cell in cells)
            tied = [cell for cell in cells if best[cell] == top]
            # Shortest unaligned suffix first, then the smallest row.
            return min(tied, key=lambda cell: ((m - cell[0]) + (n - cell[1]), cell[0]))

        top = best.max()
        if top <= 0:
            return 0, 0
        # argwhere is row-major, so the last hit is the one closest to (m, n).
        i, j = np.argwhere(best == top)[-1]
        return int(i), int(j)

    def build(
        self,
        query: SymbolSequence[str],
        target: SymbolSequence[str],
        mode: "AlignmentMode | str" = AlignmentMode.GLOBAL,
    ) -> AlignmentMatrices:
        """Fill all matrices for ``query`` (rows) against ``target`` (columns)."""
        mode = AlignmentMode.parse(mode)
        m, n = len(query), len(target)

        M, X, Y = self._initialize_dp_matrices(m, n)
        ptr_M, ptr_X, ptr_Y = self._initialize_backpointers(m, n)
        self._fill_boundaries(M, X, Y, ptr_X, ptr_Y, mode, m, n)
        self._fill_interior(M, X, Y, ptr_M, ptr_X, ptr_Y, query, target, mode)

        best = np.maximum(np.maximum(M, X), Y)
        terminal = self._find_terminal(best, mode, m, n)
        _, terminal_state = _best_state(M, X, Y, *terminal)
        logger.debug(
            "Filled %s matrices of shape %dx%d; terminal cell %s in %s",
            mode.value,
            m + 1,
            n + 1,
            terminal,
            terminal_state.name,
        )
        return AlignmentMatrices(
            mode=mode,
            M=M,
            X=X,
            Y=Y,
            ptr_M=ptr_M,
            ptr_X=ptr_X,
            ptr_Y=ptr_Y,
            terminal=terminal,
            terminal_state=terminal_state,
        )


__all__ = ["AlignmentMatrices", "MatrixBuilder", "NEG_INF", "State", "STATES"]
