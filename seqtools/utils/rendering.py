"""Text rendering of pairwise alignments."""

from __future__ import annotations

from typing import List, Tuple

from seqtools.constants import (
    GAP_CHARACTER,
    GAP_MARK,
    MATCH_MARK,
    MISMATCH_MARK,
    RC_MARKER,
)
from seqtools.types import AlignmentResult


def annotation_line(aligned_query: str, aligned_target: str) -> str:
    """One mark per column: match, mismatch, or blank next to a gap."""
    marks = []
    for a, b in zip(aligned_query, aligned_target):
        if a == GAP_CHARACTER or b == GAP_CHARACTER:
            marks.append(GAP_MARK)
        elif a == b:
            marks.append(MATCH_MARK)
        else:
            marks.append(MISMATCH_MARK)
    return "".join(marks)


def _residues(aligned: str) -> int:
    return len(aligned) - aligned.count(GAP_CHARACTER)


def _blocks(
    result: AlignmentResult, wrap: int
) -> List[Tuple[str, str, int, int, int, int]]:
    """Split the alignment into column blocks with their coordinates.

    Each block carries query start/end and target start/end; the last block
    ends exactly where the alignment result ends.
    """
    columns = result.columns
    width = wrap if wrap and wrap > 0 else max(columns, 1)
    blocks = []
    q_pos, t_pos = result.query_start, result.target_start
    for start in range(0, max(columns, 1), width):
        q_block = result.aligned_query[start : start + width]
        t_block = result.aligned_target[start : start + width]
        q_end = q_pos + _residues(q_block)
        t_end = t_pos + _residues(t_block)
        blocks.append((q_block, t_block, q_pos, q_end, t_pos, t_end))
        q_pos, t_pos = q_end, t_end
    q_block, t_block, q_start, _, t_start, _ = blocks[-1]
    blocks[-1] = (
        q_block, t_block, q_start, result.query_end, t_start, result.target_end
    )
    return blocks


def render_alignment(
    result: AlignmentResult,
    show_coordinates: bool = True,
    wrap: int = 0,
) -> str:
    """
    Render an alignment as query / annotation / target lines.

    With coordinates, each sequence line is prefixed with its start (right
    aligned to a shared width) and suffixed with its end, so the three lines
    share columns. ``wrap`` > 0 splits long alignments into blocks separated
    by a blank line. A reverse-complement result gets an ``RC`` marker after
    the query line.
    """
    blocks = _blocks(result, wrap)
    width = max(
        len(str(start))
        for _, _, q_start, _, t_start, _ in blocks
        for start in (q_start, t_start)
    )
    rc_suffix = f" {RC_MARKER}" if result.reverse_complemented else ""

    rendered = []
    for q_block, t_block, q_start, q_end, t_start, t_end in blocks:
        marks = annotation_line(q_block, t_block)
        if show_coordinates:
            lines = [
                f"{q_start:>{width}} {q_block} {q_end}{rc_suffix}",
                f"{'':>{width}} {marks}",
                f"{t_start:>{width}} {t_block} {t_end}",
            ]
        else:
            lines = [f"{q_block}{rc_suffix}", marks, t_block]
        rendered.append("\n".join(lines))
    return "\n\n".join(rendered)


__all__ = ["annotation_line", "render_alignment"]
