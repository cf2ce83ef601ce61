"""Pick the better of the forward and reverse-complement query orientations."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from seqtools.algorithms.base import PairwiseAligner
from seqtools.types import AlignmentResult, Sequence
from seqtools.utils.nucleotides import reverse_complement

logger = logging.getLogger(__name__)


def reverse_complement_sequence(sequence: Sequence) -> Sequence:
    """Reverse complement a Sequence, keeping its identifier and gap tolerance."""
    return Sequence(
        symbols=tuple(reverse_complement(str(sequence))),
        identifier=sequence.identifier,
        gapped=sequence.gapped,
    )


def select_orientation(
    aligner: PairwiseAligner,
    query: Sequence,
    target: Sequence,
    parallel: bool = False,
) -> AlignmentResult:
    """Align both orientations of ``query`` and keep the higher score.

    The reverse-complement result only wins on a strictly higher score; the
    returned result is tagged with the orientation it came from.
    """
    rc_query = reverse_complement_sequence(query)

    if parallel:
        with ThreadPoolExecutor(max_workers=2) as executor:
            forward_future = executor.submit(aligner.align, query, target)
            reverse_future = executor.submit(aligner.align, rc_query, target)
            forward = forward_future.result()
            reverse = reverse_future.result()
    else:
        forward = aligner.align(query, target)
        reverse = aligner.align(rc_query, target)

    logger.debug(
        "Orientation scores: forward=%d reverse-complement=%d",
        forward.score,
        reverse.score,
    )
    if reverse.score > forward.score:
        return reverse.with_orientation(True)
    return forward.with_orientation(False)


__all__ = ["reverse_complement_sequence", "select_orientation"]
