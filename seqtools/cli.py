#!/usr/bin/env python3
"""Command-line interface: complement helpers and pairwise alignment commands."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import List, Optional

from seqtools import __version__
from seqtools.algorithms import GotohAligner, select_orientation
from seqtools.types import AlignmentMode, ScoringScheme, SeqtoolsError, Sequence
from seqtools.utils import (
    complement,
    gc_content,
    load_scoring,
    render_alignment,
    reverse_complement,
    sequence_length,
)
from seqtools.utils.logging_setup import configure_logging

logger = logging.getLogger(__name__)

PAIRWISE_COMMANDS = {
    "pairwise-local": AlignmentMode.LOCAL,
    "pairwise-semiglobal": AlignmentMode.SEMIGLOBAL,
    "pairwise-global": AlignmentMode.GLOBAL,
}


def _non_negative_int(value: str) -> int:
    """argparse type for gap penalties."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected a non-negative integer, got '{value}'"
        ) from None
    if number < 0:
        raise argparse.ArgumentTypeError(
            f"expected a non-negative integer, got '{value}'"
        )
    return number


def _joined_input(fragments: List[str]) -> Sequence:
    """Join multi-fragment input into one validated sequence."""
    return Sequence.from_text(" ".join(fragments), allow_gaps=True)


def _run_complement(args: argparse.Namespace) -> int:
    sequence = _joined_input(args.fragments)
    print(complement(str(sequence)))
    return 0


def _run_reverse_complement(args: argparse.Namespace) -> int:
    sequence = _joined_input(args.fragments)
    print(reverse_complement(str(sequence)))
    return 0


def _run_length(args: argparse.Namespace) -> int:
    sequence = _joined_input(args.fragments)
    print(sequence_length(str(sequence)))
    return 0


def _run_gc(args: argparse.Namespace) -> int:
    sequence = _joined_input(args.fragments)
    print(f"{gc_content(str(sequence)):.4f}")
    return 0


def _scoring_from_args(args: argparse.Namespace) -> ScoringScheme:
    """Defaults, then the YAML file if given, then explicit flags."""
    scoring = load_scoring(args.config) if args.config else ScoringScheme()
    overrides = {}
    if args.gap_open is not None:
        overrides["gap_open"] = args.gap_open
    if args.gap_extend is not None:
        overrides["gap_extend"] = args.gap_extend
    return dataclasses.replace(scoring, **overrides)


def _run_pairwise(args: argparse.Namespace) -> int:
    mode = PAIRWISE_COMMANDS[args.command]
    query = Sequence.from_text(
        args.seq1, identifier="seq1", allow_gaps=True, allow_empty=False
    )
    target = Sequence.from_text(
        args.seq2, identifier="seq2", allow_gaps=True, allow_empty=False
    )
    scoring = _scoring_from_args(args)
    logger.info(
        "Aligning %d x %d symbols (%s, gap_open=%d, gap_extend=%d)",
        len(query),
        len(target),
        mode.value,
        scoring.gap_open,
        scoring.gap_extend,
    )

    aligner = GotohAligner(scoring=scoring, mode=mode)
    if args.try_rc:
        result = select_orientation(aligner, query, target)
    else:
        result = aligner.align(query, target)

    print(
        render_alignment(
            result, show_coordinates=not args.hide_coords, wrap=args.wrap
        )
    )
    if args.show_score:
        print(f"score: {result.score}")
    return 0


def _add_fragment_command(subparsers, name: str, help_text: str, handler) -> None:
    parser = subparsers.add_parser(name, help=help_text, description=help_text)
    parser.add_argument(
        "fragments",
        nargs="*",
        help="Sequence fragments; they are joined and whitespace is dropped.",
    )
    parser.set_defaults(handler=handler)


def _add_pairwise_command(subparsers, name: str, mode: AlignmentMode) -> None:
    help_text = f"{mode.value.capitalize()} affine-gap alignment of two sequences."
    parser = subparsers.add_parser(name, help=help_text, description=help_text)
    parser.add_argument(
        "seq1",
        help=(
            "Query sequence (top line). Put -- before the sequences when one "
            "of them starts with -."
        ),
    )
    parser.add_argument("seq2", help="Target sequence (bottom line).")
    parser.add_argument(
        "--gap-open",
        type=_non_negative_int,
        default=None,
        help="Gap opening penalty (default: 2).",
    )
    parser.add_argument(
        "--gap-extend",
        type=_non_negative_int,
        default=None,
        help="Gap extension penalty, charged for every gap column (default: 1).",
    )
    parser.add_argument(
        "--hide-coords",
        action="store_true",
        help="Print the bare alignment without start/end coordinates.",
    )
    parser.add_argument(
        "--try-rc",
        action="store_true",
        help="Also align the reverse complement of seq1 and keep the better one.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with gap_open/gap_extend; explicit flags take precedence.",
    )
    parser.add_argument(
        "--wrap",
        type=_non_negative_int,
        default=0,
        help="Split the diagram into blocks of N columns (default: 0, no wrapping).",
    )
    parser.add_argument(
        "--show-score",
        action="store_true",
        help="Print the alignment score after the diagram.",
    )
    parser.set_defaults(handler=_run_pairwise)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seqtools",
        description="Nucleotide sequence helpers and pairwise alignment.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-v info, -vv debug).",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    _add_fragment_command(subparsers, "c", "Complement a sequence.", _run_complement)
    _add_fragment_command(
        subparsers, "rc", "Reverse complement a sequence.", _run_reverse_complement
    )
    _add_fragment_command(
        subparsers, "length", "Count the symbols of a sequence.", _run_length
    )
    _add_fragment_command(
        subparsers, "gc", "GC content of a sequence as a fraction.", _run_gc
    )
    for name, mode in PAIRWISE_COMMANDS.items():
        _add_pairwise_command(subparsers, name, mode)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``seqtools`` console script."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        return args.handler(args)
    except (SeqtoolsError, OSError) as exc:
        print(f"seqtools error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
