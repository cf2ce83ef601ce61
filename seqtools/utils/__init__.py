"""Utility functions for the project."""

from .nucleotides import complement, gc_content, reverse_complement, sequence_length
from .rendering import annotation_line, render_alignment
from .serialization import dump_scoring, load_scoring, scoring_from_dict, scoring_to_dict

__all__ = [
    "complement",
    "reverse_complement",
    "sequence_length",
    "gc_content",
    "annotation_line",
    "render_alignment",
    "load_scoring",
    "dump_scoring",
    "scoring_from_dict",
    "scoring_to_dict",
]
