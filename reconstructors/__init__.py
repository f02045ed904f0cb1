"""Greedy fragment reconstruction package.

Exposes the overlap primitives, the reconstructor interface and its errors.
"""

from .base import (
    Reconstructor,
    ReconstructionResult,
    MergeStep,
    ReconstructionError,
    EmptyInputError,
    NoOverlapError,
    InvalidMergeGeometryError,
)
from .overlap import OverlapDescriptor, MergeGeometry, detect_overlap, classify_merge, merge_fragments
from .pool import FragmentPool

__all__ = [
    "Reconstructor",
    "ReconstructionResult",
    "MergeStep",
    "ReconstructionError",
    "EmptyInputError",
    "NoOverlapError",
    "InvalidMergeGeometryError",
    "OverlapDescriptor",
    "MergeGeometry",
    "detect_overlap",
    "classify_merge",
    "merge_fragments",
    "FragmentPool",
]
