from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional


class OverlapDescriptor(NamedTuple):
    """Matched region between two fragments.

    `[a_start, a_end)` and `[b_start, b_end)` are half-open ranges in A and B.
    A length of 0 means no usable overlap; all offsets are 0 in that case.
    """

    length: int
    a_start: int
    a_end: int
    b_start: int
    b_end: int


NO_OVERLAP = OverlapDescriptor(0, 0, 0, 0, 0)


class MergeGeometry(Enum):
    NONE = "none"
    B_CONTAINED = "b_contained"
    A_CONTAINED = "a_contained"
    A_THEN_B = "a_then_b"
    B_THEN_A = "b_then_a"
    INVALID = "invalid"


def _extend(a: str, b: str, i: int, j: int) -> tuple:
    while i < len(a) and j < len(b) and a[i] == b[j]:
        i += 1
        j += 1
    return i, j


def detect_overlap(a: str, b: str) -> OverlapDescriptor:
    """
    Find the longest boundary-anchored match between a and b.

    Two scans are made: B's first character against every position of A,
    then A's first character against every position of B. A run that stops
    strictly inside both strings is an internal coincidence and is ignored;
    otherwise it reaches the end of A or of B and is a candidate. The longest
    candidate wins; on equal length the first one found is kept.
    """
    if not a or not b:
        return NO_OVERLAP
    best = NO_OVERLAP

    for i in range(len(a)):
        if a[i] != b[0]:
            continue
        i_p, j_p = _extend(a, b, i, 0)
        if i_p < len(a) and j_p < len(b):
            continue
        if j_p > best.length:
            best = OverlapDescriptor(j_p, i, i_p, 0, j_p)

    for j in range(len(b)):
        if b[j] != a[0]:
            continue
        i_p, j_p = _extend(a, b, 0, j)
        if i_p < len(a) and j_p < len(b):
            continue
        if i_p > best.length:
            best = OverlapDescriptor(i_p, 0, i_p, j, j_p)

    return best


def classify_merge(a: str, b: str, overlap: OverlapDescriptor) -> MergeGeometry:
    if overlap.length == 0:
        return MergeGeometry.NONE
    if overlap.b_start == 0 and overlap.b_end == len(b):
        return MergeGeometry.B_CONTAINED
    if overlap.a_start == 0 and overlap.a_end == len(a):
        return MergeGeometry.A_CONTAINED
    if overlap.a_end == len(a) and overlap.b_start == 0 and overlap.b_end > 0:
        return MergeGeometry.A_THEN_B
    if overlap.b_end == len(b) and overlap.a_start == 0 and overlap.a_end > 0:
        return MergeGeometry.B_THEN_A
    return MergeGeometry.INVALID


def merge_fragments(a: str, b: str, overlap: Optional[OverlapDescriptor] = None) -> Optional[str]:
    """Join a and b over their anchored overlap.

    Returns None when there is no overlap or the match does not fit any of
    the anchored cases. Pass `overlap` to reuse an already computed descriptor.
    """
    if overlap is None:
        overlap = detect_overlap(a, b)
    geometry = classify_merge(a, b, overlap)
    if geometry is MergeGeometry.B_CONTAINED:
        return a
    if geometry is MergeGeometry.A_CONTAINED:
        return b
    if geometry is MergeGeometry.A_THEN_B:
        return a[:overlap.a_start] + b
    if geometry is MergeGeometry.B_THEN_A:
        return b[:overlap.b_start] + a
    return None
