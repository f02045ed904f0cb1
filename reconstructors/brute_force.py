from __future__ import annotations

from typing import List, Optional, Tuple

from .base import MergeStep, NoOverlapError, Reconstructor
from .overlap import detect_overlap
from .pool import FragmentPool
from scripts.logging_helper import log_trace, trace_enabled


class BruteForceReconstructor(Reconstructor):
    """Rescores every live pair before each merge.

    Quadratic work per round and cubic overall in the fragment count. Pairs
    are scanned in ascending ID order and the first pair with the strictly
    largest overlap is merged.
    """

    def name(self) -> str:
        return "brute_force"

    def _best_pair(self, pool: FragmentPool) -> Tuple[Optional[int], Optional[int], int]:
        ids = pool.ids()
        best_a: Optional[int] = None
        best_b: Optional[int] = None
        best_len = 0
        for x, a_id in enumerate(ids):
            for b_id in ids[x + 1:]:
                length = detect_overlap(pool[a_id], pool[b_id]).length
                if trace_enabled():
                    log_trace(f"brute_force: pair ({a_id}, {b_id}) overlap={length}")
                if length > best_len:
                    best_a, best_b, best_len = a_id, b_id, length
        return best_a, best_b, best_len

    def _run(self, pool: FragmentPool, steps: List[MergeStep]) -> None:
        while len(pool) > 1:
            a_id, b_id, length = self._best_pair(pool)
            if a_id is None or b_id is None:
                raise NoOverlapError(f"No overlapping pair among {len(pool)} remaining fragments")
            self._merge_pair(pool, a_id, b_id, length, steps)
