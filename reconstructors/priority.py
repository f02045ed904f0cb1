from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import List, Set, Tuple

from .base import MergeStep, NoOverlapError, Reconstructor
from .overlap import detect_overlap
from .pool import FragmentPool
from scripts.logging_helper import log_trace, trace_enabled


@dataclass(frozen=True)
class FragmentPair:
    """Two live fragment IDs and their overlap length. `a_id` is the smaller ID."""

    overlap: int
    a_id: int
    b_id: int

    @classmethod
    def of(cls, overlap: int, x: int, y: int) -> "FragmentPair":
        return cls(overlap, min(x, y), max(x, y))

    def contains(self, frag_id: int) -> bool:
        return frag_id == self.a_id or frag_id == self.b_id

    def other(self, frag_id: int) -> int:
        return self.b_id if frag_id == self.a_id else self.a_id


# Heap entries sort by largest overlap, then by the smaller ID pair.
_Entry = Tuple[int, int, int, FragmentPair]


def _entry(pair: FragmentPair) -> _Entry:
    return (-pair.overlap, pair.a_id, pair.b_id, pair)


class PriorityReconstructor(Reconstructor):
    """Keeps pair scores in a max-ordered heap between merges.

    After each merge only the pairs that involved one of the two consumed
    fragments are dropped, and their partners are rescored against the new
    fragment. Every other score carries over unchanged.
    """

    def name(self) -> str:
        return "priority"

    def _score(self, pool: FragmentPool, x: int, y: int) -> FragmentPair:
        pair = FragmentPair.of(detect_overlap(pool[x], pool[y]).length, x, y)
        if trace_enabled():
            log_trace(f"priority: pair ({pair.a_id}, {pair.b_id}) overlap={pair.overlap}")
        return pair

    def _initial_heap(self, pool: FragmentPool) -> List[_Entry]:
        heap: List[_Entry] = []
        ids = pool.ids()
        for x, a_id in enumerate(ids):
            for b_id in ids[x + 1:]:
                pair = self._score(pool, a_id, b_id)
                if pair.overlap > 0:
                    heap.append(_entry(pair))
        heapq.heapify(heap)
        return heap

    @staticmethod
    def _purge(heap: List[_Entry], consumed: Tuple[int, int]) -> Tuple[List[_Entry], Set[int]]:
        """Split heap into surviving entries and the partners of consumed fragments."""
        kept: List[_Entry] = []
        partners: Set[int] = set()
        for entry in heap:
            pair = entry[3]
            stale = [c for c in consumed if pair.contains(c)]
            if not stale:
                kept.append(entry)
                continue
            other = pair.other(stale[0])
            if other not in consumed:
                partners.add(other)
        heapq.heapify(kept)
        return kept, partners

    def _run(self, pool: FragmentPool, steps: List[MergeStep]) -> None:
        heap = self._initial_heap(pool)
        while len(pool) > 1:
            if not heap:
                raise NoOverlapError(f"No overlapping pair among {len(pool)} remaining fragments")
            pair = heapq.heappop(heap)[3]
            if pair.overlap <= 0:
                raise NoOverlapError(f"No overlapping pair among {len(pool)} remaining fragments")
            new_id = self._merge_pair(pool, pair.a_id, pair.b_id, pair.overlap, steps)

            heap, partners = self._purge(heap, (pair.a_id, pair.b_id))
            for other in sorted(partners):
                heapq.heappush(heap, _entry(self._score(pool, new_id, other)))
