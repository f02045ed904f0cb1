from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .overlap import merge_fragments
from .pool import FragmentPool
from scripts.logging_helper import log_debug
from scripts.utils import check_fragment_lengths


class ReconstructionError(Exception):
    """Base error for fragment reconstruction."""


class EmptyInputError(ReconstructionError):
    """No fragments were supplied."""


class NoOverlapError(ReconstructionError):
    """More than one fragment remains but no pair has a usable overlap."""


class InvalidMergeGeometryError(ReconstructionError):
    """A positive overlap did not fit any anchored merge case."""


@dataclass(frozen=True)
class MergeStep:
    a_id: int
    b_id: int
    new_id: int
    overlap: int


@dataclass
class ReconstructionResult:
    text: str
    strategy: str
    steps: List[MergeStep] = field(default_factory=list)

    @property
    def merge_count(self) -> int:
        return len(self.steps)


class Reconstructor(ABC):
    """Unified interface for greedy reconstruction strategies.

    A strategy owns nothing between runs: each call to `reconstruct` builds
    a fresh FragmentPool, so fragment IDs restart at 0 for every input.

    Implementors should:
    - Pick the next pair to merge according to their own bookkeeping.
    - Merge through `_merge_pair`, which updates the pool and records the step.
    - Raise ReconstructionError subclasses; never return partial output.
    """

    def __init__(self, *, max_fragment_length: Optional[int] = None) -> None:
        self._max_fragment_length = max_fragment_length

    @property
    def max_fragment_length(self) -> Optional[int]:
        return self._max_fragment_length

    @abstractmethod
    def name(self) -> str:
        """Short strategy name (e.g., 'brute_force', 'priority')."""

    @abstractmethod
    def _run(self, pool: FragmentPool, steps: List[MergeStep]) -> None:
        """Merge fragments in `pool` until a single one is left."""

    def reconstruct(self, fragments: Sequence[str]) -> ReconstructionResult:
        """Merge `fragments` into one string.

        Raises EmptyInputError for an empty sequence, NoOverlapError when the
        remaining fragments cannot be joined, and InvalidMergeGeometryError
        if the merger rejects a pair that reported a positive overlap.
        """
        if not fragments:
            raise EmptyInputError("Nothing to reconstruct: no fragments supplied")
        check_fragment_lengths(fragments, self.max_fragment_length)
        pool = FragmentPool(fragments)
        steps: List[MergeStep] = []
        self._run(pool, steps)
        return ReconstructionResult(text=pool.only(), strategy=self.name(), steps=steps)

    def _merge_pair(self, pool: FragmentPool, a_id: int, b_id: int, overlap: int, steps: List[MergeStep]) -> int:
        merged = merge_fragments(pool[a_id], pool[b_id])
        if merged is None:
            raise InvalidMergeGeometryError(
                f"Fragments {a_id} and {b_id} overlap by {overlap} but could not be merged"
            )
        new_id = pool.add(merged)
        pool.remove(a_id)
        pool.remove(b_id)
        steps.append(MergeStep(a_id=a_id, b_id=b_id, new_id=new_id, overlap=overlap))
        log_debug(f"{self.name()}: merged {a_id} + {b_id} -> {new_id} (overlap={overlap}, live={len(pool)})")
        return new_id
