from __future__ import annotations

from typing import Dict, Iterable, List


class FragmentPool:
    """Live fragments keyed by integer ID.

    Initial fragments take IDs 0..n-1 in input order. Every `add` mints the
    next unused ID; removed IDs are never handed out again.
    """

    def __init__(self, fragments: Iterable[str] = ()) -> None:
        self._fragments: Dict[int, str] = {}
        self._next_id = 0
        for text in fragments:
            self.add(text)

    def add(self, text: str) -> int:
        frag_id = self._next_id
        self._next_id += 1
        self._fragments[frag_id] = text
        return frag_id

    def remove(self, frag_id: int) -> str:
        return self._fragments.pop(frag_id)

    def get(self, frag_id: int) -> str:
        return self._fragments[frag_id]

    def __getitem__(self, frag_id: int) -> str:
        return self._fragments[frag_id]

    def __contains__(self, frag_id: object) -> bool:
        return frag_id in self._fragments

    def __len__(self) -> int:
        return len(self._fragments)

    def ids(self) -> List[int]:
        return sorted(self._fragments)

    @property
    def next_id(self) -> int:
        return self._next_id

    def only(self) -> str:
        if len(self._fragments) != 1:
            raise ValueError(f"Expected exactly one fragment, pool holds {len(self._fragments)}")
        return next(iter(self._fragments.values()))
