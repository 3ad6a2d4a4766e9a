"""Basic data structures."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import Dict, Generic, Hashable, Iterable, Iterator, List, Optional, Set, TypeVar

T = TypeVar("T", bound=Hashable)


@dataclass
class IntDisjointSets:
    """Union-find over dense integer ids handed out by :meth:`add`."""

    reprs: List[int] = field(default_factory=list)
    sizes: List[int] = field(default_factory=list)
    count: int = 0

    def __len__(self) -> int:
        return len(self.reprs)

    def add(self) -> int:
        """Add an element which is its own set and return its id."""

        index = len(self.reprs)
        self.reprs.append(index)
        self.sizes.append(1)
        self.count += 1
        return index

    def find(self, index: int) -> int:
        """Return the representative id of `index` without touching the forest."""

        self._check(index)
        while self.reprs[index] != index:
            index = self.reprs[index]
        return index

    def find_update(self, index: int) -> int:
        """Return the representative id of `index`, halving the path on the way."""

        self._check(index)
        reprs = self.reprs
        while reprs[index] != index:
            parent = reprs[index]
            reprs[index] = reprs[parent]
            index = parent
        return index

    def union(self, left: int, right: int) -> None:
        root_left = self.find_update(left)
        root_right = self.find_update(right)
        if root_left == root_right:
            return
        if self.sizes[root_left] > self.sizes[root_right]:
            root_left, root_right = root_right, root_left
        # root_left holds the smaller (or, on a tie, the left) set
        self.reprs[root_left] = root_right
        self.sizes[root_right] += self.sizes[root_left]
        self.count -= 1

    def set_size(self, index: int) -> int:
        return self.sizes[self.find(index)]

    def set_reprs(self) -> Set[int]:
        return {self.find(index) for index in range(len(self.reprs))}

    def set_count(self) -> int:
        return self.count

    def copy(self) -> "IntDisjointSets":
        return IntDisjointSets(list(self.reprs), list(self.sizes), self.count)

    def _check(self, index: int) -> None:
        if isinstance(index, bool):
            raise IndexError(f"id {index!r} is not an integer")
        try:
            index = operator.index(index)
        except TypeError:
            raise IndexError(f"id {index!r} is not an integer") from None
        if not 0 <= index < len(self.reprs):
            raise IndexError(f"id {index!r} out of range for {len(self.reprs)} elements")


class DisjointSets(Generic[T]):
    """Union-find keyed by hashable values, backed by :class:`IntDisjointSets`."""

    def __init__(self, elements: Optional[Iterable[T]] = None) -> None:
        self.values: List[T] = []
        self.ids: Dict[T, int] = {}
        self.disjoint_sets = IntDisjointSets()
        if elements is not None:
            for element in elements:
                self.add(element)

    def __len__(self) -> int:
        return len(self.values)

    def __contains__(self, value: object) -> bool:
        return value in self.ids

    def __iter__(self) -> Iterator[T]:
        return iter(self.values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(elements={len(self.values)}, sets={self.set_count()})"

    def add(self, value: T) -> None:
        """Add `value` as its own set; values already present are left alone."""

        if value in self.ids:
            return
        self.values.append(value)
        self.ids[value] = self.disjoint_sets.add()

    def contains(self, value: T) -> bool:
        return value in self.ids

    def find(self, value: T) -> T:
        """Return the representative value of the set holding `value`.

        Raises:
            KeyError: `value` was never added.
        """

        return self.values[self.disjoint_sets.find(self.ids[value])]

    def union(self, first: T, second: T) -> None:
        """Merge the sets holding `first` and `second`.

        Raises:
            KeyError: either value was never added.
        """

        self.disjoint_sets.union(self.ids[first], self.ids[second])

    def connected(self, first: T, second: T) -> bool:
        return self.disjoint_sets.find(self.ids[first]) == self.disjoint_sets.find(self.ids[second])

    def set_size(self, value: T) -> int:
        return self.disjoint_sets.set_size(self.ids[value])

    def set_reprs(self) -> Set[T]:
        return {self.find(value) for value in self.values}

    def set_count(self) -> int:
        return self.disjoint_sets.set_count()

    def copy(self) -> "DisjointSets[T]":
        clone: DisjointSets[T] = DisjointSets()
        clone.values = list(self.values)
        clone.ids = dict(self.ids)
        clone.disjoint_sets = self.disjoint_sets.copy()
        return clone

    def __copy__(self) -> "DisjointSets[T]":
        return self.copy()


__all__ = ["DisjointSets", "IntDisjointSets"]
