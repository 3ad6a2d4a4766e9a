"""Helpers for turning disjoint sets into groups."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Hashable, Iterable, List, Tuple, TypeVar

from .structures import DisjointSets

T = TypeVar("T", bound=Hashable)


def connect(elements: Iterable[T], pairs: Iterable[Tuple[T, T]]) -> DisjointSets[T]:
    """Return disjoint sets over `elements` with every pair in `pairs` merged."""

    sets: DisjointSets[T] = DisjointSets(elements)
    for first, second in pairs:
        sets.union(first, second)
    return sets


def group_members(sets: DisjointSets[T]) -> Dict[T, List[T]]:
    """Return the members of each set keyed by representative."""

    groups: Dict[T, List[T]] = defaultdict(list)
    for value in sets:
        groups[sets.find(value)].append(value)
    return dict(groups)


def component_sizes(sets: DisjointSets[T]) -> List[int]:
    return sorted((sets.set_size(root) for root in sets.set_reprs()), reverse=True)


def largest_components(sets: DisjointSets[T], count: int) -> List[int]:
    if count < 0:
        raise ValueError("count must be non-negative")
    return component_sizes(sets)[:count]


__all__ = ["component_sizes", "connect", "group_members", "largest_components"]
