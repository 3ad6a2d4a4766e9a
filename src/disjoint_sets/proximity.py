"""Cluster points by linking the closest pairs."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
from sklearn.metrics import pairwise_distances

try:
    from tqdm import tqdm

    _TQDM_AVAILABLE = True
except ImportError:  # pragma: no cover - optional dependency
    _TQDM_AVAILABLE = False

from .grouping import group_members
from .structures import DisjointSets

Pair = Tuple[int, int]


@dataclass
class ProximityStats:
    """Summary metrics for a proximity clustering run."""

    total_points: int
    candidate_pairs: int
    links_applied: int
    merges: int
    cluster_count: int
    last_merge: Optional[Pair]
    runtime_seconds: float


@dataclass
class ProximityResult:
    """Result bundle returned by :class:`ProximityClusterer`."""

    sets: DisjointSets[int]
    cluster_map: Dict[int, List[int]]
    stats: ProximityStats


@dataclass
class ProximityConfig:
    """Configuration parameters for :class:`ProximityClusterer`."""

    metric: str = ""
    threshold: float | None = None
    max_links: int | None = None
    use_tqdm: bool | None = None
    verbose: bool = True

    def __post_init__(self) -> None:
        if not self.metric:
            self.metric = os.getenv("DISJOINT_SETS_METRIC", "euclidean")
        if self.threshold is None and os.getenv("DISJOINT_SETS_THRESHOLD"):
            self.threshold = float(os.environ["DISJOINT_SETS_THRESHOLD"])
        if self.threshold is not None and self.threshold < 0:
            raise ValueError("threshold must be non-negative")
        if self.max_links is not None and self.max_links < 0:
            raise ValueError("max_links must be non-negative")


def candidate_pairs(points, metric: str = "euclidean") -> List[Tuple[int, int, float]]:
    """Return every index pair ``i < j`` with its distance, closest first."""

    array = np.asarray(points, dtype=float)
    if array.size == 0:
        return []
    if array.ndim != 2:
        raise ValueError(f"points must be a 2-D array, got {array.ndim} dimension(s)")
    if len(array) < 2:
        return []

    distances = pairwise_distances(array, metric=metric)
    left, right = np.triu_indices(len(array), k=1)
    pair_distances = distances[left, right]
    # lexsort keys are least significant first
    order = np.lexsort((right, left, pair_distances))
    return [(int(left[k]), int(right[k]), float(pair_distances[k])) for k in order]


class ProximityClusterer:
    """Group points whose pairwise links fall within the configured limits."""

    def __init__(self, config: ProximityConfig | None = None) -> None:
        self.config = config or ProximityConfig()

    def cluster(self, points: Sequence[Sequence[float]]) -> ProximityResult:
        verbose = self.config.verbose
        overall_start_time = time.time()

        t0 = time.time()
        if verbose:
            print(f"1. Computing {self.config.metric} distances between points...")
        pairs = candidate_pairs(points, self.config.metric)
        total_points = len(np.asarray(points))
        if verbose:
            print(f"   Generated {len(pairs)} candidate pairs for {total_points} points.")
            print(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("2. Linking closest pairs...")
        sets: DisjointSets[int] = DisjointSets(range(total_points))
        links, merges, last_merge = self._link(sets, pairs)
        if verbose:
            print(f"   Applied {links} links, {merges} of them merged two clusters.")
            print(f"   Done in {time.time() - t0:.2f}s")

        cluster_map = group_members(sets)
        elapsed = time.time() - overall_start_time
        stats = ProximityStats(
            total_points=total_points,
            candidate_pairs=len(pairs),
            links_applied=links,
            merges=merges,
            cluster_count=sets.set_count(),
            last_merge=last_merge,
            runtime_seconds=elapsed,
        )
        if verbose:
            print(f"   - Clusters found: {stats.cluster_count}")
            print(f"\n--- Proximity clustering finished in {elapsed:.2f} seconds ---")
        return ProximityResult(sets=sets, cluster_map=cluster_map, stats=stats)

    @property
    def _use_tqdm(self) -> bool:
        if self.config.use_tqdm is not None:
            return self.config.use_tqdm and _TQDM_AVAILABLE
        return _TQDM_AVAILABLE

    def _link(
        self,
        sets: DisjointSets[int],
        pairs: List[Tuple[int, int, float]],
    ) -> Tuple[int, int, Optional[Pair]]:
        threshold = self.config.threshold
        max_links = self.config.max_links
        unbounded = threshold is None and max_links is None

        iterator = pairs
        if pairs and self._use_tqdm:
            iterator = tqdm(pairs, desc="   Linking Pairs", unit="pair")

        links = 0
        merges = 0
        last_merge: Optional[Pair] = None
        for left, right, distance in iterator:
            if unbounded and sets.set_count() == 1:
                break
            if max_links is not None and links >= max_links:
                break
            if threshold is not None and distance > threshold:
                break
            links += 1
            if sets.connected(left, right):
                continue
            sets.union(left, right)
            merges += 1
            last_merge = (left, right)
        return links, merges, last_merge


__all__ = [
    "ProximityClusterer",
    "ProximityConfig",
    "ProximityResult",
    "ProximityStats",
    "candidate_pairs",
]
