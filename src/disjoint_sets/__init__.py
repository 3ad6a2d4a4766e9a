"""Disjoint sets library initialization."""

from .structures import DisjointSets, IntDisjointSets
from .grouping import component_sizes, connect, group_members, largest_components
from .proximity import ProximityClusterer, ProximityConfig, ProximityResult, ProximityStats, candidate_pairs
from .runner import GroupingConfig, GroupingResult, cluster_points_file, group_edges, group_file

__all__ = [
    "DisjointSets",
    "IntDisjointSets",
    "component_sizes",
    "connect",
    "group_members",
    "largest_components",
    "ProximityClusterer",
    "ProximityConfig",
    "ProximityResult",
    "ProximityStats",
    "candidate_pairs",
    "GroupingConfig",
    "GroupingResult",
    "cluster_points_file",
    "group_edges",
    "group_file",
]
