"""
Type aliases for the text graph package.

Usage:
    from textgraph.types import Adjacency, RankVector, WordPath
"""

from typing import Callable, Dict, List, Mapping, Tuple

# =============================================================================
# GRAPH TYPES
# =============================================================================

Adjacency = Dict[str, Dict[str, int]]
"""Mutable adjacency used while building: word -> {neighbor: weight}."""

AdjacencyView = Mapping[str, Mapping[str, int]]
"""Read-only adjacency exposed by a built WordGraph."""

EdgeTriple = Tuple[str, str, int]
"""A (source, target, weight) triple handed to renderers."""


# =============================================================================
# ALGORITHM RESULTS
# =============================================================================

WordPath = List[str]
"""Ordered node sequence from source to target, both inclusive."""

RankVector = Dict[str, float]
"""Mapping from word to its PageRank score."""

WalkDecision = Callable[[str, str], bool]
"""Called with (current, next) before each walk step; False stops the walk."""
