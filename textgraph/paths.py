"""
Path Finder for word graphs.

Weighted shortest paths over the adjacency counts using Dijkstra's
algorithm. Edge weights are the co-occurrence counts, so a path through
frequent pairs is *longer* than one through rare pairs.

ALGORITHMS
----------
shortest_path:
    Single-pair Dijkstra with early exit once the target is finalized.
    Time complexity: O((V + E) log V)

shortest_paths_from:
    One full Dijkstra run from a source, then a path for every reachable
    node. Unreachable nodes are left out of the result.

TIE-BREAKING
------------
The priority queue holds (distance, word) tuples, so nodes at equal
distance are finalized in lexicographic order. A node's predecessor is only
replaced by a strictly shorter distance, so among equal-weight paths the
one through the first finalized predecessor wins.

USAGE EXAMPLES
--------------
    >>> result = shortest_path(graph, "the", "report")
    >>> if result:
    ...     print(" -> ".join(result.path), result.weight)
    >>> paths = shortest_paths_from(graph, "the")
    >>> sorted(paths)
"""

import heapq
import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple

from .graph import WordGraph
from .types import WordPath

# Module logger for path finding operations
logger = logging.getLogger(__name__)

REASON_MISSING = 'missing'
REASON_UNREACHABLE = 'unreachable'


@dataclass(frozen=True)
class PathResult:
    """
    Result of a shortest path query.

    A result without a path is falsy; `reason` tells whether an endpoint
    was missing from the graph or the endpoints are disconnected.

    Attributes:
        source: Lowercased start word
        target: Lowercased end word
        path: Words from source to target inclusive (empty when not found)
        weight: Sum of edge weights along the path
        reason: None when found, otherwise 'missing' or 'unreachable'
    """
    source: str
    target: str
    path: Tuple[str, ...] = ()
    weight: int = 0
    reason: Optional[str] = None

    @classmethod
    def no_path(cls, source: str, target: str, reason: str) -> 'PathResult':
        """Build a result signalling that no path exists."""
        return cls(source=source, target=target, reason=reason)

    @property
    def found(self) -> bool:
        """True when a path exists."""
        return bool(self.path)

    @property
    def hops(self) -> int:
        """Number of edges on the path (0 for a single-node path)."""
        return max(len(self.path) - 1, 0)

    def words(self) -> WordPath:
        """The path as a list of words."""
        return list(self.path)

    def __bool__(self) -> bool:
        return self.found

    def __len__(self) -> int:
        return len(self.path)

    def __iter__(self):
        return iter(self.path)


def _dijkstra_core(
    adjacency: Mapping[str, Mapping[str, int]],
    source: str,
    target: Optional[str] = None
) -> Tuple[Dict[str, int], Dict[str, str]]:
    """
    Pure Dijkstra over a plain adjacency mapping.

    Args:
        adjacency: word -> {neighbor: weight}
        source: Start node (must be a key of adjacency)
        target: Optional node; the search stops once it is finalized

    Returns:
        Tuple of (distances, previous). `distances` holds every node reached
        (exact for finalized nodes); `previous` maps each reached node other
        than the source to its predecessor on a shortest path.

    Raises:
        ValueError: If a negative edge weight is encountered

    Example:
        >>> adjacency = {"a": {"b": 1, "c": 5}, "b": {"c": 1}, "c": {}}
        >>> distances, previous = _dijkstra_core(adjacency, "a")
        >>> distances["c"], previous["c"]
        (2, 'b')
    """
    distances: Dict[str, int] = {source: 0}
    previous: Dict[str, str] = {}
    finalized = set()
    queue = [(0, source)]

    while queue:
        distance, node = heapq.heappop(queue)
        if node in finalized:
            continue
        finalized.add(node)
        if node == target:
            break

        for neighbor, weight in adjacency.get(node, {}).items():
            if weight < 0:
                raise ValueError(f"negative edge weight {weight} on {node}->{neighbor}")
            candidate = distance + weight
            if neighbor not in distances or candidate < distances[neighbor]:
                distances[neighbor] = candidate
                previous[neighbor] = node
                heapq.heappush(queue, (candidate, neighbor))

    return distances, previous


def _trace_back(previous: Mapping[str, str], source: str, target: str) -> Tuple[str, ...]:
    """Rebuild the source..target path from the predecessor map."""
    path = [target]
    while path[-1] != source:
        path.append(previous[path[-1]])
    path.reverse()
    return tuple(path)


def shortest_path(graph: WordGraph, word1: str, word2: str) -> PathResult:
    """
    Find the minimum-weight path between two words.

    Args:
        graph: Graph to search
        word1: Start word, any case
        word2: End word, any case

    Returns:
        PathResult; a single-node path of weight 0 when the words are equal
    """
    source = word1.lower()
    target = word2.lower()

    if not graph.has_node(source) or not graph.has_node(target):
        logger.debug("No path %s -> %s: endpoint not in graph", source, target)
        return PathResult.no_path(source, target, REASON_MISSING)

    if source == target:
        return PathResult(source=source, target=target, path=(source,))

    distances, previous = _dijkstra_core(graph.adjacency, source, target)
    if target not in previous:
        logger.debug("No path %s -> %s: unreachable", source, target)
        return PathResult.no_path(source, target, REASON_UNREACHABLE)

    return PathResult(
        source=source,
        target=target,
        path=_trace_back(previous, source, target),
        weight=distances[target],
    )


def shortest_paths_from(graph: WordGraph, word: str) -> Dict[str, PathResult]:
    """
    Find shortest paths from one word to every reachable word.

    Args:
        graph: Graph to search
        word: Start word, any case

    Returns:
        Dict mapping each reachable word (never the start word itself) to its
        PathResult, in graph node order. Empty if the word is not in the graph.
    """
    source = word.lower()
    if not graph.has_node(source):
        return {}

    distances, previous = _dijkstra_core(graph.adjacency, source)
    results: Dict[str, PathResult] = {}
    for target in graph.nodes():
        if target == source or target not in previous:
            continue
        results[target] = PathResult(
            source=source,
            target=target,
            path=_trace_back(previous, source, target),
            weight=distances[target],
        )

    logger.debug("%d of %d nodes reachable from %s", len(results), graph.node_count() - 1, source)
    return results


def format_path(result: PathResult) -> str:
    """
    Render a path result the way the menu prints it.

    Returns:
        'a -> b -> c' when found, 'No path found.' when an endpoint is
        missing, 'No path found from a to b.' when disconnected
    """
    if result.found:
        return " -> ".join(result.path)
    if result.reason == REASON_MISSING:
        return "No path found."
    return f"No path found from {result.source} to {result.target}."
