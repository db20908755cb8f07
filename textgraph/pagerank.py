"""
PageRank algorithms for word importance scoring.

Contains:
- compute_pagerank: PageRank over a WordGraph
- compute_pagerank_details: Same, with iteration statistics
- pagerank_of: Single-word convenience accessor
- _pagerank_core: Pure algorithm for unit testing

Rank flows along edges split evenly over a node's distinct successors;
edge weights do not bias the split. Words without successors (dangling
nodes) hand their whole score back to every node equally, so no rank leaks
out of the graph.
"""

import logging
from collections import Counter, defaultdict
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .graph import WordGraph
from .types import RankVector

logger = logging.getLogger(__name__)

DEFAULT_DAMPING = 0.85
DEFAULT_ITERATIONS = 100
DEFAULT_TOLERANCE = 1e-6


def uniform_initial(nodes: Sequence[str]) -> RankVector:
    """Every node starts at 1/N."""
    if not nodes:
        return {}
    return {node: 1.0 / len(nodes) for node in nodes}


def term_frequency_initial(nodes: Sequence[str], tokens: Sequence[str]) -> RankVector:
    """
    Seed each node with its share of the token sequence.

    A node's initial score is its occurrence count divided by the total
    token count. Falls back to uniform when there are no tokens.
    """
    if not tokens:
        return uniform_initial(nodes)
    counts = Counter(tokens)
    total = len(tokens)
    return {node: counts.get(node, 0) / total for node in nodes}


def _pagerank_iterate(
    nodes: List[str],
    incoming: Dict[str, List[str]],
    out_degree: Dict[str, int],
    pagerank: Dict[str, float],
    damping: float,
    n: int,
    iterations: int,
    tolerance: float
) -> Tuple[Dict[str, float], int, bool]:
    """
    Core PageRank iteration loop with dangling node redistribution.

    Args:
        nodes: List of node IDs to compute PageRank for
        incoming: Map of node_id -> list of predecessor ids
        out_degree: Map of node_id -> number of distinct successors
        pagerank: Initial PageRank values
        damping: Damping factor (probability of following links)
        n: Number of nodes (for teleportation probability)
        iterations: Maximum iterations
        tolerance: Convergence threshold on the summed absolute change

    Returns:
        Tuple of (final_pagerank_dict, iterations_run, converged)
    """
    dangling = [node for node in nodes if out_degree.get(node, 0) == 0]
    iterations_run = 0
    converged = False

    for iteration in range(iterations):
        iterations_run = iteration + 1
        dangling_contribution = sum(pagerank.get(node, 0.0) for node in dangling) / n
        new_pagerank = {}
        total_diff = 0.0

        for node in nodes:
            incoming_sum = 0.0
            for source_id in incoming.get(node, []):
                incoming_sum += pagerank.get(source_id, 0.0) / out_degree[source_id]

            new_rank = (1 - damping) / n + damping * (incoming_sum + dangling_contribution)
            new_pagerank[node] = new_rank
            total_diff += abs(new_rank - pagerank.get(node, 0.0))

        pagerank = new_pagerank

        if total_diff < tolerance:
            converged = True
            break

    return pagerank, iterations_run, converged


def _pagerank_core(
    graph: Mapping[str, Iterable[str]],
    initial: Optional[Mapping[str, float]] = None,
    damping: float = DEFAULT_DAMPING,
    iterations: int = DEFAULT_ITERATIONS,
    tolerance: float = DEFAULT_TOLERANCE
) -> Dict[str, float]:
    """
    Pure PageRank algorithm on a successor mapping.

    This core function takes primitive types and can be unit tested without
    building a WordGraph.

    Args:
        graph: Mapping of node_id to its successors. Successors that are not
               keys of the mapping are ignored.
        initial: Optional starting scores (default uniform 1/N)
        damping: Damping factor, must be in (0, 1)
        iterations: Maximum number of iterations
        tolerance: Convergence threshold

    Returns:
        Dictionary mapping node_id to PageRank score

    Example:
        >>> graph = {"a": ["b"], "b": ["a", "c"], "c": ["a"]}
        >>> ranks = _pagerank_core(graph)
        >>> assert ranks["a"] > ranks["c"]  # "a" has more incoming links
    """
    # O(iterations * (V + E))
    n = len(graph)
    if n == 0:
        return {}

    nodes = list(graph.keys())
    pagerank = dict(initial) if initial is not None else uniform_initial(nodes)

    incoming: Dict[str, List[str]] = defaultdict(list)
    out_degree: Dict[str, int] = defaultdict(int)
    for source, successors in graph.items():
        for target in dict.fromkeys(successors):
            if target in graph:
                incoming[target].append(source)
                out_degree[source] += 1

    pagerank, _, _ = _pagerank_iterate(
        nodes=nodes,
        incoming=incoming,
        out_degree=out_degree,
        pagerank=pagerank,
        damping=damping,
        n=n,
        iterations=iterations,
        tolerance=tolerance
    )
    return pagerank


def compute_pagerank_details(
    graph: WordGraph,
    damping: float = DEFAULT_DAMPING,
    iterations: int = DEFAULT_ITERATIONS,
    tolerance: float = DEFAULT_TOLERANCE,
    init: str = 'tf'
) -> Dict[str, Any]:
    """
    Compute PageRank over a word graph and report how the run went.

    Args:
        graph: The word graph
        damping: Damping factor (probability of following links)
        iterations: Maximum number of iterations
        tolerance: Convergence threshold on the summed absolute change
        init: 'tf' seeds scores by term frequency of the graph's tokens,
              'uniform' seeds every node with 1/N

    Returns:
        Dict containing:
        - pagerank: Dict mapping words to scores
        - iterations_run: Number of iterations performed
        - converged: Whether the tolerance was reached

    Raises:
        ValueError: If damping is not in range (0, 1) or init is unknown
    """
    if not (0 < damping < 1):
        raise ValueError(f"damping must be between 0 and 1, got {damping}")
    if init not in ('tf', 'uniform'):
        raise ValueError(f"init must be 'tf' or 'uniform', got {init}")

    n = graph.node_count()
    if n == 0:
        return {'pagerank': {}, 'iterations_run': 0, 'converged': True}

    nodes = graph.nodes()
    if init == 'tf':
        pagerank = term_frequency_initial(nodes, graph.tokens)
    else:
        pagerank = uniform_initial(nodes)

    incoming: Dict[str, List[str]] = defaultdict(list)
    out_degree: Dict[str, int] = {}
    for node in nodes:
        successors = graph.neighbors(node)
        out_degree[node] = len(successors)
        for target in successors:
            incoming[target].append(node)

    pagerank, iterations_run, converged = _pagerank_iterate(
        nodes=nodes,
        incoming=incoming,
        out_degree=out_degree,
        pagerank=pagerank,
        damping=damping,
        n=n,
        iterations=iterations,
        tolerance=tolerance
    )

    if not converged:
        logger.warning(
            "PageRank did not converge within %d iterations (tolerance %g)",
            iterations, tolerance
        )
    else:
        logger.debug("PageRank converged after %d iterations", iterations_run)

    return {
        'pagerank': pagerank,
        'iterations_run': iterations_run,
        'converged': converged,
    }


def compute_pagerank(
    graph: WordGraph,
    damping: float = DEFAULT_DAMPING,
    iterations: int = DEFAULT_ITERATIONS,
    tolerance: float = DEFAULT_TOLERANCE,
    init: str = 'tf'
) -> RankVector:
    """
    Compute PageRank scores for every word in the graph.

    Returns:
        Dictionary mapping words to scores (empty for an empty graph)

    Raises:
        ValueError: If damping is not in range (0, 1) or init is unknown
    """
    return compute_pagerank_details(graph, damping, iterations, tolerance, init)['pagerank']


def pagerank_of(
    graph: WordGraph,
    word: str,
    damping: float = DEFAULT_DAMPING,
    iterations: int = DEFAULT_ITERATIONS,
    tolerance: float = DEFAULT_TOLERANCE,
    init: str = 'tf'
) -> float:
    """PageRank of one word (any case); 0.0 if absent or the graph is empty."""
    if graph.is_empty():
        return 0.0
    return compute_pagerank(graph, damping, iterations, tolerance, init).get(word.lower(), 0.0)
