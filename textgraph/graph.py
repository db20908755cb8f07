"""
Graph Module
============

The directed word-adjacency graph and its builder.

Each distinct token becomes a node. An edge u -> v carries the number of
times u is immediately followed by v in the token sequence. A WordGraph is
immutable once built: every accessor hands out read-only views, and loading
new text means building a new graph.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from .tokenizer import Tokenizer
from .types import Adjacency

logger = logging.getLogger(__name__)

_NO_NEIGHBORS: Mapping[str, int] = MappingProxyType({})


@dataclass(frozen=True)
class Edge:
    """
    A weighted directed edge, as handed to renderers.

    Attributes:
        source: Word the edge leaves
        target: Word the edge enters
        weight: Number of times source is immediately followed by target
    """
    source: str
    target: str
    weight: int

    def as_tuple(self) -> Tuple[str, str, int]:
        """Return the (source, target, weight) triple."""
        return (self.source, self.target, self.weight)


class WordGraph:
    """
    Immutable directed graph of words weighted by adjacency counts.

    Node order is first-occurrence order of the words, and each neighbor
    map keeps first-occurrence order of its edges, so every enumeration is
    deterministic for a given text.

    Attributes:
        tokens: The token sequence the graph was built from (may be empty
            for graphs assembled directly from edges)

    Example:
        graph = build_graph(["the", "cat", "saw", "the", "dog"])
        graph.weight("the", "cat")   # 1
        list(graph.neighbors("the"))  # ['cat', 'dog']
    """

    def __init__(self, adjacency: Mapping[str, Mapping[str, int]],
                 tokens: Sequence[str] = ()):
        """
        Initialize a graph from an adjacency mapping.

        Targets that are not keys of the mapping are added as nodes without
        outgoing edges.

        Args:
            adjacency: Mapping of word -> {neighbor: weight}
            tokens: Token sequence the adjacency was derived from

        Raises:
            ValueError: If any weight is not a positive integer
        """
        nodes: Dict[str, Dict[str, int]] = {}
        for source, neighbors in adjacency.items():
            nodes.setdefault(source, {})
            for target, weight in neighbors.items():
                if not isinstance(weight, int) or weight < 1:
                    raise ValueError(
                        f"edge {source}->{target} must have a positive integer weight, got {weight!r}"
                    )
                nodes[source][target] = weight
        for neighbors in list(nodes.values()):
            for target in neighbors:
                nodes.setdefault(target, {})

        self._adjacency = MappingProxyType(
            {word: MappingProxyType(neighbors) for word, neighbors in nodes.items()}
        )
        self._tokens: Tuple[str, ...] = tuple(tokens)
        self._edge_count = sum(len(neighbors) for neighbors in nodes.values())

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[str, str, int]],
                   nodes: Iterable[str] = ()) -> 'WordGraph':
        """
        Assemble a graph from (source, target, weight) triples.

        Repeated pairs accumulate their weights. Extra isolated nodes can be
        listed in `nodes`.
        """
        adjacency: Adjacency = {}
        for word in nodes:
            adjacency.setdefault(word, {})
        for source, target, weight in edges:
            neighbors = adjacency.setdefault(source, {})
            neighbors[target] = neighbors.get(target, 0) + weight
            adjacency.setdefault(target, {})
        return cls(adjacency)

    @classmethod
    def from_text(cls, text: str, tokenizer: Optional[Tokenizer] = None) -> 'WordGraph':
        """Tokenize text and build its graph."""
        return build_graph((tokenizer or Tokenizer()).tokenize(text))

    @property
    def adjacency(self) -> Mapping[str, Mapping[str, int]]:
        """Read-only word -> {neighbor: weight} view."""
        return self._adjacency

    @property
    def tokens(self) -> Tuple[str, ...]:
        """Token sequence the graph was built from."""
        return self._tokens

    def nodes(self) -> List[str]:
        """All words in first-occurrence order."""
        return list(self._adjacency)

    def has_node(self, word: str) -> bool:
        """Check whether a word (already lowercase) is a node."""
        return word in self._adjacency

    def neighbors(self, word: str) -> Mapping[str, int]:
        """Successors of a word with edge weights, empty if absent."""
        return self._adjacency.get(word, _NO_NEIGHBORS)

    def predecessors(self, word: str) -> List[str]:
        """Words with an edge into `word`, in node order."""
        return [source for source, neighbors in self._adjacency.items() if word in neighbors]

    def weight(self, source: str, target: str) -> int:
        """Weight of source -> target, 0 if there is no such edge."""
        return self.neighbors(source).get(target, 0)

    def edges(self) -> Iterator[Edge]:
        """Iterate over every edge in node and neighbor order."""
        for source, neighbors in self._adjacency.items():
            for target, weight in neighbors.items():
                yield Edge(source, target, weight)

    def node_count(self) -> int:
        """Number of nodes."""
        return len(self._adjacency)

    def edge_count(self) -> int:
        """Number of distinct directed edges."""
        return self._edge_count

    def is_empty(self) -> bool:
        """True when the graph has no nodes."""
        return not self._adjacency

    def __contains__(self, word: object) -> bool:
        return word in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordGraph):
            return NotImplemented
        return (
            list(self._adjacency) == list(other._adjacency)
            and all(dict(self._adjacency[w]) == dict(other._adjacency[w]) for w in self._adjacency)
        )

    def __repr__(self) -> str:
        return f"WordGraph(nodes={self.node_count()}, edges={self.edge_count()})"


def build_graph(tokens: Sequence[str]) -> WordGraph:
    """
    Build the word graph for a token sequence.

    Every token becomes a node, then every consecutive pair adds 1 to the
    weight of its edge.

    Args:
        tokens: Lowercase tokens in source order

    Returns:
        A new WordGraph (no edges when fewer than two tokens are given)

    Example:
        >>> graph = build_graph(["a", "b", "a", "b"])
        >>> graph.weight("a", "b"), graph.weight("b", "a")
        (2, 1)
    """
    adjacency: Adjacency = {}
    for token in tokens:
        adjacency.setdefault(token, {})

    for current, following in zip(tokens, tokens[1:]):
        neighbors = adjacency[current]
        neighbors[following] = neighbors.get(following, 0) + 1

    graph = WordGraph(adjacency, tokens)
    logger.debug(
        "Built word graph: %d tokens, %d nodes, %d edges",
        len(tokens), graph.node_count(), graph.edge_count()
    )
    return graph
